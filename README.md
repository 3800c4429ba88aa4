# mixinkernel

Cryptographic building blocks for a kernel node on the Edwards25519 curve,
written in pure Python with no dependencies beyond the standard library.

It provides:

- 32-byte hashes: SHA3-256 (`sha256_hash`) and BLAKE3 (`blake3_hash`).
- Private and public keys (`Key`). A private key can be derived from a 64-byte seed.
- One-time "ghost" keys. They are derived from a sender's random key and a
  recipient's view and spend keys.
- Schnorr signatures in the 64-byte Ed25519 layout (R followed by s).
- Verification against an aggregated public key, and randomized batch verification.
- Collective signing (CoSi) with commitments, responses and a 64-bit signer mask.
- Loading a node's TOML configuration file.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module        | Contents |
|---------------|----------|
| `hashing`     | `Hash`, `sha256_hash`, `blake3_hash`, `hash_from_string`, `hash_from_json` |
| `curve`       | `Scalar`, `Point`, `multi_scalar_mult` (the group arithmetic) |
| `rand`        | `read_rand`, `RandReader`, `EntropyError` |
| `key`         | `Key`, `new_key_from_seed`, `key_from_string`, `key_from_json`, ghost-key functions |
| `signature`   | `Signature`, `sign`, `verify`, `verify_with_challenge`, `signature_from_json` |
| `aggregation` | `aggregate_public_key`, `aggregate_verify` |
| `batch`       | `BatchVerifier`, `batch_verify` |
| `cosi`        | `CosiSignature`, `cosi_commit`, `cosi_aggregate_commitment`, `cosi_from_json` |
| `config`      | `Custom` and its section dataclasses, `initialize`, network constants |

## Keys and signatures

```python
from mixinkernel.hashing import blake3_hash
from mixinkernel.key import new_key_from_seed
from mixinkernel.signature import sign, verify

private = new_key_from_seed(bytes(range(1, 65)))  # a 64-byte seed
public = private.public()

message = blake3_hash(b"hello")
sig = sign(private, message)

assert verify(public, message, sig)
assert not verify(public, blake3_hash(b"other"), sig)
```

Signing is deterministic, so the same key and message always give the same
signature. A standard Ed25519 verifier accepts these signatures.

`Hash`, `Key` and `Signature` are `bytes` subclasses of a fixed length, and
each prints as lower-case hex. `to_json()` returns the hex as a JSON string.
`hash_from_json`, `key_from_json` and `signature_from_json` parse that string
back. `hash_from_string` and `key_from_string` parse bare hex. Every one of
these parsers raises `ValueError` if the input is not hex or has the wrong length.

`Key.check_key()` tells whether the bytes decode to a curve point.
`Key.deterministic_hash_derive()` derives a new private key from the SHA3-256
digest of a key. `Hash.for_network(net)` binds a hash to a network identifier.

## Random bytes

`read_rand(size)` returns `size` bytes from the operating system. It raises
`ValueError` when `size` is not positive. For outputs of four bytes or more,
it raises `EntropyError` if any single byte value makes up a third or more of
the output. `RandReader().read(size)` does the same and can be passed to
`cosi_commit`.

## Aggregated keys and batch verification

```python
from mixinkernel.aggregation import aggregate_public_key, aggregate_verify
from mixinkernel.batch import batch_verify

assert batch_verify(message, [public, public], [sig, sig])
```

`aggregate_public_key(publics, signers)` adds up the public keys at the given
indexes. `aggregate_verify(sig, publics, signers, message)` checks a signature
against that sum and returns the aggregated key. It raises `ValueError` if an
index is out of range or the signature does not verify.

`batch_verify(msg, keys, sigs)` returns `False` in three cases:

- the key and signature lists have different lengths;
- the batch is empty;
- any entry is invalid.

A batch with a single entry is checked with `verify`. Larger batches go
through `BatchVerifier`, which checks all entries in one combined equation
using random 128-bit coefficients. When a batch fails, it does not say which
entry was bad.

## Ghost keys

```python
from mixinkernel.key import (
    derive_ghost_private_key,
    derive_ghost_public_key,
    new_key_from_seed,
    view_ghost_output_key,
)
from mixinkernel.rand import read_rand

r = new_key_from_seed(read_rand(64))  # sender's random key
a = new_key_from_seed(read_rand(64))  # recipient's view key
b = new_key_from_seed(read_rand(64))  # recipient's spend key

P = derive_ghost_public_key(r, a.public(), b.public(), 0)
p = derive_ghost_private_key(r.public(), a, b, 0)
assert p.public() == P
assert view_ghost_output_key(P, a, r.public(), 0) == b.public()
```

The last argument is the output index, an unsigned 64-bit integer.

## Collective signing

```python
from mixinkernel.cosi import cosi_aggregate_commitment, cosi_commit
from mixinkernel.rand import RandReader

randoms = {i: cosi_commit(RandReader()) for i in signer_indexes}
cosi = cosi_aggregate_commitment({i: r.public() for i, r in randoms.items()})

responses = {
    i: cosi.response(private_keys[i], randoms[i], publics, message)
    for i in signer_indexes
}
for i, s in responses.items():
    cosi.verify_response(publics, i, s, message)  # raises ValueError if invalid

cosi.aggregate_response(publics, responses, message, True)
cosi.full_verify(publics, threshold, message)  # raises ValueError if invalid
```

The signer indexes must lie between 0 and 63.

- `cosi.keys()` lists the signer indexes in the mask, in ascending order.
- `threshold_verify(n)` tells whether at least `n` signers are in the mask.
- With `strict=True`, `aggregate_response` checks each response before adding
  it into the signature.
- `str(cosi)` gives the signature hex followed by the mask as 16 hex digits.
  `to_json()` and `cosi_from_json` convert to and from the JSON form.
  Commitments are not part of the JSON form.

## Configuration

```python
from mixinkernel.config import initialize

custom = initialize("config.toml")
print(custom.node.kernel_operation_period, custom.p2p.seeds)
```

The file has these tables:

| Table       | Keys |
|-------------|------|
| `[node]`    | `signer-key` (64 hex characters), `kernel-operation-period`, `memory-cache-size`, `cache-ttl` |
| `[storage]` | `value-log-gc`, `max-compaction-levels` |
| `[p2p]`     | `port`, `seeds`, `relayer`, `metric` |
| `[rpc]`     | `port`, `runtime`, `object-server` |
| `[dev]`     | `port` |

Keys the loader does not know are ignored. The signer key is parsed into
`custom.node.signer`. A missing or malformed signer key raises `ValueError`.
If a node setting is missing or zero, it takes a default:

- kernel operation period: 700
- memory cache size: 4096
- cache TTL: 7200

`mixinkernel.config` also defines the network's fixed parameters, for example:

- `KERNEL_NETWORK_ID`
- `SNAPSHOT_ROUND_GAP`
- `CHECKPOINT_DURATION`
- `TRANSACTION_MAXIMUM_SIZE`
- `KERNEL_MINIMUM_NODES_COUNT`

Durations are given as `datetime.timedelta` values.

## What this package does not do

This package only provides the primitives. It does not run a node. It has no
peer-to-peer networking, no RPC server, no storage, no consensus and no
transactions. It also has no command-line program. The configuration loader
reads the settings for those parts, but nothing in the package acts on them.

All curve arithmetic is plain Python integer arithmetic. It is slow, and it
makes no attempt at constant-time execution.