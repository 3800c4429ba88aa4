"""Schnorr signatures over edwards25519, compatible with Ed25519 verification."""

from __future__ import annotations

import hashlib
import json

from .curve import Point, Scalar
from .hashing import Hash, _FixedBytes
from .key import Key


class Signature(_FixedBytes):
    """A 64-byte signature: R followed by s."""

    size = 64
    label = "signature"

    def r(self) -> bytes:
        return bytes(self[:32])

    def s(self) -> bytes:
        return bytes(self[32:])

    def to_json(self) -> str:
        return json.dumps(self.hex())


def signature_from_json(data: str | bytes) -> Signature:
    return Signature._from_json(data)


def sign(private_key: Key, message: Hash) -> Signature:
    """Sign a 32-byte message with a private scalar."""
    private_key = Key(private_key)
    message = bytes(message)
    digest1 = hashlib.sha512(bytes(private_key)).digest()
    message_digest = hashlib.sha512(digest1[32:] + message).digest()
    z = Scalar.from_uniform_bytes(message_digest)
    r_bytes = Point.scalar_base_mult(z).to_bytes()

    pub = private_key.public()
    hram = hashlib.sha512(r_bytes + bytes(pub) + message).digest()
    x = Scalar.from_uniform_bytes(hram)
    y = Scalar.from_canonical_bytes(private_key)
    s = x.multiply_add(y, z)
    return Signature(r_bytes + s.to_bytes())


def verify_with_challenge(public_key: Key, sig: Signature, challenge: Scalar) -> bool:
    """Check sig against a public key with a given challenge scalar."""
    sig = bytes(sig)
    try:
        neg_a = -Point.from_bytes(public_key)
        b = Scalar.from_canonical_bytes(sig[32:])
    except ValueError:
        return False
    r = Point.double_scalar_base_mult(challenge, neg_a, b)
    return sig[:32] == r.to_bytes()


def verify(public_key: Key, message: Hash, sig: Signature) -> bool:
    """Verify a signature over a 32-byte message."""
    sig = bytes(sig)
    digest = hashlib.sha512(sig[:32] + bytes(public_key) + bytes(message)).digest()
    return verify_with_challenge(public_key, sig, Scalar.from_uniform_bytes(digest))