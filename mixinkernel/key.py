"""Keys on edwards25519 and one-time ghost key derivation."""

from __future__ import annotations

import json

from .curve import Point, Scalar
from .hashing import _FixedBytes, blake3_hash, sha256_hash


class Key(_FixedBytes):
    """A 32-byte private scalar or public point encoding."""

    label = "key"

    def check_key(self) -> bool:
        """Whether the bytes decode to a curve point."""
        try:
            Point.from_bytes(self)
        except ValueError:
            return False
        return True

    def public(self) -> Key:
        return Key(Point.scalar_base_mult(Scalar.from_canonical_bytes(self)).to_bytes())

    def has_value(self) -> bool:
        return any(self)

    def deterministic_hash_derive(self) -> Key:
        seed = bytes(sha256_hash(self))
        return new_key_from_seed(seed + seed)

    def to_json(self) -> str:
        return json.dumps(self.hex())


def new_key_from_seed(seed: bytes) -> Key:
    """Private key from 64 bytes of seed."""
    return Key(Scalar.from_uniform_bytes(bytes(seed)).to_bytes())


def key_from_string(s: str) -> Key:
    return Key._from_hex(s)


def key_from_json(data: str | bytes) -> Key:
    return Key._from_json(data)


def key_mult_pub_priv(pub: Key, priv: Key) -> Point:
    """Shared point priv * pub."""
    return Point.from_bytes(pub).scalar_mult(Scalar.from_canonical_bytes(priv))


def _uvarint(value: int) -> bytes:
    if not 0 <= value < 2**64:
        raise ValueError(f"output index out of range {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(out + bytes([value]))


def _widen(digest: bytes) -> Scalar:
    return Scalar.from_uniform_bytes(bytes(digest) + bytes(blake3_hash(digest)))


def hash_scalar(point: Point, output_index: int) -> Scalar:
    """Derive a scalar from a shared point and an output index."""
    s = _widen(blake3_hash(point.to_bytes() + _uvarint(output_index)))
    return _widen(blake3_hash(s.to_bytes()))


def derive_ghost_public_key(r: Key, a_public: Key, b_public: Key, output_index: int) -> Key:
    x = hash_scalar(key_mult_pub_priv(a_public, r), output_index)
    return Key((Point.from_bytes(b_public) + Point.scalar_base_mult(x)).to_bytes())


def derive_ghost_private_key(r_public: Key, a: Key, b: Key, output_index: int) -> Key:
    x = hash_scalar(key_mult_pub_priv(r_public, a), output_index)
    return Key((x + Scalar.from_canonical_bytes(b)).to_bytes())


def view_ghost_output_key(p: Key, a: Key, r_public: Key, output_index: int) -> Key:
    x = hash_scalar(key_mult_pub_priv(r_public, a), output_index)
    return Key((Point.from_bytes(p) - Point.scalar_base_mult(x)).to_bytes())