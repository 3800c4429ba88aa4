"""Batch verification of signatures over one message."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Sequence

from .curve import Point, Scalar, multi_scalar_mult
from .hashing import Hash
from .key import Key
from .rand import read_rand
from .signature import Signature, verify


@dataclass(frozen=True)
class _Entry:
    pubkey: bytes
    signature: bytes
    k: Scalar


@dataclass
class BatchVerifier:
    """Collects (key, message, signature) triples and checks them together."""

    _entries: list[_Entry] = field(default_factory=list)

    def add(self, public_key: Key, message: bytes, sig: bytes) -> None:
        """Queue one triple; its challenge scalar is computed now."""
        sig = bytes(sig)
        pubkey = bytes(public_key)
        digest = hashlib.sha512(sig[:32] + pubkey + bytes(message)).digest()
        self._entries.append(_Entry(pubkey, sig, Scalar.from_uniform_bytes(digest)))

    def verify(self) -> bool:
        """True when every queued entry is valid; an empty batch is invalid."""
        if not self._entries:
            return False
        b_coeff = Scalar.zero()
        r_coeffs: list[Scalar] = []
        a_coeffs: list[Scalar] = []
        r_points: list[Point] = []
        a_points: list[Point] = []
        for entry in self._entries:
            if len(entry.signature) != 64:
                return False
            try:
                r_point = Point.from_bytes(entry.signature[:32])
                a_point = Point.from_bytes(entry.pubkey)
                s = Scalar.from_canonical_bytes(entry.signature[32:])
            except ValueError:
                return False
            z = Scalar.from_canonical_bytes(read_rand(16) + bytes(16))
            b_coeff = z.multiply_add(s, b_coeff)
            r_coeffs.append(z)
            a_coeffs.append(z * entry.k)
            r_points.append(r_point)
            a_points.append(a_point)
        check = multi_scalar_mult(
            [-b_coeff, *r_coeffs, *a_coeffs],
            [Point.generator(), *r_points, *a_points],
        ).mul_by_cofactor()
        return check == Point.identity()


def batch_verify(msg: Hash, keys: Sequence[Key], sigs: Sequence[Signature]) -> bool:
    """Verify that each signature is valid for its key over msg."""
    if len(keys) != len(sigs):
        return False
    if len(keys) == 1:
        return verify(keys[0], msg, sigs[0])
    verifier = BatchVerifier()
    for key, sig in zip(keys, sigs):
        verifier.add(key, bytes(msg), bytes(sig))
    return verifier.verify()