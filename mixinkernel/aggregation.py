"""Aggregation of public keys for multi-party Schnorr signatures."""

from __future__ import annotations

from typing import Iterable, Sequence

from .curve import Point
from .hashing import Hash
from .key import Key
from .signature import Signature, verify


def aggregate_public_key(publics: Sequence[Key], signers: Iterable[int]) -> Key:
    """Sum the public keys of the given signers."""
    total = Point.identity()
    for index in signers:
        if index < 0 or index >= len(publics):
            raise ValueError(
                f"invalid aggregation singer index {index}/{len(publics)}"
            )
        total = total + Point.from_bytes(publics[index])
    return Key(total.to_bytes())


def aggregate_verify(
    sig: Signature, publics: Sequence[Key], signers: Iterable[int], message: Hash
) -> Key:
    """Verify sig against the aggregate of the signers' keys and return that key."""
    try:
        aggregated = aggregate_public_key(publics, signers)
    except ValueError as exc:
        raise ValueError(f"AggregateVerify aggregatePublicKey {exc}") from exc
    if not verify(aggregated, message, sig):
        raise ValueError("AggregateVerify signature verify failed")
    return aggregated