"""Collective Schnorr signatures with a signer bit mask."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Mapping, Protocol, Sequence

from .aggregation import aggregate_public_key as _aggregate_public_key
from .curve import Point, Scalar
from .hashing import Hash, _decode_hex
from .key import Key, new_key_from_seed
from .signature import Signature, verify, verify_with_challenge

_MASK_BITS = 64


class _Reader(Protocol):
    def read(self, size: int) -> bytes: ...


def _unquote_json(data: str | bytes) -> str:
    """Return the string held by a JSON string literal."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    value = json.loads(data)
    if not isinstance(value, str):
        raise ValueError("invalid syntax")
    return value


def cosi_commit(rand_reader: _Reader) -> Key:
    """Draw a random commitment scalar from 64 bytes of the reader."""
    data = rand_reader.read(64)
    if len(data) != 64:
        raise ValueError(f"rand read 64 {len(data)}")
    return new_key_from_seed(data)


@dataclass
class CosiSignature:
    """A collective signature and the mask of the signers in it."""

    signature: Signature = field(default_factory=Signature)
    mask: int = 0
    commitments: dict[int, Key] = field(default_factory=dict, repr=False, compare=False)

    def _mark(self, index: int) -> None:
        if index < 0 or index >= _MASK_BITS:
            raise ValueError(f"invalid cosi signature mask index {index}")
        self.mask ^= 1 << index

    def keys(self) -> list[int]:
        """Signer indices set in the mask, ascending."""
        return [i for i in range(_MASK_BITS) if self.mask >> i & 1]

    def aggregate_public_key(self, publics: Sequence[Key]) -> Key:
        return _aggregate_public_key(publics, self.keys())

    def challenge(self, publics: Sequence[Key], message: Hash) -> Scalar:
        """Schnorr challenge over R, the aggregate key and the message."""
        aggregated = self.aggregate_public_key(publics)
        digest = hashlib.sha512(
            self.signature.r() + bytes(aggregated) + bytes(message)
        ).digest()
        return Scalar.from_uniform_bytes(digest)

    def response(
        self, private_key: Key, random: Key, publics: Sequence[Key], message: Hash
    ) -> bytes:
        """One signer's 32-byte response to the challenge."""
        x = self.challenge(publics, message)
        y = Scalar.from_canonical_bytes(bytes(private_key))
        z = Scalar.from_canonical_bytes(bytes(random))
        return x.multiply_add(y, z).to_bytes()

    def verify_response(
        self, publics: Sequence[Key], signer: int, s: bytes, message: Hash
    ) -> None:
        """Raise ValueError unless s is a valid response of signer."""
        public = commitment = None
        for k in self.keys():
            if k >= len(publics):
                raise ValueError(f"invalid cosi signature mask index {k}/{len(publics)}")
            if k == signer:
                public = publics[k]
                commitment = self.commitments.get(k)
        if commitment is None:
            raise ValueError(f"invalid cosi signature mask index {signer}")
        challenge = self.challenge(publics, message)
        sig = Signature(bytes(commitment) + bytes(s))
        if not verify_with_challenge(public, sig, challenge):
            raise ValueError(f"invalid cosi signature response {sig}")

    def aggregate_response(
        self,
        publics: Sequence[Key],
        responses: Mapping[int, bytes],
        message: Hash,
        strict: bool,
    ) -> None:
        """Sum the responses into the signature's s part."""
        signers = []
        for i in self.keys():
            if i >= len(publics):
                raise ValueError(f"invalid cosi signature mask index {i}/{len(publics)}")
            if responses.get(i) is None:
                raise ValueError(f"invalid cosi signature responses with missing key {i}")
            signers.append(i)
        if len(signers) != len(responses):
            raise ValueError(
                f"invalid cosi signature responses count {len(signers)}/{len(responses)}"
            )
        challenge = self.challenge(publics, message)
        total = Scalar.zero()
        for i, s in responses.items():
            s = bytes(s)
            commitment = self.commitments.get(i)
            if commitment is None:
                raise ValueError(f"invalid cosi signature response {s.hex()}")
            if strict:
                sig = Signature(bytes(commitment) + s)
                if not verify_with_challenge(publics[i], sig, challenge):
                    raise ValueError(f"invalid cosi signature response {s.hex()}")
            total = total + Scalar.from_canonical_bytes(s)
        self.signature = Signature(self.signature.r() + total.to_bytes())

    def threshold_verify(self, threshold: int) -> bool:
        return len(self.keys()) >= threshold

    def full_verify(self, publics: Sequence[Key], threshold: int, message: Hash) -> None:
        """Raise ValueError unless enough signers made a valid signature."""
        if not self.threshold_verify(threshold):
            raise ValueError(
                f"cosi.FullVerify publics {len(publics)} threshold {threshold} "
                f"keys {len(self.keys())}"
            )
        try:
            aggregated = self.aggregate_public_key(publics)
        except ValueError as exc:
            raise ValueError(f"cosi.FullVerify aggregatePublicKey {exc}") from exc
        if not verify(aggregated, message, self.signature):
            raise ValueError("cosi.FullVerify signature verify failed")

    def __str__(self) -> str:
        return f"{self.signature}{self.mask:016x}"

    def to_json(self) -> str:
        return json.dumps(str(self))


def cosi_aggregate_commitment(randoms: Mapping[int, Key]) -> CosiSignature:
    """Start a collective signature from the signers' public commitments."""
    cosi = CosiSignature()
    total = Point.identity()
    for index, commitment in randoms.items():
        total = total + Point.from_bytes(commitment)
        cosi._mark(index)
        cosi.commitments[index] = Key(commitment)
    cosi.signature = Signature(total.to_bytes() + bytes(32))
    return cosi


def cosi_from_json(data: str | bytes) -> CosiSignature:
    """Parse a collective signature from its JSON string form."""
    text = _unquote_json(data)
    raw = _decode_hex(text)
    if len(raw) != Signature.size + 8:
        raise ValueError(f"invalid signature length {len(raw)}")
    return CosiSignature(
        signature=Signature(raw[: Signature.size]),
        mask=int(text[Signature.size * 2:], 16),
    )