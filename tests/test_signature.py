import hashlib

import pytest

from mixinkernel.curve import Scalar
from mixinkernel.hashing import blake3_hash
from mixinkernel.key import new_key_from_seed
from mixinkernel.signature import (
    Signature,
    sign,
    signature_from_json,
    verify,
    verify_with_challenge,
)

SEED = bytes(range(1, 65))
SIG1 = (
    "ca22e4ad608bad7638072e420ff5dd45eeb82c8e732e67580413066edf4cb8c0"
    "e2e6642f9e08b698a553a51e5719610b55d5afd1a9b9f3c69c6c60434dd55707"
)
SIG2 = (
    "ae7bde216edf1f6b00d1d87a584b8ec433913ee7028d075b3a11aec13aea86ed"
    "472bb45976100d9e679180d1a7afce352304347fefe6bd64b407097c6f887208"
)
SIG3 = (
    "56e783313e7969ad3feab28f3f55917c44e7a5712818f86c4f92ac86a848696c"
    "778c10c1940f13e8b42e562bb7b8f789a87ca3bca4269f6c7107fc6ddf0e650c"
)
SIG4 = (
    "7718b4dc9daeb8272132dbf7d52ca701d210a3bc044f0fc70494c035e6fd3df8"
    "0ede5427c7e19832be6fa87b7cf0c24e72af1911a254ce708489d1bcd324ee06"
)


@pytest.fixture(scope="module")
def material():
    key1 = new_key_from_seed(SEED)
    msg1 = blake3_hash(SEED[:32])
    msg2 = blake3_hash(SEED[32:])
    sig1 = sign(key1, msg1)
    key2 = new_key_from_seed(bytes(sig1))
    return key1, key1.public(), key2, key2.public(), msg1, msg2


def test_sign_values(material):
    key1, _, key2, _, msg1, msg2 = material
    assert str(sign(key1, msg1)) == SIG1
    assert str(sign(key1, msg2)) == SIG2
    assert str(sign(key2, msg1)) == SIG3
    assert str(sign(key2, msg2)) == SIG4


def test_verify_combinations(material):
    key1, pub1, _, pub2, msg1, msg2 = material
    sig1 = sign(key1, msg1)
    sig2 = sign(key1, msg2)
    assert verify(pub2, msg1, sig1) is False
    assert verify(pub2, msg2, sig1) is False
    assert verify(pub1, msg1, sig1) is True
    assert verify(pub1, msg2, sig1) is False
    assert verify(pub2, msg1, sig2) is False
    assert verify(pub2, msg2, sig2) is False
    assert verify(pub1, msg1, sig2) is False
    assert verify(pub1, msg2, sig2) is True


def test_verify_rejects_non_canonical_s(material):
    _, pub1, _, _, msg1, _ = material
    sig1 = Signature(bytes.fromhex(SIG1))
    assert verify(pub1, msg1, Signature(sig1.r() + b"\xff" * 32)) is False


def test_verify_with_challenge(material):
    _, pub1, _, _, msg1, _ = material
    sig1 = Signature(bytes.fromhex(SIG1))
    digest = hashlib.sha512(sig1.r() + bytes(pub1) + bytes(msg1)).digest()
    challenge = Scalar.from_uniform_bytes(digest)
    assert verify_with_challenge(pub1, sig1, challenge) is True
    assert verify_with_challenge(pub1, sig1, Scalar.zero()) is False


def test_signature_parts():
    sig = Signature(bytes.fromhex(SIG1))
    assert sig.r() == bytes.fromhex(SIG1[:64])
    assert sig.s() == bytes.fromhex(SIG1[64:])


def test_signature_json_round_trip():
    sig4 = Signature(bytes.fromhex(SIG4))
    j = sig4.to_json()
    assert j == '"' + SIG4 + '"'
    parsed = signature_from_json(j)
    assert str(parsed) == SIG4
    assert parsed == sig4


def test_signature_json_rejects_bad_length():
    with pytest.raises(ValueError):
        signature_from_json('"' + SIG4[:-2] + '"')