import pytest

from mixinkernel.hashing import (
    Hash,
    blake3_hash,
    hash_from_json,
    hash_from_string,
    sha256_hash,
)

SEED = bytes(range(1, 65))
DIGEST = "9323516a9ed2b789339472e38673fd74e8e802efbb94b0b9454f0188ccb70358"


def test_sha256_hash_of_seed():
    assert str(sha256_hash(SEED)) == DIGEST


def test_hash_from_string_round_trip():
    h = hash_from_string(DIGEST)
    assert str(h) == DIGEST
    other = hash_from_string(DIGEST[:-1] + "7")
    assert str(other) == DIGEST[:-1] + "7"


def test_hash_json_round_trip():
    h = hash_from_string(DIGEST)
    j = h.to_json()
    assert j == '"' + DIGEST + '"'
    assert str(hash_from_json(j)) == DIGEST
    assert hash_from_json(j.encode()) == h


def test_hash_from_string_rejects_bad_length():
    with pytest.raises(ValueError):
        hash_from_string(DIGEST[:-1])
    with pytest.raises(ValueError):
        hash_from_string(DIGEST[:-2])


def test_hash_from_string_rejects_non_hex():
    with pytest.raises(ValueError):
        hash_from_string("zz" * 32)


def test_hash_from_json_rejects_non_string():
    with pytest.raises(ValueError):
        hash_from_json("12")


def test_blake3_empty_vector():
    assert str(blake3_hash(b"")) == (
        "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    )


def test_blake3_long_input_deterministic():
    data = bytes(i % 251 for i in range(5000))
    first = blake3_hash(data)
    assert first == blake3_hash(data)
    assert len(first) == 32
    assert first != blake3_hash(data[:-1])


def test_has_value():
    assert Hash().has_value() is False
    assert sha256_hash(SEED).has_value() is True


def test_hash_rejects_wrong_length():
    with pytest.raises(ValueError):
        Hash(b"\x01" * 31)


def test_for_network_depends_on_network():
    h = sha256_hash(SEED)
    net_a = hash_from_string(DIGEST)
    net_b = Hash()
    assert h.for_network(net_a) == h.for_network(net_a)
    assert h.for_network(net_a) != h.for_network(net_b)