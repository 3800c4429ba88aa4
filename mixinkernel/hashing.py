"""Fixed-size byte values and the hash functions used by the kernel."""

from __future__ import annotations

import hashlib
import json
import string
import struct


def _decode_hex(text: str) -> bytes:
    if not set(text) <= set(string.hexdigits):
        raise ValueError(f"invalid hex string {text!r}")
    return bytes.fromhex(text)


class _FixedBytes(bytes):
    """Immutable byte string of a fixed length, shown as hex."""

    size = 32
    label = "value"

    def __new__(cls, data: bytes | None = None):
        data = bytes(cls.size) if data is None else bytes(data)
        if len(data) != cls.size:
            raise ValueError(f"invalid {cls.label} length {len(data)}")
        return super().__new__(cls, data)

    def __str__(self) -> str:
        return self.hex()

    @classmethod
    def _from_hex(cls, text: str):
        return cls(_decode_hex(text))

    @classmethod
    def _from_json(cls, data: str | bytes):
        value = json.loads(data)
        if not isinstance(value, str):
            raise ValueError("expected a JSON string")
        return cls._from_hex(value)


class Hash(_FixedBytes):
    """A 32-byte digest."""

    label = "hash"

    def has_value(self) -> bool:
        return any(self)

    def for_network(self, net: bytes) -> Hash:
        """Bind this hash to a network identifier."""
        return blake3_hash(bytes(net) + bytes(self))

    def to_json(self) -> str:
        return json.dumps(self.hex())


def sha256_hash(data: bytes) -> Hash:
    """SHA3-256 digest of data."""
    return Hash(hashlib.sha3_256(bytes(data)).digest())


def blake3_hash(data: bytes) -> Hash:
    """BLAKE3 digest of data, 32 bytes."""
    return Hash(_blake3(bytes(data)))


def hash_from_string(src: str) -> Hash:
    return Hash._from_hex(src)


def hash_from_json(data: str | bytes) -> Hash:
    return Hash._from_json(data)


_IV = (0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
       0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19)
_PERM = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)
_G = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
      (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))
_START, _END, _PARENT, _ROOT = 1, 2, 4, 8
_M = 0xFFFFFFFF


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _M


def _compress(cv, words, counter, block_len, flags) -> tuple:
    v = [*cv, *_IV[:4], counter & _M, counter >> 32, block_len, flags]
    m = list(words)
    for rnd in range(7):
        for g, (a, b, c, d) in enumerate(_G):
            for x, (r1, r2) in ((m[2 * g], (16, 12)), (m[2 * g + 1], (8, 7))):
                v[a] = (v[a] + v[b] + x) & _M
                v[d] = _rotr(v[d] ^ v[a], r1)
                v[c] = (v[c] + v[d]) & _M
                v[b] = _rotr(v[b] ^ v[c], r2)
        m = [m[i] for i in _PERM]
    return tuple(x ^ y for x, y in zip(v[:8], v[8:]))


def _chunk_node(chunk: bytes, counter: int) -> tuple:
    """Compression inputs of a chunk's final block."""
    blocks = [chunk[i:i + 64] for i in range(0, len(chunk), 64)] or [b""]
    cv, flags = _IV, _START
    for block in blocks[:-1]:
        cv = _compress(cv, struct.unpack("<16I", block), counter, 64, flags)
        flags = 0
    last = blocks[-1]
    return cv, struct.unpack("<16I", last.ljust(64, b"\0")), counter, len(last), flags | _END


def _parent_node(left: tuple, right: tuple) -> tuple:
    return _IV, (*left, *right), 0, 64, _PARENT


def _blake3(data: bytes) -> bytes:
    chunks = [data[i:i + 1024] for i in range(0, len(data), 1024)] or [b""]
    stack: list[tuple] = []
    for index, chunk in enumerate(chunks[:-1]):
        cv = _compress(*_chunk_node(chunk, index))
        total = index + 1
        while total & 1 == 0:
            cv = _compress(*_parent_node(stack.pop(), cv))
            total >>= 1
        stack.append(cv)
    node = _chunk_node(chunks[-1], len(chunks) - 1)
    while stack:
        node = _parent_node(stack.pop(), _compress(*node))
    cv, words, _, block_len, flags = node
    return struct.pack("<8I", *_compress(cv, words, 0, block_len, flags | _ROOT))