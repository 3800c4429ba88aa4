"""Secure random bytes with a simple entropy sanity check."""

from __future__ import annotations

import os
from collections import Counter


class EntropyError(RuntimeError):
    """Raised when random output repeats one byte too often."""


def read_rand(size: int) -> bytes:
    """Return size secure random bytes; raise EntropyError on poor output."""
    if size <= 0:
        raise ValueError("random buffer must not be empty")
    buf = os.urandom(size)
    if len(buf) != size:
        raise EntropyError(f"short random read {len(buf)}/{size}")
    if size < 4:
        return buf
    threshold = size // 3
    for value, count in Counter(buf).items():
        if count >= threshold:
            raise EntropyError(f"entropy not enough {value} {count}")
    return buf


class RandReader:
    """Reader that yields secure random bytes."""

    def read(self, size: int) -> bytes:
        return read_rand(size)