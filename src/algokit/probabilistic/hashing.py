"""
Stable hashing shared by the probabilistic structures.

Python's built-in ``hash`` is salted per process for ``str`` and ``bytes``;
these helpers use keyed BLAKE2b instead so sketches built in one process
can be compared with sketches built in another.
"""
from __future__ import annotations

import hashlib
from typing import Any

MASK64 = (1 << 64) - 1


def to_bytes(item: Any) -> bytes:
    """Canonical byte encoding: bytes as-is, str as UTF-8, anything else via repr."""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode("utf-8")
    return repr(item).encode("utf-8")


def hash64(item: Any, seed: int = 0) -> int:
    """
    64-bit hash of `item` keyed by `seed`.

    Args:
        item: Value to hash (see :func:`to_bytes`).
        seed: Any integer; only its low 64 bits are used.

    Returns:
        An integer in ``[0, 2**64)``.
    """
    key = (seed & MASK64).to_bytes(8, "little")
    digest = hashlib.blake2b(to_bytes(item), digest_size=8, key=key).digest()
    return int.from_bytes(digest, "little")


def hash_pair(item: Any, seed: int = 0) -> tuple[int, int]:
    """
    Two 32-bit hashes for double hashing (Kirsch-Mitzenmacher).

    The second hash is forced odd so it is never zero.
    """
    h = hash64(item, seed)
    return h & 0xFFFFFFFF, (h >> 32) | 1


def rotl64(x: int, r: int) -> int:
    """Rotate a 64-bit integer left by `r` bits."""
    return ((x << r) | (x >> (64 - r))) & MASK64
