"""
XOR Filter
==========
Static approximate membership (Graf & Lemire, 2019).

Every key maps to one slot in each of three equal blocks of a fingerprint
table. Construction "peels" keys that own a slot no other key touches, then
assigns fingerprints in reverse peel order so that for every key::

    fingerprint(key) == B[h0] ^ B[h1] ^ B[h2]

Built keys are always found. An absent key matches with probability about
``2 ** -fingerprint_bits``.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from algokit import config
from algokit.probabilistic.hashing import MASK64, hash64, rotl64, to_bytes

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_DTYPES = {8: np.uint8, 16: np.uint16}


class XorFilter:
    """
    Immutable membership filter with 8- or 16-bit fingerprints.
    """
    def __init__(self, fingerprint_bits: int = config.XOR_DEFAULT_FINGERPRINT_BITS) -> None:
        """
        Create an empty filter; fill it with :meth:`build`.

        Raises:
            ValueError: If `fingerprint_bits` is not 8 or 16.
        """
        if fingerprint_bits not in _DTYPES:
            raise ValueError(f"fingerprint_bits must be 8 or 16, got {fingerprint_bits}.")
        self.fingerprint_bits = fingerprint_bits
        self._mask = (1 << fingerprint_bits) - 1
        self.seed = 0
        self.block_length = 0
        self.fingerprints: npt.NDArray[np.unsignedinteger] = np.zeros(0, dtype=_DTYPES[fingerprint_bits])
        self._size = 0

    @classmethod
    def from_items(cls, items: Iterable[Any], fingerprint_bits: int = config.XOR_DEFAULT_FINGERPRINT_BITS) -> XorFilter:
        return cls(fingerprint_bits).build(items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(items={self._size}, bits={self.fingerprint_bits}, slots={self.fingerprints.size})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    @property
    def size_in_bytes(self) -> int:
        return int(self.fingerprints.nbytes)

    def _fingerprint(self, h: int) -> int:
        return (h ^ (h >> 32)) & self._mask

    def _slots(self, h: int) -> tuple[int, int, int]:
        n = self.block_length
        return (
            ((h & 0xFFFFFFFF) * n) >> 32,
            n + (((rotl64(h, 21) & 0xFFFFFFFF) * n) >> 32),
            2 * n + (((rotl64(h, 42) & 0xFFFFFFFF) * n) >> 32),
        )

    def build(self, items: Iterable[Any]) -> XorFilter:
        """
        (Re)build the filter from `items`, replacing previous contents.

        Duplicates are ignored. Seeds are tried in sequence until peeling
        succeeds.

        Raises:
            RuntimeError: If no seed works within ``config.XOR_MAX_ATTEMPTS``
                (practically only when distinct items share a 64-bit hash).

        Returns:
            self, for chaining.
        """
        keys = list(dict.fromkeys(to_bytes(item) for item in items))
        n = len(keys)
        capacity = int(1.23 * n) + 32
        self.block_length = capacity // 3
        capacity = 3 * self.block_length

        for attempt in range(config.XOR_MAX_ATTEMPTS):
            seed = (config.DEFAULT_SEED + attempt) & MASK64
            hashes = list({hash64(k, seed) for k in keys})
            if len(hashes) == n:
                table = self._try_assign(hashes, capacity)
                if table is not None:
                    self.seed = seed
                    self.fingerprints = table
                    self._size = n
                    logger.debug(f"XorFilter built {n} keys in {capacity} slots after {attempt + 1} attempt(s).")
                    return self
            logger.warning(f"XorFilter construction failed with seed {seed}; retrying.")
        raise RuntimeError(f"XorFilter construction failed after {config.XOR_MAX_ATTEMPTS} attempts.")

    def _try_assign(self, hashes: list[int], capacity: int) -> npt.NDArray[np.unsignedinteger] | None:
        """Peel and assign; None if the hypergraph has a 2-core."""
        count = [0] * capacity
        xor_hash = [0] * capacity
        slots = [self._slots(h) for h in hashes]
        for h, triple in zip(hashes, slots):
            for s in triple:
                count[s] += 1
                xor_hash[s] ^= h

        queue = deque(i for i in range(capacity) if count[i] == 1)
        peeled: list[tuple[int, int]] = []
        while queue:
            s = queue.popleft()
            if count[s] != 1:
                continue
            h = xor_hash[s]
            peeled.append((h, s))
            for t in self._slots(h):
                count[t] -= 1
                xor_hash[t] ^= h
                if count[t] == 1:
                    queue.append(t)

        if len(peeled) != len(hashes):
            return None

        table = [0] * capacity
        for h, s in reversed(peeled):
            a, b, c = self._slots(h)
            table[s] = self._fingerprint(h) ^ table[a] ^ table[b] ^ table[c]
        return np.array(table, dtype=_DTYPES[self.fingerprint_bits])

    def contains(self, item: Any) -> bool:
        """
        Approximate membership.

        Returns:
            True for every built item; False for an empty or unbuilt filter.
        """
        if self._size == 0:
            return False
        h = hash64(item, self.seed)
        a, b, c = self._slots(h)
        fp = self.fingerprints
        return self._fingerprint(h) == int(fp[a] ^ fp[b] ^ fp[c])
