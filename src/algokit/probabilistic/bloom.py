"""
Bloom Filters
=============
Standard and counting Bloom filters over NumPy arrays.

Sizing follows the usual optimum for ``n`` expected items at false
positive rate ``p``::

    m = ceil(-n ln p / (ln 2)^2)      bits / counters
    k = max(1, round(m / n * ln 2))   hash functions
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from algokit import config
from algokit.probabilistic.hashing import hash_pair

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def optimal_parameters(capacity: int, error_rate: float) -> tuple[int, int]:
    """
    Number of slots ``m`` and hash functions ``k``.

    Raises:
        ValueError: If `capacity` < 1 or `error_rate` is not in (0, 1).
    """
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}.")
    if not 0.0 < error_rate < 1.0:
        raise ValueError(f"error_rate must lie in (0, 1), got {error_rate}.")
    m = math.ceil(-capacity * math.log(error_rate) / (math.log(2) ** 2))
    k = max(1, round(m / capacity * math.log(2)))
    return m, k


class BloomFilter:
    """
    Set membership with no false negatives and tunable false positives.
    """
    def __init__(
        self,
        capacity: int = 10_000,
        error_rate: float = config.BLOOM_DEFAULT_ERROR_RATE,
        seed: int = 0,
    ) -> None:
        self.capacity = capacity
        self.error_rate = error_rate
        self.seed = seed
        self.m, self.k = optimal_parameters(capacity, error_rate)
        self.bits = np.zeros(self.m, dtype=bool)
        self._count = 0
        logger.debug(f"BloomFilter sized m={self.m}, k={self.k} for n={capacity}, p={error_rate}.")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(m={self.m}, k={self.k}, items={self._count})"

    def __len__(self) -> int:
        """Number of :meth:`add` calls (duplicates included)."""
        return self._count

    def _indices(self, item: Any) -> npt.NDArray[np.int64]:
        h1, h2 = hash_pair(item, self.seed)
        return np.array([(h1 + i * h2) % self.m for i in range(self.k)], dtype=np.int64)

    def add(self, item: Any) -> None:
        self.bits[self._indices(item)] = True
        self._count += 1

    def update(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def __contains__(self, item: Any) -> bool:
        return bool(self.bits[self._indices(item)].all())

    def contains(self, item: Any) -> bool:
        return item in self

    def estimated_false_positive_rate(self) -> float:
        """``(fraction of set bits) ** k``."""
        return float(self.bits.mean()) ** self.k

    def union(self, other: BloomFilter) -> BloomFilter:
        """
        Filter containing the items of both.

        Raises:
            ValueError: If the filters were not built with the same parameters.
        """
        if (self.m, self.k, self.seed) != (other.m, other.k, other.seed):
            raise ValueError("Only filters with identical m, k and seed can be merged.")
        merged = BloomFilter(self.capacity, self.error_rate, self.seed)
        merged.bits = self.bits | other.bits
        merged._count = self._count + other._count
        return merged


class CountingBloomFilter:
    """
    Bloom filter with small counters instead of bits, supporting removal.

    Counters saturate at ``config.COUNTING_BLOOM_MAX_COUNT``; a saturated
    counter is never decremented again, trading a little accuracy for the
    guarantee of no false negatives.
    """
    def __init__(
        self,
        capacity: int = 10_000,
        error_rate: float = config.BLOOM_DEFAULT_ERROR_RATE,
        seed: int = 0,
    ) -> None:
        self.seed = seed
        self.m, self.k = optimal_parameters(capacity, error_rate)
        self.counters = np.zeros(self.m, dtype=np.uint8)
        self._count = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(m={self.m}, k={self.k}, items={self._count})"

    def __len__(self) -> int:
        """Net number of items added and not removed."""
        return self._count

    def _indices(self, item: Any) -> npt.NDArray[np.int64]:
        h1, h2 = hash_pair(item, self.seed)
        # unique: two probes landing on one counter must bump it once
        return np.unique(np.array([(h1 + i * h2) % self.m for i in range(self.k)], dtype=np.int64))

    def add(self, item: Any) -> None:
        idx = self._indices(item)
        below = idx[self.counters[idx] < config.COUNTING_BLOOM_MAX_COUNT]
        self.counters[below] += 1
        self._count += 1

    def remove(self, item: Any) -> bool:
        """
        Remove one occurrence of `item`.

        Returns:
            False (and changes nothing) if `item` is definitely absent.
        """
        idx = self._indices(item)
        current = self.counters[idx]
        if not current.all():
            return False
        unsaturated = idx[current < config.COUNTING_BLOOM_MAX_COUNT]
        self.counters[unsaturated] -= 1
        self._count -= 1
        return True

    def __contains__(self, item: Any) -> bool:
        return bool(self.counters[self._indices(item)].all())

    def count(self, item: Any) -> int:
        """Upper-bound estimate of how many times `item` was added."""
        return int(self.counters[self._indices(item)].min())
