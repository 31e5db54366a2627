"""
MinHash
=======
Jaccard similarity estimation from fixed-size signatures.

Each of ``num_perm`` universal hash functions ``(a * h + b) mod p`` with
``p = 2**61 - 1`` simulates a random permutation. ``a`` and ``b`` are drawn
from the whole field, so ``a * h`` wraps modulo ``2**64`` before the
reduction. The signature keeps the minimum per function. The fraction of
equal slots between two signatures estimates the Jaccard index of the
underlying sets.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from algokit import config
from algokit.probabilistic.hashing import hash64

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

MERSENNE_PRIME = np.uint64((1 << 61) - 1)


class MinHash:
    """
    MinHash signature.

    Two signatures are comparable only when built with the same
    ``num_perm`` and ``seed``.
    """
    def __init__(self, num_perm: int = config.MINHASH_DEFAULT_PERMUTATIONS, seed: int = 1) -> None:
        if num_perm < 1:
            raise ValueError(f"num_perm must be >= 1, got {num_perm}.")
        self.num_perm = num_perm
        self.seed = seed
        rng = np.random.default_rng(seed)
        self._a = rng.integers(1, (1 << 61) - 1, size=num_perm, dtype=np.uint64)
        self._b = rng.integers(0, (1 << 61) - 1, size=num_perm, dtype=np.uint64)
        self.hashvalues: npt.NDArray[np.uint64] = np.full(num_perm, MERSENNE_PRIME, dtype=np.uint64)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(num_perm={self.num_perm}, seed={self.seed})"

    def _permute(self, hv: npt.NDArray[np.uint64]) -> npt.NDArray[np.uint64]:
        """(a * hv + b) mod p for a column of base hashes, shape (len(hv), num_perm)."""
        return (np.outer(hv, self._a) + self._b) % MERSENNE_PRIME

    def update(self, item: Any) -> None:
        hv = np.array([hash64(item) & 0xFFFFFFFF], dtype=np.uint64)
        np.minimum(self.hashvalues, self._permute(hv)[0], out=self.hashvalues)

    def update_batch(self, items: Iterable[Any]) -> None:
        hv = np.fromiter((hash64(item) & 0xFFFFFFFF for item in items), dtype=np.uint64)
        if hv.size == 0:
            return
        np.minimum(self.hashvalues, self._permute(hv).min(axis=0), out=self.hashvalues)

    def _check_compatible(self, other: MinHash) -> None:
        if self.num_perm != other.num_perm or self.seed != other.seed:
            raise ValueError(
                f"Cannot combine MinHash(num_perm={self.num_perm}, seed={self.seed}) "
                f"with MinHash(num_perm={other.num_perm}, seed={other.seed})."
            )

    def jaccard(self, other: MinHash) -> float:
        """
        Estimated Jaccard similarity.

        Raises:
            ValueError: If the two signatures use different parameters.
        """
        self._check_compatible(other)
        return float(np.count_nonzero(self.hashvalues == other.hashvalues)) / self.num_perm

    def merge(self, other: MinHash) -> None:
        """Fold `other` in; the result summarises the union of both sets."""
        self._check_compatible(other)
        np.minimum(self.hashvalues, other.hashvalues, out=self.hashvalues)

    def copy(self) -> MinHash:
        clone = MinHash(self.num_perm, self.seed)
        clone.hashvalues = self.hashvalues.copy()
        return clone

    def is_empty(self) -> bool:
        return bool(np.all(self.hashvalues == MERSENNE_PRIME))

    def digest(self) -> npt.NDArray[np.uint64]:
        return self.hashvalues.copy()


def jaccard(a: Iterable[Any], b: Iterable[Any]) -> float:
    """Exact Jaccard index ``|A & B| / |A | B|``; two empty sets give 1.0."""
    sa, sb = set(a), set(b)
    union = sa | sb
    if not union:
        return 1.0
    return len(sa & sb) / len(union)
