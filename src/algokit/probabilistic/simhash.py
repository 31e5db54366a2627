"""
SimHash
=======
Charikar's locality-sensitive fingerprint: near-duplicate documents get
fingerprints at small Hamming distance.
"""
from __future__ import annotations

from collections import Counter
import re
from typing import Any, Iterable

import numpy as np

from algokit import config
from algokit.probabilistic.hashing import hash64

_WORD = re.compile(r"\w+")


def _weighted_features(features: str | Iterable[Any]) -> list[tuple[Any, float]]:
    if isinstance(features, str):
        return list(Counter(w.lower() for w in _WORD.findall(features)).items())
    weighted = []
    for feature in features:
        if isinstance(feature, tuple) and len(feature) == 2:
            weighted.append((feature[0], float(feature[1])))
        else:
            weighted.append((feature, 1.0))
    return weighted


def simhash(features: str | Iterable[Any], bits: int = config.SIMHASH_DEFAULT_BITS) -> int:
    """
    Fingerprint a bag of features.

    Args:
        features: A string (tokenised into lower-case words), or an iterable
            of tokens or ``(token, weight)`` pairs.
        bits: Fingerprint width, 1 to 64.

    Returns:
        The fingerprint; 0 when there are no features.

    Raises:
        ValueError: If `bits` is outside 1..64.
    """
    if not 1 <= bits <= 64:
        raise ValueError(f"bits must lie in 1..64, got {bits}.")
    weighted = _weighted_features(features)
    if not weighted:
        return 0

    shifts = np.arange(bits, dtype=np.uint64)
    totals = np.zeros(bits, dtype=np.float64)
    for token, weight in weighted:
        h = np.uint64(hash64(token))
        set_bits = ((h >> shifts) & np.uint64(1)).astype(bool)
        totals += np.where(set_bits, weight, -weight)

    result = 0
    for i in np.flatnonzero(totals > 0):
        result |= 1 << int(i)
    return result


def hamming_distance(a: int, b: int) -> int:
    return (a ^ b).bit_count()


def simhash_similarity(a: int, b: int, bits: int = config.SIMHASH_DEFAULT_BITS) -> float:
    """1 - hamming / bits."""
    return 1.0 - hamming_distance(a, b) / bits
