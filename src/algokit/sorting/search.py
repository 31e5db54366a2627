"""
Searching in sorted sequences.

All index-returning searches report a miss with ``-1``.
"""
from __future__ import annotations

import math
import random
from typing import Any, Sequence


def lower_bound(seq: Sequence[Any], target: Any) -> int:
    """First index whose item is not less than `target`."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if seq[mid] < target:
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(seq: Sequence[Any], target: Any) -> int:
    """First index whose item is greater than `target`."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if target < seq[mid]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search(seq: Sequence[Any], target: Any) -> int:
    """
    Index of the first occurrence of `target` in `seq`, or -1.
    """
    i = lower_bound(seq, target)
    if i < len(seq) and seq[i] == target:
        return i
    return -1


def exponential_search(seq: Sequence[Any], target: Any) -> int:
    """
    Galloping search: double the bound, then binary search inside it.
    """
    n = len(seq)
    if n == 0:
        return -1
    if seq[0] == target:
        return 0
    bound = 1
    while bound < n and seq[bound] < target:
        bound *= 2
    lo, hi = bound // 2, min(bound + 1, n)
    i = lo + lower_bound(seq[lo:hi], target)
    if i < n and seq[i] == target:
        return i
    return -1


def jump_search(seq: Sequence[Any], target: Any) -> int:
    """Jump search with block size ``sqrt(n)``."""
    n = len(seq)
    if n == 0:
        return -1
    step = max(1, int(math.sqrt(n)))
    prev = 0
    while prev < n and seq[min(prev + step, n) - 1] < target:
        prev += step
    for i in range(prev, min(prev + step, n)):
        if seq[i] == target:
            return i
        if target < seq[i]:
            break
    return -1


def interpolation_search(seq: Sequence[float], target: float) -> int:
    """
    Interpolation search for numeric sequences with roughly uniform spacing.
    """
    lo, hi = 0, len(seq) - 1
    while lo <= hi and seq[lo] <= target <= seq[hi]:
        if seq[hi] == seq[lo]:
            return lo if seq[lo] == target else -1
        pos = lo + int((target - seq[lo]) * (hi - lo) / (seq[hi] - seq[lo]))
        if seq[pos] == target:
            # step back to the first occurrence
            while pos > lo and seq[pos - 1] == target:
                pos -= 1
            return pos
        if seq[pos] < target:
            lo = pos + 1
        else:
            hi = pos - 1
    return -1


def quickselect(seq: Sequence[Any], k: int, seed: int | None = None) -> Any:
    """
    Return the k-th smallest item (0-based) in expected linear time.

    Raises:
        IndexError: If `k` is outside ``[0, len(seq))``.
    """
    items = list(seq)
    if not 0 <= k < len(items):
        raise IndexError(f"k={k} out of range for {len(items)} items.")
    rng = random.Random(seed)
    lo, hi = 0, len(items) - 1
    while True:
        if lo == hi:
            return items[lo]
        pivot = items[rng.randint(lo, hi)]
        # three-way partition of items[lo:hi + 1]
        less = [x for x in items[lo:hi + 1] if x < pivot]
        equal = [x for x in items[lo:hi + 1] if not x < pivot and not pivot < x]
        greater = [x for x in items[lo:hi + 1] if pivot < x]
        items[lo:hi + 1] = less + equal + greater
        if k < lo + len(less):
            hi = lo + len(less) - 1
        elif k < lo + len(less) + len(equal):
            return pivot
        else:
            lo = lo + len(less) + len(equal)
