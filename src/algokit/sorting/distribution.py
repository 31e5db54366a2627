"""
Distribution Sorts
==================
Non-comparison sorts for integer and bounded numeric data.
"""
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from algokit import config
from algokit.sorting.comparison import insertion_sort

logger = logging.getLogger(__name__)


def counting_sort(values: Iterable[int]) -> list[int]:
    """
    Counting sort over the value range ``[min, max]``.

    Negative integers are supported by offsetting the histogram. When the
    range is much wider than the input (more than
    ``COUNTING_SORT_SPAN_FACTOR * n`` and more than ``COUNTING_SORT_MAX_SPAN``)
    the values are handed to :func:`radix_sort` instead of allocating the
    histogram.

    Args:
        values: Integers to sort.

    Returns:
        A new ascending list of Python ints.
    """
    arr = np.fromiter(values, dtype=np.int64)
    if arr.size == 0:
        return []
    lo, hi = int(arr.min()), int(arr.max())
    span = hi - lo + 1
    if span > max(config.COUNTING_SORT_MAX_SPAN, config.COUNTING_SORT_SPAN_FACTOR * arr.size):
        logger.debug(f"Value span {span} too wide for {arr.size} items, using radix sort.")
        return radix_sort(arr.tolist())
    counts = np.bincount(arr - lo)
    return (np.repeat(np.arange(counts.size, dtype=np.int64), counts) + lo).tolist()


def _radix_non_negative(values: list[int], base: int) -> list[int]:
    if not values:
        return []
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(base)]
        for v in values:
            buckets[(v // exp) % base].append(v)
        values = [v for bucket in buckets for v in bucket]
        exp *= base
    return values


def radix_sort(values: Iterable[int], base: int = 10) -> list[int]:
    """
    LSD radix sort.

    Negative numbers are sorted by magnitude separately and prepended in
    reverse.

    Raises:
        ValueError: If `base` is smaller than 2.
    """
    if base < 2:
        raise ValueError(f"Radix base must be >= 2, got {base}.")
    items = [int(v) for v in values]
    negatives = _radix_non_negative([-v for v in items if v < 0], base)
    positives = _radix_non_negative([v for v in items if v >= 0], base)
    return [-v for v in reversed(negatives)] + positives


def bucket_sort(values: Iterable[float], n_buckets: int | None = None) -> list[float]:
    """
    Bucket sort for real numbers.

    Values are spread over `n_buckets` equal-width buckets between the
    minimum and the maximum; each bucket is finished with insertion sort.

    Args:
        values: Numbers to sort.
        n_buckets: Number of buckets, defaults to the number of values.
    """
    items = list(values)
    if len(items) < 2:
        return items
    n_buckets = n_buckets or len(items)
    if n_buckets < 1:
        raise ValueError(f"n_buckets must be >= 1, got {n_buckets}.")

    lo, hi = min(items), max(items)
    if lo == hi:
        return items

    scale = (n_buckets - 1) / (hi - lo)
    buckets: list[list[float]] = [[] for _ in range(n_buckets)]
    for v in items:
        buckets[int((v - lo) * scale)].append(v)

    out: list[float] = []
    for bucket in buckets:
        out.extend(insertion_sort(bucket))
    return out
