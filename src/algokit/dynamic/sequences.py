"""
Sequence Dynamic Programming
============================
Longest increasing / common subsequences, edit distance and maximum
subarray.
"""
from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING, Any, Hashable, Sequence

import numpy as np
import numba as nb

if TYPE_CHECKING:
    import numpy.typing as npt


def length_of_lis(nums: Sequence[Any]) -> int:
    """
    Length of the longest strictly increasing subsequence.

    Patience sorting: ``tails[k]`` is the smallest tail of any increasing
    subsequence of length ``k + 1``.

    Args:
        nums: Comparable items.

    Returns:
        The LIS length, 0 for an empty input.
    """
    tails: list[Any] = []
    for x in nums:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)


def longest_increasing_subsequence(nums: Sequence[Any]) -> list[Any]:
    """
    One longest strictly increasing subsequence of `nums`.

    Same patience-sorting scan as :func:`length_of_lis`, with back pointers.
    """
    tails: list[Any] = []
    tail_idx: list[int] = []
    parent = [-1] * len(nums)
    for i, x in enumerate(nums):
        k = bisect_left(tails, x)
        if k > 0:
            parent[i] = tail_idx[k - 1]
        if k == len(tails):
            tails.append(x)
            tail_idx.append(i)
        else:
            tails[k] = x
            tail_idx[k] = i

    out: list[Any] = []
    i = tail_idx[-1] if tail_idx else -1
    while i != -1:
        out.append(nums[i])
        i = parent[i]
    out.reverse()
    return out


def longest_common_subsequence(a: Sequence[Any], b: Sequence[Any]) -> str | list[Any]:
    """
    One longest common subsequence of `a` and `b`.

    Returns:
        A string when both inputs are strings, otherwise a list.
    """
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    out: list[Any] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            out.append(a[i])
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1

    if isinstance(a, str) and isinstance(b, str):
        return "".join(out)
    return out


@nb.jit(cache=True)
def _levenshtein_kernel(a: npt.NDArray[np.int64], b: npt.NDArray[np.int64]) -> int:
    """
    Two-row Wagner-Fischer over integer codes.

    Args:
        a: (n, ) codes of the first sequence.
        b: (m, ) codes of the second sequence.

    Returns:
        The edit distance.
    """
    n = a.shape[0]
    m = b.shape[0]
    prev = np.arange(m + 1)
    curr = np.empty(m + 1, dtype=np.int64)
    for i in range(1, n + 1):
        curr[0] = i
        for j in range(1, m + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
        prev, curr = curr, prev
    return prev[m]


def _encode_pair(a: Sequence[Hashable], b: Sequence[Hashable]) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.int64]]:
    """Map two sequences onto shared integer codes."""
    if isinstance(a, str) and isinstance(b, str):
        return (np.fromiter((ord(c) for c in a), dtype=np.int64, count=len(a)),
                np.fromiter((ord(c) for c in b), dtype=np.int64, count=len(b)))
    codes: dict[Hashable, int] = {}
    enc_a = np.array([codes.setdefault(x, len(codes)) for x in a], dtype=np.int64)
    enc_b = np.array([codes.setdefault(x, len(codes)) for x in b], dtype=np.int64)
    return enc_a, enc_b


def edit_distance(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """
    Levenshtein distance (unit cost insert / delete / substitute).

    Args:
        a: First string or sequence of hashable items.
        b: Second string or sequence of hashable items.

    Returns:
        Minimum number of edits turning `a` into `b`.
    """
    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)
    enc_a, enc_b = _encode_pair(a, b)
    return int(_levenshtein_kernel(enc_a, enc_b))


def max_subarray(nums: Sequence[float]) -> tuple[float, int, int]:
    """
    Kadane's algorithm.

    Returns:
        ``(best_sum, start, end)`` with inclusive bounds of the first best
        subarray.

    Raises:
        ValueError: If `nums` is empty.
    """
    if len(nums) == 0:
        raise ValueError("max_subarray() arg is an empty sequence")
    best, best_lo, best_hi = nums[0], 0, 0
    current, lo = nums[0], 0
    for i in range(1, len(nums)):
        x = nums[i]
        if current < 0:
            current, lo = x, i
        else:
            current += x
        if current > best:
            best, best_lo, best_hi = current, lo, i
    return best, best_lo, best_hi


def longest_palindromic_subsequence(s: Sequence[Any]) -> int:
    """Length of the longest palindromic subsequence."""
    n = len(s)
    if n == 0:
        return 0
    dp = [0] * n
    for i in range(n - 1, -1, -1):
        dp[i] = 1
        prev_diag = 0  # dp[i + 1][j - 1] from the previous row
        for j in range(i + 1, n):
            saved = dp[j]
            if s[i] == s[j]:
                dp[j] = prev_diag + 2
            else:
                dp[j] = max(dp[j], dp[j - 1])
            prev_diag = saved
    return dp[n - 1]
