"""
Greedy Algorithms
=================
Gas station circuit, jump game, interval scheduling and fractional
knapsack.
"""
from __future__ import annotations

from typing import Sequence

Interval = tuple[float, float]


def can_complete_circuit(gas: Sequence[float], cost: Sequence[float]) -> int:
    """
    Starting station from which a full clockwise circuit is possible.

    If the total gas covers the total cost a solution exists, and it is the
    station right after the last point where the running tank went negative.

    Args:
        gas: Fuel available at each station.
        cost: Fuel needed to drive from station ``i`` to ``i + 1``.

    Returns:
        The starting index, or -1 if no start works.

    Raises:
        ValueError: If `gas` and `cost` differ in length.
    """
    if len(gas) != len(cost):
        raise ValueError(f"gas has {len(gas)} stations but cost has {len(cost)}.")
    if not gas:
        return -1
    total = tank = 0
    start = 0
    for i, (g, c) in enumerate(zip(gas, cost)):
        total += g - c
        tank += g - c
        if tank < 0:
            start = i + 1
            tank = 0
    return start if total >= 0 else -1


def can_jump(nums: Sequence[int]) -> bool:
    """True if the last index is reachable, `nums[i]` being the max jump from i."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def min_jumps(nums: Sequence[int]) -> int:
    """Minimum jumps to reach the last index, or -1."""
    n = len(nums)
    if n <= 1:
        return 0
    jumps = 0
    current_end = farthest = 0
    for i in range(n - 1):
        if i > farthest:
            return -1
        farthest = max(farthest, i + nums[i])
        if i == current_end:
            if farthest <= i:
                return -1
            jumps += 1
            current_end = farthest
            if current_end >= n - 1:
                return jumps
    return jumps if current_end >= n - 1 else -1


def merge_intervals(intervals: Sequence[Interval]) -> list[Interval]:
    """Merge overlapping or touching closed intervals."""
    merged: list[list[float]] = []
    for lo, hi in sorted(intervals):
        if merged and lo <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], hi)
        else:
            merged.append([lo, hi])
    return [(lo, hi) for lo, hi in merged]


def max_non_overlapping(intervals: Sequence[Interval]) -> list[Interval]:
    """
    Largest set of pairwise non-overlapping intervals (earliest end first).

    Intervals sharing only an end point do not overlap.
    """
    chosen: list[Interval] = []
    last_end = float("-inf")
    for lo, hi in sorted(intervals, key=lambda iv: (iv[1], iv[0])):
        if lo >= last_end:
            chosen.append((lo, hi))
            last_end = hi
    return chosen


def fractional_knapsack(items: Sequence[tuple[float, float]], capacity: float) -> float:
    """
    Best value when items can be split.

    Args:
        items: ``(value, weight)`` pairs.
        capacity: Total weight allowed.
    """
    total = 0.0
    remaining = capacity
    ranked = sorted(
        (it for it in items if it[1] > 0),
        key=lambda it: it[0] / it[1],
        reverse=True,
    )
    for value, weight in ranked:
        if remaining <= 0:
            break
        take = min(weight, remaining)
        total += value * take / weight
        remaining -= take
    # zero-weight items are free
    total += sum(v for v, w in items if w == 0 and v > 0)
    return total
