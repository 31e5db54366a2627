"""
Coin change and knapsack dynamic programming.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np


def min_coins(coins: Sequence[int], amount: int) -> int:
    """
    Fewest coins summing to `amount` with unlimited coins of each kind.

    Args:
        coins: Positive coin denominations.
        amount: Target amount.

    Returns:
        The minimum number of coins, 0 for a zero amount, or -1 if the
        amount cannot be formed.

    Example:
        >>> min_coins([1, 2, 5], 11)
        3
    """
    if amount < 0:
        return -1
    unreachable = amount + 1
    best = np.full(amount + 1, unreachable, dtype=np.int64)
    best[0] = 0
    for coin in coins:
        if coin <= 0:
            continue
        for a in range(coin, amount + 1):
            candidate = best[a - coin] + 1
            if candidate < best[a]:
                best[a] = candidate
    return int(best[amount]) if best[amount] != unreachable else -1


def coin_change_ways(coins: Sequence[int], amount: int) -> int:
    """Number of coin combinations (order-insensitive) summing to `amount`."""
    if amount < 0:
        return 0
    ways = [0] * (amount + 1)
    ways[0] = 1
    for coin in coins:
        if coin <= 0:
            continue
        for a in range(coin, amount + 1):
            ways[a] += ways[a - coin]
    return ways[amount]


def knapsack_01(weights: Sequence[int], values: Sequence[float], capacity: int) -> tuple[float, list[int]]:
    """
    0/1 knapsack.

    Args:
        weights: Non-negative integer item weights.
        values: Item values, same length as `weights`.
        capacity: Knapsack capacity.

    Returns:
        ``(best_value, chosen_indices)`` with indices in ascending order.

    Raises:
        ValueError: If `weights` and `values` differ in length.
    """
    if len(weights) != len(values):
        raise ValueError(f"Got {len(weights)} weights but {len(values)} values.")
    n = len(weights)
    if capacity < 0:
        return 0, []

    # table[i][c]: best value using the first i items within capacity c
    table = np.zeros((n + 1, capacity + 1), dtype=np.float64)
    for i in range(1, n + 1):
        w, v = weights[i - 1], values[i - 1]
        table[i] = table[i - 1]
        if w <= capacity:
            table[i, w:] = np.maximum(table[i - 1, w:], table[i - 1, :capacity + 1 - w] + v)

    chosen: list[int] = []
    c = capacity
    for i in range(n, 0, -1):
        if table[i, c] != table[i - 1, c]:
            chosen.append(i - 1)
            c -= weights[i - 1]
    chosen.reverse()

    best = table[n, capacity]
    if all(isinstance(v, (int, np.integer)) for v in values):
        return int(best), chosen
    return float(best), chosen


def climb_stairs(n: int, steps: Sequence[int] = (1, 2)) -> int:
    """Number of distinct ways to climb `n` stairs taking any of `steps` at a time."""
    if n < 0:
        return 0
    ways = [0] * (n + 1)
    ways[0] = 1
    for i in range(1, n + 1):
        ways[i] = sum(ways[i - s] for s in steps if 0 < s <= i)
    return ways[n]
