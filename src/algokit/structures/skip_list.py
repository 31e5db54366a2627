"""
Skip List
=========
Probabilistic ordered map with expected ``O(log n)`` search, insert and
delete.

Nodes are integer ids into parallel lists; ``forward[node][level]`` is the
id of the next node on that level, or ``NIL``. Node 0 is the head sentinel.
Level heights are drawn from a seeded ``numpy.random.Generator`` so a given
seed always builds the same structure.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator

import numpy as np

from algokit import config

logger = logging.getLogger(__name__)

NIL = -1
HEAD = 0


class SkipList:
    """
    Ordered map from comparable keys to values.
    """
    def __init__(
        self,
        max_level: int = config.SKIP_LIST_MAX_LEVEL,
        p: float = config.SKIP_LIST_P,
        seed: int | None = None,
    ) -> None:
        """
        Args:
            max_level: Maximum tower height.
            p: Probability of promoting a node one level higher.
            seed: Seed for level draws; defaults to ``config.DEFAULT_SEED``.

        Raises:
            ValueError: If `max_level` < 1 or `p` is not in (0, 1).
        """
        if max_level < 1:
            raise ValueError(f"max_level must be >= 1, got {max_level}.")
        if not 0.0 < p < 1.0:
            raise ValueError(f"p must lie in (0, 1), got {p}.")
        self.max_level = max_level
        self.p = p
        self._rng = np.random.default_rng(config.DEFAULT_SEED if seed is None else seed)

        self._keys: list[Any] = [None]
        self._values: list[Any] = [None]
        self._forward: list[list[int]] = [[NIL] * max_level]
        self._free: list[int] = []
        self._level = 1  # levels currently in use
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, levels={self._level})"

    def __contains__(self, key: Any) -> bool:
        node = self._find_update(key)[0]
        return node != NIL and self._keys[node] == key

    def __iter__(self) -> Iterator[Any]:
        node = self._forward[HEAD][0]
        while node != NIL:
            yield self._keys[node]
            node = self._forward[node][0]

    def items(self) -> Iterator[tuple[Any, Any]]:
        node = self._forward[HEAD][0]
        while node != NIL:
            yield self._keys[node], self._values[node]
            node = self._forward[node][0]

    def _random_level(self) -> int:
        # P(level >= k) = p ** (k - 1)
        return min(int(self._rng.geometric(1.0 - self.p)), self.max_level)

    def _find_update(self, key: Any) -> tuple[int, list[int]]:
        """
        Locate `key`.

        Returns:
            The first node with key >= `key` (or NIL) and, per level, the
            last node whose key is < `key`.
        """
        update = [HEAD] * self.max_level
        node = HEAD
        for level in range(self._level - 1, -1, -1):
            nxt = self._forward[node][level]
            while nxt != NIL and self._keys[nxt] < key:
                node = nxt
                nxt = self._forward[node][level]
            update[level] = node
        return self._forward[node][0], update

    def search(self, key: Any, default: Any = None) -> Any:
        """Value stored under `key`, or `default`."""
        node = self._find_update(key)[0]
        if node != NIL and self._keys[node] == key:
            return self._values[node]
        return default

    def insert(self, key: Any, value: Any = None) -> bool:
        """
        Store `value` under `key`.

        Returns:
            False if `key` existed (its value is replaced).
        """
        node, update = self._find_update(key)
        if node != NIL and self._keys[node] == key:
            self._values[node] = value
            return False

        height = self._random_level()
        if height > self._level:
            # update[] already points at HEAD for the new levels
            self._level = height

        if self._free:
            new = self._free.pop()
            self._keys[new] = key
            self._values[new] = value
            self._forward[new] = [NIL] * height
        else:
            new = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._forward.append([NIL] * height)

        for level in range(height):
            prev = update[level]
            self._forward[new][level] = self._forward[prev][level]
            self._forward[prev][level] = new
        self._size += 1
        return True

    def delete(self, key: Any) -> bool:
        """
        Remove `key`.

        Returns:
            False if it was not present.
        """
        node, update = self._find_update(key)
        if node == NIL or self._keys[node] != key:
            return False
        for level in range(len(self._forward[node])):
            prev = update[level]
            if self._forward[prev][level] == node:
                self._forward[prev][level] = self._forward[node][level]
        while self._level > 1 and self._forward[HEAD][self._level - 1] == NIL:
            self._level -= 1

        self._keys[node] = None
        self._values[node] = None
        self._forward[node] = []
        self._free.append(node)
        self._size -= 1
        return True

    def range(self, lo: Any, hi: Any) -> list[tuple[Any, Any]]:
        """``(key, value)`` pairs with ``lo <= key <= hi``, ascending."""
        node = self._find_update(lo)[0]
        out: list[tuple[Any, Any]] = []
        while node != NIL and not hi < self._keys[node]:
            out.append((self._keys[node], self._values[node]))
            node = self._forward[node][0]
        return out

    def first(self) -> tuple[Any, Any] | None:
        """Smallest ``(key, value)`` pair, or None."""
        node = self._forward[HEAD][0]
        if node == NIL:
            return None
        return self._keys[node], self._values[node]
