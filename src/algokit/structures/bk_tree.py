"""
Burkhard-Keller tree for approximate matching under a discrete metric.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from algokit.dynamic.sequences import edit_distance

logger = logging.getLogger(__name__)

T = TypeVar("T")

DistanceFunc = Callable[[Any, Any], int]


class BKTree(Generic[T]):
    """
    BK-tree over items compared by an integer metric.

    Node ``i`` holds ``items[i]``; ``children[i]`` maps an edge distance to
    the child id. Lookups use the triangle inequality to skip every child
    whose edge distance lies outside ``[d - k, d + k]``.
    """
    def __init__(self, distance: DistanceFunc = edit_distance, items: Iterable[T] | None = None) -> None:
        """
        Args:
            distance: Metric returning non-negative integers.
            items: Optional initial items.
        """
        self.distance = distance
        self._items: list[T] = []
        self._children: list[dict[int, int]] = []
        if items:
            for item in items:
                self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return bool(self.search(item, 0))

    def add(self, item: T) -> bool:
        """
        Insert `item`.

        Returns:
            False if an item at distance 0 is already stored.
        """
        if not self._items:
            self._items.append(item)
            self._children.append({})
            return True
        node = 0
        while True:
            d = self.distance(item, self._items[node])
            if d == 0:
                return False
            child = self._children[node].get(d)
            if child is None:
                self._items.append(item)
                self._children.append({})
                self._children[node][d] = len(self._items) - 1
                return True
            node = child

    def search(self, query: Any, max_distance: int) -> list[tuple[int, T]]:
        """
        All items within `max_distance` of `query`.

        Returns:
            ``(distance, item)`` pairs sorted by distance, then insertion order.
        """
        if not self._items or max_distance < 0:
            return []
        hits: list[tuple[int, int]] = []
        stack = [0]
        evaluated = 0
        while stack:
            node = stack.pop()
            d = self.distance(query, self._items[node])
            evaluated += 1
            if d <= max_distance:
                hits.append((d, node))
            lo, hi = d - max_distance, d + max_distance
            for edge, child in self._children[node].items():
                if lo <= edge <= hi:
                    stack.append(child)
        logger.debug(f"BK-tree search evaluated {evaluated}/{len(self._items)} items.")
        hits.sort()
        return [(d, self._items[i]) for d, i in hits]

    def nearest(self, query: Any) -> tuple[int, T] | None:
        """
        Closest stored item, ties broken by insertion order.

        Returns:
            ``(distance, item)`` or None for an empty tree.
        """
        if not self._items:
            return None
        best_d, best_i = None, -1
        stack = [0]
        while stack:
            node = stack.pop()
            d = self.distance(query, self._items[node])
            if best_d is None or (d, node) < (best_d, best_i):
                best_d, best_i = d, node
            for edge, child in self._children[node].items():
                if abs(edge - d) <= best_d:
                    stack.append(child)
        return best_d, self._items[best_i]
