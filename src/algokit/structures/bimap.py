"""
Bidirectional map.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class BiMap(Generic[K, V]):
    """
    One-to-one mapping with O(1) lookup in both directions.

    Binding a key that already exists, or a value that is already bound to a
    different key, evicts the stale binding first, so no key or value ever
    appears twice.

    >>> m = BiMap()
    >>> m.set("a", 1); m.set("b", 1)
    >>> m.get_by_key("a") is None, m.get_by_value(1)
    (True, 'b')
    """
    __slots__ = ("_forward", "_backward")

    def __init__(self, items: dict[K, V] | None = None) -> None:
        self._forward: dict[K, V] = {}
        self._backward: dict[V, K] = {}
        if items:
            for k, v in items.items():
                self.set(k, v)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._forward!r})"

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BiMap):
            return NotImplemented
        return self._forward == other._forward

    def set(self, key: K, value: V) -> None:
        """Bind `key` <-> `value`, evicting any conflicting bindings."""
        if key in self._forward:
            del self._backward[self._forward[key]]
        if value in self._backward:
            del self._forward[self._backward[value]]
        self._forward[key] = value
        self._backward[value] = key

    def get_by_key(self, key: K, default: V | None = None) -> V | None:
        return self._forward.get(key, default)

    def get_by_value(self, value: V, default: K | None = None) -> K | None:
        return self._backward.get(value, default)

    def has_key(self, key: K) -> bool:
        return key in self._forward

    def has_value(self, value: V) -> bool:
        return value in self._backward

    def delete_by_key(self, key: K) -> bool:
        """Remove the binding of `key`. Returns False if there was none."""
        if key not in self._forward:
            return False
        del self._backward[self._forward.pop(key)]
        return True

    def delete_by_value(self, value: V) -> bool:
        """Remove the binding of `value`. Returns False if there was none."""
        if value not in self._backward:
            return False
        del self._forward[self._backward.pop(value)]
        return True

    def inverse(self) -> BiMap[V, K]:
        """A new map with keys and values swapped."""
        inv: BiMap[V, K] = BiMap()
        inv._forward = dict(self._backward)
        inv._backward = dict(self._forward)
        return inv

    def keys(self):
        return self._forward.keys()

    def values(self):
        return self._forward.values()

    def items(self):
        return self._forward.items()

    def clear(self) -> None:
        self._forward.clear()
        self._backward.clear()
