"""
Comparison Sorts
================
Classic comparison-based sorting routines.

Every routine takes any iterable of mutually comparable items plus an
optional `key` callable, leaves the input untouched and returns a new list
in ascending order. The routines permute a list of indices, so `key` is
evaluated once per item.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

KeyFunc = Callable[[Any], Any]


def _prepare(values: Iterable[T], key: KeyFunc | None) -> tuple[list[T], list[Any]]:
    items = list(values)
    keys = items if key is None else [key(x) for x in items]
    return items, list(keys)


def _reorder(items: list[T], order: list[int]) -> list[T]:
    return [items[i] for i in order]


def bubble_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """
    Bubble sort with early exit when a pass makes no swap. Stable.
    """
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)
    for end in range(n - 1, 0, -1):
        swapped = False
        for j in range(end):
            if keys[order[j + 1]] < keys[order[j]]:
                order[j], order[j + 1] = order[j + 1], order[j]
                swapped = True
        if not swapped:
            break
    return _reorder(items, order)


def insertion_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Insertion sort. Stable."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    for i in range(1, len(order)):
        current = order[i]
        j = i - 1
        while j >= 0 and keys[current] < keys[order[j]]:
            order[j + 1] = order[j]
            j -= 1
        order[j + 1] = current
    return _reorder(items, order)


def selection_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Selection sort. Not stable."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if keys[order[j]] < keys[order[smallest]]:
                smallest = j
        if smallest != i:
            order[i], order[smallest] = order[smallest], order[i]
    return _reorder(items, order)


def gnome_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Gnome sort. Stable."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    pos = 0
    while pos < len(order):
        if pos == 0 or not keys[order[pos]] < keys[order[pos - 1]]:
            pos += 1
        else:
            order[pos], order[pos - 1] = order[pos - 1], order[pos]
            pos -= 1
    return _reorder(items, order)


def cocktail_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Bidirectional bubble sort. Stable."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    lo, hi = 0, len(order) - 1
    swapped = True
    while swapped and lo < hi:
        swapped = False
        for j in range(lo, hi):
            if keys[order[j + 1]] < keys[order[j]]:
                order[j], order[j + 1] = order[j + 1], order[j]
                swapped = True
        hi -= 1
        for j in range(hi, lo, -1):
            if keys[order[j]] < keys[order[j - 1]]:
                order[j], order[j - 1] = order[j - 1], order[j]
                swapped = True
        lo += 1
    return _reorder(items, order)


def shell_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """
    Shell sort using Ciura's gap sequence, extended by ~2.25x for long inputs.
    """
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)

    gaps = [1, 4, 10, 23, 57, 132, 301, 701]
    while gaps[-1] < n // 2:
        gaps.append(int(gaps[-1] * 2.25))

    for gap in reversed(gaps):
        for i in range(gap, n):
            current = order[i]
            j = i
            while j >= gap and keys[current] < keys[order[j - gap]]:
                order[j] = order[j - gap]
                j -= gap
            order[j] = current
    return _reorder(items, order)


def comb_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Comb sort with shrink factor 1.3."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)
    gap = n
    done = False
    while not done:
        gap = max(1, int(gap / 1.3))
        done = gap == 1
        for i in range(n - gap):
            if keys[order[i + gap]] < keys[order[i]]:
                order[i], order[i + gap] = order[i + gap], order[i]
                done = False
    return _reorder(items, order)


def merge_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """
    Bottom-up merge sort. Stable, ``O(n log n)`` and non-recursive.
    """
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)
    width = 1
    buffer = order[:]
    while width < n:
        for lo in range(0, n, 2 * width):
            mid = min(lo + width, n)
            hi = min(lo + 2 * width, n)
            i, j, k = lo, mid, lo
            while i < mid and j < hi:
                # <= keeps equal keys in their original order
                if keys[order[i]] <= keys[order[j]]:
                    buffer[k] = order[i]
                    i += 1
                else:
                    buffer[k] = order[j]
                    j += 1
                k += 1
            buffer[k:k + mid - i] = order[i:mid]
            k += mid - i
            buffer[k:k + hi - j] = order[j:hi]
        order, buffer = buffer, order
        width *= 2
    return _reorder(items, order)


def quick_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """
    Quick sort with median-of-three pivots and an explicit range stack.

    Small ranges are finished with insertion sort. The larger half is pushed
    first so the stack stays ``O(log n)`` deep.
    """
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    stack: list[tuple[int, int]] = [(0, len(order) - 1)]

    while stack:
        lo, hi = stack.pop()
        if hi - lo < 16:
            for i in range(lo + 1, hi + 1):
                current = order[i]
                j = i - 1
                while j >= lo and keys[current] < keys[order[j]]:
                    order[j + 1] = order[j]
                    j -= 1
                order[j + 1] = current
            continue

        mid = (lo + hi) // 2
        if keys[order[mid]] < keys[order[lo]]:
            order[lo], order[mid] = order[mid], order[lo]
        if keys[order[hi]] < keys[order[lo]]:
            order[lo], order[hi] = order[hi], order[lo]
        if keys[order[hi]] < keys[order[mid]]:
            order[mid], order[hi] = order[hi], order[mid]
        pivot = keys[order[mid]]

        # Hoare partition
        i, j = lo, hi
        while i <= j:
            while keys[order[i]] < pivot:
                i += 1
            while pivot < keys[order[j]]:
                j -= 1
            if i <= j:
                order[i], order[j] = order[j], order[i]
                i += 1
                j -= 1

        left, right = (lo, j), (i, hi)
        if j - lo > hi - i:
            stack.extend([left, right])
        else:
            stack.extend([right, left])
    return _reorder(items, order)


def heap_sort(values: Iterable[T], key: KeyFunc | None = None) -> list[T]:
    """Heap sort on an implicit max-heap with iterative sift-down."""
    items, keys = _prepare(values, key)
    order = list(range(len(items)))
    n = len(order)

    def sift_down(start: int, end: int) -> None:
        root = start
        while True:
            child = 2 * root + 1
            if child >= end:
                return
            if child + 1 < end and keys[order[child]] < keys[order[child + 1]]:
                child += 1
            if keys[order[root]] < keys[order[child]]:
                order[root], order[child] = order[child], order[root]
                root = child
            else:
                return

    for start in range(n // 2 - 1, -1, -1):
        sift_down(start, n)
    for end in range(n - 1, 0, -1):
        order[0], order[end] = order[end], order[0]
        sift_down(0, end)
    return _reorder(items, order)


ALL_SORTS: dict[str, Callable[..., list[Any]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "gnome": gnome_sort,
    "cocktail": cocktail_sort,
    "shell": shell_sort,
    "comb": comb_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}
