"""
Burrows-Wheeler Transform
=========================
Block-sorting transform plus the move-to-front and run-length stages that
usually follow it in a compressor.

The transform returns the last column together with the row index of the
original string, so no end-of-text sentinel character is needed.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


def _rotation_order(text: str) -> list[int]:
    """
    Start offsets of the cyclic rotations of `text` in sorted order.

    Prefix doubling: ranks of length-``2k`` rotation prefixes are derived
    from pairs of length-``k`` ranks.
    """
    n = len(text)
    rank = np.array([ord(c) for c in text], dtype=np.int64)
    k = 1
    offsets = np.arange(n, dtype=np.int64)
    while True:
        second = rank[(offsets + k) % n]
        order = np.lexsort((second, rank))
        pairs = np.stack([rank[order], second[order]], axis=1)
        changed = np.any(pairs[1:] != pairs[:-1], axis=1)
        new_rank = np.empty(n, dtype=np.int64)
        new_rank[order] = np.concatenate([[0], np.cumsum(changed)])
        rank = new_rank
        if rank.max() == n - 1 or k >= n:
            return order.tolist()
        k *= 2


def bwt_transform(text: str) -> tuple[str, int]:
    """
    Forward transform.

    Args:
        text: Input string.

    Returns:
        ``(last_column, index)`` where `index` is the row of `text` in the
        sorted rotation matrix. Equal rotations (periodic input) keep their
        offset order.

    Example:
        >>> bwt_transform("banana")
        ('nnbaaa', 3)
    """
    if not text:
        return "", 0
    order = _rotation_order(text)
    last = "".join(text[(i - 1) % len(text)] for i in order)
    return last, order.index(0)


def inverse_bwt(last: str, index: int) -> str:
    """
    Invert :func:`bwt_transform` via the last-to-first mapping.

    Raises:
        ValueError: If `index` is out of range for a non-empty `last`.
    """
    n = len(last)
    if n == 0:
        return ""
    if not 0 <= index < n:
        raise ValueError(f"BWT index {index} out of range for length {n}.")
    # stable sort of the last column gives the first column
    first_to_last = sorted(range(n), key=lambda i: last[i])
    out: list[str] = []
    row = first_to_last[index]
    for _ in range(n):
        out.append(last[row])
        row = first_to_last[row]
    return "".join(out)


def move_to_front_encode(text: str, alphabet: Sequence[str] | None = None) -> list[int]:
    """
    Move-to-front coding.

    Args:
        text: Symbols to encode.
        alphabet: Initial symbol table; defaults to the sorted distinct
            characters of `text`.

    Raises:
        ValueError: If `text` contains a symbol missing from `alphabet`.
    """
    table = list(alphabet) if alphabet is not None else sorted(set(text))
    codes: list[int] = []
    for c in text:
        try:
            i = table.index(c)
        except ValueError:
            raise ValueError(f"Symbol {c!r} not in alphabet.") from None
        codes.append(i)
        table.insert(0, table.pop(i))
    return codes


def move_to_front_decode(codes: Iterable[int], alphabet: Sequence[str]) -> str:
    """Inverse of :func:`move_to_front_encode` given the same initial alphabet."""
    table = list(alphabet)
    out: list[str] = []
    for i in codes:
        c = table.pop(i)
        out.append(c)
        table.insert(0, c)
    return "".join(out)


def run_length_encode(text: str) -> list[tuple[str, int]]:
    """Collapse runs of equal characters into ``(char, count)`` pairs."""
    runs: list[tuple[str, int]] = []
    for c in text:
        if runs and runs[-1][0] == c:
            runs[-1] = (c, runs[-1][1] + 1)
        else:
            runs.append((c, 1))
    return runs


def run_length_decode(runs: Iterable[tuple[str, int]]) -> str:
    return "".join(c * count for c, count in runs)
