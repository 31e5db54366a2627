"""
Pattern matching via dynamic programming.
"""
from __future__ import annotations

from typing import Iterable


def regex_match(text: str, pattern: str) -> bool:
    """
    Full-match `text` against a regex supporting ``.`` and ``*``.

    ``.`` matches any single character and ``*`` matches zero or more of the
    preceding element. A leading ``*`` is treated as matching nothing.

    Args:
        text: Input string.
        pattern: Pattern string.

    Returns:
        True if the whole of `text` matches the whole of `pattern`.
    """
    n, m = len(text), len(pattern)
    # dp[i][j]: text[i:] matches pattern[j:]
    dp = [[False] * (m + 1) for _ in range(n + 1)]
    dp[n][m] = True
    for i in range(n, -1, -1):
        for j in range(m - 1, -1, -1):
            if pattern[j] == "*":
                # consumed together with the preceding element
                dp[i][j] = dp[i][j + 1] if j == 0 else False
                continue
            first = i < n and pattern[j] in (text[i], ".")
            if j + 1 < m and pattern[j + 1] == "*":
                dp[i][j] = dp[i][j + 2] or (first and dp[i + 1][j])
            else:
                dp[i][j] = first and dp[i + 1][j + 1]
    return dp[0][0]


def wildcard_match(text: str, pattern: str) -> bool:
    """
    Full-match `text` against a glob with ``?`` (one char) and ``*`` (any run).
    """
    n, m = len(text), len(pattern)
    prev = [False] * (m + 1)
    prev[0] = True
    for j in range(1, m + 1):
        prev[j] = prev[j - 1] and pattern[j - 1] == "*"
    for i in range(1, n + 1):
        curr = [False] * (m + 1)
        for j in range(1, m + 1):
            p = pattern[j - 1]
            if p == "*":
                curr[j] = curr[j - 1] or prev[j]
            elif p == "?" or p == text[i - 1]:
                curr[j] = prev[j - 1]
        prev = curr
    return prev[m]


def word_break(text: str, words: Iterable[str]) -> bool:
    """True if `text` can be segmented into a sequence of `words`."""
    vocab = set(w for w in words if w)
    if not vocab:
        return text == ""
    max_len = max(len(w) for w in vocab)
    ok = [False] * (len(text) + 1)
    ok[0] = True
    for end in range(1, len(text) + 1):
        for start in range(max(0, end - max_len), end):
            if ok[start] and text[start:end] in vocab:
                ok[end] = True
                break
    return ok[len(text)]


def word_break_all(text: str, words: Iterable[str]) -> list[str]:
    """
    All segmentations of `text` into `words`, each joined by single spaces.

    Returns:
        Sorted list of sentences; empty if `text` cannot be segmented.
    """
    vocab = set(w for w in words if w)
    n = len(text)
    if n == 0:
        return [""]
    # splits[i]: sentences covering text[i:]
    splits: list[list[str]] = [[] for _ in range(n + 1)]
    splits[n] = [""]
    for start in range(n - 1, -1, -1):
        for end in range(start + 1, n + 1):
            piece = text[start:end]
            if piece in vocab:
                for rest in splits[end]:
                    splits[start].append(piece if not rest else f"{piece} {rest}")
    return sorted(splits[0])
