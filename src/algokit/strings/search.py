"""
Exact string matching and related scans.

All matchers return every (possibly overlapping) start offset in ascending
order. An empty pattern matches at every position ``0..len(text)``.
"""
from __future__ import annotations

_BRACKETS = {")": "(", "]": "[", "}": "{"}


def _failure_function(pattern: str) -> list[int]:
    """fail[i]: length of the longest proper border of pattern[:i + 1]."""
    fail = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = fail[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        fail[i] = k
    return fail


def kmp_search(text: str, pattern: str) -> list[int]:
    """Knuth-Morris-Pratt search."""
    if not pattern:
        return list(range(len(text) + 1))
    fail = _failure_function(pattern)
    hits: list[int] = []
    k = 0
    for i, c in enumerate(text):
        while k and c != pattern[k]:
            k = fail[k - 1]
        if c == pattern[k]:
            k += 1
        if k == len(pattern):
            hits.append(i - k + 1)
            k = fail[k - 1]
    return hits


def z_function(s: str) -> list[int]:
    """
    Z-array: ``z[i]`` is the length of the longest common prefix of `s` and
    ``s[i:]``. By convention ``z[0] = len(s)``.
    """
    n = len(s)
    z = [0] * n
    if n:
        z[0] = n
    lo = hi = 0
    for i in range(1, n):
        if i < hi:
            z[i] = min(hi - i, z[i - lo])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > hi:
            lo, hi = i, i + z[i]
    return z


def rabin_karp(text: str, pattern: str, base: int = 256, modulus: int = (1 << 61) - 1) -> list[int]:
    """
    Rabin-Karp search with a rolling polynomial hash.

    Candidate windows are confirmed by direct comparison, so hash collisions
    never produce false hits.
    """
    n, m = len(text), len(pattern)
    if m == 0:
        return list(range(n + 1))
    if m > n:
        return []
    high = pow(base, m - 1, modulus)
    target = window = 0
    for i in range(m):
        target = (target * base + ord(pattern[i])) % modulus
        window = (window * base + ord(text[i])) % modulus
    hits: list[int] = []
    for start in range(n - m + 1):
        if window == target and text[start:start + m] == pattern:
            hits.append(start)
        if start + m < n:
            window = ((window - ord(text[start]) * high) * base + ord(text[start + m])) % modulus
    return hits


def longest_palindromic_substring(s: str) -> str:
    """
    Manacher's algorithm. Returns the leftmost longest palindrome.
    """
    if not s:
        return ""
    # interleave with separators so even and odd palindromes look alike
    t = "\x00" + "\x00".join(s) + "\x00"
    n = len(t)
    radius = [0] * n
    center = right = 0
    for i in range(n):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while (i - radius[i] - 1 >= 0 and i + radius[i] + 1 < n
               and t[i - radius[i] - 1] == t[i + radius[i] + 1]):
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
    best = max(range(n), key=lambda i: (radius[i], -i))
    start = (best - radius[best]) // 2
    return s[start:start + radius[best]]


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket in ``()[]{}`` is closed in the right order."""
    stack: list[str] = []
    for c in s:
        if c in "([{":
            stack.append(c)
        elif c in _BRACKETS:
            if not stack or stack.pop() != _BRACKETS[c]:
                return False
    return not stack
