"""
Roman numeral conversion for the classic range 1..3999.
"""
from __future__ import annotations

ROMAN_MIN = 1
ROMAN_MAX = 3999

_SYMBOLS: tuple[tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def to_roman(n: int) -> str:
    """
    Convert an integer to its canonical Roman numeral.

    Raises:
        ValueError: If `n` is outside ``[1, 3999]``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Expected an integer, got {n!r}.")
    if not ROMAN_MIN <= n <= ROMAN_MAX:
        raise ValueError(f"Roman numerals cover {ROMAN_MIN}..{ROMAN_MAX}, got {n}.")
    parts: list[str] = []
    for value, symbol in _SYMBOLS:
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


def from_roman(numeral: str) -> int:
    """
    Parse a canonical Roman numeral (case-insensitive).

    Non-canonical spellings such as ``"IIII"`` or ``"IC"`` are rejected by
    re-encoding the parsed value and comparing.

    Raises:
        ValueError: If `numeral` is empty or not a canonical numeral.
    """
    s = numeral.strip().upper() if isinstance(numeral, str) else ""
    if not s or any(c not in _VALUES for c in s):
        raise ValueError(f"Invalid Roman numeral: {numeral!r}")
    total = 0
    for i, c in enumerate(s):
        value = _VALUES[c]
        if i + 1 < len(s) and value < _VALUES[s[i + 1]]:
            total -= value
        else:
            total += value
    if not ROMAN_MIN <= total <= ROMAN_MAX or to_roman(total) != s:
        raise ValueError(f"Invalid Roman numeral: {numeral!r}")
    return total


def is_roman(numeral: str) -> bool:
    """True if `numeral` is a canonical Roman numeral."""
    try:
        from_roman(numeral)
    except ValueError:
        return False
    return True
