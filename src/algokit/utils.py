from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Sequence

logger = logging.getLogger(__name__)


def safe_json_loads(text: str | bytes, fallback: Any = None) -> Any:
    """
    Parse JSON, returning `fallback` instead of raising.

    Args:
        text: JSON document.
        fallback: Value returned when `text` is not valid JSON.

    Returns:
        The decoded object, or `fallback`.
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError) as e:
        logger.debug(f"safe_json_loads fell back: {e}")
        return fallback


def safe_json_dumps(obj: Any, fallback: str = "", **kwargs: Any) -> str:
    """
    Serialize `obj` to JSON, returning `fallback` instead of raising.

    Circular references and non-serializable objects both end up here.
    """
    try:
        return json.dumps(obj, **kwargs)
    except (ValueError, TypeError) as e:
        logger.debug(f"safe_json_dumps fell back: {e}")
        return fallback


def is_sorted(seq: Iterable[Any], key: Callable[[Any], Any] | None = None) -> bool:
    """Return True if `seq` is pairwise non-decreasing."""
    it = iter(seq) if key is None else (key(x) for x in seq)
    try:
        prev = next(it)
    except StopIteration:
        return True
    for item in it:
        if item < prev:
            return False
        prev = item
    return True


def pairwise_non_decreasing(seq: Sequence[Any]) -> bool:
    return all(a <= b for a, b in zip(seq, seq[1:]))


def validate_index(i: int, n: int) -> int:
    """
    Normalise a possibly negative index into ``[0, n)``.

    Raises:
        IndexError: If `i` is out of range.
    """
    if i < 0:
        i += n
    if not 0 <= i < n:
        raise IndexError(f"Index {i} out of range for length {n}.")
    return i
