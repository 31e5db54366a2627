"""
Fixed-capacity circular buffer backed by a typed NumPy array.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class RingBuffer:
    """
    FIFO ring buffer over a pre-allocated array.

    With ``overwrite=True`` (default) pushing onto a full buffer drops the
    oldest element; with ``overwrite=False`` the push is refused.

    >>> rb = RingBuffer(3, dtype=np.int64)
    >>> for v in range(5):
    ...     _ = rb.push(v)
    >>> rb.to_array().tolist()
    [2, 3, 4]
    """
    def __init__(self, capacity: int, dtype: npt.DTypeLike = np.float64, overwrite: bool = True) -> None:
        """
        Initialize an empty buffer.

        Args:
            capacity: Maximum number of elements.
            dtype: Element type of the backing array.
            overwrite: Whether a full buffer drops its oldest element on push.

        Raises:
            ValueError: If `capacity` is smaller than 1.
        """
        if capacity < 1:
            raise ValueError(f"RingBuffer capacity must be >= 1, got {capacity}.")
        self._buf = np.zeros(capacity, dtype=dtype)
        self._head = 0  # index of the oldest element
        self._size = 0
        self.overwrite = overwrite

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(capacity={self.capacity}, size={self._size}, dtype={self.dtype})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_array().tolist())

    @property
    def capacity(self) -> int:
        return int(self._buf.size)

    @property
    def dtype(self) -> np.dtype:
        return self._buf.dtype

    @property
    def is_full(self) -> bool:
        return self._size == self.capacity

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, value: Any) -> bool:
        """
        Append `value` at the newest end.

        Returns:
            False if the buffer is full and overwriting is disabled.
        """
        if self.is_full:
            if not self.overwrite:
                return False
            self._buf[self._head] = value
            self._head = (self._head + 1) % self.capacity
            return True
        self._buf[(self._head + self._size) % self.capacity] = value
        self._size += 1
        return True

    def pop(self) -> Any | None:
        """Remove and return the oldest element, or None if empty."""
        if self._size == 0:
            return None
        value = self._buf[self._head].item()
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def peek(self) -> Any | None:
        """Oldest element without removing it, or None."""
        if self._size == 0:
            return None
        return self._buf[self._head].item()

    def peek_last(self) -> Any | None:
        """Newest element without removing it, or None."""
        if self._size == 0:
            return None
        return self._buf[(self._head + self._size - 1) % self.capacity].item()

    def to_array(self) -> npt.NDArray[Any]:
        """Copy of the contents, oldest first."""
        idx = (self._head + np.arange(self._size)) % self.capacity
        return self._buf[idx]

    def mean(self) -> float:
        """Arithmetic mean of the contents, NaN when empty."""
        if self._size == 0:
            return float("nan")
        return float(self.to_array().mean())

    def clear(self) -> None:
        self._head = 0
        self._size = 0
