"""
Range Query Trees
=================
Segment tree for associative range queries and Fenwick tree for prefix
sums, both stored in flat NumPy arrays and updated bottom-up.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

from algokit.utils import validate_index

if TYPE_CHECKING:
    import numpy.typing as npt

_NAMED_OPS: dict[str, np.ufunc] = {
    "sum": np.add,
    "min": np.minimum,
    "max": np.maximum,
}


def _identity(op: np.ufunc, dtype: np.dtype) -> Any:
    """Neutral element of `op` for `dtype`."""
    if op is np.minimum:
        return np.iinfo(dtype).max if np.issubdtype(dtype, np.integer) else np.inf
    if op is np.maximum:
        return np.iinfo(dtype).min if np.issubdtype(dtype, np.integer) else -np.inf
    if op.identity is None:
        raise ValueError(f"Operation {op.__name__} has no identity element.")
    return op.identity


class SegmentTree:
    """
    Iterative segment tree over ``2n`` slots.

    Leaves live at ``tree[n:2n]`` and node ``i`` combines ``2i`` and
    ``2i + 1``. The operation must be associative; it need not be
    commutative because left and right partial results are kept apart.
    """
    def __init__(self, values: Sequence[Any] | npt.ArrayLike, op: str | np.ufunc = "sum") -> None:
        """
        Build the tree.

        Args:
            values: Initial leaf values.
            op: ``"sum"``, ``"min"``, ``"max"`` or a binary NumPy ufunc with
                an identity element.

        Raises:
            ValueError: If `op` is unknown or has no identity.
        """
        if isinstance(op, str):
            if op not in _NAMED_OPS:
                raise ValueError(f"Unknown operation {op!r}; expected one of {sorted(_NAMED_OPS)}.")
            op = _NAMED_OPS[op]
        leaves = np.asarray(values)
        if leaves.ndim != 1:
            raise ValueError("SegmentTree expects a one-dimensional sequence.")
        if leaves.dtype == object or leaves.dtype == bool:
            leaves = leaves.astype(np.float64)

        self.op = op
        self.n = int(leaves.size)
        self.identity = _identity(op, leaves.dtype)
        self.tree = np.full(2 * self.n, self.identity, dtype=leaves.dtype)
        self.tree[self.n:] = leaves
        for i in range(self.n - 1, 0, -1):
            self.tree[i] = op(self.tree[2 * i], self.tree[2 * i + 1])

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n={self.n}, op={self.op.__name__})"

    def __getitem__(self, i: int) -> Any:
        return self.tree[self.n + validate_index(i, self.n)].item()

    def query(self, lo: int, hi: int) -> Any:
        """
        Combine ``values[lo..hi]`` (inclusive).

        Raises:
            IndexError: If the range is empty or out of bounds.
        """
        if not 0 <= lo <= hi < self.n:
            raise IndexError(f"Invalid range [{lo}, {hi}] for length {self.n}.")
        op, tree = self.op, self.tree
        left = right = self.identity
        l, r = lo + self.n, hi + self.n + 1
        while l < r:
            if l & 1:
                left = op(left, tree[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(tree[r], right)
            l >>= 1
            r >>= 1
        result = op(left, right)
        return result.item() if isinstance(result, np.generic) else result

    def update(self, i: int, value: Any) -> None:
        """
        Set ``values[i] = value`` and refresh its ancestors.

        Leaf storage is widened first when `value` does not fit the current
        dtype, so an integer tree updated with a float becomes a float tree.

        Raises:
            IndexError: If `i` is out of range.
            TypeError: If `value` is not numeric or the operation does not
                support the widened dtype.
        """
        p = validate_index(i, self.n) + self.n
        self._fit(value)
        self.tree[p] = value
        while p > 1:
            p >>= 1
            self.tree[p] = self.op(self.tree[2 * p], self.tree[2 * p + 1])

    def _fit(self, value: Any) -> None:
        scalar = np.min_scalar_type(value)
        if np.can_cast(scalar, self.tree.dtype, "safe"):
            return
        dtype = np.result_type(self.tree.dtype, scalar)
        if dtype.kind not in "iuf":
            raise TypeError(f"Cannot store {value!r} in a {self.tree.dtype} segment tree.")
        try:
            self.op.resolve_dtypes((dtype, dtype, None))
        except TypeError as e:
            raise TypeError(f"Operation {self.op.__name__} does not support {dtype} values.") from e
        self.tree = self.tree.astype(dtype)
        self.identity = _identity(self.op, dtype)

    def to_array(self) -> npt.NDArray[Any]:
        """Copy of the current leaf values."""
        return self.tree[self.n:].copy()


class FenwickTree:
    """
    Binary indexed tree for prefix sums with point updates.
    """
    def __init__(self, size_or_values: int | Sequence[float] | npt.ArrayLike, dtype: npt.DTypeLike = None) -> None:
        """
        Args:
            size_or_values: Either the number of zero-initialised slots or the
                initial values.
            dtype: Element type; inferred from the values (int64 for a size).
        """
        if isinstance(size_or_values, (int, np.integer)):
            values = np.zeros(int(size_or_values), dtype=dtype or np.int64)
        else:
            values = np.asarray(size_or_values, dtype=dtype)
        self.n = int(values.size)
        # 1-based internal array
        self._tree = np.zeros(self.n + 1, dtype=values.dtype)
        self._tree[1:] = values
        for i in range(1, self.n + 1):
            parent = i + (i & -i)
            if parent <= self.n:
                self._tree[parent] += self._tree[i]

    def __len__(self) -> int:
        return self.n

    def add(self, i: int, delta: float) -> None:
        """Add `delta` to ``values[i]``."""
        i = validate_index(i, self.n) + 1
        while i <= self.n:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, i: int) -> Any:
        """
        Sum of ``values[0..i]`` inclusive.

        ``i = -1`` names the empty prefix and gives 0. Negative indices do
        not wrap here.

        Raises:
            IndexError: If `i` is outside ``-1..n-1``.
        """
        if not -1 <= i < self.n:
            raise IndexError(f"Index {i} out of range for length {self.n}.")
        total = self._tree.dtype.type(0)
        i += 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total.item()

    def range_sum(self, lo: int, hi: int) -> Any:
        """Sum of ``values[lo..hi]`` inclusive."""
        if not 0 <= lo <= hi < self.n:
            raise IndexError(f"Invalid range [{lo}, {hi}] for length {self.n}.")
        return self.prefix_sum(hi) - (self.prefix_sum(lo - 1) if lo > 0 else 0)
