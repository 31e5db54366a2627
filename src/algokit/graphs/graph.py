"""
Graph Storage
=============
Immutable adjacency structure shared by the graph algorithms.

Why CSR?
--------
Vertices are plain integers ``0..n-1`` and each vertex's out-edges sit in a
contiguous slice of the ``indices`` / ``data`` arrays of a
``scipy.sparse.csr_matrix``. Algorithms walk those slices with integer
cursors, so traversal state is a handful of integer arrays instead of node
objects.

Undirected graphs store every edge in both directions. Each stored entry
also carries the id of the input edge it came from, which lets undirected
algorithms tell a parallel edge apart from the tree edge they arrived by.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

import numpy as np
import scipy as sp

if TYPE_CHECKING:
    import numpy.typing as npt

Edge = tuple[int, int, float]


class Graph:
    """
    Directed or undirected multigraph over vertices ``0..n_vertices-1``.
    """
    def __init__(
        self,
        n_vertices: int,
        src: npt.NDArray[np.int64],
        dst: npt.NDArray[np.int64],
        weights: npt.NDArray[np.float64],
        directed: bool = False,
    ) -> None:
        """
        Initialize the graph from parallel edge arrays.

        Args:
            n_vertices: Number of vertices.
            src: (m, ) source vertex of each edge.
            dst: (m, ) target vertex of each edge.
            weights: (m, ) weight of each edge.
            directed: Whether edges are one-way.

        Raises:
            ValueError: If the arrays differ in length or reference a vertex
                outside ``[0, n_vertices)``.
        """
        if n_vertices < 0:
            raise ValueError(f"n_vertices must be non-negative, got {n_vertices}.")
        src = np.asarray(src, dtype=np.int64)
        dst = np.asarray(dst, dtype=np.int64)
        weights = np.asarray(weights, dtype=np.float64)
        if not (src.shape == dst.shape == weights.shape):
            raise ValueError("src, dst and weights must have the same length.")
        if src.size and (min(src.min(), dst.min()) < 0 or max(src.max(), dst.max()) >= n_vertices):
            raise ValueError(f"Edge endpoint out of range for {n_vertices} vertices.")

        self.n_vertices = n_vertices
        self.directed = directed
        self._src = src
        self._dst = dst
        self._weights = weights

        edge_ids = np.arange(src.size, dtype=np.int64)
        if directed:
            rows, cols, data, ids = src, dst, weights, edge_ids
        else:
            # self-loops are stored once
            mirror = src != dst
            rows = np.concatenate([src, dst[mirror]])
            cols = np.concatenate([dst, src[mirror]])
            data = np.concatenate([weights, weights[mirror]])
            ids = np.concatenate([edge_ids, edge_ids[mirror]])

        # neighbors in ascending order, ties by input order
        order = np.lexsort((ids, cols, rows))
        rows, cols, data, ids = rows[order], cols[order], data[order], ids[order]
        indptr = np.zeros(n_vertices + 1, dtype=np.int64)
        np.cumsum(np.bincount(rows, minlength=n_vertices), out=indptr[1:])

        # Built from (data, indices, indptr) so parallel edges and explicit
        # zero weights are kept as separate entries.
        self.matrix = sp.sparse.csr_matrix((data, cols, indptr), shape=(n_vertices, n_vertices))
        self._edge_ids = ids

    @classmethod
    def from_edges(
        cls,
        n_vertices: int,
        edges: Iterable[Sequence[float]],
        directed: bool = False,
    ) -> Graph:
        """
        Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Unweighted edges get weight 1.0.
        """
        src: list[int] = []
        dst: list[int] = []
        weights: list[float] = []
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                w = 1.0
            elif len(edge) == 3:
                u, v, w = edge
            else:
                raise ValueError(f"Edges must be (u, v) or (u, v, w), got {edge!r}.")
            src.append(int(u))
            dst.append(int(v))
            weights.append(float(w))
        return cls(
            n_vertices,
            np.array(src, dtype=np.int64),
            np.array(dst, dtype=np.int64),
            np.array(weights, dtype=np.float64),
            directed=directed,
        )

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"{self.__class__.__name__}(n_vertices={self.n_vertices}, n_edges={self.n_edges}, {kind})"

    @property
    def n_edges(self) -> int:
        """Number of input edges (an undirected edge counts once)."""
        return int(self._src.size)

    @property
    def indptr(self) -> npt.NDArray[np.int32]:
        return self.matrix.indptr

    @property
    def indices(self) -> npt.NDArray[np.int32]:
        return self.matrix.indices

    @property
    def edge_ids(self) -> npt.NDArray[np.int64]:
        """Input edge id of every stored CSR entry."""
        return self._edge_ids

    def neighbors(self, u: int) -> npt.NDArray[np.int32]:
        """Out-neighbors of `u`, ascending."""
        return self.matrix.indices[self.matrix.indptr[u]:self.matrix.indptr[u + 1]]

    def weights(self, u: int) -> npt.NDArray[np.float64]:
        """Weights of the out-edges of `u`, aligned with :meth:`neighbors`."""
        return self.matrix.data[self.matrix.indptr[u]:self.matrix.indptr[u + 1]]

    def degree(self, u: int) -> int:
        """Out-degree of `u` (a self-loop counts once)."""
        return int(self.matrix.indptr[u + 1] - self.matrix.indptr[u])

    def edges(self) -> Iterator[Edge]:
        """Input edges in insertion order."""
        for u, v, w in zip(self._src.tolist(), self._dst.tolist(), self._weights.tolist()):
            yield u, v, w

    def reversed(self) -> Graph:
        """Transpose graph. An undirected graph is its own transpose."""
        if not self.directed:
            return self
        return Graph(self.n_vertices, self._dst, self._src, self._weights, directed=True)

    def adjacency_lists(self) -> tuple[list[int], list[int], list[int]]:
        """
        Plain-list copies of ``indptr``, ``indices`` and ``edge_ids``.
        """
        return self.matrix.indptr.tolist(), self.matrix.indices.tolist(), self._edge_ids.tolist()
