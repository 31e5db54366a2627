"""
Union-find and minimum spanning trees.
"""
from __future__ import annotations

import heapq
from typing import Iterable, Sequence

import numpy as np

from algokit.graphs.graph import Edge, Graph


class DisjointSet:
    """
    Union-find over ``0..n-1`` with union by rank and path halving.
    """
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {n}.")
        self.parent = np.arange(n, dtype=np.int64)
        self.rank = np.zeros(n, dtype=np.int8)
        self._n_sets = n

    def __len__(self) -> int:
        return int(self.parent.size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, n_sets={self._n_sets})"

    @property
    def n_sets(self) -> int:
        """Number of disjoint sets."""
        return self._n_sets

    def find(self, x: int) -> int:
        """Representative of the set containing `x`."""
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = int(parent[x])
        return int(x)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets of `a` and `b`.

        Returns:
            False if they were already in the same set.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        self._n_sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


def kruskal_mst(n_vertices: int, edges: Iterable[Sequence[float]]) -> tuple[list[Edge], float]:
    """
    Kruskal's minimum spanning forest.

    Args:
        n_vertices: Number of vertices.
        edges: ``(u, v, weight)`` tuples; direction is ignored.

    Returns:
        ``(tree_edges, total_weight)`` with edges in the order they were
        accepted (non-decreasing weight). Disconnected input yields a forest.
    """
    graph = Graph.from_edges(n_vertices, edges)
    candidates = sorted(graph.edges(), key=lambda e: e[2])
    dsu = DisjointSet(n_vertices)
    tree: list[Edge] = []
    total = 0.0
    for u, v, w in candidates:
        if dsu.union(u, v):
            tree.append((u, v, w))
            total += w
            if len(tree) == n_vertices - 1:
                break
    return tree, total


def prim_mst(graph: Graph) -> tuple[list[Edge], float]:
    """
    Lazy Prim's minimum spanning forest, grown from vertex 0, 1, ... in turn.

    Raises:
        ValueError: If the graph is directed.
    """
    if graph.directed:
        raise ValueError("Prim's algorithm requires an undirected graph.")
    indptr, indices, _ = graph.adjacency_lists()
    weights = graph.matrix.data.tolist()
    in_tree = [False] * graph.n_vertices
    tree: list[Edge] = []
    total = 0.0

    for root in range(graph.n_vertices):
        if in_tree[root]:
            continue
        in_tree[root] = True
        heap = [(weights[p], root, indices[p]) for p in range(indptr[root], indptr[root + 1])]
        heapq.heapify(heap)
        while heap:
            w, u, v = heapq.heappop(heap)
            if in_tree[v]:
                continue
            in_tree[v] = True
            tree.append((u, v, w))
            total += w
            for p in range(indptr[v], indptr[v + 1]):
                if not in_tree[indices[p]]:
                    heapq.heappush(heap, (weights[p], v, indices[p]))
    return tree, total
