"""
Graph Traversal
===============
Breadth/depth-first orders, unweighted and weighted shortest paths, and
topological ordering. All traversals are iterative.
"""
from __future__ import annotations

from collections import deque
import heapq
import logging
from typing import TYPE_CHECKING

import numpy as np

from algokit.graphs.graph import Graph
from algokit.graphs.spanning import DisjointSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _check_vertex(graph: Graph, u: int) -> None:
    if not 0 <= u < graph.n_vertices:
        raise ValueError(f"Vertex {u} out of range for {graph.n_vertices} vertices.")


def bfs_order(graph: Graph, source: int) -> list[int]:
    """Vertices reachable from `source` in breadth-first order."""
    _check_vertex(graph, source)
    indptr, indices, _ = graph.adjacency_lists()
    seen = [False] * graph.n_vertices
    seen[source] = True
    order: list[int] = []
    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        for p in range(indptr[v], indptr[v + 1]):
            w = indices[p]
            if not seen[w]:
                seen[w] = True
                queue.append(w)
    return order


def dfs_order(graph: Graph, source: int) -> list[int]:
    """
    Vertices reachable from `source` in depth-first preorder.

    Produces the same order as the recursive formulation visiting neighbors
    in ascending order.
    """
    _check_vertex(graph, source)
    indptr, indices, _ = graph.adjacency_lists()
    seen = [False] * graph.n_vertices
    order: list[int] = []
    stack = [source]
    while stack:
        v = stack.pop()
        if seen[v]:
            continue
        seen[v] = True
        order.append(v)
        for p in range(indptr[v + 1] - 1, indptr[v] - 1, -1):
            if not seen[indices[p]]:
                stack.append(indices[p])
    return order


def shortest_path_lengths(graph: Graph, source: int) -> npt.NDArray[np.int64]:
    """
    Hop distance from `source` to every vertex, -1 where unreachable.
    """
    _check_vertex(graph, source)
    indptr, indices, _ = graph.adjacency_lists()
    dist = np.full(graph.n_vertices, -1, dtype=np.int64)
    dist[source] = 0
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for p in range(indptr[v], indptr[v + 1]):
            w = indices[p]
            if dist[w] == -1:
                dist[w] = dist[v] + 1
                queue.append(w)
    return dist


def dijkstra(graph: Graph, source: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.int64]]:
    """
    Single-source shortest paths for non-negative weights.

    Args:
        graph: Weighted graph.
        source: Start vertex.

    Raises:
        ValueError: If the graph has a negative edge weight.

    Returns:
        ``(dist, prev)``: distances (``inf`` where unreachable) and the
        predecessor of each vertex on its shortest path (the source is its
        own predecessor, unreachable vertices get -1).
    """
    _check_vertex(graph, source)
    if graph.matrix.data.size and graph.matrix.data.min() < 0:
        raise ValueError("Dijkstra requires non-negative edge weights.")

    indptr, indices, _ = graph.adjacency_lists()
    weights = graph.matrix.data.tolist()
    dist = np.full(graph.n_vertices, np.inf, dtype=np.float64)
    prev = np.full(graph.n_vertices, -1, dtype=np.int64)
    done = [False] * graph.n_vertices
    dist[source] = 0.0
    prev[source] = source
    heap: list[tuple[float, int]] = [(0.0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if done[v]:
            continue
        done[v] = True
        for p in range(indptr[v], indptr[v + 1]):
            w = indices[p]
            nd = d + weights[p]
            if nd < dist[w]:
                dist[w] = nd
                prev[w] = v
                heapq.heappush(heap, (nd, w))
    return dist, prev


def reconstruct_path(prev: npt.NDArray[np.int64], target: int, source: int | None = None) -> list[int]:
    """
    Walk predecessor links back from `target`.

    Args:
        prev: Predecessor array from :func:`dijkstra`; the source points to
            itself and unreachable vertices hold -1.
        target: End vertex.
        source: Start vertex. When given, an empty list is returned unless
            the walk ends there.

    Returns:
        The vertex path ``[source, ..., target]``, or an empty list when
        `target` is unreachable.
    """
    path = [int(target)]
    v = int(target)
    while int(prev[v]) != v:
        v = int(prev[v])
        if v == -1:
            return []
        path.append(v)
    path.reverse()
    if source is not None and path[0] != source:
        return []
    return path


def topological_sort(graph: Graph) -> list[int] | None:
    """
    Kahn's algorithm; smallest available vertex first.

    Returns:
        A topological order, or None if the graph has a cycle.

    Raises:
        ValueError: If the graph is undirected.
    """
    if not graph.directed:
        raise ValueError("Topological sort requires a directed graph.")
    indptr, indices, _ = graph.adjacency_lists()
    in_degree = np.bincount(graph.matrix.indices, minlength=graph.n_vertices).tolist()
    ready = [v for v in range(graph.n_vertices) if in_degree[v] == 0]
    heapq.heapify(ready)
    order: list[int] = []
    while ready:
        v = heapq.heappop(ready)
        order.append(v)
        for p in range(indptr[v], indptr[v + 1]):
            w = indices[p]
            in_degree[w] -= 1
            if in_degree[w] == 0:
                heapq.heappush(ready, w)
    if len(order) != graph.n_vertices:
        logger.debug(f"Cycle detected: ordered {len(order)} of {graph.n_vertices} vertices.")
        return None
    return order


def has_cycle(graph: Graph) -> bool:
    """
    True if the graph contains a cycle.

    For undirected graphs a self-loop or a parallel edge counts as a cycle.
    """
    if graph.directed:
        return topological_sort(graph) is None

    dsu = DisjointSet(graph.n_vertices)
    for u, v, _ in graph.edges():
        if not dsu.union(u, v):
            return True
    return False
