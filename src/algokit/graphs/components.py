"""
Graph Components
================
Connected and strongly connected components, cut vertices, bridges,
biconnected components and the block-cut tree.

Every DFS here keeps an explicit work-list of ``(vertex, cursor)`` pairs,
where the cursor is the position in the vertex's CSR slice of the next edge
to examine. Depth is bounded by the heap, not by the interpreter stack.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

import numpy as np

from algokit.graphs.graph import Graph
from algokit.graphs.spanning import DisjointSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def connected_components(graph: Graph) -> npt.NDArray[np.int64]:
    """
    Component label for every vertex.

    Directed graphs are treated as undirected (weak connectivity). Labels are
    numbered ``0, 1, ...`` in order of each component's smallest vertex.
    """
    dsu = DisjointSet(graph.n_vertices)
    for u, v, _ in graph.edges():
        dsu.union(u, v)
    labels = np.empty(graph.n_vertices, dtype=np.int64)
    seen: dict[int, int] = {}
    for v in range(graph.n_vertices):
        labels[v] = seen.setdefault(dsu.find(v), len(seen))
    return labels


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """
    Tarjan's strongly connected components.

    Args:
        graph: Directed graph (an undirected graph yields its connected
            components).

    Returns:
        Components as sorted vertex lists, in reverse topological order of
        the condensation (sink components first).
    """
    n = graph.n_vertices
    indptr, indices, _ = graph.adjacency_lists()
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    for root in range(n):
        if index[root] != -1:
            continue
        index[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, indptr[root])]

        while work:
            v, p = work[-1]
            if p < indptr[v + 1]:
                work[-1] = (v, p + 1)
                w = indices[p]
                if index[w] == -1:
                    index[w] = low[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack[w] = True
                    work.append((w, indptr[w]))
                elif on_stack[w]:
                    low[v] = min(low[v], index[w])
                continue

            work.pop()
            if work:
                u = work[-1][0]
                low[u] = min(low[u], low[v])
            if low[v] == index[v]:
                component: list[int] = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    if w == v:
                        break
                component.sort()
                components.append(component)

    logger.debug(f"Found {len(components)} strongly connected components in {graph!r}.")
    return components


@dataclass
class _BiconnectedResult:
    is_cut: list[bool]
    bridges: list[tuple[int, int]]
    components: list[list[tuple[int, int]]]


def _biconnected_dfs(graph: Graph) -> _BiconnectedResult:
    """
    Hopcroft-Tarjan low-link DFS collecting cut vertices, bridges and edge
    blocks in one pass.

    The tree edge into a vertex is identified by its input edge id, so a
    parallel edge back to the parent still counts as a back edge. Self-loops
    belong to no block.
    """
    if graph.directed:
        raise ValueError("Biconnectivity is defined for undirected graphs only.")

    n = graph.n_vertices
    indptr, indices, edge_ids = graph.adjacency_lists()
    disc = [-1] * n
    low = [0] * n
    parent_edge = [-1] * n
    is_cut = [False] * n
    bridges: list[tuple[int, int]] = []
    blocks: list[list[tuple[int, int]]] = []
    edge_stack: list[tuple[int, int, int]] = []
    timer = 0

    for root in range(n):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        work = [(root, indptr[root])]

        while work:
            v, p = work[-1]
            if p < indptr[v + 1]:
                work[-1] = (v, p + 1)
                w, eid = indices[p], edge_ids[p]
                if eid == parent_edge[v]:
                    continue
                if disc[w] == -1:
                    parent_edge[w] = eid
                    disc[w] = low[w] = timer
                    timer += 1
                    edge_stack.append((v, w, eid))
                    work.append((w, indptr[w]))
                    if v == root:
                        root_children += 1
                elif disc[w] < disc[v]:
                    low[v] = min(low[v], disc[w])
                    edge_stack.append((v, w, eid))
                continue

            work.pop()
            if not work:
                continue
            u = work[-1][0]
            low[u] = min(low[u], low[v])
            if low[v] >= disc[u]:
                if u != root:
                    is_cut[u] = True
                block: list[tuple[int, int]] = []
                while True:
                    a, b, eid = edge_stack.pop()
                    block.append((min(a, b), max(a, b)))
                    if eid == parent_edge[v]:
                        break
                block.sort()
                blocks.append(block)
            if low[v] > disc[u]:
                bridges.append((min(u, v), max(u, v)))

        if root_children >= 2:
            is_cut[root] = True

    return _BiconnectedResult(is_cut=is_cut, bridges=sorted(bridges), components=blocks)


def articulation_points(graph: Graph) -> list[int]:
    """Cut vertices of an undirected graph, ascending."""
    result = _biconnected_dfs(graph)
    return [v for v, cut in enumerate(result.is_cut) if cut]


def bridges(graph: Graph) -> list[tuple[int, int]]:
    """Bridges of an undirected graph as sorted ``(min, max)`` pairs."""
    return _biconnected_dfs(graph).bridges


def biconnected_components(graph: Graph) -> list[list[tuple[int, int]]]:
    """
    Edge sets of the biconnected components (blocks).

    Each block is a sorted list of ``(min, max)`` vertex pairs; a parallel
    edge appears once per copy.
    """
    return _biconnected_dfs(graph).components


@dataclass
class BlockCutTree:
    """
    Block-cut tree of an undirected graph.

    Vertices of `tree` are the blocks ``0..len(blocks)-1`` followed by the
    cut vertices in the order of `cut_vertices`. Every edge joins a block to
    a cut vertex it contains.
    """
    blocks: list[list[int]]
    cut_vertices: list[int]
    tree: Graph
    _membership: dict[int, list[int]] = field(default_factory=dict, repr=False)

    def blocks_containing(self, v: int) -> list[int]:
        """Indices of the blocks that contain original vertex `v`."""
        return list(self._membership.get(v, []))

    def node_of_cut(self, v: int) -> int:
        """
        Tree vertex representing cut vertex `v`, or -1 if `v` is not a cut.
        """
        try:
            return len(self.blocks) + self.cut_vertices.index(v)
        except ValueError:
            return -1


def block_cut_tree(graph: Graph) -> BlockCutTree:
    """
    Build the block-cut tree.

    Vertices that lie in no block (isolated or carrying only self-loops)
    become singleton blocks so every vertex is represented.
    """
    result = _biconnected_dfs(graph)
    blocks: list[list[int]] = []
    covered = [False] * graph.n_vertices
    for edge_block in result.components:
        members = sorted({x for edge in edge_block for x in edge})
        for x in members:
            covered[x] = True
        blocks.append(members)
    for v in range(graph.n_vertices):
        if not covered[v]:
            blocks.append([v])

    cut_vertices = [v for v, cut in enumerate(result.is_cut) if cut]
    cut_node = {v: len(blocks) + i for i, v in enumerate(cut_vertices)}

    membership: dict[int, list[int]] = {}
    tree_edges: list[tuple[int, int]] = []
    for b, members in enumerate(blocks):
        for x in members:
            membership.setdefault(x, []).append(b)
            if x in cut_node:
                tree_edges.append((b, cut_node[x]))

    tree = Graph.from_edges(len(blocks) + len(cut_vertices), tree_edges)
    return BlockCutTree(blocks=blocks, cut_vertices=cut_vertices, tree=tree, _membership=membership)
