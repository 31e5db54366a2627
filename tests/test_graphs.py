"""
Tests for CSR graph storage, traversals, components and spanning trees.

SciPy's ``csgraph`` routines serve as an independent oracle on random
graphs.
"""
import numpy as np
import pytest
from scipy.sparse import csgraph

from algokit.graphs import (
    BlockCutTree,
    DisjointSet,
    Graph,
    articulation_points,
    bfs_order,
    biconnected_components,
    block_cut_tree,
    bridges,
    connected_components,
    dfs_order,
    dijkstra,
    has_cycle,
    kruskal_mst,
    prim_mst,
    reconstruct_path,
    shortest_path_lengths,
    strongly_connected_components,
    topological_sort,
)


def _random_simple_edges(rng, n, m):
    edges = set()
    while len(edges) < m:
        u, v = rng.integers(0, n, size=2).tolist()
        if u != v:
            edges.add((min(u, v), max(u, v)))
    return sorted(edges)


def _same_partition(labels_a, labels_b):
    mapping = {}
    for a, b in zip(labels_a, labels_b):
        if mapping.setdefault(int(a), int(b)) != int(b):
            return False
    return len(set(mapping.values())) == len(mapping)


class TestGraph:
    """CSR construction"""

    def test_undirected_mirrors_edges(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2, 2.5)])
        assert g.n_edges == 2
        assert g.neighbors(1).tolist() == [0, 2]
        assert g.weights(1).tolist() == [1.0, 2.5]
        assert g.degree(0) == 1

    def test_parallel_edges_kept(self):
        g = Graph.from_edges(2, [(0, 1, 1.0), (0, 1, 3.0)])
        assert g.neighbors(0).tolist() == [1, 1]
        assert g.weights(0).tolist() == [1.0, 3.0]

    def test_self_loop_stored_once(self):
        g = Graph.from_edges(2, [(0, 0), (0, 1)])
        assert g.neighbors(0).tolist() == [0, 1]

    def test_directed_and_reversed(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)
        assert g.neighbors(0).tolist() == [1]
        assert g.neighbors(2).tolist() == []
        r = g.reversed()
        assert r.neighbors(2).tolist() == [1]
        assert list(g.edges()) == [(0, 1, 1.0), (1, 2, 1.0)]

    def test_invalid_edges(self):
        with pytest.raises(ValueError):
            Graph.from_edges(2, [(0, 2)])
        with pytest.raises(ValueError):
            Graph.from_edges(2, [(0,)])


class TestTraversal:
    """BFS, DFS, shortest paths and topological order"""

    def setup_method(self):
        self.g = Graph.from_edges(6, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])

    def test_bfs_order(self):
        assert bfs_order(self.g, 0) == [0, 1, 2, 3, 4]

    def test_dfs_order(self):
        assert dfs_order(self.g, 0) == [0, 1, 3, 2, 4]

    def test_hop_distances(self):
        assert shortest_path_lengths(self.g, 0).tolist() == [0, 1, 1, 2, 3, -1]

    def test_bad_source(self):
        with pytest.raises(ValueError):
            bfs_order(self.g, 6)

    def test_dijkstra(self):
        g = Graph.from_edges(5, [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5)], directed=True)
        dist, prev = dijkstra(g, 0)
        assert dist[:4].tolist() == [0.0, 3.0, 1.0, 4.0]
        assert np.isinf(dist[4])
        assert reconstruct_path(prev, 3, source=0) == [0, 2, 1, 3]
        assert reconstruct_path(prev, 4, source=0) == []

    def test_reconstruct_path_without_source(self):
        """An unreachable target gives an empty path, the source a single vertex"""
        g = Graph.from_edges(3, [(0, 1, 1.0)])
        dist, prev = dijkstra(g, 0)
        assert np.isinf(dist[2])
        assert prev[0] == 0
        assert prev[2] == -1
        assert reconstruct_path(prev, 2) == []
        assert reconstruct_path(prev, 1) == [0, 1]
        assert reconstruct_path(prev, 0) == [0]

    def test_dijkstra_matches_csgraph(self, rng):
        edges = _random_simple_edges(rng, 40, 120)
        weighted = [(u, v, float(w)) for (u, v), w in zip(edges, rng.uniform(0.5, 10.0, size=len(edges)))]
        g = Graph.from_edges(40, weighted)
        dist, _ = dijkstra(g, 0)
        expected = csgraph.dijkstra(g.matrix, directed=False, indices=0)
        np.testing.assert_allclose(dist, expected)

    def test_dijkstra_negative_weight(self):
        g = Graph.from_edges(2, [(0, 1, -1.0)], directed=True)
        with pytest.raises(ValueError):
            dijkstra(g, 0)

    def test_topological_sort(self):
        g = Graph.from_edges(5, [(3, 1), (1, 0), (3, 2), (2, 0), (4, 2)], directed=True)
        assert topological_sort(g) == [3, 1, 4, 2, 0]

    def test_topological_sort_cycle(self):
        g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)
        assert topological_sort(g) is None
        assert has_cycle(g)

    def test_topological_sort_undirected(self):
        with pytest.raises(ValueError):
            topological_sort(Graph.from_edges(2, [(0, 1)]))

    def test_has_cycle_undirected(self):
        assert not has_cycle(Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)]))
        assert has_cycle(Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)]))
        assert has_cycle(Graph.from_edges(2, [(0, 1), (0, 1)]))


class TestComponents:
    """Connectivity, SCC, articulation points, bridges and blocks"""

    def test_connected_components_labels(self):
        g = Graph.from_edges(6, [(4, 5), (0, 2), (2, 1)])
        assert connected_components(g).tolist() == [0, 0, 0, 1, 2, 2]

    def test_connected_components_matches_csgraph(self, rng):
        g = Graph.from_edges(60, _random_simple_edges(rng, 60, 45))
        _, expected = csgraph.connected_components(g.matrix, directed=False)
        assert _same_partition(connected_components(g), expected)

    def test_scc_small(self):
        g = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (4, 5)], directed=True)
        assert strongly_connected_components(g) == [[5], [3, 4], [0, 1, 2]]

    def test_scc_matches_csgraph(self, rng):
        n = 50
        src = rng.integers(0, n, size=90)
        dst = rng.integers(0, n, size=90)
        g = Graph(n, src, dst, np.ones(90), directed=True)
        components = strongly_connected_components(g)
        labels = np.empty(n, dtype=np.int64)
        for i, comp in enumerate(components):
            labels[comp] = i
        count, expected = csgraph.connected_components(g.matrix, directed=True, connection="strong")
        assert len(components) == count
        assert _same_partition(labels, expected)

    def test_scc_deep_chain(self):
        """A long path does not hit the recursion limit"""
        n = 20000
        g = Graph.from_edges(n, [(i, i + 1) for i in range(n - 1)], directed=True)
        assert len(strongly_connected_components(g)) == n

    def test_articulation_points_and_bridges(self):
        # triangle 0-1-2, tail 2-3-4, second triangle 4-5-6
        edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 6), (6, 4)]
        g = Graph.from_edges(7, edges)
        assert articulation_points(g) == [2, 3, 4]
        assert bridges(g) == [(2, 3), (3, 4)]

    def test_parallel_edge_is_not_a_bridge(self):
        g = Graph.from_edges(3, [(0, 1), (0, 1), (1, 2)])
        assert bridges(g) == [(1, 2)]
        assert articulation_points(g) == [1]

    def test_biconnected_components(self):
        edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
        blocks = biconnected_components(Graph.from_edges(4, edges))
        assert sorted(blocks) == [[(0, 1), (0, 2), (1, 2)], [(2, 3)]]

    def test_directed_rejected(self):
        with pytest.raises(ValueError):
            articulation_points(Graph.from_edges(2, [(0, 1)], directed=True))

    def test_block_cut_tree(self):
        edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
        bct = block_cut_tree(Graph.from_edges(5, edges))
        assert isinstance(bct, BlockCutTree)
        assert bct.cut_vertices == [2]
        assert sorted(bct.blocks) == [[0, 1, 2], [2, 3], [4]]
        cut_node = bct.node_of_cut(2)
        assert cut_node == len(bct.blocks)
        assert bct.tree.degree(cut_node) == 2
        assert len(bct.blocks_containing(2)) == 2
        assert bct.node_of_cut(0) == -1


class TestSpanning:
    """Union-find, Kruskal and Prim"""

    def test_disjoint_set(self):
        dsu = DisjointSet(5)
        assert dsu.union(0, 1)
        assert dsu.union(1, 2)
        assert not dsu.union(0, 2)
        assert dsu.connected(0, 2)
        assert not dsu.connected(0, 3)
        assert dsu.n_sets == 3

    def test_kruskal_small(self):
        edges = [(0, 1, 7), (0, 3, 5), (1, 2, 8), (1, 3, 9), (1, 4, 7), (2, 4, 5),
                 (3, 4, 15), (3, 5, 6), (4, 5, 8), (4, 6, 9), (5, 6, 11)]
        tree, total = kruskal_mst(7, edges)
        assert total == pytest.approx(39.0)
        assert len(tree) == 6

    def test_prim_matches_kruskal_and_csgraph(self, rng):
        edges = _random_simple_edges(rng, 30, 80)
        weighted = [(u, v, float(w)) for (u, v), w in zip(edges, rng.uniform(1.0, 20.0, size=len(edges)))]
        g = Graph.from_edges(30, weighted)
        _, k_total = kruskal_mst(30, weighted)
        _, p_total = prim_mst(g)
        oracle = csgraph.minimum_spanning_tree(g.matrix).sum()
        assert k_total == pytest.approx(oracle)
        assert p_total == pytest.approx(oracle)

    def test_forest(self):
        tree, total = kruskal_mst(4, [(0, 1, 1.0), (2, 3, 2.0)])
        assert len(tree) == 2
        assert total == pytest.approx(3.0)

    def test_prim_directed_rejected(self):
        with pytest.raises(ValueError):
            prim_mst(Graph.from_edges(2, [(0, 1)], directed=True))
