from algokit.graphs.graph import Edge, Graph
from algokit.graphs.components import (
    BlockCutTree,
    articulation_points,
    biconnected_components,
    block_cut_tree,
    bridges,
    connected_components,
    strongly_connected_components,
)
from algokit.graphs.spanning import DisjointSet, kruskal_mst, prim_mst
from algokit.graphs.traversal import (
    bfs_order,
    dfs_order,
    dijkstra,
    has_cycle,
    reconstruct_path,
    shortest_path_lengths,
    topological_sort,
)
