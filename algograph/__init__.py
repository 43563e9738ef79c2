"""algograph: classical graph algorithms over explicitly built graphs.

algograph provides traversal, shortest paths, minimum spanning trees, maximum
flow, strongly connected components and topological ordering over small to
medium integer-indexed graphs, plus A* search on obstacle grids.

Primary API:
    Graph, AdjacencyMatrix - Graph stores over vertices 0 .. n-1
    Grid, GridCell - Obstacle grids for A*
    bfs(), dfs() - Traversal
    dijkstra(), bellman_ford(), floyd_warshall(), astar() - Shortest paths
    kruskal(), prim() - Minimum spanning trees
    max_flow() - Edmonds-Karp maximum flow
    tarjan_scc(), kosaraju_scc(), topological_sort() - Components and order

Example:
    from algograph import Graph, dijkstra

    graph = Graph(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, 1)

    result = dijkstra(graph, 0)
    result.distances  # (0, 4, 5)
    result.path_to(2).nodes  # (0, 1, 2)

Input errors (out-of-range vertices, negative weights where forbidden,
identical source and sink) raise exceptions from ``algograph.exceptions``.
"No solution" outcomes are reported through ``SolverStatus`` on the result.
"""

from __future__ import annotations

from algograph import logging
from algograph._version import __version__
from algograph.exceptions import (
    AlgographError,
    InvalidEndpointsError,
    NegativeWeightError,
    OutOfRangeVertexError,
)
from algograph.lib.algorithms.astar import astar
from algograph.lib.algorithms.base import INF, DFSEvent, Heuristic, SolverStatus
from algograph.lib.algorithms.bellman_ford import bellman_ford
from algograph.lib.algorithms.floyd_warshall import floyd_warshall
from algograph.lib.algorithms.max_flow import max_flow
from algograph.lib.algorithms.mst import kruskal, prim
from algograph.lib.algorithms.scc import kosaraju_scc, tarjan_scc
from algograph.lib.algorithms.spf import dijkstra
from algograph.lib.algorithms.toposort import topological_sort
from algograph.lib.algorithms.traversal import bfs, dfs, dfs_labeled_edges
from algograph.lib.algorithms.types import (
    AllPairsResult,
    GridPathResult,
    MaxFlowResult,
    MSTEdge,
    MSTResult,
    SCCResult,
    ShortestPathResult,
    TopologicalOrderResult,
    TraversalResult,
)
from algograph.lib.graph import AdjacencyMatrix, Edge, Graph
from algograph.lib.grid import Grid, GridCell
from algograph.lib.nx import NodeMap, from_networkx, to_networkx
from algograph.lib.path import Path, reconstruct_path

__all__ = [
    # Version
    "__version__",
    # Graph stores
    "Graph",
    "Edge",
    "AdjacencyMatrix",
    "Grid",
    "GridCell",
    "Path",
    "reconstruct_path",
    # Solvers
    "bfs",
    "dfs",
    "dfs_labeled_edges",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "astar",
    "kruskal",
    "prim",
    "max_flow",
    "tarjan_scc",
    "kosaraju_scc",
    "topological_sort",
    # Results
    "TraversalResult",
    "ShortestPathResult",
    "AllPairsResult",
    "GridPathResult",
    "MSTEdge",
    "MSTResult",
    "MaxFlowResult",
    "SCCResult",
    "TopologicalOrderResult",
    # Types
    "INF",
    "SolverStatus",
    "Heuristic",
    "DFSEvent",
    # Errors
    "AlgographError",
    "OutOfRangeVertexError",
    "NegativeWeightError",
    "InvalidEndpointsError",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
