from __future__ import annotations

from typing import List, Set

from algograph.lib.algorithms.base import DFSEvent, SolverStatus
from algograph.lib.algorithms.traversal import dfs_labeled_edges
from algograph.lib.algorithms.types import TopologicalOrderResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def topological_sort(graph: Graph) -> TopologicalOrderResult:
    """
    Order the vertices of a directed graph so that every edge points forward.

    Runs a DFS forest (roots in ascending ID, neighbors in insertion order)
    while tracking which vertices are on the current DFS path. Finished
    vertices are collected in finish order; the topological order is that
    list reversed. Meeting an edge to a vertex still on the path (including
    a self-loop) means the graph has a cycle.

    Returns:
        TopologicalOrderResult with status OK and the order, or status CYCLE
        with the edge that closed the cycle and no order.
    """
    on_path: Set[VertexID] = set()
    finished: List[VertexID] = []

    for u, v, event in dfs_labeled_edges(graph):
        if event == DFSEvent.DISCOVER:
            on_path.add(v)
        elif event == DFSEvent.NONTREE:
            if v in on_path:
                logger.debug("Topological sort: edge (%d, %d) closes a cycle", u, v)
                return TopologicalOrderResult(
                    status=SolverStatus.CYCLE, back_edge=(u, v)
                )
        else:
            on_path.discard(v)
            finished.append(v)

    finished.reverse()
    return TopologicalOrderResult(status=SolverStatus.OK, order=tuple(finished))
