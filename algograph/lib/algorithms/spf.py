from __future__ import annotations

from typing import List, Optional

from algograph.exceptions import NegativeWeightError
from algograph.lib.algorithms.base import INF, Cost, SolverStatus
from algograph.lib.algorithms.frontier import PriorityFrontier
from algograph.lib.algorithms.types import ShortestPathResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def dijkstra(graph: Graph, source: VertexID) -> ShortestPathResult:
    """
    Compute shortest-path distances from ``source`` with Dijkstra's algorithm.

    Vertices are settled in order of distance using a PriorityFrontier keyed
    by the live distance list. Relaxing an edge that gives a strictly
    shorter distance updates distance and parent and pushes the vertex
    again; the superseded frontier entry goes stale and is skipped.

    Args:
        graph: Graph with non-negative weights.
        source: Source vertex.

    Returns:
        ShortestPathResult with a Distance Vector over all vertices (INF for
        unreachable ones) and the Parent Map of the shortest-path tree.

    Raises:
        OutOfRangeVertexError: If source is not a vertex of graph.
        NegativeWeightError: If graph contains a negative weight.
    """
    source = graph.validate_vertex(source)
    if graph.has_negative_weights:
        raise NegativeWeightError(
            "Dijkstra requires non-negative weights; use bellman_ford instead."
        )

    n = graph.num_vertices()
    distances: List[Cost] = [INF] * n
    parents: List[Optional[VertexID]] = [None] * n
    distances[source] = 0

    frontier = PriorityFrontier(distances)
    frontier.push(source)
    settled = 0

    while frontier:
        node = frontier.pop()
        settled += 1
        node_distance = distances[node]
        for neighbor, weight in graph.neighbors(node):
            new_distance = node_distance + weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                parents[neighbor] = node
                frontier.push(neighbor)

    logger.debug("Dijkstra from %d settled %d of %d vertices", source, settled, n)
    return ShortestPathResult(
        source=source,
        status=SolverStatus.OK,
        distances=tuple(distances),
        parents=tuple(parents),
    )
