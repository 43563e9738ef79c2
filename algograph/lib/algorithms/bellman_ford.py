from __future__ import annotations

from typing import List, Optional

from algograph.lib.algorithms.base import INF, Cost, SolverStatus
from algograph.lib.algorithms.types import ShortestPathResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(graph: Graph, source: VertexID) -> ShortestPathResult:
    """
    Compute shortest-path distances from ``source`` allowing negative weights.

    All edges are relaxed in insertion order, up to ``V - 1`` rounds; a round
    that changes nothing ends relaxation early since later rounds could not
    change anything either. Edges whose tail is still unreachable are
    skipped. One more full pass then checks for an edge that still relaxes,
    which proves a negative cycle reachable from the source.

    Args:
        graph: Graph, typically built with ``allow_negative_weights=True``.
        source: Source vertex.

    Returns:
        ShortestPathResult. With status OK it carries the Distance Vector and
        Parent Map; with status NEGATIVE_CYCLE it carries neither.

    Raises:
        OutOfRangeVertexError: If source is not a vertex of graph.
    """
    source = graph.validate_vertex(source)
    n = graph.num_vertices()
    edges = list(graph.edges())

    distances: List[Cost] = [INF] * n
    parents: List[Optional[VertexID]] = [None] * n
    distances[source] = 0

    rounds = 0
    for rounds in range(1, n):
        changed = False
        for u, v, weight in edges:
            if distances[u] != INF and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u
                changed = True
        if not changed:
            break

    for u, v, weight in edges:
        if distances[u] != INF and distances[u] + weight < distances[v]:
            logger.debug(
                "Bellman-Ford from %d: edge (%d, %d) still relaxes, negative cycle",
                source,
                u,
                v,
            )
            return ShortestPathResult(source=source, status=SolverStatus.NEGATIVE_CYCLE)

    logger.debug(
        "Bellman-Ford from %d converged after %d rounds over %d edges",
        source,
        rounds,
        len(edges),
    )
    return ShortestPathResult(
        source=source,
        status=SolverStatus.OK,
        distances=tuple(distances),
        parents=tuple(parents),
    )
