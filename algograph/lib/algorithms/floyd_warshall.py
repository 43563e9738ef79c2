from __future__ import annotations

import numpy as np

from algograph.lib.algorithms.base import SolverStatus
from algograph.lib.algorithms.types import AllPairsResult
from algograph.lib.graph import AdjacencyMatrix, Graph
from algograph.logging import get_logger

logger = get_logger(__name__)


def floyd_warshall(graph: Graph | AdjacencyMatrix) -> AllPairsResult:
    """
    Compute shortest-path distances between every pair of vertices.

    The distance matrix starts from the direct edge weights (the cheapest of
    any parallel edges), INF where no edge exists and 0 on the diagonal
    unless a negative self-loop is present. For each intermediate vertex k in
    ascending order, every pair (i, j) is relaxed through k. The update for a
    given k is computed over the whole matrix at once; row k and column k do
    not change during that step unless a negative cycle runs through k, so
    this matches the element-by-element triple loop. INF is a float, so
    INF + INF stays INF and never wraps around.

    A successor matrix (next hop from i towards j) is kept alongside the
    distances for path reconstruction.

    Args:
        graph: A Graph, or an AdjacencyMatrix with INF marking absent edges.

    Returns:
        AllPairsResult. With a negative value on the diagonal after the main
        loop, status is NEGATIVE_CYCLE and no matrices are returned.
    """
    if isinstance(graph, Graph):
        matrix = graph.to_matrix(combine="min")
    else:
        matrix = graph
    dist = matrix.as_array().astype(np.float64, copy=True)
    n = dist.shape[0]

    diagonal = np.arange(n)
    dist[diagonal, diagonal] = np.minimum(dist[diagonal, diagonal], 0.0)

    successors = np.where(np.isfinite(dist), np.arange(n)[np.newaxis, :], -1)
    successors[diagonal, diagonal] = diagonal

    for k in range(n):
        through_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        better = through_k < dist
        if better.any():
            dist = np.where(better, through_k, dist)
            successors = np.where(better, successors[:, k, np.newaxis], successors)

    negative = np.flatnonzero(dist[diagonal, diagonal] < 0)
    if negative.size:
        logger.debug(
            "Floyd-Warshall: negative cycle through vertices %s", negative.tolist()
        )
        return AllPairsResult(
            status=SolverStatus.NEGATIVE_CYCLE,
            negative_cycle_vertices=tuple(int(v) for v in negative),
        )

    dist.flags.writeable = False
    successors.flags.writeable = False
    logger.debug("Floyd-Warshall completed over %d vertices", n)
    return AllPairsResult(
        status=SolverStatus.OK,
        distances=dist,
        successors=successors,
    )
