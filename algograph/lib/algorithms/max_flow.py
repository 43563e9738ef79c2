from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

import numpy as np

from algograph.exceptions import InvalidEndpointsError, NegativeWeightError
from algograph.lib.algorithms.base import Cost
from algograph.lib.algorithms.types import MaxFlowResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def _find_augmenting_path(
    residual: np.ndarray, source: VertexID, sink: VertexID
) -> Optional[List[Optional[VertexID]]]:
    """
    Breadth-first search for a source-to-sink path with positive residual
    capacity on every edge.

    Returns:
        The BFS parent list if the sink was reached, otherwise None.
    """
    n = residual.shape[0]
    parents: List[Optional[VertexID]] = [None] * n
    parents[source] = source
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in np.flatnonzero(residual[u] > 0):
            v = int(v)
            if parents[v] is None:
                parents[v] = u
                if v == sink:
                    return parents
                queue.append(v)
    return None


def _reachable(residual: np.ndarray, source: VertexID) -> frozenset:
    seen = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in np.flatnonzero(residual[u] > 0):
            v = int(v)
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return frozenset(seen)


def max_flow(graph: Graph, source: VertexID, sink: VertexID) -> MaxFlowResult:
    """
    Compute the maximum flow from ``source`` to ``sink`` (Edmonds-Karp).

    Edge weights are capacities; parallel edges between the same pair add
    up. The residual network is a dense capacity matrix in which reverse
    edges start at 0. Each iteration runs a breadth-first search over the
    residual network (neighbors in ascending vertex order), so every
    augmenting path is a shortest one in edges, which bounds the number of
    iterations by O(V * E). The path's bottleneck is added to the total,
    subtracted from forward residuals and added to reverse residuals. The
    loop ends when the sink is no longer reachable.

    Args:
        graph: Graph whose weights are non-negative capacities.
        source: Source vertex.
        sink: Sink vertex.

    Returns:
        MaxFlowResult with the flow value, the per-pair net flow, and the
        minimum cut read off the final residual network.

    Raises:
        OutOfRangeVertexError: If source or sink is not a vertex of graph.
        InvalidEndpointsError: If source equals sink.
        NegativeWeightError: If graph contains a negative capacity.
    """
    source = graph.validate_vertex(source)
    sink = graph.validate_vertex(sink)
    if source == sink:
        raise InvalidEndpointsError(f"Source and sink must differ, both are {source}.")
    if graph.has_negative_weights:
        raise NegativeWeightError("Max flow requires non-negative capacities.")

    capacity = graph.to_matrix(combine="sum").as_array()
    residual = capacity.copy()

    total: Cost = 0
    augmentations = 0
    while True:
        parents = _find_augmenting_path(residual, source, sink)
        if parents is None:
            break

        bottleneck = None
        v = sink
        while v != source:
            u = parents[v]
            if bottleneck is None or residual[u, v] < bottleneck:
                bottleneck = residual[u, v]
            v = u

        v = sink
        while v != source:
            u = parents[v]
            residual[u, v] -= bottleneck
            residual[v, u] += bottleneck
            v = u

        total += bottleneck.item()
        augmentations += 1
        logger.debug("Augmenting path %d carries %s", augmentations, bottleneck)

    # Net flow per pair: what left u -> v beyond what was pushed back v -> u.
    net = np.clip(capacity - residual, 0, None)
    edge_flow: Dict[Tuple[VertexID, VertexID], Cost] = {
        (int(u), int(v)): net[u, v].item() for u, v in zip(*np.nonzero(net))
    }

    reachable = _reachable(residual, source)
    min_cut = tuple(
        edge
        for edge in graph.edges()
        if edge.source in reachable and edge.destination not in reachable
    )

    logger.debug(
        "Max flow %d -> %d: %s over %d augmenting paths, min cut of %d edges",
        source,
        sink,
        total,
        augmentations,
        len(min_cut),
    )
    return MaxFlowResult(
        source=source,
        sink=sink,
        total_flow=total,
        edge_flow=MappingProxyType(edge_flow),
        reachable=reachable,
        min_cut=min_cut,
        augmentations=augmentations,
    )
