from __future__ import annotations

from itertools import chain
from typing import List, Optional

from algograph.exceptions import NegativeWeightError
from algograph.lib.algorithms.base import INF, Cost, SolverStatus
from algograph.lib.algorithms.frontier import PriorityFrontier
from algograph.lib.algorithms.types import MSTEdge, MSTResult
from algograph.lib.algorithms.union_find import DisjointSet
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def _reject_negative_weights(graph: Graph, algorithm: str) -> None:
    if graph.has_negative_weights:
        raise NegativeWeightError(f"{algorithm} requires non-negative weights.")


def kruskal(graph: Graph) -> MSTResult:
    """
    Compute a minimum spanning tree with Kruskal's algorithm.

    Every stored edge is treated as undirected, so a graph holding both
    directions of an edge is handled the same as one holding only one. Edges
    are sorted by weight with a stable sort (equal weights keep insertion
    order) and accepted when they join two different DisjointSet trees,
    until ``V - 1`` edges are accepted.

    Args:
        graph: Graph with non-negative weights.

    Returns:
        MSTResult with the accepted edges and their total weight, or status
        DISCONNECTED (and no edges) if fewer than ``V - 1`` edges could be
        accepted.

    Raises:
        NegativeWeightError: If graph contains a negative weight.
    """
    _reject_negative_weights(graph, "Kruskal")
    n = graph.num_vertices()
    needed = max(n - 1, 0)

    forest = DisjointSet(n)
    accepted: List[MSTEdge] = []
    if needed:
        for u, v, weight in sorted(graph.edges(), key=lambda edge: edge.weight):
            if forest.union(u, v):
                accepted.append(MSTEdge(u, v, weight))
                if len(accepted) == needed:
                    break

    if len(accepted) < needed:
        logger.debug(
            "Kruskal: graph is disconnected (%d components remain)", forest.set_count
        )
        return MSTResult(status=SolverStatus.DISCONNECTED)

    total = sum(edge.weight for edge in accepted)
    logger.debug("Kruskal: spanning tree of weight %s over %d vertices", total, n)
    return MSTResult(status=SolverStatus.OK, edges=tuple(accepted), total_weight=total)


def prim(graph: Graph, start: VertexID = 0) -> MSTResult:
    """
    Compute a minimum spanning tree with Prim's algorithm.

    The tree grows from ``start``. ``key[v]`` is the lightest known edge
    joining v to the tree; the PriorityFrontier is keyed by it. Each popped
    vertex joins the tree together with the edge from its parent, then
    every neighbor outside the tree whose connecting weight beats its key
    gets the new key and parent and is pushed again. Superseded entries go
    stale instead of being removed.

    Like Kruskal, every stored edge is treated as undirected. On a directed
    graph the transpose is scanned alongside the outgoing edges, so storing
    one direction of an edge is enough.

    Args:
        graph: Graph with non-negative weights.
        start: Root of the tree. Defaults to vertex 0.

    Returns:
        MSTResult with edges as (parent, vertex, weight) in the order
        vertices joined the tree, or status DISCONNECTED if the frontier
        empties before every vertex has joined.

    Raises:
        OutOfRangeVertexError: If the graph is non-empty and start is not one
            of its vertices.
        NegativeWeightError: If graph contains a negative weight.
    """
    _reject_negative_weights(graph, "Prim")
    n = graph.num_vertices()
    if n == 0:
        return MSTResult(status=SolverStatus.OK, edges=(), total_weight=0)
    start = graph.validate_vertex(start)

    reverse = graph.transpose() if graph.directed else None

    keys: List[Cost] = [INF] * n
    parents: List[Optional[VertexID]] = [None] * n
    in_tree = [False] * n
    keys[start] = 0

    frontier = PriorityFrontier(keys)
    frontier.push(start)
    accepted: List[MSTEdge] = []
    joined = 0

    while frontier:
        node = frontier.pop()
        if in_tree[node]:
            continue
        in_tree[node] = True
        joined += 1
        if parents[node] is not None:
            accepted.append(MSTEdge(parents[node], node, keys[node]))

        incident = graph.neighbors(node)
        if reverse is not None:
            incident = chain(incident, reverse.neighbors(node))
        for neighbor, weight in incident:
            if not in_tree[neighbor] and weight < keys[neighbor]:
                keys[neighbor] = weight
                parents[neighbor] = node
                frontier.push(neighbor)

    if joined < n:
        logger.debug("Prim: only %d of %d vertices reachable from %d", joined, n, start)
        return MSTResult(status=SolverStatus.DISCONNECTED)

    total = sum(edge.weight for edge in accepted)
    logger.debug("Prim: spanning tree of weight %s over %d vertices", total, n)
    return MSTResult(status=SolverStatus.OK, edges=tuple(accepted), total_weight=total)
