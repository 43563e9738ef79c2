from __future__ import annotations

from collections import deque
from typing import Callable, Iterator, List, Optional, Set, Tuple

from algograph.lib.algorithms.base import DFSEvent
from algograph.lib.algorithms.types import TraversalResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)

VisitCallback = Callable[[VertexID], None]


def bfs(
    graph: Graph,
    source: VertexID,
    visit: Optional[VisitCallback] = None,
) -> TraversalResult:
    """
    Breadth-first search from ``source``.

    Each vertex is enqueued at most once: it is marked visited when first
    seen, so later edges to it are ignored. Neighbors are scanned in edge
    insertion order.

    Args:
        graph: The graph to traverse.
        source: Starting vertex.
        visit: Optional callback invoked with each vertex as it is dequeued.

    Returns:
        TraversalResult with level-order ``order``, ``parents`` and ``depths``.

    Raises:
        OutOfRangeVertexError: If source is not a vertex of graph.
    """
    source = graph.validate_vertex(source)
    n = graph.num_vertices()

    parents: List[Optional[VertexID]] = [None] * n
    depths: List[Optional[int]] = [None] * n
    depths[source] = 0
    order: List[VertexID] = []
    queue = deque([source])

    while queue:
        node = queue.popleft()
        order.append(node)
        if visit is not None:
            visit(node)
        for neighbor, _ in graph.neighbors(node):
            if depths[neighbor] is None:
                depths[neighbor] = depths[node] + 1
                parents[neighbor] = node
                queue.append(neighbor)

    logger.debug("BFS from %d reached %d of %d vertices", source, len(order), n)
    return TraversalResult(
        source=source,
        order=tuple(order),
        parents=tuple(parents),
        depths=tuple(depths),
    )


def dfs_labeled_edges(
    graph: Graph,
    source: Optional[VertexID] = None,
    visited: Optional[Set[VertexID]] = None,
) -> Iterator[Tuple[VertexID, VertexID, DFSEvent]]:
    """
    Iterate over depth-first search edges labeled by event.

    Uses an explicit stack of neighbor iterators, so the visitation order is
    exactly that of a recursive DFS scanning neighbors in insertion order,
    without recursion depth limits.

    Emitted triples ``(u, v, event)``:
      - ``(root, root, DISCOVER)`` when a new DFS tree starts;
      - ``(u, v, DISCOVER)`` for a tree edge reaching v for the first time;
      - ``(u, v, NONTREE)`` for an edge to an already discovered vertex;
      - ``(parent, v, FINISH)`` once v's edges are exhausted (parent is v for a
        root).

    Args:
        graph: The graph to traverse.
        source: Root of a single DFS tree. If None, every vertex is tried as a
            root in ascending ID order, covering the whole DFS forest.
        visited: Optional caller-owned set of discovered vertices. It is
            updated in place and vertices already in it are never entered,
            which lets several traversals share one visited set.

    Raises:
        OutOfRangeVertexError: If source is given and is not a vertex of graph.
    """
    if source is None:
        roots = graph.vertices()
    else:
        roots = (graph.validate_vertex(source),)
    if visited is None:
        visited = set()
    return _dfs_labeled_edges(graph, roots, visited)


def _dfs_labeled_edges(
    graph: Graph, roots, visited: Set[VertexID]
) -> Iterator[Tuple[VertexID, VertexID, DFSEvent]]:
    for root in roots:
        if root in visited:
            continue
        visited.add(root)
        yield root, root, DFSEvent.DISCOVER

        stack = [(root, graph.neighbors(root))]
        while stack:
            parent, children = stack[-1]
            for child, _ in children:
                if child in visited:
                    yield parent, child, DFSEvent.NONTREE
                else:
                    visited.add(child)
                    yield parent, child, DFSEvent.DISCOVER
                    stack.append((child, graph.neighbors(child)))
                    break
            else:
                stack.pop()
                grandparent = stack[-1][0] if stack else parent
                yield grandparent, parent, DFSEvent.FINISH


def dfs(
    graph: Graph,
    source: VertexID,
    visit: Optional[VisitCallback] = None,
    visited: Optional[Set[VertexID]] = None,
) -> TraversalResult:
    """
    Depth-first search from ``source``.

    Args:
        graph: The graph to traverse.
        source: Starting vertex.
        visit: Optional callback invoked with each vertex when discovered.
        visited: Optional caller-owned visited set (see dfs_labeled_edges).

    Returns:
        TraversalResult with preorder ``order``, ``parents`` and
        ``discovery``/``finish`` timestamps. Timestamps come from one clock
        that ticks on every discovery and every finish, starting at 1.

    Raises:
        OutOfRangeVertexError: If source is not a vertex of graph.
    """
    n = graph.num_vertices()
    parents: List[Optional[VertexID]] = [None] * n
    discovery: List[Optional[int]] = [None] * n
    finish: List[Optional[int]] = [None] * n
    order: List[VertexID] = []
    clock = 0

    for u, v, event in dfs_labeled_edges(graph, source, visited):
        if event == DFSEvent.DISCOVER:
            clock += 1
            discovery[v] = clock
            order.append(v)
            if u != v:
                parents[v] = u
            if visit is not None:
                visit(v)
        elif event == DFSEvent.FINISH:
            clock += 1
            finish[v] = clock

    return TraversalResult(
        source=int(source),
        order=tuple(order),
        parents=tuple(parents),
        discovery=tuple(discovery),
        finish=tuple(finish),
    )


def dfs_postorder(graph: Graph) -> List[VertexID]:
    """Return all vertices in DFS forest finish order (roots in ascending ID)."""
    return [v for _, v, event in dfs_labeled_edges(graph) if event == DFSEvent.FINISH]
