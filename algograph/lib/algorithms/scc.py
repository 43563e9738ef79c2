from __future__ import annotations

from typing import FrozenSet, List, Optional, Set

from algograph.lib.algorithms.base import DFSEvent
from algograph.lib.algorithms.traversal import dfs_labeled_edges, dfs_postorder
from algograph.lib.algorithms.types import SCCResult
from algograph.lib.graph import Graph, VertexID
from algograph.logging import get_logger

logger = get_logger(__name__)


def tarjan_scc(graph: Graph) -> SCCResult:
    """
    Find strongly connected components with Tarjan's single-pass algorithm.

    Driven by the labeled DFS edge stream, so no recursion is involved. On
    discovery a vertex gets the next index, its low-link starts equal to it
    and it is pushed on the component stack. A non-tree edge to a vertex
    still on that stack lowers the tail's low-link to the head's index. When
    a vertex finishes with low-link equal to its own index it is the root of
    a component, and the stack is popped down to it; otherwise its low-link
    propagates to its DFS parent.

    Returns:
        SCCResult with components in the order they were completed.
    """
    n = graph.num_vertices()
    index: List[Optional[int]] = [None] * n
    low_link: List[int] = [0] * n
    on_stack = [False] * n
    stack: List[VertexID] = []
    components: List[FrozenSet[VertexID]] = []
    counter = 0

    for u, v, event in dfs_labeled_edges(graph):
        if event == DFSEvent.DISCOVER:
            index[v] = low_link[v] = counter
            counter += 1
            stack.append(v)
            on_stack[v] = True
        elif event == DFSEvent.NONTREE:
            if on_stack[v] and index[v] < low_link[u]:
                low_link[u] = index[v]
        else:
            if low_link[v] == index[v]:
                component = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    if w == v:
                        break
                components.append(frozenset(component))
            if u != v and low_link[v] < low_link[u]:
                low_link[u] = low_link[v]

    logger.debug("Tarjan: %d components over %d vertices", len(components), n)
    return SCCResult.from_components(tuple(components), n)


def kosaraju_scc(graph: Graph) -> SCCResult:
    """
    Find strongly connected components with Kosaraju's two-pass algorithm.

    The first pass records the DFS forest finish order of ``graph``. The
    second pass walks the transpose graph, starting a new DFS from each
    not yet visited vertex in reverse finish order; every such DFS visits
    exactly one component. The visited set is shared across all second-pass
    searches.

    Returns:
        SCCResult with components in the order the second pass found them.
    """
    n = graph.num_vertices()
    finish_order = dfs_postorder(graph)
    transposed = graph.transpose()

    visited: Set[VertexID] = set()
    components: List[FrozenSet[VertexID]] = []
    for root in reversed(finish_order):
        if root in visited:
            continue
        component = frozenset(
            v
            for _, v, event in dfs_labeled_edges(transposed, root, visited)
            if event == DFSEvent.DISCOVER
        )
        components.append(component)

    logger.debug("Kosaraju: %d components over %d vertices", len(components), n)
    return SCCResult.from_components(tuple(components), n)
