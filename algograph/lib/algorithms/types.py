"""Result types returned by the solvers.

Every solver returns one of these frozen dataclasses. Results are value
objects: they never change after construction and never reference the
scratch state of the run that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, NamedTuple, Optional, Tuple

import numpy as np

from algograph.lib.algorithms.base import INF, Cost, SolverStatus
from algograph.lib.graph import Edge, Graph, VertexID, check_vertex
from algograph.lib.grid import GridCell
from algograph.lib.path import Path, reconstruct_path

DistanceVector = Tuple[Cost, ...]
ParentVector = Tuple[Optional[VertexID], ...]


@dataclass(frozen=True)
class TraversalResult:
    """Visit order and tree structure of a single BFS or DFS run.

    Attributes:
        source: Vertex the traversal started from.
        order: Vertices in visit order.
        parents: Tree parent of each vertex (None for the source and for
            vertices that were not reached).
        depths: BFS only; number of edges from the source, None if unreached.
        discovery: DFS only; discovery timestamp per vertex.
        finish: DFS only; finish timestamp per vertex.
    """

    source: VertexID
    order: Tuple[VertexID, ...]
    parents: ParentVector
    depths: Optional[Tuple[Optional[int], ...]] = None
    discovery: Optional[Tuple[Optional[int], ...]] = None
    finish: Optional[Tuple[Optional[int], ...]] = None

    def reached(self, v: VertexID) -> bool:
        v = check_vertex(v, len(self.parents))
        return v == self.source or self.parents[v] is not None

    def path_to(self, v: VertexID) -> Optional[Path]:
        """Return the tree path from the source to v, or None if v was not reached."""
        v = check_vertex(v, len(self.parents))
        nodes = reconstruct_path(self.parents, self.source, v)
        if not nodes:
            return None
        return Path(tuple(nodes), len(nodes) - 1)


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-source shortest paths (Dijkstra, Bellman-Ford).

    Attributes:
        source: The source vertex.
        status: OK, or NEGATIVE_CYCLE (Bellman-Ford only).
        distances: Distance Vector over all vertices (INF if unreachable);
            None when a negative cycle was detected.
        parents: Parent Map over all vertices; None with a negative cycle.
    """

    source: VertexID
    status: SolverStatus
    distances: Optional[DistanceVector] = None
    parents: Optional[ParentVector] = None

    @property
    def ok(self) -> bool:
        return self.status == SolverStatus.OK

    def _checked_vertex(self, v: VertexID) -> VertexID:
        if not self.ok:
            raise ValueError(
                f"No distances available: solver finished with {self.status.name}."
            )
        return check_vertex(v, len(self.distances))

    def distance(self, v: VertexID) -> Cost:
        v = self._checked_vertex(v)
        return self.distances[v]

    def is_reachable(self, v: VertexID) -> bool:
        v = self._checked_vertex(v)
        return self.distances[v] != INF

    def path_to(self, v: VertexID) -> Optional[Path]:
        """
        Reconstruct the shortest path from the source to v.

        Returns:
            The Path, or None if v is unreachable.

        Raises:
            ValueError: If the run ended with a negative cycle.
            OutOfRangeVertexError: If v is not a vertex of the graph.
        """
        v = self._checked_vertex(v)
        nodes = reconstruct_path(self.parents, self.source, v)
        if not nodes:
            return None
        return Path(tuple(nodes), self.distances[v])


@dataclass(frozen=True, eq=False)
class AllPairsResult:
    """All-pairs shortest paths (Floyd-Warshall).

    Attributes:
        status: OK or NEGATIVE_CYCLE.
        distances: Read-only ``n x n`` float array (INF where unreachable);
            None with a negative cycle.
        successors: Read-only ``n x n`` int array, the next vertex on the
            shortest i -> j path (-1 if none); None with a negative cycle.
        negative_cycle_vertices: Vertices with a negative diagonal entry.
    """

    status: SolverStatus
    distances: Optional[np.ndarray] = None
    successors: Optional[np.ndarray] = None
    negative_cycle_vertices: Tuple[VertexID, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == SolverStatus.OK

    def _require_ok(self) -> None:
        if not self.ok:
            raise ValueError(
                f"No distances available: solver finished with {self.status.name}."
            )

    def _check_pair(self, i: VertexID, j: VertexID) -> Tuple[VertexID, VertexID]:
        self._require_ok()
        n = self.distances.shape[0]
        return check_vertex(i, n), check_vertex(j, n)

    def distance(self, i: VertexID, j: VertexID) -> Cost:
        i, j = self._check_pair(i, j)
        value = self.distances[i, j].item()
        return value if value == INF or not value.is_integer() else int(value)

    def path(self, i: VertexID, j: VertexID) -> Optional[Path]:
        """Return the shortest path from i to j, or None if j is unreachable from i."""
        i, j = self._check_pair(i, j)
        if self.successors[i, j] < 0:
            return None
        nodes = [i]
        node = i
        while node != j:
            node = int(self.successors[node, j])
            nodes.append(node)
        return Path(tuple(nodes), self.distance(i, j))

    def to_lists(self) -> list:
        """Return the distance matrix as nested lists."""
        self._require_ok()
        return [
            [self.distance(i, j) for j in range(self.distances.shape[1])]
            for i in range(self.distances.shape[0])
        ]


@dataclass(frozen=True)
class GridPathResult:
    """Result of an A* grid search.

    Attributes:
        start: Start cell.
        goal: Goal cell.
        status: OK when a path was found, NO_PATH otherwise.
        path: Cells from start to goal inclusive; empty when there is no path.
        cost: Number of moves along the path; None when there is no path.
        parents: Parent Map over every cell that received a tentative score.
        g_scores: Best known cost from start for the same cells.
        expanded: Number of cells taken from the open set and expanded.
    """

    start: GridCell
    goal: GridCell
    status: SolverStatus
    path: Tuple[GridCell, ...] = ()
    cost: Optional[int] = None
    parents: Mapping[GridCell, Optional[GridCell]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    g_scores: Mapping[GridCell, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    expanded: int = 0

    @property
    def ok(self) -> bool:
        return self.status == SolverStatus.OK

    @property
    def found(self) -> bool:
        return self.ok

    def as_path(self) -> Optional[Path]:
        if not self.path:
            return None
        return Path(self.path, self.cost)


class MSTEdge(NamedTuple):
    """An edge accepted into a spanning tree."""

    u: VertexID
    v: VertexID
    weight: Cost


@dataclass(frozen=True)
class MSTResult:
    """Minimum spanning tree (Kruskal, Prim).

    Attributes:
        status: OK or DISCONNECTED.
        edges: Accepted edges in acceptance order; empty when disconnected.
        total_weight: Sum of accepted edge weights; None when disconnected.
    """

    status: SolverStatus
    edges: Tuple[MSTEdge, ...] = ()
    total_weight: Optional[Cost] = None

    @property
    def ok(self) -> bool:
        return self.status == SolverStatus.OK

    def vertex_pairs(self) -> FrozenSet[FrozenSet[VertexID]]:
        """Return accepted edges as unordered vertex pairs."""
        return frozenset(frozenset((e.u, e.v)) for e in self.edges)


@dataclass(frozen=True)
class MaxFlowResult:
    """Result of a max-flow computation between a source/sink pair.

    Attributes:
        source: Source vertex.
        sink: Sink vertex.
        total_flow: Maximum flow value.
        edge_flow: Positive net flow per (u, v) vertex pair.
        reachable: Vertices reachable from the source in the final residual
            network (the source side of a minimum cut).
        min_cut: Original edges leaving ``reachable``; every one is saturated.
        augmentations: Number of augmenting paths used.
    """

    source: VertexID
    sink: VertexID
    total_flow: Cost
    edge_flow: Mapping[Tuple[VertexID, VertexID], Cost] = field(
        default_factory=lambda: MappingProxyType({})
    )
    reachable: FrozenSet[VertexID] = frozenset()
    min_cut: Tuple[Edge, ...] = ()
    augmentations: int = 0

    @property
    def min_cut_capacity(self) -> Cost:
        return sum(edge.weight for edge in self.min_cut)


@dataclass(frozen=True)
class SCCResult:
    """Strongly connected components (Tarjan, Kosaraju).

    Attributes:
        components: Components in discovery order; each is an unordered set.
        labels: Component index of each vertex.
    """

    components: Tuple[FrozenSet[VertexID], ...]
    labels: Tuple[int, ...]

    @classmethod
    def from_components(
        cls, components: Tuple[FrozenSet[VertexID], ...], num_vertices: int
    ) -> SCCResult:
        labels = [0] * num_vertices
        for idx, component in enumerate(components):
            for v in component:
                labels[v] = idx
        return cls(components=components, labels=tuple(labels))

    @property
    def count(self) -> int:
        return len(self.components)

    def component_of(self, v: VertexID) -> FrozenSet[VertexID]:
        return self.components[self.labels[v]]

    def as_partition(self) -> FrozenSet[FrozenSet[VertexID]]:
        """Return the components as an order-independent set of sets."""
        return frozenset(self.components)

    def condensation(self, graph: Graph) -> Graph:
        """
        Build the component DAG of ``graph``.

        Vertex i of the result is component i. Each pair of distinct
        components joined by at least one edge gets one unit-weight edge, in
        the order the first such edge appears in ``graph``.
        """
        dag = Graph(self.count, directed=True)
        seen: Dict[Tuple[int, int], None] = {}
        for u, v, _ in graph.edges():
            cu, cv = self.labels[u], self.labels[v]
            if cu != cv and (cu, cv) not in seen:
                seen[(cu, cv)] = None
                dag.add_edge(cu, cv)
        return dag


@dataclass(frozen=True)
class TopologicalOrderResult:
    """Topological ordering of a directed graph.

    Attributes:
        status: OK or CYCLE.
        order: Vertices such that every edge points forward; None with a cycle.
        back_edge: With a cycle, the edge (u, v) that closed it.
    """

    status: SolverStatus
    order: Optional[Tuple[VertexID, ...]] = None
    back_edge: Optional[Tuple[VertexID, VertexID]] = None

    @property
    def ok(self) -> bool:
        return self.status == SolverStatus.OK
