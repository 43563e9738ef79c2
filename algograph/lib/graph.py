from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from algograph.config import GRAPH_CONFIG
from algograph.exceptions import (
    AlgographError,
    NegativeWeightError,
    OutOfRangeVertexError,
)
from algograph.lib.algorithms.base import INF, Cost

VertexID = int
EdgeID = int


def check_vertex(v: object, num_vertices: int) -> VertexID:
    """
    Check that ``v`` is a vertex id in ``[0, num_vertices)``.

    Returns:
        The vertex id as a plain int.

    Raises:
        OutOfRangeVertexError: If v is not an integer in range. Booleans are
            not accepted as vertex ids.
    """
    if (
        not isinstance(v, Integral)
        or isinstance(v, bool)
        or not 0 <= v < num_vertices
    ):
        raise OutOfRangeVertexError(v, num_vertices)
    return int(v)


class Edge(NamedTuple):
    """A directed, weighted edge as stored in a Graph."""

    source: VertexID
    destination: VertexID
    weight: Cost


class Graph:
    """
    A directed multigraph over the integer vertices ``0 .. n-1``.

    This class enforces:
      - The vertex set is fixed at construction; it never grows or shrinks.
      - Every edge endpoint must be an existing vertex (OutOfRangeVertexError).
      - Negative weights are rejected at insertion (NegativeWeightError)
        unless the graph was built with ``allow_negative_weights=True``.
      - Edges are never removed. Each edge gets an integer ID equal to its
        insertion index, and per-vertex adjacency preserves insertion order.

    Edges live in flat parallel lists (source, destination, weight) and each
    vertex holds the list of its outgoing edge IDs, so adjacency is index
    based rather than object linked.

    An undirected graph (``directed=False``) stores every edge in both
    directions; ``add_edge`` then performs two directed insertions.
    """

    def __init__(
        self,
        num_vertices: int,
        directed: Optional[bool] = None,
        allow_negative_weights: Optional[bool] = None,
    ) -> None:
        """
        Initialize a graph with ``num_vertices`` vertices and no edges.

        Args:
            num_vertices: Number of vertices. Must be a non-negative integer.
            directed: Edge insertion mode. Defaults to GRAPH_CONFIG.directed.
            allow_negative_weights: Whether negative weights are accepted.
                Defaults to GRAPH_CONFIG.allow_negative_weights.

        Raises:
            ValueError: If num_vertices is negative or not an integer.
        """
        if (
            not isinstance(num_vertices, Integral)
            or isinstance(num_vertices, bool)
            or num_vertices < 0
        ):
            raise ValueError(
                f"Vertex count must be a non-negative integer, got {num_vertices!r}."
            )
        self._n: int = int(num_vertices)
        self.directed: bool = GRAPH_CONFIG.directed if directed is None else directed
        self.allow_negative_weights: bool = (
            GRAPH_CONFIG.allow_negative_weights
            if allow_negative_weights is None
            else allow_negative_weights
        )

        self._src: List[VertexID] = []
        self._dst: List[VertexID] = []
        self._weight: List[Cost] = []
        self._out: List[List[EdgeID]] = [[] for _ in range(self._n)]
        self._negative_count: int = 0

    @classmethod
    def from_edges(
        cls,
        num_vertices: int,
        edges: Iterable[Sequence[Cost]],
        directed: Optional[bool] = None,
        allow_negative_weights: Optional[bool] = None,
    ) -> Graph:
        """
        Build a graph and insert ``edges`` in order.

        Args:
            num_vertices: Number of vertices.
            edges: Iterable of (u, v) or (u, v, w) tuples.
            directed: Edge insertion mode.
            allow_negative_weights: Whether negative weights are accepted.

        Returns:
            The new Graph.
        """
        graph = cls(
            num_vertices,
            directed=directed,
            allow_negative_weights=allow_negative_weights,
        )
        graph.add_edges_from(edges)
        return graph

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"Graph(num_vertices={self._n}, num_edges={len(self._src)}, {kind})"
        )

    #
    # Vertex access
    #
    def num_vertices(self) -> int:
        return self._n

    def vertices(self) -> range:
        return range(self._n)

    def validate_vertex(self, v: object) -> VertexID:
        """
        Check that ``v`` is a vertex of this graph.

        Args:
            v: Candidate vertex ID.

        Returns:
            The vertex ID as a plain int.

        Raises:
            OutOfRangeVertexError: If v is not an integer in [0, n).
        """
        return check_vertex(v, self._n)

    #
    # Edge management
    #
    def add_edge(self, u: VertexID, v: VertexID, weight: Cost = 1) -> EdgeID:
        """
        Add an edge from u to v.

        On an undirected graph the reverse edge (v, u) is added as well,
        except for self-loops, which are stored once.

        Args:
            u: The source vertex.
            v: The destination vertex.
            weight: Edge weight (or capacity). Defaults to 1.

        Returns:
            The ID of the (first) inserted edge.

        Raises:
            OutOfRangeVertexError: If u or v is not a vertex of this graph.
            NegativeWeightError: If weight < 0 and negative weights are not allowed.
            TypeError: If weight is not a real number.
            AlgographError: If weight is NaN.
        """
        u = self.validate_vertex(u)
        v = self.validate_vertex(v)
        self._check_weight(weight)

        edge_id = self._append(u, v, weight)
        if not self.directed and u != v:
            self._append(v, u, weight)
        return edge_id

    def add_undirected_edge(
        self, u: VertexID, v: VertexID, weight: Cost = 1
    ) -> Tuple[EdgeID, EdgeID]:
        """
        Add the edge in both directions, regardless of the insertion mode.

        Returns:
            The IDs of the (u, v) and (v, u) edges.
        """
        u = self.validate_vertex(u)
        v = self.validate_vertex(v)
        self._check_weight(weight)
        return self._append(u, v, weight), self._append(v, u, weight)

    def add_edges_from(self, edges: Iterable[Sequence[Cost]]) -> List[EdgeID]:
        """
        Add several edges given as (u, v) or (u, v, w) tuples.

        Returns:
            The IDs of the inserted edges, one per input tuple.

        Raises:
            ValueError: If a tuple has neither two nor three elements.
        """
        edge_ids = []
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                edge_ids.append(self.add_edge(u, v))
            elif len(edge) == 3:
                u, v, w = edge
                edge_ids.append(self.add_edge(u, v, w))
            else:
                raise ValueError(f"Expected (u, v) or (u, v, w), got {edge!r}.")
        return edge_ids

    def _check_weight(self, weight: Cost) -> None:
        if not isinstance(weight, Real) or isinstance(weight, bool):
            raise TypeError(f"Edge weight must be a number, got {weight!r}.")
        if math.isnan(weight):
            raise AlgographError("Edge weight must not be NaN.")
        if weight < 0 and not self.allow_negative_weights:
            raise NegativeWeightError(
                f"Negative weight {weight} is not allowed in this graph."
            )

    def _append(self, u: VertexID, v: VertexID, weight: Cost) -> EdgeID:
        edge_id = len(self._src)
        self._src.append(u)
        self._dst.append(v)
        self._weight.append(weight)
        self._out[u].append(edge_id)
        if weight < 0:
            self._negative_count += 1
        return edge_id

    #
    # Queries
    #
    def num_edges(self) -> int:
        return len(self._src)

    @property
    def has_negative_weights(self) -> bool:
        return self._negative_count > 0

    def neighbors(self, u: VertexID) -> Iterator[Tuple[VertexID, Cost]]:
        """
        Iterate over (neighbor, weight) pairs of u's outgoing edges.

        Pairs come in edge insertion order; parallel edges appear once each.

        Raises:
            OutOfRangeVertexError: If u is not a vertex of this graph.
        """
        u = self.validate_vertex(u)
        dst, weight = self._dst, self._weight
        return ((dst[e_id], weight[e_id]) for e_id in self._out[u])

    def out_degree(self, u: VertexID) -> int:
        return len(self._out[self.validate_vertex(u)])

    def edge(self, edge_id: EdgeID) -> Edge:
        return Edge(self._src[edge_id], self._dst[edge_id], self._weight[edge_id])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges in insertion order."""
        return (
            Edge(u, v, w) for u, v, w in zip(self._src, self._dst, self._weight)
        )

    #
    # Derived graphs
    #
    def transpose(self) -> Graph:
        """
        Return a new graph with every edge reversed.

        Edge IDs and insertion order are preserved, so edge i of the result is
        the reversal of edge i of this graph.
        """
        transposed = Graph(
            self._n,
            directed=self.directed,
            allow_negative_weights=self.allow_negative_weights,
        )
        for u, v, w in zip(self._src, self._dst, self._weight):
            transposed._append(v, u, w)
        return transposed

    def to_matrix(self, combine: str = "min") -> AdjacencyMatrix:
        """
        Build a dense adjacency matrix from this graph.

        Args:
            combine: How parallel edges merge into one cell. "min" keeps the
                smallest weight and marks absent cells with INF (distances);
                "sum" adds weights and marks absent cells with 0 (capacities).

        Returns:
            An AdjacencyMatrix over the same vertices.

        Raises:
            ValueError: If combine is not "min" or "sum".
        """
        if combine == "min":
            matrix = AdjacencyMatrix(self._n, absent=INF)
            for u, v, w in self.edges():
                if w < matrix.weight(u, v):
                    matrix.set_edge(u, v, w)
        elif combine == "sum":
            integral = all(isinstance(w, Integral) for w in self._weight)
            matrix = AdjacencyMatrix(
                self._n, absent=0, dtype=np.int64 if integral else np.float64
            )
            for u, v, w in self.edges():
                matrix.add_to_edge(u, v, w)
        else:
            raise ValueError(f"Unknown combine mode '{combine}'.")
        return matrix


class AdjacencyMatrix:
    """
    Dense ``n x n`` weight matrix over the vertices ``0 .. n-1``.

    A cell equal to ``absent`` means "no edge". Matrix neighbors are reported
    in ascending vertex order.
    """

    def __init__(
        self,
        num_vertices: int,
        absent: Cost = INF,
        dtype: type = np.float64,
    ) -> None:
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {num_vertices}.")
        self._n = num_vertices
        self.absent = absent
        self._data = np.full((num_vertices, num_vertices), absent, dtype=dtype)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(num_vertices={self._n}, absent={self.absent})"

    def num_vertices(self) -> int:
        return self._n

    def _check(self, v: object) -> int:
        return check_vertex(v, self._n)

    def set_edge(self, u: VertexID, v: VertexID, weight: Cost) -> None:
        """Set the (u, v) cell, replacing any previous weight."""
        self._data[self._check(u), self._check(v)] = weight

    def add_to_edge(self, u: VertexID, v: VertexID, weight: Cost) -> None:
        """Accumulate weight into the (u, v) cell."""
        self._data[self._check(u), self._check(v)] += weight

    def weight(self, u: VertexID, v: VertexID) -> Cost:
        return self._data[self._check(u), self._check(v)].item()

    def has_edge(self, u: VertexID, v: VertexID) -> bool:
        return self.weight(u, v) != self.absent

    def neighbors(self, u: VertexID) -> Iterator[Tuple[VertexID, Cost]]:
        """Iterate over (v, weight) for every present cell of row u, ascending v."""
        row = self._data[self._check(u)]
        present = np.flatnonzero(row != self.absent)
        return ((int(v), row[v].item()) for v in present)

    def as_array(self) -> np.ndarray:
        """Return a read-only copy of the underlying array."""
        data = self._data.copy()
        data.flags.writeable = False
        return data
