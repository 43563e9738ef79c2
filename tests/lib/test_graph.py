import numpy as np
import pytest

from algograph.exceptions import (
    AlgographError,
    NegativeWeightError,
    OutOfRangeVertexError,
)
from algograph.lib.algorithms.base import INF
from algograph.lib.graph import AdjacencyMatrix, Edge, Graph


def test_init_empty_graph():
    """A new graph has its vertices and no edges."""
    g = Graph(4)
    assert len(g) == 4
    assert g.num_vertices() == 4
    assert g.num_edges() == 0
    assert list(g.vertices()) == [0, 1, 2, 3]
    assert list(g.edges()) == []
    assert g.has_negative_weights is False


def test_zero_vertex_graph():
    g = Graph(0)
    assert len(g) == 0
    with pytest.raises(OutOfRangeVertexError):
        g.add_edge(0, 0)


@pytest.mark.parametrize("bad", [-1, 2.5, "3", None, True])
def test_invalid_vertex_count(bad):
    with pytest.raises(ValueError, match="non-negative integer"):
        Graph(bad)


def test_add_edge_returns_insertion_ids():
    g = Graph(3)
    assert g.add_edge(0, 1, 5) == 0
    assert g.add_edge(1, 2) == 1
    assert g.edge(0) == Edge(0, 1, 5)
    assert g.edge(1) == Edge(1, 2, 1)


@pytest.mark.parametrize("u, v", [(-1, 0), (0, 3), (3, 0), (0, 1.0), ("a", 1)])
def test_add_edge_out_of_range(u, v):
    """Endpoints outside [0, n) fail before anything is stored."""
    g = Graph(3)
    with pytest.raises(OutOfRangeVertexError):
        g.add_edge(u, v, 1)
    assert g.num_edges() == 0


def test_add_edge_accepts_numpy_integers():
    g = Graph(3)
    g.add_edge(np.int64(0), np.int32(2), 1)
    assert list(g.neighbors(0)) == [(2, 1)]
    assert isinstance(g.edge(0).source, int)


def test_negative_weight_rejected_by_default():
    g = Graph(2)
    with pytest.raises(NegativeWeightError, match="Negative weight -1"):
        g.add_edge(0, 1, -1)
    assert g.num_edges() == 0


def test_negative_weight_allowed_when_enabled():
    g = Graph(2, allow_negative_weights=True)
    g.add_edge(0, 1, -1)
    assert g.has_negative_weights is True


def test_non_numeric_weight_rejected():
    g = Graph(2)
    with pytest.raises(TypeError, match="must be a number"):
        g.add_edge(0, 1, "heavy")


def test_nan_weight_rejected():
    g = Graph(2, allow_negative_weights=True)
    with pytest.raises(AlgographError, match="NaN"):
        g.add_edge(0, 1, float("nan"))
    assert g.num_edges() == 0


def test_neighbors_in_insertion_order_with_parallel_edges():
    g = Graph(4)
    g.add_edge(0, 3, 1)
    g.add_edge(0, 1, 2)
    g.add_edge(0, 3, 7)
    g.add_edge(0, 2, 4)
    assert list(g.neighbors(0)) == [(3, 1), (1, 2), (3, 7), (2, 4)]
    assert g.out_degree(0) == 4
    assert list(g.neighbors(1)) == []


def test_neighbors_out_of_range():
    g = Graph(2)
    with pytest.raises(OutOfRangeVertexError):
        g.neighbors(2)


def test_undirected_mode_stores_both_directions():
    g = Graph(3, directed=False)
    g.add_edge(0, 1, 4)
    g.add_edge(2, 2, 1)  # self-loop stored once
    assert list(g.edges()) == [Edge(0, 1, 4), Edge(1, 0, 4), Edge(2, 2, 1)]
    assert list(g.neighbors(1)) == [(0, 4)]


def test_add_undirected_edge_on_directed_graph():
    g = Graph(2)
    ids = g.add_undirected_edge(0, 1, 3)
    assert ids == (0, 1)
    assert list(g.neighbors(0)) == [(1, 3)]
    assert list(g.neighbors(1)) == [(0, 3)]


def test_add_edges_from_and_from_edges():
    g = Graph.from_edges(3, [(0, 1), (1, 2, 5)])
    assert list(g.edges()) == [Edge(0, 1, 1), Edge(1, 2, 5)]
    with pytest.raises(ValueError, match="Expected"):
        g.add_edges_from([(0, 1, 2, 3)])


def test_transpose_reverses_edges_and_keeps_order():
    g = Graph.from_edges(3, [(0, 1, 2), (1, 2, 3), (0, 2, 9)])
    t = g.transpose()
    assert list(t.edges()) == [Edge(1, 0, 2), Edge(2, 1, 3), Edge(2, 0, 9)]
    assert list(t.neighbors(2)) == [(1, 3), (0, 9)]
    # the original is untouched
    assert list(g.neighbors(0)) == [(1, 2), (2, 9)]


def test_to_matrix_min_keeps_cheapest_parallel_edge():
    g = Graph.from_edges(3, [(0, 1, 5), (0, 1, 2), (1, 2, 1)])
    m = g.to_matrix()
    assert m.weight(0, 1) == 2
    assert m.weight(1, 2) == 1
    assert m.weight(2, 0) == INF
    assert m.has_edge(0, 1)
    assert not m.has_edge(1, 0)


def test_to_matrix_sum_adds_parallel_capacities():
    g = Graph.from_edges(2, [(0, 1, 5), (0, 1, 2)])
    m = g.to_matrix(combine="sum")
    assert m.weight(0, 1) == 7
    assert m.weight(1, 0) == 0
    assert m.as_array().dtype == np.int64


def test_to_matrix_unknown_mode():
    with pytest.raises(ValueError, match="Unknown combine mode"):
        Graph(1).to_matrix(combine="max")


def test_repr():
    g = Graph.from_edges(2, [(0, 1)], directed=False)
    assert repr(g) == "Graph(num_vertices=2, num_edges=2, undirected)"


class TestAdjacencyMatrix:
    def test_neighbors_ascending(self):
        m = AdjacencyMatrix(4)
        m.set_edge(0, 3, 1)
        m.set_edge(0, 1, 0)
        m.set_edge(0, 2, -2)
        assert list(m.neighbors(0)) == [(1, 0.0), (2, -2.0), (3, 1.0)]

    def test_set_edge_overwrites(self):
        m = AdjacencyMatrix(2)
        m.set_edge(0, 1, 4)
        m.set_edge(0, 1, 9)
        assert m.weight(0, 1) == 9

    def test_zero_absent_marker(self):
        m = AdjacencyMatrix(2, absent=0, dtype=np.int64)
        m.add_to_edge(0, 1, 3)
        m.add_to_edge(0, 1, 4)
        assert list(m.neighbors(0)) == [(1, 7)]
        assert list(m.neighbors(1)) == []

    def test_out_of_range(self):
        m = AdjacencyMatrix(2)
        with pytest.raises(OutOfRangeVertexError):
            m.set_edge(0, 2, 1)
        with pytest.raises(OutOfRangeVertexError):
            list(m.neighbors(-1))

    def test_as_array_is_read_only_copy(self):
        m = AdjacencyMatrix(2)
        arr = m.as_array()
        with pytest.raises(ValueError):
            arr[0, 1] = 1.0
        assert m.weight(0, 1) == INF
