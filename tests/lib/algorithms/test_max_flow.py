import pytest

from algograph.exceptions import (
    InvalidEndpointsError,
    NegativeWeightError,
    OutOfRangeVertexError,
)
from algograph.lib.algorithms.max_flow import max_flow
from algograph.lib.graph import Edge, Graph


class TestMaxFlow:
    def test_example_network(self, flow6):
        result = max_flow(flow6, 0, 5)
        assert result.total_flow == 19
        assert isinstance(result.total_flow, int)
        assert result.augmentations > 0

    def test_max_flow_equals_min_cut(self, flow6):
        result = max_flow(flow6, 0, 5)
        assert result.reachable == frozenset({0, 2})
        assert result.min_cut == (Edge(0, 1, 10), Edge(2, 4, 9))
        assert result.min_cut_capacity == result.total_flow

    def test_flow_is_feasible_and_conserved(self, flow6):
        result = max_flow(flow6, 0, 5)
        capacity = {}
        for u, v, w in flow6.edges():
            capacity[(u, v)] = capacity.get((u, v), 0) + w
        for pair, flow in result.edge_flow.items():
            assert 0 < flow <= capacity[pair]

        def balance(v):
            out_flow = sum(f for (a, _), f in result.edge_flow.items() if a == v)
            in_flow = sum(f for (_, b), f in result.edge_flow.items() if b == v)
            return out_flow - in_flow

        assert balance(0) == 19
        assert balance(5) == -19
        for v in (1, 2, 3, 4):
            assert balance(v) == 0

    def test_parallel_capacities_add_up(self):
        g = Graph.from_edges(3, [(0, 1, 3), (0, 1, 4), (1, 2, 10)])
        assert max_flow(g, 0, 2).total_flow == 7

    def test_float_capacities(self):
        g = Graph.from_edges(3, [(0, 1, 1.5), (1, 2, 2.5)])
        assert max_flow(g, 0, 2).total_flow == pytest.approx(1.5)

    def test_sink_unreachable(self):
        g = Graph.from_edges(3, [(0, 1, 5)])
        result = max_flow(g, 0, 2)
        assert result.total_flow == 0
        assert result.augmentations == 0
        assert result.reachable == frozenset({0, 1})
        assert result.min_cut == ()

    def test_source_equals_sink(self, flow6):
        with pytest.raises(InvalidEndpointsError, match="must differ"):
            max_flow(flow6, 2, 2)

    @pytest.mark.parametrize("source, sink", [(0, 6), (-1, 5)])
    def test_endpoint_out_of_range(self, flow6, source, sink):
        with pytest.raises(OutOfRangeVertexError):
            max_flow(flow6, source, sink)

    def test_negative_capacity(self):
        g = Graph.from_edges(2, [(0, 1, -3)], allow_negative_weights=True)
        with pytest.raises(NegativeWeightError):
            max_flow(g, 0, 1)

    def test_graph_is_not_modified(self, flow6):
        before = list(flow6.edges())
        max_flow(flow6, 0, 5)
        assert list(flow6.edges()) == before
