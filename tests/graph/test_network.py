"""Tests for FlowNetwork construction and validation."""

import pytest

from augflow.errors import InvalidNetworkError
from augflow.graph.network import Edge, FlowNetwork


class TestFlowNetworkBasics:
    def test_accessors(self):
        net = FlowNetwork(3, [(0, 1, 4), (1, 2, 3)])

        assert net.num_nodes == 3
        assert len(net) == 3
        assert net.num_edges == 2
        assert net.edges == (Edge(0, 1, 4), Edge(1, 2, 3))
        assert list(net.nodes()) == [0, 1, 2]
        assert net.capacity(0, 1) == 4
        assert net.capacity(1, 0) == 0
        assert net.has_edge(1, 2)
        assert not net.has_edge(2, 1)
        assert net.out_edges(1) == (Edge(1, 2, 3),)
        assert net.in_edges(1) == (Edge(0, 1, 4),)
        assert net.total_capacity() == 7

    def test_edge_objects_accepted(self):
        net = FlowNetwork(2, [Edge(0, 1, 9)])
        assert net.capacity(0, 1) == 9
        assert net.edges[0].key == (0, 1)

    def test_empty_network(self):
        net = FlowNetwork(0)
        assert net.num_edges == 0
        assert net.total_capacity() == 0

    def test_equality_and_hash(self):
        a = FlowNetwork(2, [(0, 1, 1)])
        b = FlowNetwork(2, [(0, 1, 1)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != FlowNetwork(2, [(0, 1, 2)])
        assert repr(a) == "FlowNetwork(num_nodes=2, num_edges=1)"

    def test_from_edges_infers_node_count(self):
        net = FlowNetwork.from_edges([(0, 3, 1), (3, 5, 2)])
        assert net.num_nodes == 6

    def test_dict_round_trip(self):
        net = FlowNetwork(3, [(0, 1, 4), (1, 2, 3)])
        data = net.to_dict()
        assert data == {"num_nodes": 3, "edges": [[0, 1, 4], [1, 2, 3]]}
        assert FlowNetwork.from_dict(data) == net

    def test_from_dict_without_num_nodes(self):
        net = FlowNetwork.from_dict({"edges": [[0, 2, 1]]})
        assert net.num_nodes == 3


class TestFlowNetworkValidation:
    @pytest.mark.parametrize(
        "edges,match",
        [
            ([(0, 1, -1)], "negative capacity"),
            ([(0, 1, 1.5)], "must be an integer"),
            ([(0, 1, True)], "must be an integer"),
            ([(0, 0, 1)], "self-loop"),
            ([(0, 3, 1)], "out of range"),
            ([(-1, 1, 1)], "out of range"),
            ([("a", 1, 1)], "out of range"),
            ([(0, 1, 1), (0, 1, 2)], "duplicates"),
            ([(0, 1, 1), (1, 0, 2)], "anti-parallel"),
            ([(0, 1)], "triple"),
            ([5], "triple"),
        ],
    )
    def test_invalid_edges(self, edges, match):
        with pytest.raises(InvalidNetworkError, match=match):
            FlowNetwork(3, edges)

    @pytest.mark.parametrize("num_nodes", [-1, 2.0, "3", None])
    def test_invalid_node_count(self, num_nodes):
        with pytest.raises(InvalidNetworkError):
            FlowNetwork(num_nodes, [])

    def test_capacity_above_limit(self):
        with pytest.raises(InvalidNetworkError, match="exceeds the maximum"):
            FlowNetwork(2, [(0, 1, 2**63)])

    def test_custom_capacity_limit(self):
        FlowNetwork(2, [(0, 1, 15)], max_capacity=15)
        with pytest.raises(InvalidNetworkError):
            FlowNetwork(2, [(0, 1, 16)], max_capacity=15)
        assert FlowNetwork(2, max_capacity=15).max_capacity == 15
        assert FlowNetwork(2).max_capacity == 2**63 - 1

    def test_invalid_error_is_value_error(self):
        with pytest.raises(ValueError):
            FlowNetwork(2, [(0, 1, -5)])

    @pytest.mark.parametrize(
        "data",
        [[1, 2], {"edges": "x"}, {"num_nodes": 2, "links": []}],
    )
    def test_from_dict_malformed(self, data):
        with pytest.raises(InvalidNetworkError):
            FlowNetwork.from_dict(data)

    def test_out_edges_bad_node(self):
        net = FlowNetwork(2, [(0, 1, 1)])
        with pytest.raises(InvalidNetworkError):
            net.out_edges(2)
