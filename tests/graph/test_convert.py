"""Tests for augflow.graph.convert NetworkX conversion utilities."""

import networkx as nx
import pytest

from augflow.algorithms.max_flow import calc_max_flow
from augflow.errors import InvalidNetworkError
from augflow.graph.convert import NodeMap, from_networkx, to_networkx
from augflow.graph.network import FlowNetwork


class TestNodeMap:
    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_index_unknown_name(self):
        node_map = NodeMap.from_names(["A"])
        assert node_map.index("A") == 0
        with pytest.raises(InvalidNetworkError, match="Unknown node"):
            node_map.index("Z")


class TestFromNetworkx:
    def test_nodes_sorted_and_capacities_kept(self):
        G = nx.DiGraph()
        G.add_edge("s", "a", capacity=3)
        G.add_edge("a", "t", capacity=2)

        network, node_map = from_networkx(G)

        assert node_map.to_index == {"a": 0, "s": 1, "t": 2}
        assert network.num_nodes == 3
        assert network.capacity(1, 0) == 3
        assert network.capacity(0, 2) == 2

    def test_isolated_nodes_kept(self):
        G = nx.DiGraph()
        G.add_nodes_from(["x", "y"])
        network, node_map = from_networkx(G)
        assert network.num_nodes == 2
        assert network.num_edges == 0

    def test_missing_capacity(self):
        G = nx.DiGraph()
        G.add_edge("a", "b")
        with pytest.raises(InvalidNetworkError, match="no 'capacity'"):
            from_networkx(G)

        network, _ = from_networkx(G, default_capacity=7)
        assert network.capacity(0, 1) == 7

    def test_custom_capacity_attr(self):
        G = nx.DiGraph()
        G.add_edge("a", "b", bw=4)
        network, _ = from_networkx(G, capacity_attr="bw")
        assert network.capacity(0, 1) == 4

    def test_anti_parallel_rejected(self):
        G = nx.DiGraph()
        G.add_edge("a", "b", capacity=1)
        G.add_edge("b", "a", capacity=1)
        with pytest.raises(InvalidNetworkError, match="anti-parallel"):
            from_networkx(G)

    @pytest.mark.parametrize("graph_cls", [nx.Graph, nx.MultiDiGraph, dict])
    def test_non_digraph_rejected(self, graph_cls):
        with pytest.raises(TypeError):
            from_networkx(graph_cls())


class TestToNetworkx:
    def test_integer_labels_by_default(self, diamond):
        G = to_networkx(diamond)
        assert sorted(G.nodes()) == [0, 1, 2, 3]
        assert G.edges[0, 1]["capacity"] == 3
        assert "flow" not in G.edges[0, 1]

    def test_names_and_flow_restored(self):
        G = nx.DiGraph()
        G.add_edge("s", "a", capacity=10)
        G.add_edge("a", "t", capacity=2)
        network, node_map = from_networkx(G)

        _, summary = calc_max_flow(
            network,
            node_map.index("s"),
            node_map.index("t"),
            return_summary=True,
        )
        G_out = to_networkx(network, node_map, summary=summary)

        assert set(G_out.nodes()) == {"s", "a", "t"}
        assert G_out.edges["s", "a"]["flow"] == 2
        assert G_out.edges["a", "t"]["flow"] == 2
        assert G_out.edges["s", "a"]["capacity"] == 10

    def test_round_trip_preserves_network(self):
        network = FlowNetwork(3, [(0, 1, 4), (2, 1, 6)])
        back, _ = from_networkx(to_networkx(network))
        assert back == network
