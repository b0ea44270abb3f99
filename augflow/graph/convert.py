"""NetworkX graph conversion utilities.

Converts between NetworkX digraphs with arbitrary hashable node names and
`FlowNetwork`, whose vertices are dense integer indices.

Example:
    >>> import networkx as nx
    >>> from augflow.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> network, node_map = from_networkx(G)
    >>> node_map.to_index["s"]
    1
    >>> G_out = to_networkx(network, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

import networkx as nx

from augflow.errors import InvalidNetworkError
from augflow.graph.network import FlowNetwork
from augflow.types.dto import FlowSummary


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def index(self, name: Hashable) -> int:
        """Return the index of ``name``.

        Raises:
            InvalidNetworkError: If ``name`` is not mapped.
        """
        try:
            return self.to_index[name]
        except KeyError:
            raise InvalidNetworkError(f"Unknown node {name!r}") from None

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: nx.DiGraph,
    *,
    capacity_attr: str = "capacity",
    default_capacity: Optional[int] = None,
) -> Tuple[FlowNetwork, NodeMap]:
    """Convert a NetworkX DiGraph into a `FlowNetwork`.

    Node names are sorted by ``str`` for a deterministic index assignment.

    Args:
        G: A ``networkx.DiGraph``. Multigraphs and undirected graphs are
            rejected because parallel and anti-parallel edges are not allowed.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges missing ``capacity_attr``. When
            None, a missing capacity is an error.

    Returns:
        Tuple of ``(network, node_map)``.

    Raises:
        TypeError: If ``G`` is not a NetworkX DiGraph.
        InvalidNetworkError: If an edge lacks capacity or fails validation.
    """
    if not isinstance(G, nx.DiGraph) or isinstance(G, nx.MultiDiGraph):
        raise TypeError(f"Expected networkx.DiGraph, got {type(G).__name__}")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))

    triples: List[Tuple[int, int, int]] = []
    for u, v, data in G.edges(data=True):
        cap = data.get(capacity_attr, default_capacity)
        if cap is None:
            raise InvalidNetworkError(
                f"Edge {u!r}->{v!r} has no '{capacity_attr}' attribute"
            )
        triples.append((node_map.to_index[u], node_map.to_index[v], cap))

    return FlowNetwork(len(node_map), triples), node_map


def to_networkx(
    network: FlowNetwork,
    node_map: Optional[NodeMap] = None,
    *,
    summary: Optional[FlowSummary] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.DiGraph:
    """Convert a `FlowNetwork` back to a NetworkX DiGraph.

    Args:
        network: Network to convert.
        node_map: Restores original node names; integer labels when None.
        summary: When given, each edge also carries its flow in ``flow_attr``.
        capacity_attr: Edge attribute name for capacity.
        flow_attr: Edge attribute name for flow.

    Returns:
        ``networkx.DiGraph`` with one edge per original edge.
    """

    def name(idx: int) -> Hashable:
        return node_map.to_name.get(idx, idx) if node_map is not None else idx

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in network.nodes())
    for edge in network.edges:
        attrs = {capacity_attr: edge.capacity}
        if summary is not None:
            attrs[flow_attr] = summary.edge_flow.get(edge.key, 0)
        G.add_edge(name(edge.src), name(edge.dst), **attrs)
    return G
