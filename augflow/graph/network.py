"""Immutable capacitated directed graph.

`FlowNetwork` is the validated input to every max-flow computation. Vertices
are dense integer indices ``0..num_nodes-1``; each edge carries a
non-negative integer capacity. The graph rejects, at construction time:

  - negative, non-integer, or oversized capacities,
  - out-of-range vertex indices,
  - self-loops,
  - duplicate edges and anti-parallel pairs (``u->v`` together with ``v->u``).

Once built, a network is never mutated; flow lives in
`augflow.algorithms.residual.ResidualNetwork`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from augflow.config import MAXFLOW_CONFIG
from augflow.errors import InvalidNetworkError
from augflow.types.base import EdgeKey, NodeID


@dataclass(frozen=True)
class Edge:
    """Original network edge.

    Attributes:
        src: Tail vertex index.
        dst: Head vertex index.
        capacity: Non-negative integer capacity.
    """

    src: NodeID
    dst: NodeID
    capacity: int

    @property
    def key(self) -> EdgeKey:
        return (self.src, self.dst)


def _is_int(value: Any) -> bool:
    # bool is an int subclass; True as a capacity is almost always a bug.
    return isinstance(value, int) and not isinstance(value, bool)


class FlowNetwork:
    """Validated, immutable capacitated digraph.

    Args:
        num_nodes: Number of vertices.
        edges: Iterable of ``(src, dst, capacity)`` triples or `Edge` objects.
        max_capacity: Upper bound for a single capacity. Defaults to
            ``MAXFLOW_CONFIG.max_capacity``.

    Raises:
        InvalidNetworkError: If any edge or the node count is invalid.

    Example:
        >>> net = FlowNetwork(3, [(0, 1, 4), (1, 2, 3)])
        >>> net.capacity(0, 1)
        4
        >>> net.capacity(1, 0)
        0
    """

    __slots__ = ("_num_nodes", "_max_capacity", "_edges", "_capacity", "_out", "_in")

    def __init__(
        self,
        num_nodes: int,
        edges: Iterable[Any] = (),
        *,
        max_capacity: Optional[int] = None,
    ) -> None:
        if not _is_int(num_nodes) or num_nodes < 0:
            raise InvalidNetworkError(
                f"num_nodes must be a non-negative integer, got {num_nodes!r}"
            )
        limit = MAXFLOW_CONFIG.max_capacity if max_capacity is None else max_capacity

        self._num_nodes: int = num_nodes
        self._max_capacity: int = limit
        self._capacity: Dict[EdgeKey, int] = {}
        self._out: List[List[Edge]] = [[] for _ in range(num_nodes)]
        self._in: List[List[Edge]] = [[] for _ in range(num_nodes)]
        edge_list: List[Edge] = []

        for idx, item in enumerate(edges):
            edge = self._coerce_edge(item, idx)
            self._validate_edge(edge, idx, limit)
            self._capacity[edge.key] = edge.capacity
            self._out[edge.src].append(edge)
            self._in[edge.dst].append(edge)
            edge_list.append(edge)

        self._edges: Tuple[Edge, ...] = tuple(edge_list)

    @staticmethod
    def _coerce_edge(item: Any, idx: int) -> Edge:
        if isinstance(item, Edge):
            return item
        try:
            src, dst, cap = item
        except (TypeError, ValueError):
            raise InvalidNetworkError(
                f"Edge #{idx} must be a (src, dst, capacity) triple, got {item!r}"
            ) from None
        return Edge(src, dst, cap)

    def _validate_edge(self, edge: Edge, idx: int, limit: int) -> None:
        for name, node in (("src", edge.src), ("dst", edge.dst)):
            if not _is_int(node) or not 0 <= node < self._num_nodes:
                raise InvalidNetworkError(
                    f"Edge #{idx} {name}={node!r} is out of range [0, {self._num_nodes})"
                )
        if edge.src == edge.dst:
            raise InvalidNetworkError(f"Edge #{idx} is a self-loop on node {edge.src}")
        if not _is_int(edge.capacity):
            raise InvalidNetworkError(
                f"Edge #{idx} capacity must be an integer, got {edge.capacity!r}"
            )
        if edge.capacity < 0:
            raise InvalidNetworkError(
                f"Edge #{idx} ({edge.src}->{edge.dst}) has negative capacity {edge.capacity}"
            )
        if edge.capacity > limit:
            raise InvalidNetworkError(
                f"Edge #{idx} ({edge.src}->{edge.dst}) capacity {edge.capacity} "
                f"exceeds the maximum of {limit}"
            )
        if edge.key in self._capacity:
            raise InvalidNetworkError(
                f"Edge #{idx} duplicates existing edge {edge.src}->{edge.dst}"
            )
        if (edge.dst, edge.src) in self._capacity:
            raise InvalidNetworkError(
                f"Edge #{idx} ({edge.src}->{edge.dst}) is anti-parallel to an "
                f"existing edge {edge.dst}->{edge.src}"
            )

    @classmethod
    def from_edges(
        cls,
        edges: Sequence[Any],
        num_nodes: Optional[int] = None,
        **kwargs: Any,
    ) -> FlowNetwork:
        """Build a network, inferring ``num_nodes`` from the largest index when omitted."""
        if num_nodes is None:
            num_nodes = 0
            for item in edges:
                if isinstance(item, Edge):
                    src, dst = item.src, item.dst
                elif isinstance(item, (tuple, list)) and len(item) == 3:
                    src, dst = item[0], item[1]
                else:
                    # Left for the constructor to report.
                    continue
                if _is_int(src) and _is_int(dst):
                    num_nodes = max(num_nodes, src + 1, dst + 1)
        return cls(num_nodes, edges, **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FlowNetwork:
        """Build a network from ``{"num_nodes": n, "edges": [[u, v, c], ...]}``.

        ``num_nodes`` may be omitted and is then inferred from the edges.

        Raises:
            InvalidNetworkError: If the mapping is malformed.
        """
        if not isinstance(data, dict):
            raise InvalidNetworkError(
                f"Network document must be a mapping, got {type(data).__name__}"
            )
        unknown = set(data) - {"num_nodes", "edges"}
        if unknown:
            raise InvalidNetworkError(
                f"Unrecognized network keys: {', '.join(sorted(unknown))}"
            )
        edges = data.get("edges") or []
        if not isinstance(edges, list):
            raise InvalidNetworkError("'edges' must be a list of [src, dst, capacity]")
        triples = [tuple(e) if isinstance(e, list) else e for e in edges]
        return cls.from_edges(triples, data.get("num_nodes"))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON/YAML-friendly representation."""
        return {
            "num_nodes": self._num_nodes,
            "edges": [[e.src, e.dst, e.capacity] for e in self._edges],
        }

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def max_capacity(self) -> int:
        """Largest capacity a single edge may carry in this network."""
        return self._max_capacity

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def nodes(self) -> range:
        return range(self._num_nodes)

    def capacity(self, u: NodeID, v: NodeID) -> int:
        """Return capacity of ``u->v``, or 0 when no such original edge exists."""
        return self._capacity.get((u, v), 0)

    def has_edge(self, u: NodeID, v: NodeID) -> bool:
        return (u, v) in self._capacity

    def out_edges(self, u: NodeID) -> Tuple[Edge, ...]:
        self.check_node(u)
        return tuple(self._out[u])

    def in_edges(self, v: NodeID) -> Tuple[Edge, ...]:
        self.check_node(v)
        return tuple(self._in[v])

    def total_capacity(self) -> int:
        return sum(self._capacity.values())

    def check_node(self, node: Any, role: str = "node") -> None:
        """Raise `InvalidNetworkError` unless ``node`` is a valid vertex index."""
        if not _is_int(node) or not 0 <= node < self._num_nodes:
            raise InvalidNetworkError(
                f"{role} {node!r} is out of range [0, {self._num_nodes})"
            )

    def __len__(self) -> int:
        return self._num_nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlowNetwork):
            return NotImplemented
        return self._num_nodes == other._num_nodes and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._num_nodes, self._edges))

    def __repr__(self) -> str:
        return f"FlowNetwork(num_nodes={self._num_nodes}, num_edges={len(self._edges)})"
