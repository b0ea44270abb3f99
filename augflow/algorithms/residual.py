"""Residual network and flow updater.

The residual network stores, per ordered vertex pair, the original capacity
and the signed flow. Residual capacity is derived on every query::

    cf(u, v) = capacity(u, v) - flow(u, v)

which covers both cases of the textbook definition because ``capacity`` is
zero on reverse pairs and flow is anti-symmetric (``flow(v, u) == -flow(u, v)``),
so ``cf(v, u) == flow(u, v)`` on the reverse of an original edge.

Lifecycle has two phases. During construction ``add_edge`` registers
capacities and structural adjacency. After ``freeze()`` adjacency is fixed
and only flow values change, via ``augment``.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from augflow.config import MAXFLOW_CONFIG
from augflow.errors import (
    AugmentationError,
    FlowInvariantError,
    InvalidNetworkError,
    NetworkFrozenError,
)
from augflow.graph.network import FlowNetwork, _is_int
from augflow.types.base import UNBOUNDED, EdgeKey, NodeID


class ResidualNetwork:
    """Mutable residual view over a capacitated digraph.

    Args:
        num_nodes: Number of vertices.
        max_capacity: Upper bound for a single capacity. Defaults to
            ``MAXFLOW_CONFIG.max_capacity``.

    Attributes:
        num_nodes: Number of vertices.
        max_capacity: Upper bound for a single capacity.
        frozen: True once the construction phase is over.
    """

    def __init__(self, num_nodes: int, *, max_capacity: Optional[int] = None) -> None:
        if not _is_int(num_nodes) or num_nodes < 0:
            raise InvalidNetworkError(
                f"num_nodes must be a non-negative integer, got {num_nodes!r}"
            )
        self.num_nodes = num_nodes
        self.max_capacity = (
            MAXFLOW_CONFIG.max_capacity if max_capacity is None else max_capacity
        )
        self.frozen = False
        self._cap: Dict[EdgeKey, int] = {}
        self._flow: Dict[EdgeKey, int] = {}
        self._adj: List[List[NodeID]] = [[] for _ in range(num_nodes)]
        self._original: List[EdgeKey] = []

    @classmethod
    def from_network(cls, network: FlowNetwork) -> ResidualNetwork:
        """Build and freeze a residual network for ``network`` with zero flow."""
        residual = cls(network.num_nodes, max_capacity=network.max_capacity)
        for edge in network.edges:
            residual.add_edge(edge.src, edge.dst, edge.capacity)
        residual.freeze()
        return residual

    #
    # Construction phase
    #
    def add_edge(self, u: NodeID, v: NodeID, capacity: int) -> None:
        """Register ``u->v`` with ``capacity`` and zero flow in both directions.

        Both ``u->v`` and ``v->u`` become adjacency candidates; the reverse
        direction has zero residual capacity until flow moves along ``u->v``.

        Raises:
            NetworkFrozenError: If called after ``freeze()``.
            InvalidNetworkError: If the pair is already registered in either
                direction, or indices/capacity are invalid.
        """
        if self.frozen:
            raise NetworkFrozenError(
                f"Cannot add edge {u}->{v}: residual network structure is frozen"
            )
        for node in (u, v):
            if not _is_int(node) or not 0 <= node < self.num_nodes:
                raise InvalidNetworkError(
                    f"Node {node!r} is out of range [0, {self.num_nodes})"
                )
        if u == v:
            raise InvalidNetworkError(f"Self-loop on node {u}")
        if not _is_int(capacity):
            raise InvalidNetworkError(
                f"Capacity on {u}->{v} must be an integer, got {capacity!r}"
            )
        if capacity < 0:
            raise InvalidNetworkError(f"Negative capacity {capacity} on {u}->{v}")
        if capacity > self.max_capacity:
            raise InvalidNetworkError(
                f"Capacity {capacity} on {u}->{v} exceeds the maximum of "
                f"{self.max_capacity}"
            )
        if (u, v) in self._cap:
            raise InvalidNetworkError(
                f"Pair {u}->{v} already registered (duplicate or anti-parallel edge)"
            )

        self._cap[(u, v)] = capacity
        self._cap[(v, u)] = 0
        self._flow[(u, v)] = 0
        self._flow[(v, u)] = 0
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._original.append((u, v))

    def freeze(self) -> None:
        """End the construction phase. Idempotent."""
        self.frozen = True

    #
    # Queries
    #
    def residual_capacity(self, u: NodeID, v: NodeID) -> int:
        """Return ``cf(u, v)``; zero means the pair is not a residual edge now."""
        key = (u, v)
        cap = self._cap.get(key)
        if cap is None:
            return 0
        return cap - self._flow[key]

    def flow(self, u: NodeID, v: NodeID) -> int:
        """Return signed flow on ``(u, v)``; anti-symmetric by construction."""
        return self._flow.get((u, v), 0)

    def capacity(self, u: NodeID, v: NodeID) -> int:
        return self._cap.get((u, v), 0)

    def neighbors(self, u: NodeID) -> Sequence[NodeID]:
        """Return structural adjacency of ``u`` in insertion order.

        Includes candidates whose residual capacity is currently zero; callers
        gate traversal on ``residual_capacity``.
        """
        return self._adj[u]

    def original_edges(self) -> Tuple[EdgeKey, ...]:
        return tuple(self._original)

    def bottleneck(self, path: Sequence[NodeID]) -> int:
        """Return minimum residual capacity along ``path``.

        Raises:
            AugmentationError: If ``path`` has fewer than two vertices.
        """
        if len(path) < 2:
            raise AugmentationError(f"Path {tuple(path)} has no edges")
        bound = UNBOUNDED
        for u, v in zip(path, path[1:]):
            bound = min(bound, self.residual_capacity(u, v))
        return int(bound)

    #
    # Mutation phase
    #
    def augment(self, path: Sequence[NodeID], amount: int) -> None:
        """Push ``amount`` units along ``path``.

        For each hop ``(u, v)``: ``flow(u, v) += amount`` and
        ``flow(v, u) -= amount``. The precondition
        ``0 < amount <= residual_capacity(u, v)`` is checked for every hop
        before any flow is touched.

        Raises:
            AugmentationError: If the path is empty or the precondition fails.
        """
        if len(path) < 2:
            raise AugmentationError(f"Path {tuple(path)} has no edges")
        if amount <= 0:
            raise AugmentationError(f"Augmentation amount must be positive, got {amount}")
        hops = list(zip(path, path[1:]))
        for u, v in hops:
            cf = self.residual_capacity(u, v)
            if amount > cf:
                raise AugmentationError(
                    f"Cannot push {amount} over {u}->{v}: residual capacity is {cf}"
                )
        for u, v in hops:
            self._flow[(u, v)] += amount
            self._flow[(v, u)] -= amount

    def reset(self) -> None:
        """Zero all flow; structure and capacities are kept."""
        for key in self._flow:
            self._flow[key] = 0

    #
    # Analytics
    #
    def edge_flows(self) -> Dict[EdgeKey, int]:
        """Return flow on each original edge."""
        return {key: self._flow[key] for key in self._original}

    def residual_edges(self) -> Dict[EdgeKey, int]:
        """Return every ordered pair with positive residual capacity."""
        return {
            key: cap - self._flow[key]
            for key, cap in self._cap.items()
            if cap - self._flow[key] > 0
        }

    def reachable_from(self, src: NodeID) -> FrozenSet[NodeID]:
        """Return vertices reachable from ``src`` over positive residual edges."""
        seen: Set[NodeID] = {src}
        queue = deque([src])
        while queue:
            u = queue.popleft()
            for v in self._adj[u]:
                if v not in seen and self.residual_capacity(u, v) > 0:
                    seen.add(v)
                    queue.append(v)
        return frozenset(seen)

    def min_cut(
        self, src: NodeID, reachable: Optional[FrozenSet[NodeID]] = None
    ) -> List[EdgeKey]:
        """Return original edges leaving the residual-reachable set of ``src``.

        At maximum flow these edges are saturated and their capacities sum to
        the flow value.
        """
        if reachable is None:
            reachable = self.reachable_from(src)
        return [(u, v) for u, v in self._original if u in reachable and v not in reachable]

    def net_outflow(self, node: NodeID) -> int:
        """Return flow leaving ``node`` minus flow entering it."""
        return sum(self._flow[(node, v)] for v in self._adj[node])

    def check_invariants(self, src: NodeID, dst: NodeID) -> None:
        """Verify capacity, anti-symmetry and conservation.

        Raises:
            FlowInvariantError: On the first violation found.
        """
        for u, v in self._original:
            f = self._flow[(u, v)]
            if not 0 <= f <= self._cap[(u, v)]:
                raise FlowInvariantError(
                    f"Capacity violated on {u}->{v}: flow {f}, capacity {self._cap[(u, v)]}"
                )
        for (u, v), f in self._flow.items():
            if f != -self._flow[(v, u)]:
                raise FlowInvariantError(
                    f"Anti-symmetry violated on {u}->{v}: {f} vs {self._flow[(v, u)]}"
                )
        for node in range(self.num_nodes):
            if node in (src, dst):
                continue
            excess = self.net_outflow(node)
            if excess != 0:
                raise FlowInvariantError(
                    f"Conservation violated at node {node}: net outflow {excess}"
                )

    def __repr__(self) -> str:
        return (
            f"ResidualNetwork(num_nodes={self.num_nodes}, "
            f"num_edges={len(self._original)}, frozen={self.frozen})"
        )
