"""Augmenting-path search strategies over a residual network.

Both strategies share one contract::

    search(residual, src, dst) -> AugmentingPath | None

Each call starts with every vertex UNVISITED and follows only pairs with
positive residual capacity. ``None`` means no augmenting path exists at the
current residual state. The search never mutates flow; the driver applies
the returned path in a separate pass.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, List, Optional

from augflow.algorithms.residual import ResidualNetwork
from augflow.errors import InvalidNetworkError
from augflow.graph.network import _is_int
from augflow.types.base import UNBOUNDED, NodeID, SearchStrategy, VisitState
from augflow.types.dto import AugmentingPath

SearchFunc = Callable[[ResidualNetwork, NodeID, NodeID], Optional[AugmentingPath]]


def _check_endpoints(residual: ResidualNetwork, src: NodeID, dst: NodeID) -> None:
    for role, node in (("source", src), ("sink", dst)):
        if not _is_int(node) or not 0 <= node < residual.num_nodes:
            raise InvalidNetworkError(
                f"{role} {node!r} is out of range [0, {residual.num_nodes})"
            )
    if src == dst:
        raise InvalidNetworkError(f"source and sink must differ, both are {src}")


def dfs_augmenting_path(
    residual: ResidualNetwork, src: NodeID, dst: NodeID
) -> Optional[AugmentingPath]:
    """Find an augmenting path depth-first, in adjacency order.

    Uses an explicit stack of ``(vertex, incoming bound, neighbor cursor)``
    frames. The bound carried into a child is ``min(bound, cf(u, child))``,
    so the frame at the sink holds the path bottleneck. A vertex stays
    VISITED after its subtree is exhausted, which keeps one call O(V + E).

    No guarantee on path length; with unlucky adjacency the number of rounds
    can reach the flow value.
    """
    _check_endpoints(residual, src, dst)

    state = [VisitState.UNVISITED] * residual.num_nodes
    state[src] = VisitState.VISITED

    path: List[NodeID] = [src]
    bounds: List[float] = [UNBOUNDED]
    cursors: List[int] = [0]

    while path:
        u = path[-1]
        if u == dst:
            return AugmentingPath(nodes=tuple(path), bottleneck=int(bounds[-1]))

        adj = residual.neighbors(u)
        i = cursors[-1]
        child: Optional[NodeID] = None
        child_cf = 0
        while i < len(adj):
            v = adj[i]
            i += 1
            if state[v] is VisitState.VISITED:
                continue
            child_cf = residual.residual_capacity(u, v)
            if child_cf > 0:
                child = v
                break
        cursors[-1] = i

        if child is None:
            # Dead end: the vertex stays VISITED.
            path.pop()
            bounds.pop()
            cursors.pop()
            continue

        state[child] = VisitState.VISITED
        path.append(child)
        bounds.append(min(bounds[-1], child_cf))
        cursors.append(0)

    return None


def bfs_augmenting_path(
    residual: ResidualNetwork, src: NodeID, dst: NodeID
) -> Optional[AugmentingPath]:
    """Find a shortest (fewest edges) augmenting path breadth-first.

    Every residual edge counts as length 1. Returning the shortest path is
    what bounds Edmonds-Karp to O(V * E) rounds regardless of capacities.
    """
    _check_endpoints(residual, src, dst)

    state = [VisitState.UNVISITED] * residual.num_nodes
    state[src] = VisitState.VISITED
    pred: Dict[NodeID, NodeID] = {}
    queue = deque([src])

    while queue and state[dst] is VisitState.UNVISITED:
        u = queue.popleft()
        for v in residual.neighbors(u):
            if state[v] is VisitState.VISITED or residual.residual_capacity(u, v) <= 0:
                continue
            state[v] = VisitState.VISITED
            pred[v] = u
            if v == dst:
                break
            queue.append(v)

    if state[dst] is VisitState.UNVISITED:
        return None

    nodes: List[NodeID] = [dst]
    bound = UNBOUNDED
    v = dst
    while v != src:
        u = pred[v]
        bound = min(bound, residual.residual_capacity(u, v))
        nodes.append(u)
        v = u
    nodes.reverse()
    return AugmentingPath(nodes=tuple(nodes), bottleneck=int(bound))


_SEARCH_FUNCTIONS: Dict[SearchStrategy, SearchFunc] = {
    SearchStrategy.DFS: dfs_augmenting_path,
    SearchStrategy.BFS: bfs_augmenting_path,
}


def get_search_function(strategy: SearchStrategy) -> SearchFunc:
    """Return the search function implementing ``strategy``.

    Raises:
        ValueError: If ``strategy`` is not a known SearchStrategy.
    """
    try:
        return _SEARCH_FUNCTIONS[SearchStrategy(strategy)]
    except (KeyError, ValueError):
        valid = ", ".join(e.name for e in SearchStrategy)
        raise ValueError(
            f"Unknown search strategy {strategy!r}. Valid values are: {valid}"
        ) from None
