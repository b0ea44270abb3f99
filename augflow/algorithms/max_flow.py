"""Maximum-flow computation via repeated augmenting-path search.

One engine covers both classic variants: the search strategy decides whether
it behaves as generic Ford-Fulkerson (depth-first search) or Edmonds-Karp
(breadth-first, shortest augmenting path). Each round is atomic: one search
followed by one flow update. The loop stops when the sink becomes
unreachable in the residual network, at which point the flow is maximum, or
when a caller-provided round cap is hit.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Literal, Optional, Union, overload

from augflow.algorithms.residual import ResidualNetwork
from augflow.algorithms.search import get_search_function
from augflow.config import MAXFLOW_CONFIG, MaxFlowConfig
from augflow.errors import FlowOverflowError
from augflow.graph.network import FlowNetwork
from augflow.logging import get_logger
from augflow.types.base import NodeID, SearchStrategy
from augflow.types.dto import AugmentingPath, FlowSummary

logger = get_logger(__name__)


class MaxFlowSolver:
    """Stateful max-flow driver over a single source/sink pair.

    Args:
        network: Input network. Never mutated.
        src: Source vertex.
        dst: Sink vertex.
        search_strategy: Search order; defaults to the config value.
        config: Configuration; defaults to ``MAXFLOW_CONFIG``.

    Raises:
        InvalidNetworkError: If ``src`` or ``dst`` is out of range.

    Example:
        >>> net = FlowNetwork(2, [(0, 1, 5)])
        >>> solver = MaxFlowSolver(net, 0, 1)
        >>> solver.run()
        5
        >>> solver.residual.flow(0, 1)
        5
    """

    def __init__(
        self,
        network: FlowNetwork,
        src: NodeID,
        dst: NodeID,
        *,
        search_strategy: Optional[SearchStrategy] = None,
        config: Optional[MaxFlowConfig] = None,
    ) -> None:
        network.check_node(src, "source")
        network.check_node(dst, "sink")

        self.config = config if config is not None else MAXFLOW_CONFIG
        self.strategy = SearchStrategy(
            search_strategy
            if search_strategy is not None
            else self.config.search_strategy
        )
        self.network = network
        self.src = src
        self.dst = dst
        self.residual = ResidualNetwork.from_network(network)
        self.total_flow = 0
        self.rounds = 0
        self.paths: List[AugmentingPath] = []
        self.exhausted = src == dst
        self._search = get_search_function(self.strategy)

    def step(self) -> Optional[AugmentingPath]:
        """Run one round: find an augmenting path and apply it.

        Returns:
            The applied path, or None once no augmenting path remains.

        Raises:
            FlowOverflowError: If the accumulated flow would exceed the
                configured integer width. Flow is left unchanged.
        """
        if self.exhausted:
            return None

        path = self._search(self.residual, self.src, self.dst)
        if path is None:
            self.exhausted = True
            return None

        new_total = self.total_flow + path.bottleneck
        if new_total > self.config.max_capacity:
            raise FlowOverflowError(
                f"Total flow {new_total} exceeds {self.config.capacity_bits}-bit "
                f"limit {self.config.max_capacity}"
            )

        self.residual.augment(path.nodes, path.bottleneck)
        self.total_flow = new_total
        self.rounds += 1
        self.paths.append(path)

        if self.config.check_invariants:
            self.residual.check_invariants(self.src, self.dst)
        if self.config.log_every and self.rounds % self.config.log_every == 0:
            logger.debug(
                "Round %d: pushed %d over %d hops, total %d",
                self.rounds,
                path.bottleneck,
                len(path),
                self.total_flow,
            )
        return path

    def run(self, max_rounds: Optional[int] = None) -> int:
        """Repeat rounds until no augmenting path remains or ``max_rounds`` is hit.

        Args:
            max_rounds: Cap on rounds performed by this call. Defaults to the
                config value; None means unbounded.

        Returns:
            Total flow so far. Equal to the maximum flow iff ``exhausted``.
        """
        if max_rounds is None:
            max_rounds = self.config.max_rounds
        done = 0
        while max_rounds is None or done < max_rounds:
            if self.step() is None:
                break
            done += 1

        if not self.exhausted:
            # The cap may have landed exactly on the last augmentation.
            self.exhausted = self.dst not in self.residual.reachable_from(self.src)

        logger.debug(
            "%s max flow %d->%d: value %d in %d rounds (maximum=%s)",
            self.strategy.name,
            self.src,
            self.dst,
            self.total_flow,
            self.rounds,
            self.exhausted,
        )
        return self.total_flow

    def summary(self) -> FlowSummary:
        """Return a `FlowSummary` of the current flow state."""
        reachable = self.residual.reachable_from(self.src)
        edge_flow = self.residual.edge_flows()
        residual_cap = {
            key: self.residual.residual_capacity(*key) for key in edge_flow
        }
        return FlowSummary(
            total_flow=self.total_flow,
            edge_flow=edge_flow,
            residual_cap=residual_cap,
            reachable=reachable,
            min_cut=self.residual.min_cut(self.src, reachable),
            rounds=self.rounds,
            augmenting_paths=tuple(self.paths),
            strategy=self.strategy,
            is_maximum=self.exhausted,
        )


@overload
def calc_max_flow(
    network: FlowNetwork,
    src: NodeID,
    dst: NodeID,
    *,
    search_strategy: Optional[SearchStrategy] = None,
    max_rounds: Optional[int] = None,
    return_summary: Literal[False] = False,
    check_invariants: Optional[bool] = None,
    config: Optional[MaxFlowConfig] = None,
) -> int: ...


@overload
def calc_max_flow(
    network: FlowNetwork,
    src: NodeID,
    dst: NodeID,
    *,
    search_strategy: Optional[SearchStrategy] = None,
    max_rounds: Optional[int] = None,
    return_summary: Literal[True],
    check_invariants: Optional[bool] = None,
    config: Optional[MaxFlowConfig] = None,
) -> tuple[int, FlowSummary]: ...


def calc_max_flow(
    network: FlowNetwork,
    src: NodeID,
    dst: NodeID,
    *,
    search_strategy: Optional[SearchStrategy] = None,
    max_rounds: Optional[int] = None,
    return_summary: bool = False,
    check_invariants: Optional[bool] = None,
    config: Optional[MaxFlowConfig] = None,
) -> Union[int, tuple]:
    """Compute max flow from ``src`` to ``dst``.

    Args:
        network: The capacitated digraph. Not modified.
        src: Source vertex index.
        dst: Sink vertex index.
        search_strategy: ``SearchStrategy.BFS`` (Edmonds-Karp, default) or
            ``SearchStrategy.DFS`` (Ford-Fulkerson).
        max_rounds: Optional cap on augmentation rounds. When the cap stops
            the run early the value is "flow so far", not the maximum.
        return_summary: If True, also return a `FlowSummary` with per-edge
            flows, the residual-reachable set and the min cut.
        check_invariants: Verify flow invariants after every round.
            Defaults to the config value.
        config: Optional `MaxFlowConfig`; defaults to ``MAXFLOW_CONFIG``.

    Returns:
        Union[int, tuple]:
            - ``int`` total flow by default.
            - ``tuple[int, FlowSummary]`` when ``return_summary`` is True.

    Raises:
        InvalidNetworkError: If ``src`` or ``dst`` is out of range.
        FlowOverflowError: If the total exceeds the configured width.

    Notes:
        When ``src == dst`` the result is 0 with zero rounds: conservation
        forces the net surplus at a single vertex to zero.

    Examples:
        >>> net = FlowNetwork(4, [(0, 1, 3), (0, 2, 3), (1, 3, 3), (2, 3, 3)])
        >>> calc_max_flow(net, 0, 3)
        6
        >>> flow, summary = calc_max_flow(net, 0, 3, return_summary=True)
        >>> sorted(summary.min_cut)
        [(0, 1), (0, 2)]
    """
    cfg = config if config is not None else MAXFLOW_CONFIG
    if check_invariants is not None and check_invariants != cfg.check_invariants:
        cfg = replace(cfg, check_invariants=check_invariants)

    solver = MaxFlowSolver(
        network, src, dst, search_strategy=search_strategy, config=cfg
    )
    total = solver.run(max_rounds)

    if return_summary:
        return total, solver.summary()
    return total
