"""augflow: maximum flow by augmenting paths.

augflow computes the maximum flow between a source and a sink of a
capacitated directed network, together with the per-edge flow assignment
and the minimum cut that certifies it. One engine covers both classic
variants, selected by `SearchStrategy`:

    BFS - Edmonds-Karp, shortest augmenting paths, O(V*E) rounds
    DFS - generic Ford-Fulkerson, rounds bounded by the flow value

Primary API:
    FlowNetwork - Immutable validated capacitated digraph
    calc_max_flow() - One-shot max-flow computation
    MaxFlowSolver - Round-by-round driver
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from augflow import FlowNetwork, SearchStrategy, calc_max_flow

    net = FlowNetwork(4, [(0, 1, 3), (0, 2, 3), (1, 3, 3), (2, 3, 3)])
    flow = calc_max_flow(net, 0, 3)                      # 6
    flow, summary = calc_max_flow(
        net, 0, 3, search_strategy=SearchStrategy.DFS, return_summary=True
    )
"""

from __future__ import annotations

from augflow import cli, logging
from augflow._version import __version__
from augflow.algorithms.max_flow import MaxFlowSolver, calc_max_flow
from augflow.algorithms.residual import ResidualNetwork
from augflow.config import MAXFLOW_CONFIG, MaxFlowConfig
from augflow.errors import (
    AugflowError,
    AugmentationError,
    FlowInvariantError,
    FlowOverflowError,
    InvalidNetworkError,
    NetworkFrozenError,
)
from augflow.graph.convert import NodeMap, from_networkx, to_networkx
from augflow.graph.io import load_network, read_edge_list, write_edge_list
from augflow.graph.network import Edge, FlowNetwork
from augflow.types.base import SearchStrategy
from augflow.types.dto import AugmentingPath, FlowSummary

__all__ = [
    # Version
    "__version__",
    # Model
    "Edge",
    "FlowNetwork",
    "ResidualNetwork",
    # Algorithms
    "calc_max_flow",
    "MaxFlowSolver",
    # Types
    "SearchStrategy",
    "AugmentingPath",
    "FlowSummary",
    # Configuration
    "MaxFlowConfig",
    "MAXFLOW_CONFIG",
    # Errors
    "AugflowError",
    "InvalidNetworkError",
    "NetworkFrozenError",
    "AugmentationError",
    "FlowOverflowError",
    "FlowInvariantError",
    # IO and NetworkX
    "load_network",
    "read_edge_list",
    "write_edge_list",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
