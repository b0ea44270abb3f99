"""Max-flow algorithms: residual network, augmenting-path search, driver."""

from augflow.algorithms.max_flow import MaxFlowSolver, calc_max_flow
from augflow.algorithms.residual import ResidualNetwork
from augflow.algorithms.search import (
    bfs_augmenting_path,
    dfs_augmenting_path,
    get_search_function,
)

__all__ = [
    "MaxFlowSolver",
    "calc_max_flow",
    "ResidualNetwork",
    "bfs_augmenting_path",
    "dfs_augmenting_path",
    "get_search_function",
]
