"""Shared sample networks for the test suite."""

import pytest

from augflow.graph.network import FlowNetwork


@pytest.fixture
def single_edge():
    # [5]
    #  0────►1
    return FlowNetwork(2, [(0, 1, 5)])


@pytest.fixture
def diamond():
    #      [3]    [3]
    #    ┌────►1────┐
    #    │          ▼
    #    0          3
    #    │          ▲
    #    └────►2────┘
    #      [3]    [3]
    return FlowNetwork(4, [(0, 1, 3), (0, 2, 3), (1, 3, 3), (2, 3, 3)])


@pytest.fixture
def bottleneck_chain():
    #  [10]     [2]
    # 0────►1────►2
    return FlowNetwork(3, [(0, 1, 10), (1, 2, 2)])


@pytest.fixture
def disconnected():
    # [5]       [5]
    # 0────►1   2────►3
    return FlowNetwork(4, [(0, 1, 5), (2, 3, 5)])


@pytest.fixture
def counter_flow():
    # s=0, a=1, b=2, t=3
    #
    #       [2]        [1]
    #   0────────►1────────►3
    #   │         │[1]      ▲
    #   │   [1]   ▼   [2]   │
    #   └────────►2─────────┘
    return FlowNetwork(4, [(0, 1, 2), (0, 2, 1), (1, 2, 1), (1, 3, 1), (2, 3, 2)])


@pytest.fixture
def unit_crossing():
    # All capacities 1. Depth-first search first routes 0-1-2-3, which can
    # only be undone by pushing back over the residual edge 2->1.
    return FlowNetwork(4, [(0, 1, 1), (0, 2, 1), (1, 2, 1), (1, 3, 1), (2, 3, 1)])


@pytest.fixture
def heavy_crossing():
    # Large side capacities with a unit cross edge 1->2.
    return FlowNetwork(
        4, [(0, 1, 1000), (0, 2, 1000), (1, 2, 1), (1, 3, 1000), (2, 3, 1000)]
    )


@pytest.fixture
def clrs_network():
    # Classic textbook network, max flow 23.
    # s=0, v1=1, v2=2, v3=3, v4=4, t=5
    return FlowNetwork(
        6,
        [
            (0, 1, 16),
            (0, 2, 13),
            (2, 1, 4),
            (1, 3, 12),
            (3, 2, 9),
            (2, 4, 14),
            (4, 3, 7),
            (3, 5, 20),
            (4, 5, 4),
        ],
    )
