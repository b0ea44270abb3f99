"""Base enums, aliases and constants for max-flow algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Tuple

#: Vertex identifier: dense integer index in ``[0, num_nodes)``.
NodeID = int

#: Ordered vertex pair identifying an original or residual edge.
EdgeKey = Tuple[NodeID, NodeID]

#: Running-bound sentinel for path traversal. Never stored as a capacity and
#: never returned as a bottleneck; ``min(UNBOUNDED, c)`` is always ``c``.
UNBOUNDED = math.inf


class SearchStrategy(IntEnum):
    """Augmenting-path search order used by the max-flow driver."""

    #: Depth-first search (generic Ford-Fulkerson). Rounds bounded by |f*|.
    DFS = 1
    #: Breadth-first search (Edmonds-Karp). Rounds bounded by O(V*E).
    BFS = 2

    @classmethod
    def from_string(cls, value: str) -> "SearchStrategy":
        """Parse a string into a SearchStrategy enum value.

        Args:
            value: Case-insensitive string name (e.g., "bfs", "DFS").

        Returns:
            The corresponding SearchStrategy enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid search_strategy '{value}'. Valid values are: {valid}"
            ) from None


class VisitState(IntEnum):
    """Per-search visitation mark of a vertex."""

    UNVISITED = 0
    VISITED = 1
