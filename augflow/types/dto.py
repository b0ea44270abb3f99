"""Types and data structures for algorithm outputs.

Defines immutable containers for augmenting paths and max-flow summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Tuple

from augflow.types.base import EdgeKey, NodeID, SearchStrategy


@dataclass(frozen=True)
class AugmentingPath:
    """Path from source to sink in the residual network.

    Attributes:
        nodes: Vertex sequence ``(s, v1, ..., t)``.
        bottleneck: Minimum residual capacity along the path at the time it
            was found. Always a finite positive integer.
    """

    nodes: Tuple[NodeID, ...]
    bottleneck: int

    def hops(self) -> Iterator[EdgeKey]:
        """Yield consecutive ``(u, v)`` pairs along the path."""
        return zip(self.nodes, self.nodes[1:])

    def __len__(self) -> int:
        """Return the number of edges on the path."""
        return max(len(self.nodes) - 1, 0)


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Flow value achieved from source to sink.
        edge_flow: Flow per original edge, keyed by ``(src, dst)``.
        residual_cap: Remaining capacity per original edge.
        reachable: Vertices reachable from the source in the final residual
            network.
        min_cut: Original edges from the reachable set to the rest. Only a
            true minimum cut when ``is_maximum`` is True.
        rounds: Number of completed augmentation rounds.
        augmenting_paths: Paths applied, in order.
        strategy: Search strategy used.
        is_maximum: False when the run was stopped by a round cap while an
            augmenting path still existed.
    """

    total_flow: int
    edge_flow: Dict[EdgeKey, int]
    residual_cap: Dict[EdgeKey, int]
    reachable: FrozenSet[NodeID]
    min_cut: List[EdgeKey]
    rounds: int
    augmenting_paths: Tuple[AugmentingPath, ...]
    strategy: SearchStrategy
    is_maximum: bool = True

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "total_flow": self.total_flow,
            "is_maximum": self.is_maximum,
            "strategy": self.strategy.name.lower(),
            "rounds": self.rounds,
            "edge_flow": [[u, v, f] for (u, v), f in sorted(self.edge_flow.items())],
            "min_cut": [[u, v] for u, v in self.min_cut],
            "reachable": sorted(self.reachable),
        }
