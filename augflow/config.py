"""Configuration classes for augflow components."""

from dataclasses import dataclass
from typing import Optional

from augflow.types.base import SearchStrategy


@dataclass
class MaxFlowConfig:
    """Defaults for max-flow computation."""

    # Augmenting-path search order
    search_strategy: SearchStrategy = SearchStrategy.BFS

    # Round cap; None runs until no augmenting path remains
    max_rounds: Optional[int] = None

    # Width of the signed integer used for capacities and accumulated flow
    capacity_bits: int = 63

    # Verify capacity/conservation/anti-symmetry after every round
    check_invariants: bool = False

    # Emit a debug log line every N rounds (0 disables)
    log_every: int = 0

    @property
    def max_capacity(self) -> int:
        """Largest capacity or flow total representable in ``capacity_bits``."""
        return 2**self.capacity_bits - 1


# Global configuration instance
MAXFLOW_CONFIG = MaxFlowConfig()
