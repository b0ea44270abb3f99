"""Shared typing constructs for augflow.

Public enums, aliases and result containers used across the codebase. No
runtime logic lives here.
"""

from augflow.types.base import (
    UNBOUNDED,
    EdgeKey,
    NodeID,
    SearchStrategy,
    VisitState,
)
from augflow.types.dto import AugmentingPath, FlowSummary

__all__ = [
    # Enums
    "SearchStrategy",
    "VisitState",
    # Type aliases and constants
    "NodeID",
    "EdgeKey",
    "UNBOUNDED",
    # DTOs
    "AugmentingPath",
    "FlowSummary",
]
