"""Exception types raised by augflow.

Every exception derives from ``AugflowError`` and from the closest builtin
exception, so callers can catch either the package root or the familiar
builtin (``ValueError``, ``OverflowError``, ...).
"""

from __future__ import annotations


class AugflowError(Exception):
    """Base class for all augflow errors."""


class InvalidNetworkError(AugflowError, ValueError):
    """Input network or query failed validation.

    Raised for negative or non-integer capacities, out-of-range vertex
    indices, self-loops, duplicate or anti-parallel edges, and invalid
    source/sink arguments. Always raised before any flow is placed.
    """


class NetworkFrozenError(AugflowError, RuntimeError):
    """A structural edit was attempted after the residual network was frozen."""


class AugmentationError(AugflowError, ValueError):
    """An augmentation violated the bottleneck precondition."""


class FlowOverflowError(AugflowError, OverflowError):
    """Capacity or accumulated flow exceeded the configured integer width."""


class FlowInvariantError(AugflowError, AssertionError):
    """Capacity, conservation, or anti-symmetry check failed."""
