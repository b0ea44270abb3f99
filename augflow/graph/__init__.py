"""Graph primitives and helpers.

This package provides the immutable capacitated digraph `FlowNetwork` and
helper modules for NetworkX conversion (`convert`) and file input (`io`).
"""

from augflow.graph.network import Edge, FlowNetwork

__all__ = ["Edge", "FlowNetwork"]
