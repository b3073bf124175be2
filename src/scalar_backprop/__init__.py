"""
scalar-backprop

Reverse-mode automatic differentiation over scalar values.
"""

from .graph.node import Node
from .graph.ops import (
    add,
    divide,
    exponential,
    hyperbolic_tangent,
    leaf,
    multiply,
    negate,
    power,
    subtract,
)
from .runtime.engine import BackwardCallbacks, BackwardEngine, backward

__all__ = [
    "Node",
    "leaf",
    "add",
    "multiply",
    "power",
    "negate",
    "subtract",
    "divide",
    "exponential",
    "hyperbolic_tangent",
    "backward",
    "BackwardCallbacks",
    "BackwardEngine",
]
