"""
Operation constructors.

Each constructor computes the forward value, allocates a new node that
records the operands it depends on, and attaches the local chain-rule step
as that node's `_backward` closure. Operands are never mutated.

Forward math goes through the `math` module, so domain errors (zero base
with a negative exponent, negative base with a fractional exponent, `exp`
overflow) surface as the `ValueError`/`OverflowError` that `math` raises.
"""

from __future__ import annotations

import math
from typing import Union

from scalar_backprop.graph.node import Node, is_real

Operand = Union[Node, float, int]


def leaf(value: float, label: str = "") -> Node:
    return Node(value, label=label)


def as_node(x: Operand) -> Node:
    """Return `x` if it is a node, otherwise wrap the number in a fresh leaf."""
    if isinstance(x, Node):
        return x
    if is_real(x):
        return Node(x)
    raise TypeError(f"Expected a Node or a real number. Received: {type(x)!r}")


def add(a: Operand, b: Operand) -> Node:
    a, b = as_node(a), as_node(b)
    out = Node(a.value + b.value, op="+", dependencies=(a, b))

    def _backward() -> None:
        a.grad += out.grad
        b.grad += out.grad

    out._backward = _backward
    return out


def multiply(a: Operand, b: Operand) -> Node:
    a, b = as_node(a), as_node(b)
    out = Node(a.value * b.value, op="*", dependencies=(a, b))

    def _backward() -> None:
        a.grad += b.value * out.grad
        b.grad += a.value * out.grad

    out._backward = _backward
    return out


def power(base: Operand, exponent: float) -> Node:
    if isinstance(exponent, Node):
        raise TypeError("power() exponent must be a plain number, not a Node.")
    if not is_real(exponent):
        raise TypeError(f"power() exponent must be a real number. Received: {exponent!r}")
    base = as_node(base)
    exponent = float(exponent)
    out = Node(math.pow(base.value, exponent), op=f"**{exponent}", dependencies=(base,))

    def _backward() -> None:
        # d/dx x**0 is 0 everywhere, including x == 0 where x**-1 is undefined.
        if exponent != 0.0:
            base.grad += exponent * math.pow(base.value, exponent - 1) * out.grad

    out._backward = _backward
    return out


def negate(a: Operand) -> Node:
    return multiply(a, -1)


def subtract(a: Operand, b: Operand) -> Node:
    return add(a, negate(as_node(b)))


def divide(a: Operand, b: Operand) -> Node:
    return multiply(a, power(as_node(b), -1))


def exponential(a: Operand) -> Node:
    a = as_node(a)
    out = Node(math.exp(a.value), op="exp", dependencies=(a,))

    def _backward() -> None:
        a.grad += out.value * out.grad

    out._backward = _backward
    return out


def hyperbolic_tangent(a: Operand) -> Node:
    a = as_node(a)
    out = Node(math.tanh(a.value), op="tanh", dependencies=(a,))

    def _backward() -> None:
        a.grad += (1.0 - out.value * out.value) * out.grad

    out._backward = _backward
    return out
