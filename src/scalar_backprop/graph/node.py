from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Callable, Tuple


def _noop() -> None:
    return None


_FIXED_FIELDS = frozenset({"value", "dependencies"})


def is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(eq=False)
class Node:
    """
    Scalar value in a computation graph.

    A node records the value computed in the forward pass, the gradient of
    the most recent backward root with respect to it, and how it was produced:
    the operation tag, the nodes it depends on and a closure that pushes its
    own gradient back into those dependencies.

    Equality and hashing are by identity. Two nodes holding the same number
    are still distinct graph vertices.
    """

    value: float
    op: str = "leaf"
    dependencies: Tuple["Node", ...] = field(default=(), repr=False)
    label: str = ""
    grad: float = field(init=False)
    _backward: Callable[[], None] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not is_real(self.value):
            raise TypeError(
                f"Node value must be a real number. Received: {self.value!r}"
            )
        dependencies = tuple(self.dependencies)
        for dep in dependencies:
            if not isinstance(dep, Node):
                raise TypeError(f"Node dependencies must be nodes, got {dep!r}.")
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "dependencies", dependencies)
        self.grad = 0.0
        self._backward = _noop

    def __setattr__(self, name: str, value: object) -> None:
        # Forward value and graph edges are fixed once the node exists.
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"Node.{name} cannot be reassigned.")
        object.__setattr__(self, name, value)

    @property
    def gradient(self) -> float:
        return self.grad

    @property
    def is_leaf(self) -> bool:
        return not self.dependencies

    def backward(self) -> None:
        """Propagate gradients from this node to everything it depends on."""
        engine.backward(self)

    def exp(self) -> "Node":
        return ops.exponential(self)

    def tanh(self) -> "Node":
        return ops.hyperbolic_tangent(self)

    def __add__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.add(self, other)

    def __radd__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.add(other, self)

    def __mul__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.multiply(self, other)

    def __rmul__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.multiply(other, self)

    def __sub__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.subtract(self, other)

    def __rsub__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.subtract(other, self)

    def __truediv__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.divide(self, other)

    def __rtruediv__(self, other):
        if not _coercible(other):
            return NotImplemented
        return ops.divide(other, self)

    def __pow__(self, exponent):
        if not is_real(exponent):
            return NotImplemented
        return ops.power(self, exponent)

    def __neg__(self) -> "Node":
        return ops.negate(self)


def _coercible(other: object) -> bool:
    return isinstance(other, Node) or is_real(other)


# Both modules import Node; bind them once the class exists.
from scalar_backprop.graph import ops  # noqa: E402
from scalar_backprop.runtime import engine  # noqa: E402
