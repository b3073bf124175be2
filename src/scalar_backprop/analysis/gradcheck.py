"""
Finite-difference verification of analytic gradients.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

from scalar_backprop.graph.node import Node
from scalar_backprop.graph.ops import leaf

GraphFn = Callable[[List[Node]], Node]


@dataclass(frozen=True)
class GradCheckResult:
    analytic: np.ndarray
    numeric: np.ndarray
    max_abs_error: float
    ok: bool


def _evaluate(fn: GraphFn, values: np.ndarray) -> float:
    return fn([leaf(float(v)) for v in values]).value


def numerical_gradients(
    fn: GraphFn, inputs: Sequence[float], eps: float = 1e-6
) -> np.ndarray:
    """
    Central-difference estimate of d fn / d input for each input.

    Args:
        fn: Builds the graph from a list of fresh leaves and returns its root.
        inputs: Point at which to differentiate.
        eps: Step size.
    """
    point = np.asarray(inputs, dtype=np.float64)
    grads = np.zeros_like(point)
    for i in range(point.size):
        step = np.zeros_like(point)
        step[i] = eps
        grads[i] = (_evaluate(fn, point + step) - _evaluate(fn, point - step)) / (2 * eps)
    return grads


def analytic_gradients(fn: GraphFn, inputs: Sequence[float]) -> np.ndarray:
    leaves = [leaf(float(v)) for v in inputs]
    fn(leaves).backward()
    return np.array([node.grad for node in leaves], dtype=np.float64)


def check_gradients(
    fn: GraphFn,
    inputs: Sequence[float],
    *,
    eps: float = 1e-6,
    atol: float = 1e-5,
    rtol: float = 1e-4,
) -> GradCheckResult:
    analytic = analytic_gradients(fn, inputs)
    numeric = numerical_gradients(fn, inputs, eps=eps)
    if analytic.size:
        max_abs_error = float(np.max(np.abs(analytic - numeric)))
    else:
        max_abs_error = 0.0
    return GradCheckResult(
        analytic=analytic,
        numeric=numeric,
        max_abs_error=max_abs_error,
        ok=bool(np.allclose(analytic, numeric, atol=atol, rtol=rtol)),
    )
