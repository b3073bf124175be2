"""
Hooks for observing a backward pass node by node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from scalar_backprop.runtime.engine import BackwardCallbacks

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node


class CallRecorder:
    """
    Records which nodes ran their local backward step, in call order, and the
    gradient each one held right after its own step.
    """

    def __init__(self) -> None:
        self.order: List["Node"] = []
        self._grads: Dict[int, float] = {}

    def callbacks(self) -> BackwardCallbacks:
        return BackwardCallbacks(after_node=self._record)

    def _record(self, node: "Node") -> None:
        self.order.append(node)
        self._grads[id(node)] = node.grad

    def has(self, node: "Node") -> bool:
        return id(node) in self._grads

    def grad_after(self, node: "Node") -> float:
        return self._grads[id(node)]

    def clear(self) -> None:
        self.order.clear()
        self._grads.clear()
