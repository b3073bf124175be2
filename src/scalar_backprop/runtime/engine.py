from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from scalar_backprop.graph.topo import reverse_topological_order
from scalar_backprop.runtime.profiling import Profiler
from scalar_backprop.utils.config import config
from scalar_backprop.utils.logging import get_logger

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node

log = get_logger("engine")


@dataclass
class BackwardCallbacks:
    """
    Optional instrumentation around a backward pass.

    Args:
        before_node: Called with each node right before its local backward step.
        after_node: Called with each node right after its local backward step.
        finalize: Called once with the full call order (root first).
    """

    before_node: Optional[Callable[["Node"], None]] = None
    after_node: Optional[Callable[["Node"], None]] = None
    finalize: Optional[Callable[[Sequence["Node"]], None]] = None


class BackwardEngine:
    """
    Reverse-mode sweep over the graph reachable from a root.

    Gradients are accumulated, never reset: running a second pass over an
    overlapping graph adds to whatever earlier passes left behind. Only the
    root of each pass is overwritten, with the seed gradient 1.
    """

    def __init__(self, callbacks: Optional[BackwardCallbacks] = None) -> None:
        self.callbacks = callbacks or BackwardCallbacks()
        self.profiler = Profiler()

    def run(self, root: "Node") -> List["Node"]:
        """
        Seed `root` and push gradients back to every node it depends on.

        Returns:
            Nodes in the order their local backward step was invoked.
        """
        start = perf_counter()
        order = reverse_topological_order(root)
        self.profiler.record_event("topo_sort", (perf_counter() - start) * 1e3)
        self.profiler.record_pass(len(order))
        log.debug("backward pass over %d nodes from %r", len(order), root)

        root.grad = 1.0

        before = self.callbacks.before_node
        after = self.callbacks.after_node
        start = perf_counter()
        for node in order:
            if before:
                before(node)
            node._backward()
            self.profiler.record_call()
            if config.debug:
                log.debug("%s %s grad=%g", node.op, node.label or hex(id(node)), node.grad)
            if after:
                after(node)
        self.profiler.record_event("propagate", (perf_counter() - start) * 1e3)

        if self.callbacks.finalize:
            self.callbacks.finalize(order)
        return order


def backward(root: "Node", callbacks: Optional[BackwardCallbacks] = None) -> None:
    """Compute d(root)/d(node) for every node reachable from `root`."""
    BackwardEngine(callbacks).run(root)
