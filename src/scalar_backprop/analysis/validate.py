"""
Validation of backward call orders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Sequence

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node


def validate_backward_order(order: Sequence["Node"]) -> None:
    """
    Check that `order` is a legal sequence of local backward calls:
    - no node runs twice
    - every node runs after all of its dependents that appear in `order`

    Raises:
        ValueError: on the first violation found.
    """
    position: Dict[int, int] = {}
    for idx, node in enumerate(order):
        if id(node) in position:
            raise ValueError(f"Node {node!r} ran its backward step twice.")
        position[id(node)] = idx

    for idx, node in enumerate(order):
        for dep in node.dependencies:
            dep_idx = position.get(id(dep))
            if dep_idx is not None and dep_idx < idx:
                raise ValueError(
                    f"Node {dep!r} ran at step {dep_idx} before its dependent "
                    f"{node!r} at step {idx}."
                )
