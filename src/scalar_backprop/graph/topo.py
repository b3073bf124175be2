"""
Topological ordering of the implicit graph reachable from a root node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Set, Tuple

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node


def topological_order(root: "Node") -> List["Node"]:
    """
    Depth-first post-order starting at `root`.

    Dependencies are visited in their recorded order before the node that
    uses them, and each node appears once (visited by identity). The result
    runs leaves-first and ends with `root`; reversing it gives an order in
    which every node comes after all of its dependents.

    Equivalent to the textbook recursive formulation, but driven by an
    explicit stack so long chains do not hit the recursion limit.
    """
    order: List["Node"] = []
    visited: Set[int] = {id(root)}
    stack: List[Tuple["Node", Iterator["Node"]]] = [(root, iter(root.dependencies))]

    while stack:
        node, pending = stack[-1]
        for dep in pending:
            if id(dep) not in visited:
                visited.add(id(dep))
                stack.append((dep, iter(dep.dependencies)))
                break
        else:
            stack.pop()
            order.append(node)

    return order


def reverse_topological_order(root: "Node") -> List["Node"]:
    """Root first, leaves last: the order in which gradients are pushed back."""
    return list(reversed(topological_order(root)))
