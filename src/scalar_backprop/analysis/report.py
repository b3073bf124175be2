from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from scalar_backprop.graph.ir import Graph, trace

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node


@dataclass(frozen=True)
class GraphSummary:
    num_nodes: int
    num_leaves: int
    op_counts: Dict[str, int]
    depth: int


def _depths(graph: Graph) -> Dict[str, int]:
    depth: Dict[str, int] = {}
    for record in graph.nodes.values():
        depth[record.name] = 1 + max((depth[i] for i in record.inputs), default=-1)
    return depth


def summarize(root: "Node") -> GraphSummary:
    graph = trace(root)
    depth = _depths(graph)
    return GraphSummary(
        num_nodes=len(graph.nodes),
        num_leaves=len(graph.inputs),
        op_counts=dict(Counter(record.op for record in graph.nodes.values())),
        depth=max(depth.values(), default=0),
    )


def format_report(root: "Node") -> str:
    """One row per reachable node: name, label, op, inputs, value and gradient."""
    graph = trace(root)
    header = f"{'name':<6} {'label':<8} {'op':<8} {'inputs':<12} {'value':>12} {'grad':>12}"
    lines: List[str] = [header, "-" * len(header)]
    for record in graph.nodes.values():
        lines.append(
            f"{record.name:<6} {record.label:<8} {record.op:<8} "
            f"{','.join(record.inputs):<12} {record.value:>12.6g} {record.grad:>12.6g}"
        )
    return "\n".join(lines)
