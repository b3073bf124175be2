from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Set

from scalar_backprop.graph.topo import topological_order

if TYPE_CHECKING:
    from scalar_backprop.graph.node import Node


@dataclass
class NodeRecord:
    """Frozen-in-time copy of one live node, referring to its inputs by name."""

    name: str
    op: str
    inputs: List[str] = field(default_factory=list)
    value: float = 0.0
    grad: float = 0.0
    label: str = ""


@dataclass
class Graph:
    """
    Explicit snapshot of an implicit computation graph.

    Records are kept in insertion order, and `trace` inserts them in
    topological order, so iterating `nodes.values()` always visits inputs
    before the records that use them. Editing a snapshot never touches the
    live nodes it was taken from.
    """
    nodes: Dict[str, NodeRecord] = field(default_factory=dict)
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_node(self, node: NodeRecord) -> None:
        if node.name in self.nodes:
            raise ValueError(f"Duplicate node name: {node.name}")
        self.nodes[node.name] = node

    def get_node(self, name: str) -> NodeRecord:
        return self.nodes[name]

    def validate(self) -> None:
        """
        Validate that the snapshot can be replayed front to back:
        - every record's inputs appear earlier in `nodes`
        - declared inputs are records without inputs
        - declared outputs exist
        """
        seen: Set[str] = set()
        bad_edges: List[str] = []
        for node in self.nodes.values():
            for inp in node.inputs:
                if inp not in seen:
                    bad_edges.append(f"{node.name} -> {inp}")
            seen.add(node.name)
        if bad_edges:
            raise ValueError(
                "Records reference unknown or later predecessors:\n"
                + "\n".join(bad_edges)
            )

        for name in self.inputs:
            if name not in self.nodes:
                raise ValueError(f"Declared input `{name}` not found in graph nodes.")
            if self.nodes[name].inputs:
                raise ValueError(f"Declared input `{name}` is not a leaf.")
        for name in self.outputs:
            if name not in self.nodes:
                raise ValueError(f"Declared output `{name}` not found in graph nodes.")


def trace(root: "Node") -> Graph:
    """
    Materialise everything reachable from `root` as a `Graph`.

    Records are named ``n0, n1, ...`` following `topological_order`, so the
    root is always the last record. `metadata["live"]` maps each name back to
    the live node it was copied from.
    """
    order = topological_order(root)
    names = {id(node): f"n{idx}" for idx, node in enumerate(order)}

    graph = Graph(metadata={"live": {}})
    for node in order:
        name = names[id(node)]
        graph.add_node(
            NodeRecord(
                name=name,
                op=node.op,
                inputs=[names[id(dep)] for dep in node.dependencies],
                value=node.value,
                grad=node.grad,
                label=node.label,
            )
        )
        graph.metadata["live"][name] = node
        if node.is_leaf:
            graph.inputs.append(name)

    graph.outputs = [names[id(root)]]
    return graph
