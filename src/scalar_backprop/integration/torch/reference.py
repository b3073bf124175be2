"""
Replay a scalar graph with torch autograd to obtain reference gradients.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from scalar_backprop.graph.ir import NodeRecord, trace
from scalar_backprop.graph.node import Node


def _import_torch() -> Any:
    try:
        import torch
    except ModuleNotFoundError as exc:  # pragma: no cover - handled in tests
        raise ModuleNotFoundError(
            "torch_gradients requires PyTorch to be installed."
        ) from exc
    return torch


def _unary(torch: Any, op: str) -> Callable[[Any], Any]:
    if op == "exp":
        return torch.exp
    if op == "tanh":
        return torch.tanh
    if op.startswith("**"):
        exponent = float(op[2:])
        return lambda x: torch.pow(x, exponent)
    raise ValueError(f"Unsupported unary op `{op}`.")


def _replay(torch: Any, record: NodeRecord, args: List[Any]) -> Any:
    if record.op == "+":
        return args[0] + args[1]
    if record.op == "*":
        return args[0] * args[1]
    if len(args) != 1:
        raise ValueError(f"Op `{record.op}` expects one input, got {len(args)}.")
    return _unary(torch, record.op)(args[0])


def torch_gradients(root: Node) -> Dict[Node, float]:
    """
    Recompute `root` from its leaves with float64 torch tensors and return
    d(root)/d(leaf) for every reachable leaf, keyed by the live leaf node.

    The live graph's gradients are left untouched.
    """
    torch = _import_torch()
    graph = trace(root)
    graph.validate()
    live = graph.metadata["live"]

    tensors: Dict[str, Any] = {}
    for record in graph.nodes.values():
        if record.op == "leaf":
            tensors[record.name] = torch.tensor(
                record.value, dtype=torch.float64, requires_grad=True
            )
        else:
            args = [tensors[name] for name in record.inputs]
            tensors[record.name] = _replay(torch, record, args)

    out = tensors[graph.outputs[0]]
    if out.requires_grad:
        out.backward()

    result: Dict[Node, float] = {}
    for name in graph.inputs:
        grad = tensors[name].grad
        result[live[name]] = 0.0 if grad is None else float(grad.item())
    return result
