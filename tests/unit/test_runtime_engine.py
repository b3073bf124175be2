from __future__ import annotations

import logging
import random

from scalar_backprop.graph.node import Node
from scalar_backprop.graph.ops import add, hyperbolic_tangent, leaf, multiply
from scalar_backprop.graph.topo import topological_order
from scalar_backprop.runtime.engine import BackwardCallbacks, BackwardEngine, backward
from scalar_backprop.utils.config import config


def _random_graph(num_leaves: int, num_ops: int) -> Node:
    pool = [leaf(random.uniform(-1.0, 1.0)) for _ in range(num_leaves)]
    for _ in range(num_ops):
        kind = random.choice(["add", "mul", "tanh"])
        if kind == "tanh":
            pool.append(hyperbolic_tangent(random.choice(pool)))
        else:
            fn = add if kind == "add" else multiply
            pool.append(fn(random.choice(pool), random.choice(pool)))
    root = pool[-1]
    for node in pool[-5:-1]:
        root = root + node
    return root


def test_backward_on_leaf_seeds_gradient_only() -> None:
    x = leaf(5.0)
    backward(x)
    assert x.grad == 1.0


def test_backward_returns_none_and_fills_gradients() -> None:
    a, b = leaf(2.0), leaf(3.0)
    out = a * b
    assert backward(out) is None
    assert (out.grad, a.grad, b.grad) == (1.0, 3.0, 2.0)


def test_shared_node_accumulates_every_use() -> None:
    x = leaf(3.0)
    y = add(multiply(x, x), x)
    y.backward()
    assert x.grad == 2 * x.value * y.grad + y.grad == 7.0


def test_repeated_backward_accumulates() -> None:
    x = leaf(2.0)
    y = x * 3
    y.backward()
    assert x.grad == 3.0
    y.backward()
    assert y.grad == 1.0
    assert x.grad == 6.0
    assert y.dependencies[1].grad == 4.0


def test_overlapping_graphs_accumulate() -> None:
    x = leaf(2.0)
    first = x * 4
    second = x + 1
    first.backward()
    second.backward()
    assert x.grad == 5.0


def test_engine_returns_call_order_and_profiles() -> None:
    a, b = leaf(1.0), leaf(2.0)
    out = (a * b).exp()
    engine = BackwardEngine()
    order = engine.run(out)

    assert order[0] is out
    assert len(order) == len(topological_order(out))
    stats = engine.profiler.snapshot()
    assert stats.passes == 1
    assert stats.nodes_visited == len(order)
    assert stats.backward_calls == len(order)
    assert set(stats.events) == {"topo_sort", "propagate"}


def test_callbacks_wrap_each_local_step() -> None:
    a, b = leaf(2.0), leaf(-1.0)
    out = a + b
    events = []
    finalized = []

    callbacks = BackwardCallbacks(
        before_node=lambda node: events.append(("before", node, node.grad)),
        after_node=lambda node: events.append(("after", node, node.grad)),
        finalize=finalized.append,
    )
    backward(out, callbacks=callbacks)

    assert [(kind, node) for kind, node, _ in events[:2]] == [("before", out), ("after", out)]
    assert len(events) == 6
    # `a` already holds its full gradient by the time its own step starts
    assert ("before", a, 1.0) in events
    assert len(finalized) == 1
    assert finalized[0][0] is out


def test_every_dependent_runs_before_its_dependencies() -> None:
    for _ in range(20):
        root = _random_graph(num_leaves=4, num_ops=15)
        seen = set()

        def check(node: Node) -> None:
            seen.add(id(node))

        order = BackwardEngine(BackwardCallbacks(after_node=check)).run(root)
        position = {id(n): i for i, n in enumerate(order)}
        for node in order:
            for dep in node.dependencies:
                assert position[id(dep)] > position[id(node)]
        assert len(seen) == len(order)


def test_debug_config_logs_each_node(monkeypatch, caplog) -> None:
    monkeypatch.setattr(config, "debug", True)
    caplog.set_level(logging.DEBUG, logger="scalar_backprop")

    a = leaf(2.0, label="a")
    out = a * 3
    out.backward()

    messages = [record.getMessage() for record in caplog.records]
    assert any("backward pass over 3 nodes" in m for m in messages)
    assert any(m.startswith("leaf a grad=3") for m in messages)
