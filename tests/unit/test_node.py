from __future__ import annotations

import pytest

from scalar_backprop.graph.node import Node


def test_leaf_defaults() -> None:
    node = Node(3)
    assert node.value == 3.0
    assert isinstance(node.value, float)
    assert node.grad == 0.0
    assert node.gradient == 0.0
    assert node.op == "leaf"
    assert node.dependencies == ()
    assert node.label == ""
    assert node.is_leaf
    node._backward()  # leaf step is a no-op
    assert node.grad == 0.0


def test_nodes_compare_by_identity() -> None:
    a = Node(1.0)
    b = Node(1.0)
    assert a != b
    assert len({a, b}) == 2
    assert a == a


@pytest.mark.parametrize("bad", ["1.0", None, True, 1 + 2j])
def test_node_rejects_non_real_values(bad) -> None:
    with pytest.raises(TypeError):
        Node(bad)


def test_node_rejects_non_node_dependencies() -> None:
    with pytest.raises(TypeError):
        Node(1.0, op="+", dependencies=(Node(0.5), 0.5))


def test_value_is_stable_across_reads() -> None:
    a = Node(2.0)
    out = (a * 3 + 1).tanh()
    first = out.value
    assert all(out.value == first for _ in range(5))
    out.backward()
    assert out.value == first
    assert a.value == 2.0


def test_repr_does_not_recurse_into_dependencies() -> None:
    x = Node(1.0, label="x")
    y = x
    for _ in range(50):
        y = y + x
    text = repr(y)
    assert "dependencies" not in text
    assert "51.0" in text


def test_leaf_backward_step_is_an_instance_callable() -> None:
    a, b = Node(2.0), Node(-3.0)
    assert "_backward" in vars(a)
    assert a._backward() is None

    out = a * b + a
    out.backward()
    assert a.grad == -2.0
    assert b.grad == 2.0


def test_value_and_dependencies_are_fixed() -> None:
    a = Node(2.0)
    out = a * 3
    with pytest.raises(AttributeError):
        a.value = 5.0
    with pytest.raises(AttributeError):
        out.dependencies = ()

    out.label = "out"
    out.grad = 0.5
    assert (a.value, out.label, out.grad) == (2.0, "out", 0.5)
