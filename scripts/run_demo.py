#!/usr/bin/env python
"""
Build the classic four-leaf expression, run backward and print every node.

    e = a * b
    d = e + c
    L = d * f
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, Sequence

from scalar_backprop import leaf
from scalar_backprop.analysis.report import format_report

EXPECTED_GRADS: Dict[str, float] = {
    "L": 1.0,
    "f": 4.0,
    "d": -2.0,
    "e": -2.0,
    "c": -2.0,
    "b": -4.0,
    "a": 6.0,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    a = leaf(2.0, label="a")
    b = leaf(-3.0, label="b")
    c = leaf(10.0, label="c")
    f = leaf(-2.0, label="f")
    e = a * b
    e.label = "e"
    d = e + c
    d.label = "d"
    L = d * f
    L.label = "L"

    L.backward()

    print("--- Forward Pass ---")
    print(f"L value: {L.value} (Expected: -8.0)\n")
    print("--- Backward Pass (Gradients) ---")
    nodes = {"L": L, "f": f, "d": d, "e": e, "c": c, "b": b, "a": a}
    mismatches = 0
    for name, expected in EXPECTED_GRADS.items():
        actual = nodes[name].grad
        mismatches += actual != expected
        print(f"{name}.grad: {actual} (Expected: {expected})")
    print()
    print(format_report(L))
    return 1 if mismatches or L.value != -8.0 else 0


if __name__ == "__main__":
    sys.exit(main())
