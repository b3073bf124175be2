"""
Scalar computation graph.

The graph is never built explicitly: every `Node` keeps references to the
nodes it was computed from, and the web of references is the graph.

- `Node` (see `node.py`)
- Operation constructors (see `ops.py`)
- Topological ordering and snapshot IR helpers.
"""

from .node import Node
from . import ops
from . import topo
from . import ir

__all__ = [
    "Node",
    "ops",
    "topo",
    "ir",
]
