"""
Runtime support for backward passes.

This layer is responsible for:
- Ordering the implicit graph and seeding the root gradient.
- Invoking each node's local backward step in dependency-respecting order.
- Optional instrumentation through callbacks and a profiler.
"""

from .engine import BackwardCallbacks, BackwardEngine, backward
from .hooks import CallRecorder
from .profiling import Profiler, ProfileStats

__all__ = [
    "BackwardCallbacks",
    "BackwardEngine",
    "backward",
    "CallRecorder",
    "Profiler",
    "ProfileStats",
]
