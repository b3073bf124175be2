"""
Lightweight profiling hooks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ProfileStats:
    passes: int = 0
    nodes_visited: int = 0
    backward_calls: int = 0
    events: Dict[str, float] = field(default_factory=dict)


class Profiler:
    def __init__(self) -> None:
        self.stats = ProfileStats()

    def record_pass(self, num_nodes: int) -> None:
        self.stats.passes += 1
        self.stats.nodes_visited += num_nodes

    def record_call(self) -> None:
        self.stats.backward_calls += 1

    def record_event(self, name: str, duration_ms: float) -> None:
        self.stats.events[name] = self.stats.events.get(name, 0.0) + duration_ms

    def snapshot(self) -> ProfileStats:
        return self.stats

    def reset(self) -> None:
        self.stats = ProfileStats()
