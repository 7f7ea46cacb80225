# -*- coding: utf-8 -*-
"""
Ordering policies: what distinguishes one grid search from another.

A policy decides
- which frontier container to use (heap / FIFO / LIFO),
- the key a vertex is pushed with (initial_key for start, relax_key after),
- whether a neighbor reached at candidate cost is (re)admitted to the frontier.

The engine (engine.py) does everything else.
"""

from __future__ import annotations

from envs.grid import Coord

from .frontier import HeapFrontier
from .records import VertexStatus


def manhattan(a: Coord, b: Coord) -> int:
    """Admissible and consistent on 4-connected unit-cost grids."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class OrderingPolicy:
    """Base policy: heap frontier, keyed by cost, admit on strict improvement."""

    name = "base"

    def make_frontier(self):
        return HeapFrontier()

    def initial_key(self, start: Coord, goal: Coord) -> float:
        return self.relax_key(start, 0.0, goal)

    def relax_key(self, coord: Coord, cost: float, goal: Coord) -> float:
        return cost

    def admit(self, status: int, recorded_cost: float, candidate_cost: float) -> bool:
        return candidate_cost < recorded_cost

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FirstDiscoveryPolicy(OrderingPolicy):
    """Admit a vertex only the first time it is seen; never re-admit."""

    def admit(self, status: int, recorded_cost: float, candidate_cost: float) -> bool:
        return status == VertexStatus.UNVISITED
