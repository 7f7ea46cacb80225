#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First Search planner.
- Key: h(n) only (Manhattan distance to goal).
- Each cell is admitted once, on first discovery, and never re-admitted
  even if a cheaper route turns up later.
- Usually closes few cells; the path is NOT guaranteed to be shortest.
"""

from __future__ import annotations

from envs.grid import Coord

from .base import GridPlanner
from .policy import FirstDiscoveryPolicy, manhattan


class GreedyBestFirstPolicy(FirstDiscoveryPolicy):
    name = "greedy"

    def relax_key(self, coord: Coord, cost: float, goal: Coord) -> float:
        return manhattan(coord, goal)


class GreedyBestFirstPlanner(GridPlanner):
    name = "greedy"
    title = "Greedy best-first search path"
    policy_cls = GreedyBestFirstPolicy
