#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected unit-cost grids.
- Key: f = g + h, h = Manhattan distance to goal (admissible, consistent).
- A neighbor is admitted when g improves or it is not yet on the frontier.
- Optimal, and never closes more cells than Dijkstra on the same input.
"""

from __future__ import annotations

from envs.grid import Coord

from .base import GridPlanner
from .policy import OrderingPolicy, manhattan
from .records import VertexStatus


class AStarPolicy(OrderingPolicy):
    name = "a_star"

    def relax_key(self, coord: Coord, cost: float, goal: Coord) -> float:
        return cost + manhattan(coord, goal)

    def admit(self, status: int, recorded_cost: float, candidate_cost: float) -> bool:
        return candidate_cost < recorded_cost or status != VertexStatus.FRONTIER


class AStarPlanner(GridPlanner):
    name = "a_star"
    title = "A* path"
    policy_cls = AStarPolicy
