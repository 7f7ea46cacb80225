#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for 4-connected unit-cost grids.
- Frontier ordered by cost from start (A* with h=0).
- A neighbor is re-pushed whenever its cost strictly improves; older heap
  entries go stale and are skipped when popped.
- Optimal: returns a shortest path.
"""

from __future__ import annotations

from .base import GridPlanner
from .policy import OrderingPolicy


class DijkstraPolicy(OrderingPolicy):
    name = "dijkstra"


class DijkstraPlanner(GridPlanner):
    name = "dijkstra"
    title = "Dijkstra's path"
    policy_cls = DijkstraPolicy
