# -*- coding: utf-8 -*-
"""
Planner objects with a unified API:
planner.plan(grid, start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, 'status': str,
      'path_length': int or None, 'cells_examined': int}
planner.search(...) returns the full SearchResult (annotated grid included).

`grid` may be a GridMap, an int array of cell codes, or a bool occupancy
array (True = obstacle).
"""

from __future__ import annotations

from typing import Dict, Tuple

from .engine import SearchResult, search
from .policy import OrderingPolicy


class GridPlanner:
    name = "base"
    title = "Grid search"
    policy_cls = OrderingPolicy

    def __init__(self):
        self.policy = self.policy_cls()

    def search(self, grid, start: Tuple[int, int], goal: Tuple[int, int]) -> SearchResult:
        return search(grid, start, goal, self.policy)

    def plan(self, grid, start: Tuple[int, int], goal: Tuple[int, int]) -> Dict:
        return self.search(grid, start, goal).as_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
