#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but useful as a baseline).
- LIFO frontier, no scoring.
- Each cell is admitted once, on first discovery.
- Returns the first path found (often long and twisty).
"""

from __future__ import annotations

from .base import GridPlanner
from .frontier import LifoFrontier
from .policy import FirstDiscoveryPolicy


class DFSPolicy(FirstDiscoveryPolicy):
    name = "dfs"

    def make_frontier(self):
        return LifoFrontier()


class DFSPlanner(GridPlanner):
    name = "dfs"
    title = "Depth-first search path"
    policy_cls = DFSPolicy
