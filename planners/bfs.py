#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- FIFO frontier, no scoring.
- Each cell is admitted once, on first discovery.
- Level-order expansion makes it optimal on unit-cost grids.
"""

from __future__ import annotations

from .base import GridPlanner
from .frontier import FifoFrontier
from .policy import FirstDiscoveryPolicy


class BFSPolicy(FirstDiscoveryPolicy):
    name = "bfs"

    def make_frontier(self):
        return FifoFrontier()


class BFSPlanner(GridPlanner):
    name = "bfs"
    title = "Breadth-first search path"
    policy_cls = BFSPolicy
