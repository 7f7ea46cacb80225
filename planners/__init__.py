# -*- coding: utf-8 -*-
"""
Planners on 4-connected grid maps with a unified API:
planner.plan(grid, start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, ...}
planner.search(grid, start, goal) -> SearchResult
"""

from __future__ import annotations
from typing import Dict, Type

from .a_star import AStarPlanner, AStarPolicy
from .dijkstra import DijkstraPlanner, DijkstraPolicy
from .greedy_best_first import GreedyBestFirstPlanner, GreedyBestFirstPolicy
from .bfs import BFSPlanner, BFSPolicy
from .dfs import DFSPlanner, DFSPolicy
from .base import GridPlanner
from .engine import InvalidEndpointError, SearchResult, SearchStatus, search
from .policy import OrderingPolicy, manhattan

# Mapping used by factories/CLIs; order is the report order
PLANNERS: Dict[str, Type[GridPlanner]] = {
    "dijkstra": DijkstraPlanner,
    "a_star": AStarPlanner,
    "greedy": GreedyBestFirstPlanner,
    "bfs": BFSPlanner,
    "dfs": DFSPlanner,
}


def get_planner(name: str) -> GridPlanner:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'dijkstra', 'a_star', 'greedy', 'bfs', 'dfs'

    Returns
    -------
    planner instance
    """
    key = name.strip().lower()
    if key not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[key]()


__all__ = [
    "AStarPlanner",
    "DijkstraPlanner",
    "GreedyBestFirstPlanner",
    "BFSPlanner",
    "DFSPlanner",
    "AStarPolicy",
    "DijkstraPolicy",
    "GreedyBestFirstPolicy",
    "BFSPolicy",
    "DFSPolicy",
    "GridPlanner",
    "OrderingPolicy",
    "manhattan",
    "search",
    "SearchResult",
    "SearchStatus",
    "InvalidEndpointError",
    "PLANNERS",
    "get_planner",
]
