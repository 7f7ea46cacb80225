#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generic best-first search over a 4-connected grid.

search(grid, start, goal, policy) runs:
  1) fresh VertexTable (all UNVISITED, cost = inf, no parent)
  2) seed start (cost 0, key = policy.initial_key) on the policy's frontier
  3) pop; skip stale entries (already CLOSED); close; stop at goal;
     relax traversable, non-closed neighbors in up/down/left/right order,
     pushing those the policy admits (duplicates allowed, lazy deletion)
  4) backtrack parents from goal

Every step costs 1. Failures are reported through SearchResult.status;
nothing here raises for an unreachable goal or a bad endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import numpy as np

from envs.grid import Coord, GridMap, as_grid_map

from .policy import OrderingPolicy
from .records import VertexStatus, VertexTable
from .reconstruct import annotate, reconstruct


class SearchStatus(str, Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_ENDPOINT = "invalid_endpoint"


class InvalidEndpointError(ValueError):
    """Start or goal is out of bounds or not traversable."""


@dataclass
class SearchResult:
    """Outcome of one search call."""
    algorithm: str
    status: SearchStatus
    start: Coord
    goal: Coord
    path: Optional[List[Coord]] = None        # start..goal inclusive when FOUND
    cells_examined: int = 0                   # vertices closed
    annotated: Optional[GridMap] = None       # grid with path/start/goal marked
    message: str = ""
    closed: Optional[np.ndarray] = field(default=None, repr=False)  # (H, W) bool

    @property
    def success(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def path_length(self) -> Optional[int]:
        """Edges traversed; None when there is no path (0 means start == goal)."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def raise_for_status(self) -> "SearchResult":
        if self.status == SearchStatus.INVALID_ENDPOINT:
            raise InvalidEndpointError(self.message)
        return self

    def as_dict(self) -> Dict:
        return {
            "success": self.success,
            "path": list(self.path) if self.path is not None else None,
            "status": self.status.value,
            "path_length": self.path_length,
            "cells_examined": self.cells_examined,
        }


def _check_endpoints(grid: GridMap, start: Coord, goal: Coord) -> Optional[str]:
    for name, p in (("start", start), ("goal", goal)):
        if not grid.in_bounds(p):
            return f"Invalid {name} coordinate {tuple(p)}: outside {grid.H}x{grid.W} grid"
        if not grid.is_traversable(p):
            return f"Invalid {name} coordinate {tuple(p)}: cell is {grid.cell(p).name.lower()}"
    return None


def search(grid, start: Coord, goal: Coord, policy: OrderingPolicy) -> SearchResult:
    """Run one search; safe to call concurrently on a shared grid."""
    grid = as_grid_map(grid)
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))

    problem = _check_endpoints(grid, start, goal)
    if problem is not None:
        return SearchResult(algorithm=policy.name, status=SearchStatus.INVALID_ENDPOINT,
                            start=start, goal=goal, message=problem)

    table = VertexTable(grid)
    frontier = policy.make_frontier()

    s = table.index(start)
    g = table.index(goal)
    table.cost[s] = 0.0
    table.key[s] = policy.initial_key(start, goal)
    table.status[s] = VertexStatus.FRONTIER
    frontier.push(s, table.key[s])

    reached = False
    while len(frontier):
        v = frontier.pop()
        if table.status[v] == VertexStatus.CLOSED:
            continue  # stale duplicate
        table.status[v] = VertexStatus.CLOSED
        if v == g:
            reached = True
            break

        here = table.coord(v)
        new_cost = table.cost[v] + 1.0
        for nb in grid.neighbors(here):
            if not grid.is_traversable(nb):
                continue
            n = table.index(nb)
            if table.status[n] == VertexStatus.CLOSED:
                continue
            if not policy.admit(table.status[n], table.cost[n], new_cost):
                continue
            table.cost[n] = new_cost
            table.parent[n] = v
            table.key[n] = policy.relax_key(nb, new_cost, goal)
            table.status[n] = VertexStatus.FRONTIER
            frontier.push(n, table.key[n])

    path = reconstruct(table, start, goal) if reached else None
    if path is None:
        return SearchResult(algorithm=policy.name, status=SearchStatus.NO_PATH,
                            start=start, goal=goal, path=None,
                            cells_examined=table.num_closed(),
                            annotated=annotate(grid, None, start, goal),
                            message="No path found",
                            closed=table.closed_mask())

    return SearchResult(algorithm=policy.name, status=SearchStatus.FOUND,
                        start=start, goal=goal, path=path,
                        cells_examined=table.num_closed(),
                        annotated=annotate(grid, path, start, goal),
                        closed=table.closed_mask())
