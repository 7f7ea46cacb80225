#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Reporting for search results.

What's inside
-------------
- summarize(): flat stats dict of one SearchResult (cells examined, path length)
- path_is_valid(): contiguity / no-revisit / traversability check of a path
- compare_planners(): run several planners on one grid, one row per planner
- runtime helpers
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence
import time

import numpy as np

from envs.grid import Coord, GridMap, as_grid_map
from planners import PLANNERS, SearchResult, get_planner


def summarize(result: SearchResult) -> Dict:
    """Pure function of the result: no hidden state."""
    return {
        "planner": result.algorithm,
        "status": result.status.value,
        "success": int(result.success),
        "cells_examined": int(result.cells_examined),
        "path_length": result.path_length,
        "start": tuple(result.start),
        "goal": tuple(result.goal),
    }


def path_is_valid(path: Optional[Sequence[Coord]], grid, start: Coord, goal: Coord) -> bool:
    """
    True iff path runs start..goal through traversable cells, each step moves
    to a 4-neighbor, and no cell appears twice.
    """
    if not path:
        return False
    grid = as_grid_map(grid)
    if tuple(path[0]) != tuple(start) or tuple(path[-1]) != tuple(goal):
        return False
    if len(set(map(tuple, path))) != len(path):
        return False
    for p in path:
        if not grid.is_traversable(p):
            return False
    for (r0, c0), (r1, c1) in zip(path[:-1], path[1:]):
        if abs(r1 - r0) + abs(c1 - c0) != 1:
            return False
    return True


def compare_planners(grid,
                     start: Coord,
                     goal: Coord,
                     names: Optional[Iterable[str]] = None) -> List[Dict]:
    """Run each named planner (default: all) and return one summary row each."""
    grid = as_grid_map(grid)
    rows: List[Dict] = []
    for name in (list(names) if names is not None else list(PLANNERS)):
        planner = get_planner(name)
        t0 = time.perf_counter()
        result = planner.search(grid, start, goal)
        t1 = time.perf_counter()
        row = summarize(result)
        row["time_s"] = t1 - t0
        rows.append(row)
    return rows


def compute_runtime_statistics(times_s: Sequence[float]) -> Dict[str, float]:
    """Spread of per-search wall times (the benchmark's `time_s` column)."""
    t = np.asarray(times_s, dtype=np.float64)
    if t.size == 0:
        raise ValueError("No runtimes to summarize")
    return {
        "mean": float(t.mean()),
        "median": float(np.median(t)),
        "std": float(t.std()),
        "min": float(t.min()),
        "max": float(t.max()),
    }
