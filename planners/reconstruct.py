# -*- coding: utf-8 -*-
"""Path backtracking and result-grid annotation."""

from __future__ import annotations

from typing import List, Optional, Sequence

from envs.grid import CellType, Coord, GridMap

from .records import NO_INDEX, VertexTable


def reconstruct(table: VertexTable, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """
    Walk parent pointers back from goal.

    Returns the path start..goal (inclusive), or None if a missing parent is
    hit before reaching start.
    """
    s = table.index(start)
    v = table.index(goal)
    rev = [v]
    # a parent chain can never be longer than the grid
    for _ in range(len(table)):
        if v == s:
            break
        v = int(table.parent[v])
        if v == NO_INDEX:
            return None
        rev.append(v)
    else:
        return None
    rev.reverse()
    return [table.coord(i) for i in rev]


def annotate(grid: GridMap, path: Optional[Sequence[Coord]], start: Coord, goal: Coord) -> GridMap:
    """Copy of grid with intermediate path cells as PATH, endpoints as START/GOAL."""
    cells = grid.copy_cells()
    if path:
        for r, c in path[1:-1]:
            cells[r, c] = CellType.PATH
    cells[goal[0], goal[1]] = CellType.GOAL
    cells[start[0], start[1]] = CellType.START
    return GridMap(cells)
