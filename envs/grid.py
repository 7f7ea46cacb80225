#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Immutable 2D occupancy grid used by every planner.

- Cells are stored as int8 codes (see CellType). The three input codes match
  the text format: 0 = walkable, 1 = obstacle, -1 = unknown.
- PATH / START / GOAL only appear in annotated output grids.
- Neighbors are 4-connected and always enumerated up, down, left, right.
  Planners rely on that order for reproducible tie-breaking.

Grid convention: grid.cells[r, c] is the class of row r, column c.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


Coord = Tuple[int, int]

# "no parent" / "unreached"
NO_PARENT: Coord = (-1, -1)

# 4-connected neighborhood deltas: up, down, left, right
DELTAS_4 = np.array([
    (-1, 0), (1, 0), (0, -1), (0, 1)
], dtype=np.int8)


class CellType(IntEnum):
    UNKNOWN = -1
    WALKABLE = 0
    OBSTACLE = 1
    PATH = 2
    START = 3
    GOAL = 4


TRAVERSABLE = (CellType.WALKABLE, CellType.START, CellType.GOAL)

# Codes accepted from the textual input format
INPUT_CODES = (CellType.UNKNOWN, CellType.WALKABLE, CellType.OBSTACLE)


@dataclass(frozen=True, eq=False)
class GridMap:
    """Rectangular, read-only matrix of CellType codes."""
    cells: np.ndarray           # (H, W) int8, write-protected

    def __post_init__(self):
        raw = np.asarray(self.cells)
        if raw.ndim != 2:
            raise ValueError(f"Grid must be 2D, got shape {raw.shape}")
        if raw.shape[0] <= 0 or raw.shape[1] <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {raw.shape}")
        valid = np.isin(raw, [int(t) for t in CellType])
        if not valid.all():
            bad = sorted(set(int(v) for v in raw[~valid]))
            raise ValueError(f"Unknown cell codes in grid: {bad}")
        cells = np.array(raw, dtype=np.int8, copy=True)
        cells.setflags(write=False)
        object.__setattr__(self, "cells", cells)

    # ---- construction ---- #

    @classmethod
    def from_rows(cls, rows) -> "GridMap":
        """Build from nested sequences of cell codes (must be rectangular)."""
        rows = [list(r) for r in rows]
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("Grid rows must be non-empty and of equal length")
        return cls(np.array(rows, dtype=np.int8))

    @classmethod
    def from_occupancy(cls, occupied: np.ndarray) -> "GridMap":
        """Build from a bool occupancy array (True = obstacle)."""
        occupied = np.asarray(occupied, dtype=bool)
        cells = np.where(occupied, CellType.OBSTACLE, CellType.WALKABLE).astype(np.int8)
        return cls(cells)

    # ---- shape ---- #

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def H(self) -> int:
        return self.cells.shape[0]

    @property
    def W(self) -> int:
        return self.cells.shape[1]

    @property
    def size(self) -> int:
        return int(self.cells.size)

    # ---- coordinates ---- #

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return (0 <= r < self.H) and (0 <= c < self.W)

    def index(self, coord: Coord) -> int:
        """Row-major flat index of a coordinate."""
        return int(coord[0]) * self.W + int(coord[1])

    def coord(self, index: int) -> Coord:
        r, c = divmod(int(index), self.W)
        return (r, c)

    def cell(self, coord: Coord) -> CellType:
        return CellType(int(self.cells[coord[0], coord[1]]))

    def is_traversable(self, coord: Coord) -> bool:
        if not self.in_bounds(coord):
            return False
        return int(self.cells[coord[0], coord[1]]) in TRAVERSABLE

    def neighbors(self, coord: Coord) -> List[Coord]:
        """In-bounds 4-neighbors in up, down, left, right order."""
        r, c = coord
        out: List[Coord] = []
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if 0 <= nr < self.H and 0 <= nc < self.W:
                out.append((nr, nc))
        return out

    def traversable_mask(self) -> np.ndarray:
        return np.isin(self.cells, [int(t) for t in TRAVERSABLE])

    # ---- derived grids ---- #

    def with_endpoints(self, start: Coord, goal: Coord) -> "GridMap":
        """Copy with start/goal marked; goal first so start wins when they coincide."""
        cells = self.cells.copy()
        cells[goal[0], goal[1]] = CellType.GOAL
        cells[start[0], start[1]] = CellType.START
        return GridMap(cells)

    def copy_cells(self) -> np.ndarray:
        """Writable copy of the underlying codes."""
        return self.cells.copy()


def as_grid_map(grid) -> GridMap:
    """
    Accept a GridMap, a bool occupancy array (True = obstacle) or an
    integer array / nested list of CellType codes.
    """
    if isinstance(grid, GridMap):
        return grid
    arr = np.asarray(grid)
    if arr.dtype == bool:
        return GridMap.from_occupancy(arr)
    return GridMap(arr)
