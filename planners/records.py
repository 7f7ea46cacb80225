# -*- coding: utf-8 -*-
"""
Per-cell bookkeeping for one search run.

One flat, row-major array per field, sized to the grid; frontiers refer to
vertices by flat index. A table belongs to exactly one search call.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from envs.grid import Coord, GridMap


class VertexStatus(IntEnum):
    UNVISITED = 0
    FRONTIER = 1
    CLOSED = 2


NO_INDEX = -1


class VertexTable:
    """
    cost   : accumulated steps from start (inf until reached)
    key    : frontier priority last assigned
    parent : flat index of predecessor, NO_INDEX if none
    status : VertexStatus code
    """

    def __init__(self, grid: GridMap):
        self.H, self.W = grid.shape
        n = grid.size
        self.cost = np.full(n, np.inf, dtype=np.float64)
        self.key = np.full(n, np.inf, dtype=np.float64)
        self.parent = np.full(n, NO_INDEX, dtype=np.int64)
        self.status = np.full(n, VertexStatus.UNVISITED, dtype=np.int8)

    def __len__(self) -> int:
        return int(self.status.size)

    def index(self, coord: Coord) -> int:
        return int(coord[0]) * self.W + int(coord[1])

    def coord(self, index: int) -> Coord:
        r, c = divmod(int(index), self.W)
        return (r, c)

    def num_closed(self) -> int:
        return int(np.count_nonzero(self.status == VertexStatus.CLOSED))

    def closed_mask(self) -> np.ndarray:
        """(H, W) bool map of expanded cells."""
        return (self.status == VertexStatus.CLOSED).reshape(self.H, self.W)
