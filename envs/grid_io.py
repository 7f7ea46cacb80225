#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid_io.py
----------
Plain-text grid format:

    <rows> <cols>
    <rows*cols cell codes: 0 = walkable, 1 = obstacle, -1 = unknown>
    <start_row> <start_col> <goal_row> <goal_col>

Tokens are whitespace separated; line breaks are not significant.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Tuple

import numpy as np

from .grid import Coord, GridMap, INPUT_CODES, CellType


class MalformedInputError(ValueError):
    """Raised when the text grid cannot be parsed."""


def _to_ints(tokens: Iterable[str]) -> List[int]:
    out = []
    for tok in tokens:
        try:
            out.append(int(tok))
        except ValueError:
            raise MalformedInputError(f"Expected an integer, got '{tok}'") from None
    return out


def parse_grid_text(text: str) -> Tuple[GridMap, Coord, Coord]:
    """Parse the text format; returns (grid, start, goal)."""
    values = _to_ints(text.split())
    if len(values) < 2:
        raise MalformedInputError("Missing grid dimensions")
    rows, cols = values[0], values[1]
    if rows <= 0 or cols <= 0:
        raise MalformedInputError(f"Grid dimensions must be positive, got {rows}x{cols}")

    n_cells = rows * cols
    expected = 2 + n_cells + 4
    if len(values) != expected:
        raise MalformedInputError(
            f"Expected {expected} integers for a {rows}x{cols} grid, got {len(values)}"
        )

    cells = np.array(values[2:2 + n_cells], dtype=np.int64).reshape(rows, cols)
    allowed = [int(t) for t in INPUT_CODES]
    bad = ~np.isin(cells, allowed)
    if bad.any():
        r, c = np.argwhere(bad)[0]
        raise MalformedInputError(
            f"Invalid cell code {int(cells[r, c])} at ({int(r)}, {int(c)}); allowed: {allowed}"
        )

    sr, sc, gr, gc = values[2 + n_cells:]
    return GridMap(cells), (sr, sc), (gr, gc)


def read_grid_file(path: str) -> Tuple[GridMap, Coord, Coord]:
    """Read a grid file; '-' reads from stdin."""
    if path == "-":
        return parse_grid_text(sys.stdin.read())
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid_text(f.read())


def format_grid_text(grid: GridMap, start: Coord, goal: Coord) -> str:
    """Inverse of parse_grid_text. Annotated cells are written as walkable."""
    cells = grid.copy_cells()
    cells[np.isin(cells, [CellType.PATH, CellType.START, CellType.GOAL])] = CellType.WALKABLE
    lines = [f"{grid.H} {grid.W}"]
    for row in cells:
        lines.append(" ".join(str(int(v)) for v in row))
    lines.append(f"{start[0]} {start[1]}")
    lines.append(f"{goal[0]} {goal[1]}")
    return "\n".join(lines) + "\n"


def write_grid_file(path: str, grid: GridMap, start: Coord, goal: Coord) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_grid_text(grid, start, goal))
