# -*- coding: utf-8 -*-
"""
Console rendering.

Each cell prints as its symbol padded to 3 columns:
    1 obstacle, 0 walkable, -1 unknown, x path, s start, g goal
With color on, path/start/goal are wrapped in ANSI red.
"""

from __future__ import annotations

from typing import List, Optional

from envs.grid import CellType, GridMap, as_grid_map

RESET = "\x1b[0m"
RED = "\x1b[31m"

SYMBOLS = {
    CellType.OBSTACLE: "1",
    CellType.WALKABLE: "0",
    CellType.UNKNOWN: "-1",
    CellType.PATH: "x",
    CellType.START: "s",
    CellType.GOAL: "g",
}

HIGHLIGHT = (CellType.PATH, CellType.START, CellType.GOAL)


def render_rows(grid) -> List[List[str]]:
    """Symbol matrix with the same shape as the grid."""
    grid = as_grid_map(grid)
    return [[SYMBOLS[CellType(int(v))] for v in row] for row in grid.cells]


def format_grid(grid, color: bool = True) -> str:
    grid = as_grid_map(grid)
    lines = []
    for row in grid.cells:
        parts = []
        for v in row:
            cell = CellType(int(v))
            sym = SYMBOLS[cell].ljust(3)
            if color and cell in HIGHLIGHT:
                sym = f"{RED}{sym}{RESET}"
            parts.append(sym)
        lines.append("".join(parts).rstrip())
    return "\n".join(lines)


def format_report(title: str,
                  cells_examined: int,
                  path_length: Optional[int],
                  annotated: Optional[GridMap] = None,
                  color: bool = True) -> str:
    """Title, stats and (optionally) the annotated grid."""
    lines = [title, f"Cells examined: {cells_examined}"]
    if path_length is None:
        lines.append("No path found")
    else:
        lines.append(f"Path length: {path_length}")
    out = "\n".join(lines) + "\n"
    if annotated is not None:
        out += "\n" + format_grid(annotated, color=color) + "\n"
    return out
