# -*- coding: utf-8 -*-
"""
Grid model, text I/O and random grid generation.
Exposes:
- GridMap, CellType, Coord, NO_PARENT, as_grid_map   (grid.py)
- parse_grid_text / read_grid_file / format_grid_text (grid_io.py)
- GridEnvironment, generate_environment, has_path     (generator.py)
"""

from __future__ import annotations

from .grid import GridMap, CellType, Coord, NO_PARENT, DELTAS_4, as_grid_map
from .grid_io import (
    MalformedInputError,
    parse_grid_text,
    read_grid_file,
    format_grid_text,
    write_grid_file,
)
from .generator import GridEnvironment, generate_environment, has_path, reachable_mask

__all__ = [
    "GridMap",
    "CellType",
    "Coord",
    "NO_PARENT",
    "DELTAS_4",
    "as_grid_map",
    "MalformedInputError",
    "parse_grid_text",
    "read_grid_file",
    "format_grid_text",
    "write_grid_file",
    "GridEnvironment",
    "generate_environment",
    "has_path",
    "reachable_mask",
]
