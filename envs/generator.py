#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random occupancy-grid generator for benchmarks and randomized tests.

- Obstacles are axis-aligned rectangular blocks stamped until a target
  obstacle density is reached.
- Optionally sprinkles unknown (-1) cells, which planners never traverse.
- Start and goal are always left walkable.
- ensure_status:
    "any"     : no guarantee about path existence.
    "failure" : goal is walled in by obstacles, so no path exists.
    "success" : resamples until start and goal are connected.
- Reproducibility: explicit np.random.Generator.

Connectivity checks use scipy.ndimage.label with a 4-connected structuring
element (same moves the planners make).

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .grid import Coord, CellType, GridMap, DELTAS_4


# ------------------------------- Data classes ------------------------------- #

@dataclass
class GridEnvironment:
    """A grid plus the endpoints a search should connect."""
    grid: GridMap
    start: Coord
    goal: Coord
    settings: Dict              # record of generator settings used (for provenance)
    rng: np.random.Generator

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.H

    @property
    def W(self) -> int:
        return self.grid.W


# ------------------------------ Connectivity ------------------------------- #

STRUCTURE_4 = np.array([[0, 1, 0],
                        [1, 1, 1],
                        [0, 1, 0]], dtype=np.uint8)


def reachable_mask(grid: GridMap, start: Coord) -> np.ndarray:
    """
    Bool mask of traversable cells 4-connected to start.
    Empty mask if start itself is not traversable.
    """
    free = grid.traversable_mask()
    if not grid.is_traversable(start):
        return np.zeros(grid.shape, dtype=bool)
    labels, _ = cc_label(free.astype(np.uint8), structure=STRUCTURE_4)
    return labels == labels[start[0], start[1]]


def has_path(grid: GridMap, start: Coord, goal: Coord) -> bool:
    if not (grid.is_traversable(start) and grid.is_traversable(goal)):
        return False
    return bool(reachable_mask(grid, start)[goal[0], goal[1]])


# -------------------------- Shape / stamping helpers ------------------------ #

def _random_rectangle_mask(rng: np.random.Generator,
                           min_h: int, max_h: int,
                           min_w: int, max_w: int) -> np.ndarray:
    h = max(1, int(rng.integers(min_h, max_h + 1)))
    w = max(1, int(rng.integers(min_w, max_w + 1)))
    return np.ones((h, w), dtype=bool)


def _stamp_mask(occ: np.ndarray, top_left: Tuple[int, int], mask: np.ndarray) -> bool:
    """Stamp 'mask' onto 'occ' at top_left if it fits and does not overlap."""
    H, W = occ.shape
    mr, mc = mask.shape
    r0, c0 = top_left
    r1, c1 = r0 + mr, c0 + mc
    if r0 < 0 or c0 < 0 or r1 > H or c1 > W:
        return False
    target = occ[r0:r1, c0:c1]
    if (target & mask).any():
        return False
    target |= mask
    return True


def _wall_in(cells: np.ndarray, goal: Coord) -> None:
    """Surround goal with obstacles on its four sides."""
    H, W = cells.shape
    for dr, dc in DELTAS_4:
        r, c = goal[0] + int(dr), goal[1] + int(dc)
        if 0 <= r < H and 0 <= c < W:
            cells[r, c] = CellType.OBSTACLE


# ------------------------------- Core generator ----------------------------- #

def _sample_cells(H: int, W: int, density: float, unknown_density: float,
                  rect_size, rng: np.random.Generator, max_place_tries: int) -> np.ndarray:
    occ = np.zeros((H, W), dtype=bool)
    target_cells = int(round(density * H * W))
    (min_h, max_h), (min_w, max_w) = rect_size

    tries = 0
    while tries < max_place_tries and int(occ.sum()) < target_cells:
        tries += 1
        mask = _random_rectangle_mask(rng, min_h, max_h, min_w, max_w)
        mr, mc = mask.shape
        if mr > H or mc > W:
            continue
        r0 = int(rng.integers(0, H - mr + 1))
        c0 = int(rng.integers(0, W - mc + 1))
        _stamp_mask(occ, (r0, c0), mask)

    cells = np.where(occ, CellType.OBSTACLE, CellType.WALKABLE).astype(np.int8)
    if unknown_density > 0:
        unknown = (rng.random((H, W)) < unknown_density) & ~occ
        cells[unknown] = CellType.UNKNOWN
    return cells


def generate_environment(
    H: int = 20,
    W: int = 20,
    *,
    density: float = 0.2,
    unknown_density: float = 0.0,
    start: Coord = (0, 0),
    goal: Optional[Coord] = None,
    rect_size: Tuple[Tuple[int, int], Tuple[int, int]] = ((1, 3), (1, 4)),  # (min_h,max_h),(min_w,max_w)
    ensure_status: str = "any",              # "any" | "failure" | "success"
    rng: Optional[np.random.Generator] = None,
    max_place_tries: int = 5000,
    max_resamples: int = 100,
) -> GridEnvironment:
    """
    Create a random grid with start/goal kept walkable.

    Returns a GridEnvironment. Raises ValueError for impossible requests and
    RuntimeError if "success" could not be met within max_resamples draws.
    """
    if H <= 0 or W <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {H}x{W}")
    if goal is None:
        goal = (H - 1, W - 1)
    for name, p in (("start", start), ("goal", goal)):
        if not (0 <= p[0] < H and 0 <= p[1] < W):
            raise ValueError(f"{name} {p} is outside a {H}x{W} grid")
    if ensure_status not in ("any", "failure", "success"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    if ensure_status == "failure" and abs(start[0] - goal[0]) + abs(start[1] - goal[1]) <= 1:
        raise ValueError("Cannot force failure when start and goal are the same or adjacent")

    rng = rng or np.random.default_rng()
    density = float(np.clip(density, 0.0, 0.9))
    unknown_density = float(np.clip(unknown_density, 0.0, 0.9))
    settings = dict(
        H=H, W=W, density=density, unknown_density=unknown_density,
        start=start, goal=goal, rect_size=rect_size, ensure_status=ensure_status,
        max_place_tries=max_place_tries,
        seed=int(rng.integers(0, 2**31 - 1)),
    )

    for _ in range(max_resamples):
        cells = _sample_cells(H, W, density, unknown_density, rect_size, rng, max_place_tries)
        cells[start] = CellType.WALKABLE
        cells[goal] = CellType.WALKABLE

        if ensure_status == "failure":
            _wall_in(cells, goal)
            grid = GridMap(cells)
            return GridEnvironment(grid=grid, start=start, goal=goal, settings=settings, rng=rng)

        grid = GridMap(cells)
        if ensure_status == "any" or has_path(grid, start, goal):
            return GridEnvironment(grid=grid, start=start, goal=goal, settings=settings, rng=rng)

    raise RuntimeError(
        f"Could not generate a connected {H}x{W} grid at density {density} "
        f"in {max_resamples} draws; lower the density"
    )


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    rng = np.random.default_rng(123)
    env = generate_environment(H=16, W=24, density=0.25, ensure_status="success", rng=rng)
    print("Environment:", env.shape, "Start:", env.start, "Goal:", env.goal)
    print("#Obstacle cells:", int((env.grid.cells == CellType.OBSTACLE).sum()))
    print("Path exists?", has_path(env.grid, env.start, env.goal))
    print("Reachable cells:", int(reachable_mask(env.grid, env.start).sum()))
