# -*- coding: utf-8 -*-
"""Matplotlib rendering of search results."""

import os
from typing import Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from envs.grid import CellType, as_grid_map

# RGB per cell class
COLORS = {
    CellType.WALKABLE: (1.0, 1.0, 1.0),
    CellType.OBSTACLE: (0.2, 0.2, 0.2),
    CellType.UNKNOWN: (0.7, 0.7, 0.7),
    CellType.PATH: (1.0, 0.55, 0.55),
    CellType.START: (0.2, 0.8, 0.2),
    CellType.GOAL: (0.85, 0.1, 0.1),
}


def grid_to_rgb(grid) -> np.ndarray:
    grid = as_grid_map(grid)
    rgb = np.ones((grid.H, grid.W, 3), dtype=float)
    for cell, color in COLORS.items():
        rgb[grid.cells == cell] = color
    return rgb


def render_result(result, ax=None, show_closed=True, title=None):
    """
    Render a SearchResult.

    Layers:
      - cell classes (annotated grid)
      - expanded cells (light blue overlay), if requested
      - path polyline
    """
    grid = result.annotated
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(2, W / 3), max(2, H / 3)), dpi=120)

    rgb = grid_to_rgb(grid)
    if show_closed and result.closed is not None:
        tint = result.closed & (grid.cells == CellType.WALKABLE)
        rgb[tint] = (0.75, 0.87, 1.0)

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if result.path:
        rr, cc = zip(*result.path)
        ax.plot(cc, rr, color="red", lw=1.5, alpha=0.8)

    if title is None:
        length = result.path_length
        title = f"{result.algorithm}: examined {result.cells_examined}, " + \
                ("no path" if length is None else f"length {length}")
    ax.set_title(title, fontsize=9)
    return ax


def save_results_figure(results: Sequence, path: str, show_closed=True) -> str:
    """One panel per result, side by side; returns the saved path."""
    results = [r for r in results if r.annotated is not None]
    n = max(1, len(results))
    H, W = results[0].annotated.shape if results else (4, 4)
    fig, axes = plt.subplots(1, n, figsize=(max(3, W / 3) * n, max(3, H / 3)), dpi=120, squeeze=False)
    for ax, res in zip(axes[0], results):
        render_result(res, ax=ax, show_closed=show_closed)
    fig.tight_layout()
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def _bar(agg, column, err_column, title, ylabel, out_path):
    plt.figure(figsize=(7, 4))
    plt.bar(agg["planner"], agg[column], yerr=agg[err_column])
    plt.title(title)
    plt.xlabel("Planner")
    plt.ylabel(ylabel)
    plt.xticks(rotation=15)
    plt.tight_layout(); plt.savefig(out_path, bbox_inches="tight"); plt.close()
    return out_path


def plot_benchmark(csv_path: str) -> list:
    """Bar charts of cells examined and path length (successful runs) per planner."""
    import pandas as pd

    df = pd.read_csv(csv_path)
    out_dir = os.path.dirname(csv_path)
    saved = []

    t = df.groupby("planner", sort=False)["cells_examined"].agg(["mean", "std"]).reset_index().fillna(0)
    saved.append(_bar(t, "mean", "std", "Average cells examined by planner", "Cells examined",
                      os.path.join(out_dir, "planner_examined_bar.png")))

    ok = df[df["success"] == 1]
    if len(ok):
        g = ok.groupby("planner", sort=False)["path_length"].agg(["mean", "std"]).reset_index().fillna(0)
        saved.append(_bar(g, "mean", "std", "Average path length (successful runs)", "Steps",
                          os.path.join(out_dir, "planner_length_bar.png")))
    return saved
