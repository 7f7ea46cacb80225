#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Read a text grid, run the selected planners, print each annotated map.

Input format (file or stdin):
    <rows> <cols>
    <rows*cols codes: 0 walkable, 1 obstacle, -1 unknown>
    <start_row> <start_col> <goal_row> <goal_col>

Example:
    python -m cli.run_search maps/example.txt --algorithms dijkstra,a_star
    python -m cli.run_search - < maps/example.txt --no-color --plot out/paths.png

Exit status: 0 on success (including "No path found"), 1 on malformed input
or an invalid start/goal.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from envs.grid_io import read_grid_file
from planners import PLANNERS, SearchStatus, get_planner
from viz.console import format_grid, format_report


def _parse_algorithms(s: str) -> List[str]:
    names = [t.strip().lower() for t in s.split(",") if t.strip()]
    if not names:
        raise ValueError("No algorithms given")
    for name in names:
        if name not in PLANNERS:
            raise ValueError(f"Unknown planner '{name}'. Available: {', '.join(PLANNERS)}")
    return names


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run grid path-planning algorithms on a text map.")
    ap.add_argument("input", nargs="?", default="-",
                    help="Path to the grid file, or '-' for stdin (default)")
    ap.add_argument("--algorithms", type=str, default=",".join(PLANNERS),
                    help=f"Comma-separated planners: {','.join(PLANNERS)}")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--plot", type=str, default=None,
                    help="Optional PNG path for a side-by-side figure of all results")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    color = not args.no_color

    try:
        names = _parse_algorithms(args.algorithms)
        grid, start, goal = read_grid_file(args.input)
    except (ValueError, OSError) as e:  # MalformedInputError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = [get_planner(name).search(grid, start, goal) for name in names]
    for res in results:
        if res.status == SearchStatus.INVALID_ENDPOINT:
            print(f"Error: {res.message}", file=sys.stderr)
            return 1

    print("\nOriginal map:\n")
    print(format_grid(grid.with_endpoints(start, goal), color=color))
    print()

    for name, res in zip(names, results):
        print(format_report(PLANNERS[name].title, res.cells_examined, res.path_length,
                            res.annotated, color=color))

    if args.plot:
        from viz.plot import save_results_figure  # lazy: matplotlib is slow to import
        out = save_results_figure(results, args.plot)
        print(f"Saved: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
