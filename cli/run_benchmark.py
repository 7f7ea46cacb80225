#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Batch comparison of the grid planners:
- Generates random grids across (sizes × densities × seeds)
- Runs every selected planner on each grid
- Writes one CSV row per (grid, planner) to --outdir
- Prints a per-planner summary (success rate, cells examined, path length,
  excess length over the optimum, runtime)

Example:
    python -m cli.run_benchmark \
        --sizes 20x20,40x40 \
        --densities 0.10,0.25 \
        --num-envs 30 \
        --planners dijkstra,a_star,greedy,bfs,dfs \
        --seed 0

Grid convention: 0 walkable, 1 obstacle, -1 unknown (never traversed).
"""

from __future__ import annotations
import argparse
import csv
import os
import sys
import time
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from envs.generator import generate_environment
from eval.metrics import compare_planners, compute_runtime_statistics
from planners import PLANNERS

FIELDNAMES = [
    "env_id", "H", "W", "density", "seed", "planner", "status", "success",
    "cells_examined", "path_length", "optimal_length", "excess_length", "time_s",
]


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = (int(v) for v in token.split("x"))
        if h <= 0 or w <= 0:
            raise ValueError(f"Bad size '{token}', both dimensions must be positive")
        sizes.append((h, w))
    return sizes


def _parse_densities(s: str) -> List[float]:
    vals = []
    for token in s.split(","):
        token = token.strip()
        if token.endswith("%"):
            v = float(token[:-1]) / 100.0
        else:
            v = float(token)
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Bad density '{token}', expected a value in [0, 1]")
        vals.append(v)
    return vals


def _parse_planners(s: str) -> List[str]:
    names = [p.strip().lower() for p in s.split(",") if p.strip()]
    if not names:
        raise ValueError("No planners selected")
    for key in names:
        if key not in PLANNERS:
            raise ValueError(f"Unknown planner '{key}'")
    return names


def _ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


def run_cases(sizes, densities, num_envs: int, planners: List[str], seed: int,
              unknown_density: float = 0.0, progress: bool = True) -> List[Dict]:
    """All (size, density, env) cases; BFS provides the optimal reference length."""
    total = len(sizes) * len(densities) * num_envs
    rows: List[Dict] = []
    env_id = 0
    with tqdm(total=total, desc="Benchmark", disable=not progress) as pbar:
        for (H, W) in sizes:
            for density in densities:
                for k in range(num_envs):
                    case_seed = seed + env_id
                    rng = np.random.default_rng(case_seed)
                    env = generate_environment(H=H, W=W, density=density,
                                               unknown_density=unknown_density, rng=rng)
                    names = planners if "bfs" in planners else planners + ["bfs"]
                    stats = compare_planners(env.grid, env.start, env.goal, names)
                    optimal = next(r["path_length"] for r in stats if r["planner"] == "bfs")
                    for r in stats:
                        if r["planner"] not in planners:
                            continue
                        excess = None
                        if r["path_length"] is not None and optimal is not None:
                            excess = r["path_length"] - optimal
                        rows.append({
                            "env_id": env_id, "H": H, "W": W, "density": density,
                            "seed": case_seed, "planner": r["planner"],
                            "status": r["status"], "success": r["success"],
                            "cells_examined": r["cells_examined"],
                            "path_length": r["path_length"],
                            "optimal_length": optimal,
                            "excess_length": excess,
                            "time_s": r["time_s"],
                        })
                    env_id += 1
                    pbar.update(1)
    return rows


def summarize_rows(rows: List[Dict]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=FIELDNAMES)
    # None (no path) -> NaN so means skip it
    for col in ("path_length", "optimal_length", "excess_length", "cells_examined", "success", "time_s"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df.groupby("planner", sort=False).agg(
        runs=("success", "size"),
        success_rate=("success", "mean"),
        mean_examined=("cells_examined", "mean"),
        mean_length=("path_length", "mean"),
        mean_excess=("excess_length", "mean"),
        mean_time_s=("time_s", "mean"),
    ).reset_index()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark grid planners on random maps.")
    ap.add_argument("--sizes", type=str, default="20x20,40x40",
                    help="Comma-separated grid sizes like 20x20,40x40")
    ap.add_argument("--densities", type=str, default="0.10,0.20,0.30",
                    help="Comma-separated obstacle densities (0–1 or %%, e.g., 10%%)")
    ap.add_argument("--unknown-density", type=float, default=0.0,
                    help="Fraction of free cells marked unknown (-1)")
    ap.add_argument("--num-envs", type=int, default=20, help="Environments per (size,density)")
    ap.add_argument("--planners", type=str, default=",".join(PLANNERS),
                    help=f"Comma-separated planners: {','.join(PLANNERS)}")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory for CSV")
    ap.add_argument("--quiet", action="store_true", help="Hide the progress bar")
    ap.add_argument("--plot", action="store_true", help="Also save bar charts next to the CSV")
    args = ap.parse_args(argv)

    try:
        sizes = _parse_sizes(args.sizes)
        densities = _parse_densities(args.densities)
        planners = _parse_planners(args.planners)
        if args.num_envs < 1:
            raise ValueError(f"--num-envs must be at least 1, got {args.num_envs}")
        rows = run_cases(sizes, densities, args.num_envs, planners, args.seed,
                         unknown_density=args.unknown_density, progress=not args.quiet)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Write CSV (unique, atomic)
    _ensure_dir(args.outdir)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"benchmark_s{args.seed}_{stamp}.csv")
    tmp_csv = out_csv + f".tmp_{os.getpid()}"
    with open(tmp_csv, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        w.writerows(rows)
    os.replace(tmp_csv, out_csv)
    print(f"Saved: {out_csv}")

    summary = summarize_rows(rows)
    print(summary.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
    timing = compute_runtime_statistics([r["time_s"] for r in rows])
    print("Runtime (s): " + ", ".join(f"{k}={v:.6f}" for k, v in timing.items()))

    if args.plot:
        from viz.plot import plot_benchmark
        for path in plot_benchmark(out_csv):
            print("Saved:", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
