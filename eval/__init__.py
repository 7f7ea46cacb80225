# -*- coding: utf-8 -*-
"""
Evaluation utilities: result summaries, path validation and planner comparison.
"""

from __future__ import annotations

from .metrics import (
    summarize,
    path_is_valid,
    compare_planners,
    compute_runtime_statistics,
)

__all__ = [
    "summarize",
    "path_is_valid",
    "compare_planners",
    "compute_runtime_statistics",
]
