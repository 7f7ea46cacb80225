# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_search    : read a text map, run planners, print annotated maps + stats
- run_benchmark : random maps × planners, CSV output and per-planner summary
"""
__all__ = [
    "run_search",
    "run_benchmark",
]
