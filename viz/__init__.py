# -*- coding: utf-8 -*-
"""
Rendering of grids and search results.
- console: text / ANSI rendering with the 1, 0, -1, x, s, g symbols
- plot   : matplotlib figures (imported lazily by callers that need it)
"""

from __future__ import annotations

from .console import SYMBOLS, render_rows, format_grid, format_report

__all__ = ["SYMBOLS", "render_rows", "format_grid", "format_report"]
