# -*- coding: utf-8 -*-
"""
Frontier containers holding flat vertex indices.

All three share push(index, key) / pop() -> index / len(). Duplicate pushes
are allowed; the engine discards stale entries when they are popped.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Deque, List, Tuple


class HeapFrontier:
    """Min-key priority queue; equal keys pop in insertion order."""

    def __init__(self):
        self._heap: List[Tuple[float, int, int]] = []
        self._counter = itertools.count()

    def push(self, index: int, key: float) -> None:
        heapq.heappush(self._heap, (key, next(self._counter), index))

    def pop(self) -> int:
        _key, _cnt, index = heapq.heappop(self._heap)
        return index

    def __len__(self) -> int:
        return len(self._heap)


class FifoFrontier:
    """Queue for breadth-first order; keys are ignored."""

    def __init__(self):
        self._dq: Deque[int] = deque()

    def push(self, index: int, key: float = 0.0) -> None:
        self._dq.append(index)

    def pop(self) -> int:
        return self._dq.popleft()

    def __len__(self) -> int:
        return len(self._dq)


class LifoFrontier:
    """Stack for depth-first order; keys are ignored."""

    def __init__(self):
        self._stack: List[int] = []

    def push(self, index: int, key: float = 0.0) -> None:
        self._stack.append(index)

    def pop(self) -> int:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)
