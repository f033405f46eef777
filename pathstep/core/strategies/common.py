# pathstep/core/strategies/common.py
#!/usr/bin/env python3
from typing import Deque

from pathstep.core.grid import Grid
from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


class Prioritizer:
    """
    Picks which frontier entry the engine expands next.

    The frontier is ordered oldest (index 0) to newest (index len - 1).
    select() is only called with a non-empty frontier and must return an
    index inside it.
    """
    name = "(prioritizer)"

    def __init__(self, grid: Grid):
        self.grid_start = grid.start
        self.grid_end = grid.end

    def select(self, frontier: Deque[Pos], backtrace: Vec2d) -> int:
        raise NotImplementedError


def argmin_index(frontier: Deque[Pos], score) -> int:
    """Index of the lowest score; the earliest entry wins ties."""
    best = float("inf")
    best_i = 0
    for i, pos in enumerate(frontier):
        s = score(pos)
        if s < best:
            best = s
            best_i = i
    return best_i
