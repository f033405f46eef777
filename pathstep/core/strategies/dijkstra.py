# pathstep/core/strategies/dijkstra.py
#!/usr/bin/env python3
from math import inf
from typing import Deque

from pathstep.core.distance import exact_distance_from_start
from pathstep.core.grid import Grid
from pathstep.core.strategies.common import Prioritizer, argmin_index
from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


class DijkstraPrioritizer(Prioritizer):
    """
    Expands the frontier cell closest to the start.

    Distances come from walking the backtrace and are memoized for the whole
    run; with unit step cost this expands cells in non-decreasing distance.
    """
    name = "Dijkstra"

    def __init__(self, grid: Grid):
        super().__init__(grid)
        self.cached_distances = Vec2d(grid.rows, grid.columns, None)

    def distance_from_start(self, pos: Pos, backtrace: Vec2d) -> float:
        d = exact_distance_from_start(self.cached_distances, self.grid_start, backtrace, pos)
        return inf if d is None else d

    def select(self, frontier: Deque[Pos], backtrace: Vec2d) -> int:
        return argmin_index(frontier, lambda pos: self.distance_from_start(pos, backtrace))
