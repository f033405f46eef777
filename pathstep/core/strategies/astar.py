# pathstep/core/strategies/astar.py
#!/usr/bin/env python3
"""
A* ordering: f = g + h.

- g: exact hop count from the start, shared memoized helper (same as Dijkstra).
- h: Manhattan distance to the end, recomputed every time (O(1)).

Equal f goes to the smaller g, then to the oldest frontier entry. The
backtrace keeps the first parent it sees, so preferring the shallower cell
among equal f is what keeps discovered g values shortest.
"""

from math import inf
from typing import Deque

from pathstep.core.distance import heuristic_distance
from pathstep.core.strategies.dijkstra import DijkstraPrioritizer
from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


class AStarPrioritizer(DijkstraPrioritizer):
    name = "A*"

    def f_score(self, pos: Pos, backtrace: Vec2d) -> float:
        return self.distance_from_start(pos, backtrace) + heuristic_distance(pos, self.grid_end)

    def select(self, frontier: Deque[Pos], backtrace: Vec2d) -> int:
        best = (inf, inf)
        best_i = 0
        for i, pos in enumerate(frontier):
            g = self.distance_from_start(pos, backtrace)
            key = (g + heuristic_distance(pos, self.grid_end), g)
            if key < best:
                best = key
                best_i = i
        return best_i
