# pathstep/core/distance.py
#!/usr/bin/env python3
from typing import Optional

from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


def exact_distance_from_start(cache: Vec2d, grid_start: Pos,
                              backtrace: Vec2d, pos: Pos) -> Optional[float]:
    """
    Hop count from grid_start to pos along the backtrace chain (unit cost).

    Stops at the first ancestor whose distance is already cached, or at
    grid_start, and stores the answer for pos. None when the chain breaks
    before reaching grid_start. Entries are only ever added to the cache.
    """
    cached = cache.get(pos)
    if cached is not None:
        return cached
    if pos == grid_start:
        cache.set(pos, 0.0)
        return 0.0

    hops = 0.0
    current = pos
    while True:
        parent = backtrace.get(current)
        if parent is None or parent == current:
            return None
        hops += 1.0
        if parent == grid_start:
            cache.set(pos, hops)
            return hops
        parent_dist = cache.get(parent)
        if parent_dist is not None:
            cache.set(pos, parent_dist + hops)
            return parent_dist + hops
        current = parent


def heuristic_distance(pos1: Pos, pos2: Pos) -> float:
    """Manhattan distance; admissible for 4-connected unit-cost moves."""
    (x1, y1), (x2, y2) = pos1, pos2
    return float(abs(x2 - x1) + abs(y2 - y1))
