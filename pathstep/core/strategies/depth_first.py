# pathstep/core/strategies/depth_first.py
#!/usr/bin/env python3
from typing import Deque

from pathstep.core.strategies.common import Prioritizer
from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


class DepthFirstPrioritizer(Prioritizer):
    """Stack discipline: newest entry first."""
    name = "Depth-first"

    def select(self, frontier: Deque[Pos], backtrace: Vec2d) -> int:
        return len(frontier) - 1
