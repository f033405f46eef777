# pathstep/core/best_first.py
#!/usr/bin/env python3
"""
Generic best-first search, one expansion per step() for animation.

The prioritizer decides which frontier cell to expand; everything else
(neighbour discovery, backtrace bookkeeping, termination, path rebuild)
lives here once for every strategy.

The backtrace doubles as the visited set: a cell is visited iff it has a
predecessor. The start is seeded with a pointer to itself.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Type

from pathstep.core.grid import Grid
from pathstep.core.strategies.common import Prioritizer
from pathstep.core.types import (
    DIRECTIONS, FOUND, IN_PROGRESS, NOT_FOUND, Pos, PrioritizerError, StepResult, Tile,
)
from pathstep.core.vec2d import Vec2d

logger = logging.getLogger(__name__)


class BestFirst:
    def __init__(self, grid: Grid, prioritizer_cls: Type[Prioritizer]):
        # private snapshot; later edits to the caller's grid do not leak in
        self.grid = grid.clone()
        self.prioritizer = prioritizer_cls(self.grid)
        self.name = self.prioritizer.name

        self.frontier: Deque[Pos] = deque()
        self.backtrace: Vec2d = Vec2d(self.grid.rows, self.grid.columns, None)
        self.expanded_count = 0
        self.path: Optional[List[Pos]] = None
        self._terminal: Optional[StepResult] = None

        start = self.grid.start
        self.frontier.append(start)
        self.backtrace.set(start, start)
        self.visited_count = 1
        logger.debug("%s seeded at %s, end %s", self.name, tuple(start), tuple(self.grid.end))

    # -------------------- queries --------------------

    @property
    def finished(self) -> bool:
        return self._terminal is not None

    def is_visited(self, pos: Pos) -> bool:
        return self.backtrace.get(pos) is not None

    def is_in_frontier(self, pos: Pos) -> bool:
        return pos in self.frontier

    def visited_list(self) -> List[Pos]:
        return [p for p in self.backtrace.positions() if self.backtrace.get(p) is not None]

    def frontier_list(self) -> List[Pos]:
        return list(self.frontier)

    # -------------------- helpers --------------------

    def _neighbors4(self, pos: Pos) -> List[Pos]:
        out: List[Pos] = []
        for d in DIRECTIONS:
            n = pos.moved(d)
            # off-grid lookups read as None and drop out here
            if self.grid.tile_or_none(n) == Tile.OPEN and not self.is_visited(n):
                out.append(n)
        return out

    def _reconstruct_path(self, end: Pos) -> Optional[List[Pos]]:
        path: List[Pos] = []
        cur = end
        start = self.grid.start
        while cur != start:
            path.append(cur)
            parent = self.backtrace.get(cur)
            if parent is None or parent == cur:
                return None
            cur = parent
        path.append(start)
        path.reverse()
        return path

    def _finish(self, result: StepResult) -> StepResult:
        self._terminal = result
        logger.debug("%s finished: %s after %d expansions", self.name, result.status, self.expanded_count)
        return result

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        """Expand one frontier cell. Terminal results repeat on later calls."""
        if self._terminal is not None:
            return self._terminal

        if not self.frontier:
            return self._finish(StepResult(status=NOT_FOUND, metrics=self.metrics()))

        i = self.prioritizer.select(self.frontier, self.backtrace)
        if not 0 <= i < len(self.frontier):
            raise PrioritizerError(
                f"{type(self.prioritizer).__name__} picked index {i} from a frontier of {len(self.frontier)}")
        u = self.frontier[i]
        del self.frontier[i]
        self.expanded_count += 1

        if u == self.grid.end:
            path = self._reconstruct_path(u)
            if path is None:
                logger.warning("%s: broken backtrace chain at %s", self.name, tuple(u))
                return self._finish(StepResult(status=NOT_FOUND, current=u, metrics=self.metrics()))
            self.path = path
            return self._finish(StepResult(status=FOUND, current=u, path=path, metrics=self.metrics()))

        opened = self._neighbors4(u)
        for v in opened:
            self.frontier.append(v)
            self.backtrace.set(v, u)
        self.visited_count += len(opened)

        return StepResult(status=IN_PROGRESS, current=u, opened=opened, metrics=self.metrics())

    def run(self, max_steps: Optional[int] = None) -> StepResult:
        """Step until a terminal result, or give up after max_steps calls."""
        res = self.step()
        steps = 1
        while not res.finished and (max_steps is None or steps < max_steps):
            res = self.step()
            steps += 1
        return res

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "expanded": self.expanded_count,
            "frontier_size": len(self.frontier),
            "visited_count": self.visited_count,
            "path_len": len(self.path) if self.path else 0,
        }
