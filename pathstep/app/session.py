# pathstep/app/session.py
#!/usr/bin/env python3
"""
Viewer state without the window: the grid being edited, the search being
animated, and the run/pause state machine.

Any grid edit throws the running search away; the next step starts fresh.
"""

import logging
from typing import Dict, List, Optional

from pathstep.app.options import MAP_FILES, ViewerOptions, clamp_speed
from pathstep.core.best_first import BestFirst
from pathstep.core.grid import Grid, GridOptions
from pathstep.core.maps import MapFormatError, load_map
from pathstep.core.selector import LABELS, Algorithm, make_search
from pathstep.core.types import FOUND, NOT_FOUND, Pos, Tile

logger = logging.getLogger(__name__)

IDLE, RUNNING, PAUSED, DONE_FOUND, DONE_NO_PATH = "Idle", "Running", "Paused", "Found", "No path"


def load_grid(opts: ViewerOptions) -> Grid:
    path = opts.map_path
    if path is None:
        return GridOptions().into_grid()
    return load_map(path)


class Session:
    def __init__(self, grid: Grid, opts: ViewerOptions):
        self.grid = grid
        self.algorithm = opts.algorithm
        self.map_key = opts.map_key
        self.steps_per_sec = opts.steps_per_sec

        self.search: Optional[BestFirst] = None
        self.path: List[Pos] = []
        self.state = IDLE
        self.metrics: Dict = {}

        self._drag: Optional[str] = None       # "start" | "end" | "wall"
        self._paint = Tile.WALL
        self._last: Optional[Pos] = None

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    @property
    def finished(self) -> bool:
        return self.state in (DONE_FOUND, DONE_NO_PATH)

    # search lifecycle
    def reset(self) -> None:
        self.search = None
        self.path = []
        self.state = IDLE
        self.metrics = {}

    def step(self) -> None:
        if self.search is None:
            self.search = make_search(self.algorithm, self.grid)
        res = self.search.step()
        self.metrics = res.metrics
        if res.status == FOUND:
            self.path = res.path or []
            self.state = DONE_FOUND
        elif res.status == NOT_FOUND:
            self.path = []
            self.state = DONE_NO_PATH
        elif not self.running:
            self.state = PAUSED

    def toggle_run(self) -> None:
        if self.finished:
            return
        if self.search is None:
            self.search = make_search(self.algorithm, self.grid)
        self.state = PAUSED if self.running else RUNNING

    def bump_speed(self, dv: int) -> None:
        self.steps_per_sec = clamp_speed(self.steps_per_sec + dv)

    def select_algorithm(self, algo: Algorithm) -> None:
        self.algorithm = algo
        self.reset()

    # maps
    def switch_map(self, key: str) -> bool:
        try:
            grid = load_grid(ViewerOptions(self.algorithm, key, self.steps_per_sec))
        except (OSError, MapFormatError) as ex:
            logger.error("Failed to load map %s: %s", key, ex)
            return False
        self.grid = grid
        self.map_key = key
        self.reset()
        return True

    def next_map(self) -> bool:
        keys = list(MAP_FILES) + ["blank"]
        i = keys.index(self.map_key) + 1 if self.map_key in keys else 0
        return self.switch_map(keys[i % len(keys)])

    def clear_walls(self) -> None:
        self.grid.clear_walls()
        self.reset()

    # mouse editing: press picks what the drag moves, drag applies it
    def press(self, pos: Pos) -> None:
        self._last = pos
        if pos == self.grid.start:
            self._drag = "start"
        elif pos == self.grid.end:
            self._drag = "end"
        else:
            self._drag = "wall"
            self._paint = Tile.OPEN if self.grid.tile(pos) == Tile.WALL else Tile.WALL
            self.grid.set_tile(pos, self._paint)
            self.reset()

    def drag(self, pos: Pos) -> None:
        if self._drag is None or pos == self._last:
            return
        self._last = pos
        if self._drag == "start":
            if pos == self.grid.end:
                return
            self.grid.set_start(pos)
        elif self._drag == "end":
            if pos == self.grid.start:
                return
            self.grid.set_end(pos)
        else:
            self.grid.set_tile(pos, self._paint)
        self.reset()

    def release(self) -> None:
        self._drag = None
        self._last = None

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    def status_lines(self) -> List[str]:
        m = self.metrics
        return [
            f"{LABELS[self.algorithm]}: {self.state}",
            f"map {self.map_key}, {self.steps_per_sec} steps/s",
            f"expanded {m.get('expanded', 0)}  frontier {m.get('frontier_size', 0)}",
            f"visited {m.get('visited_count', 0)}  path {m.get('path_len', 0)}",
        ]
