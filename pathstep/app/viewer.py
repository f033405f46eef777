# pathstep/app/viewer.py
#!/usr/bin/env python3
"""
pathstep viewer: animates a search one step at a time.

- Keyboard:
    [1]-[4]      -> algorithm (Depth-first / Breadth-first / Dijkstra / A*)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset search (keeps the grid)
    [C]          -> clear walls
    [M]          -> next map
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit
- Mouse:
    left click / drag on a tile        -> toggle walls
    drag the start or end marker       -> move it

Options: see pathstep.app.options (env PATHSTEP_* or --algo= --map= --speed=).
"""

import logging
import sys
import time
from typing import Callable, Dict, Optional, Tuple

import pygame

from pathstep.app.options import resolve_options
from pathstep.app.session import Session, load_grid
from pathstep.core.selector import Algorithm
from pathstep.core.types import Pos, Tile

logger = logging.getLogger(__name__)

SIDEBAR_W = 280
MARGIN = 16
MIN_CELL = 8

BG          = (24, 26, 32)
WALL        = (60, 64, 72)
FLOOR       = (200, 200, 200)
GRID_LINE   = (0, 0, 0)
START_BLUE  = (70, 130, 180)
END_RED     = (220, 50, 47)
VISITED     = (255, 0, 120, 90)
FRONTIER    = (0, 150, 255, 110)
PATH        = (0, 255, 200)
TEXT        = (230, 235, 240)
TEXT_DIM    = (150, 156, 166)

HELP = (
    "1-4 algorithm   SPACE run/pause",
    "N step   R reset   C clear walls",
    "M next map   +/- speed   Q quit",
    "click/drag: walls, S and E markers",
)


class Viewer:
    def __init__(self, session: Session):
        pygame.init()
        self.session = session
        self.font = pygame.font.Font(None, 20)
        self.clock = pygame.time.Clock()
        self._last_step_t = 0.0
        self.screen = pygame.display.set_mode((960, 640), pygame.RESIZABLE)
        self._fit()

        s = session
        self.keymap: Dict[int, Callable[[], None]] = {
            pygame.K_SPACE: s.toggle_run,
            pygame.K_n: s.step,
            pygame.K_r: s.reset,
            pygame.K_c: s.clear_walls,
            pygame.K_m: self._next_map,
            pygame.K_PLUS: lambda: s.bump_speed(+1),
            pygame.K_EQUALS: lambda: s.bump_speed(+1),
            pygame.K_MINUS: lambda: s.bump_speed(-1),
            pygame.K_1: lambda: s.select_algorithm(Algorithm.DEPTH_FIRST),
            pygame.K_2: lambda: s.select_algorithm(Algorithm.BREADTH_FIRST),
            pygame.K_3: lambda: s.select_algorithm(Algorithm.DIJKSTRA),
            pygame.K_4: lambda: s.select_algorithm(Algorithm.A_STAR),
        }

    def _fit(self):
        """Largest whole-pixel cell that leaves room for the sidebar."""
        w, h = self.screen.get_size()
        grid = self.session.grid
        per_col = (w - SIDEBAR_W - 2 * MARGIN) // grid.width
        per_row = (h - 2 * MARGIN) // grid.height
        self.cell = max(MIN_CELL, min(per_col, per_row))
        self.sidebar_x = 2 * MARGIN + grid.width * self.cell
        pygame.display.set_caption(f"pathstep - {self.session.map_key}")

    def _cell_at(self, px: int, py: int) -> Optional[Pos]:
        pos = Pos((px - MARGIN) // self.cell, (py - MARGIN) // self.cell)
        return pos if self.session.grid.in_bounds(pos) else None

    def _center(self, pos: Pos) -> Tuple[int, int]:
        return (MARGIN + pos.x * self.cell + self.cell // 2,
                MARGIN + pos.y * self.cell + self.cell // 2)

    def _next_map(self):
        if self.session.next_map():
            self._fit()

    def run(self):
        while self._handle_events():
            if self.session.running:
                now = time.time()
                if now - self._last_step_t >= 1.0 / self.session.steps_per_sec:
                    self._last_step_t = now
                    self.session.step()
            self._draw()
            self.clock.tick(60)
        pygame.quit()

    def _handle_events(self) -> bool:
        s = self.session
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return False
            if e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    return False
                action = self.keymap.get(e.key)
                if action:
                    action()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((max(640, e.w), max(480, e.h)), pygame.RESIZABLE)
                self._fit()
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                cell = self._cell_at(*e.pos)
                if cell is not None:
                    s.press(cell)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                s.release()
            elif e.type == pygame.MOUSEMOTION and s.dragging:
                cell = self._cell_at(*e.pos)
                if cell is not None:
                    s.drag(cell)
        return True

    def _draw(self):
        self.screen.fill(BG)
        self._draw_tiles()
        self._draw_sidebar()
        pygame.display.flip()

    def _draw_tiles(self):
        s = self.session
        cs = self.cell
        shade = pygame.Surface((cs, cs), pygame.SRCALPHA)
        for pos in s.grid.tiles.positions():
            rect = pygame.Rect(MARGIN + pos.x * cs, MARGIN + pos.y * cs, cs, cs)
            pygame.draw.rect(self.screen, WALL if s.grid.tile(pos) == Tile.WALL else FLOOR, rect)
            if s.search is not None:
                # frontier cells are also visited, so test the frontier first
                tint = FRONTIER if s.search.is_in_frontier(pos) else VISITED if s.search.is_visited(pos) else None
                if tint:
                    shade.fill(tint)
                    self.screen.blit(shade, rect.topleft)
            pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

        if len(s.path) >= 2:
            pygame.draw.lines(self.screen, PATH, False, [self._center(p) for p in s.path], max(3, cs // 5))
        for pos, color, label in ((s.grid.start, START_BLUE, "S"), (s.grid.end, END_RED, "E")):
            pygame.draw.circle(self.screen, color, self._center(pos), max(4, cs // 2 - 2))
            txt = self.font.render(label, True, TEXT)
            self.screen.blit(txt, txt.get_rect(center=self._center(pos)))

    def _draw_sidebar(self):
        y = MARGIN
        for text, color in [(t, TEXT) for t in self.session.status_lines()] + [("", TEXT)] + [(t, TEXT_DIM) for t in HELP]:
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (self.sidebar_x, y))
            y += self.font.get_linesize() + 4


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        opts = resolve_options(sys.argv[1:] if argv is None else argv)
        grid = load_grid(opts)
    except (OSError, ValueError) as ex:
        logger.error("Failed to start viewer: %s", ex)
        sys.exit(1)
    Viewer(Session(grid, opts)).run()


if __name__ == "__main__":
    main()
