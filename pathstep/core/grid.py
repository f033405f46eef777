# pathstep/core/grid.py
#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from pathstep.core.types import OutOfBoundsError, Pos, Tile
from pathstep.core.vec2d import Vec2d


@dataclass
class Grid:
    rows: int
    columns: int
    start: Pos
    end: Pos
    tiles: Optional[Vec2d] = None        # Vec2d[Tile], all OPEN when omitted

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.rows}x{self.columns}")
        self.start = Pos(*self.start)
        self.end = Pos(*self.end)
        if self.tiles is None:
            self.tiles = Vec2d(self.rows, self.columns, Tile.OPEN)
        elif (self.tiles.height, self.tiles.width) != (self.rows, self.columns):
            raise ValueError("tile map size does not match grid size")
        for label, pos in (("start", self.start), ("end", self.end)):
            if not self.in_bounds(pos):
                raise ValueError(f"{label} {tuple(pos)} out of bounds")
            self.tiles.set(pos, Tile.OPEN)

    # --- geometry ---
    @property
    def width(self) -> int:
        return self.columns

    @property
    def height(self) -> int:
        return self.rows

    def in_bounds(self, pos: Pos) -> bool:
        return self.tiles.in_bounds(pos)

    # --- tiles ---
    def tile(self, pos: Pos) -> Tile:
        t = self.tiles.get(pos)
        if t is None:
            raise OutOfBoundsError(f"{tuple(pos)} outside {self.columns}x{self.rows} grid")
        return t

    def tile_or_none(self, pos: Pos) -> Optional[Tile]:
        return self.tiles.get(pos)

    def is_open(self, pos: Pos) -> bool:
        return self.tiles.get(pos) == Tile.OPEN

    def set_tile(self, pos: Pos, tile: Tile) -> None:
        # start / end stay open
        if pos == self.start or pos == self.end:
            return
        self.tiles.set(pos, Tile(tile))

    def toggle_tile(self, pos: Pos) -> None:
        t = self.tiles.get(pos)
        if t is None:
            return
        self.set_tile(pos, Tile.OPEN if t == Tile.WALL else Tile.WALL)

    def set_start(self, pos: Pos) -> None:
        pos = self._checked(pos)
        self.start = pos
        self.tiles.set(pos, Tile.OPEN)

    def set_end(self, pos: Pos) -> None:
        pos = self._checked(pos)
        self.end = pos
        self.tiles.set(pos, Tile.OPEN)

    def _checked(self, pos) -> Pos:
        pos = Pos(*pos)
        if not self.in_bounds(pos):
            raise OutOfBoundsError(f"{tuple(pos)} outside {self.columns}x{self.rows} grid")
        return pos

    def walls(self) -> Iterator[Pos]:
        for pos in self.tiles.positions():
            if self.tiles.get(pos) == Tile.WALL:
                yield pos

    def open_count(self) -> int:
        return sum(1 for pos in self.tiles.positions() if self.tiles.get(pos) == Tile.OPEN)

    def clear_walls(self) -> None:
        for pos in list(self.walls()):
            self.tiles.set(pos, Tile.OPEN)

    def clone(self) -> "Grid":
        return Grid(self.rows, self.columns, self.start, self.end, self.tiles.copy())


@dataclass
class GridOptions:
    """Parameters for a blank grid, as edited from the options panel."""
    rows: int = 10
    columns: int = 10
    start_pos: Tuple[int, int] = (0, 0)
    end_pos: Tuple[int, int] = (9, 9)

    def into_grid(self) -> Grid:
        return Grid(self.rows, self.columns, Pos(*self.start_pos), Pos(*self.end_pos))
