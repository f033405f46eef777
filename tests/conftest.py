import pytest

from pathstep.core.grid import Grid
from pathstep.core.types import Pos, Tile


def grid_from_rows(rows):
    """'.' open, '#' wall, 'S' start, 'E' end."""
    start = end = None
    walls = []
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == "S":
                start = Pos(x, y)
            elif ch == "E":
                end = Pos(x, y)
            elif ch == "#":
                walls.append(Pos(x, y))
    grid = Grid(len(rows), len(rows[0]), start, end)
    for w in walls:
        grid.set_tile(w, Tile.WALL)
    return grid


@pytest.fixture
def make_grid():
    return grid_from_rows
