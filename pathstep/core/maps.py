# pathstep/core/maps.py
#!/usr/bin/env python3
"""
JSON map files.

    {"width": 10, "height": 8,
     "start": [0, 0], "goal": [9, 7],
     "cells": [[0, 1, ...], ...]}      # cells[row][col], 0 open, 1 wall
"""

import json
import logging
from pathlib import Path
from typing import Union

from pathstep.core.grid import Grid
from pathstep.core.types import Pos, Tile

logger = logging.getLogger(__name__)


class MapFormatError(ValueError):
    pass


def grid_from_dict(data: dict) -> Grid:
    try:
        width  = int(data["width"])
        height = int(data["height"])
        start  = Pos(*data["start"])
        goal   = Pos(*data["goal"])
        cells  = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise MapFormatError(f"bad map header: {ex}") from ex

    if len(cells) != height or any(len(r) != width for r in cells):
        raise MapFormatError("cells size mismatch")
    try:
        grid = Grid(height, width, start, goal)
    except ValueError as ex:
        raise MapFormatError(str(ex)) from ex

    for y, row in enumerate(cells):
        for x, v in enumerate(row):
            if v not in (Tile.OPEN, Tile.WALL):
                raise MapFormatError(f"unknown cell value {v!r} at ({x}, {y})")
            grid.set_tile(Pos(x, y), Tile(v))
    return grid


def grid_to_dict(grid: Grid) -> dict:
    return {
        "width": grid.width,
        "height": grid.height,
        "start": list(grid.start),
        "goal": list(grid.end),
        "cells": [[int(grid.tile(Pos(x, y))) for x in range(grid.width)]
                  for y in range(grid.height)],
    }


def load_map(path: Union[str, Path]) -> Grid:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise MapFormatError(f"{path}: {ex}") from ex
    grid = grid_from_dict(data)
    logger.info("loaded map %s (%dx%d, %d walls)", path, grid.width, grid.height, sum(1 for _ in grid.walls()))
    return grid


def dump_map(grid: Grid, path: Union[str, Path]) -> None:
    with open(path, "w") as f:
        json.dump(grid_to_dict(grid), f)
