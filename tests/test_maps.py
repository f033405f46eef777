import json
from pathlib import Path

import pytest

from pathstep.core.maps import MapFormatError, dump_map, grid_from_dict, load_map
from pathstep.core.selector import Algorithm, make_search
from pathstep.core.types import FOUND, Pos, Tile

MAP_DIR = Path(__file__).resolve().parents[1] / "pathstep" / "maps"


def test_bundled_maps_load_and_solve():
    files = sorted(MAP_DIR.glob("*.json"))
    assert len(files) == 3
    for f in files:
        grid = load_map(f)
        bfs = make_search(Algorithm.BREADTH_FIRST, grid).run()
        dij = make_search(Algorithm.DIJKSTRA, grid).run()
        assert bfs.status == dij.status == FOUND
        assert len(bfs.path) == len(dij.path)


def test_cells_become_tiles():
    grid = grid_from_dict({
        "width": 3, "height": 2,
        "start": [0, 0], "goal": [2, 1],
        "cells": [[0, 1, 0],
                  [0, 1, 0]],
    })
    assert grid.start == Pos(0, 0) and grid.end == Pos(2, 1)
    assert list(grid.walls()) == [Pos(1, 0), Pos(1, 1)]


def test_dump_then_load(tmp_path):
    grid = load_map(MAP_DIR / "02_wall_gap.json")
    out = tmp_path / "copy.json"
    dump_map(grid, out)
    assert load_map(out) == grid
    assert json.loads(out.read_text())["goal"] == [10, 8]


@pytest.mark.parametrize("data", [
    {"width": 2, "height": 1, "start": [0, 0], "goal": [1, 0], "cells": [[0]]},
    {"width": 2, "height": 1, "start": [0, 0], "goal": [5, 0], "cells": [[0, 0]]},
    {"width": 2, "height": 1, "start": [0, 0], "goal": [1, 0], "cells": [[0, 7]]},
    {"width": 2, "height": 1, "start": [0, 0], "cells": [[0, 0]]},
])
def test_malformed_maps(data):
    with pytest.raises(MapFormatError):
        grid_from_dict(data)


def test_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(MapFormatError):
        load_map(bad)


def test_walls_under_markers_are_ignored():
    grid = grid_from_dict({
        "width": 2, "height": 1,
        "start": [0, 0], "goal": [1, 0],
        "cells": [[1, 1]],
    })
    assert grid.tile(Pos(0, 0)) == Tile.OPEN
    assert grid.tile(Pos(1, 0)) == Tile.OPEN
