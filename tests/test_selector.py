import pytest

from pathstep.core.best_first import BestFirst
from pathstep.core.grid import Grid
from pathstep.core.selector import LABELS, Algorithm, algorithm_from_str, make_search
from pathstep.core.strategies.astar import AStarPrioritizer
from pathstep.core.strategies.depth_first import DepthFirstPrioritizer
from pathstep.core.types import Pos


def test_parse_tags_and_labels():
    assert algorithm_from_str("a_star") is Algorithm.A_STAR
    assert algorithm_from_str("A*") is Algorithm.A_STAR
    assert algorithm_from_str(" Dijkstra ") is Algorithm.DIJKSTRA
    assert algorithm_from_str("Breadth-first") is Algorithm.BREADTH_FIRST
    assert algorithm_from_str("DEPTH_FIRST") is Algorithm.DEPTH_FIRST


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        algorithm_from_str("greedy")


def test_labels_cover_every_algorithm():
    assert set(LABELS) == set(Algorithm)


def test_make_search_builds_the_right_engine():
    grid = Grid(2, 2, Pos(0, 0), Pos(1, 1))
    search = make_search(Algorithm.A_STAR, grid)
    assert isinstance(search, BestFirst)
    assert isinstance(search.prioritizer, AStarPrioritizer)
    assert search.name == "A*"
    assert search.grid == grid and search.grid is not grid

    assert isinstance(make_search("depth_first", grid).prioritizer, DepthFirstPrioritizer)
