from pathstep.core.distance import exact_distance_from_start, heuristic_distance
from pathstep.core.types import Pos
from pathstep.core.vec2d import Vec2d


def _chain(n):
    """1 x n row, each cell pointing at its left neighbour, start at (0, 0)."""
    bt = Vec2d(1, n, None)
    bt.set(Pos(0, 0), Pos(0, 0))
    for x in range(1, n):
        bt.set(Pos(x, 0), Pos(x - 1, 0))
    return bt


def test_walks_back_to_start():
    bt = _chain(4)
    cache = Vec2d(1, 4, None)
    assert exact_distance_from_start(cache, Pos(0, 0), bt, Pos(3, 0)) == 3.0
    assert cache.get(Pos(3, 0)) == 3.0
    # only the queried cell is stored
    assert cache.get(Pos(2, 0)) is None


def test_start_is_zero():
    cache = Vec2d(1, 2, None)
    assert exact_distance_from_start(cache, Pos(0, 0), _chain(2), Pos(0, 0)) == 0.0


def test_uses_cached_ancestor():
    bt = _chain(5)
    cache = Vec2d(1, 5, None)
    assert exact_distance_from_start(cache, Pos(0, 0), bt, Pos(1, 0)) == 1.0
    assert exact_distance_from_start(cache, Pos(0, 0), bt, Pos(4, 0)) == 4.0

    # a planted ancestor value proves the walk stops there
    cache2 = Vec2d(1, 5, None)
    cache2.set(Pos(2, 0), 10.0)
    assert exact_distance_from_start(cache2, Pos(0, 0), bt, Pos(4, 0)) == 12.0


def test_broken_chain_is_none():
    bt = _chain(4)
    bt.set(Pos(1, 0), None)
    cache = Vec2d(1, 4, None)
    assert exact_distance_from_start(cache, Pos(0, 0), bt, Pos(3, 0)) is None
    assert exact_distance_from_start(cache, Pos(0, 0), bt, Pos(1, 0)) is None
    assert all(cache.get(p) is None for p in cache.positions())


def test_idempotent():
    bt = _chain(6)
    cache = Vec2d(1, 6, None)
    first = [exact_distance_from_start(cache, Pos(0, 0), bt, Pos(x, 0)) for x in range(6)]
    second = [exact_distance_from_start(cache, Pos(0, 0), bt, Pos(x, 0)) for x in range(6)]
    assert first == second == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]


def test_heuristic_is_manhattan():
    assert heuristic_distance(Pos(0, 0), Pos(2, 3)) == 5.0
    assert heuristic_distance(Pos(4, 1), Pos(1, 5)) == 7.0
    assert heuristic_distance(Pos(2, 2), Pos(2, 2)) == 0.0
