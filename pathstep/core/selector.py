# pathstep/core/selector.py
#!/usr/bin/env python3
"""Maps an algorithm choice coming from the UI / CLI to a ready engine."""

import logging
from enum import Enum
from typing import Dict, Type

from pathstep.core.best_first import BestFirst
from pathstep.core.grid import Grid
from pathstep.core.strategies.astar import AStarPrioritizer
from pathstep.core.strategies.breadth_first import BreadthFirstPrioritizer
from pathstep.core.strategies.common import Prioritizer
from pathstep.core.strategies.depth_first import DepthFirstPrioritizer
from pathstep.core.strategies.dijkstra import DijkstraPrioritizer

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"
    DIJKSTRA = "dijkstra"
    A_STAR = "a_star"


PRIORITIZERS: Dict[Algorithm, Type[Prioritizer]] = {
    Algorithm.DEPTH_FIRST: DepthFirstPrioritizer,
    Algorithm.BREADTH_FIRST: BreadthFirstPrioritizer,
    Algorithm.DIJKSTRA: DijkstraPrioritizer,
    Algorithm.A_STAR: AStarPrioritizer,
}

LABELS: Dict[Algorithm, str] = {algo: cls.name for algo, cls in PRIORITIZERS.items()}


def algorithm_from_str(text: str) -> Algorithm:
    """Accepts the tag ("a_star") or the display label ("A*"), any case."""
    key = text.strip().lower()
    for algo in Algorithm:
        if key in (algo.value, LABELS[algo].lower(), LABELS[algo].lower().replace("-", "_")):
            return algo
    raise ValueError(f"unknown algorithm {text!r}; choose one of {[a.value for a in Algorithm]}")


def make_search(algorithm, grid: Grid) -> BestFirst:
    if not isinstance(algorithm, Algorithm):
        algorithm = algorithm_from_str(str(algorithm))
    logger.debug("building %s search on %dx%d grid", algorithm.value, grid.columns, grid.rows)
    return BestFirst(grid, PRIORITIZERS[algorithm])
