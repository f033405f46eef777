# pathstep/app/options.py
#!/usr/bin/env python3
"""
Viewer start-up options.

Environment first, then command line (which wins):
    PATHSTEP_ALGO  / --algo=   depth_first | breadth_first | dijkstra | a_star
    PATHSTEP_MAP   / --map=    key of MAP_FILES, a path to a .json map, or "blank"
    PATHSTEP_SPEED / --speed=  steps per second (1..60)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from pathstep.core.selector import Algorithm, algorithm_from_str

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_FILES: Dict[str, Path] = {
    "01_open_field": MAP_DIR / "01_open_field.json",
    "02_wall_gap":   MAP_DIR / "02_wall_gap.json",
    "03_maze":       MAP_DIR / "03_maze.json",
}

MIN_SPEED, MAX_SPEED = 1, 60


@dataclass
class ViewerOptions:
    algorithm: Algorithm = Algorithm.BREADTH_FIRST
    map_key: str = "01_open_field"
    steps_per_sec: int = 20

    @property
    def map_path(self) -> Optional[Path]:
        if self.map_key == "blank":
            return None
        if self.map_key in MAP_FILES:
            return MAP_FILES[self.map_key]
        return Path(self.map_key)


def clamp_speed(v: int) -> int:
    return int(max(MIN_SPEED, min(MAX_SPEED, v)))


def resolve_options(argv: Optional[Sequence[str]] = None,
                    environ: Optional[Mapping[str, str]] = None) -> ViewerOptions:
    env = os.environ if environ is None else environ
    args = [] if argv is None else list(argv)

    raw = {
        "algo":  env.get("PATHSTEP_ALGO"),
        "map":   env.get("PATHSTEP_MAP"),
        "speed": env.get("PATHSTEP_SPEED"),
    }
    for arg in args:
        for key in raw:
            prefix = f"--{key}="
            if arg.startswith(prefix):
                raw[key] = arg[len(prefix):]

    opts = ViewerOptions()
    if raw["algo"]:
        opts.algorithm = algorithm_from_str(raw["algo"])
    if raw["map"]:
        opts.map_key = raw["map"]
    if raw["speed"]:
        try:
            opts.steps_per_sec = clamp_speed(int(raw["speed"]))
        except ValueError:
            raise ValueError(f"speed must be an integer, got {raw['speed']!r}") from None
    return opts
