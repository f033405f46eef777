# pathstep/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, NamedTuple, Optional, Dict, Any


class Pos(NamedTuple):
    """Signed (x, y) grid coordinate. x is the column, y the row."""
    x: int
    y: int

    def moved(self, direction: "Pos") -> "Pos":
        return Pos(self.x + direction.x, self.y + direction.y)


UP    = Pos(0, -1)
DOWN  = Pos(0, 1)
LEFT  = Pos(-1, 0)
RIGHT = Pos(1, 0)

# expansion order used by the engine
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Tile(IntEnum):
    OPEN = 0
    WALL = 1


class OutOfBoundsError(IndexError):
    """A position outside the grid was addressed through a strict accessor."""


class PrioritizerError(RuntimeError):
    """A prioritizer picked an index outside the frontier."""


# step statuses
IN_PROGRESS = "in_progress"
FOUND       = "found"
NOT_FOUND   = "not_found"


@dataclass
class StepResult:
    status: str                   # "in_progress" | "found" | "not_found"
    current: Optional[Pos] = None
    opened: List[Pos] = field(default_factory=list)
    path: Optional[List[Pos]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status != IN_PROGRESS
