# pathstep/core/vec2d.py
#!/usr/bin/env python3
"""
Dense width x height storage addressed by Pos.

Bad addresses never raise: reads give None and writes are dropped. Neighbour
generation relies on this to look one cell past the border without checks.
"""

import copy
from typing import Generic, Iterator, List, Optional, TypeVar

from pathstep.core.types import Pos

T = TypeVar("T")


class Vec2d(Generic[T]):
    def __init__(self, height: int, width: int, default: T):
        self.height = height
        self.width = width
        self._cells: List[T] = [copy.copy(default) for _ in range(height * width)]

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, pos: Pos) -> Optional[int]:
        if not self.in_bounds(pos):
            return None
        return pos[1] * self.width + pos[0]

    def get(self, pos: Pos) -> Optional[T]:
        i = self._index(pos)
        if i is None:
            return None
        return self._cells[i]

    def set(self, pos: Pos, value: T) -> None:
        i = self._index(pos)
        if i is not None:
            self._cells[i] = value

    def positions(self) -> Iterator[Pos]:
        """Row-major walk over every address."""
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def copy(self) -> "Vec2d[T]":
        out: Vec2d[T] = Vec2d.__new__(Vec2d)
        out.height = self.height
        out.width = self.width
        out._cells = list(self._cells)
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return (self.height, self.width, self._cells) == (other.height, other.width, other._cells)

    def __repr__(self) -> str:
        return f"Vec2d(height={self.height}, width={self.width})"
