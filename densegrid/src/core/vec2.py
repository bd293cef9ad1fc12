"""Integer 2D point used for grid coordinates."""

from __future__ import annotations

from typing import NamedTuple, Tuple, Union


class Vec2(NamedTuple):
    """Column/row position. ``y`` grows downward."""

    x: int
    y: int

    def __add__(self, other: Union["Vec2", Tuple[int, int]]) -> "Vec2":  # type: ignore[override]
        ox, oy = other
        return Vec2(self.x + ox, self.y + oy)

    def __sub__(self, other: Union["Vec2", Tuple[int, int]]) -> "Vec2":
        ox, oy = other
        return Vec2(self.x - ox, self.y - oy)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def manhattan(self) -> int:
        """Return ``|x| + |y|``."""
        return abs(self.x) + abs(self.y)
