"""Core grid container and coordinate types."""

from .directions import DIRS4, DIRS8
from .errors import (
    CoordinateConversionError,
    EmptyGridError,
    GridIndexError,
    GridShapeError,
)
from .grid import Grid
from .vec2 import Vec2

__all__ = [
    "Grid",
    "Vec2",
    "DIRS4",
    "DIRS8",
    "GridShapeError",
    "EmptyGridError",
    "GridIndexError",
    "CoordinateConversionError",
]
