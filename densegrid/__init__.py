"""Dense row-major 2D grids with text parsing and colorized rendering."""

from densegrid.src.core import (
    DIRS4,
    DIRS8,
    CoordinateConversionError,
    EmptyGridError,
    Grid,
    GridIndexError,
    GridShapeError,
    Vec2,
)
from densegrid.src.render import PrettyGrid, style
from densegrid.src.utils import parse_int, parse_ints

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "PrettyGrid",
    "Vec2",
    "DIRS4",
    "DIRS8",
    "style",
    "parse_int",
    "parse_ints",
    "GridShapeError",
    "EmptyGridError",
    "GridIndexError",
    "CoordinateConversionError",
]
