"""Error types raised by :class:`~densegrid.src.core.grid.Grid`."""

from __future__ import annotations

__all__ = [
    "GridShapeError",
    "EmptyGridError",
    "GridIndexError",
    "CoordinateConversionError",
]


class GridShapeError(ValueError):
    """Raised when a row's length disagrees with the established grid width."""


class EmptyGridError(ValueError):
    """Raised when a constructor is given no rows or zero-width rows."""


class GridIndexError(IndexError):
    """Raised when a coordinate lies outside the grid."""


class CoordinateConversionError(ValueError):
    """Raised when an index key cannot be converted to a non-negative ``(x, y)`` pair."""
