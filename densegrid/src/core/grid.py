"""Dense row-major 2D grid container."""

from __future__ import annotations

import copy
import logging
import operator
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from .directions import DIRS4, DIRS8, Offset
from .errors import (
    CoordinateConversionError,
    EmptyGridError,
    GridIndexError,
    GridShapeError,
)
from .vec2 import Vec2

if TYPE_CHECKING:
    from densegrid.src.render.pretty import PrettyGrid

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Key = Union[Vec2, Tuple[Any, Any], Sequence[Any]]


def _to_index(key: Key) -> Tuple[int, int]:
    """Convert ``key`` into a non-negative ``(x, y)`` pair."""
    try:
        raw_x, raw_y = key
    except (TypeError, ValueError):
        raise CoordinateConversionError(
            f"grid index must be an (x, y) pair, got {key!r}"
        ) from None
    try:
        x = operator.index(raw_x)
        y = operator.index(raw_y)
    except TypeError:
        raise CoordinateConversionError(
            f"conversion to index failed while indexing grid: {key!r}"
        ) from None
    if x < 0 or y < 0:
        raise CoordinateConversionError(
            f"conversion to index failed while indexing grid: {key!r} has a negative component"
        )
    return x, y


def _lines(text: str) -> Iterator[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line and a final empty piece."""
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


class Grid(Generic[T]):
    """Fixed-size 2D grid stored as one flat row-major list.

    The cell at column ``x`` and row ``y`` lives at ``y * width + x``. Cells are
    addressed as ``grid[x, y]`` or ``grid[Vec2(x, y)]``.
    """

    __slots__ = ("_buf", "_width", "_height")

    def __init__(self, buf: List[T], width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise EmptyGridError(f"grid dimensions must be positive, got {width}x{height}")
        if len(buf) != width * height:
            raise GridShapeError(
                f"buffer holds {len(buf)} cells, expected {width}x{height}={width * height}"
            )
        self._buf = buf
        self._width = width
        self._height = height

    # Construction --------------------------------------------------------

    @classmethod
    def from_nested(cls, rows: Iterable[Iterable[T]]) -> "Grid[T]":
        """Build a grid from a sequence of rows; the first row fixes the width."""
        return cls._from_rows([list(row) for row in rows])

    @classmethod
    def from_nested_slice(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Like :meth:`from_nested` but shallow-copies every element."""
        return cls._from_rows([[copy.copy(v) for v in row] for row in rows])

    @classmethod
    def _from_rows(cls, rows: List[List[T]]) -> "Grid[T]":
        if not rows or not rows[0]:
            logger.debug("Rejected nested input without cells")
            raise EmptyGridError("got empty grid")
        height = len(rows)
        width = len(rows[0])
        buf = [v for row in rows for v in row]
        if len(buf) != width * height:
            logger.debug("Rejected nested input with %d cells for %dx%d", len(buf), width, height)
            raise GridShapeError("mismatched buffer row lengths")
        logger.debug("Built %dx%d grid from nested rows", width, height)
        return cls(buf, width, height)

    @classmethod
    def from_str_chars(cls, text: str) -> "Grid[str]":
        """Parse ``text`` into a grid of single characters, one row per line."""
        buf: List[str] = []
        width: Optional[int] = None
        height = 0
        for line in _lines(text):
            height += 1
            if width is None:
                width = len(line)
            elif len(line) != width:
                logger.debug("Line %d has width %d, expected %d", height, len(line), width)
                raise GridShapeError(
                    f"differing widths: line {height} has {len(line)} chars, expected {width}: {line!r}"
                )
            buf.extend(line)
        if not width:
            logger.debug("Rejected character text without cells")
            raise EmptyGridError("got empty grid")
        logger.debug("Built %dx%d grid from character text", width, height)
        return cls(buf, width, height)  # type: ignore[arg-type]

    @classmethod
    def from_separated(cls, items: Iterable[T], sep: T) -> "Grid[T]":
        """Split a flat sequence into rows at every ``sep``.

        The first row's width is authoritative. A single trailing ``sep``
        ends the last row rather than starting an empty one.
        """
        buf: List[T] = []
        height = 1
        width = 0
        row_width: Optional[int] = None
        pending_sep = False
        for item in items:
            if pending_sep:
                height += 1
                width = 0
                pending_sep = False
            if item == sep:
                if row_width is None:
                    row_width = width
                elif width != row_width:
                    logger.debug("Row %d has width %d, expected %d", height, width, row_width)
                    raise GridShapeError(f"differing width in line {height}")
                pending_sep = True
                continue
            width += 1
            buf.append(item)

        if row_width is None:
            row_width = width
        elif not pending_sep and width != row_width:
            logger.debug("Row %d has width %d, expected %d", height, width, row_width)
            raise GridShapeError(f"differing width in line {height}")
        if not row_width:
            logger.debug("Rejected separated input without cells")
            raise EmptyGridError("got empty grid")
        logger.debug("Built %dx%d grid from separated sequence", row_width, height)
        return cls(buf, row_width, height)

    @classmethod
    def from_str_bytes(cls, text: Union[str, bytes]) -> "Grid[int]":
        """Parse ``text`` into a grid of byte values split on ``\\n``."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        return cls.from_separated(data, ord("\n"))  # type: ignore[return-value]

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Grid[T]":
        """Return a ``width`` x ``height`` grid with every cell set to ``value``."""
        return cls([value] * (width * height), width, height)

    @classmethod
    def from_array(cls, array: Any) -> "Grid[Any]":
        """Build a grid from a 2D ``numpy`` array (or anything ``np.asarray`` accepts)."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise GridShapeError(f"array must be 2-dimensional, got {arr.ndim} dimensions")
        height, width = arr.shape
        if width == 0 or height == 0:
            raise EmptyGridError("got empty grid")
        return cls(arr.reshape(-1).tolist(), width, height)

    # Dimensions ----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self._height, self._width

    def __len__(self) -> int:
        return len(self._buf)

    # Indexing ------------------------------------------------------------

    def _offset(self, x: int, y: int) -> int:
        if x >= self._width:
            raise GridIndexError(f"x index out of range: {x} not in [0, {self._width})")
        if y >= self._height:
            raise GridIndexError(f"y index out of range: {y} not in [0, {self._height})")
        return y * self._width + x

    def __getitem__(self, key: Key) -> T:
        return self._buf[self._offset(*_to_index(key))]

    def __setitem__(self, key: Key, value: T) -> None:
        self._buf[self._offset(*_to_index(key))] = value

    def in_bounds(self, pos: Key) -> bool:
        """Return ``True`` if ``pos`` names a cell of this grid. Never raises."""
        try:
            x, y = (operator.index(c) for c in pos)
            return 0 <= x < self._width and 0 <= y < self._height
        except (TypeError, ValueError):
            return False

    def get(self, pos: Key, default: Optional[T] = None) -> Optional[T]:
        """Return the cell at ``pos`` or ``default`` if it is out of bounds."""
        if not self.in_bounds(pos):
            return default
        return self[pos]

    # Iteration -----------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(self._buf)

    def rows(self) -> Iterator[Tuple[T, ...]]:
        """Yield each row, top to bottom, as a read-only tuple."""
        w = self._width
        for y in range(self._height):
            yield tuple(self._buf[y * w : (y + 1) * w])

    def positions(self) -> Iterator[Vec2]:
        """Yield every coordinate in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield Vec2(x, y)

    def items(self) -> Iterator[Tuple[Vec2, T]]:
        """Yield ``(position, value)`` for every cell in row-major order."""
        for pos, value in zip(self.positions(), self._buf):
            yield pos, value

    def _neighbors(self, pos: Key, offsets: Sequence[Offset]) -> Iterator[Vec2]:
        x, y = pos
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                yield Vec2(nx, ny)

    def neighbor_positions4(self, pos: Key) -> Iterator[Vec2]:
        """Yield the in-bounds orthogonal neighbors of ``pos``."""
        return self._neighbors(pos, DIRS4)

    def neighbor_positions8(self, pos: Key) -> Iterator[Vec2]:
        """Yield the in-bounds orthogonal and diagonal neighbors of ``pos``."""
        return self._neighbors(pos, DIRS8)

    # Transformation ------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "Grid[U]":
        """Return a new grid with ``fn`` applied to every cell in row-major order."""
        return Grid([fn(v) for v in self._buf], self._width, self._height)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Return the cells as a ``(height, width)`` numpy array."""
        return np.array(self._buf, dtype=dtype).reshape(self._height, self._width)

    # Rendering -----------------------------------------------------------

    def pretty(self) -> "PrettyGrid[T]":
        """Return a colorizing renderer over this grid."""
        from densegrid.src.render.pretty import PrettyGrid

        return PrettyGrid(self)

    def __str__(self) -> str:
        return "".join(" ".join(str(v) for v in row) + "\n" for row in self.rows())

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._buf == other._buf
        )

    __hash__ = None  # type: ignore[assignment]
