"""Colorized, column-aligned rendering of a :class:`Grid`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, List, Optional, TypeVar

from densegrid.src.core.vec2 import Vec2
from densegrid.src.utils import config_loader

from .ansi import style

if TYPE_CHECKING:
    from densegrid.src.core.grid import Grid

T = TypeVar("T")

Classifier = Callable[[Vec2], bool]


class PrettyGrid(Generic[T]):
    """Renderer that highlights cells chosen by optional classifiers.

    ``with_red`` and ``with_green`` attach a predicate over cell positions and
    return the renderer so calls can be chained::

        print(grid.pretty().with_red(lambda p: p in path).with_green(goals.__contains__))

    Red wins over green. Unclassified cells use the neutral gray tone.
    """

    def __init__(self, grid: "Grid[T]") -> None:
        self.grid = grid
        self.red: Optional[Classifier] = None
        self.green: Optional[Classifier] = None

    def with_red(self, fn: Classifier) -> "PrettyGrid[T]":
        self.red = fn
        return self

    def with_green(self, fn: Classifier) -> "PrettyGrid[T]":
        self.green = fn
        return self

    def _paint(self, pos: Vec2, text: str) -> str:
        if self.red is not None and self.red(pos):
            return style(text, config_loader.RED_COLOR, bold=True)
        if self.green is not None and self.green(pos):
            return style(text, config_loader.GREEN_COLOR, bold=True)
        return style(text, config_loader.NEUTRAL_RGB)

    def render(self) -> str:
        """Return the annotated rendering, one line per row."""
        cells = [str(v) for v in self.grid]
        max_len = max((len(c) for c in cells), default=0)
        width = self.grid.width
        out: List[str] = []
        for i, text in enumerate(cells):
            pos = Vec2(i % width, i // width)
            # single-character grids stay unpadded
            if max_len > 1:
                out.append(" " * (max_len - len(text) + 1))
            out.append(self._paint(pos, text))
            if pos.x == width - 1:
                out.append("\n")
        return "".join(out)

    def __str__(self) -> str:
        return self.render()
