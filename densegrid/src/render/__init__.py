"""Terminal rendering for grids."""

from .ansi import style
from .pretty import PrettyGrid

__all__ = ["PrettyGrid", "style"]
