"""Neighbor offset tables as ``(dx, dy)`` pairs."""

from __future__ import annotations

from typing import Tuple

Offset = Tuple[int, int]

# up, left, right, down
DIRS4: Tuple[Offset, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))

# DIRS4 followed by up-left, up-right, down-left, down-right
DIRS8: Tuple[Offset, ...] = DIRS4 + ((-1, -1), (1, -1), (-1, 1), (1, 1))

__all__ = ["Offset", "DIRS4", "DIRS8"]
