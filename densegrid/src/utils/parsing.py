"""Integer parsing helpers for puzzle-style text input."""

from __future__ import annotations

from typing import List


def parse_int(s: str) -> int:
    """Parse ``s`` as a base-10 integer after stripping surrounding whitespace."""
    try:
        return int(s.strip(), 10)
    except ValueError:
        raise ValueError(f"failed to parse as int: {s!r}") from None


def parse_ints(s: str) -> List[int]:
    """Parse every space-separated integer in ``s``.

    Runs of spaces are tolerated; empty pieces are skipped.
    """
    return [parse_int(piece) for piece in s.strip().split(" ") if piece]


__all__ = ["parse_int", "parse_ints"]
