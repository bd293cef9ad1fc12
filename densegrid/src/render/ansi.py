"""ANSI SGR styling for terminal output."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from densegrid.src.utils import config_loader

ColorSpec = Union[str, Tuple[int, int, int]]

RESET = "\033[0m"
BOLD = "1"

NAMED_COLORS: Dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "gray": 90,
}


def _fg_code(fg: ColorSpec) -> str:
    if isinstance(fg, str):
        try:
            return str(NAMED_COLORS[fg.lower()])
        except KeyError:
            raise ValueError(f"Unknown color name: {fg!r}") from None
    if len(fg) != 3:
        raise ValueError(f"RGB color must have three components, got {fg!r}")
    for c in fg:
        if not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"RGB component out of range 0-255: {c!r}")
    r, g, b = fg
    return f"38;2;{r};{g};{b}"


def sgr(fg: Optional[ColorSpec] = None, bold: bool = False) -> str:
    """Return the escape sequence selecting ``fg`` and ``bold``, or ``""``."""
    codes: List[str] = []
    if bold:
        codes.append(BOLD)
    if fg is not None:
        codes.append(_fg_code(fg))
    if not codes:
        return ""
    return f"\033[{';'.join(codes)}m"


def style(text: str, fg: Optional[ColorSpec] = None, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI escapes for ``fg`` and ``bold``.

    ``fg`` is a name from :data:`NAMED_COLORS` or an ``(r, g, b)`` triple.
    Returns ``text`` unchanged when color output is disabled.
    """
    prefix = sgr(fg, bold)
    if not config_loader.COLOR_ENABLED or not prefix:
        return text
    return f"{prefix}{text}{RESET}"


__all__ = ["NAMED_COLORS", "RESET", "sgr", "style"]
