"""Grid viewer: print a text grid with optional highlighted characters.

Usage
-----
    grid_view maze.txt --red "#" --green "SE"
    grid_view heights.txt --bytes --plain
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from densegrid.src.core.errors import EmptyGridError, GridShapeError
from densegrid.src.core.grid import Grid
from densegrid.src.utils import config_loader
from densegrid.src.utils.logger import get_logger

logger = logging.getLogger("densegrid.grid_view")


def _load_grid(path: Path, as_bytes: bool) -> Grid:
    if as_bytes:
        return Grid.from_str_bytes(path.read_bytes())
    return Grid.from_str_chars(path.read_text(encoding="utf-8"))


def _render(grid: Grid, red: str, green: str, plain: bool) -> str:
    if plain:
        return str(grid)
    pretty = grid.pretty()
    if red:
        pretty.with_red(lambda pos: grid[pos] in red)
    if green:
        pretty.with_green(lambda pos: grid[pos] in green)
    return pretty.render()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser("grid_view", description="Print a text grid")
    p.add_argument("path", type=Path)
    p.add_argument("--bytes", action="store_true", help="parse cells as byte values")
    p.add_argument("--red", default="", help="characters to highlight in red")
    p.add_argument("--green", default="", help="characters to highlight in green")
    p.add_argument("--plain", action="store_true")
    p.add_argument("--no-color", action="store_true")
    p.add_argument("--trace", action="store_true")
    args = p.parse_args(argv)

    if args.trace:
        get_logger("densegrid", level=logging.DEBUG)
    if args.no_color:
        config_loader.set_color_enabled(False)
    if args.bytes and (args.red or args.green):
        p.error("--red/--green only apply to character grids")

    try:
        grid = _load_grid(args.path, args.bytes)
    except (OSError, UnicodeDecodeError, GridShapeError, EmptyGridError) as exc:
        logger.debug("Failed to load %s", args.path, exc_info=True)
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1

    print(f"{grid.width}x{grid.height}")
    print(_render(grid, args.red, args.green, args.plain), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
