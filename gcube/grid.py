"""Reading, normalising and validating the grid of a map."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .config import HEADINGS, MAP_CHARSET
from .textutils import is_in, repeat_char, replace_all, split

TAB_WIDTH = 4


class MapError(ValueError):
    """Raised when a map holds bad characters or is not closed by walls."""


def pad_rows(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces on the right to the width of the widest."""
    width = max((len(row) for row in rows), default=0)
    return [row + repeat_char(" ", width - len(row)) for row in rows]


def replace_in_rows(rows: Iterable[str], old: str, new: str) -> list[str]:
    """Return the rows with every occurrence of ``old`` replaced by ``new``."""
    return [replace_all(row, old, new) for row in rows]


def read_map(lines: Iterable[str]) -> list[str]:
    """Build the map grid from the remaining lines of a scene file.

    Empty lines are dropped, tabs become four spaces and all rows are padded
    to the same width.
    """
    rows = split("".join(lines), "\n")
    rows = replace_in_rows(rows, "\t", " " * TAB_WIDTH)
    return pad_rows(rows)


def find_player(rows: Sequence[str]) -> tuple[int, int] | None:
    """Return the (x, y) cell of the first player start, or None."""
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if is_in(HEADINGS, cell):
                return x, y
    return None


def _is_edge(rows: Sequence[str], x: int, y: int) -> bool:
    return x == 0 or y == 0 or x + 1 >= len(rows[y]) or y + 1 >= len(rows)


def validate_map(rows: Sequence[str]) -> frozenset[tuple[int, int]]:
    """Check that the map is well formed and closed around the player.

    Every character must be allowed and no open cell reachable from the
    player's start may lie on the border of the map. Returns the set of open
    cells reachable from the start; raises MapError otherwise.
    """
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if not is_in(MAP_CHARSET, cell):
                raise MapError(f"invalid character {cell!r} at ({x}, {y})")
    start = find_player(rows)
    if start is None:
        raise MapError("map has no player start")

    reached: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached:
            continue
        if not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            raise MapError(f"map is not closed near ({x}, {y})")
        if rows[y][x] == "1":
            continue
        if _is_edge(rows, x, y):
            raise MapError(f"map is not closed at ({x}, {y})")
        reached.add((x, y))
        pending.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return frozenset(reached)


def print_rows(
    rows: Sequence[str] | None, delimiter: str, stream: TextIO | None = None
) -> None:
    """Write each row on its own line, wrapped in ``delimiter``."""
    out = sys.stdout if stream is None else stream
    if rows is None:
        out.write("(null)\n")
        return
    for row in rows:
        out.write(f"{delimiter}{row}{delimiter}\n")