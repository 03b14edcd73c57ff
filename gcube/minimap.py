"""The minimap drawn in the top left corner of the frame."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .config import MINIMAP_S, PLAYER_R
from .player import Player
from .render import Frame

CELL = MINIMAP_S
ORIGIN = 50
# Cells shown behind the player on each axis.
VIEW_BEHIND = 4
PLAYER_POSITION = (60, 50)

BORDER_COLOR = 0x00000000
OUTSIDE_COLOR = 0x00000000
WALL_FILL = 0x000089AD
DOOR_FILL = 0x001CE33D
OPEN_FILL = 0x00FFCF56
PLAYER_COLOR = 0x00C22620


def draw_square(frame: Frame, size: int, x: int, y: int, color: int) -> None:
    """Fill a ``size`` square whose top left corner is (x, y), clipped to the frame."""
    if size <= 0:
        return
    x0, x1 = max(x, 0), min(x + size, frame.width)
    y0, y1 = max(y, 0), min(y + size, frame.height)
    if x0 < x1 and y0 < y1:
        frame.pixels[y0:y1, x0:x1] = color & 0xFFFFFFFF


def draw_bordered_square(frame: Frame, size: int, x: int, y: int, fill: int) -> None:
    """Draw a square with a one pixel black border around a ``fill`` interior."""
    draw_square(frame, size, x, y, BORDER_COLOR)
    draw_square(frame, size - 2, x + 1, y + 1, fill)


def _draw_cell(frame: Frame, rows: Sequence[str], x: int, y: int, left: int, top: int) -> None:
    if not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
        draw_square(frame, CELL, left, top, OUTSIDE_COLOR)
        return
    cell = rows[y][x]
    if cell == "1":
        draw_bordered_square(frame, CELL, left, top, WALL_FILL)
    elif cell == "D":
        draw_bordered_square(frame, CELL, left, top, DOOR_FILL)
    else:
        draw_square(frame, CELL, left, top, OPEN_FILL)


def render_minimap(frame: Frame, rows: Sequence[str], player: Player) -> None:
    """Draw the map cells around the player, then the player's marker."""
    start_x = math.floor(player.x)
    start_y = math.floor(player.y)
    for x in range(start_x + PLAYER_R, start_x - VIEW_BEHIND - 1, -1):
        left = ORIGIN + (x - start_x) * CELL + CELL
        for y in range(start_y + PLAYER_R, start_y - VIEW_BEHIND - 1, -1):
            top = ORIGIN - (start_y - y) * CELL
            _draw_cell(frame, rows, x, y, left, top)
    draw_square(frame, CELL, *PLAYER_POSITION, PLAYER_COLOR)