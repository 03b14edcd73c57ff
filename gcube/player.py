"""The player's camera: heading, rotation, movement and doors."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from .config import MOVSPEED
from .grid import find_player

_BLOCKING = ("1", "D")

_HEADINGS = {
    "N": ((0.0, -1.0), (0.66, -0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
}


def _cell(rows: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return None


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    def set_heading(self, heading: str) -> None:
        """Face north, south, west or east ('N', 'S', 'W', 'E')."""
        try:
            direction, plane = _HEADINGS[heading]
        except KeyError:
            raise ValueError(f"unknown heading {heading!r}") from None
        self.dir_x, self.dir_y = direction
        self.plane_x, self.plane_y = plane

    def rotate(self, direction: float, speed: float) -> None:
        """Turn by ``speed * direction`` radians."""
        angle = speed * direction
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def _step(self, rows: Sequence[str], dx: float, dy: float) -> bool:
        nx, ny = self.x + dx, self.y + dy
        cell = _cell(rows, int(nx), int(ny))
        if cell is None or cell in _BLOCKING:
            return False
        self.x, self.y = nx, ny
        return True

    def move_forward(self, rows: Sequence[str], direction: float) -> bool:
        """Walk along the view direction (negative to back up); False if blocked."""
        return self._step(
            rows, self.dir_x * MOVSPEED * direction, self.dir_y * MOVSPEED * direction
        )

    def strafe(self, rows: Sequence[str], direction: float) -> bool:
        """Step sideways along the camera plane; False if blocked."""
        return self._step(
            rows,
            self.plane_x * MOVSPEED * direction,
            self.plane_y * MOVSPEED * direction,
        )

    def toggle_door(self, rows: MutableSequence[str]) -> tuple[int, int] | None:
        """Open an adjacent closed door, or else close an adjacent open one.

        Closed doors are 'D', open ones 'd'. ``rows`` is updated in place and
        the cell that changed is returned, or None if no door is adjacent.
        """
        x, y = int(self.x), int(self.y)
        neighbours = ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y))
        for old, new in (("D", "d"), ("d", "D")):
            for nx, ny in neighbours:
                if _cell(rows, nx, ny) == old:
                    row = rows[ny]
                    rows[ny] = row[:nx] + new + row[nx + 1:]
                    return nx, ny
        return None


def spawn_player(rows: Sequence[str]) -> Player | None:
    """Place the player at the centre of its start cell, or None if there is none."""
    start = find_player(rows)
    if start is None:
        return None
    x, y = start
    player = Player(x + 0.5, y + 0.5)
    player.set_heading(rows[y][x])
    return player