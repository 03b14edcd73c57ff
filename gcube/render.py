"""Ray casting of the map into a frame, with textured or flat walls."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from .config import TEXTURE_SIZE, WINDOW_H, WINDOW_W
from .player import Player
from .texture import Texture, create_rgb

# Delta distance used for an axis the ray never crosses.
NO_HIT_DELTA = 1e30

CROSSHAIR_COLOR = 0x00F0F8FF
CROSSHAIR_ARM = 20

FLAT_SKY = 0x000089AD
FLAT_GROUND = 0x00403125
FLAT_WALL = 0x0040C600
FLAT_WALL_SHADED = 0x0040C600 // 2

# Screen area kept free for the minimap by the flat renderer.
_MINIMAP_AREA = range(10, 210)
_RAY_STOPPERS = ("1", "D")


class Frame:
    """A picture of 0xRRGGBB pixels, indexed as ``pixels[y, x]``."""

    __slots__ = ("pixels",)

    def __init__(self, width: int = WINDOW_W, height: int = WINDOW_H) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return the colour at (x, y); raise IndexError outside the frame."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return int(self.pixels[y, x])


def _paint(frame: Frame, x: int, start: int, end: int, values) -> None:
    """Fill rows [start, end) of column x, clipped to the frame."""
    if not 0 <= x < frame.width or start >= end:
        return
    lo, hi = max(start, 0), min(end, frame.height)
    if lo >= hi:
        return
    if isinstance(values, np.ndarray):
        values = values[lo - start:hi - start]
    else:
        values = values & 0xFFFFFFFF
    frame.pixels[lo:hi, x] = values


@dataclass
class Ray:
    """Everything known about one screen column's ray."""

    column: int = 0
    map_x: int = 0
    map_y: int = 0
    incr_x: int = 0
    incr_y: int = 0
    side: int = 0
    draw_start: int = 0
    draw_end: int = 0
    wall_height: int = 0
    tex_x: int = 0
    dir_x: float = 0.0
    dir_y: float = 0.0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    wall_dist: float = 0.0
    wall_x: float = 0.0
    tex_step: float = 0.0
    tex_pos: float = 0.0


def _cell(rows: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return None


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def _setup_steps(ray: Ray, player: Player) -> None:
    if ray.dir_x < 0:
        ray.incr_x = -1
        ray.side_dist_x = (player.x - ray.map_x) * ray.delta_dist_x
    else:
        ray.incr_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.x) * ray.delta_dist_x
    if ray.dir_y < 0:
        ray.incr_y = -1
        ray.side_dist_y = (player.y - ray.map_y) * ray.delta_dist_y
    else:
        ray.incr_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.y) * ray.delta_dist_y


def _dda(rows: Sequence[str], ray: Ray) -> None:
    if _cell(rows, ray.map_x, ray.map_y) == "1":
        ray.side = 0 if ray.side_dist_x < ray.side_dist_y else 1
        return
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.incr_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.incr_y
            ray.side = 1
        cell = _cell(rows, ray.map_x, ray.map_y)
        if cell is None or cell in _RAY_STOPPERS:
            return


def _project(ray: Ray) -> None:
    if ray.side == 0:
        ray.wall_dist = ray.side_dist_x - ray.delta_dist_x
    else:
        ray.wall_dist = ray.side_dist_y - ray.delta_dist_y
    quotient = math.inf
    if ray.wall_dist != 0:
        try:
            quotient = WINDOW_H / ray.wall_dist
        except OverflowError:
            quotient = math.inf
    if math.isinf(quotient):
        ray.wall_height = WINDOW_H
        ray.draw_start, ray.draw_end = 0, WINDOW_H - 1
    else:
        ray.wall_height = int(quotient)
        half = _half(ray.wall_height)
        ray.draw_start = WINDOW_H // 2 - half
        ray.draw_end = WINDOW_H // 2 + half
    if ray.draw_start < 0:
        ray.draw_start = 0
    if ray.wall_dist <= 0:
        ray.wall_height = WINDOW_H
        ray.wall_dist = 0.0
    if ray.draw_end >= WINDOW_H:
        ray.draw_end = WINDOW_H - 1


def _texture_coords(ray: Ray, player: Player) -> None:
    if ray.side == 0:
        wall_x = player.y + ray.wall_dist * ray.dir_y
    else:
        wall_x = player.x + ray.wall_dist * ray.dir_x
    ray.wall_x = wall_x - math.floor(wall_x)
    ray.tex_x = int(ray.wall_x * TEXTURE_SIZE)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        ray.tex_x = TEXTURE_SIZE - ray.tex_x - 1
    ray.tex_step = TEXTURE_SIZE / ray.wall_height if ray.wall_height else math.inf
    offset = ray.draw_start - WINDOW_H // 2 + _half(ray.wall_height)
    ray.tex_pos = offset * ray.tex_step


def cast_ray(rows: Sequence[str], player: Player, column: int) -> Ray:
    """Cast the ray of one screen column and return where and how it hit."""
    camera = 2.0 * column / WINDOW_W - 1
    ray = Ray(
        column=column,
        dir_x=player.dir_x + player.plane_x * camera,
        dir_y=player.dir_y + player.plane_y * camera,
        map_x=int(player.x),
        map_y=int(player.y),
    )
    ray.delta_dist_x = NO_HIT_DELTA if ray.dir_x == 0 else abs(1.0 / ray.dir_x)
    ray.delta_dist_y = NO_HIT_DELTA if ray.dir_y == 0 else abs(1.0 / ray.dir_y)
    _setup_steps(ray, player)
    _dda(rows, ray)
    _project(ray)
    _texture_coords(ray, player)
    return ray


def _wall_texture(
    rows: Sequence[str], player: Player, ray: Ray, walls: Mapping[str, Texture]
) -> Texture:
    if _cell(rows, ray.map_x, ray.map_y) == "D":
        return walls["door"]
    if ray.side == 0:
        return walls["west"] if player.x - ray.map_x > 0 else walls["east"]
    return walls["north"] if player.y - ray.map_y > 0 else walls["south"]


def _draw_textured_column(
    frame: Frame,
    rows: Sequence[str],
    player: Player,
    ray: Ray,
    walls: Mapping[str, Texture],
    ceiling: int,
    floor: int,
) -> None:
    x = ray.column
    _paint(frame, x, 0, ray.draw_start, ceiling)
    count = ray.draw_end - ray.draw_start
    if count > 0:
        texture = _wall_texture(rows, player, ray, walls)
        lookup = np.array(
            [texture.pixel(ray.tex_x, ty) & 0xFFFFFFFF for ty in range(TEXTURE_SIZE)],
            dtype=np.uint32,
        )
        steps = np.full(count, ray.tex_step, dtype=np.float64)
        steps[0] = ray.tex_pos
        positions = np.cumsum(steps)
        tex_y = positions.astype(np.int64) & (TEXTURE_SIZE - 1)
        _paint(frame, x, ray.draw_start, ray.draw_end, lookup[tex_y])
    _paint(frame, x, ray.draw_end, WINDOW_H, floor)


def render_textured(
    frame: Frame,
    rows: Sequence[str],
    player: Player,
    walls: Mapping[str, Texture],
    ceiling: tuple[int, int, int],
    floor: tuple[int, int, int],
) -> list[float]:
    """Draw textured walls, ceiling and floor for every column.

    ``walls`` maps "north", "south", "west", "east" and "door" to textures;
    ``ceiling`` and ``floor`` are RGB triples. Returns the wall distance of
    each column, for depth testing sprites.
    """
    ceiling_color = create_rgb(*ceiling)
    floor_color = create_rgb(*floor)
    zbuffer = []
    for column in range(WINDOW_W):
        ray = cast_ray(rows, player, column)
        _draw_textured_column(
            frame, rows, player, ray, walls, ceiling_color, floor_color
        )
        zbuffer.append(ray.wall_dist)
    return zbuffer


def draw_flat_column(frame: Frame, ray: Ray, x: int) -> None:
    """Draw one column with flat colours, leaving the minimap area alone."""
    colors = np.empty(WINDOW_H, dtype=np.uint32)
    start = max(ray.draw_start, 0)
    wall_end = max(ray.draw_end, start)
    colors[:start] = FLAT_SKY
    colors[start:wall_end] = FLAT_WALL_SHADED if ray.side == 1 else FLAT_WALL
    colors[wall_end:] = FLAT_GROUND
    if ray.column in _MINIMAP_AREA:
        _paint(frame, x, 0, _MINIMAP_AREA.start, colors[:_MINIMAP_AREA.start])
        _paint(frame, x, _MINIMAP_AREA.stop, WINDOW_H, colors[_MINIMAP_AREA.stop:])
    else:
        _paint(frame, x, 0, WINDOW_H, colors)


def render_flat(frame: Frame, rows: Sequence[str], player: Player) -> None:
    """Draw every column with flat wall, sky and ground colours."""
    for column in range(WINDOW_W):
        draw_flat_column(frame, cast_ray(rows, player, column), column)


def draw_crosshair(frame: Frame) -> None:
    """Draw a cross at the centre of the window, leaving the centre pixel."""
    cx, cy = WINDOW_W // 2, WINDOW_H // 2
    for i in range(1, CROSSHAIR_ARM + 1):
        frame.put(cx - i, cy, CROSSHAIR_COLOR)
        frame.put(cx + i, cy, CROSSHAIR_COLOR)
        frame.put(cx, cy - i, CROSSHAIR_COLOR)
        frame.put(cx, cy + i, CROSSHAIR_COLOR)