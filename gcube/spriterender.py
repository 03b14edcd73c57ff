"""Drawing sprite objects over the rendered walls, with depth testing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from .config import WINDOW_H, WINDOW_W
from .objects import GameObject
from .player import Player
from .render import Frame
from .texture import Texture

# Objects closer than this (squared distance) are not drawn.
MIN_DISTANCE = 0.1
# Colour bits that must be set for a sprite pixel to be drawn.
OPAQUE_MASK = 0x0FFFFFFF


def _texture_column(texture: Texture, tex_x: int, rows: int) -> np.ndarray:
    values = [texture.pixel(tex_x, ty) & 0xFFFFFFFF for ty in range(rows)]
    return np.array(values, dtype=np.uint32)


def _draw_one(
    frame: Frame,
    texture: Texture,
    transf_x: float,
    transf_y: float,
    zbuffer: Sequence[float],
) -> None:
    ratio = WINDOW_H / transf_y
    screen_ratio = WINDOW_W / 2.0 * (1.0 + transf_x / transf_y)
    if not (np.isfinite(ratio) and np.isfinite(screen_ratio)):
        return
    sprite_h = int(abs(ratio))
    sprite_w = sprite_h
    screen_x = int(screen_ratio)

    y_start = max(WINDOW_H // 2 - sprite_h // 2, 0)
    y_end = min(sprite_h // 2 + WINDOW_H // 2, WINDOW_H - 1)
    left = screen_x - sprite_w // 2
    x_start = max(left, 0)
    x_end = min(sprite_w // 2 + screen_x, WINDOW_W - 1)
    if y_start >= y_end or x_start >= x_end:
        return

    screen_rows = [v for v in range(y_start, y_end) if v < frame.height]
    if not screen_rows:
        return
    tex_rows = [
        ((v * 256 - WINDOW_H * 128 + sprite_h * 128) * texture.height)
        // sprite_h
        // 256
        for v in screen_rows
    ]
    lookup_rows = max(tex_rows) + 1
    v_index = np.array(screen_rows, dtype=np.int64)
    t_index = np.array(tex_rows, dtype=np.int64)
    columns: dict[int, np.ndarray] = {}

    for stripe in range(x_start, x_end):
        if stripe >= frame.width or stripe >= len(zbuffer):
            break
        if not transf_y < zbuffer[stripe]:
            continue
        tex_x = (256 * (stripe - left) * texture.width // sprite_w) // 256
        column = columns.get(tex_x)
        if column is None:
            column = _texture_column(texture, tex_x, lookup_rows)
            columns[tex_x] = column
        colors = column[t_index]
        mask = (colors & OPAQUE_MASK) != 0
        frame.pixels[v_index[mask], stripe] = colors[mask]


def draw_sprites(
    frame: Frame,
    objects: Iterable[GameObject],
    player: Player,
    zbuffer: Sequence[float],
) -> None:
    """Draw each object, in the given order, where it is nearer than the walls.

    ``objects`` should be ordered farthest first so that nearer sprites cover
    farther ones; ``zbuffer`` holds the wall distance of every screen column.
    """
    det = player.plane_x * player.dir_y - player.dir_x * player.plane_y
    if det == 0:
        return
    inv_det = 1.0 / det
    for obj in objects:
        if obj.dist <= MIN_DISTANCE:
            continue
        rel_x = obj.x + 0.5 - player.x
        rel_y = obj.y + 0.5 - player.y
        transf_x = inv_det * (player.dir_y * rel_x - player.dir_x * rel_y)
        transf_y = inv_det * (-player.plane_y * rel_x + player.plane_x * rel_y)
        if transf_y <= 0:
            continue
        _draw_one(frame, obj.texture, transf_x, transf_y, zbuffer)