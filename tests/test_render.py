import numpy as np
import pytest

from gcube.config import TEXTURE_SIZE, WINDOW_H, WINDOW_W
from gcube.player import Player
from gcube.render import (
    CROSSHAIR_ARM,
    CROSSHAIR_COLOR,
    FLAT_GROUND,
    FLAT_SKY,
    FLAT_WALL,
    FLAT_WALL_SHADED,
    Frame,
    Ray,
    cast_ray,
    draw_crosshair,
    draw_flat_column,
    render_flat,
    render_textured,
)
from gcube.texture import Texture, create_rgb

CENTRE = WINDOW_W // 2


def box(width, height, middle=None):
    inner = "1" + "0" * (width - 2) + "1"
    rows = ["1" * width] + [inner] * (height - 2) + ["1" * width]
    if middle is not None:
        rows[height // 2] = middle
    return rows


def player_at(x, y, heading):
    player = Player(x, y)
    player.set_heading(heading)
    return player


def uniform(color):
    return Texture(np.full((TEXTURE_SIZE, TEXTURE_SIZE), color, dtype=np.uint32))


WALLS = {
    "north": uniform(0x111111),
    "south": uniform(0x222222),
    "west": uniform(0x333333),
    "east": uniform(0x444444),
    "door": uniform(0x555555),
}


def test_frame_put_get_round_trip():
    frame = Frame(8, 6)
    frame.put(3, 2, 0x123456)
    assert frame.get(3, 2) == 0x123456
    assert frame.get(2, 3) == 0


def test_frame_put_outside_is_ignored():
    frame = Frame(4, 4)
    frame.put(-1, 0, 0xFFFFFF)
    frame.put(0, 4, 0xFFFFFF)
    assert not frame.pixels.any()


def test_frame_get_outside_raises():
    frame = Frame(4, 4)
    with pytest.raises(IndexError):
        frame.get(4, 0)


def test_frame_rejects_empty_size():
    with pytest.raises(ValueError):
        Frame(0, 10)


def test_centre_ray_hits_wall_ahead():
    rows = box(7, 5)
    player = player_at(1.5, 2.5, "E")
    ray = cast_ray(rows, player, CENTRE)
    assert ray.side == 0
    assert ray.map_y == int(player.y)
    assert rows[ray.map_y][ray.map_x] == "1"
    assert ray.wall_dist == pytest.approx(ray.map_x - player.x)


def test_closer_wall_is_taller():
    rows = box(7, 5)
    far = cast_ray(rows, player_at(1.5, 2.5, "E"), CENTRE)
    near = cast_ray(rows, player_at(4.5, 2.5, "E"), CENTRE)
    assert near.wall_dist < far.wall_dist
    assert near.wall_height > far.wall_height


@pytest.mark.parametrize("column", [0, 100, CENTRE, WINDOW_W - 1])
def test_ray_draw_bounds(column):
    ray = cast_ray(box(7, 5), player_at(2.5, 2.5, "N"), column)
    assert 0 <= ray.draw_start <= ray.draw_end < WINDOW_H
    assert 0 <= ray.tex_x < TEXTURE_SIZE
    assert ray.wall_dist > 0


def test_door_stops_ray():
    rows = box(7, 5, middle="10D0001")
    ray = cast_ray(rows, player_at(1.5, 2.5, "E"), CENTRE)
    assert rows[ray.map_y][ray.map_x] == "D"


def test_ray_starting_in_wall_does_not_move():
    rows = box(7, 5)
    ray = cast_ray(rows, player_at(0.5, 2.5, "E"), CENTRE)
    assert (ray.map_x, ray.map_y) == (0, 2)


def test_ray_north_hits_horizontal_side():
    rows = box(7, 5)
    ray = cast_ray(rows, player_at(3.5, 2.5, "N"), CENTRE)
    assert ray.side == 1
    assert ray.map_x == 3
    assert rows[ray.map_y][ray.map_x] == "1"


def test_render_flat_colours():
    frame = Frame()
    render_flat(frame, box(7, 5), player_at(1.5, 2.5, "E"))
    assert frame.get(0, 0) == FLAT_SKY
    assert frame.get(0, WINDOW_H - 1) == FLAT_GROUND
    assert frame.get(CENTRE, WINDOW_H // 2) == FLAT_WALL
    assert frame.get(100, 100) == 0


def test_render_flat_shades_horizontal_sides():
    frame = Frame()
    render_flat(frame, box(7, 5), player_at(3.5, 2.5, "N"))
    assert frame.get(CENTRE, WINDOW_H // 2) == FLAT_WALL_SHADED


def test_draw_flat_column_skips_minimap_area():
    frame = Frame()
    ray = Ray(column=100, draw_start=300, draw_end=600, side=1)
    draw_flat_column(frame, ray, 5)
    assert frame.get(5, 5) == FLAT_SKY
    assert frame.get(5, 100) == 0
    assert frame.get(5, 400) == FLAT_WALL_SHADED
    assert frame.get(5, 700) == FLAT_GROUND


def test_render_textured_east_wall():
    frame = Frame()
    rows = box(7, 5)
    player = player_at(1.5, 2.5, "E")
    ceiling, floor = (10, 20, 30), (40, 50, 60)
    zbuffer = render_textured(frame, rows, player, WALLS, ceiling, floor)
    assert len(zbuffer) == WINDOW_W
    assert zbuffer[CENTRE] == cast_ray(rows, player, CENTRE).wall_dist
    assert frame.get(CENTRE, WINDOW_H // 2) == 0x444444
    assert frame.get(CENTRE, 0) == create_rgb(*ceiling)
    assert frame.get(CENTRE, WINDOW_H - 1) == create_rgb(*floor)


def test_render_textured_west_and_door():
    frame = Frame()
    render_textured(
        frame, box(7, 5), player_at(5.5, 2.5, "W"), WALLS, (0, 0, 0), (0, 0, 0)
    )
    assert frame.get(CENTRE, WINDOW_H // 2) == 0x333333
    door_frame = Frame()
    render_textured(
        door_frame,
        box(7, 5, middle="10D0001"),
        player_at(1.5, 2.5, "E"),
        WALLS,
        (0, 0, 0),
        (0, 0, 0),
    )
    assert door_frame.get(CENTRE, WINDOW_H // 2) == 0x555555


def test_crosshair():
    frame = Frame()
    draw_crosshair(frame)
    cx, cy = WINDOW_W // 2, WINDOW_H // 2
    assert frame.get(cx + 1, cy) == CROSSHAIR_COLOR
    assert frame.get(cx, cy - CROSSHAIR_ARM) == CROSSHAIR_COLOR
    assert frame.get(cx, cy) == 0
    assert frame.get(cx + CROSSHAIR_ARM + 1, cy) == 0
    assert int((frame.pixels == CROSSHAIR_COLOR).sum()) == 4 * CROSSHAIR_ARM