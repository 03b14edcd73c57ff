from gcube.minimap import (
    CELL,
    DOOR_FILL,
    OPEN_FILL,
    PLAYER_COLOR,
    PLAYER_POSITION,
    WALL_FILL,
    draw_bordered_square,
    draw_square,
    render_minimap,
)
from gcube.player import Player
from gcube.render import Frame

WHITE = 0xFFFFFF


def white_frame():
    frame = Frame(400, 300)
    frame.pixels[:] = WHITE
    return frame


def cell_origin(dx, dy):
    px, py = PLAYER_POSITION
    return px + dx * CELL, py + dy * CELL


def test_draw_square_fills_exactly():
    frame = Frame(20, 20)
    draw_square(frame, 3, 5, 7, 0xABCDEF)
    assert int((frame.pixels == 0xABCDEF).sum()) == 3 * 3
    assert frame.get(5, 7) == 0xABCDEF
    assert frame.get(7, 9) == 0xABCDEF
    assert frame.get(8, 7) == 0


def test_draw_square_is_clipped():
    frame = Frame(20, 20)
    draw_square(frame, 4, -2, -2, 0xABCDEF)
    assert int((frame.pixels == 0xABCDEF).sum()) == 2 * 2


def test_bordered_square():
    frame = white_frame()
    draw_bordered_square(frame, 10, 0, 0, WALL_FILL)
    assert frame.get(0, 0) == 0
    assert frame.get(9, 9) == 0
    assert frame.get(5, 5) == WALL_FILL
    assert int((frame.pixels == WALL_FILL).sum()) == (10 - 2) ** 2
    assert frame.get(10, 10) == WHITE


def test_small_bordered_square_is_all_border():
    frame = white_frame()
    draw_bordered_square(frame, 2, 0, 0, WALL_FILL)
    assert int((frame.pixels == 0).sum()) == 4
    assert not (frame.pixels == WALL_FILL).any()


def test_render_minimap_cells():
    rows = ["111111", "100D11", "111111"]
    frame = white_frame()
    render_minimap(frame, rows, Player(1.5, 1.5))

    px, py = PLAYER_POSITION
    assert frame.get(px, py) == PLAYER_COLOR
    assert frame.get(px + CELL - 1, py + CELL - 1) == PLAYER_COLOR

    ox, oy = cell_origin(1, 0)
    assert frame.get(ox, oy) == OPEN_FILL
    assert frame.get(ox + CELL - 1, oy + CELL - 1) == OPEN_FILL

    ox, oy = cell_origin(2, 0)
    assert frame.get(ox, oy) == 0
    assert frame.get(ox + CELL // 2, oy + CELL // 2) == DOOR_FILL

    ox, oy = cell_origin(3, 0)
    assert frame.get(ox + CELL // 2, oy + CELL // 2) == WALL_FILL

    ox, oy = cell_origin(0, -1)
    assert frame.get(ox + CELL // 2, oy + CELL // 2) == WALL_FILL


def test_render_minimap_outside_map_is_black():
    rows = ["111111", "100D11", "111111"]
    frame = white_frame()
    render_minimap(frame, rows, Player(1.5, 1.5))
    ox, oy = cell_origin(5, 0)
    assert frame.get(ox + CELL // 2, oy + CELL // 2) == 0
    ox, oy = cell_origin(0, 2)
    assert frame.get(ox + CELL // 2, oy + CELL // 2) == 0