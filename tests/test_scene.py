import pytest

from gcube.scene import SceneError, parse_scene, parse_scene_lines

LINES = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
    "111\n",
    "1N1\n",
    "11\n",
]


def _loader(path):
    return path


def test_parse_full_scene():
    scene = parse_scene_lines(LINES, _loader)
    assert scene.north == "./north.xpm"
    assert scene.south == "./south.xpm"
    assert scene.west == "./west.xpm"
    assert scene.east == "./east.xpm"
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.rows[:2] == ["111", "1N1"]
    assert len({len(row) for row in scene.rows}) == 1


def test_identifiers_in_any_order():
    reordered = [LINES[5], LINES[6], LINES[0], LINES[1], LINES[3], LINES[4]] + LINES[8:]
    scene = parse_scene_lines(reordered, _loader)
    assert scene.floor == (220, 100, 0)
    assert scene.north == "./north.xpm"


def test_unknown_identifier_is_rejected():
    with pytest.raises(SceneError):
        parse_scene_lines(["XX ./a.xpm\n"] + LINES, _loader)


def test_three_fields_are_rejected():
    with pytest.raises(SceneError):
        parse_scene_lines(["NO ./a.xpm extra\n"] + LINES[1:], _loader)


def test_missing_identifier_is_rejected():
    with pytest.raises(SceneError):
        parse_scene_lines(LINES[:5], _loader)


def test_bad_colour_is_rejected():
    lines = list(LINES)
    lines[5] = "F 1,2\n"
    with pytest.raises(SceneError):
        parse_scene_lines(lines, _loader)


def test_failing_loader_becomes_scene_error():
    def loader(path):
        raise OSError(path)

    with pytest.raises(SceneError):
        parse_scene_lines(LINES, loader)


def test_parse_scene_reads_file(tmp_path):
    path = tmp_path / "map.cub"
    path.write_text("".join(LINES))
    scene = parse_scene(path, _loader)
    assert scene.ceiling == (225, 30, 0)
    assert scene.rows[1] == "1N1"


def test_parse_scene_missing_file(tmp_path):
    with pytest.raises(SceneError):
        parse_scene(tmp_path / "nothing.cub", _loader)