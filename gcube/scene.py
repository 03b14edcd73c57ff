"""Reading scene files: wall textures, floor and ceiling colours, and the map."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from .grid import read_map
from .texture import Texture, TextureLoader, parse_color
from .textutils import split

_WALLS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLORS = {"F": "floor", "C": "ceiling"}
_REQUIRED = len(_WALLS) + len(_COLORS)


class SceneError(ValueError):
    """Raised when a scene file cannot be read or is malformed."""


@dataclass
class Scene:
    """Everything a scene file describes."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    rows: list[str]


def _parse_entry(line: str) -> tuple[str, str]:
    fields = split(line, " ")
    if len(fields) != 2:
        raise SceneError(f"expected an identifier and a value: {line!r}")
    key, value = fields
    return key, value.removesuffix("\n")


def _load_value(key: str, value: str, load: TextureLoader):
    if key in _WALLS:
        try:
            return _WALLS[key], load(value)
        except (OSError, ValueError) as exc:
            raise SceneError(f"cannot load texture {value!r}") from exc
    if key in _COLORS:
        try:
            return _COLORS[key], parse_color(value)
        except ValueError as exc:
            raise SceneError(f"bad colour {value!r}") from exc
    raise SceneError(f"unknown identifier {key!r}")


def parse_scene_lines(
    lines: Iterable[str], loader: TextureLoader | None = None
) -> Scene:
    """Parse the lines of a scene, newline characters included.

    The six identifiers NO, SO, WE, EA, F and C come first, in any order,
    with blank lines allowed between them; every line after the last of them
    belongs to the map.
    """
    load = Texture.load if loader is None else loader
    remaining = iter(lines)
    found: dict[str, object] = {}
    while len(found) < _REQUIRED:
        line = next(remaining, None)
        if line is None:
            raise SceneError("scene ends before all textures and colours are set")
        if line == "\n":
            continue
        key, value = _parse_entry(line)
        name, item = _load_value(key, value, load)
        found[name] = item
    return Scene(**found, rows=read_map(remaining))


def parse_scene(
    path: str | PathLike[str], loader: TextureLoader | None = None
) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise SceneError(f"cannot open scene {path!s}") from exc
    with handle:
        return parse_scene_lines(handle, loader)