"""Wall and sprite textures, and colour helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

import numpy as np
from PIL import Image

from .config import (
    BARREL,
    DEATH_EATER_FRAMES,
    DOOR,
    FIREPLACE_FRAMES,
    GREENLIGHT,
    PILLAR,
    TEXTURE_SIZE,
)
from .textutils import atoi, split

# Colour given to fully transparent pixels; its low 28 bits are zero.
TRANSPARENT = 0xFF000000
# What a lookup outside the texture returns.
OUT_OF_RANGE = 1


def create_rgb(r: int, g: int, b: int) -> int:
    """Pack three channels into a 0xRRGGBB integer, keeping the low byte of each."""
    return ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)


def parse_color(value: str) -> tuple[int, int, int]:
    """Parse an ``R,G,B`` colour description.

    Raises ValueError unless there are exactly three comma separated fields.
    """
    parts = split(value, ",")
    if len(parts) != 3:
        raise ValueError(f"expected three colour components, got {value!r}")
    r, g, b = (atoi(part) for part in parts)
    return r, g, b


class Texture:
    """A grid of 0xRRGGBB pixels, indexed as ``pixels[y, x]``."""

    __slots__ = ("pixels",)

    def __init__(self, pixels) -> None:
        array = np.asarray(pixels, dtype=np.uint32)
        if array.ndim != 2:
            raise ValueError("texture pixels must be a two-dimensional grid")
        self.pixels = array

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Texture:
        """Read an image file (XPM or any format Pillow reads).

        Raises OSError when the file is missing or cannot be decoded.
        """
        with Image.open(path) as image:
            rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
        colors = (rgba[..., 0] << 16) | (rgba[..., 1] << 8) | rgba[..., 2]
        colors = np.where(rgba[..., 3] == 0, np.uint32(TRANSPARENT), colors)
        return cls(colors)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y), or 1 outside the 64x64 texture area."""
        if not (0 <= x < TEXTURE_SIZE and 0 <= y < TEXTURE_SIZE):
            return OUT_OF_RANGE
        if x >= self.width or y >= self.height:
            return OUT_OF_RANGE
        return int(self.pixels[y, x])


TextureLoader = Callable[[str], Texture]


@dataclass(frozen=True)
class SpriteTextures:
    """Textures for doors, static sprites and animation frames."""

    door: Texture
    barrel: Texture
    column: Texture
    greenlight: Texture
    fireplace: tuple[Texture, ...]
    death_eater: tuple[Texture, ...]

    @classmethod
    def load(cls, loader: TextureLoader | None = None) -> SpriteTextures:
        """Load every sprite texture through ``loader`` (Texture.load by default)."""
        load = Texture.load if loader is None else loader
        door = load(DOOR)
        barrel = load(BARREL)
        column = load(PILLAR)
        greenlight = load(GREENLIGHT)
        fireplace = tuple(load(path) for path in FIREPLACE_FRAMES)
        death_eater = tuple(load(path) for path in DEATH_EATER_FRAMES)
        return cls(
            door=door,
            barrel=barrel,
            column=column,
            greenlight=greenlight,
            fireplace=fireplace,
            death_eater=death_eater,
        )