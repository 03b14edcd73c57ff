"""Sprite objects placed on the map: collection, depth sorting and animation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from .config import ANISPEED, OBJS
from .texture import SpriteTextures
from .textutils import is_in

# Distance objects carry until they are first sorted.
UNSORTED_DISTANCE = float(32767)

_ANIMATION_PHASES = 4


@dataclass(eq=False)
class GameObject:
    """A sprite standing in a map cell."""

    kind: str
    x: int
    y: int
    texture: object
    dist: float = UNSORTED_DISTANCE


def texture_for(kind: str, textures: SpriteTextures):
    """Return the texture that a map character shows; unknown ones show a door."""
    if kind in ("C", "P"):
        return textures.column
    if kind == "B":
        return textures.barrel
    if kind == "G":
        return textures.greenlight
    if kind == "F":
        return textures.fireplace[0]
    if kind == "Z":
        return textures.death_eater[0]
    return textures.door


def collect_objects(rows: Sequence[str], textures: SpriteTextures) -> list[GameObject]:
    """Find every object on the map, the last one found coming first."""
    found = [
        GameObject(cell, x, y, texture_for(cell, textures))
        for y, row in enumerate(rows)
        for x, cell in enumerate(row)
        if is_in(OBJS, cell)
    ]
    found.reverse()
    return found


def sort_objects(
    objects: Iterable[GameObject], position: tuple[float, float]
) -> list[GameObject]:
    """Update each object's squared distance and order them farthest first.

    Among objects at the same distance, the one later in ``objects`` comes first.
    """
    px, py = position
    items = list(objects)
    for obj in items:
        obj.dist = (obj.y - py) ** 2 + (obj.x - px) ** 2
    return sorted(reversed(items), key=attrgetter("dist"), reverse=True)


def describe_objects(objects: Iterable[GameObject]) -> str:
    """Describe each object on its own line."""
    return "\n".join(
        f"node: {i} - x: {obj.x} - y: {obj.y} - dist: {obj.dist:f} - type: {obj.kind}"
        for i, obj in enumerate(objects)
    )


@dataclass
class Animator:
    """Advances animated sprites by one frame every few ticks."""

    textures: SpriteTextures
    phase: int = 0
    counter: int = ANISPEED

    def tick(self, objects: Iterable[GameObject]) -> bool:
        """Count one tick; return True when the animation frame changed."""
        if self.counter != ANISPEED:
            self.counter += 1
            return False
        self.counter = 0
        frames_by_kind = {
            "F": self.textures.fireplace,
            "Z": self.textures.death_eater,
        }
        for obj in objects:
            frames = frames_by_kind.get(obj.kind)
            if frames is not None and self.phase < len(frames):
                obj.texture = frames[self.phase]
        self.phase = (self.phase + 1) % _ANIMATION_PHASES
        return True