"""Game constants, asset paths and keyboard bindings."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field

# Terminal colours used for diagnostics.
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
PURPLE = "\033[95m"
CYAN = "\033[96m"
BLANK = "\033[0m"

BUFFER_SIZE = 100
STD_SIZE = 500

TEXTURED = True

WIDTH = 24
HEIGHT = 24
WINDOW_W = 1280
WINDOW_H = 960

MINIMAP = 200
MINIMAP_S = 10

FOV = 60
PI = 3.14159
MOVSPEED = 0.04
ROTSPEED = 0.06
MOUSESPEED = 0.01
ANISPEED = 6

PLAYER_R = 10
FLOOR_COLOR = 0x000089AD
CEILING_COLOR = 0x00403125

UDIV = 1
VDIV = 1
VMOVE = 0.0

TEXTURE_SIZE = 64

# Map characters that stand for sprite objects.
OBJS = "CPBGFZ"

# Map characters for the player's starting heading.
HEADINGS = "NWSE"

# Characters allowed anywhere in a map body.
MAP_CHARSET = "NWES0 DCPBGF1Z\n"

# Animated sprites.
FIREPLACE_FRAMES = (
    "srcs/sprites/Fireplace/FP_0.xpm",
    "srcs/sprites/Fireplace/FP_1.xpm",
    "srcs/sprites/Fireplace/FP_2.xpm",
    "srcs/sprites/Fireplace/FP_3.xpm",
)
DEATH_EATER_FRAMES = (
    "srcs/sprites/DeathEater/DE_0.xpm",
    "srcs/sprites/DeathEater/DE_1.xpm",
    "srcs/sprites/DeathEater/DE_2.xpm",
    "srcs/sprites/DeathEater/DE_3.xpm",
    "srcs/sprites/DeathEater/DE_4.xpm",
)

WALLN = "srcs/sprites/Walls/WallN.xpm"
WALLS = "srcs/sprites/Walls/WallS.xpm"
WALLE = "srcs/sprites/Walls/WallE.xpm"
WALLW = "./srcs/sprites/test/WallE.xpm"

BARREL = "./srcs/sprites/test/barrel.xpm"
BLUESTONE = "./srcs/sprites/test/bluestone.xpm"
COLORSTONE = "./srcs/sprites/test/colorstone.xpm"
EAGLE = "./srcs/sprites/test/eagle.xpm"
GREENLIGHT = "./srcs/sprites/test/greenlight.xpm"
GREYSTONE = "./srcs/sprites/test/greystone.xpm"
MOSSY = "./srcs/sprites/test/mossy.xpm"
PILLAR = "./srcs/sprites/test/pillar.xpm"
PURPLESTONE = "./srcs/sprites/test/purplestone.xpm"
REDBRICK = "./srcs/sprites/test/redbrick.xpm"
WOOD = "./srcs/sprites/test/wood.xpm"
DOOR = "./srcs/sprites/test/door.xpm"


class Action(enum.Enum):
    """Something the player can ask the game to do from the keyboard."""

    QUIT = "quit"
    FORWARD = "forward"
    BACKWARD = "backward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    TOGGLE_DOOR = "toggle_door"


@dataclass(frozen=True)
class KeyMap:
    """Platform key codes and the actions they trigger."""

    escape: int
    space: int
    up: int
    down: int
    left: int
    right: int
    arrow_left: int
    arrow_right: int
    _bindings: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        bindings = {
            self.escape: Action.QUIT,
            self.up: Action.FORWARD,
            self.down: Action.BACKWARD,
            self.arrow_left: Action.TURN_LEFT,
            self.arrow_right: Action.TURN_RIGHT,
            self.left: Action.STRAFE_LEFT,
            self.right: Action.STRAFE_RIGHT,
            self.space: Action.TOGGLE_DOOR,
        }
        object.__setattr__(self, "_bindings", bindings)

    def action(self, keycode: int) -> Action | None:
        """Return the action bound to ``keycode``, or None if it is unbound."""
        return self._bindings.get(keycode)


LINUX_KEYS = KeyMap(
    escape=65307,
    space=32,
    up=119,
    down=115,
    left=97,
    right=100,
    arrow_left=65361,
    arrow_right=65363,
)

MAC_KEYS = KeyMap(
    escape=53,
    space=49,
    up=13,
    down=1,
    left=0,
    right=2,
    arrow_left=123,
    arrow_right=124,
)

DEFAULT_KEYS = MAC_KEYS if sys.platform == "darwin" else LINUX_KEYS


def deg_2_rad(deg: float) -> float:
    """Convert degrees to radians using the game's value of pi."""
    return PI * deg / 180