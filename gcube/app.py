"""The game: loading a scene, reacting to input and producing frames."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from os import PathLike

import numpy as np

from .config import (
    BLANK,
    MOUSESPEED,
    RED,
    ROTSPEED,
    TEXTURED,
    WINDOW_H,
    WINDOW_W,
    YELLOW,
    Action,
)
from .grid import MapError, replace_in_rows, validate_map
from .minimap import render_minimap
from .objects import Animator, GameObject, collect_objects, sort_objects
from .player import Player, spawn_player
from .render import Frame, draw_crosshair, render_flat, render_textured
from .scene import Scene, SceneError, parse_scene
from .spriterender import draw_sprites
from .texture import SpriteTextures, TextureLoader

WINDOW_TITLE = "GcubeDanDanDan"
# Idle ticks between two rendered frames.
TICKS_PER_FRAME = 170
EXIT_BAD_SCENE = 127


@dataclass(eq=False)
class Game:
    """A running game: map, player, sprites and the frame they are drawn into."""

    scene: Scene
    rows: list[str]
    player: Player
    sprites: SpriteTextures
    objects: list[GameObject]
    textured: bool = TEXTURED
    frame: Frame = field(default_factory=Frame)
    animator: Animator | None = None
    sorted_objects: list[GameObject] = field(default_factory=list)
    running: bool = True
    _lock: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.animator is None:
            self.animator = Animator(self.sprites)
        self._resort()

    @classmethod
    def from_file(
        cls,
        path: str | PathLike[str],
        loader: TextureLoader | None = None,
        textured: bool = TEXTURED,
    ) -> Game:
        """Load and validate a scene file and set up a game on it.

        Raises SceneError for unreadable or malformed scenes and MapError for
        maps that are not closed or hold bad characters.
        """
        scene = parse_scene(path, loader)
        validate_map(scene.rows)
        rows = replace_in_rows(scene.rows, " ", "1")
        scene.rows = rows
        player = spawn_player(rows)
        if player is None:
            raise MapError("map has no player start")
        sprites = SpriteTextures.load(loader)
        objects = collect_objects(rows, sprites)
        return cls(
            scene=scene,
            rows=rows,
            player=player,
            sprites=sprites,
            objects=objects,
            textured=textured,
        )

    def _resort(self) -> None:
        self.sorted_objects = sort_objects(
            self.objects, (self.player.x, self.player.y)
        )

    def handle_action(self, action: Action | None) -> None:
        """Apply a keyboard action; None stands for an unbound key."""
        if action is Action.QUIT:
            self.objects.clear()
            self.running = False
        elif action is Action.FORWARD:
            self.player.move_forward(self.rows, 1.0)
        elif action is Action.BACKWARD:
            self.player.move_forward(self.rows, -1.0)
        elif action is Action.TURN_LEFT:
            self.player.rotate(-1.0, ROTSPEED)
        elif action is Action.TURN_RIGHT:
            self.player.rotate(1.0, ROTSPEED)
        elif action is Action.STRAFE_LEFT:
            self.player.strafe(self.rows, -1.0)
        elif action is Action.STRAFE_RIGHT:
            self.player.strafe(self.rows, 1.0)
        elif action is Action.TOGGLE_DOOR:
            self.player.toggle_door(self.rows)
        self._resort()

    def handle_mouse(self, x: int) -> None:
        """Turn toward the side of the window the pointer is on."""
        direction = -1.0 if x < WINDOW_W // 2 else 1.0
        self.player.rotate(direction, MOUSESPEED)

    def _walls(self) -> dict:
        return {
            "north": self.scene.north,
            "south": self.scene.south,
            "west": self.scene.west,
            "east": self.scene.east,
            "door": self.sprites.door,
        }

    def render(self) -> Frame:
        """Draw the view and the minimap into the frame and return it."""
        if self.textured:
            zbuffer = render_textured(
                self.frame,
                self.rows,
                self.player,
                self._walls(),
                self.scene.ceiling,
                self.scene.floor,
            )
            draw_sprites(self.frame, self.sorted_objects, self.player, zbuffer)
            draw_crosshair(self.frame)
        else:
            render_flat(self.frame, self.rows, self.player)
        render_minimap(self.frame, self.rows, self.player)
        return self.frame

    def tick(self) -> bool:
        """Count one idle tick; render and animate every few ticks.

        Returns True when a new frame was rendered.
        """
        if self._lock != TICKS_PER_FRAME:
            self._lock += 1
            return False
        self.render()
        self.animator.tick(self.objects)
        self._lock = 0
        return True

    def debug_log(self, keycode: int) -> str:
        """Print the player's position and camera plane, and return the text."""
        text = (
            f"{YELLOW}[DEBUG] -----------------------------------\n{BLANK}"
            f"posx: {self.player.x:f}\nposy: {self.player.y:f}\n"
            f"cam x: {self.player.plane_x:f}\ncam y: {self.player.plane_y:f}\n"
            f"keycode: {keycode}\n"
        )
        print(text, end="")
        return text


def _present(pygame, screen, frame: Frame) -> None:
    pixels = frame.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _run(game: Game) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(200, 16)
        keys = {
            pygame.K_ESCAPE: Action.QUIT,
            pygame.K_w: Action.FORWARD,
            pygame.K_s: Action.BACKWARD,
            pygame.K_a: Action.STRAFE_LEFT,
            pygame.K_d: Action.STRAFE_RIGHT,
            pygame.K_LEFT: Action.TURN_LEFT,
            pygame.K_RIGHT: Action.TURN_RIGHT,
            pygame.K_SPACE: Action.TOGGLE_DOOR,
        }
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.handle_action(Action.QUIT)
                elif event.type == pygame.KEYDOWN:
                    game.handle_action(keys.get(event.key))
                elif event.type == pygame.MOUSEMOTION:
                    game.handle_mouse(event.pos[0])
            if not game.running:
                break
            while not game.tick():
                pass
            _present(pygame, screen, game.frame)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game on the scene file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"{RED}ERROR:\t{BLANK}Bad argument.\nNo map passed.")
        return 1
    try:
        game = Game.from_file(args[0])
    except (SceneError, MapError):
        print("Error")
        return EXIT_BAD_SCENE
    _run(game)
    return 0