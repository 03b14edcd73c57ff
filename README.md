# gcube

A small first-person raycasting maze explorer. You walk through a grid maze
described by a `.cub` scene file, open and close doors, and see sprites
standing in the maze: animated fireplaces and hooded figures, barrels,
pillars and green lights. A minimap in the top-left corner shows the cells
around you.

## Installation

```
pip install .
```

The package needs `numpy`, `pillow` and `pygame`. For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
gcube path/to/scene.cub
```

Exactly one argument, the scene file, is required; otherwise the command
prints a "Bad argument" message and exits with status 1. If the scene cannot
be read or parsed, or its map is not closed, it prints `Error` and exits
with status 127.

### Sprite images

Besides the four wall textures named in the scene, the game loads its door
and sprite images from fixed paths relative to the current directory:

```
./srcs/sprites/test/door.xpm
./srcs/sprites/test/barrel.xpm
./srcs/sprites/test/pillar.xpm
./srcs/sprites/test/greenlight.xpm
srcs/sprites/Fireplace/FP_0.xpm ... FP_3.xpm
srcs/sprites/DeathEater/DE_0.xpm ... DE_4.xpm
```

These images are not part of the package; run `gcube` from a directory that
holds them. Any image format Pillow can read works for every texture.
Fully transparent pixels of a sprite are not drawn. Textures are sampled as
64×64 images.

## Controls

| Key           | Action                          |
|---------------|---------------------------------|
| `W` / `S`     | move forward / backward         |
| `A` / `D`     | strafe left / right             |
| `←` / `→`     | turn left / right               |
| mouse motion  | turn towards the pointer's side |
| `Space`       | open or close an adjacent door  |
| `Esc`         | quit                            |

Walls and closed doors block movement.

## Scene files

A scene file starts with six header lines, in any order, with any number of
blank lines between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 0,137,173
C 64,49,37
```

`NO`, `SO`, `WE` and `EA` name the wall textures; `F` and `C` give the
floor and ceiling colours as `R,G,B`. Each header line holds exactly an
identifier and a value separated by spaces. Every line after the last
header belongs to the map:

```
111111
1N0B01
10D001
1F00Z1
111111
```

| Character        | Meaning                                        |
|------------------|------------------------------------------------|
| `1`              | wall                                           |
| `0`              | empty floor                                    |
| `N` `S` `E` `W`  | player start, facing that way                  |
| `D`              | closed door                                    |
| `C` `P`          | pillar                                         |
| `B`              | barrel                                         |
| `G`              | green light                                    |
| `F`              | animated fireplace                             |
| `Z`              | animated figure                                |
| space            | outside the map (treated as wall once loaded)  |

Empty lines in the map are dropped, tabs count as four spaces, and short
rows are padded with spaces. Any other character is rejected, and every
open cell the player can reach must be closed in by walls.

## Using it as a library

- `gcube.scene.parse_scene(path, loader=None)` and
  `gcube.scene.parse_scene_lines(lines, loader=None)` return a `Scene` with
  the four wall textures, the floor and ceiling colours and the map rows;
  they raise `SceneError` on bad input. `loader` is any callable taking a
  path and returning a `gcube.texture.Texture` (`Texture.load` by default).
- `gcube.grid.validate_map(rows)` returns the set of open cells reachable
  from the player's start, or raises `MapError`. `read_map`, `pad_rows`,
  `replace_in_rows`, `find_player` and `print_rows` are the helpers around it.
- `gcube.player.spawn_player(rows)` returns a `Player` at its start cell;
  `Player.rotate`, `move_forward`, `strafe` and `toggle_door` move it.
- `gcube.render.Frame` is a picture of `0xRRGGBB` pixels.
  `render_textured` draws textured walls, ceiling and floor and returns the
  wall distance of every column; `render_flat` draws flat colours;
  `cast_ray` casts a single column; `draw_crosshair` marks the centre.
- `gcube.spriterender.draw_sprites` draws objects over the walls using that
  depth buffer, and `gcube.minimap.render_minimap` draws the minimap.
- `gcube.objects.collect_objects`, `sort_objects` and `Animator` find the
  sprites on the map, order them farthest first and step their animations.
- `gcube.app.Game.from_file(path, loader=None, textured=True)` ties these
  together. `Game.handle_action` takes a `gcube.config.Action`,
  `Game.handle_mouse` a pointer x position, `Game.render` returns the frame,
  and `Game.tick` renders and animates every 171 ticks. `textured=False`
  selects the flat renderer. `gcube.config.KeyMap` (`LINUX_KEYS`,
  `MAC_KEYS`) maps raw key codes to actions.

## What it does not do

There is no shooting, no enemies that move or act, no sound and no saving:
sprites are scenery only. The door and sprite images are not included, and
the `gcube` command has no options, so it always uses the textured
renderer.