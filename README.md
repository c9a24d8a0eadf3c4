# raycaster

A small first-person walker drawn by raycasting. You move around a 16×16
grid world with textured walls, a textured floor, a sky that scrolls as you
turn, and a minimap of the grid and your position in the top-left corner.

## Installing

```
pip install .
```

## Running

```
raycaster
raycaster --graphics path/to/images
```

The game opens full screen at the desktop resolution, hides the mouse
cursor and runs at up to 60 frames per second. It loads three images,
`sky.png`, `floor.png` and `wall.png`, from the directory given with
`--graphics` (by default `Graphics` under the current working directory).
If any of them is missing or cannot be loaded, the command prints an
`[Error] ...` message to standard error and exits with status 1.

## Controls

| Input  | Action               |
|--------|----------------------|
| Mouse  | Turn left / right    |
| W / S  | Walk forward / back  |
| A / D  | Strafe left / right  |
| Esc    | Quit                 |

Closing the window also quits. You walk at 5 map cells per second; a step
that would end inside a wall (`#` cell) is not taken.

## Using it as a library

The world and the player work without a window:

```python
from raycaster.world import WorldMap
from raycaster.player import Player

world = WorldMap()                 # the built-in 16×16 map
player = Player()                  # starts at (14.7, 5.09), angle 0
hit = world.cast_ray(player.x, player.y, player.angle)
print(hit.distance, hit.x, hit.y, hit.sample)

player.walk(forward=1.0, strafe=0.0, dt=0.1, world=world)
player.turn(40)                    # a horizontal mouse delta in pixels
```

`raycaster.world` holds:

- `WorldMap(rows)` – a grid of equal-length strings; `at(x, y)` returns a
  cell (anything outside the map counts as `#`), `is_wall(x, y)` tests for
  a wall, and `cast_ray(x, y, angle)` marches a ray in steps of 0.05 up to a
  depth of 16 and returns a `RayHit`. An empty or ragged map raises
  `ValueError`.
- `base_angles(screen_width)` – the ray offset for every screen column
  across a field of view of about π/4.
- `wall_slice(hit, screen_height, texture_width)` – projects a hit into a
  `WallSlice` (ceiling, floor and texture columns).
- `sky_offset(angle, texture_width)` – horizontal scroll of the sky.
- `floor_row(y, screen_width, screen_height, px, py, angle)` – world
  coordinates of the floor seen along a screen row below the horizon
  (rows at or above it raise `ValueError`).

`raycaster.player.Player` has `move(dx, dy, world)` (returns whether the
step was taken), `turn(delta_x, sensitivity)` (keeps the angle within
0 to 2π) and `walk(forward, strafe, dt, world)`.

`raycaster.render.Textures.load(directory)` loads the three images, and
`raycaster.render.Renderer(textures, width, height)` draws onto a pygame
surface with `draw_floor`, `draw_sky`, `draw_walls`, `draw_minimap`, or a
whole frame with `render(surface, player, world)`. `raycaster.game.Game`
runs the window and input loop; its `handle_keys` and `handle_mouse`
methods apply input to the player.

## What it does not do

It is a walker, not a full game: there are no enemies, weapons, items,
doors, sound or saved state. The map is the built-in one unless you build a
`WorldMap` yourself in code, and the command always runs full screen.

## Tests

```
pip install .[test]
pytest
```