"""World map, ray casting and the projection maths behind each frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

MAP_WIDTH = 16
MAP_HEIGHT = 16
FOV = 3.14159 / 4.0
DEPTH = 16.0
SPEED = 5.0
RAY_STEP = 0.05
WALL = "#"

DEFAULT_ROWS: tuple[str, ...] = (
    "################",
    "#..............#",
    "#.......##.....#",
    "#..............#",
    "#..............#",
    "#...##.........#",
    "#...##.........#",
    "#..............#",
    "#..............#",
    "#..............#",
    "#.....####..#..#",
    "#..............#",
    "#..............#",
    "#.......##.....#",
    "#..............#",
    "################",
)


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped and whether it last crossed a vertical grid line."""

    distance: float
    x: float
    y: float
    crossed_x: bool

    @property
    def sample(self) -> float:
        """Horizontal texture coordinate of the hit, in [0, 0.999]."""
        coord = self.y if self.crossed_x else self.x
        return min(max(coord - math.floor(coord), 0.0), 0.999)


@dataclass(frozen=True)
class WallSlice:
    """One projected wall column: its vertical extent and texture columns."""

    ceiling: float
    floor: float
    tex_left: int
    tex_right: int


@dataclass(frozen=True)
class WorldMap:
    """A rectangular grid of cells where '#' marks a wall."""

    rows: tuple[str, ...] = field(default=DEFAULT_ROWS)

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if not rows or not rows[0]:
            raise ValueError("map must have at least one cell")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all map rows must have the same length")
        object.__setattr__(self, "rows", rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def at(self, x: int, y: int) -> str:
        """Return the cell at (x, y); anything outside the map is a wall."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return WALL
        return self.rows[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.at(x, y) == WALL

    def cast_ray(self, x: float, y: float, angle: float) -> RayHit:
        """March a ray from (x, y) until it meets a wall or reaches DEPTH."""
        eye_x = math.sin(angle)
        eye_y = math.cos(angle)
        distance = 0.0
        test = (int(x), int(y))
        last = test
        while distance < DEPTH:
            last = test
            distance += RAY_STEP
            test = (int(x + eye_x * distance), int(y + eye_y * distance))
            tx, ty = test
            if not (0 <= tx < self.width and 0 <= ty < self.height):
                distance = DEPTH
                break
            if self.rows[ty][tx] == WALL:
                break
        return RayHit(
            distance=distance,
            x=x + eye_x * distance,
            y=y + eye_y * distance,
            crossed_x=test[0] != last[0],
        )


def base_angles(screen_width: int) -> list[float]:
    """Ray angle offsets from the view direction for each screen column."""
    return [-FOV / 2.0 + (column / screen_width) * FOV for column in range(screen_width)]


def wall_slice(hit: RayHit, screen_height: int, texture_width: int) -> WallSlice:
    """Project a ray hit into a screen column of the given height."""
    ceiling = screen_height / 2.0 - screen_height / hit.distance
    tex_x = int(hit.sample * texture_width)
    return WallSlice(
        ceiling=ceiling,
        floor=screen_height - ceiling,
        tex_left=tex_x,
        tex_right=tex_x + 1,
    )


def sky_offset(angle: float, texture_width: int) -> int:
    """Horizontal offset into a repeating sky texture for a view angle."""
    turns = math.fmod(angle / (2.0 * math.pi), 1.0)
    if turns < 0:
        turns += 1.0
    return int(turns * texture_width)


def floor_row(
    y: int,
    screen_width: int,
    screen_height: int,
    px: float,
    py: float,
    angle: float,
) -> tuple[np.ndarray, np.ndarray]:
    """World coordinates of the floor seen by each column of screen row y."""
    if 2 * y - screen_height <= 0:
        raise ValueError("floor rows lie below the horizon")
    row_dist = screen_height / (2.0 * y - screen_height)
    dir_x0 = math.sin(angle - FOV / 2.0)
    dir_y0 = math.cos(angle - FOV / 2.0)
    dir_x1 = math.sin(angle + FOV / 2.0)
    dir_y1 = math.cos(angle + FOV / 2.0)
    step_x = (dir_x1 - dir_x0) * row_dist / screen_width
    step_y = (dir_y1 - dir_y0) * row_dist / screen_width
    columns = np.arange(screen_width, dtype=np.float64)
    xs = px + dir_x0 * row_dist + columns * step_x
    ys = py + dir_y0 * row_dist + columns * step_y
    return xs, ys