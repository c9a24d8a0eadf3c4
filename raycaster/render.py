"""Drawing of the floor, sky, textured walls and minimap onto a surface."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pygame

from raycaster.player import Player
from raycaster.world import (
    WALL,
    WallSlice,
    WorldMap,
    base_angles,
    floor_row,
    sky_offset,
    wall_slice,
)

BACKGROUND = pygame.Color(0, 0, 255)
MINIMAP_SCALE = 4
MINIMAP_OFFSET = (10, 10)
MINIMAP_WALL = pygame.Color(255, 255, 255)
MINIMAP_FLOOR = pygame.Color(70, 70, 70)
MINIMAP_PLAYER = pygame.Color(255, 0, 0)

TEXTURE_FILES = ("sky.png", "floor.png", "wall.png")


@dataclass
class Textures:
    """The three images a frame is built from."""

    sky: pygame.Surface
    floor: pygame.Surface
    wall: pygame.Surface

    @classmethod
    def load(cls, directory: str | Path) -> Textures:
        """Load sky.png, floor.png and wall.png from a directory."""
        base = Path(directory)
        images = []
        for name in TEXTURE_FILES:
            path = base / name
            if not path.is_file():
                raise FileNotFoundError(f"Failed to load {name} from {base}")
            images.append(pygame.image.load(str(path)))
        sky, floor, wall = images
        return cls(sky=sky, floor=floor, wall=wall)


def _new_surface(size: tuple[int, int]) -> pygame.Surface:
    return pygame.Surface(size, 0, 32)


class Renderer:
    """Renders frames of a fixed size from a set of textures."""

    def __init__(self, textures: Textures, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen size must be positive")
        self.textures = textures
        self.width = width
        self.height = height
        self.base_angles = base_angles(width)
        self._floor = pygame.surfarray.array3d(textures.floor)
        self._wall = pygame.surfarray.array3d(textures.wall)

    def draw_floor(self, surface: pygame.Surface, player: Player) -> None:
        """Fill the lower half of the screen with the perspective floor."""
        mid = self.height // 2
        rows = range(mid + 1, self.height)
        if not rows:
            return
        floor_w, floor_h = self._floor.shape[:2]
        band = np.empty((self.width, len(rows), 3), dtype=np.uint8)
        for index, y in enumerate(rows):
            xs, ys = floor_row(y, self.width, self.height, player.x, player.y, player.angle)
            tx = np.mod(np.trunc(xs * floor_w).astype(np.int64), floor_w)
            ty = np.mod(np.trunc(ys * floor_h).astype(np.int64), floor_h)
            band[:, index] = self._floor[tx, ty]
        strip = _new_surface((self.width, len(rows)))
        pygame.surfarray.blit_array(strip, band)
        surface.blit(strip, (0, mid + 1))

    def draw_sky(self, surface: pygame.Surface, angle: float) -> None:
        """Draw the repeating sky across the upper half, scrolled by angle."""
        sky = self.textures.sky
        tex_w, tex_h = sky.get_size()
        offset = sky_offset(angle, tex_w)
        strip = _new_surface((self.width, tex_h))
        x = -offset
        while x < self.width:
            strip.blit(sky, (x, 0))
            x += tex_w
        half = self.height // 2
        if half <= 0:
            return
        surface.blit(pygame.transform.scale(strip, (self.width, half)), (0, 0))

    def draw_walls(
        self, surface: pygame.Surface, player: Player, world: WorldMap
    ) -> list[WallSlice]:
        """Cast one ray per column and draw the textured wall slices."""
        wall_w, wall_h = self._wall.shape[:2]
        frame = pygame.surfarray.array3d(surface)
        slices = []
        for column, offset in enumerate(self.base_angles):
            hit = world.cast_ray(player.x, player.y, offset + player.angle)
            piece = wall_slice(hit, self.height, wall_w)
            slices.append(piece)
            top = max(0, math.ceil(piece.ceiling - 0.5))
            bottom = min(self.height, math.ceil(piece.floor - 0.5))
            if top >= bottom:
                continue
            rows = np.arange(top, bottom, dtype=np.float64)
            span = piece.floor - piece.ceiling
            v = ((rows + 0.5 - piece.ceiling) / span * wall_h).astype(np.int64)
            np.clip(v, 0, wall_h - 1, out=v)
            frame[column, top:bottom] = self._wall[piece.tex_left % wall_w, v]
        pygame.surfarray.blit_array(surface, frame)
        return slices

    def draw_minimap(self, surface: pygame.Surface, player: Player, world: WorldMap) -> None:
        """Draw the map grid and the player's position in the top-left corner."""
        off_x, off_y = MINIMAP_OFFSET
        tile = MINIMAP_SCALE - 1
        for y, row in enumerate(world.rows):
            for x, cell in enumerate(row):
                colour = MINIMAP_WALL if cell == WALL else MINIMAP_FLOOR
                rect = pygame.Rect(off_x + x * MINIMAP_SCALE, off_y + y * MINIMAP_SCALE, tile, tile)
                surface.fill(colour, rect)
        centre = (off_x + player.x * MINIMAP_SCALE, off_y + player.y * MINIMAP_SCALE)
        pygame.draw.circle(surface, MINIMAP_PLAYER, centre, MINIMAP_SCALE / 2.0)

    def render(self, surface: pygame.Surface, player: Player, world: WorldMap) -> None:
        """Draw a whole frame."""
        surface.fill(BACKGROUND)
        self.draw_floor(surface, player)
        self.draw_sky(surface, player.angle)
        self.draw_walls(surface, player, world)
        self.draw_minimap(surface, player, world)