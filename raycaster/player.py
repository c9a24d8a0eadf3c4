"""The player: position, heading and collision-checked movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycaster.world import SPEED, WALL, WorldMap

DEFAULT_SENSITIVITY = 0.0025


@dataclass
class Player:
    x: float = 14.7
    y: float = 5.09
    angle: float = 0.0

    def move(self, dx: float, dy: float, world: WorldMap) -> bool:
        """Step by (dx, dy) unless the target cell is a wall; report success."""
        new_x = self.x + dx
        new_y = self.y + dy
        if world.at(int(new_x), int(new_y)) == WALL:
            return False
        self.x = new_x
        self.y = new_y
        return True

    def turn(self, delta_x: float, sensitivity: float = DEFAULT_SENSITIVITY) -> None:
        """Rotate by a horizontal mouse delta, keeping the angle in [0, 2*pi]."""
        self.angle += delta_x * sensitivity
        if self.angle < 0:
            self.angle += 2 * math.pi
        if self.angle > 2 * math.pi:
            self.angle -= 2 * math.pi

    def walk(self, forward: float, strafe: float, dt: float, world: WorldMap) -> None:
        """Move forward/back and sideways for dt seconds at walking speed."""
        step = SPEED * dt
        sin_a = math.sin(self.angle)
        cos_a = math.cos(self.angle)
        if forward:
            self.move(sin_a * step * forward, cos_a * step * forward, world)
        if strafe:
            self.move(cos_a * step * strafe, -sin_a * step * strafe, world)