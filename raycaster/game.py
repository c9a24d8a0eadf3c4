"""The game loop: window, input handling and frame pacing."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import pygame

from raycaster.player import Player
from raycaster.render import Renderer, Textures
from raycaster.world import WorldMap

TITLE = "Raycasting OOP"
FRAME_RATE = 60


class Game:
    """Holds the world and player and drives them from keyboard and mouse."""

    def __init__(
        self,
        graphics_dir: str | Path = "Graphics",
        world: WorldMap | None = None,
        player: Player | None = None,
    ) -> None:
        self.graphics_dir = Path(graphics_dir)
        self.world = world if world is not None else WorldMap()
        self.player = player if player is not None else Player()
        self.running = True

    def handle_mouse(self, delta_x: float) -> None:
        """Turn the player by a horizontal mouse movement."""
        self.player.turn(delta_x)

    def handle_keys(self, pressed: Any, dt: float) -> None:
        """Apply the state of the movement and quit keys for dt seconds."""
        moves = (
            (pygame.K_w, 1.0, 0.0),
            (pygame.K_s, -1.0, 0.0),
            (pygame.K_a, 0.0, -1.0),
            (pygame.K_d, 0.0, 1.0),
        )
        for key, forward, strafe in moves:
            if pressed[key]:
                self.player.walk(forward, strafe, dt, self.world)
        if pressed[pygame.K_ESCAPE]:
            self.running = False

    def run(self) -> None:
        """Open a fullscreen window and play until it is closed."""
        textures = Textures.load(self.graphics_dir)
        pygame.init()
        try:
            window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pygame.display.set_caption(TITLE)
            width, height = window.get_size()
            centre = (width // 2, height // 2)
            pygame.mouse.set_visible(False)
            pygame.mouse.set_pos(centre)
            renderer = Renderer(textures, width, height)
            clock = pygame.time.Clock()
            clock.tick()
            while self.running:
                dt = clock.tick(FRAME_RATE) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                mouse_x, _ = pygame.mouse.get_pos()
                self.handle_mouse(mouse_x - centre[0])
                pygame.mouse.set_pos(centre)
                self.handle_keys(pygame.key.get_pressed(), dt)
                if not self.running:
                    break
                renderer.render(window, self.player, self.world)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="A first-person ray-casting maze.")
    parser.add_argument(
        "--graphics",
        default="Graphics",
        help="directory holding sky.png, floor.png and wall.png",
    )
    args = parser.parse_args(argv)
    try:
        Game(graphics_dir=args.graphics).run()
    except (FileNotFoundError, pygame.error) as exc:
        print(f"[Error] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())