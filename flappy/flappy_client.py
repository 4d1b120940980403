#!/usr/bin/env python3
"""
flappy_client.py

Single-player client: pygame window, fixed-rate frame loop and rendering
around the GameSession simulation.
"""

import argparse
import random
from typing import Optional

import pygame

from .assets import load_textures
from .constants import GAME_FPS, GAME_HEIGHT, GAME_WIDTH, RESOURCE_DIR, WINDOW_TITLE
from .game_state import GameSession
from .input_handler import poll_input
from .logger import setup_logging
from .renderer import Renderer


class FlappyClient:
    def __init__(self, seed: Optional[int] = None, resource_dir: str = RESOURCE_DIR):
        pygame.init()
        self.screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.session = GameSession(rng=random.Random(seed))
        self.renderer = Renderer(self.screen, load_textures(resource_dir), resource_dir)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client loop: poll input, tick the session, draw."""
        try:
            running = True
            while running:
                self.clock.tick(GAME_FPS)

                inputs = poll_input(pygame.event.get())
                if inputs.quit:
                    running = False
                    continue

                self.session.tick(inputs)
                self.renderer.draw(self.session)
        finally:
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Side-scrolling flappy bird game.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the pipe generator (random if omitted)")
    parser.add_argument("--resources", default=RESOURCE_DIR,
                        help="directory holding textures and the font")
    parser.add_argument("--log-level", default="info",
                        help="debug, info, warning or error")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    client = FlappyClient(seed=args.seed, resource_dir=args.resources)
    print(f"Game window opened ({GAME_WIDTH}x{GAME_HEIGHT} @ {GAME_FPS} FPS).")
    client.run()
    print(f"Game closed. Best score: {client.session.best}")


if __name__ == "__main__":
    main()
