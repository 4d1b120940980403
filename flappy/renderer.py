"""
renderer.py: Draws the session state onto the pygame window.
"""

import os
from typing import List, Optional

import pygame

from .assets import Textures
from .constants import (
    BIRD_X, FONT_FILE, FONT_SIZE, GAME_HEIGHT, GAME_WIDTH, OVERLAY_COLOR,
    TEXT_COLOR
)
from .data_models import GameStatus
from .game_state import GameSession

PENDING_TEXT = [
    "<SPACE> -> JUMP",
    "<ESC> -> PAUSE",
    "<Q> -> QUIT",
    "press <SPACE> to start",
]
PAUSE_TEXT = [
    "Paused",
    "press <ESC> to resume",
]
ENDING_TEXT = [
    "Game Over",
    "press <SPACE> to continue",
    "press <Q> to quit",
]


class Renderer:
    def __init__(self, screen: pygame.Surface, textures: Textures,
                 resource_dir: Optional[str] = None):
        self.screen = screen
        self.textures = textures
        font_path = os.path.join(resource_dir, FONT_FILE) if resource_dir else None
        if font_path is None or not os.path.isfile(font_path):
            font_path = None  # pygame's default font
        self.font = pygame.font.Font(font_path, FONT_SIZE)

    def draw(self, session: GameSession):
        """Renders one frame and flips the display."""
        screen = self.screen
        screen.blit(self.textures.background, (0, 0))

        for pipe in session.pillar.pipes:
            screen.blit(self.textures.pipe, (round(pipe.x), round(pipe.gap_y)))

        bird = session.bird
        screen.blit(self.textures.bird_frames[bird.index], (BIRD_X, round(bird.y)))

        self._draw_score(session.score, session.best)

        if session.status is GameStatus.PENDING:
            self._draw_center(PENDING_TEXT)
        elif session.status is GameStatus.PAUSE:
            self._draw_center(PAUSE_TEXT)
        elif session.status is GameStatus.ENDING:
            self._draw_center(ENDING_TEXT)

        pygame.display.flip()

    def _draw_score(self, score: int, best: int):
        score_surf = self.font.render(f"score: {score}", True, TEXT_COLOR)
        self.screen.blit(score_surf, (GAME_WIDTH - score_surf.get_width() - 10, 0))
        best_surf = self.font.render(f"best: {best}", True, TEXT_COLOR)
        self.screen.blit(best_surf, (GAME_WIDTH - best_surf.get_width() - 10,
                                     score_surf.get_height()))

    def _draw_center(self, lines: List[str]):
        line_height = self.font.get_linesize()
        y = (GAME_HEIGHT - line_height * len(lines)) // 2
        for line in lines:
            surf = self.font.render(line, True, OVERLAY_COLOR)
            self.screen.blit(surf, ((GAME_WIDTH - surf.get_width()) // 2, y))
            y += line_height
