"""
assets.py: Loads the textures the renderer draws, at their fixed game sizes.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Tuple

import pygame

from .constants import (
    ACTION_NUM, BACKGROUND_COLOR, BIRD_COLOR, BIRD_SIZE, GAME_HEIGHT,
    GAME_WIDTH, PIPE_COLOR, PIPE_MAX_HEIGHT, PIPE_WIDTH, RESOURCE_DIR
)

logger = logging.getLogger(__name__)


@dataclass
class Textures:
    bird_frames: List[pygame.Surface]
    pipe: pygame.Surface
    background: pygame.Surface


def load_texture(path: str, size: Tuple[int, int], fallback_color) -> pygame.Surface:
    """
    Loads an image scaled to ``size``. A missing file yields a solid block of
    ``fallback_color`` so the game stays playable without a resource folder.
    """
    if os.path.isfile(path):
        return pygame.transform.scale(pygame.image.load(path), size)

    logger.warning("Texture %s not found, using a plain surface", path)
    surface = pygame.Surface(size)
    surface.fill(fallback_color)
    return surface


def load_textures(resource_dir: str = RESOURCE_DIR) -> Textures:
    bird_frames = [
        load_texture(os.path.join(resource_dir, f"bird-{i}.png"),
                     (BIRD_SIZE, BIRD_SIZE), BIRD_COLOR)
        for i in range(ACTION_NUM)
    ]
    pipe = load_texture(os.path.join(resource_dir, "pillar.png"),
                        (PIPE_WIDTH, PIPE_MAX_HEIGHT), PIPE_COLOR)
    background = load_texture(os.path.join(resource_dir, "background.png"),
                              (GAME_WIDTH, GAME_HEIGHT), BACKGROUND_COLOR)
    return Textures(bird_frames=bird_frames, pipe=pipe, background=background)
