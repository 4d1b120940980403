"""
input_handler.py: Turns a frame's pygame events into edge-triggered game inputs.
"""

from typing import Iterable

import pygame

from .constants import KEY_JUMP, KEY_PAUSE, KEY_QUIT
from .data_models import InputEvents


def poll_input(events: Iterable[pygame.event.Event]) -> InputEvents:
    """
    The jump key doubles as start and restart; the session decides which
    one applies from its current status.
    """
    inputs = InputEvents()
    for event in events:
        if event.type == pygame.QUIT:
            inputs.quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == KEY_JUMP:
                inputs.jump = inputs.start = inputs.restart = True
            elif event.key == KEY_PAUSE:
                inputs.pause = True
            elif event.key == KEY_QUIT:
                inputs.quit = True
    return inputs
