"""
pillar.py: The scrolling stream of pipes and its difficulty ramp.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from .constants import (
    BIRD_SIZE, GAME_HEIGHT, GAME_WIDTH, PIPE_INIT_SPACE, PIPE_INIT_SPEED,
    PIPE_MAX_HEIGHT, PIPE_MIN_HEIGHT, PIPE_SPEED_STEP, PIPE_SPEED_STEP_EVERY,
    PIPE_WIDTH
)
from .data_models import BoundingBox, Pipe, Scoreboard

logger = logging.getLogger(__name__)


@dataclass
class Pillar:
    """
    Ordered stream of pipes, oldest (leftmost) first.

    New pipes are only ever appended at x = GAME_WIDTH, so the stream stays
    sorted by x. The stream is never empty once constructed.
    """
    rng: random.Random = field(default_factory=random.Random)
    speed: float = PIPE_INIT_SPEED
    space: float = PIPE_INIT_SPACE
    pipes: Deque[Pipe] = field(default_factory=deque)

    def __post_init__(self):
        if not self.pipes:
            self._spawn_pipe()

    def _draw_height(self) -> int:
        return self.rng.randint(PIPE_MIN_HEIGHT, PIPE_MAX_HEIGHT)

    def _spawn_pipe(self):
        """Appends a pipe off-screen to the right, hanging from the top or rising from the bottom."""
        from_top = self._draw_height() % 2
        height = self._draw_height()
        if from_top:
            gap_y = height - PIPE_MAX_HEIGHT
        else:
            gap_y = GAME_HEIGHT - height
        self.pipes.append(Pipe(x=float(GAME_WIDTH), gap_y=float(gap_y)))

    def update(self, scoreboard: Scoreboard):
        """
        Scrolls every pipe left, retires pipes that left the screen (scoring
        one point each) and spawns the next pipe once the spacing allows.
        """
        assert self.pipes, "at least one pipe is needed"

        for pipe in self.pipes:
            pipe.x -= self.speed

        while self.pipes and self.pipes[0].x < -PIPE_WIDTH:
            self.pipes.popleft()
            score = scoreboard.increment()
            if score % PIPE_SPEED_STEP_EVERY == 0:
                self.speed += PIPE_SPEED_STEP
                logger.debug("Score %d reached, pipe speed now %.1f", score, self.speed)

        if not self.pipes or self.pipes[-1].x < GAME_WIDTH - PIPE_WIDTH - self.space:
            self._spawn_pipe()
            self.space = self._draw_height() / PIPE_MAX_HEIGHT * 2 * BIRD_SIZE

    def reset(self):
        self.speed = PIPE_INIT_SPEED
        self.space = PIPE_INIT_SPACE
        self.pipes.clear()
        self._spawn_pipe()

    def pipe_boxes(self) -> List[BoundingBox]:
        return [
            BoundingBox(pipe.x, pipe.gap_y, PIPE_WIDTH, PIPE_MAX_HEIGHT)
            for pipe in self.pipes
        ]
