"""
game_state.py: The game session, sequencing bird and pipes against player input.
"""

import logging
import random
from typing import Optional

from .bird import Bird
from .data_models import GameStatus, InputEvents, Scoreboard
from .physics_core import check_collision
from .pillar import Pillar

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns every piece of mutable game state: bird, pipes, score and status.

    The frame loop calls tick() once per frame and reads the rest through
    the accessors. Physics only advances while RUNNING.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.bird = Bird()
        self.pillar = Pillar(rng=rng if rng is not None else random.Random())
        self.scoreboard = Scoreboard()
        self._status = GameStatus.PENDING

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def best(self) -> int:
        return max(self.scoreboard.best, self.scoreboard.score)

    def _set_status(self, status: GameStatus):
        logger.info("Game status %s -> %s (score %d)",
                    self._status.name, status.name, self.scoreboard.score)
        self._status = status

    def tick(self, events: InputEvents):
        """Applies this frame's input, advances physics and evaluates transitions."""
        if self._status is GameStatus.PENDING:
            if events.start:
                self._set_status(GameStatus.RUNNING)

        elif self._status is GameStatus.RUNNING:
            if events.pause:
                self._set_status(GameStatus.PAUSE)
                return
            if events.jump:
                self.bird.jump()
            self._step()

        elif self._status is GameStatus.PAUSE:
            if events.pause:
                self._set_status(GameStatus.RUNNING)

        elif self._status is GameStatus.ENDING:
            if events.restart:
                self.restart()

    def _step(self):
        self.bird.update()
        self.pillar.update(self.scoreboard)

        bird = self.bird
        if bird.hit_top() or bird.hit_bottom() or check_collision(bird, self.pillar):
            self.scoreboard.record_best()
            self._set_status(GameStatus.ENDING)

    def restart(self):
        """Resets bird, pipes and score, then resumes play."""
        self.bird.reset()
        self.pillar.reset()
        self.scoreboard.reset()
        self._set_status(GameStatus.RUNNING)
