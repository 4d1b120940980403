"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GameStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    PAUSE = "pause"
    ENDING = "ending"


@dataclass
class Pipe:
    """
    One obstacle gate. ``gap_y`` is the top edge of the gate's pipe and is
    fixed at creation; only ``x`` moves.
    """
    x: float
    gap_y: float

    def __setattr__(self, name, value):
        if name == "gap_y" and "gap_y" in self.__dict__:
            raise AttributeError("gap_y is fixed once the pipe is created")
        super().__setattr__(name, value)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box used by the collision check."""
    left: float
    top: float
    width: float
    height: float

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self.left, self.left + self.width)

    @property
    def y_range(self) -> Tuple[float, float]:
        return (self.top, self.top + self.height)


@dataclass
class InputEvents:
    """Edge-triggered inputs collected for a single tick."""
    jump: bool = False
    pause: bool = False
    start: bool = False
    restart: bool = False
    quit: bool = False


@dataclass
class Scoreboard:
    """Score of the current run plus the best score seen by this process."""
    score: int = 0
    best: int = 0

    def increment(self) -> int:
        self.score += 1
        return self.score

    def record_best(self):
        self.best = max(self.best, self.score)

    def reset(self):
        self.score = 0
