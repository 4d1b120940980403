"""
bird.py: The player-controlled bird and its per-tick integration.
"""

from .constants import (
    ACTION_NUM, BIRD_SIZE, BIRD_START_Y, BIRD_X, GAME_HEIGHT, GRAVITY,
    IDLE_SPACE, JUMP_SPEED
)
from .data_models import BoundingBox


class Bird:
    """
    Vertical kinematics of the bird. The bird never moves horizontally; its
    screen x is fixed at BIRD_X.

    Position is not clamped here: the bird may sit out of bounds for a tick
    until the game session notices via hit_top()/hit_bottom().
    """

    def __init__(self, y: float = BIRD_START_Y, velocity: float = 0.0):
        self.y = y
        self.velocity = velocity
        self.index = 0
        self.frame_counter = 0

    def update(self):
        """Advance one tick: gravity, movement, animation frame."""
        self.velocity += GRAVITY
        # Once well below the floor, stop falling further but still honour a jump.
        if self.y < GAME_HEIGHT + BIRD_SIZE or self.velocity < 0:
            self.y += self.velocity

        self.frame_counter = (self.frame_counter + 1) % IDLE_SPACE
        if self.frame_counter == 0:
            self.index = (self.index + 1) % ACTION_NUM

    def jump(self):
        self.velocity = -JUMP_SPEED

    def reset(self):
        self.y = BIRD_START_Y
        self.velocity = 0.0
        self.index = 0

    def hit_top(self) -> bool:
        return self.y < 0

    def hit_bottom(self) -> bool:
        return self.y + BIRD_SIZE > GAME_HEIGHT

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(BIRD_X, self.y, BIRD_SIZE, BIRD_SIZE)
