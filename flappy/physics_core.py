"""
physics_core.py: Collision logic between the bird and the pipe stream.
"""

from typing import Tuple

from .bird import Bird
from .constants import COLLISION_TOLERANCE
from .pillar import Pillar


def overlap_1d(range1: Tuple[float, float], range2: Tuple[float, float]) -> bool:
    """
    Two closed ranges overlap unless one ends less than COLLISION_TOLERANCE
    past the start of the other. Merely touching does not count.
    """
    return not (
        range1[1] - range2[0] < COLLISION_TOLERANCE
        or range2[1] - range1[0] < COLLISION_TOLERANCE
    )


def check_collision(bird: Bird, pillar: Pillar) -> bool:
    """Returns True as soon as any pipe overlaps the bird on both axes."""
    bird_box = bird.bounding_box()
    for pipe_box in pillar.pipe_boxes():
        if (
            overlap_1d(bird_box.x_range, pipe_box.x_range)
            and overlap_1d(bird_box.y_range, pipe_box.y_range)
        ):
            return True
    return False
