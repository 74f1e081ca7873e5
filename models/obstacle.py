"""
Obstacle and spaceship models for the play field.

Positions are percentages of the play field: x runs left to right and
y runs top to bottom, both from 0 to 100.
"""

import enum
from dataclasses import dataclass


class ObstacleType(enum.Enum):
    """
    The kind of object falling down the lane.

    - ASTEROID: ends the game on contact
    - STAR: awards points and a turbo boost on contact
    - ALIEN: takes up space but has no effect on contact
    """
    ASTEROID = "asteroid"
    STAR = "star"
    ALIEN = "alien"


@dataclass
class Obstacle:
    """A falling obstacle. Only the motion system changes y."""
    x: float
    y: float
    type: ObstacleType


@dataclass
class Spaceship:
    """The player token, fixed at the bottom of the field."""
    x: float = 50.0
