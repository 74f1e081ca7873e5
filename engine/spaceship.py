"""
Spaceship Controller - Bounded lateral movement of the player token.
"""

import enum
from typing import Optional

from config import SPACESHIP_SETTINGS, SpaceshipSettings
from models.game_state import GameState


class Direction(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


class SpaceshipController:
    """
    Moves the ship by a fixed step, clamped to the field bounds.

    Clamping is the only guard: the move itself has no phase
    precondition. Callers decide when input is accepted.
    """

    def __init__(self, settings: Optional[SpaceshipSettings] = None):
        self._settings = settings or SPACESHIP_SETTINGS

    def move(self, state: GameState, direction: Direction) -> float:
        """Move the ship one step and return its new x."""
        ship = state.spaceship
        if direction == Direction.LEFT:
            ship.x = max(self._settings.min_x, ship.x - self._settings.step)
        elif direction == Direction.RIGHT:
            ship.x = min(self._settings.max_x, ship.x + self._settings.step)
        return ship.x
