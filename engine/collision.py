"""
Collision Detector - Finds obstacles touching the spaceship.

An obstacle touches the ship when it has reached the collision zone at
the bottom of the field and is horizontally close to the ship. Colliding
does not remove the obstacle: it stays until it falls off the field, and
is reported again on every evaluation while it overlaps the ship.
"""

from dataclasses import dataclass
from typing import Optional

from config import COLLISION_SETTINGS, CollisionSettings
from models.game_state import GameState
from models.obstacle import Obstacle, ObstacleType


@dataclass
class Collision:
    """One obstacle found touching the ship."""
    obstacle: Obstacle
    spaceship_x: float

    @property
    def type(self) -> ObstacleType:
        return self.obstacle.type

    @property
    def is_fatal(self) -> bool:
        return self.obstacle.type == ObstacleType.ASTEROID

    @property
    def is_scoring(self) -> bool:
        return self.obstacle.type == ObstacleType.STAR


class CollisionDetector:
    """Evaluates spaceship/obstacle proximity."""

    def __init__(self, settings: Optional[CollisionSettings] = None):
        self._settings = settings or COLLISION_SETTINGS

    def is_colliding(self, obstacle: Obstacle, spaceship_x: float) -> bool:
        """True if the obstacle is in the collision zone near the ship."""
        return (
            obstacle.y >= self._settings.zone_y
            and abs(obstacle.x - spaceship_x) < self._settings.x_tolerance
        )

    def detect(self, state: GameState) -> list[Collision]:
        """
        Find every colliding obstacle, in collection order.

        Each one is reported independently; effects are applied by the caller.
        """
        ship_x = state.spaceship.x
        return [
            Collision(obstacle=obstacle, spaceship_x=ship_x)
            for obstacle in state.obstacles
            if self.is_colliding(obstacle, ship_x)
        ]
