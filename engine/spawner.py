"""
Obstacle Spawner - Adds one obstacle at the top of the lane per spawn tick.
"""

import logging
from typing import Optional

from config import SPAWN_SETTINGS, SpawnSettings
from engine.randomness import RandomDraw
from models.game_state import GameState
from models.obstacle import Obstacle

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """
    Creates obstacles with a uniform x in [0, 100) and y = 0.

    The x draw is taken before the type draws, so a seeded RandomDraw
    always yields the same sequence of obstacles.
    """

    def __init__(self, draw: Optional[RandomDraw] = None,
                 settings: Optional[SpawnSettings] = None):
        self._settings = settings or SPAWN_SETTINGS
        self._draw = draw or RandomDraw(settings=self._settings)

    def spawn(self, state: GameState) -> Obstacle:
        """Append a new obstacle to the state and return it."""
        obstacle = Obstacle(
            x=self._draw.uniform() * self._settings.field_width,
            y=0.0,
            type=self._draw.obstacle_type(),
        )
        state.obstacles.append(obstacle)
        logger.debug("Spawned %s at x=%.1f", obstacle.type.value, obstacle.x)
        return obstacle
