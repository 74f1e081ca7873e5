"""
Motion System - Moves obstacles down and ramps up the speed.
"""

import logging
from typing import Optional

from config import COLLISION_SETTINGS, CollisionSettings
from models.game_state import GameState
from models.obstacle import Obstacle

logger = logging.getLogger(__name__)


class MotionSystem:
    """
    Advances every obstacle by the current speed, culls the ones that
    left the field, then adds the speed increase once per tick.
    """

    def __init__(self, settings: Optional[CollisionSettings] = None):
        self._settings = settings or COLLISION_SETTINGS

    def advance(self, state: GameState) -> list[Obstacle]:
        """
        Run one motion step on the state.

        Returns:
            The obstacles that were culled this step.
        """
        for obstacle in state.obstacles:
            obstacle.y += state.speed

        kept = []
        culled = []
        for obstacle in state.obstacles:
            if obstacle.y > self._settings.cull_y:
                culled.append(obstacle)
            else:
                kept.append(obstacle)
        state.obstacles[:] = kept

        state.speed += state.speed_increase

        if culled:
            logger.debug("Culled %d obstacle(s)", len(culled))
        return culled
