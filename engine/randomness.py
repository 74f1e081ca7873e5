"""
Random Draw - Weighted obstacle type selection.

Uses two uniform draws with a short circuit: the second draw is only
taken when the first one did not pick a star. With the default
thresholds this gives Star 30%, Alien 35%, Asteroid 35%.
"""

import random
from typing import Optional

from config import SPAWN_SETTINGS, SpawnSettings
from models.obstacle import ObstacleType


class RandomDraw:
    """
    Draws obstacle types from an injectable random source.

    Usage:
        draw = RandomDraw(random.Random(42))
        obstacle_type = draw.obstacle_type()
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 settings: Optional[SpawnSettings] = None):
        """
        Initialize the draw.

        Args:
            rng: Random source. A fresh unseeded one is used if None.
            settings: Draw thresholds (default: SPAWN_SETTINGS)
        """
        self._rng = rng if rng is not None else random.Random()
        self._settings = settings or SPAWN_SETTINGS

    def uniform(self) -> float:
        """One uniform draw in [0, 1)."""
        return self._rng.random()

    def obstacle_type(self) -> ObstacleType:
        """Draw one obstacle type."""
        if self._rng.random() > self._settings.star_threshold:
            return ObstacleType.STAR
        if self._rng.random() > self._settings.alien_threshold:
            return ObstacleType.ALIEN
        return ObstacleType.ASTEROID
