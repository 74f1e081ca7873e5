"""
Game state aggregate shared by all engine components.
"""

import enum
from dataclasses import dataclass, field
from typing import Optional

from config import GAME_SETTINGS, GameSettings
from models.obstacle import Obstacle, Spaceship


class GamePhase(enum.Enum):
    """Top-level lifecycle of a session."""
    LOADING = "loading"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """
    All mutable state of one game session.

    Engine components receive this object and read or write it in place;
    none of them keeps its own copy of these fields.
    """
    spaceship: Spaceship = field(default_factory=Spaceship)
    obstacles: list[Obstacle] = field(default_factory=list)
    score: int = 0
    speed: float = 2.0
    speed_increase: float = 0.05
    turbo_active: bool = False
    phase: GamePhase = GamePhase.LOADING

    @classmethod
    def initial(cls, settings: Optional[GameSettings] = None,
                phase: GamePhase = GamePhase.LOADING) -> "GameState":
        """Build a fresh state from settings."""
        settings = settings or GAME_SETTINGS
        return cls(
            spaceship=Spaceship(x=settings.spaceship.start_x),
            obstacles=[],
            score=0,
            speed=settings.difficulty.initial_speed,
            speed_increase=settings.difficulty.speed_increase,
            turbo_active=False,
            phase=phase,
        )

    @property
    def is_playing(self) -> bool:
        return self.phase == GamePhase.PLAYING
