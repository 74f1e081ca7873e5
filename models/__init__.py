"""
Galaxy Adventure Models

Plain data carried between the engine and the GUI.
"""

from models.obstacle import Obstacle, ObstacleType, Spaceship
from models.game_state import GameState, GamePhase
from models.schemas import ObstacleView, SessionSnapshot

__all__ = [
    "Obstacle",
    "ObstacleType",
    "Spaceship",
    "GameState",
    "GamePhase",
    "ObstacleView",
    "SessionSnapshot",
]
