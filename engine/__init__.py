"""
Galaxy Adventure Game Engine

Core simulation logic: spawning, motion, collisions, scoring, turbo boost
and the game lifecycle. This module contains no GUI dependencies.
"""

from engine.session import GameSession
from engine.scheduler import QtScheduler, VirtualScheduler
from engine.randomness import RandomDraw
from engine.spawner import ObstacleSpawner
from engine.motion import MotionSystem
from engine.collision import CollisionDetector, Collision
from engine.scoring import ScoreTracker
from engine.turbo import TurboBoostController, TurboState
from engine.spaceship import SpaceshipController, Direction

__all__ = [
    "GameSession",
    "QtScheduler",
    "VirtualScheduler",
    "RandomDraw",
    "ObstacleSpawner",
    "MotionSystem",
    "CollisionDetector",
    "Collision",
    "ScoreTracker",
    "TurboBoostController",
    "TurboState",
    "SpaceshipController",
    "Direction",
]
