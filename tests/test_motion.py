"""
Unit tests for the MotionSystem.
"""

import random

import pytest

from engine.motion import MotionSystem
from engine.randomness import RandomDraw
from engine.spawner import ObstacleSpawner
from models.game_state import GamePhase, GameState
from models.obstacle import Obstacle, ObstacleType


class TestMotionSystem:
    """Tests for obstacle motion and culling."""

    def setup_method(self):
        self.state = GameState.initial(phase=GamePhase.PLAYING)
        self.motion = MotionSystem()

    def test_obstacles_move_by_speed(self):
        """Every obstacle moves down by the current speed."""
        self.state.obstacles = [
            Obstacle(10, 0, ObstacleType.STAR),
            Obstacle(20, 50, ObstacleType.ALIEN),
        ]

        self.motion.advance(self.state)

        assert [o.y for o in self.state.obstacles] == [2.0, 52.0]

    def test_speed_increases_once_per_tick(self):
        """Speed grows by speed_increase per tick, not per obstacle."""
        self.state.obstacles = [Obstacle(i * 10, 0, ObstacleType.STAR) for i in range(5)]

        self.motion.advance(self.state)

        assert self.state.speed == pytest.approx(2.05)

    def test_new_speed_applies_on_next_tick(self):
        """Movement uses the speed from before the increase."""
        self.state.obstacles = [Obstacle(10, 0, ObstacleType.ASTEROID)]

        self.motion.advance(self.state)
        self.motion.advance(self.state)

        assert self.state.obstacles[0].y == pytest.approx(2.0 + 2.05)

    def test_obstacles_past_bottom_are_culled(self):
        """Obstacles with y > 100 are removed after moving."""
        self.state.obstacles = [
            Obstacle(10, 99, ObstacleType.ASTEROID),
            Obstacle(20, 10, ObstacleType.STAR),
        ]

        culled = self.motion.advance(self.state)

        assert len(culled) == 1
        assert culled[0].x == 10
        assert [o.x for o in self.state.obstacles] == [20]

    def test_obstacle_exactly_at_bottom_is_kept(self):
        """y == 100 is still on the field."""
        self.state.obstacles = [Obstacle(10, 98, ObstacleType.ALIEN)]

        self.motion.advance(self.state)

        assert len(self.state.obstacles) == 1
        assert self.state.obstacles[0].y == 100

    def test_positions_never_decrease_and_offscreen_are_gone(self):
        """Across many ticks, y only grows and nothing past 100 survives."""
        spawner = ObstacleSpawner(RandomDraw(random.Random(3)))
        last_y = {}

        for tick in range(300):
            if tick % 10 == 0:
                spawner.spawn(self.state)
            for obstacle in self.motion.advance(self.state):
                last_y.pop(id(obstacle), None)

            for obstacle in self.state.obstacles:
                assert obstacle.y <= 100
                assert obstacle.y >= last_y.get(id(obstacle), 0)
                last_y[id(obstacle)] = obstacle.y
