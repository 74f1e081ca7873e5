"""
Unit tests for the read-model schemas and the app wiring.
"""

import random

import pytest
from pydantic import ValidationError

from app import GalaxyAdventureApp
from engine.scheduler import VirtualScheduler
from engine.session import GameSession
from models.game_state import GamePhase, GameState
from models.obstacle import Obstacle, ObstacleType
from models.schemas import SessionSnapshot


class TestSessionSnapshot:
    """Tests for snapshot construction."""

    def test_from_state_copies_fields(self):
        state = GameState.initial(phase=GamePhase.PLAYING)
        state.obstacles.append(Obstacle(12.5, 40, ObstacleType.ALIEN))
        state.score = 30
        state.turbo_active = True

        snapshot = SessionSnapshot.from_state(state)

        assert snapshot.spaceship_x == 50
        assert snapshot.score == 30
        assert snapshot.turbo_active
        assert snapshot.phase == GamePhase.PLAYING
        assert len(snapshot.obstacles) == 1
        assert snapshot.obstacles[0].type == ObstacleType.ALIEN
        assert snapshot.obstacles[0].x == 12.5

    def test_snapshot_is_detached_from_state(self):
        """Later mutations do not show up in an earlier snapshot."""
        state = GameState.initial(phase=GamePhase.PLAYING)
        state.obstacles.append(Obstacle(10, 10, ObstacleType.STAR))

        snapshot = SessionSnapshot.from_state(state)
        state.obstacles[0].y = 60
        state.spaceship.x = 0

        assert snapshot.obstacles[0].y == 10
        assert snapshot.spaceship_x == 50

    def test_snapshot_is_frozen(self):
        snapshot = SessionSnapshot.from_state(GameState.initial())
        with pytest.raises(ValidationError):
            snapshot.score = 5

    def test_is_game_over(self):
        state = GameState.initial(phase=GamePhase.GAME_OVER)
        assert SessionSnapshot.from_state(state).is_game_over


class TestAppWiring:
    """Tests for the headless application controller."""

    def setup_method(self):
        self.scheduler = VirtualScheduler()
        session = GameSession(scheduler=self.scheduler, rng=random.Random(1))
        self.app = GalaxyAdventureApp(session=session, with_window=False)

    def test_bus_commands_reach_session(self):
        """Move and restart requests on the bus drive the session."""
        self.app.start()
        self.scheduler.advance(3_000)

        self.app.event_bus.move_left_requested.emit()
        assert self.app.session.spaceship_x == 40

        self.app.event_bus.move_right_requested.emit()
        self.app.event_bus.move_right_requested.emit()
        assert self.app.session.spaceship_x == 60

        self.app.event_bus.restart_requested.emit()
        assert self.app.session.spaceship_x == 50

    def test_session_updates_reach_bus(self):
        received = []
        self.app.event_bus.phase_changed.connect(received.append)

        self.app.start()
        self.scheduler.advance(3_000)

        assert received == ["loading", "playing"]

    def test_collisions_reach_bus(self):
        received = []
        self.app.event_bus.collision_occurred.connect(received.append)
        self.app.start()
        self.scheduler.advance(3_000)
        self.app.session.state.obstacles.append(Obstacle(52, 94, ObstacleType.ALIEN))

        self.app.session.evaluate_collisions()

        assert received == [
            {"type": "alien", "x": 52, "y": 94, "spaceship_x": 50},
        ]

    def test_stop_cancels_timers(self):
        self.app.start()
        self.scheduler.advance(3_000)

        self.app.stop()

        assert self.scheduler.active_timers == []
