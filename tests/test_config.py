"""
Unit tests for settings validation.
"""

import random

import pytest

from config import (
    CollisionSettings, DifficultySettings, GameSettings,
    SpaceshipSettings, SpawnSettings,
)
from engine.scheduler import VirtualScheduler
from engine.session import GameSession


class TestSettingsValidation:
    """Settings that would let positions leave the 0-100 field are rejected."""

    def test_defaults_are_valid(self):
        settings = GameSettings()

        assert settings.collision.cull_y == 100
        assert settings.spawn.field_width == 100

    def test_cull_line_past_field_rejected(self):
        with pytest.raises(ValueError):
            CollisionSettings(cull_y=120)

    def test_negative_star_points_rejected(self):
        with pytest.raises(ValueError):
            CollisionSettings(star_points=-10)

    def test_cull_line_inside_field_accepted(self):
        assert CollisionSettings(cull_y=95).cull_y == 95

    def test_spawn_width_past_field_rejected(self):
        with pytest.raises(ValueError):
            SpawnSettings(field_width=150)

    @pytest.mark.parametrize("kwargs", [
        {"max_x": 120},
        {"min_x": -10},
        {"start_x": 110},
        {"min_x": 60, "max_x": 40},
    ])
    def test_spaceship_bounds_outside_field_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SpaceshipSettings(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"initial_speed": 0},
        {"turbo_speed": -1},
        {"post_turbo_speed": 0},
        {"speed_increase": -0.05},
    ])
    def test_bad_speeds_rejected(self, kwargs):
        with pytest.raises(ValueError):
            DifficultySettings(**kwargs)

    def test_snapshots_hold_with_narrow_cull_line(self):
        """A session on valid custom settings always yields snapshots."""
        settings = GameSettings(collision=CollisionSettings(cull_y=60))
        scheduler = VirtualScheduler()
        session = GameSession(
            scheduler=scheduler, rng=random.Random(5), settings=settings
        )
        session.start()

        scheduler.advance(20_000)

        assert all(o.y <= 60 for o in session.snapshot().obstacles)
