"""
Unit tests for RandomDraw obstacle type selection.
"""

import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from engine.randomness import RandomDraw
from models.obstacle import ObstacleType


def _scripted_rng(*values):
    """A random source that returns the given draws in order."""
    rng = MagicMock(spec=random.Random)
    rng.random.side_effect = list(values)
    return rng


class TestRandomDrawPolicy:
    """Tests for the two-stage draw."""

    def test_high_first_draw_is_star(self):
        """A first draw above 0.7 should pick a star."""
        draw = RandomDraw(_scripted_rng(0.71))
        assert draw.obstacle_type() == ObstacleType.STAR

    def test_star_consumes_only_one_draw(self):
        """The second draw should not be taken when the first picks a star."""
        rng = _scripted_rng(0.9, 0.1)
        draw = RandomDraw(rng)

        draw.obstacle_type()

        assert rng.random.call_count == 1

    def test_threshold_is_exclusive(self):
        """Exactly 0.7 is not a star."""
        draw = RandomDraw(_scripted_rng(0.7, 0.9))
        assert draw.obstacle_type() == ObstacleType.ALIEN

    def test_second_draw_above_half_is_alien(self):
        """Second draw above 0.5 should pick an alien."""
        draw = RandomDraw(_scripted_rng(0.2, 0.51))
        assert draw.obstacle_type() == ObstacleType.ALIEN

    def test_second_draw_at_or_below_half_is_asteroid(self):
        """Second draw of 0.5 or less should pick an asteroid."""
        draw = RandomDraw(_scripted_rng(0.2, 0.5))
        assert draw.obstacle_type() == ObstacleType.ASTEROID

    def test_non_star_consumes_two_draws(self):
        """Alien and asteroid picks should consume both draws."""
        rng = _scripted_rng(0.1, 0.1)
        draw = RandomDraw(rng)

        draw.obstacle_type()

        assert rng.random.call_count == 2


class TestRandomDrawDistribution:
    """Statistical tests over many draws."""

    def test_deterministic_with_seed(self):
        """Same seed should produce the same sequence."""
        d1 = RandomDraw(random.Random(42))
        d2 = RandomDraw(random.Random(42))

        assert [d1.obstacle_type() for _ in range(100)] == \
               [d2.obstacle_type() for _ in range(100)]

    def test_proportions_converge(self):
        """Star 30%, Alien 35%, Asteroid 35%."""
        draw = RandomDraw(random.Random(1234))
        n = 100_000

        counts = Counter(draw.obstacle_type() for _ in range(n))

        assert counts[ObstacleType.STAR] / n == pytest.approx(0.30, abs=0.01)
        assert counts[ObstacleType.ALIEN] / n == pytest.approx(0.35, abs=0.01)
        assert counts[ObstacleType.ASTEROID] / n == pytest.approx(0.35, abs=0.01)

    def test_uniform_in_unit_interval(self):
        """uniform() should stay in [0, 1)."""
        draw = RandomDraw(random.Random(5))
        for _ in range(1000):
            assert 0.0 <= draw.uniform() < 1.0
