"""
Unit tests for the SpaceshipController and ScoreTracker.
"""

from engine.scoring import ScoreTracker
from engine.spaceship import Direction, SpaceshipController
from models.game_state import GamePhase, GameState


class TestSpaceshipController:
    """Tests for bounded lateral movement."""

    def setup_method(self):
        self.controller = SpaceshipController()
        self.state = GameState.initial(phase=GamePhase.PLAYING)

    def test_starts_centred(self):
        assert self.state.spaceship.x == 50

    def test_move_steps_by_ten(self):
        assert self.controller.move(self.state, Direction.LEFT) == 40
        assert self.controller.move(self.state, Direction.RIGHT) == 50
        assert self.controller.move(self.state, Direction.RIGHT) == 60

    def test_left_clamps_at_zero(self):
        """Moving left from 5 stops at 0."""
        self.state.spaceship.x = 5

        self.controller.move(self.state, Direction.LEFT)

        assert self.state.spaceship.x == 0

    def test_right_clamps_at_hundred(self):
        """Moving right from 95 stops at 100."""
        self.state.spaceship.x = 95

        self.controller.move(self.state, Direction.RIGHT)

        assert self.state.spaceship.x == 100

    def test_repeated_moves_stay_in_bounds(self):
        for _ in range(20):
            self.controller.move(self.state, Direction.LEFT)
        assert self.state.spaceship.x == 0

        for _ in range(20):
            self.controller.move(self.state, Direction.RIGHT)
        assert self.state.spaceship.x == 100

    def test_move_has_no_phase_precondition(self):
        """The move itself works in any phase; callers gate input."""
        self.state.phase = GamePhase.GAME_OVER

        self.controller.move(self.state, Direction.LEFT)

        assert self.state.spaceship.x == 40


class TestScoreTracker:
    """Tests for additive scoring."""

    def setup_method(self):
        self.tracker = ScoreTracker()
        self.state = GameState.initial(phase=GamePhase.PLAYING)

    def test_award_adds_points(self):
        assert self.tracker.award(self.state, 10) == 10
        assert self.tracker.award(self.state, 10) == 20

    def test_award_is_plain_addition(self):
        """The amount is added as given."""
        self.tracker.award(self.state, 10)

        self.tracker.award(self.state, -5)

        assert self.state.score == 5
