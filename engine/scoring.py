"""
Score Tracker - Accumulates points on scoring events.
"""

from models.game_state import GameState


class ScoreTracker:
    """Additive scoring on the shared game state."""

    def award(self, state: GameState, points: int) -> int:
        """
        Add points to the score.

        Returns:
            The new score.
        """
        state.score += points
        return state.score
