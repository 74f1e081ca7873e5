"""
Pydantic schemas for the read model handed to the presentation layer.
"""

from pydantic import BaseModel, ConfigDict, Field

from models.game_state import GamePhase, GameState
from models.obstacle import ObstacleType


class ObstacleView(BaseModel):
    """Read-only view of one obstacle."""
    model_config = ConfigDict(frozen=True)

    x: float = Field(..., ge=0, le=100)
    y: float = Field(..., ge=0, le=100)
    type: ObstacleType


class SessionSnapshot(BaseModel):
    """
    Immutable snapshot of a session.
    Emitted after every mutation for GUI updates.
    """
    model_config = ConfigDict(frozen=True)

    spaceship_x: float = Field(..., ge=0, le=100)
    obstacles: tuple[ObstacleView, ...] = ()
    score: int = Field(0, ge=0)
    speed: float = Field(..., gt=0)
    turbo_active: bool = False
    phase: GamePhase = GamePhase.LOADING

    @classmethod
    def from_state(cls, state: GameState) -> "SessionSnapshot":
        """Build a snapshot from the live aggregate."""
        return cls(
            spaceship_x=state.spaceship.x,
            obstacles=tuple(
                ObstacleView(x=o.x, y=o.y, type=o.type) for o in state.obstacles
            ),
            score=state.score,
            speed=state.speed,
            turbo_active=state.turbo_active,
            phase=state.phase,
        )

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER
