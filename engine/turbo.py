"""
Turbo Boost Controller - Temporary speed boost after catching a star.

Every activation schedules its own deactivation. Earlier deactivations
are not cancelled when a new boost starts, so with overlapping boosts the
first deactivation to fire ends the boost for all of them.
"""

import enum
import logging
from typing import Callable, Optional

from config import (
    DIFFICULTY_SETTINGS, TIMER_SETTINGS, DifficultySettings, TimerSettings,
)
from models.game_state import GameState

logger = logging.getLogger(__name__)


class TurboState(enum.Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class TurboBoostController:
    """
    Turbo state machine: INACTIVE -> ACTIVE on a star, back to INACTIVE
    when a deactivation timer fires.

    Args:
        scheduler: QtScheduler or VirtualScheduler used for deactivation timers
        on_change: Called with the new turbo flag after every transition
    """

    def __init__(self, scheduler, on_change: Optional[Callable[[bool], None]] = None,
                 difficulty: Optional[DifficultySettings] = None,
                 timers: Optional[TimerSettings] = None):
        self._scheduler = scheduler
        self._on_change = on_change
        self._difficulty = difficulty or DIFFICULTY_SETTINGS
        self._timers = timers or TIMER_SETTINGS
        self._pending: list = []

    @staticmethod
    def state_of(state: GameState) -> TurboState:
        return TurboState.ACTIVE if state.turbo_active else TurboState.INACTIVE

    @property
    def pending_count(self) -> int:
        """Number of deactivation timers that have not fired yet."""
        return len(self._pending)

    def activate(self, state: GameState) -> None:
        """Start (or restart) a boost and schedule its deactivation."""
        state.turbo_active = True
        state.speed = self._difficulty.turbo_speed

        handle = None

        def expire() -> None:
            if handle in self._pending:
                self._pending.remove(handle)
            self.deactivate(state)

        handle = self._scheduler.call_later(self._timers.turbo_duration_ms, expire)
        self._pending.append(handle)
        logger.debug("Turbo on (speed=%.1f, %d pending)",
                     state.speed, len(self._pending))
        self._notify(True)

    def deactivate(self, state: GameState) -> None:
        """End the boost and drop to the post-turbo speed."""
        state.turbo_active = False
        state.speed = self._difficulty.post_turbo_speed
        logger.debug("Turbo off (speed=%.1f)", state.speed)
        self._notify(False)

    def cancel_pending(self) -> None:
        """Cancel every deactivation timer that has not fired."""
        for handle in self._pending:
            self._scheduler.cancel(handle)
        self._pending.clear()

    def _notify(self, active: bool) -> None:
        if self._on_change is not None:
            self._on_change(active)
