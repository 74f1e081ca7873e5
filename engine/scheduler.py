"""
Schedulers - Timer sources for the game session.

Two interchangeable implementations:

- QtScheduler drives callbacks from QTimers on the Qt event loop.
- VirtualScheduler drives them from a virtual millisecond clock that only
  moves when advance() is called. Tests and headless runs use it to step
  the simulation deterministically.

Both hand back timer handles with the QTimer methods the session relies
on: isActive() and stop(). Handles are cancelled through the scheduler
with cancel().
"""

import heapq
import itertools
from typing import Callable, Optional

from PySide6.QtCore import QObject, Qt, QTimer


class QtScheduler(QObject):
    """
    Creates QTimers parented to this object.

    Single-shot timers delete themselves after firing; callers must drop
    their reference to a single-shot handle once its callback has run.
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QTimer:
        """Start a periodic timer."""
        if interval_ms <= 0:
            raise ValueError(f"Periodic interval must be positive, got {interval_ms}")
        timer = self._make_timer(interval_ms, callback)
        timer.start()
        return timer

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        """Start a one-shot timer."""
        timer = self._make_timer(max(0, delay_ms), callback)
        timer.setSingleShot(True)
        timer.timeout.connect(timer.deleteLater)
        timer.start()
        return timer

    def cancel(self, timer: Optional[QTimer]) -> None:
        """Stop a timer and release it. Accepts None."""
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()

    def _make_timer(self, interval_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.timeout.connect(callback)
        return timer


class VirtualTimer:
    """Timer handle for the VirtualScheduler."""

    def __init__(self, scheduler: "VirtualScheduler", interval_ms: int,
                 callback: Callable[[], None], single_shot: bool):
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._callback = callback
        self._single_shot = single_shot
        self._active = True
        self.due_ms = 0

    def interval(self) -> int:
        return self._interval_ms

    def isSingleShot(self) -> bool:
        return self._single_shot

    def isActive(self) -> bool:
        return self._active

    def stop(self) -> None:
        self._active = False


class VirtualScheduler:
    """
    Deterministic scheduler over a virtual clock.

    Timers due at the same instant fire in the order they were
    (re)scheduled. A periodic timer is rescheduled before its callback
    runs, so the callback may stop it.

    Usage:
        scheduler = VirtualScheduler()
        session = GameSession(scheduler=scheduler)
        session.start()
        scheduler.advance(3_000)   # loading finishes
    """

    def __init__(self):
        self._now_ms = 0
        self._queue: list[tuple[int, int, VirtualTimer]] = []
        self._sequence = itertools.count()

    @property
    def now_ms(self) -> int:
        """Current virtual time in milliseconds."""
        return self._now_ms

    @property
    def active_timers(self) -> list[VirtualTimer]:
        """Timers that will still fire, in firing order."""
        return [t for due, _, t in sorted(self._queue)
                if t.isActive() and t.due_ms == due]

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> VirtualTimer:
        """Start a periodic timer."""
        if interval_ms <= 0:
            raise ValueError(f"Periodic interval must be positive, got {interval_ms}")
        timer = VirtualTimer(self, interval_ms, callback, single_shot=False)
        self._push(timer, self._now_ms + interval_ms)
        return timer

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> VirtualTimer:
        """Start a one-shot timer."""
        timer = VirtualTimer(self, max(0, delay_ms), callback, single_shot=True)
        self._push(timer, self._now_ms + timer.interval())
        return timer

    def cancel(self, timer: Optional[VirtualTimer]) -> None:
        """Stop a timer. Accepts None."""
        if timer is not None:
            timer.stop()

    def advance(self, ms: int) -> int:
        """
        Move the clock forward, firing every timer that falls due.

        Returns:
            The number of callbacks that ran.
        """
        target = self._now_ms + max(0, ms)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if not timer.isActive() or timer.due_ms != due:
                continue
            self._now_ms = due
            if timer.isSingleShot():
                timer.stop()
            else:
                self._push(timer, due + timer.interval())
            timer._callback()
            fired += 1
        self._now_ms = target
        return fired

    def _push(self, timer: VirtualTimer, due_ms: int) -> None:
        timer.due_ms = due_ms
        heapq.heappush(self._queue, (due_ms, next(self._sequence), timer))
