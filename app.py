"""
Galaxy Adventure Application Controller

Top-level controller that wires together all application components.
"""

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject, Slot

from services.event_bus import EventBus
from engine.session import GameSession

logger = logging.getLogger(__name__)


class GalaxyAdventureApp(QObject):
    """
    Top-level application controller.
    Wires the game session to the event bus and the main window.
    """

    def __init__(self, session: Optional[GameSession] = None,
                 seed: Optional[int] = None, with_window: bool = True):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        if session is None:
            session = GameSession(
                rng=random.Random(seed) if seed is not None else None,
                parent=self,
            )
        self.session = session
        self._connect_session()

        # Main window (skipped for headless use)
        self.main_window = None
        if with_window:
            from gui.main_window import MainWindow
            self.main_window = MainWindow(self.event_bus)

    def _connect_session(self) -> None:
        """Forward session signals to the bus and bus commands to the session."""
        s = self.session
        bus = self.event_bus

        s.state_updated.connect(bus.state_updated.emit)
        s.phase_changed.connect(bus.phase_changed.emit)
        s.score_updated.connect(bus.score_updated.emit)
        s.turbo_changed.connect(bus.turbo_changed.emit)
        s.collision_occurred.connect(bus.collision_occurred.emit)
        s.game_over.connect(bus.game_over.emit)
        s.turbo_changed.connect(self._on_turbo_changed)

        bus.move_left_requested.connect(s.move_left)
        bus.move_right_requested.connect(s.move_right)
        bus.restart_requested.connect(s.restart)

    def start(self) -> None:
        """Show the window (if any) and begin loading."""
        if self.main_window is not None:
            self.main_window.show()
        logger.info("Starting Galaxy Adventure")
        self.session.start()

    def stop(self) -> None:
        """Tear down the session timers."""
        self.session.shutdown()

    @Slot(bool)
    def _on_turbo_changed(self, active: bool) -> None:
        if active:
            self.event_bus.emit_message("info", "Turbo boost!")
