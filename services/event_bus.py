"""
Event Bus - Central signal hub for inter-module communication.

The GUI connects to this single object rather than directly to the
game session, so a restarted or replaced session needs no rewiring of
the widgets.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for Galaxy Adventure.

    - GameSession emits state and lifecycle events (forwarded by the app)
    - GUI components listen and update displays
    - GUI components request commands (move, restart)

    Usage:
        # In the app controller
        session.state_updated.connect(self.event_bus.state_updated.emit)

        # In a widget
        self.event_bus.state_updated.connect(self._on_state_updated)
    """

    # ============ Game Lifecycle ============
    phase_changed = Signal(str)         # GamePhase value
    game_over = Signal(int)             # final score

    # ============ Game State ============
    state_updated = Signal(object)      # SessionSnapshot
    score_updated = Signal(int)         # new score
    turbo_changed = Signal(bool)        # turbo flag
    collision_occurred = Signal(dict)   # {type, x, y, spaceship_x}

    # ============ Commands (GUI -> session) ============
    move_left_requested = Signal()
    move_right_requested = Signal()
    restart_requested = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "Turbo!")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
