"""
Main Window

Uses QStackedWidget to switch between the loading splash and the game screen.
The window only reads snapshots from the event bus and requests commands.
"""

from PySide6.QtWidgets import (
    QMainWindow, QStackedWidget, QStatusBar, QWidget, QVBoxLayout
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QKeySequence, QShortcut

from config import UI_SETTINGS
from services.event_bus import EventBus
from models.game_state import GamePhase
from models.obstacle import ObstacleType
from models.schemas import SessionSnapshot
from gui.loading_screen import LoadingScreen
from gui.styles import theme
from gui.widgets.play_field import PlayFieldWidget
from gui.widgets.scoreboard import ScoreboardWidget
from gui.widgets.controls import ControlPanel


class MainWindow(QMainWindow):
    """
    Game window with two screens:
    - Loading splash
    - Game screen (scoreboard, play field, controls)
    """

    SCREENS = {
        GamePhase.LOADING: 0,
        GamePhase.PLAYING: 1,
        GamePhase.GAME_OVER: 1,
    }

    def __init__(self, event_bus: EventBus):
        super().__init__()
        self.event_bus = event_bus

        self.setWindowTitle("Galaxy Adventure")
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)
        self.setStyleSheet(
            f"background-color: {theme.SURFACE_DARK}; color: {theme.TEXT_PRIMARY}; "
            f"font-family: {theme.FONT_UI};"
        )

        # Central stacked widget for screen navigation
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.loading_screen = LoadingScreen()
        self.stack.addWidget(self.loading_screen)   # index 0

        self.game_screen = self._build_game_screen()
        self.stack.addWidget(self.game_screen)      # index 1

        self._build_statusbar()
        self._build_shortcuts()
        self._connect_signals()

    def _build_game_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(theme.SPACING_MD)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard)

        self.play_field = PlayFieldWidget()
        layout.addWidget(self.play_field, alignment=Qt.AlignmentFlag.AlignCenter)

        self.controls = ControlPanel(self.event_bus)
        layout.addWidget(self.controls)

        return screen

    def _build_statusbar(self) -> None:
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _build_shortcuts(self) -> None:
        """Arrow keys move, Return plays again after a crash."""
        left = QShortcut(QKeySequence("Left"), self)
        left.activated.connect(self._on_left_key)
        right = QShortcut(QKeySequence("Right"), self)
        right.activated.connect(self._on_right_key)
        again = QShortcut(QKeySequence("Return"), self)
        again.activated.connect(self._on_return_key)

    def _connect_signals(self) -> None:
        """Connect event bus signals."""
        self.event_bus.state_updated.connect(self._on_state_updated)
        self.event_bus.phase_changed.connect(self._on_phase_changed)
        self.event_bus.score_updated.connect(self.scoreboard.update_score)
        self.event_bus.turbo_changed.connect(self.scoreboard.set_turbo)
        self.event_bus.game_over.connect(self.controls.show_game_over)
        self.event_bus.collision_occurred.connect(self._on_collision)
        self.event_bus.system_message.connect(self._on_system_message)

    @Slot(object)
    def _on_state_updated(self, snapshot: SessionSnapshot) -> None:
        self.play_field.update_state(snapshot)
        self.scoreboard.update_score(snapshot.score)
        self.scoreboard.set_turbo(snapshot.turbo_active)

    @Slot(str)
    def _on_phase_changed(self, phase: str) -> None:
        phase = GamePhase(phase)
        self.stack.setCurrentIndex(self.SCREENS[phase])
        if phase == GamePhase.PLAYING:
            self.controls.show_moves()

    @Slot(dict)
    def _on_collision(self, event: dict) -> None:
        if event["type"] == ObstacleType.ALIEN.value:
            self.status_bar.showMessage("Alien encounter", 1500)

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(message, 3000)

    def _is_playing(self) -> bool:
        return self.stack.currentIndex() == 1 and not self.controls.is_game_over

    def _on_left_key(self) -> None:
        if self._is_playing():
            self.event_bus.move_left_requested.emit()

    def _on_right_key(self) -> None:
        if self._is_playing():
            self.event_bus.move_right_requested.emit()

    def _on_return_key(self) -> None:
        if self.controls.is_game_over:
            self.event_bus.restart_requested.emit()
