"""
Control Panel

Move buttons while playing; final score and "Play Again" after a crash.
Buttons only request commands through the event bus.
"""

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton, QStackedWidget
)
from PySide6.QtCore import Qt, Slot

from services.event_bus import EventBus
from gui.styles import theme


def _button_style(background: str, color: str) -> str:
    return f"""
        QPushButton {{
            padding: 10px 20px;
            font-size: {theme.FONT_SIZE_BUTTON}pt;
            background-color: {background};
            color: {color};
            border: none;
            border-radius: {theme.RADIUS_SM}px;
        }}
    """


class ControlPanel(QStackedWidget):
    """
    Two pages:
    - 0: Move Left / Move Right
    - 1: Game Over message with Play Again
    """

    def __init__(self, event_bus: EventBus, parent=None):
        super().__init__(parent)
        self.event_bus = event_bus
        self._build_ui()

    def _build_ui(self) -> None:
        # Movement page
        move_page = QWidget()
        move_layout = QHBoxLayout(move_page)
        move_layout.setContentsMargins(0, theme.SPACING_LG, 0, 0)

        self.left_button = QPushButton("Move Left")
        self.left_button.setAccessibleName("Move spaceship left")
        self.left_button.setStyleSheet(_button_style(theme.BUTTON_MOVE, theme.TEXT_PRIMARY))
        self.left_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.left_button.clicked.connect(self.event_bus.move_left_requested.emit)
        move_layout.addWidget(self.left_button)

        self.right_button = QPushButton("Move Right")
        self.right_button.setAccessibleName("Move spaceship right")
        self.right_button.setStyleSheet(_button_style(theme.BUTTON_MOVE, theme.TEXT_PRIMARY))
        self.right_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.right_button.clicked.connect(self.event_bus.move_right_requested.emit)
        move_layout.addWidget(self.right_button)

        self.addWidget(move_page)  # index 0

        # Game over page
        over_page = QWidget()
        over_layout = QVBoxLayout(over_page)
        over_layout.setContentsMargins(0, theme.SPACING_LG, 0, 0)

        self.final_label = QLabel("")
        self.final_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.final_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_SCORE}pt; font-weight: bold; "
            f"color: {theme.TEXT_PRIMARY};"
        )
        over_layout.addWidget(self.final_label)

        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.setStyleSheet(
            _button_style(theme.BUTTON_PLAY_AGAIN, theme.BUTTON_PLAY_AGAIN_TEXT)
        )
        self.play_again_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.play_again_button.clicked.connect(self.event_bus.restart_requested.emit)
        over_layout.addWidget(self.play_again_button, alignment=Qt.AlignmentFlag.AlignCenter)

        self.addWidget(over_page)  # index 1

    @property
    def is_game_over(self) -> bool:
        return self.currentIndex() == 1

    @Slot(int)
    def show_game_over(self, final_score: int) -> None:
        self.final_label.setText(f"Game Over! Final Score: {final_score}")
        self.setCurrentIndex(1)

    @Slot()
    def show_moves(self) -> None:
        self.setCurrentIndex(0)
