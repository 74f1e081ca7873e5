"""
Scoreboard Widget

Title, current score and the turbo banner above the play field.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Slot

from gui.styles import theme


class ScoreboardWidget(QWidget):
    """Shows the game title, the score and whether turbo is active."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(theme.SPACING_SM)

        self.title_label = QLabel("\U0001F680 Galaxy Adventure \U0001F680")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: bold; "
            f"color: {theme.TEXT_PRIMARY};"
        )
        layout.addWidget(self.title_label)

        self.score_label = QLabel("Score: 0")
        self.score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.score_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_SCORE}pt; font-weight: bold; "
            f"color: {theme.TEXT_PRIMARY};"
        )
        layout.addWidget(self.score_label)

        self.turbo_label = QLabel("")
        self.turbo_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.turbo_label.setMinimumHeight(24)
        self.turbo_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_SUBTITLE}pt; color: {theme.TURBO};"
        )
        layout.addWidget(self.turbo_label)

    @Slot(int)
    def update_score(self, score: int) -> None:
        self.score_label.setText(f"Score: {score}")

    @Slot(bool)
    def set_turbo(self, active: bool) -> None:
        self.turbo_label.setText("Turbo Boost Active!" if active else "")
