"""
Loading Screen

Splash shown while the session is in the LOADING phase.
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from gui.styles import theme


class LoadingScreen(QWidget):
    """Static splash; the session decides when loading ends."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.rocket_label = QLabel("\U0001F680")
        self.rocket_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.rocket_label.setStyleSheet("font-size: 72pt;")
        layout.addWidget(self.rocket_label)

        self.message_label = QLabel("Loading Game...")
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setStyleSheet(
            f"font-size: {theme.FONT_SIZE_TITLE}pt; font-weight: bold; "
            f"color: {theme.TEXT_PRIMARY};"
        )
        layout.addWidget(self.message_label)
