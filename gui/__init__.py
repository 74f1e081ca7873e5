"""
Galaxy Adventure GUI

PySide6 user interface components.
"""

from gui.main_window import MainWindow
from gui.loading_screen import LoadingScreen

__all__ = [
    "MainWindow",
    "LoadingScreen",
]
