"""
Galaxy Adventure Widgets

Reusable UI components for the game screen.
"""

from gui.widgets.play_field import PlayFieldWidget
from gui.widgets.scoreboard import ScoreboardWidget
from gui.widgets.controls import ControlPanel

__all__ = [
    "PlayFieldWidget",
    "ScoreboardWidget",
    "ControlPanel",
]
