"""
Play Field

Paints the lane: falling obstacles and the spaceship.
Positions arrive as percentages and are mapped onto the widget.
"""

import math
import random
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, Slot, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QBrush, QPen, QPolygonF, QPaintEvent

from config import UI_SETTINGS
from gui.styles import theme
from models.obstacle import ObstacleType
from models.schemas import ObstacleView, SessionSnapshot


OBSTACLE_STYLE = {
    ObstacleType.ASTEROID: (theme.ASTEROID, UI_SETTINGS.asteroid_size),
    ObstacleType.STAR: (theme.STAR, UI_SETTINGS.star_size),
    ObstacleType.ALIEN: (theme.ALIEN, UI_SETTINGS.alien_size),
}


class PlayFieldWidget(QWidget):
    """
    Fixed-size play field (400 x 600 by default).

    Obstacles are anchored by their top-left corner at (x%, y%).
    The ship is centred on x% and sits just above the bottom edge.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedSize(UI_SETTINGS.field_width_px, UI_SETTINGS.field_height_px)
        self._snapshot: Optional[SessionSnapshot] = None

        # Static backdrop stars
        rng = random.Random(7)
        self._backdrop = [
            (rng.random(), rng.random()) for _ in range(60)
        ]

    @Slot(object)
    def update_state(self, snapshot: SessionSnapshot) -> None:
        """Store the latest snapshot and repaint."""
        self._snapshot = snapshot
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        self._paint_background(painter)
        if self._snapshot is not None:
            for obstacle in self._snapshot.obstacles:
                self._paint_obstacle(painter, obstacle)
            self._paint_spaceship(painter, self._snapshot.spaceship_x,
                                  self._snapshot.turbo_active)

        painter.end()

    def _paint_background(self, painter: QPainter) -> None:
        rect = QRectF(self.rect()).adjusted(1, 1, -1, -1)
        painter.setPen(QPen(QColor(theme.SURFACE_FIELD_EDGE), 2))
        painter.setBrush(QBrush(QColor(theme.SURFACE_FIELD)))
        painter.drawRoundedRect(rect, theme.RADIUS_MD, theme.RADIUS_MD)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(theme.STARFIELD)))
        for fx, fy in self._backdrop:
            painter.drawEllipse(QPointF(fx * self.width(), fy * self.height()), 1.2, 1.2)

    def _paint_obstacle(self, painter: QPainter, obstacle: ObstacleView) -> None:
        color, size = OBSTACLE_STYLE[obstacle.type]
        left = obstacle.x / 100 * self.width()
        top = obstacle.y / 100 * self.height()
        rect = QRectF(left, top, size, size)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(color)))
        if obstacle.type == ObstacleType.STAR:
            painter.drawPolygon(_star_polygon(rect))
        elif obstacle.type == ObstacleType.ALIEN:
            painter.drawEllipse(rect.adjusted(0, size * 0.25, 0, -size * 0.25))
            painter.drawEllipse(rect.adjusted(size * 0.3, 0, -size * 0.3, -size * 0.4))
        else:
            painter.drawEllipse(rect)

    def _paint_spaceship(self, painter: QPainter, x: float, turbo: bool) -> None:
        size = UI_SETTINGS.spaceship_size
        cx = x / 100 * self.width()
        bottom = self.height() - UI_SETTINGS.spaceship_bottom_margin

        hull = QPolygonF([
            QPointF(cx, bottom - size),
            QPointF(cx + size / 2, bottom),
            QPointF(cx, bottom - size * 0.25),
            QPointF(cx - size / 2, bottom),
        ])
        color = theme.TURBO if turbo else theme.SPACESHIP
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(color)))
        painter.drawPolygon(hull)


def _star_polygon(rect: QRectF) -> QPolygonF:
    """Five-pointed star inscribed in rect."""
    cx, cy = rect.center().x(), rect.center().y()
    outer = rect.width() / 2
    inner = outer * 0.45
    points = []
    for i in range(10):
        radius = outer if i % 2 == 0 else inner
        angle = math.pi / 2 + i * math.pi / 5
        points.append(QPointF(cx + radius * math.cos(angle),
                              cy - radius * math.sin(angle)))
    return QPolygonF(points)
