"""
Painted layers: the particle background and the cursor overlay.

Both widgets only read model state; the frame ticker advances the model and
then asks them to repaint.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPaintEvent, QPen, QRadialGradient
from PySide6.QtWidgets import QWidget

from sentience import config
from sentience.model.cursor import CursorFollower
from sentience.model.particles import ParticleField

BACKGROUND_COLOR = QColor(8, 8, 14)

GLOW_RADIUS = 260.0
GLOW_ALPHA = 0.08
CURSOR_RADIUS = 4.0
# (radius, alpha) per trail marker, in TRAIL_FRACTIONS order
TRAIL_STYLE = ((2.0, 0.25), (2.5, 0.35), (3.0, 0.5))


class ParticleCanvas(QWidget):
    """Clears and redraws the whole particle field on every paint."""

    def __init__(self, field: ParticleField, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.field = field
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)

        field = self.field
        color = QColor(*config.PARTICLE_COLOR)

        # ---- particles ----
        painter.setPen(Qt.PenStyle.NoPen)
        for x, y, r, alpha in zip(field.x, field.y, field.radii, field.opacities()):
            color.setAlphaF(float(alpha))
            painter.setBrush(color)
            painter.drawEllipse(QPointF(float(x), float(y)), float(r), float(r))

        # ---- connections ----
        painter.setBrush(Qt.BrushStyle.NoBrush)
        pen = QPen(color)
        pen.setWidthF(config.CONNECTION_LINE_WIDTH)
        links = field.connections()
        for i, j, alpha in zip(links.i, links.j, links.alpha):
            color.setAlphaF(float(alpha))
            pen.setColor(color)
            painter.setPen(pen)
            painter.drawLine(
                QPointF(float(field.x[i]), float(field.y[i])),
                QPointF(float(field.x[j]), float(field.y[j])),
            )
        painter.end()


class CursorOverlay(QWidget):
    """Glow and primary marker on the pointer, trail markers behind it."""

    def __init__(self, cursor: CursorFollower, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.cursor = cursor
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)

    def paintEvent(self, event: QPaintEvent) -> None:
        # Nothing to follow until the pointer has entered the window
        if self.cursor.moves == 0:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(Qt.PenStyle.NoPen)

        px, py = self.cursor.pointer
        pointer = QPointF(px, py)

        glow = QRadialGradient(pointer, GLOW_RADIUS)
        inner = QColor(*config.PARTICLE_COLOR)
        inner.setAlphaF(GLOW_ALPHA)
        outer = QColor(*config.PARTICLE_COLOR)
        outer.setAlphaF(0.0)
        glow.setColorAt(0.0, inner)
        glow.setColorAt(1.0, outer)
        painter.setBrush(QBrush(glow))
        painter.drawEllipse(pointer, GLOW_RADIUS, GLOW_RADIUS)

        trail_color = QColor(*config.PARTICLE_COLOR)
        for (tx, ty), (radius, alpha) in zip(self.cursor.trail_positions(), TRAIL_STYLE):
            trail_color.setAlphaF(alpha)
            painter.setBrush(trail_color)
            painter.drawEllipse(QPointF(tx, ty), radius, radius)

        painter.setBrush(QColor(240, 236, 255))
        painter.drawEllipse(pointer, CURSOR_RADIUS, CURSOR_RADIUS)
        painter.end()
