"""
Input Bridge
============
Window-wide event filter feeding pointer, wheel, touch and key input into the
presentation.

Why is this file needed?
------------------------
Qt delivers input to whichever child widget is under the pointer or has
focus, and propagates it upwards. The presentation wants every event exactly
once, the way a page-level listener would see it, so the filter sits on the
top-level QWindow, which receives each event before any widget does.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QEvent, QObject, QPoint, QPointF, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QTouchEvent, QWheelEvent

if TYPE_CHECKING:
    from PySide6.QtWidgets import QWidget
    from sentience.controller.presentation import Presentation

logger = logging.getLogger(__name__)

# Qt key codes translated to the key identities used by the key bindings
QT_KEY_NAMES: dict[int, str] = {
    Qt.Key.Key_Down: "ArrowDown",
    Qt.Key.Key_Up: "ArrowUp",
    Qt.Key.Key_Space: " ",
    Qt.Key.Key_PageDown: "PageDown",
    Qt.Key.Key_PageUp: "PageUp",
    Qt.Key.Key_Home: "Home",
    Qt.Key.Key_End: "End",
}


def key_name(event: QKeyEvent) -> str:
    name = QT_KEY_NAMES.get(event.key())
    if name is not None:
        return name
    return event.text()


def wheel_delta_y(event: QWheelEvent) -> float:
    """Vertical wheel delta with positive meaning 'scroll down'."""
    pixels = event.pixelDelta()
    if not pixels.isNull():
        return float(-pixels.y())
    return float(-event.angleDelta().y())


class InputBridge(QObject):
    def __init__(self, view: QWidget, presentation: Presentation) -> None:
        super().__init__(view)
        self.view = view
        self.presentation = presentation

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        match event.type():
            case QEvent.Type.MouseMove:
                self._on_pointer(event)
                return False
            case QEvent.Type.Wheel:
                self.presentation.aggregator.handle_wheel(wheel_delta_y(event))
                # The page never scrolls natively
                return True
            case QEvent.Type.TouchBegin:
                y = self._touch_y(event)
                if y is not None:
                    self.presentation.aggregator.handle_touch_start(y)
                return False
            case QEvent.Type.TouchEnd:
                y = self._touch_y(event)
                if y is not None:
                    self.presentation.aggregator.handle_touch_end(y)
                return False
            case QEvent.Type.KeyPress:
                # Only bound keys are swallowed
                return self.presentation.aggregator.handle_key(key_name(event))
        return super().eventFilter(watched, event)

    def _on_pointer(self, event: QMouseEvent) -> None:
        pos = self._to_view(event.position())
        self.presentation.pointer_moved(pos.x(), pos.y())

    def _to_view(self, window_pos: QPointF) -> QPointF:
        offset = self.view.mapTo(self.view.window(), QPoint(0, 0))
        return QPointF(window_pos.x() - offset.x(), window_pos.y() - offset.y())

    @staticmethod
    def _touch_y(event: QTouchEvent) -> Optional[float]:
        points = event.points()
        if not points:
            return None
        return points[0].position().y()
