"""
Main Application Window
=======================
Top-level container for the presentation.

Why is this file needed?
------------------------
1. Layout: It hosts the PresentationView as the central widget and applies
   the stylesheet.
2. Lifecycle: It fades the window in on first show and stops the frame timer
   when the window closes.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import QEasingCurve, QPropertyAnimation
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import QMainWindow

from sentience import config
from sentience.app.application import VISIBLE_APP_NAME
from sentience.app.ui.presentation_view import PresentationView
from sentience.model.content import ContentCatalog

logger = logging.getLogger(__name__)

STYLE_SHEET = """
    QMainWindow { background: #08080e; }
    QStackedWidget, SectionPanel { background: transparent; }
    QLabel { color: #e8e6f0; }
    QLabel#eyebrow { color: #a78bfa; font-size: 13px; letter-spacing: 3px; }
    QLabel#title { font-size: 56px; font-weight: 600; }
    QLabel#body { color: #9a98a8; font-size: 18px; }
    QLabel#stat-number { color: #a78bfa; font-size: 40px; font-weight: 600; }
    QLabel#stat-label { color: #77758a; font-size: 12px; }
    QFrame#terminal { background: rgba(20, 18, 32, 220); border: 1px solid #2a2740; border-radius: 8px; }
    QLabel#term-line { font-family: monospace; font-size: 14px; color: #c9c2f5; }

    QWidget#nav { background: transparent; }
    QWidget#nav[scrolled="true"] { background: rgba(8, 8, 14, 200); border-bottom: 1px solid #1d1b2b; }
    QPushButton#nav-logo { color: #ffffff; font-size: 16px; font-weight: 700; letter-spacing: 4px; border: none; }
    QPushButton#nav-link { color: #9a98a8; font-size: 13px; border: none; padding: 6px 14px; }
    QPushButton#nav-link:hover { color: #ffffff; }

    QPushButton#dot { background: #34314a; border: none; border-radius: 5px; }
    QPushButton#dot:checked { background: #a78bfa; }

    QProgressBar#progress { background: transparent; border: none; }
    QProgressBar#progress::chunk { background: #a78bfa; }
"""


class MainWindow(QMainWindow):
    def __init__(self, catalog: ContentCatalog, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__()
        self.setWindowTitle(catalog.brand or VISIBLE_APP_NAME)
        self.resize(*config.WINDOW_SIZE)
        self.setStyleSheet(STYLE_SHEET)

        self.view = PresentationView(catalog, self, rng=rng)
        self.setCentralWidget(self.view)

        self._fade: Optional[QPropertyAnimation] = None

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if self._fade is None:
            self.setWindowOpacity(0.0)
            self._fade = QPropertyAnimation(self, b"windowOpacity", self)
            self._fade.setDuration(config.FADE_IN_DURATION_MS)
            self._fade.setStartValue(0.0)
            self._fade.setEndValue(1.0)
            self._fade.setEasingCurve(QEasingCurve.Type.InOutQuad)
            self._fade.start()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing presentation.")
        self.view.scheduler.stop()
        super().closeEvent(event)
