"""
Presentation View
=================
The full-window stage: particle background, section stack, navigation chrome
and the cursor overlay, stacked in that order.

Why is this file needed?
------------------------
1. Composition: It builds the Presentation controller with a QtScheduler and
   connects the Store signals to the widgets.
2. Layering: The layers overlap, so they are positioned by hand in
   resizeEvent instead of by a layout.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import QEasingCurve, QPropertyAnimation, Qt
from PySide6.QtGui import QResizeEvent, QShowEvent
from PySide6.QtWidgets import QGraphicsOpacityEffect, QStackedWidget, QWidget

from sentience import config
from sentience.app.scheduler import QtScheduler
from sentience.app.state import Store
from sentience.app.ui.canvas import CursorOverlay, ParticleCanvas
from sentience.app.ui.input_bridge import InputBridge
from sentience.app.ui.navigation import DotRail, NavBar, ProgressLine
from sentience.app.ui.sections import HeroSection, SectionPanel, TerminalSection, build_section
from sentience.controller.presentation import Presentation
from sentience.model.content import ContentCatalog
from sentience.model.navigation import SectionChange
from sentience.model.reveal import LineState

logger = logging.getLogger(__name__)

NAV_HEIGHT = 64
DOT_RAIL_MARGIN = 36


class PresentationView(QWidget):
    def __init__(
        self,
        catalog: ContentCatalog,
        parent: QWidget | None = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(parent)
        self.catalog = catalog
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents)
        self.setCursor(Qt.CursorShape.BlankCursor)

        # --- MODEL ---
        self.store = Store()
        self.scheduler = QtScheduler(self)
        width, height = config.WINDOW_SIZE
        self.presentation = Presentation(
            self.scheduler,
            catalog,
            width=width,
            height=height,
            rng=rng,
            on_counters=self.store.publish_counters,
            on_terminal_lines=self.store.publish_terminal_lines,
        )
        self.presentation.add_section_listener(self.store.publish_section)

        # --- LAYERS (bottom to top) ---
        self.canvas = ParticleCanvas(self.presentation.field, self)

        self.stack = QStackedWidget(self)
        self.panels: list[SectionPanel] = []
        for index in range(len(catalog.sections)):
            panel = build_section(index, catalog, self.stack)
            self.stack.addWidget(panel)
            self.panels.append(panel)

        self.nav = NavBar(catalog, self)
        self.dots = DotRail(len(catalog.sections), self)
        self.progress = ProgressLine(self)
        self.cursor_overlay = CursorOverlay(self.presentation.cursor, self)

        # Fades the incoming section in while the transition lock is held
        self.section_fade = QPropertyAnimation(self)
        self.section_fade.setPropertyName(b"opacity")
        self.section_fade.setDuration(config.TRANSITION_DURATION_MS)
        self.section_fade.setStartValue(0.0)
        self.section_fade.setEndValue(1.0)
        self.section_fade.setEasingCurve(QEasingCurve.Type.OutCubic)
        self.section_fade.finished.connect(self._end_section_fade)
        self.fading_panel: Optional[SectionPanel] = None

        # --- SIGNAL CONNECTIONS ---
        self.nav.section_requested.connect(self.presentation.select_section)
        self.dots.section_requested.connect(self.presentation.select_section)

        self.store.section_changed.connect(self._apply_section_change)
        self.store.counters_changed.connect(self._apply_counters)
        self.store.terminal_lines_changed.connect(self._apply_terminal_lines)

        self.input_bridge = InputBridge(self, self.presentation)
        self._bridge_installed = False

        # The model steps first, then the layers repaint with the new state
        self.presentation.start()
        self.scheduler.frames.subscribe(self._repaint)
        self.scheduler.start()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self._bridge_installed:
            handle = self.window().windowHandle()
            if handle is not None:
                handle.installEventFilter(self.input_bridge)
                self._bridge_installed = True
                logger.debug("Input bridge installed on the top-level window")

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        w, h = self.width(), self.height()

        self.canvas.setGeometry(0, 0, w, h)
        self.stack.setGeometry(0, 0, w, h)
        self.nav.setGeometry(0, 0, w, NAV_HEIGHT)
        self.progress.setGeometry(0, 0, w, self.progress.height())

        hint = self.dots.sizeHint()
        self.dots.setGeometry(w - DOT_RAIL_MARGIN - hint.width(), (h - hint.height()) // 2, hint.width(), hint.height())

        self.cursor_overlay.setGeometry(0, 0, w, h)
        self.cursor_overlay.raise_()

        self.presentation.resized(w, h)

    # ------------------------------------------------------------------------------
    # Store -> widgets
    # ------------------------------------------------------------------------------

    def _apply_section_change(self, change: SectionChange) -> None:
        self.stack.setCurrentIndex(change.index)
        self._fade_in(self.panels[change.index])
        for panel in self.panels:
            panel.set_active(change.is_active(panel.index))
        self.dots.set_active(change.index)
        self.progress.set_progress(change.progress)
        self.nav.set_scrolled(change.scrolled)

    def _apply_counters(self, values: list[int]) -> None:
        for panel in self.panels:
            if isinstance(panel, HeroSection):
                panel.set_counter_values(values)

    def _apply_terminal_lines(self, states: list[LineState]) -> None:
        for panel in self.panels:
            if isinstance(panel, TerminalSection):
                panel.apply_line_states(states)

    def _fade_in(self, panel: SectionPanel) -> None:
        # stop() does not emit finished, so the previous panel is reset here
        self.section_fade.stop()
        self._end_section_fade()

        effect = QGraphicsOpacityEffect(panel)
        effect.setOpacity(0.0)
        panel.setGraphicsEffect(effect)
        self.fading_panel = panel
        self.section_fade.setTargetObject(effect)
        self.section_fade.start()

    def _end_section_fade(self) -> None:
        # Panels carry no graphics effect outside a fade
        if self.fading_panel is not None:
            self.fading_panel.setGraphicsEffect(None)
            self.fading_panel = None

    def _repaint(self, _now_ms: float) -> None:
        self.canvas.update()
        self.cursor_overlay.update()
