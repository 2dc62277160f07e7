"""
Navigation chrome: top bar with logo and links, side indicator dots, and the
progress bar. Clicks are reported as `section_requested(index)`; the widgets
never change sections themselves.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QProgressBar, QPushButton, QVBoxLayout, QWidget

from sentience.model.content import ContentCatalog


def _make_button(text: str, object_name: str, parent: QWidget, section: int) -> QPushButton:
    btn = QPushButton(text, parent)
    btn.setObjectName(object_name)
    btn.setFlat(True)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setProperty("section", section)
    return btn


class NavBar(QWidget):
    section_requested = Signal(int)

    def __init__(self, catalog: ContentCatalog, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("nav")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setProperty("scrolled", False)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(48, 16, 48, 16)

        self.btn_logo = _make_button(catalog.brand, "nav-logo", self, 0)
        self.btn_logo.clicked.connect(lambda: self.section_requested.emit(0))
        layout.addWidget(self.btn_logo)
        layout.addStretch(1)

        self.links: list[QPushButton] = []
        # The landing section is reached through the logo
        for index, section in enumerate(catalog.sections):
            if index == 0:
                continue
            link = _make_button(section.nav_label, "nav-link", self, index)
            link.clicked.connect(lambda _=False, i=index: self.section_requested.emit(i))
            layout.addWidget(link)
            self.links.append(link)

    def set_scrolled(self, scrolled: bool) -> None:
        if self.property("scrolled") != scrolled:
            self.setProperty("scrolled", scrolled)
            self.style().unpolish(self)
            self.style().polish(self)


class DotRail(QWidget):
    section_requested = Signal(int)

    def __init__(self, count: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(14)

        self._active: int = -1
        self.dots: list[QPushButton] = []
        for index in range(count):
            dot = _make_button("", "dot", self, index)
            dot.setCheckable(True)
            dot.setFixedSize(10, 10)
            dot.clicked.connect(lambda _=False, i=index: self._on_clicked(i))
            layout.addWidget(dot)
            self.dots.append(dot)

    def set_active(self, index: int) -> None:
        self._active = index
        for i, dot in enumerate(self.dots):
            dot.setChecked(i == index)

    def _on_clicked(self, index: int) -> None:
        # Undo the toggle; the navigator decides whether the section changes
        self.set_active(self._active)
        self.section_requested.emit(index)


class ProgressLine(QProgressBar):
    """Thin bar along the top edge; value is the progress percentage."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("progress")
        self.setRange(0, 100)
        self.setValue(0)
        self.setTextVisible(False)
        self.setFixedHeight(2)

    def set_progress(self, percent: float) -> None:
        self.setValue(int(round(percent)))
