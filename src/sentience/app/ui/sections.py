"""
Section Panels
==============
One full-window panel per section. Panels are passive: the presentation view
tells them when they become active and pushes counter/terminal updates.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame, QGraphicsOpacityEffect, QHBoxLayout, QLabel, QVBoxLayout, QWidget
)

from sentience import config
from sentience.model.content import ContentCatalog, SectionContent, Stat
from sentience.model.reveal import LineState, hidden_line


def _restyle(widget: QWidget) -> None:
    """Re-apply the stylesheet after a dynamic property changed."""
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class SectionPanel(QWidget):
    """Base class for section panels: eyebrow, title and body text."""
    def __init__(self, index: int, content: SectionContent, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index
        self.content = content
        self.setObjectName(f"section-{content.key}")
        self.setProperty("active", False)

        self.layout_main = QVBoxLayout(self)
        self.layout_main.setContentsMargins(120, 120, 160, 80)
        self.layout_main.addStretch(1)

        self.lbl_eyebrow = QLabel(content.eyebrow, self)
        self.lbl_eyebrow.setObjectName("eyebrow")
        self.lbl_title = QLabel(content.title, self)
        self.lbl_title.setObjectName("title")
        self.lbl_title.setWordWrap(True)
        self.lbl_body = QLabel(content.body, self)
        self.lbl_body.setObjectName("body")
        self.lbl_body.setWordWrap(True)

        for lbl in (self.lbl_eyebrow, self.lbl_title, self.lbl_body):
            self.layout_main.addWidget(lbl)

        # Subclasses add their widgets here, below the body text
        self.layout_extra = QVBoxLayout()
        self.layout_main.addLayout(self.layout_extra)
        self.layout_main.addStretch(1)

    def set_active(self, active: bool) -> None:
        if self.property("active") != active:
            self.setProperty("active", active)
            _restyle(self)


class HeroSection(SectionPanel):
    """Landing section with the stat counters."""
    def __init__(self, index: int, content: SectionContent, stats: list[Stat], parent: QWidget | None = None) -> None:
        super().__init__(index, content, parent)
        self.stats = stats
        self.stat_labels: list[QLabel] = []

        row = QHBoxLayout()
        row.setSpacing(64)
        for stat in stats:
            col = QVBoxLayout()
            number = QLabel(f"0{stat.suffix}", self)
            number.setObjectName("stat-number")
            caption = QLabel(stat.label, self)
            caption.setObjectName("stat-label")
            col.addWidget(number)
            col.addWidget(caption)
            row.addLayout(col)
            self.stat_labels.append(number)
        row.addStretch(1)
        self.layout_extra.addSpacing(40)
        self.layout_extra.addLayout(row)

    def set_counter_values(self, values: list[int]) -> None:
        for label, stat, value in zip(self.stat_labels, self.stats, values):
            label.setText(f"{value}{stat.suffix}")


class TerminalSection(SectionPanel):
    """Section with the terminal transcript that slides in line by line."""
    def __init__(self, index: int, content: SectionContent, lines: list[str], parent: QWidget | None = None) -> None:
        super().__init__(index, content, parent)
        self.lines = lines
        self.line_labels: list[QLabel] = []
        self.line_effects: list[QGraphicsOpacityEffect] = []

        terminal = QFrame(self)
        terminal.setObjectName("terminal")
        body = QVBoxLayout(terminal)
        body.setContentsMargins(24, 20, 24, 20)
        body.setSpacing(6)

        for text in lines:
            label = QLabel(text, terminal)
            label.setObjectName("term-line")
            label.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)
            effect = QGraphicsOpacityEffect(label)
            label.setGraphicsEffect(effect)
            body.addWidget(label)
            self.line_labels.append(label)
            self.line_effects.append(effect)

        self.layout_extra.addSpacing(32)
        self.layout_extra.addWidget(terminal)
        self.apply_line_states([hidden_line()] * len(lines))

    def apply_line_states(self, states: list[LineState]) -> None:
        for label, effect, state in zip(self.line_labels, self.line_effects, states):
            effect.setOpacity(state.opacity)
            # offset runs from -TERMINAL_LINE_OFFSET_PX (hidden) to 0 (in place)
            indent = int(round(config.TERMINAL_LINE_OFFSET_PX + state.offset))
            label.setContentsMargins(indent, 0, 0, 0)


def build_section(index: int, catalog: ContentCatalog, parent: QWidget | None = None) -> SectionPanel:
    """Pick the panel class for a section index."""
    content = catalog.section(index)
    if index == config.LANDING_SECTION:
        return HeroSection(index, content, catalog.stats, parent)
    if index == config.TERMINAL_SECTION:
        return TerminalSection(index, content, catalog.terminal_lines, parent)
    return SectionPanel(index, content, parent)
