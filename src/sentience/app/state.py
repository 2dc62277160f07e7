from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from sentience.model.navigation import SectionChange
    from sentience.model.reveal import LineState


class Store(QObject):
    """Re-publishes model output as Qt signals so widgets update on the GUI thread's terms."""
    section_changed = Signal(object)
    counters_changed = Signal(object)
    terminal_lines_changed = Signal(object)

    def publish_section(self, change: SectionChange) -> None:
        self.section_changed.emit(change)

    def publish_counters(self, values: list[int]) -> None:
        # Receivers get their own copy of the animator state
        self.counters_changed.emit(list(values))

    def publish_terminal_lines(self, states: list[LineState]) -> None:
        self.terminal_lines_changed.emit(list(states))
