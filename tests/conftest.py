"""Shared test fixtures for sentience tests."""
from __future__ import annotations

import heapq
import itertools
import os
from typing import Callable

import numpy as np
import pytest

from sentience.controller.presentation import Presentation
from sentience.model.content import ContentCatalog
from sentience.model.navigation import SectionNavigator
from sentience.model.scheduler import Scheduler, TimerHandle

# Widget tests never open a real window
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualScheduler(Scheduler):
    """Virtual clock: timers fire only when the test advances time."""

    def __init__(self, frame_interval_ms: float = 16.0) -> None:
        super().__init__()
        self.clock: float = 0.0
        self.frame_interval_ms = frame_interval_ms
        self._queue: list[tuple[float, int, TimerHandle, Callable[[], None]]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self.clock

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle()
        heapq.heappush(self._queue, (self.clock + max(delay_ms, 0.0), next(self._seq), handle, callback))
        return handle

    @property
    def pending(self) -> list[TimerHandle]:
        return [handle for _, _, handle, _ in self._queue if handle.active]

    def advance(self, ms: float) -> None:
        target = self.clock + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            self.clock = due
            if handle.active:
                handle.mark_fired()
                callback()
        self.clock = target

    def run_frames(self, count: int) -> None:
        for _ in range(count):
            self.advance(self.frame_interval_ms)
            self.frames.tick(self.clock)


CATALOG_DATA = {
    "brand": "TEST",
    "sections": [
        {"key": f"s{i}", "nav_label": f"Section {i}", "title": f"Title {i}"}
        for i in range(6)
    ],
    "stats": [
        {"label": "Signals", "target": 1234},
        {"label": "Models", "target": 86, "suffix": "+"},
    ],
    "terminal_lines": ["$ boot", "> one", "> two"],
}


@pytest.fixture()
def scheduler():
    return ManualScheduler()


@pytest.fixture()
def catalog():
    return ContentCatalog.from_dict(CATALOG_DATA)


@pytest.fixture()
def navigator(scheduler):
    return SectionNavigator(scheduler)


@pytest.fixture()
def presentation(scheduler, catalog):
    """Presentation recording every published change, not yet started."""
    counters: list[list[int]] = []
    lines: list[list] = []
    pres = Presentation(
        scheduler,
        catalog,
        width=800,
        height=600,
        rng=np.random.default_rng(7),
        on_counters=counters.append,
        on_terminal_lines=lines.append,
    )
    pres.changes = []
    pres.counter_updates = counters
    pres.line_updates = lines
    pres.add_section_listener(pres.changes.append)
    return pres


@pytest.fixture(scope="session")
def qt_app():
    """One QApplication for every Qt-backed test in the session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def spin(qt_app):
    """Run the Qt event loop for a fixed number of milliseconds."""
    from PySide6.QtCore import QEventLoop, QTimer

    def run(ms: int) -> None:
        loop = QEventLoop()
        QTimer.singleShot(ms, loop.quit)
        loop.exec()

    return run
