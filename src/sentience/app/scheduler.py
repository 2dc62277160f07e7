"""
Qt Scheduler
============
Drives the model's Scheduler interface from the Qt event loop.

One repeating QTimer produces the frame ticks; every `call_later` creates its
own single-shot QTimer, which is stopped and released when it fires or is
cancelled.
"""
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QElapsedTimer, QObject, Qt, QTimer

from sentience import config
from sentience.model.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class QtScheduler(Scheduler):
    def __init__(self, parent: QObject | None = None, frame_interval_ms: int = config.FRAME_INTERVAL_MS) -> None:
        super().__init__()
        self._parent = parent
        self._clock = QElapsedTimer()
        self._clock.start()

        # Keeps un-parented single-shot timers alive until they fire
        self._pending: set[QTimer] = set()

        self._frame_timer = QTimer(parent)
        self._frame_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._frame_timer.setInterval(frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)

    def now(self) -> float:
        return self._clock.nsecsElapsed() / 1_000_000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(max(0, int(round(delay_ms))))

        handle = TimerHandle(on_cancel=lambda: self._dispose(timer))

        def fire() -> None:
            handle.mark_fired()
            self._dispose(timer)
            callback()

        timer.timeout.connect(fire)
        self._pending.add(timer)
        timer.start()
        return handle

    def start(self) -> None:
        logger.debug(f"Frame timer started ({self._frame_timer.interval()} ms)")
        self._frame_timer.start()

    def stop(self) -> None:
        self._frame_timer.stop()
        for timer in list(self._pending):
            self._dispose(timer)

    def _dispose(self, timer: QTimer) -> None:
        timer.stop()
        if timer in self._pending:
            self._pending.discard(timer)
            timer.deleteLater()

    def _on_frame(self) -> None:
        self.frames.tick(self.now())
