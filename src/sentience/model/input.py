"""
Input Aggregation
=================
Turns raw wheel, touch and key input into navigation intents.

The aggregator knows nothing about sections. It only decides *that* the user
asked to move and in which direction; the intent sink decides what that means.
"""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Callable, Mapping, Optional

from sentience import config
from sentience.model.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class Intent(StrEnum):
    ADVANCE = "advance"
    RETREAT = "retreat"
    FIRST = "first"
    LAST = "last"


# Key identities follow the DOM `KeyboardEvent.key` names.
DEFAULT_KEY_BINDINGS: dict[str, Intent] = {
    "ArrowDown": Intent.ADVANCE,
    " ": Intent.ADVANCE,
    "PageDown": Intent.ADVANCE,
    "ArrowUp": Intent.RETREAT,
    "PageUp": Intent.RETREAT,
    "Home": Intent.FIRST,
    "End": Intent.LAST,
}

IntentSink = Callable[[Intent], None]


class WheelAccumulator:
    """
    Sums wheel deltas until they cross the threshold.

    The running sum drains to zero either when an intent is emitted or after
    a quiet period without wheel events. There is only ever one pending
    quiet-period timer; each event cancels and re-arms it.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        threshold: float = config.WHEEL_THRESHOLD,
        quiet_period_ms: float = config.WHEEL_QUIET_PERIOD_MS,
    ) -> None:
        if threshold <= 0:
            raise ValueError(f"threshold must be positive, got {threshold}")
        self.scheduler = scheduler
        self.threshold = threshold
        self.quiet_period_ms = quiet_period_ms
        self.scroll_delta: float = 0.0
        self.reset_handle: Optional[TimerHandle] = None

    def feed(self, delta_y: float) -> Optional[Intent]:
        """Add one wheel event (positive = downwards)."""
        self.scroll_delta += delta_y

        intent: Optional[Intent] = None
        if abs(self.scroll_delta) >= self.threshold:
            intent = Intent.ADVANCE if self.scroll_delta > 0 else Intent.RETREAT
            self.scroll_delta = 0.0

        if self.reset_handle is not None:
            self.reset_handle.cancel()
        self.reset_handle = self.scheduler.call_later(self.quiet_period_ms, self._drain)
        return intent

    def _drain(self) -> None:
        self.reset_handle = None
        self.scroll_delta = 0.0


class InputAggregator:
    """Three independent channels funnelling into one intent sink."""

    def __init__(
        self,
        scheduler: Scheduler,
        sink: IntentSink,
        key_bindings: Optional[Mapping[str, Intent]] = None,
        touch_threshold: float = config.TOUCH_SWIPE_THRESHOLD,
    ) -> None:
        self.sink = sink
        self.wheel = WheelAccumulator(scheduler)
        self.key_bindings: dict[str, Intent] = dict(
            DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings
        )
        self.touch_threshold = touch_threshold
        self._touch_start_y: Optional[float] = None

    # ---- wheel ----

    def handle_wheel(self, delta_y: float) -> None:
        intent = self.wheel.feed(delta_y)
        if intent is not None:
            self._emit(intent, "wheel")

    # ---- touch ----

    def handle_touch_start(self, y: float) -> None:
        self._touch_start_y = y

    def handle_touch_end(self, y: float) -> None:
        if self._touch_start_y is None:
            return
        diff = self._touch_start_y - y
        self._touch_start_y = None
        if abs(diff) > self.touch_threshold:
            self._emit(Intent.ADVANCE if diff > 0 else Intent.RETREAT, "touch")

    # ---- keyboard ----

    def handle_key(self, key: str) -> bool:
        """Returns True when the key is bound, i.e. its default action should be suppressed."""
        intent = self.key_bindings.get(key)
        if intent is None:
            return False
        self._emit(intent, f"key {key!r}")
        return True

    def _emit(self, intent: Intent, source: str) -> None:
        logger.debug(f"Intent {intent} from {source}")
        self.sink(intent)
