"""
Scheduling Primitives
=====================
A clock, cancelable one-shot delays and a frame ticker.

Why is this file needed?
------------------------
1. Decoupling: The navigator, the input aggregator and the animators need
   "call me later" and "call me every frame" without knowing about Qt.
2. Testing: Tests drive a virtual clock instead of the Qt event loop, so
   transition locks and quiet periods can be checked to the millisecond.

Classes:
    TimerHandle: A pending one-shot callback that can be cancelled.
    FrameTicker: The per-frame source that animated subsystems subscribe to.
    Scheduler: Abstract clock + delay factory owning one FrameTicker.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# A frame callback receives the frame timestamp (ms). Returning False ends
# the subscription; any other value keeps it.
FrameCallback = Callable[[float], Optional[bool]]


class TimerHandle:
    """A pending one-shot callback. Cancelling is idempotent."""

    def __init__(self, on_cancel: Optional[Callable[[], None]] = None) -> None:
        self._on_cancel = on_cancel
        self.cancelled: bool = False
        self.fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if not self.active:
            return
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()

    def mark_fired(self) -> None:
        self.fired = True


class Subscription:
    """Link between a FrameTicker and one frame callback."""

    def __init__(self, ticker: FrameTicker, callback: FrameCallback) -> None:
        self._ticker = ticker
        self.callback = callback
        self.active: bool = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._ticker._remove(self)


class FrameTicker:
    """
    Fan-out of frame ticks to subscribers.

    Subscribers run in subscription order. A subscriber added during a tick
    first runs on the next tick.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: FrameCallback) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def tick(self, now_ms: float) -> None:
        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            if subscription.callback(now_ms) is False:
                subscription.cancel()

    def _remove(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass


class Scheduler(ABC):
    """Clock (milliseconds), one-shot delays, and the shared frame ticker."""

    def __init__(self) -> None:
        self.frames = FrameTicker()

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds."""

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run `callback` once after `delay_ms`. The returned handle cancels it."""
