"""
Reveal Animators
================
One-shot micro-animations triggered when a section becomes active.

Classes:
    CubicBezier: CSS-style timing function.
    CounterReveal: Stat numerals counting up from zero (landing section).
    TerminalReveal: Terminal lines sliding in one after another.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from sentience import config
from sentience.model.scheduler import Scheduler, Subscription

logger = logging.getLogger(__name__)


def ease_out_cubic(progress: float) -> float:
    return 1.0 - (1.0 - progress) ** 3


def clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class CubicBezier:
    """
    Timing function through (0, 0), (x1, y1), (x2, y2), (1, 1).

    Solves x(t) = x with Newton's method and falls back to bisection.
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.cx = 3.0 * x1
        self.bx = 3.0 * (x2 - x1) - self.cx
        self.ax = 1.0 - self.cx - self.bx
        self.cy = 3.0 * y1
        self.by = 3.0 * (y2 - y1) - self.cy
        self.ay = 1.0 - self.cy - self.by

    def __call__(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return self._sample_y(self._solve_t(x))

    def _sample_x(self, t: float) -> float:
        return ((self.ax * t + self.bx) * t + self.cx) * t

    def _sample_y(self, t: float) -> float:
        return ((self.ay * t + self.by) * t + self.cy) * t

    def _sample_dx(self, t: float) -> float:
        return (3.0 * self.ax * t + 2.0 * self.bx) * t + self.cx

    def _solve_t(self, x: float, epsilon: float = 1e-7) -> float:
        t = x
        for _ in range(8):
            error = self._sample_x(t) - x
            if abs(error) < epsilon:
                return t
            slope = self._sample_dx(t)
            if abs(slope) < 1e-6:
                break
            t -= error / slope

        lo, hi = 0.0, 1.0
        t = x
        for _ in range(64):
            current = self._sample_x(t)
            if abs(current - x) < epsilon:
                break
            if current < x:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2.0
        return t


CSS_EASE = CubicBezier(*config.TERMINAL_EASE_CURVE)


class CounterReveal:
    """
    Counts every stat from 0 to its target with a cubic ease-out.

    Fires once per session: the first trigger schedules the animation after
    `delay_ms`; later triggers are ignored.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        targets: Sequence[int],
        on_update: Callable[[list[int]], None],
        delay_ms: float = config.COUNTER_DELAY_MS,
        duration_ms: float = config.COUNTER_DURATION_MS,
    ) -> None:
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self.scheduler = scheduler
        self.targets = list(targets)
        self.on_update = on_update
        self.delay_ms = delay_ms
        self.duration_ms = duration_ms

        self.animated: bool = False
        self.values: list[int] = [0] * len(self.targets)
        self._started_at: Optional[float] = None
        self._subscription: Optional[Subscription] = None

    @property
    def running(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def trigger(self) -> bool:
        if self.animated:
            return False
        self.animated = True
        self.scheduler.call_later(self.delay_ms, self.start)
        return True

    def start(self) -> None:
        logger.debug(f"Counting up {len(self.targets)} stats")
        self._started_at = self.scheduler.now()
        self._subscription = self.scheduler.frames.subscribe(self._on_frame)

    def values_at(self, elapsed_ms: float) -> list[int]:
        eased = ease_out_cubic(clamp01(elapsed_ms / self.duration_ms))
        return [round(target * eased) for target in self.targets]

    def _on_frame(self, now_ms: float) -> bool:
        elapsed = now_ms - self._started_at
        self.values = self.values_at(elapsed)
        self.on_update(self.values)
        return elapsed < self.duration_ms


@dataclass(frozen=True)
class LineState:
    opacity: float
    offset: float  # horizontal, px


def hidden_line(offset_px: float = config.TERMINAL_LINE_OFFSET_PX) -> LineState:
    return LineState(opacity=0.0, offset=-offset_px)


class TerminalReveal:
    """
    Slides the terminal lines in, staggered per line.

    May be triggered on every visit of its section; the animation itself
    runs only the first time.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        line_count: int,
        on_update: Callable[[list[LineState]], None],
        stagger_ms: float = config.TERMINAL_LINE_STAGGER_MS,
        duration_ms: float = config.TERMINAL_LINE_DURATION_MS,
        offset_px: float = config.TERMINAL_LINE_OFFSET_PX,
        easing: Callable[[float], float] = CSS_EASE,
    ) -> None:
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self.scheduler = scheduler
        self.line_count = line_count
        self.on_update = on_update
        self.stagger_ms = stagger_ms
        self.duration_ms = duration_ms
        self.offset_px = offset_px
        self.easing = easing

        self.animated: bool = False
        self.runs: int = 0
        self._started_at: Optional[float] = None
        self._subscription: Optional[Subscription] = None

    @property
    def total_duration_ms(self) -> float:
        if self.line_count == 0:
            return 0.0
        return (self.line_count - 1) * self.stagger_ms + self.duration_ms

    def trigger(self) -> bool:
        if self.animated:
            return False
        self.animated = True
        self.runs += 1
        logger.debug(f"Revealing {self.line_count} terminal lines")
        self._started_at = self.scheduler.now()
        self.on_update(self.states_at(0.0))
        self._subscription = self.scheduler.frames.subscribe(self._on_frame)
        return True

    def states_at(self, elapsed_ms: float) -> list[LineState]:
        states = []
        for i in range(self.line_count):
            local = clamp01((elapsed_ms - i * self.stagger_ms) / self.duration_ms)
            eased = self.easing(local)
            states.append(LineState(opacity=eased, offset=-self.offset_px * (1.0 - eased)))
        return states

    def _on_frame(self, now_ms: float) -> bool:
        elapsed = now_ms - self._started_at
        self.on_update(self.states_at(elapsed))
        return elapsed < self.total_duration_ms
