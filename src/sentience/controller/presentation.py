"""
Presentation Controller
=======================
Builds the model components and connects them.

Why is this file needed?
------------------------
1. Wiring: The input aggregator emits intents, the navigator owns the
   section index, the reveal animators hang off section entry. None of them
   knows about the others; this class is the only place they meet.
2. Host independence: The Qt layer forwards raw events here and listens to
   the callbacks. Tests do the same with a fake scheduler.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from sentience import config
from sentience.model.content import ContentCatalog
from sentience.model.cursor import CursorFollower
from sentience.model.input import InputAggregator, Intent
from sentience.model.navigation import NavigationState, SectionListener, SectionNavigator
from sentience.model.particles import ParticleField
from sentience.model.reveal import CounterReveal, LineState, TerminalReveal
from sentience.model.scheduler import Scheduler, Subscription

logger = logging.getLogger(__name__)


def _ignore(_value: object) -> None:
    pass


class Presentation:
    def __init__(
        self,
        scheduler: Scheduler,
        content: ContentCatalog,
        width: float = config.WINDOW_SIZE[0],
        height: float = config.WINDOW_SIZE[1],
        particle_count: int = config.PARTICLE_COUNT,
        rng: Optional[np.random.Generator] = None,
        on_counters: Callable[[list[int]], None] = _ignore,
        on_terminal_lines: Callable[[list[LineState]], None] = _ignore,
    ) -> None:
        self.scheduler = scheduler
        self.content = content

        self.navigator = SectionNavigator(
            scheduler, NavigationState(total_sections=len(content.sections))
        )
        self.aggregator = InputAggregator(scheduler, self.apply_intent)
        self.field = ParticleField(width, height, count=particle_count, rng=rng)
        self.cursor = CursorFollower()

        self.counters = CounterReveal(
            scheduler, [stat.target for stat in content.stats], on_counters
        )
        self.terminal = TerminalReveal(
            scheduler, len(content.terminal_lines), on_terminal_lines
        )

        self.navigator.on_enter(config.LANDING_SECTION, lambda _index: self.counters.trigger())
        self.navigator.on_enter(config.TERMINAL_SECTION, lambda _index: self.terminal.trigger())

        self._frame_subscription: Optional[Subscription] = None

    @property
    def started(self) -> bool:
        return self._frame_subscription is not None

    def add_section_listener(self, listener: SectionListener) -> None:
        self.navigator.add_listener(listener)

    def start(self) -> None:
        """Start the continuous loops and activate the landing section."""
        if self.started:
            return
        logger.info(f"Starting presentation with {len(self.field)} particles")
        self._frame_subscription = self.scheduler.frames.subscribe(self._on_frame)
        self.navigator.request_section(config.LANDING_SECTION, force=True)

    # ------------------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------------------

    def pointer_moved(self, x: float, y: float) -> None:
        self.cursor.move(x, y)
        self.field.repel(x, y)

    def resized(self, width: float, height: float) -> None:
        self.field.resize(width, height)

    def select_section(self, index: int) -> bool:
        """Direct navigation from a link, the logo or an indicator dot."""
        return self.navigator.request_section(index)

    def apply_intent(self, intent: Intent) -> bool:
        match intent:
            case Intent.ADVANCE:
                return self.navigator.advance()
            case Intent.RETREAT:
                return self.navigator.retreat()
            case Intent.FIRST:
                return self.navigator.first()
            case Intent.LAST:
                return self.navigator.last()
        return False

    def _on_frame(self, _now_ms: float) -> None:
        self.field.step()
        self.cursor.step()
