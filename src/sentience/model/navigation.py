"""
Section Navigation
==================
The state machine that decides which section is active.

Why is this file needed?
------------------------
1. Single authority: Wheel, touch, keyboard and clicks all end up in
   `SectionNavigator.request_section`, which alone owns the current index and
   the transition lock.
2. Atomic side effects: An accepted request is published as one immutable
   `SectionChange`, so listeners never observe a half-updated page.

Classes:
    NavigationState: Current index and transition lock.
    SectionChange: Value published for every accepted transition.
    SectionNavigator: The Idle/Transitioning state machine.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable

from sentience import config
from sentience.model.scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    total_sections: int = config.TOTAL_SECTIONS
    transition_duration_ms: int = config.TRANSITION_DURATION_MS
    current_index: int = 0
    is_transitioning: bool = False

    def __post_init__(self) -> None:
        if self.total_sections < 1:
            raise ValueError(f"total_sections must be >= 1, got {self.total_sections}")
        if self.transition_duration_ms < 0:
            raise ValueError(
                f"transition_duration_ms must be >= 0, got {self.transition_duration_ms}"
            )

    def in_range(self, index: int) -> bool:
        return 0 <= index < self.total_sections

    def progress_for(self, index: int) -> float:
        """Linear progress of `index` through the sequence, 0-100."""
        if self.total_sections == 1:
            return 100.0
        return index / (self.total_sections - 1) * 100.0


@dataclass(frozen=True)
class SectionChange:
    """Everything the UI needs to reflect a newly active section."""
    index: int
    total_sections: int
    progress: float
    scrolled: bool
    forced: bool = False

    def is_active(self, index: int) -> bool:
        return index == self.index


SectionListener = Callable[[SectionChange], None]
EntryHook = Callable[[int], None]


class SectionNavigator:
    """
    Two states, Idle and Transitioning.

    Idle -> Transitioning when a request is accepted; Transitioning -> Idle
    once `transition_duration_ms` has elapsed. Forced requests bypass the lock
    and release it immediately (startup activation only).
    """

    def __init__(self, scheduler: Scheduler, state: NavigationState | None = None) -> None:
        self.scheduler = scheduler
        self.state = state or NavigationState()
        self._listeners: list[SectionListener] = []
        self._entry_hooks: dict[int, list[EntryHook]] = defaultdict(list)
        # Bumped on every accepted transition; a release only unlocks the
        # transition that scheduled it.
        self._generation: int = 0

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def is_transitioning(self) -> bool:
        return self.state.is_transitioning

    @property
    def total_sections(self) -> int:
        return self.state.total_sections

    def add_listener(self, listener: SectionListener) -> None:
        self._listeners.append(listener)

    def on_enter(self, index: int, hook: EntryHook) -> None:
        """Register `hook` to run every time section `index` becomes active."""
        self._entry_hooks[index].append(hook)

    def can_request(self, index: int, force: bool = False) -> bool:
        if not self.state.in_range(index):
            return False
        if force:
            return True
        if self.state.is_transitioning:
            return False
        return index != self.state.current_index

    def request_section(self, index: int, force: bool = False) -> bool:
        if not self.can_request(index, force):
            logger.debug(
                f"Rejected section {index} (current={self.state.current_index}, "
                f"transitioning={self.state.is_transitioning})"
            )
            return False

        self.state.is_transitioning = True
        self.state.current_index = index
        self._generation += 1
        generation = self._generation

        change = SectionChange(
            index=index,
            total_sections=self.state.total_sections,
            progress=self.state.progress_for(index),
            scrolled=index > 0,
            forced=force,
        )
        logger.info(f"Section {index + 1}/{change.total_sections} ({change.progress:.0f}%)")

        for listener in list(self._listeners):
            listener(change)
        for hook in list(self._entry_hooks.get(index, ())):
            hook(index)

        if force:
            self._release(generation)
        else:
            self.scheduler.call_later(
                self.state.transition_duration_ms, lambda: self._release(generation)
            )
        return True

    def advance(self) -> bool:
        return self.request_section(self.state.current_index + 1)

    def retreat(self) -> bool:
        return self.request_section(self.state.current_index - 1)

    def first(self) -> bool:
        return self.request_section(0)

    def last(self) -> bool:
        return self.request_section(self.state.total_sections - 1)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _release(self, generation: int) -> None:
        if generation == self._generation:
            self.state.is_transitioning = False
