"""Custom cursor with a lagging trail."""
from __future__ import annotations

from dataclasses import dataclass, field

from sentience import config


@dataclass
class CursorFollower:
    """
    `pointer` is the raw input position; the glow and the primary marker sit on
    it. `smoothed` eases towards the pointer every frame. Trail markers are
    interpolated between the two rather than simulated, so a trail with a
    larger fraction sits closer to the pointer.
    """
    smoothing: float = config.CURSOR_SMOOTHING
    trail_fractions: tuple[float, ...] = config.TRAIL_FRACTIONS
    pointer: tuple[float, float] = (0.0, 0.0)
    smoothed: tuple[float, float] = (0.0, 0.0)
    moves: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 < self.smoothing <= 1.0:
            raise ValueError(f"smoothing must be in (0, 1], got {self.smoothing}")

    def move(self, x: float, y: float) -> None:
        self.pointer = (float(x), float(y))
        self.moves += 1

    def step(self) -> None:
        px, py = self.pointer
        sx, sy = self.smoothed
        self.smoothed = (sx + (px - sx) * self.smoothing, sy + (py - sy) * self.smoothing)

    def trail_positions(self) -> list[tuple[float, float]]:
        px, py = self.pointer
        sx, sy = self.smoothed
        return [(sx + (px - sx) * f, sy + (py - sy) * f) for f in self.trail_fractions]
