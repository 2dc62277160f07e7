"""
Particle Field
==============
The drifting, pointer-reactive background.

The pool is stored as a structure of numpy arrays (one array per attribute)
and is created exactly once. Every frame `step()` integrates positions, wraps
them toroidally and advances the pulse phase; `repel()` runs on pointer
moves. Rendering code reads the `x`, `y` and `radii` arrays, `opacities()` and
`connections()`.

Classes:
    Connections: Index pairs and line opacities for the connection pass.
    ParticleField: The pool and its physics.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import numpy as np

from sentience import config

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class Connections:
    """Pairs (i < j) closer than the connection radius."""
    i: npt.NDArray[np.intp]
    j: npt.NDArray[np.intp]
    alpha: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.i)

    def as_set(self) -> set[tuple[int, int]]:
        return {(int(a), int(b)) for a, b in zip(self.i, self.j)}


class ParticleField:
    def __init__(
        self,
        width: float,
        height: float,
        count: int = config.PARTICLE_COUNT,
        rng: Optional[np.random.Generator] = None,
        connection_radius: float = config.CONNECTION_RADIUS,
        repulsion_radius: float = config.REPULSION_RADIUS,
        grid_threshold: int = config.GRID_PAIRING_THRESHOLD,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.width = float(width)
        self.height = float(height)
        self.connection_radius = connection_radius
        self.repulsion_radius = repulsion_radius
        self.grid_threshold = grid_threshold

        rng = rng if rng is not None else np.random.default_rng()
        speed = config.PARTICLE_MAX_SPEED
        self.x = rng.random(count) * self.width
        self.y = rng.random(count) * self.height
        self.vx = (rng.random(count) - 0.5) * (2 * speed)
        self.vy = (rng.random(count) - 0.5) * (2 * speed)
        self.radii = rng.random(count) * config.PARTICLE_RADIUS_SPAN + config.PARTICLE_MIN_RADIUS
        self.base_alpha = rng.random(count) * config.PARTICLE_ALPHA_SPAN + config.PARTICLE_MIN_ALPHA
        self.phase = rng.random(count) * config.TWO_PI

        logger.debug(f"Created {count} particles on a {self.width:.0f}x{self.height:.0f} surface")

    def __len__(self) -> int:
        return len(self.x)

    # ------------------------------------------------------------------------------
    # Physics
    # ------------------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Only the surface changes; particles outside the new bounds wrap on the next step."""
        self.width = float(width)
        self.height = float(height)

    def step(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.phase += config.PHASE_INCREMENT
        self._wrap()

    def repel(self, px: float, py: float) -> None:
        """
        Push particles near the pointer away from it, then damp every velocity.

        Damping runs once per pointer move, not once per frame, so the
        effective friction depends on how often the pointer reports motion.
        """
        dx = px - self.x
        dy = py - self.y
        dist = np.hypot(dx, dy)
        near = dist < self.repulsion_radius

        force = (self.repulsion_radius - dist[near]) / self.repulsion_radius * config.REPULSION_STRENGTH
        self.vx[near] -= dx[near] * force * config.REPULSION_SCALE
        self.vy[near] -= dy[near] * force * config.REPULSION_SCALE

        self.vx *= config.VELOCITY_DAMPING
        self.vy *= config.VELOCITY_DAMPING

    def opacities(self) -> npt.NDArray[np.float64]:
        return self.base_alpha * (config.PULSE_FLOOR + config.PULSE_AMPLITUDE * np.sin(self.phase))

    def connections(self) -> Connections:
        if len(self) > self.grid_threshold:
            i, j = self._pairs_grid()
        else:
            i, j = self._pairs_brute_force()

        dist = np.hypot(self.x[i] - self.x[j], self.y[i] - self.y[j])
        alpha = (1.0 - dist / self.connection_radius) * config.CONNECTION_MAX_ALPHA
        return Connections(i=i, j=j, alpha=alpha)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _wrap(self) -> None:
        if self.width > 0:
            np.mod(self.x, self.width, out=self.x)
            # fmod of a tiny negative value can round up to the width itself
            self.x[self.x >= self.width] = 0.0
        if self.height > 0:
            np.mod(self.y, self.height, out=self.y)
            self.y[self.y >= self.height] = 0.0

    def _pairs_brute_force(self) -> tuple[npt.NDArray[np.intp], npt.NDArray[np.intp]]:
        """O(n^2) over the pool; fine for the default pool of 60."""
        i, j = np.triu_indices(len(self), k=1)
        dist = np.hypot(self.x[i] - self.x[j], self.y[i] - self.y[j])
        close = dist < self.connection_radius
        return i[close], j[close]

    def _pairs_grid(self) -> tuple[npt.NDArray[np.intp], npt.NDArray[np.intp]]:
        """Uniform grid with cell size = connection radius; only neighbouring cells are compared."""
        cell = self.connection_radius
        cx = np.floor(self.x / cell).astype(np.int64)
        cy = np.floor(self.y / cell).astype(np.int64)

        buckets: dict[tuple[int, int], list[int]] = {}
        for idx, key in enumerate(zip(cx.tolist(), cy.tolist())):
            buckets.setdefault(key, []).append(idx)

        pairs_i: list[npt.NDArray[np.intp]] = []
        pairs_j: list[npt.NDArray[np.intp]] = []
        # Half of the 3x3 neighbourhood so each cell pair is visited once
        offsets = ((0, 0), (1, 0), (-1, 1), (0, 1), (1, 1))
        for (bx, by), members in buckets.items():
            a = np.asarray(members, dtype=np.intp)
            for ox, oy in offsets:
                other = buckets.get((bx + ox, by + oy))
                if other is None:
                    continue
                b = np.asarray(other, dtype=np.intp)
                ai, bj = np.meshgrid(a, b, indexing="ij")
                ai = ai.ravel()
                bj = bj.ravel()
                if (ox, oy) == (0, 0):
                    keep = ai < bj
                    ai, bj = ai[keep], bj[keep]
                dist = np.hypot(self.x[ai] - self.x[bj], self.y[ai] - self.y[bj])
                close = dist < self.connection_radius
                pairs_i.append(ai[close])
                pairs_j.append(bj[close])

        if not pairs_i:
            empty = np.empty(0, dtype=np.intp)
            return empty, empty

        i = np.concatenate(pairs_i)
        j = np.concatenate(pairs_j)
        # Normalise to i < j and the same ordering as the brute-force pass
        lo = np.minimum(i, j)
        hi = np.maximum(i, j)
        order = np.lexsort((hi, lo))
        return lo[order], hi[order]
