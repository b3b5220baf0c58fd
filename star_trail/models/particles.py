"""Particle populations for the star trail background.

Two kinds of particle share the surface:

* ``BackgroundParticle``: ambient stars that drift, twinkle and wrap around
  the surface edges. They live as long as the surface keeps its size.
* ``TrailStar``: short-lived five-pointed stars spawned near the pointer.
  They drift upwards and fade out with a quadratic ease.

All motion is expressed in fixed units per tick.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ..constants import (
    BG_ALPHA_RANGE,
    BG_PARTICLE_DENSITY,
    BG_SIZE_RANGE,
    BG_VELOCITY_RANGE,
    POINTER_OFFSCREEN,
    STAR_ANGLE_STEP,
    STAR_INNER_RATIO,
    STAR_LIFE_DURATION,
    STAR_LIFE_JITTER,
    STAR_SPIKES,
    TRAIL_COLOR,
    TRAIL_DRIFT,
    TRAIL_ROTATION_SPEED_RANGE,
    TRAIL_SIZE_RANGE,
    TRAIL_SPREAD,
    TRAIL_VELOCITY_RANGE,
    TWINKLE_FREQUENCY,
)


def _wrap(value: float, limit: float) -> float:
    """Fold *value* into ``[0, limit)``."""
    value %= limit
    # -1e-18 % 100.0 rounds up to 100.0
    if value >= limit:
        value = 0.0
    return value


@dataclass
class BackgroundParticle:
    """Ambient, non-interactive star."""

    x: float
    y: float
    vx: float
    vy: float
    size: float
    alpha: float  # base opacity
    phase: float  # twinkle offset in radians

    @classmethod
    def spawn(cls, width: float, height: float, rng: random.Random) -> BackgroundParticle:
        half = BG_VELOCITY_RANGE / 2
        return cls(
            x=rng.random() * width,
            y=rng.random() * height,
            vx=rng.uniform(-half, half),
            vy=rng.uniform(-half, half),
            size=rng.uniform(*BG_SIZE_RANGE),
            alpha=rng.uniform(*BG_ALPHA_RANGE),
            phase=rng.random() * math.tau,
        )

    def advance(self, width: float, height: float) -> None:
        self.x = _wrap(self.x + self.vx, width)
        self.y = _wrap(self.y + self.vy, height)

    def current_alpha(self, timestamp: float) -> float:
        """Base alpha modulated by this particle's twinkle."""
        twinkle = math.sin(timestamp * TWINKLE_FREQUENCY + self.phase) * 0.5 + 0.5
        return self.alpha * (0.3 + 0.7 * twinkle)


@dataclass
class TrailStar:
    """Ephemeral star left behind by the pointer."""

    x: float
    y: float
    vx: float
    vy: float
    size: float
    max_life: float  # ticks
    rotation: float
    rotation_speed: float
    life: float = 1.0
    color: tuple[int, int, int] = TRAIL_COLOR

    @classmethod
    def spawn(cls, x: float, y: float, rng: random.Random) -> TrailStar:
        return cls(
            x=x + rng.uniform(-TRAIL_SPREAD, TRAIL_SPREAD),
            y=y + rng.uniform(-TRAIL_SPREAD, TRAIL_SPREAD),
            vx=rng.uniform(*TRAIL_VELOCITY_RANGE),
            vy=rng.uniform(*TRAIL_VELOCITY_RANGE),
            size=rng.uniform(*TRAIL_SIZE_RANGE),
            max_life=STAR_LIFE_DURATION + rng.uniform(-STAR_LIFE_JITTER, STAR_LIFE_JITTER),
            rotation=rng.random() * math.tau,
            rotation_speed=rng.uniform(*TRAIL_ROTATION_SPEED_RANGE),
        )

    def advance(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.rotation += self.rotation_speed
        # Upward drift
        self.vy -= TRAIL_DRIFT
        self.life -= 1 / self.max_life

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def opacity(self) -> float:
        """Quadratic ease-out of the remaining life."""
        return self.life ** 2


@dataclass
class PointerState:
    """Current and previous pointer samples in container-local space."""

    x: float = POINTER_OFFSCREEN
    y: float = POINTER_OFFSCREEN
    prev_x: float = POINTER_OFFSCREEN
    prev_y: float = POINTER_OFFSCREEN

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def leave(self) -> None:
        self.x = POINTER_OFFSCREEN
        self.y = POINTER_OFFSCREEN

    def distance(self) -> float:
        return math.hypot(self.x - self.prev_x, self.y - self.prev_y)

    def commit(self) -> None:
        self.prev_x = self.x
        self.prev_y = self.y

    @property
    def inside(self) -> bool:
        return not (self.x == POINTER_OFFSCREEN and self.y == POINTER_OFFSCREEN)


def star_polygon(
    x: float, y: float, size: float, rotation: float
) -> list[tuple[float, float]]:
    """Vertices of a five-pointed star centred on ``(x, y)``.

    Vertices alternate between the outer radius ``size`` and the inner
    radius, starting at angle 0 relative to ``rotation``.
    """
    inner = size * STAR_INNER_RATIO
    points = []
    for i in range(STAR_SPIKES * 2):
        radius = size if i % 2 == 0 else inner
        angle = rotation + STAR_ANGLE_STEP * i
        points.append((x + math.cos(angle) * radius, y + math.sin(angle) * radius))
    return points


def background_count(width: float, height: float) -> int:
    return math.floor(width * height * BG_PARTICLE_DENSITY)


def make_background(
    width: float, height: float, rng: random.Random
) -> list[BackgroundParticle]:
    """Build a fresh background population for a surface of the given size."""
    return [
        BackgroundParticle.spawn(width, height, rng)
        for _ in range(background_count(width, height))
    ]
