"""Particle animation engine for the star trail background.

The engine owns both particle populations and the pointer samples for one
canvas. The host drives it through three event sources, all on the same
thread:

* ``update(timestamp)`` once per display frame (scheduled through the
  host's :class:`~star_trail.ui.frames.FrameScheduler`),
* ``resize(width, height, dpr)`` whenever the container changes size,
* ``handle_pointer_move`` / ``handle_pointer_leave`` for pointer input.

Motion is integrated in fixed units per tick, so the perceived speed follows
the display refresh rate. The timestamp only feeds the twinkle, the glow
pulse and the FPS counter.
"""

from __future__ import annotations

import logging
import math
import random

from ..constants import (
    GLOW_COLOR,
    GLOW_PULSE_AMPLITUDE,
    GLOW_PULSE_BASELINE,
    GLOW_PULSE_FREQUENCY,
    TRAIL_GLOW_OPACITY,
    TRAIL_GLOW_SCALE,
    TRAIL_MOVE_THRESHOLD,
    TRAIL_SPAWN_RATE,
    WHITE,
)
from ..ui.canvas import Canvas
from ..ui.frames import FrameScheduler
from .particles import (
    BackgroundParticle,
    PointerState,
    TrailStar,
    make_background,
    star_polygon,
)

logger = logging.getLogger(__name__)


def glow_pulse(timestamp: float) -> float:
    """Peak opacity of the ambient glow at ``timestamp`` (ms)."""
    return math.sin(timestamp * GLOW_PULSE_FREQUENCY) * GLOW_PULSE_AMPLITUDE + GLOW_PULSE_BASELINE


class StarTrailEngine:
    """Animated star field with an optional pointer-driven star trail."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        canvas: Canvas | None = None,
        enable_trail: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.canvas = canvas
        self.enable_trail = enable_trail
        self.rng = rng or random.Random()

        self.width = 0.0
        self.height = 0.0
        self.background: list[BackgroundParticle] = []
        self.trail_stars: list[TrailStar] = []
        self.pointer = PointerState()

        # Instrumentation
        self.last_timestamp = 0.0
        self.fps = 0

        self._frame_handle: int | None = None
        self._running = False
        self._destroyed = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running

    @property
    def trail_count(self) -> int:
        return len(self.trail_stars)

    def start(self) -> None:
        if self._destroyed:
            raise RuntimeError("Cannot restart a destroyed engine")
        if self._running:
            return
        self._running = True
        self._frame_handle = self.scheduler.request_frame(self.update)
        logger.debug("Animation loop started (handle %d)", self._frame_handle)

    def destroy(self) -> None:
        """Cancel the pending frame and drop the canvas and pointer input."""
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None
        self._running = False
        self._destroyed = True
        if self.canvas is not None:
            self.canvas.release()
            self.canvas = None
        logger.debug("Animation engine destroyed")

    def set_trail_enabled(self, enabled: bool) -> None:
        """Switch the pointer trail on or off; switching off drops live stars."""
        self.enable_trail = enabled
        if not enabled:
            self.trail_stars = []
        logger.debug("Trail %s", "enabled" if enabled else "disabled")

    def resize(self, width: float, height: float, dpr: float = 1.0) -> None:
        """Resize the canvas and regenerate the background population."""
        if dpr <= 0:
            raise ValueError(f"Device pixel ratio must be positive, got {dpr}")
        if self.canvas is not None:
            self.canvas.resize(width, height, dpr)
        elif width < 0 or height < 0:
            raise ValueError(f"Surface size must be non-negative, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self.background = make_background(self.width, self.height, self.rng)
        logger.info(
            "Surface resized to %gx%g @%gx, %d background particles",
            width, height, dpr, len(self.background),
        )

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def handle_pointer_move(
        self, x: float, y: float, origin: tuple[float, float] = (0.0, 0.0)
    ) -> None:
        """Store a viewport-space pointer sample relative to ``origin``."""
        if self._destroyed:
            return
        self.pointer.move_to(x - origin[0], y - origin[1])

    def handle_pointer_leave(self) -> None:
        if self._destroyed:
            return
        self.pointer.leave()

    # ------------------------------------------------------------------
    # Frame tick
    # ------------------------------------------------------------------

    def update(self, timestamp: float) -> None:
        """Advance and render one frame, then schedule the next one."""
        self._frame_handle = None
        canvas = self.canvas
        if canvas is None or not canvas.available:
            logger.debug("Canvas unavailable, tick at %.1f skipped", timestamp)
            self._running = False
            return

        delta = timestamp - self.last_timestamp
        self.last_timestamp = timestamp
        if delta > 0:
            self.fps = round(1000 / delta)

        canvas.clear()
        canvas.fill_ambient_glow(GLOW_COLOR, glow_pulse(timestamp))
        self._update_background(canvas, timestamp)
        if self.enable_trail:
            self._update_trail(canvas)

        if self._running:
            self._frame_handle = self.scheduler.request_frame(self.update)

    def _update_background(self, canvas: Canvas, timestamp: float) -> None:
        for p in self.background:
            p.advance(self.width, self.height)
            canvas.fill_circle(p.x, p.y, p.size, WHITE, p.current_alpha(timestamp))

    def _update_trail(self, canvas: Canvas) -> None:
        pointer = self.pointer
        if (
            pointer.inside
            and pointer.distance() > TRAIL_MOVE_THRESHOLD
            and self.rng.random() < TRAIL_SPAWN_RATE
        ):
            self.trail_stars.append(TrailStar.spawn(pointer.x, pointer.y, self.rng))
        pointer.commit()

        survivors = []
        for star in self.trail_stars:
            star.advance()
            if not star.alive:
                continue
            survivors.append(star)
            self._draw_trail_star(canvas, star)
        self.trail_stars = survivors

    def _draw_trail_star(self, canvas: Canvas, star: TrailStar) -> None:
        opacity = star.opacity
        canvas.fill_polygon(
            star_polygon(star.x, star.y, star.size, star.rotation), star.color, opacity
        )
        canvas.fill_radial_gradient(
            star.x, star.y, star.size * TRAIL_GLOW_SCALE, star.color, opacity * TRAIL_GLOW_OPACITY
        )
