"""Immediate-mode drawing surface backed by a per-pixel-alpha pygame Surface.

Callers draw in logical coordinates; the canvas multiplies everything by the
device pixel ratio. Every fill takes its own opacity, applied to that fill
only.
"""

from __future__ import annotations

import logging
import math

import pygame

from ..constants import GLOW_RADIUS_RATIO, GRADIENT_STEP

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]
Point = tuple[float, float]


def alpha_byte(opacity: float) -> int:
    """Map an opacity in [0, 1] onto an 8-bit alpha channel."""
    return max(0, min(255, round(opacity * 255)))


def _draw_gradient_rings(
    target: pygame.Surface, center: tuple[int, int], radius: int, color: Color, opacity: float
) -> None:
    # Outer rings first; each smaller ring overwrites the centre with a
    # stronger alpha, fading linearly to transparent at ``radius``.
    peak = opacity * 255
    for r in range(radius, 0, -GRADIENT_STEP):
        a = max(0, min(255, round(peak * (1 - r / radius))))
        pygame.draw.circle(target, (*color, a), center, r)


def radial_gradient(radius: int, color: Color, opacity: float) -> pygame.Surface:
    """Square sprite holding a radial gradient from ``color`` to transparent."""
    sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    _draw_gradient_rings(sprite, (radius, radius), radius, color, opacity)
    return sprite


class Canvas:
    """The drawing surface the animation engine renders into."""

    def __init__(self) -> None:
        self.surface: pygame.Surface | None = None
        self.width = 0.0
        self.height = 0.0
        self.dpr = 1.0
        self._glow: pygame.Surface | None = None
        self._glow_color: Color | None = None

    @property
    def available(self) -> bool:
        return self.surface is not None

    def resize(self, width: float, height: float, dpr: float = 1.0) -> None:
        """Resize the backing surface to ``width*dpr x height*dpr``."""
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        if dpr <= 0:
            raise ValueError(f"Device pixel ratio must be positive, got {dpr}")
        self.width = float(width)
        self.height = float(height)
        self.dpr = float(dpr)
        size = (int(width * dpr), int(height * dpr))
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self._glow = None
        logger.debug("Canvas backing surface resized to %dx%d", *size)

    def release(self) -> None:
        self.surface = None
        self._glow = None

    # ------------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.surface.fill((0, 0, 0, 0))

    def fill_circle(self, x: float, y: float, radius: float, color: Color, opacity: float) -> None:
        r = max(1, round(radius * self.dpr))
        sprite = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
        pygame.draw.circle(sprite, (*color, alpha_byte(opacity)), (r, r), r)
        self.surface.blit(sprite, (round(x * self.dpr) - r, round(y * self.dpr) - r))

    def fill_polygon(self, points: list[Point], color: Color, opacity: float) -> None:
        scaled = [(px * self.dpr, py * self.dpr) for px, py in points]
        left = math.floor(min(px for px, _ in scaled))
        top = math.floor(min(py for _, py in scaled))
        right = int(max(px for px, _ in scaled)) + 2
        bottom = int(max(py for _, py in scaled)) + 2
        sprite = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
        pygame.draw.polygon(
            sprite,
            (*color, alpha_byte(opacity)),
            [(px - left, py - top) for px, py in scaled],
        )
        self.surface.blit(sprite, (left, top))

    def fill_radial_gradient(
        self, x: float, y: float, radius: float, color: Color, opacity: float
    ) -> None:
        """Disc of ``radius`` fading from ``color`` at ``opacity`` to transparent."""
        r = max(1, round(radius * self.dpr))
        sprite = radial_gradient(r, color, opacity)
        self.surface.blit(sprite, (round(x * self.dpr) - r, round(y * self.dpr) - r))

    def fill_ambient_glow(self, color: Color, opacity: float) -> None:
        """Full-surface radial gradient centred on the canvas.

        The gradient is rendered once per size at full strength and its
        surface alpha carries the per-frame opacity.
        """
        if self._glow is None or self._glow_color != color:
            self._glow = self._build_glow(color)
            self._glow_color = color
        self._glow.set_alpha(alpha_byte(opacity))
        self.surface.blit(self._glow, (0, 0))

    def _build_glow(self, color: Color) -> pygame.Surface:
        w, h = self.surface.get_size()
        glow = pygame.Surface((w, h), pygame.SRCALPHA)
        radius = max(1, round(max(w, h) * GLOW_RADIUS_RATIO))
        _draw_gradient_rings(glow, (w // 2, h // 2), radius, color, 1.0)
        return glow
