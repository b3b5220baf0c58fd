"""Debug overlay: live trail star count and frame rate."""

from __future__ import annotations

import pygame

from ..constants import LIGHT_GREY, PANEL_BG, PANEL_BORDER, VIOLET, WHITE
from ..models.engine import StarTrailEngine


class DebugOverlay:
    """Small instrumentation panel drawn in the top-left corner."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)
        self.panel_size = (210, 56)
        self.visible = False

    def toggle(self) -> None:
        self.visible = not self.visible

    def lines(self, engine: StarTrailEngine) -> list[tuple[str, str]]:
        trail = f"{engine.trail_count}" if engine.enable_trail else "off"
        return [
            ("stars", trail),
            ("fps", f"{engine.fps}"),
            ("background", f"{len(engine.background)}"),
        ]

    def draw(self, surface: pygame.Surface, engine: StarTrailEngine) -> None:
        if not self.visible:
            return

        panel = pygame.Surface(self.panel_size, pygame.SRCALPHA)
        panel.fill(PANEL_BG)
        surface.blit(panel, (10, 10))
        pygame.draw.rect(surface, PANEL_BORDER, pygame.Rect((10, 10), self.panel_size), 1)

        x = 18
        y = 16
        for label, value in self.lines(engine):
            self._draw_stat(surface, label, value, x, y)
            y += 15

    def _draw_stat(self, surface: pygame.Surface, label: str, value: str, x: int, y: int) -> None:
        label_surf = self.font_small.render(label, True, LIGHT_GREY)
        surface.blit(label_surf, (x, y))
        val_surf = self.font.render(value, True, VIOLET if value == "off" else WHITE)
        surface.blit(val_surf, (x + 100, y - 2))
