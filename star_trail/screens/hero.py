"""Landing hero overlay with fade-in copy."""

from __future__ import annotations

import pygame

from ..constants import (
    APP_VERSION,
    DIM_GREY,
    HERO_BADGE,
    HERO_TAGLINE,
    HERO_TITLE,
    LIGHT_GREY,
    WHITE,
)


class HeroScreen:
    """Badge, headline and tagline centred over the star field."""

    def __init__(self) -> None:
        self.font_badge = pygame.font.Font(None, 24)
        self.font_title = pygame.font.Font(None, 160)
        self.font_tagline = pygame.font.Font(None, 30)
        self.font_version = pygame.font.Font(None, 22)
        self.title_alpha = 0.0
        self.tagline_alpha = 0.0

    def update(self, dt: float) -> None:
        if self.title_alpha < 255:
            self.title_alpha = min(255, self.title_alpha + 150 * dt)
        elif self.tagline_alpha < 255:
            self.tagline_alpha = min(255, self.tagline_alpha + 120 * dt)

    def draw(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()

        badge_surf = self.font_badge.render(HERO_BADGE, True, LIGHT_GREY)
        badge_surf.set_alpha(int(self.title_alpha * 0.6))
        badge_rect = badge_surf.get_rect(center=(width // 2, height // 2 - 110))
        surface.blit(badge_surf, badge_rect)
        pygame.draw.rect(surface, DIM_GREY, badge_rect.inflate(24, 12), 1, border_radius=12)

        title_surf = self.font_title.render(HERO_TITLE, True, WHITE)
        title_surf.set_alpha(int(self.title_alpha))
        title_rect = title_surf.get_rect(center=(width // 2, height // 2 - 20))
        surface.blit(title_surf, title_rect)

        tag_surf = self.font_tagline.render(HERO_TAGLINE, True, LIGHT_GREY)
        tag_surf.set_alpha(int(self.tagline_alpha * 0.6))
        tag_rect = tag_surf.get_rect(center=(width // 2, height // 2 + 70))
        surface.blit(tag_surf, tag_rect)

        # Version number (bottom-right)
        ver_surf = self.font_version.render(f"v{APP_VERSION}", True, LIGHT_GREY)
        ver_surf.set_alpha(120)
        surface.blit(ver_surf, (width - ver_surf.get_width() - 10, height - 24))
