"""Echo star trail: host window and event router for the animation engine."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from .constants import BLACK, TITLE
from .models.engine import StarTrailEngine
from .screens.hero import HeroScreen
from .settings import Settings, has_settings, load_settings, save_settings
from .ui.canvas import Canvas
from .ui.frames import FrameScheduler
from .ui.hud import DebugOverlay

logger = logging.getLogger(__name__)


class App:
    """Pygame window hosting one star trail engine."""

    def __init__(self, settings: Settings, rng: random.Random | None = None) -> None:
        pygame.init()
        self.settings = settings
        self.screen = pygame.display.set_mode(
            (settings.width, settings.height), pygame.RESIZABLE
        )
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.scheduler = FrameScheduler()
        self.canvas = Canvas()
        self.engine = StarTrailEngine(
            self.scheduler, self.canvas, enable_trail=settings.enable_trail, rng=rng,
        )

        self.hero = HeroScreen() if settings.show_hero else None
        self.overlay = DebugOverlay()
        self.overlay.visible = settings.show_debug

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        self._resize_engine()
        self.engine.start()
        try:
            while self.running:
                dt = self.clock.tick(self.settings.fps) / 1000.0
                self._handle_events()
                self._update(dt)
                self._draw()
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        self.engine.destroy()
        pygame.quit()

    def _device_pixel_ratio(self) -> float:
        window_w, _ = pygame.display.get_window_size()
        if window_w <= 0:
            return 1.0
        return self.screen.get_width() / window_w

    def _resize_engine(self) -> None:
        self.screen = pygame.display.get_surface()
        dpr = self._device_pixel_ratio()
        width, height = self.screen.get_size()
        self.engine.resize(width / dpr, height / dpr, dpr)

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                self._resize_engine()
            elif event.type == pygame.MOUSEMOTION:
                self.engine.handle_pointer_move(*event.pos)
            elif event.type == pygame.WINDOWLEAVE:
                self.engine.handle_pointer_leave()

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_t:
            self.engine.set_trail_enabled(not self.engine.enable_trail)
        elif key == pygame.K_F3:
            self.overlay.toggle()

    def _update(self, dt: float) -> None:
        if self.hero:
            self.hero.update(dt)
        self.scheduler.run_pending(pygame.time.get_ticks())

    def _draw(self) -> None:
        self.screen.fill(BLACK)
        if self.canvas.available:
            self.screen.blit(self.canvas.surface, (0, 0))
        if self.hero:
            self.hero.draw(self.screen)
        self.overlay.draw(self.screen, self.engine)
        pygame.display.flip()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Echo star trail - animated star field with a pointer trail",
    )
    parser.add_argument('--width', '-W', type=int, metavar='PX', help='Window width')
    parser.add_argument('--height', '-H', type=int, metavar='PX', help='Window height')
    parser.add_argument('--fps', type=int, metavar='N', help='Frame rate cap')
    parser.add_argument(
        '--no-trail',
        dest='enable_trail',
        action='store_false',
        default=None,
        help='Render the background only, never spawn trail stars',
    )
    parser.add_argument(
        '--debug',
        dest='show_debug',
        action='store_true',
        default=None,
        help='Show the star count / FPS overlay (toggle with F3)',
    )
    parser.add_argument(
        '--no-hero',
        dest='show_hero',
        action='store_false',
        default=None,
        help='Hide the landing hero text',
    )
    parser.add_argument('--seed', '-s', type=int, default=None, metavar='SEED',
                        help='Random seed for reproducible particle layouts')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity (default: WARNING)',
    )
    parser.add_argument(
        '--save-settings',
        action='store_true',
        help='Persist the effective settings as the new defaults',
    )
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Overlay command line flags that were given on top of ``settings``."""
    for name in ('width', 'height', 'fps', 'enable_trail', 'show_debug', 'show_hero'):
        value = getattr(args, name)
        if value is not None:
            setattr(settings, name, value)
    return settings


def main(argv: list[str] | None = None) -> None:
    """Entry point for the star-trail command."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if not has_settings():
        logger.debug("No saved settings, using defaults")
    settings = apply_overrides(load_settings(), args)
    if args.save_settings:
        save_settings(settings)

    rng = random.Random(args.seed) if args.seed is not None else None
    App(settings, rng=rng).run()


if __name__ == "__main__":
    main()
