import os
import random
import unittest
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from star_trail.app import App, apply_overrides, parse_args
from star_trail.screens.hero import HeroScreen
from star_trail.settings import Settings


class ArgumentTests(unittest.TestCase):
    def test_defaults_leave_settings_untouched(self):
        args = parse_args([])
        settings = apply_overrides(Settings(width=900, enable_trail=False), args)
        self.assertEqual(settings.width, 900)
        self.assertFalse(settings.enable_trail)
        self.assertEqual(args.log_level, "WARNING")

    def test_flags_override_settings(self):
        args = parse_args(["--width", "640", "--no-trail", "--debug", "--no-hero", "--seed", "3"])
        settings = apply_overrides(Settings(), args)
        self.assertEqual(settings.width, 640)
        self.assertFalse(settings.enable_trail)
        self.assertTrue(settings.show_debug)
        self.assertFalse(settings.show_hero)
        self.assertEqual(args.seed, 3)


class AppTests(unittest.TestCase):
    def setUp(self):
        self.app = App(Settings(width=320, height=200), rng=random.Random(5))
        self.app._resize_engine()
        self.closed = False

    def tearDown(self):
        if not self.closed:
            self.app.shutdown()

    def test_engine_sized_to_window(self):
        self.assertEqual((self.app.engine.width, self.app.engine.height), (320, 200))
        self.assertEqual(len(self.app.engine.background), 19)

    def test_pointer_events_routed_to_engine(self):
        events = [
            pygame.event.Event(pygame.MOUSEMOTION, pos=(12, 34), rel=(1, 1), buttons=(0, 0, 0)),
        ]
        with mock.patch("pygame.event.get", return_value=events):
            self.app._handle_events()
        self.assertEqual((self.app.engine.pointer.x, self.app.engine.pointer.y), (12, 34))

        with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.WINDOWLEAVE)]):
            self.app._handle_events()
        self.assertFalse(self.app.engine.pointer.inside)

    def test_quit_event_stops_loop(self):
        with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
            self.app._handle_events()
        self.assertFalse(self.app.running)

    def test_keys_toggle_trail_and_overlay(self):
        self.app._handle_key(pygame.K_t)
        self.assertFalse(self.app.engine.enable_trail)
        self.app._handle_key(pygame.K_F3)
        self.assertTrue(self.app.overlay.visible)
        self.app._handle_key(pygame.K_ESCAPE)
        self.assertFalse(self.app.running)

    def test_frame_runs_engine_and_draws(self):
        self.app.engine.start()
        with mock.patch("pygame.time.get_ticks", return_value=500):
            self.app._update(0.016)
        self.assertEqual(self.app.engine.last_timestamp, 500)
        self.assertEqual(len(self.app.scheduler), 1)
        self.app.overlay.visible = True
        self.app._draw()

    def test_shutdown_destroys_engine(self):
        self.app.engine.start()
        self.app.shutdown()
        self.closed = True
        self.assertEqual(len(self.app.scheduler), 0)
        self.assertFalse(self.app.canvas.available)
        self.assertFalse(self.app.engine.running)


class HeroScreenTests(unittest.TestCase):
    def setUp(self):
        pygame.font.init()
        self.hero = HeroScreen()

    def test_title_fades_in_before_tagline(self):
        self.hero.update(1.0)
        self.assertEqual(self.hero.title_alpha, 150)
        self.assertEqual(self.hero.tagline_alpha, 0)
        self.hero.update(1.0)
        self.assertEqual(self.hero.title_alpha, 255)
        self.hero.update(1.0)
        self.assertEqual(self.hero.tagline_alpha, 120)

    def test_draws_onto_surface(self):
        surface = pygame.Surface((640, 360))
        self.hero.update(5.0)
        self.hero.draw(surface)


if __name__ == "__main__":
    unittest.main()
