"""Persisted user settings.

Uses platformdirs for a cross-platform location:
  Linux:   ~/.config/star_trail/settings.json
  macOS:   ~/Library/Application Support/star_trail/settings.json
  Windows: C:/Users/.../AppData/Local/star_trail/settings.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from platformdirs import user_config_dir

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(user_config_dir("star_trail"))
SETTINGS_FILE = CONFIG_DIR / "settings.json"


@dataclass
class Settings:
    """Window and overlay preferences for the host application."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    enable_trail: bool = True
    show_debug: bool = False
    show_hero: bool = True


def _from_dict(d: dict) -> Settings:
    settings = Settings()
    for f in fields(Settings):
        if f.name not in d:
            continue
        value = d[f.name]
        expected = type(getattr(settings, f.name))
        # bool is an int subclass, so compare exact types
        if type(value) is not expected:
            logger.warning(
                "Ignoring setting %r: expected %s, got %r",
                f.name, expected.__name__, value,
            )
            continue
        setattr(settings, f.name, value)
    return settings


def load_settings(path: Path = SETTINGS_FILE) -> Settings:
    """Read settings from JSON. Falls back to defaults if missing or broken."""
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Settings file %s does not hold an object, using defaults", path)
        return Settings()
    return _from_dict(data)


def save_settings(settings: Settings, path: Path = SETTINGS_FILE) -> Path:
    """Write settings to JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2))
    logger.info("Settings saved to %s", path)
    return path


def has_settings(path: Path = SETTINGS_FILE) -> bool:
    return path.exists()
