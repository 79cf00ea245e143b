"""Application settings and config persistence for HueWheel.

Single source of truth for wheel layout and collaborator toggles.
Config is stored at ~/.config/huewheel/config.json (XDG-compliant).
Selected colors are never written here.

Usage:
    from huewheel.conf import settings

    settings.ring_count         # radial bands on the wheel
    settings.segment_count      # hue sectors on the wheel
    settings.copy_to_clipboard  # write hex to clipboard on every selection
    settings.feedback           # pulse the preview on every selection

    # Low-level config access
    from huewheel.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os

from .core.models import DEFAULT_RING_COUNT, DEFAULT_SEGMENT_COUNT

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'huewheel')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')

# Sane bounds for a tappable wheel
MAX_RINGS = 64
MAX_SEGMENTS = 360


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Wheel layout persistence
# =========================================================================

def _bounded(value, default: int, upper: int) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    if not 1 <= value <= upper:
        return default
    return value


def get_saved_layout() -> tuple[int, int]:
    """Get saved (rings, segments), defaulting to (10, 24)."""
    config = load_config()
    rings = _bounded(config.get('rings', DEFAULT_RING_COUNT), DEFAULT_RING_COUNT, MAX_RINGS)
    segments = _bounded(config.get('segments', DEFAULT_SEGMENT_COUNT),
                        DEFAULT_SEGMENT_COUNT, MAX_SEGMENTS)
    return rings, segments


def save_layout(rings: int, segments: int):
    """Persist wheel layout to config."""
    config = load_config()
    config['rings'] = rings
    config['segments'] = segments
    save_config(config)


# =========================================================================
# Collaborator toggles
# =========================================================================

def get_saved_flag(key: str, default: bool = True) -> bool:
    """Get a boolean preference ('copy_to_clipboard', 'feedback').

    Only JSON booleans count; anything else falls back to ``default``.
    """
    value = load_config().get(key, default)
    if not isinstance(value, bool):
        log.warning("Config: ignoring non-boolean %s=%r", key, value)
        return default
    return value


def save_flag(key: str, value: bool):
    """Persist a boolean preference."""
    config = load_config()
    config[key] = bool(value)
    save_config(config)


# =========================================================================
# Settings singleton
# =========================================================================

class Settings:
    """Application-wide settings singleton.

    Components read from here instead of calling config helpers directly.
    ``set_layout()`` validates and persists.
    """

    def __init__(self) -> None:
        rings, segments = get_saved_layout()
        self._ring_count = rings
        self._segment_count = segments

        self.copy_to_clipboard: bool = get_saved_flag('copy_to_clipboard')
        self.feedback: bool = get_saved_flag('feedback')

    @property
    def ring_count(self) -> int:
        return self._ring_count

    @property
    def segment_count(self) -> int:
        return self._segment_count

    @property
    def layout(self) -> tuple[int, int]:
        return (self._ring_count, self._segment_count)

    def set_layout(self, rings: int, segments: int, persist: bool = True) -> None:
        """Update wheel layout. Raises ValueError outside 1..MAX bounds."""
        if not 1 <= rings <= MAX_RINGS:
            raise ValueError(f"rings must be within 1..{MAX_RINGS}, got {rings}")
        if not 1 <= segments <= MAX_SEGMENTS:
            raise ValueError(f"segments must be within 1..{MAX_SEGMENTS}, got {segments}")
        if (rings, segments) == self.layout:
            return
        log.info("Settings: wheel %dx%d → %dx%d",
                 self._ring_count, self._segment_count, rings, segments)
        self._ring_count = rings
        self._segment_count = segments
        if persist:
            save_layout(rings, segments)

    def set_copy_to_clipboard(self, enabled: bool) -> None:
        self.copy_to_clipboard = enabled
        save_flag('copy_to_clipboard', enabled)

    def set_feedback(self, enabled: bool) -> None:
        self.feedback = enabled
        save_flag('feedback', enabled)


# Shared instance read by the CLI, API and GUI
settings = Settings()
