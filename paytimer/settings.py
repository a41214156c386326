"""Startup configuration for PayTimer.

Read (never written) from:
    ~/.config/PayTimer/settings.json

Usage::

    settings = load_settings()
    engine = TimerEngine(settings.work_minutes, settings.break_minutes,
                         settings.hourly_wage)
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.engine import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_HOURLY_WAGE,
    DEFAULT_WORK_MINUTES,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "PayTimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class Settings:
    """All startup preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_minutes: int = DEFAULT_WORK_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    hourly_wage: float = DEFAULT_HOURLY_WAGE

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 520
    always_on_top: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"


def _valid(name: str, value: object) -> bool:
    if name in ("work_minutes", "break_minutes", "window_width", "window_height"):
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if name == "hourly_wage":
        return (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
        )
    if name == "always_on_top":
        return isinstance(value, bool)
    if name == "log_level":
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    return False


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults.

    Bad values are dropped one by one so a single typo doesn't throw
    away the rest of the file.
    """
    path = path or SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", path)
        return Settings()

    valid_keys = {f.name for f in fields(Settings)}
    accepted = {}
    for key, value in data.items():
        if key not in valid_keys:
            continue
        if not _valid(key, value):
            logger.warning("ignoring invalid setting %s=%r", key, value)
            continue
        accepted[key] = value

    settings = Settings(**accepted)
    settings.hourly_wage = float(settings.hourly_wage)
    settings.log_level = settings.log_level.upper()
    return settings
