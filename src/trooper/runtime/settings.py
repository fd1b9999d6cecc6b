"""Runtime settings resolved from the environment and platform directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from platformdirs import user_config_dir, user_data_dir

from .telemetry import ENV_PREFIX, PRESETS

APP_NAME = "trooper"
CONFIG_FILENAME = "config.ini"
BOOKMARKS_FILENAME = "bookmarks.json"
DEFAULT_COLLISION_LIMIT = 64


@dataclass(slots=True)
class Settings:
    config_path: Path
    bookmarks_path: Path
    yank_path: Optional[Path] = None
    show_hidden: bool = False
    collision_limit: int = DEFAULT_COLLISION_LIMIT
    log_preset: Optional[str] = None


def _flag(raw: Optional[str]) -> bool:
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(raw: Optional[str], fallback: int) -> int:
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def _preset(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    name = raw.strip().lower()
    return name if name in PRESETS else None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from ``TROOPER_*`` variables with platform defaults."""

    env = os.environ if environ is None else environ

    def get(name: str) -> Optional[str]:
        return env.get(f"{ENV_PREFIX}{name}") or None

    config_path = get("CONFIG")
    bookmarks_path = get("BOOKMARKS")
    yank_path = get("YANK_FILE")
    return Settings(
        config_path=(
            Path(config_path).expanduser()
            if config_path
            else Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
        ),
        bookmarks_path=(
            Path(bookmarks_path).expanduser()
            if bookmarks_path
            else Path(user_data_dir(APP_NAME, appauthor=False)) / BOOKMARKS_FILENAME
        ),
        yank_path=Path(yank_path).expanduser() if yank_path else None,
        show_hidden=_flag(get("SHOW_HIDDEN")),
        collision_limit=_int(get("COLLISION_LIMIT"), DEFAULT_COLLISION_LIMIT),
        log_preset=_preset(get("LOG_PRESET")),
    )


__all__ = ["Settings", "load_settings", "APP_NAME", "DEFAULT_COLLISION_LIMIT"]
