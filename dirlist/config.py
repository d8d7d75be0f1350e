"""Read-only JSON preferences.

Stores the UI theme name and default switches for color, symlink following,
and modified-time annotations. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    """Only explicit booleans count; anything else reads as ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_no_color() -> bool:
    return _load_bool("no_color")


def load_follow_symlinks() -> bool:
    return _load_bool("follow_symlinks")


def load_show_mtime() -> bool:
    return _load_bool("show_mtime")


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_theme_name",
    "load_no_color",
    "load_follow_symlinks",
    "load_show_mtime",
]
