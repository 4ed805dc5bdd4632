"""Persistent JSON config helpers.

Stores the cheatsheet source paths and UI theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "cheet"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_SOURCE_PATHS: tuple[str, ...] = ("~/.config/vim-cheatsheet.yaml",)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write config %s: %s", CONFIG_PATH, exc)


def load_source_paths() -> tuple[str, ...]:
    """Return configured source paths in order, or the defaults.

    Only non-empty strings are kept; an empty or invalid list falls back to
    ``DEFAULT_SOURCE_PATHS``.
    """
    value = load_config().get("paths")
    if not isinstance(value, list):
        return DEFAULT_SOURCE_PATHS
    paths = tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return paths or DEFAULT_SOURCE_PATHS


def save_source_paths(paths: Iterable[str]) -> None:
    cleaned = [str(path).strip() for path in paths if str(path).strip()]
    if not cleaned:
        return
    config = load_config()
    config["paths"] = cleaned
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def expand_source_paths(paths: Iterable[str]) -> list[Path]:
    """Expand ``~`` and environment variables in configured paths."""
    return [Path(os.path.expandvars(os.path.expanduser(path))) for path in paths]


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SOURCE_PATHS",
    "expand_source_paths",
    "load_config",
    "load_source_paths",
    "load_theme_name",
    "save_config",
    "save_source_paths",
    "save_theme_name",
]
