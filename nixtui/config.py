"""Read-only JSON preferences.

Supplies the theme name, the export output path, and the status message
duration. All access is defensive: a missing or malformed file, or an
individual bad key, falls back to defaults. Nothing is written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .render.context import DEFAULT_OUTPUT_PATH
from .state import DEFAULT_STATUS_SECONDS
from .ui_theme import DEFAULT_THEME, available_theme_names, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "nixtui"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Preferences:
    theme: str = DEFAULT_THEME.name
    output_path: Path = DEFAULT_OUTPUT_PATH
    status_seconds: float = DEFAULT_STATUS_SECONDS


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = DEFAULT_CONFIG_PATH if path is None else Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_theme(data: dict[str, object]) -> str:
    value = data.get("theme")
    if not isinstance(value, str):
        return DEFAULT_THEME.name
    name = normalize_theme_name(value)
    return name if name in available_theme_names() else DEFAULT_THEME.name


def _load_output_path(data: dict[str, object]) -> Path:
    value = data.get("output_path")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_OUTPUT_PATH
    return Path(value).expanduser()


def _load_status_seconds(data: dict[str, object]) -> float:
    """Accept only positive numbers; booleans are not numbers here."""
    value = data.get("status_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_STATUS_SECONDS
    if value <= 0:
        return DEFAULT_STATUS_SECONDS
    return float(value)


def load_preferences(path: Path | None = None) -> Preferences:
    data = load_config(path)
    return Preferences(
        theme=_load_theme(data),
        output_path=_load_output_path(data),
        status_seconds=_load_status_seconds(data),
    )


__all__ = ["DEFAULT_CONFIG_PATH", "Preferences", "load_config", "load_preferences"]
