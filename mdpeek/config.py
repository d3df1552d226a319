"""Read-only user configuration.

Settings come from built-in defaults, then the JSON object in the user config
directory, then the ``NO_COLOR`` environment variable, then CLI flags. The
file is never written.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import available_theme_names

APP_NAME = "mdpeek"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
MIN_POLL_INTERVAL_MS = 10
MAX_POLL_INTERVAL_MS = 1000

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    theme: str = "github-dark"
    syntax_style: str | None = None
    no_color: bool = False
    poll_interval_ms: int = 50
    log_level: str = "WARNING"


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_poll_interval(value: object) -> int | None:
    # Booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return max(MIN_POLL_INTERVAL_MS, min(MAX_POLL_INTERVAL_MS, value))


def _coerce_log_level(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    candidate = value.strip().upper()
    return candidate if candidate in LOG_LEVELS else None


def config_from_mapping(data: Mapping[str, object], base: AppConfig | None = None) -> AppConfig:
    """Overlay valid values from ``data`` onto ``base``; invalid values are dropped."""
    config = base if base is not None else AppConfig()
    updates: dict[str, object] = {}

    theme = data.get("theme")
    if isinstance(theme, str) and theme.strip().lower() in available_theme_names():
        updates["theme"] = theme.strip().lower()
    style = data.get("syntax_style")
    if isinstance(style, str) and style.strip():
        updates["syntax_style"] = style.strip()
    no_color = data.get("no_color")
    if isinstance(no_color, bool):
        updates["no_color"] = no_color
    poll_interval = _coerce_poll_interval(data.get("poll_interval_ms"))
    if poll_interval is not None:
        updates["poll_interval_ms"] = poll_interval
    log_level = _coerce_log_level(data.get("log_level"))
    if log_level is not None:
        updates["log_level"] = log_level

    dropped = sorted(set(data) - set(updates))
    if dropped:
        logger.debug("ignored config keys: %s", ", ".join(map(str, dropped)))
    return replace(config, **updates)


def resolve_config(
    file_data: Mapping[str, object],
    environ: Mapping[str, str],
    overrides: Mapping[str, object],
) -> AppConfig:
    """Combine config sources in precedence order.

    ``overrides`` holds CLI values; ``None`` entries mean "not given".
    """
    config = config_from_mapping(file_data)
    if environ.get("NO_COLOR"):
        config = replace(config, no_color=True)
    given = {key: value for key, value in overrides.items() if value is not None}
    return config_from_mapping(given, base=config)
