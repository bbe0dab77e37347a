"""Read-only JSON config helpers.

Supplies startup defaults (hidden-file visibility, log level). The browser
never writes this file; malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

APP_NAME = "lazydir"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVEL_ENV = "LAZYDIR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config {}: {}", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_show_hidden() -> bool:
    """Return the configured hidden-file default.

    Only explicit boolean values are accepted; anything else means ``False``.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else False


def is_known_log_level(name: str) -> bool:
    """Return whether ``name`` is a level registered with loguru."""
    try:
        logger.level(name)
    except ValueError:
        return False
    return True


def load_log_level() -> str:
    """Resolve log level from the environment, then config, then default.

    Unknown level names are ignored with a warning.
    """
    env_value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if env_value:
        if is_known_log_level(env_value):
            return env_value
        logger.warning("Ignoring unknown log level {}={!r}", LOG_LEVEL_ENV, env_value)
    value = load_config().get("log_level")
    if isinstance(value, str) and value.strip():
        level = value.strip().upper()
        if is_known_log_level(level):
            return level
        logger.warning("Ignoring unknown log level {!r} in {}", level, CONFIG_PATH)
    return DEFAULT_LOG_LEVEL
