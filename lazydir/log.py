"""Logging setup.

The terminal belongs to the UI while the browser runs, so log records go to a
rotating file under the user log directory instead of stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger
from platformdirs import user_log_dir

from .config import APP_NAME

LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def setup_logging(level: str = "INFO", log_path: Path | None = None, to_stderr: bool = False) -> None:
    """Replace loguru's default sink with a file sink at ``level``."""
    logger.remove()
    if to_stderr:
        logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level} | {message}")
        return
    target = log_path or LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    logger.add(target, level=level, rotation="1 MB", retention=3)
