"""Diagnostic log setup.

The TUI owns the screen while it runs, so log records only ever go to a
file. Without an explicit level the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def setup_logging(level_name: str | None, log_file: Path | None = None) -> Path | None:
    """Configure the ``lazytodo`` logger and return the log file in use.

    Safe to call repeatedly; existing handlers on the package logger are
    replaced rather than stacked.
    """
    package_logger = logging.getLogger(APP_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False

    if not level_name:
        package_logger.addHandler(logging.NullHandler())
        return None

    level = getattr(logging, level_name.upper().strip(), logging.INFO)
    path = log_file if log_file is not None else DEFAULT_LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.setLevel(level)
    package_logger.addHandler(file_handler)
    package_logger.info("logging enabled (file=%s, level=%s)", path, logging.getLevelName(level))
    return path
