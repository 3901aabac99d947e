# src/config/logging_config.py

"""Logging for the storefront client.

The first call to :func:`setup_logging` attaches two handlers to the
``storefront`` logger: a per-run file under ``logs/`` that records
everything, and a stderr stream. The stream shows warnings only, except
in development, where the API client's per-attempt diagnostics are
printed as well. Later calls reuse the handlers already attached.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _current_log_file(logger: logging.Logger) -> Path | None:
    """Return the file an already-configured logger writes to."""
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def _console_level() -> int:
    return logging.DEBUG if Settings.is_development() else logging.WARNING


def setup_logging() -> Path:
    """Configure the ``storefront`` logger once per process.

    Returns:
        The path of the run's log file. Repeat calls return the file
        chosen by the first call.
    """
    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(logging.DEBUG)

    existing = _current_log_file(root_logger)
    if existing is not None:
        return existing

    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = Settings.LOGS_DIR / f"run_{stamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug(
        "Logging to %s (environment=%s)", log_file, Settings.ENVIRONMENT
    )
    return log_file
