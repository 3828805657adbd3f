# src/config/logging_config.py

"""Per-run logging for the storefront browser.

Every launch writes to its own ``logs/run_<timestamp>.log`` file. All
``storefront.*`` loggers (client, catalog service, TUI, CLI) propagate to
the ``storefront`` root logger configured here, so one file holds the
complete trace of a browsing session, including failed catalog fetches
that the UI itself never surfaces.

The console handler only emits warnings and errors to stderr so that
headless JSON output on stdout stays clean.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handler(
    handler: logging.Handler, level: int, fmt: str
) -> logging.Handler:
    """Attach a level and formatter to *handler* and return it."""
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    return handler


def setup_logging() -> Path:
    """Configure the ``storefront`` logger for this run.

    Safe to call more than once: handlers are only attached the first
    time, later calls just report a fresh log path.

    Returns:
        The :class:`~pathlib.Path` of this run's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    if root_logger.handlers:
        return log_file

    root_logger.addHandler(
        _build_handler(
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.DEBUG,
            _FILE_FORMAT,
        )
    )
    root_logger.addHandler(
        _build_handler(
            logging.StreamHandler(sys.stderr),
            logging.WARNING,
            _CONSOLE_FORMAT,
        )
    )

    root_logger.info("Logging initialised, writing to %s", log_file)
    return log_file
