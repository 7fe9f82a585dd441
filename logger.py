"""Logging for Hearthbook.

Every module logs through the single ``hearthbook`` logger returned by
``get_logger()``. ``setup_logging`` attaches a date-stamped file handler
under ``config.log_dir`` and a console handler; until it runs, records
propagate to the root logger only.

Level policy for the category subsystem:

- INFO: lifecycle events (category created, updated, deleted; ledger rows
  deleted) and lookups that end in NotFoundError.
- WARNING: writes rejected for a caller-visible reason, i.e. name/type or
  budget-month conflicts, unique-index backstop hits, and deletes refused
  because ledger rows still reference the category.

Errors that propagate unmapped (integrity failures other than the known
unique indexes) are not logged here; the CLI reports them.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from config import Config

LOGGER_NAME = "hearthbook"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Path of the log file for a given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Attach file and console handlers to the hearthbook logger.

    Safe to call more than once: existing handlers are replaced, so records
    are never written twice.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file_path(config))
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
