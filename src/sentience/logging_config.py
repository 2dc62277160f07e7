"""
Logging Configuration
=====================
Attaches handlers to the 'sentience' logger namespace. Modules only call
logging.getLogger(__name__); nothing below the app entry point touches
handlers.

The level comes from the SENTIENCE_LOG_LEVEL environment variable when set.
DEBUG shows rejected navigation requests and every resolved input intent.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SENTIENCE_LOG_LEVEL"
ROOT_LOGGER = "sentience"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def level_from_env(default: int = logging.INFO) -> int:
    """Level name ('debug') or number ('15') from the environment; unknown values fall back."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route 'sentience.*' records to stdout and, optionally, to a file.

    Calling it again replaces the previous handlers, so a restarted window
    does not print every line twice.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}")
