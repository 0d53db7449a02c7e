# eventsync/core/logger.py
import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "eventsync"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Install (or replace) the package's stdout handler and set its level.
    Safe to call more than once; only the handler installed here is swapped.
    """
    for h in list(_logger.handlers):
        if getattr(h, "_eventsync_owned", False):
            _logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._eventsync_owned = True
    _logger.addHandler(handler)
    _logger.setLevel(level.upper())
    return _logger


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _logger.getChild(name)
    return _logger


if not _logger.handlers:
    configure_logging()
