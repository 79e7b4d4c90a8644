"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance;
entry points call `configure_logging(level)` once with the configured level.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """
    Attach the stdout handler to the root logger (once) and set its level.

    Args:
        level: Logging level name, e.g. ``"DEBUG"`` or ``"INFO"``.
            Unknown names fall back to INFO.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
