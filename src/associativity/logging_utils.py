"""
Logger shared by the whole package.

The library only emits records; handlers are attached by scripts through
configure_logging().
"""

from __future__ import annotations

import logging

LOGGER_NAME = "associativity"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it (e.g. "associativity.game")."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only changes the level.
    """
    logger = get_logger()

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
