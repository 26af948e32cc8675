"""Logger module for the presence package.

The combinators only log on their failure paths, at DEBUG level, so the
shared logger is silent unless its verbosity is raised.
"""

import logging

LOGGER_NAME = "presence"
LOG_FORMAT = "[%(levelname)s] %(message)s"

_presence_logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def _make_default_handler() -> logging.Handler:
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.INFO)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return stream_handler


def reset_presence_logger() -> None:
    """Restore the shared logger to its import-time configuration."""
    _presence_logger.handlers.clear()
    _presence_logger.addHandler(_make_default_handler())
    _presence_logger.setLevel(logging.INFO)
    _presence_logger.propagate = False


if not _presence_logger.handlers:
    reset_presence_logger()


def get_presence_logger() -> logging.Logger:
    """Return the shared presence logger instance."""
    return _presence_logger


def set_presence_logger(new_logger: logging.Logger) -> None:
    """Update the shared logger configuration using another logger.

    The logger identity stays the same, but its level and handlers
    are replaced.
    """
    logger = get_presence_logger()

    logger.handlers.clear()
    for handler in new_logger.handlers:
        logger.addHandler(handler)

    logger.setLevel(new_logger.level)


def set_verbosity(level: int | str) -> None:
    """Set verbosity level of the shared presence logger.

    Args:
        level: A numeric logging level or its name, e.g. ``"DEBUG"``.
    """
    logger = get_presence_logger()
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.setLevel(level)
