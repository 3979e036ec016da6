from __future__ import annotations

import logging
import sys

LOGGER_NAME = "envpick"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_ENVPICK_STDERR_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stderr_logging(level: str = "DEBUG") -> None:
    """Send envpick log records to stderr at ``level``.

    stdout is reserved for export statements that the shell evaluates, so
    records never go there. Idempotent per-process: a second call only
    adjusts the level.
    """
    global _ENVPICK_STDERR_HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_name(level))

    if _ENVPICK_STDERR_HANDLER is not None:
        _ENVPICK_STDERR_HANDLER.setLevel(_level_from_name(level))
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _ENVPICK_STDERR_HANDLER = handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_stderr_logging`."""
    global _ENVPICK_STDERR_HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    if _ENVPICK_STDERR_HANDLER is not None:
        logger.removeHandler(_ENVPICK_STDERR_HANDLER)
        _ENVPICK_STDERR_HANDLER.close()
    logger.setLevel(logging.NOTSET)
    _ENVPICK_STDERR_HANDLER = None


__all__ = [
    "LOGGER_NAME",
    "LOG_FORMAT",
    "configure_stderr_logging",
    "reset_stdlib_logging_for_tests",
]
