"""Opt-in logging setup for the ``envfallback`` logger.

Importing the package configures nothing. Applications that want to see
why a fallback was used call :func:`configure_logging` and set
``ENVFALLBACK_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

import logging

from envfallback.config.logging import ENVFALLBACK_LOG_LEVEL, ENVFALLBACK_LOG_FORMAT

PACKAGE_LOGGER = "envfallback"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the package log level and attach a stream handler once.

    Args:
        level: Overrides ``ENVFALLBACK_LOG_LEVEL`` when given.

    Returns:
        The configured package logger.
    """
    resolved = (level or ENVFALLBACK_LOG_LEVEL).upper()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(ENVFALLBACK_LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


__all__ = ["configure_logging"]
