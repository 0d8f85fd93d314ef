"""Package logging configuration values."""

import os


ENVFALLBACK_LOG_LEVEL = (os.getenv("ENVFALLBACK_LOG_LEVEL", "WARNING") or "WARNING").upper()
ENVFALLBACK_LOG_FORMAT = os.getenv(
    "ENVFALLBACK_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)


__all__ = [
    "ENVFALLBACK_LOG_LEVEL",
    "ENVFALLBACK_LOG_FORMAT",
]
