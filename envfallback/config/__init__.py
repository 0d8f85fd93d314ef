"""Aggregator of configuration modules.

This module re-exports the config values from smaller modules:
- parsing: accepted literals, list separator and integer bounds
- duration: duration unit table and range
- logging: package log level and format

Parsing logic lives in envfallback/helpers/.
"""

from .parsing import (
    BOOL_TRUE_LITERALS,
    BOOL_FALSE_LITERALS,
    DEFAULT_LIST_SEPARATOR,
    INT_MIN,
    INT_MAX,
    INT_MAX_DIGITS,
)
from .duration import (
    NANOSECOND,
    MICROSECOND,
    MILLISECOND,
    SECOND,
    MINUTE,
    HOUR,
    DURATION_UNITS,
    DURATION_MAX_NS,
    DURATION_MAX_DIGITS,
    DURATION_FRACTION_DIGITS,
)
from .logging import (
    ENVFALLBACK_LOG_LEVEL,
    ENVFALLBACK_LOG_FORMAT,
)

__all__ = [
    # parsing
    "BOOL_TRUE_LITERALS",
    "BOOL_FALSE_LITERALS",
    "DEFAULT_LIST_SEPARATOR",
    "INT_MIN",
    "INT_MAX",
    "INT_MAX_DIGITS",
    # duration
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DURATION_UNITS",
    "DURATION_MAX_NS",
    "DURATION_MAX_DIGITS",
    "DURATION_FRACTION_DIGITS",
    # logging
    "ENVFALLBACK_LOG_LEVEL",
    "ENVFALLBACK_LOG_FORMAT",
]
