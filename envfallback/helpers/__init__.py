"""Strict parsers behind the typed accessors.

Every function here converts a raw string or raises ``EnvParseError``.
Fallback handling belongs to ``envfallback.client``.
"""

from .parsers import (
    parse_bool,
    parse_int,
    parse_float,
    parse_bytes,
    parse_strings,
)
from .duration import parse_duration
from .url import parse_url

__all__ = [
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_bytes",
    "parse_strings",
    "parse_duration",
    "parse_url",
]
