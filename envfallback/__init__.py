"""Typed environment variable access with fallback values.

This module re-exports the public API from smaller modules:
- client: the ``Client`` facade and ``map_client``
- lookup: lookup sources (process environment, fixed mapping)
- default: the process-wide client and free-standing ``get_*`` accessors
- helpers: strict ``parse_*`` functions that raise instead of falling back
- errors: ``EnvParseError``
- log: opt-in logging setup
"""

from .client import Client, map_client
from .lookup import Lookup, os_lookup, mapping_lookup
from .default import (
    DEFAULT_CLIENT,
    get_bool,
    get_bytes,
    get_float,
    get_duration,
    get_int,
    get_str,
    get_strings,
    get_url,
)
from .helpers import (
    parse_bool,
    parse_int,
    parse_float,
    parse_bytes,
    parse_strings,
    parse_duration,
    parse_url,
)
from .errors import EnvParseError
from .log import configure_logging

__all__ = [
    # Facade
    "Client",
    "map_client",
    # Lookup sources
    "Lookup",
    "os_lookup",
    "mapping_lookup",
    # Default client
    "DEFAULT_CLIENT",
    "get_bool",
    "get_bytes",
    "get_float",
    "get_duration",
    "get_int",
    "get_str",
    "get_strings",
    "get_url",
    # Strict parsers
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_bytes",
    "parse_strings",
    "parse_duration",
    "parse_url",
    # Errors
    "EnvParseError",
    # Logging
    "configure_logging",
]
