"""Exception classes raised by the strict parsers.

The typed accessors never let these escape; they catch them and return the
caller's fallback. Code that calls the ``parse_*`` helpers directly sees them.
"""

from .parse import EnvParseError

__all__ = ["EnvParseError"]
