"""Strict parsers for scalar and list environment values.

Each parser takes the raw string and either returns the converted value or
raises :class:`EnvParseError`. None of them look at the environment.
"""

from __future__ import annotations

import re
import math

from envfallback.config.parsing import (
    INT_MAX,
    INT_MIN,
    INT_MAX_DIGITS,
    BOOL_TRUE_LITERALS,
    BOOL_FALSE_LITERALS,
    DEFAULT_LIST_SEPARATOR,
)
from envfallback.errors import EnvParseError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    # A sign is allowed on numbers and infinities, not on NaN
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE,
)


def _is_infinity_literal(raw: str) -> bool:
    return raw.lstrip("+-").lower().startswith("inf")


def _encode_per_char(raw: str) -> bytes:
    out = bytearray()
    for ch in raw:
        if "\udc80" <= ch <= "\udcff":
            out.append(ord(ch) - 0xDC00)
        else:
            out += ch.encode("utf-8", "surrogatepass")
    return bytes(out)


def parse_bool(raw: str) -> bool:
    """Convert one of the accepted boolean spellings."""
    if raw in BOOL_TRUE_LITERALS:
        return True
    if raw in BOOL_FALSE_LITERALS:
        return False
    raise EnvParseError("bool", raw, "not a recognized boolean literal")


def parse_int(raw: str) -> int:
    """Convert a base-10 signed integer that fits a 64-bit word.

    Surrounding whitespace and digit separators (``_``) are rejected even
    though ``int()`` would accept them.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise EnvParseError("int", raw, "not a base-10 integer")
    sign = raw[0] if raw[0] in "+-" else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # Checked before int() so huge inputs never reach its digit limit
    if len(digits) > INT_MAX_DIGITS:
        raise EnvParseError("int", raw, "integer out of 64-bit range")
    value = int(sign + digits)
    if not INT_MIN <= value <= INT_MAX:
        raise EnvParseError("int", raw, "integer out of 64-bit range")
    return value


def parse_float(raw: str) -> float:
    """Convert a decimal or scientific literal to a float.

    ``inf``/``infinity`` (optionally signed) and unsigned ``nan`` are accepted
    in any case. A finite literal too large to represent (``1e400``) is a
    range error rather than infinity.
    """
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise EnvParseError("float", raw, "not a decimal number")
    value = float(raw)
    if math.isinf(value) and not _is_infinity_literal(raw):
        raise EnvParseError("float", raw, "float out of range")
    return value


def parse_bytes(raw: str) -> bytes:
    """Return the OS-level bytes of a value read from the environment.

    Undecodable bytes that ``os.environ`` carried as surrogate escapes are
    restored; other lone surrogates are passed through as-is, character by
    character, so a mix of both keeps the escaped bytes intact.
    """
    try:
        return raw.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return _encode_per_char(raw)


def parse_strings(raw: str, separator: str = DEFAULT_LIST_SEPARATOR) -> list[str]:
    """Split *raw* on *separator*; an empty separator yields single characters."""
    if separator == "":
        return list(raw)
    return raw.split(separator)


__all__ = [
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_bytes",
    "parse_strings",
]
