"""Duration string parsing.

Accepts strings such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``: an optional
sign followed by one or more ``<decimal><unit>`` components. Valid units are
``ns``, ``us`` (or ``µs``/``μs``), ``ms``, ``s``, ``m`` and ``h``. The result
is a signed integer count of nanoseconds bounded to 64 bits.
"""

from __future__ import annotations

import re

from envfallback.config.duration import (
    DURATION_UNITS,
    DURATION_MAX_NS,
    DURATION_MAX_DIGITS,
    DURATION_FRACTION_DIGITS,
)
from envfallback.errors import EnvParseError

# whole digits, optional fraction, then everything up to the next number
_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def _invalid(raw: str, reason: str) -> EnvParseError:
    return EnvParseError("duration", raw, reason)


def _component_ns(raw: str, whole: str, fraction: str | None, unit: str) -> int:
    if not whole and not fraction:
        raise _invalid(raw, "expected a number")
    if not unit:
        raise _invalid(raw, "missing unit")
    scale = DURATION_UNITS.get(unit)
    if scale is None:
        raise _invalid(raw, f"unknown unit {unit!r}")

    whole = whole.lstrip("0")
    if len(whole) > DURATION_MAX_DIGITS:
        raise _invalid(raw, "duration out of range")
    value = int(whole or "0") * scale
    fraction = (fraction or "")[:DURATION_FRACTION_DIGITS]
    if fraction:
        # Truncate toward zero
        value += int(fraction) * scale // 10 ** len(fraction)
    return value


def parse_duration(raw: str) -> int:
    """Parse *raw* into nanoseconds.

    Args:
        raw: Duration text. A bare ``"0"`` (optionally signed) needs no unit.

    Returns:
        Signed nanosecond count.

    Raises:
        EnvParseError: On malformed text, unknown units, or overflow.
    """
    text = raw
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise _invalid(raw, "empty duration")

    # The negative side may reach one past the positive maximum
    limit = DURATION_MAX_NS + 1 if negative else DURATION_MAX_NS
    total = 0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        whole, fraction, unit = match.groups()
        total += _component_ns(raw, whole, fraction, unit)
        if total > limit:
            raise _invalid(raw, "duration out of range")
        pos = match.end()

    return -total if negative else total


__all__ = ["parse_duration"]
