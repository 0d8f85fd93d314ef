"""Duration units, expressed in nanoseconds."""

from typing import Final


NANOSECOND: Final = 1
MICROSECOND: Final = 1000 * NANOSECOND
MILLISECOND: Final = 1000 * MICROSECOND
SECOND: Final = 1000 * MILLISECOND
MINUTE: Final = 60 * SECOND
HOUR: Final = 60 * MINUTE

# Suffix -> nanoseconds. Both micro signs (U+00B5, U+03BC) are accepted.
DURATION_UNITS: Final = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Largest positive duration; the negative side goes one further
DURATION_MAX_NS: Final = (1 << 63) - 1

# Significant digits in DURATION_MAX_NS; a longer whole part cannot fit
DURATION_MAX_DIGITS: Final = 19

# Fraction digits past this place move the result by far less than 1ns
DURATION_FRACTION_DIGITS: Final = 30


__all__ = [
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
]
