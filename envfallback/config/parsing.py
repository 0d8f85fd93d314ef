"""Literal tables and numeric limits for scalar parsing."""

from typing import Final


# Exact spellings only; "yes"/"on" and mixed case like "tRuE" are rejected
BOOL_TRUE_LITERALS: Final = frozenset({"1", "t", "T", "TRUE", "true", "True"})
BOOL_FALSE_LITERALS: Final = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# List values are split on this when the caller passes no separator
DEFAULT_LIST_SEPARATOR: Final = ","

# Integers are bounded to a signed 64-bit machine word
INT_MIN: Final = -(1 << 63)
INT_MAX: Final = (1 << 63) - 1

# Significant digits in INT_MAX; longer digit strings are out of range
INT_MAX_DIGITS: Final = 19


__all__ = [
    "BOOL_TRUE_LITERALS",
    "BOOL_FALSE_LITERALS",
    "DEFAULT_LIST_SEPARATOR",
    "INT_MIN",
    "INT_MAX",
    "INT_MAX_DIGITS",
]
