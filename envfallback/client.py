"""Typed environment accessors with fallback values.

A :class:`Client` wraps one lookup source and exposes a ``get_*`` accessor
per supported type. Every accessor has the same contract: an unset or empty
value, or one that does not parse, yields the fallback unchanged. Accessors
never raise.

Usage:
    from envfallback import Client

    env = Client.from_mapping({"WORKERS": "4", "DEBUG": "t"})
    env.get_int("WORKERS", 1)       # 4
    env.get_bool("DEBUG", False)    # True
    env.get_int("MISSING", 1)       # 1
"""

from __future__ import annotations

import logging
from typing import TypeVar
from dataclasses import dataclass
from urllib.parse import SplitResult
from collections.abc import Callable, Mapping

from .lookup import Lookup, os_lookup, mapping_lookup
from .errors import EnvParseError
from .helpers import (
    parse_bool,
    parse_int,
    parse_url,
    parse_float,
    parse_bytes,
    parse_strings,
    parse_duration,
)
from .config.parsing import DEFAULT_LIST_SEPARATOR

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Client:
    """Typed accessors over a single lookup source."""

    lookup: Lookup

    @classmethod
    def from_environ(cls) -> Client:
        """Client bound to the live process environment."""
        return cls(os_lookup)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Client:
        """Client bound to a read-only snapshot of *mapping*."""
        return cls(mapping_lookup(mapping))

    def _convert(self, key: str, fallback: T, parse: Callable[[str], T]) -> T:
        raw = self.lookup(key)
        if not raw:
            logger.debug("%s is unset or empty; using fallback", key)
            return fallback
        try:
            return parse(raw)
        except EnvParseError as exc:
            # Value itself is not logged, it may be a secret
            logger.debug(
                "%s (%d chars) is not a valid %s: %s; using fallback",
                key,
                len(raw),
                exc.kind,
                exc.message,
            )
            return fallback

    def get_bool(self, key: str, fallback: bool) -> bool:
        """Return a bool; accepts 1/0, t/f, T/F, true/false, True/False, TRUE/FALSE."""
        return self._convert(key, fallback, parse_bool)

    def get_bytes(self, key: str, fallback: bytes) -> bytes:
        """Return the raw bytes of the value."""
        return self._convert(key, fallback, parse_bytes)

    def get_float(self, key: str, fallback: float) -> float:
        """Return a float parsed from a decimal or scientific literal."""
        return self._convert(key, fallback, parse_float)

    def get_duration(self, key: str, fallback: int) -> int:
        """Return a duration such as ``"1h30m"`` as integer nanoseconds."""
        return self._convert(key, fallback, parse_duration)

    def get_int(self, key: str, fallback: int) -> int:
        """Return a base-10 integer that fits a signed 64-bit word."""
        return self._convert(key, fallback, parse_int)

    def get_str(self, key: str, fallback: str) -> str:
        """Return the value verbatim."""
        return self._convert(key, fallback, str)

    def get_strings(self, key: str, fallback: list[str], *separators: str) -> list[str]:
        """Return the value split into a list.

        Args:
            key: Variable name.
            fallback: Returned when the variable is unset or empty.
            separators: Only the first is used; defaults to ``","``.
        """
        separator = separators[0] if separators else DEFAULT_LIST_SEPARATOR
        return self._convert(key, fallback, lambda raw: parse_strings(raw, separator))

    def get_url(self, key: str, fallback: SplitResult | None) -> SplitResult | None:
        """Return the value split into URL components; ``geturl()`` re-serializes it."""
        return self._convert(key, fallback, parse_url)


def map_client(mapping: Mapping[str, str]) -> Client:
    """Shorthand for :meth:`Client.from_mapping`."""
    return Client.from_mapping(mapping)


__all__ = [
    "Client",
    "map_client",
]
