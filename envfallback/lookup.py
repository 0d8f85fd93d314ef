"""Lookup sources a client can be bound to.

A lookup is any callable taking a key and returning its raw string value,
with ``""`` standing for "not set".
"""

from __future__ import annotations

import os
from types import MappingProxyType
from collections.abc import Callable, Mapping

Lookup = Callable[[str], str]


def os_lookup(key: str) -> str:
    """Read *key* from the process environment; unset keys yield ``""``."""
    return os.environ.get(key, "")


def mapping_lookup(mapping: Mapping[str, str]) -> Lookup:
    """Build a lookup over a read-only snapshot of *mapping*.

    Later changes to *mapping* are not seen by the returned lookup.
    """
    frozen = MappingProxyType(dict(mapping))

    def lookup(key: str) -> str:
        return frozen.get(key, "")

    return lookup


__all__ = [
    "Lookup",
    "os_lookup",
    "mapping_lookup",
]
