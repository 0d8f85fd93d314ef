"""Process-wide client bound to ``os.environ`` and its free-standing accessors.

``DEFAULT_CLIENT`` is built once at import and never rebound. The lookup
reads the environment on every call, so values set after import are seen.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import SplitResult

from .client import Client

DEFAULT_CLIENT: Final[Client] = Client.from_environ()


def get_bool(key: str, fallback: bool) -> bool:
    """Read a bool from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_bool(key, fallback)


def get_bytes(key: str, fallback: bytes) -> bytes:
    """Read raw bytes from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_bytes(key, fallback)


def get_float(key: str, fallback: float) -> float:
    """Read a float from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_float(key, fallback)


def get_duration(key: str, fallback: int) -> int:
    """Read a duration in nanoseconds from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_duration(key, fallback)


def get_int(key: str, fallback: int) -> int:
    """Read an integer from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_int(key, fallback)


def get_str(key: str, fallback: str) -> str:
    """Read a string from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_str(key, fallback)


def get_strings(key: str, fallback: list[str], *separators: str) -> list[str]:
    """Read a separated list from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_strings(key, fallback, *separators)


def get_url(key: str, fallback: SplitResult | None) -> SplitResult | None:
    """Read a URL from the process environment with a fallback."""
    return DEFAULT_CLIENT.get_url(key, fallback)


__all__ = [
    "DEFAULT_CLIENT",
    "get_bool",
    "get_bytes",
    "get_float",
    "get_duration",
    "get_int",
    "get_str",
    "get_strings",
    "get_url",
]
