"""URL parsing with the checks ``urlsplit`` leaves out."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

from envfallback.errors import EnvParseError

# A percent sign not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _has_control_chars(raw: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw)


def _invalid(raw: str, reason: str) -> EnvParseError:
    return EnvParseError("url", raw, reason)


def parse_url(raw: str) -> SplitResult:
    """Split *raw* into URL components, rejecting malformed input.

    ``urlsplit`` on its own accepts nearly anything. On top of it this
    rejects control characters, a leading ``:`` (empty scheme), broken
    ``%`` escapes, spaces in the authority, a colon in the first segment of
    a scheme-less reference, unbalanced IPv6 brackets, and non-numeric or
    out-of-range ports.
    """
    if _has_control_chars(raw):
        raise _invalid(raw, "control character in URL")
    if raw.startswith(":"):
        raise _invalid(raw, "missing protocol scheme")
    if _BAD_ESCAPE.search(raw):
        raise _invalid(raw, "invalid percent escape")

    try:
        parts = urlsplit(raw)
        parts.port  # noqa: B018 - property access validates the port
    except ValueError as exc:
        raise _invalid(raw, f"malformed URL: {exc}") from exc

    if " " in parts.netloc:
        raise _invalid(raw, "space in host")
    if not parts.scheme and not parts.netloc and ":" in parts.path.split("/", 1)[0]:
        raise _invalid(raw, "first path segment in URL cannot contain colon")
    return parts


__all__ = ["parse_url"]
