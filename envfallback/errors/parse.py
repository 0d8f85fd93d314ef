"""Parse failure raised when a raw environment value has the wrong shape."""


class EnvParseError(ValueError):
    """Raised when a raw string cannot be converted to the requested type.

    The raw text is kept on the exception but left out of the message, since
    environment values often carry credentials.

    Attributes:
        kind: Label of the target type (``"int"``, ``"duration"``, ...).
        raw: The text that failed to parse.
        message: Human-readable reason.
    """

    def __init__(self, kind: str, raw: str, message: str | None = None) -> None:
        self.kind = kind
        self.raw = raw
        self.message = message or f"invalid {kind} value"
        super().__init__(self.message)


__all__ = ["EnvParseError"]
