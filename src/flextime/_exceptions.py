class FlexTimeError(Exception):
    """Base exception for all flex-time errors."""


class ConfigError(FlexTimeError, ValueError):
    """Missing or malformed configuration; raised before any I/O happens."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class SourceError(FlexTimeError):
    """The external time-tracking source failed to deliver entries."""


class AuthenticationError(SourceError):
    """The external source rejected the credential."""


class InvariantError(FlexTimeError):
    """Data reaching the core breaks a contract (e.g. a negative duration)."""
