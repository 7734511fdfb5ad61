class ScoringError(Exception):
    """Base class for errors raised by the scoring engine."""


class ConfigError(ScoringError, ValueError):
    """Raised when the scoring configuration is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class PreconditionError(ScoringError, ValueError):
    """Raised when a caller violates an input precondition with no safe fallback."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)
