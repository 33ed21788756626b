"""Parser error types."""


class ParseError(Exception):
    """Raised when CSS source cannot be split into rules."""

    def __init__(self, message: str, fragment: str | None = None):
        self.fragment = fragment
        super().__init__(message)


class BaseRegionNotFoundError(ParseError):
    """Raised when the text before the first ``@media`` cannot be located."""
