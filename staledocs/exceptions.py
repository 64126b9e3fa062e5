"""Error taxonomy for staledocs."""

from typing import Optional


class StaledocsError(Exception):
    """Base class for all staledocs errors."""


class ExtractionError(StaledocsError):
    """A function signature could not be extracted from source text.

    Raised for malformed headers, unterminated parameter lists and
    constructs an extractor does not understand. The error is local to the
    file being processed.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            return f"{message} (line {self.line})"
        return message


class NoArgsSectionFound(StaledocsError):
    """No supported arguments section header was found in a docstring."""
