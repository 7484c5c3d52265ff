"""Exceptions raised by curly-quotes outside of the conversion core."""

from __future__ import annotations

from dataclasses import dataclass


__all__ = ["CurlyQuotesError", "ConfigurationError", "SourceParseError"]


class CurlyQuotesError(Exception):
    """Base class for every error raised by the package."""


class ConfigurationError(CurlyQuotesError):
    """Raised when rule options or the project file fail validation."""


@dataclass
class SourceParseError(CurlyQuotesError):
    """Raised when a script block cannot be parsed.

    Attributes:
        message: Description reported by the parser.
        line: 1-based line number within the whole document, when known.
        column: 1-based column number, when known.
    """

    message: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"
