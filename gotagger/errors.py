"""Domain-specific errors for gotagger."""

from typing import Optional


class GotaggerError(Exception):
    """Base error for gotagger."""


class ParseError(GotaggerError):
    """Raised when a source file cannot be turned into declarations."""

    def __init__(self, file_name: str, message: str, line: Optional[int] = None) -> None:
        self.file_name = file_name
        self.line = line
        self.message = message
        location = f"{file_name}:{line}" if line is not None else file_name
        super().__init__(f"{location}: {message}")


class GoSyntaxError(ParseError):
    """Raised when the Go grammar reports a syntax error in a file."""
