#!/usr/bin/env python3
"""
Data models for the XML formatter.
Defines the result and error structures returned by every operation.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


class Operation(Enum):
    """User-facing formatter operations."""
    VALIDATE = "validate"
    FORMAT = "format"
    MINIFY = "minify"

    def __str__(self) -> str:
        return self.value


class ErrorKind(Enum):
    """Failure categories surfaced to the presentation layer."""
    BLANK_INPUT = "BLANK_INPUT"
    NOT_WELL_FORMED = "NOT_WELL_FORMED"
    IO_ERROR = "IO_ERROR"

    def __str__(self) -> str:
        return self.value


class LineKind(Enum):
    """Classification of a single line by the indentation engine."""
    LEAF = "leaf"
    CLOSE = "close"
    OPEN = "open"
    OTHER = "other"


@dataclass
class FormatError:
    """
    Represents a failed operation.

    Attributes:
        kind: Failure category
        message: Human-readable description
        line: 1-based line reported by the parser, if any
        col: Column reported by the parser (0-based), if any
        detail: Raw parser diagnostic; informational only
    """
    kind: ErrorKind
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    detail: Optional[str] = None

    @property
    def location(self) -> str:
        """Human-readable location string."""
        if self.line and self.col is not None:
            return f"Line {self.line}, Col {self.col}"
        elif self.line:
            return f"Line {self.line}"
        return "Unknown"


@dataclass
class FormatResult:
    """
    Outcome of one validate/format/minify call.

    Attributes:
        operation: The operation that produced this result
        output: Formatted or minified text (None for validate and on failure)
        error: Failure description (None on success)
        source: File path the input came from, if any
        indent_width: Indent unit used for formatting
        duration_ms: Operation duration in milliseconds
    """
    operation: Operation
    output: Optional[str] = None
    error: Optional[FormatError] = None
    source: Optional[str] = None
    indent_width: Optional[int] = None
    duration_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        return "PASS" if self.is_success else "FAIL"

    @property
    def status_icon(self) -> str:
        return "\u2705" if self.is_success else "\u274c"

    @classmethod
    def failure(cls, operation: Operation, kind: ErrorKind, message: str,
                **kwargs) -> "FormatResult":
        """Build a failed result carrying a FormatError of the given kind."""
        return cls(operation=operation, error=FormatError(kind=kind, message=message), **kwargs)


@dataclass
class Notification:
    """A user-visible message produced by a session action."""
    level: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.level == "error"
