"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar construction errors (invalid combinator arguments)
        2000-2999: Parse errors reported by the runner
        3000-3999: Resource limit errors
    """

    # Grammar construction errors (1000-1999)
    INVALID_CHARACTER = 1001
    EMPTY_LITERAL = 1002
    EMPTY_ALTERNATIVES = 1003
    INVALID_LABEL = 1004
    NOT_A_PARSER = 1005
    FORWARD_UNDEFINED = 1006
    FORWARD_REDEFINED = 1007

    # Parse errors (2000-2999)
    PARSE_FAILED = 2001
    PARSE_INCOMPLETE = 2002

    # Resource limit errors (3000-3999)
    RECURSION_LIMIT_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for grammar construction errors)
        hint: Suggestion for fixing the error
        context: Source excerpt with a caret under the span (optional)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    context: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_INCOMPLETE]: Unparsed input remains: 'x = 1'
              --> line 2, column 5
              = help: Extend the grammar or pass require_complete=False

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]

        if self.span:
            parts.append(f"  --> line {self.span.line}, column {self.span.column}")

        if self.context:
            parts.extend(f"  {line}" for line in self.context.split("\n"))

        if self.hint:
            parts.append(f"  = help: {self.hint}")

        return "\n".join(parts)
