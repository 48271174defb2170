"""Diagnostic system for parsecomb errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    GrammarError,
    IncompleteParseError,
    ParsecombError,
    ParseFailedError,
    ParseRecursionError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GrammarError",
    "IncompleteParseError",
    "ParseFailedError",
    "ParseRecursionError",
    "ParsecombError",
    "SourceSpan",
]
