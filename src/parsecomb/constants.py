"""Shared constants for parsecomb.

This module provides centralized configuration constants used by the
primitive parsers, the runner and the diagnostics layer. Placing them
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Primitive patterns: Regular expressions behind the lexical primitives
- Input limits: Size constraints enforced by the runner
- Diagnostics: Rendering defaults for error reports and debug traces

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Primitive patterns
    "WHITESPACE_PATTERN",
    "WORD_PATTERN",
    "NATURAL_PATTERN",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Diagnostics
    "DEFAULT_CONTEXT_LINES",
    "TRACE_INPUT_WIDTH",
]

# ============================================================================
# PRIMITIVE PATTERNS
# ============================================================================

# Zero or more whitespace characters. Always matches, possibly empty.
WHITESPACE_PATTERN: str = r"\s*"

# One or more word characters: letters, digits, underscore.
WORD_PATTERN: str = r"\w+"

# ASCII digits only. str.isdigit() and \d accept Unicode digits like "²",
# which callers converting with int() do not expect.
NATURAL_PATTERN: str = r"[0-9]+"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Every parser slices the remaining suffix, so parse cost grows with input size.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Source lines shown before and after the failure point in error reports.
DEFAULT_CONTEXT_LINES: int = 2

# Characters of remaining input shown per parser invocation in debug traces.
TRACE_INPUT_WIDTH: int = 30
