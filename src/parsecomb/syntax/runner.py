"""Grammar runner: apply a grammar to a complete source string.

Combinators report failure as a value and say nothing about where or why.
GrammarRunner is the layer that turns a parse into either a parse tree or
an exception carrying a line/column diagnostic, and enforces input limits.
It never changes what the combinators return.

Security:
    Includes configurable input size limit. Every parser step slices the
    remaining input, so work grows with source size.
"""

import logging
import sys

from parsecomb.constants import MAX_SOURCE_SIZE
from parsecomb.diagnostics import (
    ErrorTemplate,
    IncompleteParseError,
    ParseFailedError,
    ParseRecursionError,
    SourceSpan,
)
from parsecomb.syntax.parser.core import Parser, ParseResult
from parsecomb.syntax.position import format_context, line_col
from parsecomb.syntax.tree import ParseTree, get_parse_tree

__all__ = ["GrammarRunner"]

logger = logging.getLogger(__name__)


def _span_at(source: str, remaining: str) -> SourceSpan:
    start = len(source) - len(remaining)
    line, column = line_col(source, start)
    return SourceSpan(start=start, end=len(source), line=line, column=column)


class GrammarRunner:
    """Runs a root parser over a whole source string.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        require_complete: Whether parse() rejects leftover non-whitespace input

    Example:
        >>> runner = GrammarRunner()
        >>> runner.parse(sep_by(comma, label("Var", word)), "u, v, w")
        {'Var': ['u', 'v', 'w']}
    """

    __slots__ = ("_max_source_size", "_require_complete")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        require_complete: bool = True,
    ) -> None:
        """Initialize runner with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable the limit (not recommended).
            require_complete: Reject input the grammar leaves unparsed
                              (trailing whitespace is always allowed)
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._require_complete = require_complete

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def require_complete(self) -> bool:
        """Whether parse() rejects leftover input."""
        return self._require_complete

    def run(self, parser: Parser, source: str) -> ParseResult:
        """Invoke ``parser`` on ``source`` and return the raw result.

        Raises:
            ValueError: If source exceeds max_source_size
            ParseRecursionError: If parsing hits the Python recursion limit
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in GrammarRunner constructor to increase limit."
            )
            raise ValueError(msg)

        try:
            result = parser(source)
        except RecursionError as e:
            raise ParseRecursionError(
                ErrorTemplate.recursion_limit(sys.getrecursionlimit())
            ) from e

        logger.debug(
            "%s %s, consumed %d of %d characters",
            parser.name,
            "matched" if result.success else "failed",
            len(source) - len(result.remaining),
            len(source),
        )
        return result

    def parse(self, parser: Parser, source: str) -> ParseTree | None:
        """Parse ``source`` and build its parse tree.

        Returns:
            get_parse_tree() of the root match

        Raises:
            ValueError: If source exceeds max_source_size
            ParseFailedError: If the root parser fails
            IncompleteParseError: If require_complete and input is left over
            ParseRecursionError: If parsing hits the Python recursion limit
        """
        result = self.run(parser, source)
        remaining = result.remaining

        if not result.success:
            span = _span_at(source, remaining)
            diagnostic = ErrorTemplate.parse_failed(
                span, remaining, format_context(source, span.start)
            )
            logger.info("Parse failed at line %d, column %d", span.line, span.column)
            raise ParseFailedError(diagnostic, source, remaining)

        if self._require_complete and remaining.strip():
            span = _span_at(source, remaining)
            diagnostic = ErrorTemplate.parse_incomplete(
                span, remaining, format_context(source, span.start)
            )
            logger.info(
                "Parse incomplete at line %d, column %d", span.line, span.column
            )
            raise IncompleteParseError(diagnostic, source, remaining)

        return get_parse_tree(result.match)
