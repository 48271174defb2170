"""Whitespace handling for token-level parsers.

Grammars that ignore spacing between tokens need every token to eat the
whitespace that follows it exactly once. lexeme() adds that behavior to any
parser. symbol() calls skip_whitespace() directly, on both sides of its
literal.
"""

import re

from parsecomb.constants import WHITESPACE_PATTERN
from parsecomb.syntax.parser.core import Parser, ParseResult, as_parser

__all__ = ["lexeme", "skip_whitespace", "white_space"]

_WHITESPACE = re.compile(WHITESPACE_PATTERN)


def skip_whitespace(text: str) -> str:
    """Return text without its leading whitespace.

    Args:
        text: Remaining input

    Returns:
        Suffix of text starting at the first non-whitespace character (or empty)
    """
    # \s* always matches, possibly empty
    return text[_WHITESPACE.match(text).end() :]  # type: ignore[union-attr]


def _white_space(text: str) -> ParseResult:
    return ParseResult.ok(skip_whitespace(text))


white_space = Parser(_white_space, "white_space")
"""Consume zero or more whitespace characters. Never fails; empty match."""


def lexeme(parser: Parser | str) -> Parser:
    """Wrap parser so that it also consumes trailing whitespace.

    Args:
        parser: Token parser, or a literal meaning symbol(literal)

    Returns:
        Parser with the same match as ``parser``, failing exactly when it fails

    Example:
        >>> lexeme(word)("abc   def").remaining
        'def'
    """
    inner = as_parser(parser)

    def _lexeme(text: str) -> ParseResult:
        result = inner(text)
        if not result.success:
            return ParseResult.fail(text)
        return ParseResult.ok(skip_whitespace(result.remaining), result.match)

    return Parser(_lexeme, f"lexeme({inner.name})")
