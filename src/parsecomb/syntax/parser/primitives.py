"""Primitive parsers matching raw text at the front of the input.

These are the leaves of every grammar: single characters, literal symbols,
words, natural numbers and arbitrary regular expressions. Each returns a
Leaf holding the matched text; none converts values (natural yields the
digit string, not an int).

Patterns are compiled once when the primitive is constructed, never per
invocation.
"""

import re

from parsecomb.constants import NATURAL_PATTERN, WORD_PATTERN
from parsecomb.diagnostics import ErrorTemplate, GrammarError
from parsecomb.syntax.matches import Leaf
from parsecomb.syntax.parser.core import Parser, ParseResult
from parsecomb.syntax.parser.whitespace import skip_whitespace

__all__ = [
    "char",
    "comma",
    "greedy_upto",
    "natural",
    "regex",
    "semi",
    "symbol",
    "upto",
    "word",
]

type Pattern = str | re.Pattern[str]


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def char(c: str) -> Parser:
    """Match exactly the character ``c``.

    Args:
        c: Single character

    Returns:
        Parser consuming one character, match Leaf(c)

    Raises:
        GrammarError: If c is not exactly one character
    """
    if not isinstance(c, str) or len(c) != 1:
        raise GrammarError(ErrorTemplate.invalid_character(c))

    def _char(text: str) -> ParseResult:
        if text.startswith(c):
            return ParseResult.ok(text[1:], Leaf(c))
        return ParseResult.fail(text)

    return Parser(_char, f"char({c!r})")


def regex(pattern: Pattern) -> Parser:
    """Match ``pattern`` anchored at the start of the input.

    Args:
        pattern: Regular expression source or compiled pattern

    Returns:
        Parser consuming the matched text, match Leaf(matched_text)

    Example:
        >>> regex(r"[a-z]+")("abc123").remaining
        '123'
    """
    compiled = _compile(pattern)

    def _regex(text: str) -> ParseResult:
        m = compiled.match(text)
        if m is None:
            return ParseResult.fail(text)
        return ParseResult.ok(text[m.end() :], Leaf(m.group(0)))

    return Parser(_regex, f"regex({compiled.pattern!r})")


def upto(pattern: Pattern) -> Parser:
    """Consume everything before the first occurrence of ``pattern``.

    The occurrence itself is left in the remaining input.

    Example:
        >>> upto(";")("a = 1; b = 2;")
        ParseResult(success=True, remaining='; b = 2;', match=Leaf(text='a = 1'))
    """
    compiled = _compile(pattern)

    def _upto(text: str) -> ParseResult:
        m = compiled.search(text)
        if m is None:
            return ParseResult.fail(text)
        return ParseResult.ok(text[m.start() :], Leaf(text[: m.start()]))

    return Parser(_upto, f"upto({compiled.pattern!r})")


def greedy_upto(pattern: Pattern) -> Parser:
    """Consume everything before the last occurrence of ``pattern``.

    Example:
        >>> greedy_upto(";")("a = 1; b = 2;").match
        Leaf(text='a = 1; b = 2')
    """
    compiled = _compile(pattern)

    def _greedy_upto(text: str) -> ParseResult:
        # Rightmost start position where the pattern matches
        for pos in range(len(text), -1, -1):
            if compiled.match(text, pos) is not None:
                return ParseResult.ok(text[pos:], Leaf(text[:pos]))
        return ParseResult.fail(text)

    return Parser(_greedy_upto, f"greedy_upto({compiled.pattern!r})")


def symbol(lit: str) -> Parser:
    """Match the literal ``lit`` as a whitespace-insensitive token.

    Whitespace before the literal is skipped, and the whitespace after it is
    consumed (lexeme behavior). Skipping the leading whitespace too is what
    lets a token follow a primitive that stops at whitespace: in
    ``sequence([symbol("var"), word, symbol("=")])`` on ``"var x = 1"``,
    word leaves ``" = 1"``, which symbol("=") must accept. The parser still
    fails, reporting the original input, when the first non-whitespace text
    is not ``lit``.

    Args:
        lit: Literal text

    Returns:
        Parser with match Leaf(lit)

    Raises:
        GrammarError: If lit is empty

    Example:
        >>> symbol("var")("var   x").remaining
        'x'
    """
    if not isinstance(lit, str) or not lit:
        raise GrammarError(ErrorTemplate.empty_literal("symbol"))

    def _symbol(text: str) -> ParseResult:
        stripped = skip_whitespace(text)
        if not stripped.startswith(lit):
            return ParseResult.fail(text)
        return ParseResult.ok(skip_whitespace(stripped[len(lit) :]), Leaf(lit))

    return Parser(_symbol, f"symbol({lit!r})")


word = regex(WORD_PATTERN).named("word")
"""One or more word characters (letters, digits, underscore)."""

natural = regex(NATURAL_PATTERN).named("natural")
"""One or more ASCII digits, matched as text."""

comma = symbol(",").named("comma")
semi = symbol(";").named("semi")
