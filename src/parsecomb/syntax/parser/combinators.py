"""Combinators composing parsers into parsers.

Every combinator here follows one rule: a failed parse reports the input it
was given, never a partially consumed suffix. Sequences are atomic, choice
retries each alternative on the original input, and the repetition
combinators treat failure as "no more occurrences".

Ordered choice:
    choice() and one_of() return the first alternative that succeeds, in
    declaration order (PEG-style). Alternatives after a success are never
    tried, so put longer or more specific alternatives first.

Progress:
    A repeated parser that succeeds without consuming input would repeat
    forever. many(), many1() and sep_by() keep such a match once and stop.
"""

from collections.abc import Callable, Iterable

from parsecomb.diagnostics import ErrorTemplate, GrammarError
from parsecomb.syntax.matches import Labeled, MatchValue, Sequence
from parsecomb.syntax.parser.core import Parser, ParseResult, as_parser
from parsecomb.syntax.parser.primitives import char, symbol

__all__ = [
    "Reducer",
    "choice",
    "label",
    "many",
    "many1",
    "maybe",
    "one_of",
    "parens",
    "sep_by",
    "sequence",
    "try_",
]

type Reducer = Callable[[list[MatchValue | None]], MatchValue | None]


def sequence(items: Iterable[Parser | str], reducer: Reducer | None = None) -> Parser:
    """Run parsers one after another on the shrinking remainder.

    Args:
        items: Parsers in order (a plain string means symbol(string))
        reducer: Optional function turning the list of child matches into
                 the sequence's match

    Returns:
        Parser whose match is Sequence(child matches) or reducer(child matches)

    Atomicity:
        If any child fails the whole sequence fails and reports the original
        input, however much the earlier children consumed.

    Example:
        >>> decl = sequence([symbol("var"), label("Name", word), semi])
        >>> get_parse_tree(decl("var x;").match)
        {'Name': 'x'}
    """
    parsers = tuple(as_parser(item) for item in items)

    def _sequence(text: str) -> ParseResult:
        rest = text
        matches: list[MatchValue | None] = []
        for parser in parsers:
            result = parser(rest)
            if not result.success:
                return ParseResult.fail(text)
            matches.append(result.match)
            rest = result.remaining
        if reducer is not None:
            return ParseResult.ok(rest, reducer(matches))
        return ParseResult.ok(rest, Sequence(tuple(matches)))

    return Parser(_sequence, f"sequence({', '.join(p.name for p in parsers)})")


def choice(*alternatives: Parser | str) -> Parser:
    """Ordered choice: the first alternative that succeeds wins.

    Each alternative is tried on the original input.

    Raises:
        GrammarError: If no alternatives are given
    """
    if not alternatives:
        raise GrammarError(ErrorTemplate.empty_alternatives("choice"))
    parsers = tuple(as_parser(alt) for alt in alternatives)

    def _choice(text: str) -> ParseResult:
        for parser in parsers:
            result = parser(text)
            if result.success:
                return result
        return ParseResult.fail(text)

    return Parser(_choice, " | ".join(p.name for p in parsers))


def try_(parser: Parser | str) -> Parser:
    """Backtracking wrapper.

    Behaves exactly like ``parser`` on success. On failure it reports the
    original input itself, so enclosing combinators can rely on the
    no-consumption guarantee without trusting the wrapped parser.
    """
    inner = as_parser(parser)

    def _try(text: str) -> ParseResult:
        result = inner(text)
        if result.success:
            return result
        return ParseResult.fail(text)

    return Parser(_try, f"try({inner.name})")


def maybe(parser: Parser | str) -> Parser:
    """Optional parser. Never fails.

    On failure of ``parser`` the result is a success with an empty match
    that consumes nothing.
    """
    inner = as_parser(parser)

    def _maybe(text: str) -> ParseResult:
        result = inner(text)
        if result.success:
            return result
        return ParseResult.ok(text)

    return Parser(_maybe, f"maybe({inner.name})")


_OPEN_PAREN = char("(")
_CLOSE_PAREN = char(")")


def parens(parser: Parser | str) -> Parser:
    """Match ``(``, ``parser``, ``)`` and keep only the inner match."""
    inner = as_parser(parser)
    return sequence(
        [_OPEN_PAREN, inner, _CLOSE_PAREN], reducer=lambda matches: matches[1]
    ).named(f"parens({inner.name})")


def _repeat(parser: Parser, text: str) -> tuple[str, list[MatchValue | None]]:
    """Apply parser until it fails. Returns (remaining, matches)."""
    rest = text
    matches: list[MatchValue | None] = []
    while True:
        result = parser(rest)
        if not result.success:
            break
        matches.append(result.match)
        if result.remaining == rest:
            break
        rest = result.remaining
    return rest, matches


def many(parser: Parser | str) -> Parser:
    """Zero or more repetitions. Never fails.

    Returns:
        Parser whose match is Sequence of every repetition's match
    """
    inner = as_parser(parser)

    def _many(text: str) -> ParseResult:
        rest, matches = _repeat(inner, text)
        return ParseResult.ok(rest, Sequence(tuple(matches)))

    return Parser(_many, f"many({inner.name})")


def many1(parser: Parser | str) -> Parser:
    """One or more repetitions. Fails only if the first repetition fails."""
    inner = as_parser(parser)

    def _many1(text: str) -> ParseResult:
        rest, matches = _repeat(inner, text)
        if not matches:
            return ParseResult.fail(text)
        return ParseResult.ok(rest, Sequence(tuple(matches)))

    return Parser(_many1, f"many1({inner.name})")


def sep_by(separator: Parser | str, parser: Parser | str) -> Parser:
    """Zero or more ``parser`` matches separated by ``separator``. Never fails.

    Only the element matches are collected. A separator not followed by an
    element is left unconsumed.

    Args:
        separator: Separator parser, or a literal meaning symbol(literal)
        parser: Element parser, or a literal meaning symbol(literal)

    Example:
        >>> get_parse_tree(sep_by(comma, label("Var", word))("u,v,w").match)
        {'Var': ['u', 'v', 'w']}
    """
    sep = as_parser(separator)
    element = as_parser(parser)
    following = sequence([sep, element], reducer=lambda matches: matches[1])

    def _sep_by(text: str) -> ParseResult:
        first = element(text)
        if not first.success:
            return ParseResult.ok(text, Sequence())
        matches: list[MatchValue | None] = [first.match]
        rest = first.remaining
        if rest != text:
            rest, more = _repeat(following, rest)
            matches.extend(more)
        return ParseResult.ok(rest, Sequence(tuple(matches)))

    return Parser(_sep_by, f"sep_by({sep.name}, {element.name})")


def one_of(literals: Iterable[str]) -> Parser:
    """Ordered choice over ``symbol(lit)`` for each literal.

    Raises:
        GrammarError: If literals is empty
    """
    options = tuple(literals)
    if not options:
        raise GrammarError(ErrorTemplate.empty_alternatives("one_of"))
    return choice(*(symbol(lit) for lit in options)).named(f"one_of({list(options)!r})")


def label(name: str, parser: Parser | str) -> Parser:
    """Tag the match of ``parser`` with ``name``.

    Consumption is unchanged; on success the match becomes
    Labeled(name, match), on failure the failure passes through.

    Raises:
        GrammarError: If name is not a non-empty string
    """
    if not isinstance(name, str) or not name:
        raise GrammarError(ErrorTemplate.invalid_label(name))
    inner = as_parser(parser)

    def _label(text: str) -> ParseResult:
        result = inner(text)
        if not result.success:
            return ParseResult.fail(text)
        return ParseResult.ok(result.remaining, Labeled(name, result.match))

    return Parser(_label, f"{name}:{inner.name}")
