"""Monadic composition: bind_p and return_p.

An alternative to list-based sequence() for callers who prefer explicit
continuations. The continuation receives the first parser's match and
returns the parser to run next, so later parsing can depend on earlier
results:

    >>> length_prefixed = bind_p(natural, lambda n: regex(".{%s}" % n.text))
    >>> length_prefixed("3abcdef").remaining
    'def'

For any p1 and p2 these two parsers give identical results:

    sequence([p1, p2])
    bind_p(p1, lambda a: bind_p(p2, lambda b: return_p(Sequence((a, b)))))
"""

from collections.abc import Callable

from parsecomb.syntax.matches import Leaf, MatchValue
from parsecomb.syntax.parser.core import Parser, ParseResult, as_parser

__all__ = ["Continuation", "bind_p", "return_p"]

type Continuation = Callable[[MatchValue | None], Parser]


def bind_p(parser: Parser | str, continuation: Continuation) -> Parser:
    """Run ``parser``, then the parser ``continuation`` builds from its match.

    Args:
        parser: First parser, or a literal meaning symbol(literal)
        continuation: Function from the first match to the next parser

    Returns:
        Parser whose match is the second parser's match. Fails, reporting the
        original input, if either parser fails.
    """
    first_parser = as_parser(parser)

    def _bind(text: str) -> ParseResult:
        first = first_parser(text)
        if not first.success:
            return ParseResult.fail(text)
        second = continuation(first.match)(first.remaining)
        if not second.success:
            return ParseResult.fail(text)
        return second

    return Parser(_bind, f"bind({first_parser.name})")


def return_p(value: MatchValue | str | None) -> Parser:
    """Parser that always succeeds, consumes nothing and yields ``value``.

    A plain string is wrapped as Leaf(value).
    """
    match = Leaf(value) if isinstance(value, str) else value

    def _return(text: str) -> ParseResult:
        return ParseResult.ok(text, match)

    return Parser(_return, f"return({match!r})")
