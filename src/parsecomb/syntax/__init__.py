"""Parser combinator package.

Provides the raw match tree, the parser abstraction with its primitives and
combinators, the parse-tree builder, position helpers and the runner.

Python 3.13+.
"""

from .matches import Labeled, Leaf, MatchValue, Sequence
from .parser import (
    Forward,
    Parser,
    ParseResult,
    bind_p,
    char,
    choice,
    comma,
    greedy_upto,
    label,
    lazy,
    lexeme,
    many,
    many1,
    maybe,
    natural,
    one_of,
    parens,
    regex,
    return_p,
    semi,
    sep_by,
    sequence,
    symbol,
    try_,
    upto,
    white_space,
    word,
)
from .position import consumed_offset, format_context, line_col
from .runner import GrammarRunner
from .tree import ParseTree, get_parse_tree, leaves

__all__ = [
    "Forward",
    "GrammarRunner",
    "Labeled",
    "Leaf",
    "MatchValue",
    "ParseResult",
    "ParseTree",
    "Parser",
    "Sequence",
    "bind_p",
    "char",
    "choice",
    "comma",
    "consumed_offset",
    "format_context",
    "get_parse_tree",
    "greedy_upto",
    "label",
    "lazy",
    "leaves",
    "lexeme",
    "line_col",
    "many",
    "many1",
    "maybe",
    "natural",
    "one_of",
    "parens",
    "parse",
    "regex",
    "return_p",
    "semi",
    "sep_by",
    "sequence",
    "symbol",
    "try_",
    "upto",
    "white_space",
    "word",
]


def parse(parser: Parser, source: str, *, require_complete: bool = True) -> ParseTree | None:
    """Parse source with a grammar and return its parse tree.

    Convenience function for GrammarRunner.parse().

    Args:
        parser: Root parser of the grammar
        source: Input text
        require_complete: Reject input the grammar leaves unparsed

    Returns:
        Parse tree of the root match

    Example:
        >>> from parsecomb.syntax import parse
        >>> parse(sequence([symbol("let"), label("Name", word)]), "let x")
        {'Name': 'x'}
    """
    runner = GrammarRunner(require_complete=require_complete)
    return runner.parse(parser, source)
