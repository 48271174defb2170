"""Parser combinator module.

Module Organization:
- core.py: Parser, ParseResult, Forward and lazy() (the parser abstraction)
- primitives.py: Text matchers (char, symbol, word, natural, regex, upto)
- whitespace.py: white_space and the lexeme() wrapper
- combinators.py: sequence, choice, try_, maybe, many, sep_by, label, ...
- monadic.py: bind_p and return_p

Public API:
    Every primitive and combinator is re-exported here.
"""

from parsecomb.syntax.parser.combinators import (
    Reducer,
    choice,
    label,
    many,
    many1,
    maybe,
    one_of,
    parens,
    sep_by,
    sequence,
    try_,
)
from parsecomb.syntax.parser.core import Forward, Parser, ParseResult, ParserFn, as_parser, lazy
from parsecomb.syntax.parser.monadic import Continuation, bind_p, return_p
from parsecomb.syntax.parser.primitives import (
    char,
    comma,
    greedy_upto,
    natural,
    regex,
    semi,
    symbol,
    upto,
    word,
)
from parsecomb.syntax.parser.whitespace import lexeme, skip_whitespace, white_space

__all__ = [
    "Continuation",
    "Forward",
    "ParseResult",
    "Parser",
    "ParserFn",
    "Reducer",
    "as_parser",
    "bind_p",
    "char",
    "choice",
    "comma",
    "greedy_upto",
    "label",
    "lazy",
    "lexeme",
    "many",
    "many1",
    "maybe",
    "natural",
    "one_of",
    "parens",
    "regex",
    "return_p",
    "semi",
    "sep_by",
    "sequence",
    "skip_whitespace",
    "symbol",
    "try_",
    "upto",
    "white_space",
    "word",
]
