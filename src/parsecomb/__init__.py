"""parsecomb - parser combinators for ad-hoc grammars.

Build a recursive-descent parser by composing small parsers in plain
Python, with no grammar file and no generated tables. Every parser is a
pure function from the remaining input to a (success, remaining, match)
result; labeled matches are folded into dicts by get_parse_tree().

    >>> from parsecomb import sequence, symbol, label, word, natural, maybe, semi
    >>> from parsecomb import get_parse_tree
    >>> decl = sequence([
    ...     symbol("var"),
    ...     label("Name", word),
    ...     maybe(sequence([symbol("="), label("Value", natural)])),
    ...     semi,
    ... ])
    >>> success, remaining, match = decl("var res = 42;")
    >>> get_parse_tree(match)
    {'Name': 'res', 'Value': '42'}

Public API:
    Primitives - white_space, char, word, natural, symbol, comma, semi,
                 regex, upto, greedy_upto, lexeme
    Combinators - sequence, choice, try_, maybe, parens, many, many1,
                  sep_by, one_of, label
    Monadic - bind_p, return_p
    Recursion - Forward, lazy
    Tree - get_parse_tree, leaves
    Runner - GrammarRunner, parse

Exceptions:
    ParsecombError - Base exception class
    GrammarError - Invalid grammar construction
    ParseFailedError - Runner: input rejected
    IncompleteParseError - Runner: input left unparsed
    ParseRecursionError - Runner: recursion limit (left recursion)

Submodules:
    parsecomb.syntax.matches - Raw match tree node types
    parsecomb.syntax.position - Offset to line/column helpers
    parsecomb.diagnostics - Diagnostic codes and error templates
"""

from .diagnostics import (
    GrammarError,
    IncompleteParseError,
    ParsecombError,
    ParseFailedError,
    ParseRecursionError,
)
from .syntax import (
    Forward,
    GrammarRunner,
    Labeled,
    Leaf,
    MatchValue,
    Parser,
    ParseResult,
    ParseTree,
    Sequence,
    bind_p,
    char,
    choice,
    comma,
    get_parse_tree,
    greedy_upto,
    label,
    lazy,
    leaves,
    lexeme,
    many,
    many1,
    maybe,
    natural,
    one_of,
    parens,
    parse,
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

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Forward",
    "GrammarError",
    "GrammarRunner",
    "IncompleteParseError",
    "Labeled",
    "Leaf",
    "MatchValue",
    "ParseFailedError",
    "ParseRecursionError",
    "ParseResult",
    "ParseTree",
    "Parser",
    "ParsecombError",
    "Sequence",
    "__version__",
    "bind_p",
    "char",
    "choice",
    "comma",
    "get_parse_tree",
    "greedy_upto",
    "label",
    "lazy",
    "leaves",
    "lexeme",
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
