"""Parser abstraction shared by every primitive and combinator.

A parser is a value with one capability: call it with the remaining input
and it returns a ParseResult. Position is never stored anywhere; each
parser receives the suffix still to be parsed and reports the suffix it
leaves behind. Backtracking is therefore just retrying another parser on
the same string.

Architecture:
    - ParseResult is the (success, remaining, match) triple, frozen
    - Parser wraps a plain function ``str -> ParseResult``
    - Forward and lazy() resolve a parser at invocation time, which is how
      recursive grammars refer to rules that are not built yet

Debug Tracing:
    Every invocation is logged at DEBUG level on this module's logger when
    DEBUG is enabled for it. Enable with:

        >>> import logging
        >>> logging.basicConfig()
        >>> logging.getLogger("parsecomb.syntax.parser.core").setLevel(logging.DEBUG)

Pattern Reference:
    - Haskell Parsec
    - funcparserlib
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from parsecomb.constants import TRACE_INPUT_WIDTH
from parsecomb.diagnostics import ErrorTemplate, GrammarError
from parsecomb.syntax.matches import MatchValue

__all__ = ["Forward", "ParseResult", "Parser", "ParserFn", "as_parser", "lazy"]

logger = logging.getLogger(__name__)

type ParserFn = Callable[[str], ParseResult]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of invoking a parser.

    Attributes:
        success: Whether the parser matched
        remaining: Input left after the match (the original input on failure)
        match: Raw match tree (None on failure or for an empty match)

    Unpacks as the invocation triple:
        >>> success, remaining, match = word("abc def")
        >>> remaining
        ' def'
    """

    success: bool
    remaining: str
    match: MatchValue | None = None

    def __iter__(self) -> Iterator[bool | str | MatchValue | None]:
        """Iterate as (success, remaining, match)."""
        return iter((self.success, self.remaining, self.match))

    @classmethod
    def ok(cls, remaining: str, match: MatchValue | None = None) -> ParseResult:
        """Successful result."""
        return cls(True, remaining, match)

    @classmethod
    def fail(cls, text: str) -> ParseResult:
        """Failed result reporting ``text`` as remaining.

        Callers always pass the input they were given, never a partially
        consumed suffix.
        """
        return cls(False, text, None)


def _abbrev(text: str) -> str:
    if len(text) > TRACE_INPUT_WIDTH:
        return text[: TRACE_INPUT_WIDTH - 3] + "..."
    return text


class Parser:
    """Callable parser value.

    Wraps a function from remaining input to ParseResult. Parsers hold no
    mutable state, so one grammar can be invoked any number of times, from
    any number of threads.

    Example:
        >>> digit = Parser(lambda s: ParseResult.ok(s[1:], Leaf(s[0]))
        ...                if s[:1].isdigit() else ParseResult.fail(s), "digit")
        >>> digit("7up")
        ParseResult(success=True, remaining='up', match=Leaf(text='7'))
    """

    __slots__ = ("_run", "name")

    def __init__(self, run: ParserFn, name: str | None = None) -> None:
        """Wrap ``run`` as a parser.

        Args:
            run: Function from remaining input to ParseResult
            name: Display name for debug traces and repr (default: function name)
        """
        self._run = run
        self.name: str = name or getattr(run, "__name__", "<parser>")

    def __call__(self, text: str) -> ParseResult:
        result = self._run(text)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s on %r",
                self.name,
                "matched" if result.success else "failed",
                _abbrev(text),
            )
        return result

    def __or__(self, other: Parser | str) -> Parser:
        """Ordered choice: ``p | q`` is ``choice(p, q)``."""
        from .combinators import choice  # noqa: PLC0415 - circular

        return choice(self, other)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def named(self, name: str) -> Parser:
        """Return a copy of this parser with another display name."""
        return Parser(self._run, name)


class Forward(Parser):
    """Placeholder for a parser defined after it is referenced.

    Recursive grammars need a rule that refers to itself before it exists.
    Create a Forward, use it while building the grammar, then define() it
    once with the real parser.

    Example:
        >>> expr = Forward("expr")
        >>> atom = choice(natural, parens(expr))
        >>> expr.define(sep_by("+", atom))
        >>> expr("(1+2)+3").remaining
        ''

    Thread Safety:
        define() is meant for grammar construction time. Once defined the
        target never changes, so invocation is safe from any thread.
    """

    __slots__ = ("_target",)

    def __init__(self, name: str = "forward") -> None:
        super().__init__(self._invoke_target, name)
        self._target: Parser | None = None

    @property
    def is_defined(self) -> bool:
        """Whether define() has been called."""
        return self._target is not None

    def define(self, parser: Parser | str) -> None:
        """Set the parser this placeholder delegates to.

        Raises:
            GrammarError: If already defined, or parser is not a Parser or literal
        """
        if self._target is not None:
            raise GrammarError(ErrorTemplate.forward_redefined(self.name))
        self._target = as_parser(parser)

    def _invoke_target(self, text: str) -> ParseResult:
        if self._target is None:
            raise GrammarError(ErrorTemplate.forward_undefined(self.name))
        return self._target(text)


def lazy(thunk: Callable[[], Parser], name: str = "lazy") -> Parser:
    """Parser that obtains its delegate from ``thunk`` on every invocation.

    Lets a rule refer to a module-level name that is assigned later:

        >>> value = lazy(lambda: array)
        >>> array = parens(sep_by(comma, value))
    """

    def _lazy(text: str) -> ParseResult:
        return thunk()(text)

    return Parser(_lazy, name)


def as_parser(item: Parser | str) -> Parser:
    """Coerce a combinator argument to a Parser.

    A plain string means ``symbol(item)``.

    Raises:
        GrammarError: If item is neither a Parser nor a string
    """
    if isinstance(item, Parser):
        return item
    if isinstance(item, str):
        from .primitives import symbol  # noqa: PLC0415 - circular

        return symbol(item)
    raise GrammarError(ErrorTemplate.not_a_parser(item))
