"""parsecomb exception hierarchy with structured diagnostics.

The combinator core never raises for control flow: a failed parse is an
ordinary ParseResult. Exceptions are reserved for grammar construction
mistakes and for the runner, which turns a failed or incomplete parse
into an error the caller can report.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ParsecombError(Exception):
    """Base exception for all parsecomb errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsecombError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(ParsecombError):
    """Invalid grammar construction.

    Examples:
    - char() given more than one character
    - choice() with no alternatives
    - Forward invoked before define(), or defined twice
    """


class ParseFailedError(ParsecombError):
    """The root parser rejected the input.

    Raised by the runner only. The combinators themselves report
    failure through ParseResult.success.

    Attributes:
        source: Complete input given to the runner
        remaining: Input left where parsing stopped
        position: Character offset of the stopping point
    """

    def __init__(self, message: str | Diagnostic, source: str, remaining: str) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            source: Complete input given to the runner
            remaining: Input left where parsing stopped
        """
        super().__init__(message)
        self.source = source
        self.remaining = remaining
        self.position = len(source) - len(remaining)


class IncompleteParseError(ParseFailedError):
    """The root parser succeeded but left unparsed input."""


class ParseRecursionError(ParsecombError):
    """Python recursion limit reached while parsing.

    Usually a left-recursive grammar (a rule that invokes itself before
    consuming any input), which recursive descent cannot terminate on.
    """
