"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _abbrev(text: str, width: int = 30) -> str:
    """Shorten text for inclusion in a one-line message."""
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def invalid_character(value: str) -> Diagnostic:
        """char() given something other than one character."""
        msg = f"char() expects exactly one character, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            hint="Use symbol() or regex() to match longer text",
        )

    @staticmethod
    def empty_literal(combinator: str) -> Diagnostic:
        """Literal-matching combinator given an empty string."""
        msg = f"{combinator}() expects a non-empty literal"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LITERAL,
            message=msg,
            hint="Use white_space or return_p() to match without consuming text",
        )

    @staticmethod
    def empty_alternatives(combinator: str) -> Diagnostic:
        """choice() or one_of() with nothing to choose from."""
        msg = f"{combinator}() requires at least one alternative"
        return Diagnostic(code=DiagnosticCode.EMPTY_ALTERNATIVES, message=msg)

    @staticmethod
    def invalid_label(name: object) -> Diagnostic:
        """label() given an empty or non-string name."""
        msg = f"Label name must be a non-empty string, got {name!r}"
        return Diagnostic(code=DiagnosticCode.INVALID_LABEL, message=msg)

    @staticmethod
    def not_a_parser(value: object) -> Diagnostic:
        """Combinator argument that is neither a Parser nor a literal."""
        msg = f"Expected a Parser or a literal string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PARSER,
            message=msg,
            hint="Wrap callables with Parser(fn) before composing them",
        )

    @staticmethod
    def forward_undefined(name: str) -> Diagnostic:
        """Forward reference invoked before define()."""
        msg = f"Forward parser '{name}' was invoked before define()"
        return Diagnostic(
            code=DiagnosticCode.FORWARD_UNDEFINED,
            message=msg,
            hint="Call define() on every Forward once the grammar is assembled",
        )

    @staticmethod
    def forward_redefined(name: str) -> Diagnostic:
        """Forward reference defined a second time."""
        msg = f"Forward parser '{name}' is already defined"
        return Diagnostic(code=DiagnosticCode.FORWARD_REDEFINED, message=msg)

    @staticmethod
    def parse_failed(span: SourceSpan, remaining: str, context: str) -> Diagnostic:
        """Root parser rejected the input."""
        msg = f"Input rejected by grammar at {_abbrev(remaining)!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            span=span,
            context=context,
        )

    @staticmethod
    def parse_incomplete(span: SourceSpan, remaining: str, context: str) -> Diagnostic:
        """Root parser succeeded but left input behind."""
        msg = f"Unparsed input remains: {_abbrev(remaining)!r}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INCOMPLETE,
            message=msg,
            span=span,
            hint="Extend the grammar or pass require_complete=False",
            context=context,
        )

    @staticmethod
    def recursion_limit(limit: int) -> Diagnostic:
        """Python recursion limit hit during parsing."""
        msg = f"Parsing exceeded the Python recursion limit ({limit})"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_LIMIT_EXCEEDED,
            message=msg,
            hint=(
                "Check the grammar for left recursion (a rule that invokes itself "
                "before consuming input)"
            ),
        )
