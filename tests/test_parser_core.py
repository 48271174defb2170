"""Tests for Parser, Forward and lazy: naming, tracing and recursion."""

from __future__ import annotations

import logging

import pytest

from parsecomb import (
    Forward,
    GrammarError,
    Leaf,
    Parser,
    ParseResult,
    Sequence,
    choice,
    comma,
    lazy,
    natural,
    parens,
    sep_by,
    word,
)
from parsecomb.diagnostics import DiagnosticCode
from parsecomb.syntax.parser import as_parser

# ============================================================================
# Parser
# ============================================================================


class TestParser:
    """Parser wraps a plain function."""

    def test_wraps_function(self) -> None:
        def digit(text: str) -> ParseResult:
            if text[:1].isdigit():
                return ParseResult.ok(text[1:], Leaf(text[0]))
            return ParseResult.fail(text)

        parser = Parser(digit)
        assert parser.name == "digit"
        assert parser("7up") == ParseResult.ok("up", Leaf("7"))

    def test_named_copy(self) -> None:
        ident = word.named("identifier")
        assert ident.name == "identifier"
        assert word.name == "word"
        assert ident("abc") == word("abc")

    def test_repr(self) -> None:
        assert repr(word) == "<Parser word>"

    def test_as_parser(self) -> None:
        assert as_parser(word) is word
        assert as_parser(";")("; x").remaining == "x"
        with pytest.raises(GrammarError):
            as_parser(3)  # type: ignore[arg-type]


class TestTracing:
    """Invocations are logged at DEBUG level."""

    def test_logs_match(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parsecomb.syntax.parser.core"):
            word("abc")
        assert "word matched on 'abc'" in caplog.messages

    def test_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parsecomb.syntax.parser.core"):
            natural("abc")
        assert "natural failed on 'abc'" in caplog.messages

    def test_long_input_abbreviated(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="parsecomb.syntax.parser.core"):
            word("x" * 100)
        assert any(message.endswith("...'") for message in caplog.messages)

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="parsecomb.syntax.parser.core"):
            word("abc")
        assert caplog.records == []


# ============================================================================
# Forward / lazy
# ============================================================================


class TestForward:
    """Forward resolves recursive rules at invocation time."""

    def test_recursive_grammar(self) -> None:
        expr = Forward("expr")
        atom = choice(natural, parens(expr))
        expr.define(sep_by("+", atom))

        result = expr("(1+2)+3")
        assert result.remaining == ""
        assert result.match == Sequence(
            (Sequence((Leaf("1"), Leaf("2"))), Leaf("3"))
        )

    def test_deep_nesting(self) -> None:
        nested = Forward("nested")
        nested.define(choice(word, parens(nested)))
        text = "(" * 50 + "core" + ")" * 50
        assert nested(text) == ParseResult.ok("", Leaf("core"))

    def test_is_defined(self) -> None:
        rule = Forward()
        assert not rule.is_defined
        rule.define(word)
        assert rule.is_defined

    def test_literal_definition(self) -> None:
        rule = Forward("kw")
        rule.define("end")
        assert rule(" end").match == Leaf("end")

    def test_undefined_invocation(self) -> None:
        rule = Forward("value")
        with pytest.raises(GrammarError) as exc_info:
            rule("x")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORWARD_UNDEFINED
        assert "value" in str(exc_info.value)

    def test_redefinition(self) -> None:
        rule = Forward("value")
        rule.define(word)
        with pytest.raises(GrammarError) as exc_info:
            rule.define(natural)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORWARD_REDEFINED
        assert rule("x1") == word("x1")


class TestLazy:
    """lazy() looks its parser up on every invocation."""

    def test_refers_to_later_binding(self) -> None:
        rules: dict[str, Parser] = {}
        value = lazy(lambda: rules["value"], "value")
        rules["value"] = choice(natural, parens(sep_by(comma, value)))

        result = value("(1, (2, 3))")
        assert result.remaining == ""
        assert result.match == Sequence(
            (Leaf("1"), Sequence((Leaf("2"), Leaf("3"))))
        )

    def test_name(self) -> None:
        assert lazy(lambda: word, "ref").name == "ref"
