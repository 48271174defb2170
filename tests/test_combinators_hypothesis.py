"""Property-based tests for the combinator laws.

These hold for every parser, so they are checked over the built-in
primitives and small hand-assembled combinations with random input.
The randomly composed grammars in tests/fuzz push the same laws further.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from parsecomb import (
    Parser,
    Sequence,
    choice,
    comma,
    get_parse_tree,
    many,
    many1,
    maybe,
    sep_by,
    sequence,
    try_,
)
from tests.strategies import leaf_parsers, source_texts

# ============================================================================
# Consumption
# ============================================================================


class TestConsumptionProperties:
    """Remaining input is always a suffix; failure consumes nothing."""

    @given(parser=leaf_parsers(), text=source_texts())
    def test_remaining_is_suffix(self, parser: Parser, text: str) -> None:
        """INVARIANT: every result's remaining input is a suffix of the input."""
        result = parser(text)
        event(f"success={result.success}")
        assert text.endswith(result.remaining)

    @given(parser=leaf_parsers(), text=source_texts())
    def test_failure_reports_original_input(self, parser: Parser, text: str) -> None:
        """INVARIANT: failure leaves the input untouched and has no match."""
        result = parser(text)
        if not result.success:
            assert result.remaining == text
            assert result.match is None

    @given(parser=leaf_parsers(), text=source_texts())
    def test_parsers_are_pure(self, parser: Parser, text: str) -> None:
        """PROPERTY: invoking a parser twice gives equal results."""
        assert parser(text) == parser(text)


# ============================================================================
# Sequence / choice laws
# ============================================================================


class TestSequenceProperties:
    """Sequence is atomic and threads remaining input."""

    @given(
        parsers=st.lists(leaf_parsers(), min_size=1, max_size=4),
        text=source_texts(),
    )
    def test_atomicity(self, parsers: list[Parser], text: str) -> None:
        """PROPERTY: sequence succeeds iff every step succeeds in turn."""
        result = sequence(parsers)(text)
        rest = text
        expected_success = True
        for parser in parsers:
            step = parser(rest)
            if not step.success:
                expected_success = False
                break
            rest = step.remaining
        event(f"success={expected_success}")
        assert result.success == expected_success
        assert result.remaining == (rest if expected_success else text)

    @given(
        parsers=st.lists(leaf_parsers(), min_size=1, max_size=4),
        text=source_texts(),
    )
    def test_match_has_one_item_per_step(self, parsers: list[Parser], text: str) -> None:
        result = sequence(parsers)(text)
        if result.success:
            assert isinstance(result.match, Sequence)
            assert len(result.match.items) == len(parsers)


class TestChoiceProperties:
    @given(
        parsers=st.lists(leaf_parsers(), min_size=1, max_size=4),
        text=source_texts(),
    )
    def test_first_success_wins(self, parsers: list[Parser], text: str) -> None:
        """PROPERTY: choice equals the first alternative that succeeds."""
        result = choice(*parsers)(text)
        winner = next((p(text) for p in parsers if p(text).success), None)
        if winner is None:
            event("outcome=all_failed")
            assert not result.success
            assert result.remaining == text
        else:
            event("outcome=matched")
            assert result == winner

    @given(parser=leaf_parsers(), text=source_texts())
    def test_try_is_identity_on_well_behaved_parsers(self, parser: Parser, text: str) -> None:
        assert try_(parser)(text) == parser(text)


# ============================================================================
# Totality
# ============================================================================


class TestTotality:
    """maybe, many and sep_by always succeed."""

    @given(parser=leaf_parsers(), text=source_texts())
    def test_maybe_never_fails(self, parser: Parser, text: str) -> None:
        result = maybe(parser)(text)
        assert result.success
        if not parser(text).success:
            assert result.remaining == text
            assert result.match is None

    @given(parser=leaf_parsers(), text=source_texts())
    def test_many_never_fails(self, parser: Parser, text: str) -> None:
        result = many(parser)(text)
        assert result.success
        assert isinstance(result.match, Sequence)

    @given(parser=leaf_parsers(), text=source_texts())
    def test_many1_fails_iff_parser_fails(self, parser: Parser, text: str) -> None:
        assert many1(parser)(text).success == parser(text).success

    @given(parser=leaf_parsers(), text=source_texts())
    def test_sep_by_never_fails(self, parser: Parser, text: str) -> None:
        result = sep_by(comma, parser)(text)
        assert result.success
        assert text.endswith(result.remaining)

    @given(parser=leaf_parsers(), text=source_texts())
    def test_many_consumes_at_least_one_step(self, parser: Parser, text: str) -> None:
        """PROPERTY: many consumes at least as much as a single application."""
        single = parser(text)
        repeated = many(parser)(text)
        if single.success:
            assert len(repeated.remaining) <= len(single.remaining)
        else:
            assert repeated.remaining == text

    @given(parser=leaf_parsers(), text=source_texts())
    def test_tree_always_builds(self, parser: Parser, text: str) -> None:
        result = many(parser)(text)
        tree = get_parse_tree(result.match)
        assert tree is None or isinstance(tree, (str, list, dict))
