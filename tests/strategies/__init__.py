"""Hypothesis strategies for parsecomb property-based testing.

Strategies are organized by domain:

- grammar: input texts, identifiers and randomly composed parsers

Usage:
    from tests.strategies import identifiers, source_texts, composed_parsers

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - composed_parsers, declaration_sources
"""

from .grammar import (
    # Constants
    LABEL_NAMES,
    SOURCE_ALPHABET,
    # Strategies
    composed_parsers,
    declaration_sources,
    identifiers,
    leaf_parsers,
    naturals,
    source_texts,
    whitespace_runs,
)

__all__ = [
    "LABEL_NAMES",
    "SOURCE_ALPHABET",
    "composed_parsers",
    "declaration_sources",
    "identifiers",
    "leaf_parsers",
    "naturals",
    "source_texts",
    "whitespace_runs",
]
