"""Raw match tree node definitions.

Every parser reports what it matched as a MatchValue: a Leaf of raw text,
a Labeled wrapper naming a sub-match, or a Sequence of sub-matches
collected by a composing combinator. None is the empty match produced by
white_space, a failed maybe() and similar non-consuming successes.

The tree is the input of get_parse_tree(); nothing in it is ever mutated.
Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

__all__ = [
    "Labeled",
    "Leaf",
    "MatchValue",
    "Sequence",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """Raw text consumed by a primitive parser.

    Example:
        word on "abc def" -> Leaf(text="abc")
    """

    text: str

    @staticmethod
    def guard(node: object) -> TypeIs["Leaf"]:
        """Type guard for Leaf.

        Example:
            if Leaf.guard(node):
                node.text  # Type-safe! mypy knows node is Leaf
        """
        return isinstance(node, Leaf)


@dataclass(frozen=True, slots=True)
class Labeled:
    """Sub-match tagged with a name by label().

    Attributes:
        name: Label given to the parser
        value: Match of the labeled parser (None when it matched nothing)
    """

    name: str
    value: "MatchValue | None"

    @staticmethod
    def guard(node: object) -> TypeIs["Labeled"]:
        """Type guard for Labeled."""
        return isinstance(node, Labeled)


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered sub-matches collected by sequence(), many() or sep_by().

    Items may be None where a child matched without producing a value.
    """

    items: "tuple[MatchValue | None, ...]" = ()

    def __post_init__(self) -> None:
        """Accept any iterable of items, store a tuple."""
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @staticmethod
    def guard(node: object) -> TypeIs["Sequence"]:
        """Type guard for Sequence."""
        return isinstance(node, Sequence)


type MatchValue = Leaf | Labeled | Sequence
