"""Fortran Declarations Example - A Client Grammar Built on parsecomb.

Parses Fortran 90 type declaration statements such as:

    integer :: i, j
    real, dimension(3, 3), parameter :: identity
    character(len=16) :: name

into plain dictionaries, one per declaration.

Demonstrates:
1. one_of() for keyword alternatives
2. parens() and maybe() for optional selectors
3. Labels merging across nested sequences
4. Normalizing single values to lists in client code
5. Line/column error reports from GrammarRunner

Python 3.13+.
"""

from __future__ import annotations

from parsecomb import (
    GrammarRunner,
    ParseFailedError,
    ParseTree,
    Parser,
    choice,
    comma,
    label,
    lexeme,
    many,
    maybe,
    natural,
    one_of,
    parens,
    sep_by,
    sequence,
    symbol,
    white_space,
    word,
)

TYPE_NAMES = ("integer", "real", "double precision", "logical", "complex", "character")
SIMPLE_ATTRIBUTES = ("parameter", "allocatable", "save", "target", "pointer")


def build_grammar() -> Parser:
    """Grammar for a sequence of type declaration statements."""
    type_spec = label("Type", one_of(TYPE_NAMES))

    # (8), (kind=8) or (len=16)
    selector = parens(
        sequence([
            maybe(sequence([lexeme(word), symbol("=")])),
            label("Kind", lexeme(word)),
        ])
    )

    dimension = sequence([
        symbol("dimension"),
        parens(label("Shape", sep_by(comma, lexeme(natural)))),
    ])
    attribute = choice(dimension, label("Attr", one_of(SIMPLE_ATTRIBUTES)))

    declaration = sequence([
        type_spec,
        maybe(lexeme(selector)),
        many(sequence([comma, attribute])),
        symbol("::"),
        sep_by(comma, label("Var", lexeme(word))),
    ])
    return sequence([white_space, many(label("Decl", declaration))])


def _as_list(value: ParseTree | None) -> list[ParseTree]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def normalize(tree: ParseTree | None) -> list[dict[str, object]]:
    """Turn the parse tree into one record per declaration.

    Labels that matched once are plain strings in the tree and labels that
    matched several times are lists; records always use lists.
    """
    if not isinstance(tree, dict):
        return []
    records = []
    for decl in _as_list(tree.get("Decl")):
        assert isinstance(decl, dict)
        records.append({
            "type": decl["Type"],
            "kind": decl.get("Kind"),
            "shape": _as_list(decl.get("Shape")),
            "attributes": _as_list(decl.get("Attr")),
            "names": _as_list(decl.get("Var")),
        })
    return records


SOURCE = """
integer :: i, j, k
real, dimension(3, 3), parameter :: identity
double precision :: tolerance
character(len=16), save :: name
integer(kind=8) :: counter
"""


def example_1_parse_declarations() -> None:
    """Example 1: Parse a block of declarations."""
    print("=" * 60)
    print("Example 1: Parsing Declarations")
    print("=" * 60)

    runner = GrammarRunner()
    tree = runner.parse(build_grammar(), SOURCE)
    for record in normalize(tree):
        print(record)
    # Output:
    # {'type': 'integer', 'kind': None, 'shape': [], 'attributes': [], 'names': ['i', 'j', 'k']}
    # {'type': 'real', 'kind': None, 'shape': ['3', '3'], 'attributes': ['parameter'],
    #  'names': ['identity']}
    # ...


def example_2_raw_tree() -> None:
    """Example 2: The raw parse tree before normalization."""
    print("\n" + "=" * 60)
    print("Example 2: Raw Parse Tree")
    print("=" * 60)

    runner = GrammarRunner()
    print(runner.parse(build_grammar(), "logical :: flag"))
    # Output: {'Decl': {'Type': 'logical', 'Var': 'flag'}}


def example_3_error_report() -> None:
    """Example 3: A malformed declaration reported with its position."""
    print("\n" + "=" * 60)
    print("Example 3: Error Report")
    print("=" * 60)

    runner = GrammarRunner()
    try:
        runner.parse(build_grammar(), "integer :: i\nreal x\n")
    except ParseFailedError as e:
        assert e.diagnostic is not None
        print(e.diagnostic.format_error())
    # Output:
    # error[PARSE_INCOMPLETE]: Unparsed input remains: 'real x\n'
    #   --> line 2, column 1
    #   ...


if __name__ == "__main__":
    example_1_parse_declarations()
    example_2_raw_tree()
    example_3_error_report()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
