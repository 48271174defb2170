"""Quickstart example for parsecomb.

This example demonstrates building a small grammar from primitives and
combinators, reading its parse tree, and reporting errors with the runner.

Note: Grammars here are built at module level for brevity. In an
application, build each grammar once and reuse it; parsers are immutable
and safe to share between threads.
"""

import logging

from parsecomb import (
    Forward,
    GrammarRunner,
    IncompleteParseError,
    ParseFailedError,
    bind_p,
    choice,
    comma,
    get_parse_tree,
    label,
    lexeme,
    maybe,
    natural,
    parens,
    regex,
    semi,
    sep_by,
    sequence,
    symbol,
    word,
)

# Example 1: A declaration grammar
print("=" * 50)
print("Example 1: Sequence, Label and Maybe")
print("=" * 50)

declaration = sequence([
    symbol("var"),
    label("Name", word),
    maybe(sequence([symbol("="), label("Value", natural)])),
    semi,
])

success, remaining, match = declaration("var res = 42;")
print(success, repr(remaining))
print(get_parse_tree(match))
# Output: {'Name': 'res', 'Value': '42'}

success, remaining, match = declaration("var res;")
print(get_parse_tree(match))
# Output: {'Name': 'res'}

# Example 2: Repeated labels collect into lists
print("\n" + "=" * 50)
print("Example 2: Separated Lists")
print("=" * 50)

variables = sep_by(comma, label("Var", word))
print(get_parse_tree(variables("u, v, w").match))
# Output: {'Var': ['u', 'v', 'w']}

print(get_parse_tree(sep_by(comma, word)("u, v, w").match))
# Output: ['u', 'v', 'w']

# Example 3: Recursive grammars
print("\n" + "=" * 50)
print("Example 3: Forward References")
print("=" * 50)

value = Forward("value")
value.define(choice(
    label("Num", lexeme(natural)),
    parens(sep_by(comma, value)),
))

print(get_parse_tree(value("(1, (2, 3))").match))
# Output: {'Num': ['1', ['2', '3']]}

# Example 4: Context-sensitive parsing with bind_p
print("\n" + "=" * 50)
print("Example 4: Monadic Composition")
print("=" * 50)


def counted_text(length):
    """Parser for exactly as many characters as the length prefix says."""
    return label("Data", regex(".{%d}" % int(length.text)))


length_prefixed = bind_p(natural, counted_text)
success, remaining, match = length_prefixed("5hello world")
print(get_parse_tree(match), repr(remaining))
# Output: {'Data': 'hello'} ' world'

# Example 5: Error reporting with the runner
print("\n" + "=" * 50)
print("Example 5: GrammarRunner")
print("=" * 50)

logging.basicConfig(level=logging.WARNING)
runner = GrammarRunner()

print(runner.parse(declaration, "var answer = 42;"))
# Output: {'Name': 'answer', 'Value': '42'}

try:
    runner.parse(declaration, "var x;\nlet y;")
except IncompleteParseError as e:
    print(e.diagnostic.format_error())
# Output:
# error[PARSE_INCOMPLETE]: Unparsed input remains: 'let y;'
#   --> line 2, column 1
#      1 | var x;
#      2 | let y;
#        | ^
#   = help: Extend the grammar or pass require_complete=False

try:
    runner.parse(declaration, "var = 1;")
except ParseFailedError as e:
    print(f"Rejected at offset {e.position}: {e}")
# Output: Rejected at offset 0: Input rejected by grammar at 'var = 1;'

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
