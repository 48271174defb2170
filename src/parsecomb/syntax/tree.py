"""Parse-tree builder.

Turns the raw match tree produced by a grammar into plain Python data:
labeled matches become dict entries, unlabeled matches next to labeled ones
are dropped, and runs of unlabeled matches become lists.

Building rules:
    - None (empty match) -> None
    - Leaf(text) -> text
    - Labeled(name, value) -> {name: build(value)}, or None if value builds
      to nothing
    - Sequence(items) -> build every item and drop the empty ones
      (None, [], {}). If any result left is a dict, the non-dict results are
      discarded and the dicts merged in order. Otherwise the list of results.
      Nothing left -> None.

Merging:
    Keys keep first-seen order. The first time a key repeats at the same
    level its value becomes [first, second]; later repeats append. So
    sep_by(comma, label("Var", word)) over "u,v,w" builds
    {"Var": ["u", "v", "w"]}.

The builder never mutates its input and accepts trees in which every
optional branch came back empty.

Python 3.13+. Zero external dependencies.
"""

from parsecomb.syntax.matches import Labeled, Leaf, MatchValue, Sequence

__all__ = ["ParseTree", "get_parse_tree", "leaves"]

type ParseTree = str | list[ParseTree] | dict[str, ParseTree]


def _is_empty(tree: ParseTree | None) -> bool:
    return tree is None or (isinstance(tree, (list, dict)) and not tree)


def _merge(mappings: list[dict[str, ParseTree]]) -> dict[str, ParseTree]:
    merged: dict[str, ParseTree] = {}
    collisions: dict[str, list[ParseTree]] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            if key in collisions:
                collisions[key].append(value)
            elif key in merged:
                collisions[key] = [merged[key], value]
                merged[key] = collisions[key]
            else:
                merged[key] = value
    return merged


def _build(node: MatchValue | None) -> ParseTree | None:
    match node:
        case None:
            return None
        case Leaf(text=text):
            return text
        case Labeled(name=name, value=value):
            built = _build(value)
            if _is_empty(built):
                return None
            return {name: built}  # type: ignore[dict-item]
        case Sequence(items=items):
            built_items = [b for b in (_build(item) for item in items) if not _is_empty(b)]
            if not built_items:
                return None
            mappings = [b for b in built_items if isinstance(b, dict)]
            if mappings:
                return _merge(mappings)
            return built_items  # type: ignore[return-value]
    msg = f"Not a match value: {type(node).__name__}"
    raise TypeError(msg)


def get_parse_tree(match: MatchValue | None) -> ParseTree | None:
    """Build the parse tree for a raw match.

    Args:
        match: Match of a successful parse (ParseResult.match)

    Returns:
        str, list or dict per the building rules; None for an empty match

    Raises:
        TypeError: If match contains something other than match nodes

    Example:
        >>> grammar = sequence([
        ...     symbol("var"),
        ...     label("Name", word),
        ...     maybe(sequence([symbol("="), label("Value", natural)])),
        ...     semi,
        ... ])
        >>> get_parse_tree(grammar("var res = 42;").match)
        {'Name': 'res', 'Value': '42'}
        >>> get_parse_tree(grammar("var res;").match)
        {'Name': 'res'}
    """
    return _build(match)


def leaves(match: MatchValue | None) -> list[str]:
    """Flatten a raw match into the matched texts, in input order.

    Labels are ignored and empty matches contribute nothing.

    Example:
        >>> leaves(sep_by(comma, word)("a, b, c").match)
        ['a', 'b', 'c']
    """
    texts: list[str] = []
    stack: list[MatchValue | None] = [match]
    while stack:
        node = stack.pop()
        match node:
            case Leaf(text=text):
                texts.append(text)
            case Labeled(value=value):
                stack.append(value)
            case Sequence(items=items):
                stack.extend(reversed(items))
    return texts
