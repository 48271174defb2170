"""Position utilities for error reporting.

Parsers never track positions; they only pass the remaining suffix along.
When a parse stops, the position is recovered from the lengths of the
source and the remaining input. These helpers turn that offset into
line/column numbers and a source excerpt for diagnostics.

Only \\n is treated as a line delimiter, so CRLF sources work; CR-only
line endings produce wrong line numbers.
"""

from parsecomb.constants import DEFAULT_CONTEXT_LINES

__all__ = ["consumed_offset", "format_context", "line_col"]


def consumed_offset(source: str, remaining: str) -> int:
    """Get the character offset at which ``remaining`` starts in ``source``.

    Args:
        source: Complete input
        remaining: Input left after parsing (a suffix of source)

    Returns:
        Number of characters consumed

    Raises:
        ValueError: If remaining is not a suffix of source

    Example:
        >>> consumed_offset("var x = 1;", "= 1;")
        6
    """
    if not source.endswith(remaining):
        msg = "remaining input is not a suffix of the source"
        raise ValueError(msg)
    return len(source) - len(remaining)


def line_col(source: str, pos: int) -> tuple[int, int]:
    """Compute 1-based line and column for a character offset.

    Args:
        source: Complete input
        pos: Character offset (clamped to the source length)

    Returns:
        (line, column) tuple (1-indexed, like text editors)

    Raises:
        ValueError: If pos is negative

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_col(source, 0)
        (1, 1)
        >>> line_col(source, 8)  # Middle of line2
        (2, 3)
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    # O(1) memory: count in range instead of creating substring
    line = source.count("\n", 0, pos) + 1
    last_newline = source.rfind("\n", 0, pos)
    col = pos - last_newline if last_newline >= 0 else pos + 1
    return (line, col)


def format_context(source: str, pos: int, context_lines: int = DEFAULT_CONTEXT_LINES) -> str:
    """Render source lines around ``pos`` with a caret under it.

    Example:
        >>> print(format_context("a = 1\\nb = ?\\nc = 3", 10))
           1 | a = 1
           2 | b = ?
             |     ^
           3 | c = 3
    """
    line, col = line_col(source, pos)
    lines = source.split("\n")

    start_line = max(1, line - context_lines)
    end_line = min(len(lines), line + context_lines)

    result_lines: list[str] = []
    for i in range(start_line, end_line + 1):
        line_num_str = f"{i:4} | "
        result_lines.append(line_num_str + lines[i - 1])
        if i == line:
            result_lines.append(" " * (len(line_num_str) - 2) + "| " + " " * (col - 1) + "^")

    return "\n".join(result_lines)
