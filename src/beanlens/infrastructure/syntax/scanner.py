"""String-literal-aware character scanning.

Pure functions over already-available text. They never raise on
well-typed input: no match is reported as "", -1 or False.

Quotes are `"` and `'`. A backslash escapes the next character inside
a literal, so an escaped quote does not terminate it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

QUOTES = frozenset({'"', "'"})

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())


def iter_code(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield (offset, char) for characters outside string literals.

    Quote characters themselves are not yielded.
    Scanning assumes `start` is outside any literal.

    Args:
        text: Text to scan
        start: Offset to start from

    Yields:
        Offset and character of every code character
    """
    quote: str | None = None
    escaped = False
    for index in range(max(start, 0), len(text)):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in QUOTES:
            quote = char
            continue
        yield index, char


def is_in_string_literal(text: str, offset: int) -> bool:
    """Check whether offset falls inside a string or char literal.

    An offset on the opening quote counts as inside, one on the
    closing quote as outside.

    Args:
        text: Text to inspect
        offset: Offset into text

    Returns:
        True if offset is inside a literal
    """
    if offset < 0 or offset >= len(text):
        return False
    quote: str | None = None
    escaped = False
    for index in range(offset + 1):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
                if index == offset:
                    return False
        elif char in QUOTES:
            quote = char
    return quote is not None


def find_matching_bracket(text: str, open_pos: int, open_char: str, close_char: str) -> int:
    """Find offset of the bracket closing the one at open_pos.

    Args:
        text: Text to scan
        open_pos: Offset of the opening bracket
        open_char: Opening bracket character
        close_char: Closing bracket character

    Returns:
        Offset of the matching close, -1 if open_pos is not open_char or no match exists
    """
    if open_pos < 0 or open_pos >= len(text) or text[open_pos] != open_char:
        return -1
    depth = 0
    for index, char in iter_code(text, open_pos):
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return index
    return -1


def find_outside_strings(text: str, char: str, start: int = 0) -> int:
    """Offset of the first char outside string literals, -1 if absent."""
    for index, current in iter_code(text, start):
        if current == char:
            return index
    return -1


def extract_between_parentheses(text: str, start: int = 0) -> str:
    """Text between the first opening parenthesis and its matching close.

    Parentheses inside string literals are ignored.

    Args:
        text: Text to scan
        start: Offset to start searching from

    Returns:
        Enclosed text, "" if there is no opening or it never closes
    """
    open_pos = find_outside_strings(text, "(", start)
    if open_pos == -1:
        return ""
    close_pos = find_matching_bracket(text, open_pos, "(", ")")
    if close_pos == -1:
        return ""
    return text[open_pos + 1 : close_pos]


def count_outside_strings(text: str, char: str) -> int:
    """Count occurrences of char outside string literals."""
    return sum(1 for _, current in iter_code(text) if current == char)


def paren_depth(text: str) -> int:
    """Running parenthesis depth at the end of text.

    Returns:
        Final depth (>= 0), or the first negative depth reached
        when a closer has no opener
    """
    depth = 0
    for _, char in iter_code(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return depth
    return depth


def are_parentheses_balanced(text: str) -> bool:
    """Every parenthesis outside literals is matched, none closes early."""
    return paren_depth(text) == 0


def split_generic_aware(text: str) -> list[str]:
    """Split a parameter list on top-level commas.

    Commas nested in `<...>` (generic arguments), parentheses
    (annotation arguments) or string literals never split.

    Args:
        text: Parameter list without the enclosing parentheses

    Returns:
        Stripped, non-empty parts in order
    """
    parts: list[str] = []
    angle = 0
    paren = 0
    last = 0
    for index, char in iter_code(text):
        if char == "<":
            angle += 1
        elif char == ">":
            angle = max(angle - 1, 0)
        elif char == "(":
            paren += 1
        elif char == ")":
            paren = max(paren - 1, 0)
        elif char == "," and angle == 0 and paren == 0:
            parts.append(text[last:index])
            last = index + 1
    parts.append(text[last:])
    return [part.strip() for part in parts if part.strip()]


def split_top_level(text: str, separator: str = ",") -> list[str]:
    """Split on separator outside literals and (), [], {} nesting.

    Used for annotation argument lists such as
    `value = {"a", "b"}, required = false`.

    Args:
        text: Text to split
        separator: Single separator character

    Returns:
        Stripped, non-empty parts in order
    """
    parts: list[str] = []
    depth = 0
    last = 0
    for index, char in iter_code(text):
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append(text[last:index])
            last = index + 1
    parts.append(text[last:])
    return [part.strip() for part in parts if part.strip()]


def find_top_level(text: str, chars: str, start: int = 0) -> int:
    """First offset of any of chars outside literals and bracket nesting.

    Generic angle brackets count as nesting too.

    Args:
        text: Text to scan
        chars: Characters to look for
        start: Offset to start from

    Returns:
        Offset of the first match, -1 if none
    """
    depth = 0
    angle = 0
    for index, char in iter_code(text, start):
        if depth == 0 and angle == 0 and char in chars:
            return index
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == "<":
            angle += 1
        elif char == ">":
            angle = max(angle - 1, 0)
    return -1
