"""Parameter list parsing and position recovery."""

from __future__ import annotations

import re

from beanlens.domain.model.location import Range
from beanlens.domain.model.parameter import Parameter
from beanlens.infrastructure.extractors.annotation_parser import leading_markers, offset_to_position
from beanlens.infrastructure.extractors.declaration import is_identifier, split_tokens
from beanlens.infrastructure.syntax.scanner import (
    extract_between_parentheses,
    split_generic_aware,
)

# Characters that may surround a parameter name
BOUNDARY = frozenset(" \t\r\n(),;")

_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


def strip_parameter_prefix(text: str) -> str:
    """Drop leading annotations and `final` from one parameter."""
    rest = text.strip()
    while True:
        markers, offset = leading_markers(rest)
        if markers:
            rest = rest[offset:].strip()
            continue
        if rest.startswith("final") and len(rest) > 5 and rest[5].isspace():
            rest = rest[5:].strip()
            continue
        return rest


def parse_parameter(text: str) -> tuple[str, str] | None:
    """Split one parameter into (type, name).

    The trailing token is the name, everything before it (joined by
    single spaces) is the type. `String args[]` moves the brackets to
    the type.

    Args:
        text: One parameter as written

    Returns:
        (type, name), or None when fewer than two tokens remain or the
        name is not an identifier
    """
    tokens = split_tokens(strip_parameter_prefix(text))
    if len(tokens) < 2:
        return None
    name = tokens[-1]
    type_ = _LINE_BREAK_RE.sub(" ", " ".join(tokens[:-1]))
    while name.endswith("[]"):
        name = name[:-2].rstrip()
        type_ += "[]"
    if "<" in name or ">" in name or not is_identifier(name):
        return None
    return type_, name


def locate_token(text: str, token: str, start: int = 0) -> int:
    """Offset of token delimited by whitespace or `(),;`.

    Args:
        text: Text to search
        token: Token to find
        start: Offset to search from

    Returns:
        Offset of the first bounded occurrence, -1 if none
    """
    index = text.find(token, start)
    while index != -1:
        before = text[index - 1] if index > 0 else " "
        after_index = index + len(token)
        after = text[after_index] if after_index < len(text) else " "
        if (before in BOUNDARY or before in ".>]") and (after in BOUNDARY or after in "[="):
            return index
        index = text.find(token, index + 1)
    return -1


def parse_parameters(text: str, open_offset: int, line: int) -> tuple[Parameter, ...]:
    """Parse the parameter list opened at open_offset.

    Positions are recovered by a token-boundary search through the
    declaration text, each search starting after the previous
    parameter. A name that cannot be found falls back to the position
    of the opening parenthesis.

    Args:
        text: Declaration text (code lines joined with newlines)
        open_offset: Offset of the opening parenthesis in text
        line: Line of the first character of text

    Returns:
        Parameters in declaration order
    """
    inner = extract_between_parentheses(text, open_offset)
    if not inner.strip():
        return ()
    fallback = offset_to_position(text, open_offset, line, 0)
    cursor = open_offset + 1
    parameters: list[Parameter] = []
    for part in split_generic_aware(inner):
        parsed = parse_parameter(part)
        if parsed is None:
            continue
        type_, name = parsed
        part_offset = text.find(part, cursor)
        search_from = part_offset if part_offset != -1 else cursor
        found = _last_token(text, name, search_from, search_from + len(part))
        if found == -1:
            position = fallback
            span = Range.at(position)
        else:
            position = offset_to_position(text, found, line, 0)
            end = offset_to_position(text, found + len(name), line, 0)
            span = Range(position, end)
            cursor = found + len(name)
        parameters.append(Parameter(name=name, type=type_, position=position, range=span))
    return tuple(parameters)


def _last_token(text: str, token: str, start: int, end: int) -> int:
    """Last bounded occurrence of token within text[start:end], -1 if none."""
    found = -1
    index = locate_token(text, token, start)
    while index != -1 and index + len(token) <= end:
        found = index
        index = locate_token(text, token, index + 1)
    return found

