"""Annotation marker parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from beanlens.domain.model.annotation import Annotation
from beanlens.domain.model.enums import AnnotationKind
from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.context import DEFAULT_CONTEXT, AnalysisContext
from beanlens.infrastructure.syntax.scanner import find_matching_bracket, iter_code, split_top_level

_MARKER_RE = re.compile(
    r"@\s*(?!interface\b)([A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)"
)
_NAMED_ARG_RE = re.compile(r"^([A-Za-z_$][\w$]*)\s*=(?!=)\s*(.*)$", re.DOTALL)
_STRING_RE = re.compile(r'^"((?:[^"\\]|\\.)*)"$', re.DOTALL)


@dataclass(frozen=True, slots=True)
class Marker:
    """One `@Name(args)` occurrence in a text buffer.

    Attributes:
        name: Annotation name, whitespace removed
        offset: Offset of '@'
        end: Offset after the marker (after ')' when arguments are present)
        arguments: Raw text between the parentheses, None without arguments
        complete: False when the argument list never closes
    """

    name: str
    offset: int
    end: int
    arguments: str | None = None
    complete: bool = True


def scan_marker(text: str, offset: int) -> Marker | None:
    """Read the annotation marker starting at offset.

    Args:
        text: Text buffer
        offset: Offset of an '@'

    Returns:
        Marker, or None when no annotation name follows
    """
    match = _MARKER_RE.match(text, offset)
    if match is None:
        return None
    name = re.sub(r"\s+", "", match.group(1))
    after = match.end()
    while after < len(text) and text[after] in " \t\r\n":
        after += 1
    if after < len(text) and text[after] == "(":
        close = find_matching_bracket(text, after, "(", ")")
        if close == -1:
            return Marker(name, offset, len(text), text[after + 1 :], complete=False)
        return Marker(name, offset, close + 1, text[after + 1 : close])
    return Marker(name, offset, match.end())


def leading_markers(text: str, start: int = 0) -> tuple[list[Marker], int]:
    """Consecutive markers at the start of text.

    Args:
        text: Text buffer (may span lines joined with newlines)
        start: Offset to start from

    Returns:
        (markers, offset of the first non-annotation character).
        When the last marker is incomplete the offset is len(text).
    """
    markers: list[Marker] = []
    index = start
    while True:
        while index < len(text) and text[index].isspace():
            index += 1
        if index >= len(text) or text[index] != "@":
            return markers, index
        marker = scan_marker(text, index)
        if marker is None:
            return markers, index
        markers.append(marker)
        if not marker.complete:
            return markers, len(text)
        index = marker.end


def find_markers(text: str) -> list[Marker]:
    """Every top-level marker outside string literals, in order.

    Markers nested in another marker's arguments are not reported.
    """
    markers: list[Marker] = []
    resume = 0
    for index, char in iter_code(text):
        if index < resume or char != "@":
            continue
        marker = scan_marker(text, index)
        if marker is None:
            continue
        markers.append(marker)
        resume = marker.end
    return markers


def parse_arguments(arguments: str | None) -> dict[str, str]:
    """Split an argument list into an ordered name -> value mapping.

    `("x")` becomes {"value": "x"}; `(name = "x", lazy = true)` keeps
    both entries. String literals are unquoted, anything else is kept
    verbatim.

    Args:
        arguments: Raw text between the parentheses

    Returns:
        Ordered mapping, empty for no arguments
    """
    result: dict[str, str] = {}
    if not arguments or not arguments.strip():
        return result
    for part in split_top_level(arguments):
        named = _NAMED_ARG_RE.match(part)
        if named is not None:
            result[named.group(1)] = _literal(named.group(2))
        else:
            result.setdefault("value", _literal(part))
    return result


def _literal(raw: str) -> str:
    text = " ".join(raw.split())
    string = _STRING_RE.match(raw.strip())
    if string is not None:
        return string.group(1).replace('\\"', '"')
    return text


def offset_to_position(text: str, offset: int, line: int, column_offset: int) -> Position:
    """Convert an offset in a (possibly multi-line) buffer to a Position.

    Args:
        text: Buffer whose first character sits at (line, column_offset)
        offset: Offset into text
        line: Line of the buffer start
        column_offset: Column of the buffer start

    Returns:
        Position of offset
    """
    newlines = text.count("\n", 0, offset)
    if newlines == 0:
        return Position(line, column_offset + offset)
    return Position(line + newlines, offset - text.rfind("\n", 0, offset) - 1)


def to_annotation(
    marker: Marker,
    text: str,
    line: int,
    column_offset: int = 0,
    context: AnalysisContext = DEFAULT_CONTEXT,
) -> Annotation:
    """Build an Annotation from a marker found in text."""
    return Annotation(
        name=marker.name,
        kind=context.classify(marker.name),
        position=offset_to_position(text, marker.offset, line, column_offset),
        arguments=parse_arguments(marker.arguments),
    )


def parse_annotations(
    text: str,
    line: int = 0,
    column_offset: int = 0,
    context: AnalysisContext = DEFAULT_CONTEXT,
) -> tuple[Annotation, ...]:
    """Extract every annotation in text.

    Args:
        text: Source text, comments already blanked
        line: Line of the first character of text
        column_offset: Column of the first character of text
        context: Analysis context with the annotation catalog

    Returns:
        Annotations in source order, unknown names kept as OTHER
    """
    if text is None:
        raise TypeError("text must not be None")
    return tuple(
        to_annotation(marker, text, line, column_offset, context) for marker in find_markers(text)
    )


def classify(name: str, context: AnalysisContext = DEFAULT_CONTEXT) -> AnnotationKind:
    """Kind of an annotation name (simple or fully qualified)."""
    return context.classify(name.lstrip("@"))
