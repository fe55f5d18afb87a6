"""Declaration site: where a declaration starts and what annotates it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model._members import find_annotation, has_annotation
from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.annotation_parser import (
    leading_markers,
    offset_to_position,
    to_annotation,
)
from beanlens.infrastructure.extractors.context import DEFAULT_CONTEXT, AnalysisContext
from beanlens.infrastructure.syntax.scanner import paren_depth

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.enums import AnnotationKind
    from beanlens.infrastructure.extractors.source import SourceText

# Max lines a single annotation argument list may span
MAX_ANNOTATION_SPAN = 30


@dataclass(frozen=True, slots=True)
class DeclarationSite:
    """A located declaration together with its annotations.

    Computed once by the line scan, then handed to extractors so no
    caller repeats the backward annotation search.

    Attributes:
        line: Line where the declaration text starts
        column: Column of the declaration text (after inline annotations)
        first_line: Line of the first annotation, == line without annotations
        first_column: Column of the first annotation
        annotations: Preceding and inline annotations in source order
    """

    line: int
    column: int
    first_line: int
    first_column: int
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0 or self.column < 0:
            raise ValueError(f"invalid declaration start {self.line}:{self.column}")
        if (self.first_line, self.first_column) > (self.line, self.column):
            raise ValueError("first annotation must not follow the declaration")

    @property
    def position(self) -> Position:
        """Position of the declaration text."""
        return Position(self.line, self.column)

    @property
    def start(self) -> Position:
        """Position of the first annotation or the declaration."""
        return Position(self.first_line, self.first_column)

    def has(self, kind: AnnotationKind) -> bool:
        """Site carries an annotation of kind."""
        return has_annotation(self.annotations, kind)

    def find(self, kind: AnnotationKind) -> Annotation | None:
        """First annotation of kind."""
        return find_annotation(self.annotations, kind)


def _chunk_start(source: SourceText, end: int) -> int:
    """First line of the annotation chunk ending at `end`.

    A line that closes more parentheses than it opens continues an
    annotation argument list opened on an earlier `@` line.
    """
    if paren_depth(source.code[end]) >= 0:
        return end
    for start in range(end - 1, max(end - MAX_ANNOTATION_SPAN, -1), -1):
        if not source.code[start].lstrip().startswith("@"):
            continue
        if paren_depth(source.join_code(start, end)) == 0:
            return start
    return end


def annotation_chunk_end(source: SourceText, line: int) -> tuple[int, int] | None:
    """End of the annotation-only chunk starting at line.

    Args:
        source: Source buffer
        line: Line starting with '@'

    Returns:
        (last line, column after the last annotation), or None when line
        does not start an annotation
    """
    last = min(line + MAX_ANNOTATION_SPAN, len(source) - 1)
    for end in range(line, last + 1):
        chunk = source.join_code(line, end)
        markers, offset = leading_markers(chunk)
        if not markers:
            return None
        if markers[-1].complete:
            position = offset_to_position(chunk, markers[-1].end, line, 0)
            return position.line, position.column
    return None


def locate_site(
    source: SourceText,
    line: int,
    context: AnalysisContext = DEFAULT_CONTEXT,
) -> DeclarationSite:
    """Locate the declaration on line and collect its annotations.

    Inline annotations at the start of the line are collected first,
    then preceding lines are scanned backward while they hold nothing
    but annotations. Blank and comment-only lines are skipped.
    Argument lists spanning several lines are rejoined.

    Args:
        source: Source buffer
        line: Line of the declaration
        context: Analysis context with the annotation catalog

    Returns:
        Declaration site
    """
    chunk_start = _chunk_start(source, line)
    chunk = source.join_code(chunk_start, line)
    markers, end = leading_markers(chunk)
    if not markers and chunk_start != line:
        chunk_start = line
        chunk = source.code[line]
        markers, end = leading_markers(chunk)
    inline = [to_annotation(m, chunk, chunk_start, 0, context) for m in markers]
    declaration = offset_to_position(chunk, min(end, len(chunk)), chunk_start, 0)
    if declaration.line != line:
        declaration = Position(line, len(source.code[line]) - len(source.code[line].lstrip()))

    preceding: list[Annotation] = []
    first = inline[0].position if inline else declaration
    index = chunk_start - 1
    while index >= 0:
        if source.is_blank(index):
            index -= 1
            continue
        start = _chunk_start(source, index)
        text = source.join_code(start, index)
        found, offset = leading_markers(text)
        if not found or text[offset:].strip():
            break
        annotations = [to_annotation(m, text, start, 0, context) for m in found]
        preceding[:0] = annotations
        first = annotations[0].position
        index = start - 1

    return DeclarationSite(
        line=declaration.line,
        column=declaration.column,
        first_line=first.line,
        first_column=first.column,
        annotations=(*preceding, *inline),
    )


def locate_inline_site(
    source: SourceText,
    line: int,
    column: int,
    context: AnalysisContext = DEFAULT_CONTEXT,
) -> DeclarationSite | None:
    """Locate a declaration starting mid-line, after column.

    Used for members written on a class's opening brace line. Only
    annotations between column and the declaration text are collected.

    Args:
        source: Source buffer
        line: Line of the declaration
        column: Column where the search starts
        context: Analysis context with the annotation catalog

    Returns:
        Declaration site, None if nothing but annotations or a closing
        brace follows column
    """
    text = source.code[line]
    markers, end = leading_markers(text, column)
    rest = text[end:].strip()
    if not rest or rest.startswith("}"):
        return None
    annotations = tuple(to_annotation(m, text, line, 0, context) for m in markers)
    first = annotations[0].position.column if annotations else end
    return DeclarationSite(
        line=line,
        column=end,
        first_line=line,
        first_column=first,
        annotations=annotations,
    )
