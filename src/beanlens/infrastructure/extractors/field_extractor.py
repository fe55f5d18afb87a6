"""Field extractor."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from beanlens.domain.model.field import Field
from beanlens.domain.model.location import Range
from beanlens.infrastructure.extractors.annotation_parser import offset_to_position
from beanlens.infrastructure.extractors.declaration import MAX_DECLARATION_SPAN
from beanlens.infrastructure.extractors.parameter_parser import locate_token
from beanlens.infrastructure.syntax.scanner import find_top_level, split_generic_aware

if TYPE_CHECKING:
    from beanlens.infrastructure.extractors.declaration import Header
    from beanlens.infrastructure.extractors.site import DeclarationSite
    from beanlens.infrastructure.extractors.source import SourceText

_DECLARATOR_RE = re.compile(r"^([A-Za-z_$][\w$]*)\s*((?:\[\s*\]\s*)*)(=)?")
_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


class FieldExtractor:
    """Extracts field records from a located declaration.

    `int a, b = 1;` yields one Field per declarator.
    Stateless extractor - no state between extract() calls.
    """

    def extract(
        self,
        source: SourceText,
        site: DeclarationSite,
        header: Header,
        last_line: int | None = None,
    ) -> tuple[tuple[Field, ...], int]:
        """Extract fields at site.

        Args:
            source: Source buffer
            site: Located declaration
            header: Header classified as FIELD
            last_line: Last line of the enclosing class body

        Returns:
            (Fields in declarator order, line of the terminating ';')

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If the header has no type or the statement never ends
        """
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")
        if site is None:
            raise TypeError("site must not be None")
        if header is None or header.type is None:
            raise ValueError("field header must carry a type")

        text, end_line, terminator = self._statement(source, site, header, last_line)
        type_start = locate_token(text, header.type, site.column)
        if type_start == -1 or type_start > header.delimiter:
            raise ValueError(f"type {header.type!r} not found in declaration")
        cursor = type_start + len(header.type)
        base_type = _LINE_BREAK_RE.sub(" ", header.type)
        annotations = (*site.annotations, *header.annotations)

        fields: list[Field] = []
        for part in split_generic_aware(text[cursor:terminator]):
            declarator = _DECLARATOR_RE.match(part)
            if declarator is None:
                continue
            name = declarator.group(1)
            dims = "[]" * declarator.group(2).count("[")
            found = locate_token(text, name, cursor)
            if found == -1:
                position = site.position
                span = Range.at(position)
            else:
                position = offset_to_position(text, found, site.line, 0)
                span = Range(position, offset_to_position(text, found + len(name), site.line, 0))
                cursor = found + len(name)
            fields.append(
                Field(
                    name=name,
                    type=base_type + dims,
                    visibility=header.visibility,
                    position=position,
                    range=span,
                    is_final=header.is_final,
                    is_static=header.is_static,
                    has_initializer=declarator.group(3) is not None,
                    annotations=annotations,
                )
            )
        return tuple(fields), end_line

    def _statement(
        self,
        source: SourceText,
        site: DeclarationSite,
        header: Header,
        last_line: int | None,
    ) -> tuple[str, int, int]:
        """Accumulate lines until the terminating top-level ';'."""
        limit = min(
            len(source) - 1 if last_line is None else last_line,
            site.line + MAX_DECLARATION_SPAN,
        )
        text = header.text
        end_line = site.line + text.count("\n")
        terminator = find_top_level(text, ";", site.column)
        while terminator == -1:
            if end_line >= limit:
                raise ValueError("unterminated field declaration")
            end_line += 1
            text = text + "\n" + source.code[end_line]
            terminator = find_top_level(text, ";", site.column)
        return text, site.line + text.count("\n", 0, terminator), terminator
