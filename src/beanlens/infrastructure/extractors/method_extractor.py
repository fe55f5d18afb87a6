"""Method extractor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanlens.domain.model.location import Range
from beanlens.domain.model.method import Method
from beanlens.infrastructure.extractors.annotation_parser import offset_to_position
from beanlens.infrastructure.extractors.declaration import extend_to_close
from beanlens.infrastructure.extractors.parameter_parser import locate_token, parse_parameters
from beanlens.infrastructure.syntax.scanner import find_matching_bracket

if TYPE_CHECKING:
    from beanlens.domain.model.location import Position
    from beanlens.infrastructure.extractors.declaration import Header
    from beanlens.infrastructure.extractors.site import DeclarationSite
    from beanlens.infrastructure.extractors.source import SourceText


def name_position(text: str, name: str, site: DeclarationSite, delimiter: int) -> Position:
    """Position of the last bounded occurrence of name before delimiter.

    Falls back to the declaration start.
    """
    found = -1
    index = locate_token(text, name, site.column)
    while index != -1 and index < delimiter:
        found = index
        index = locate_token(text, name, index + 1)
    if found == -1:
        return site.position
    return offset_to_position(text, found, site.line, 0)


def declaration_range(text: str, site: DeclarationSite, delimiter: int) -> Range:
    """From the first annotation to the end of the parameter list."""
    close = find_matching_bracket(text, delimiter, "(", ")")
    end = offset_to_position(text, close + 1 if close != -1 else delimiter, site.line, 0)
    return Range(site.start, end)


class MethodExtractor:
    """Extracts a method record from a located declaration.

    Stateless extractor - no state between extract() calls.
    """

    def extract(
        self,
        source: SourceText,
        site: DeclarationSite,
        header: Header,
        last_line: int | None = None,
    ) -> tuple[Method, int]:
        """Extract method at site.

        Args:
            source: Source buffer
            site: Located declaration
            header: Header classified as METHOD
            last_line: Last line of the enclosing class body

        Returns:
            (Method, last line of the parameter list)

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If the header has no name or the parameter list never closes
        """
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")
        if site is None:
            raise TypeError("site must not be None")
        if header is None or header.name is None or header.type is None:
            raise ValueError("method header must carry a name and return type")

        text, end_line = extend_to_close(source, header, site.line, last_line)
        method = Method(
            name=header.name,
            return_type=header.type,
            parameters=parse_parameters(text, header.delimiter, site.line),
            position=name_position(text, header.name, site, header.delimiter),
            range=declaration_range(text, site, header.delimiter),
            annotations=(*site.annotations, *header.annotations),
            visibility=header.visibility,
            is_static=header.is_static,
        )
        return method, end_line
