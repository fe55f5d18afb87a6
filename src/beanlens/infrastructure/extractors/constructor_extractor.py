"""Constructor extractor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beanlens.domain.model.constructor import Constructor
from beanlens.domain.model.enums import AnnotationKind
from beanlens.infrastructure.extractors.declaration import extend_to_close
from beanlens.infrastructure.extractors.method_extractor import declaration_range, name_position
from beanlens.infrastructure.extractors.parameter_parser import parse_parameters

if TYPE_CHECKING:
    from beanlens.infrastructure.extractors.declaration import Header
    from beanlens.infrastructure.extractors.site import DeclarationSite
    from beanlens.infrastructure.extractors.source import SourceText


class ConstructorExtractor:
    """Extracts a constructor record from a located declaration.

    Stateless extractor - no state between extract() calls.
    """

    def extract(
        self,
        source: SourceText,
        site: DeclarationSite,
        header: Header,
        last_line: int | None = None,
    ) -> tuple[Constructor, int]:
        """Extract constructor at site.

        The injection marker is read from the site's annotations, which
        include every annotation line directly above the declaration.

        Args:
            source: Source buffer
            site: Located declaration
            header: Header classified as CONSTRUCTOR
            last_line: Last line of the enclosing class body

        Returns:
            (Constructor, last line of the parameter list)

        Raises:
            TypeError: If required parameters are None (FAIL-FIRST)
            ValueError: If the parameter list never closes
        """
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")
        if site is None:
            raise TypeError("site must not be None")
        if header is None or header.name is None:
            raise ValueError("constructor header must carry the class name")

        text, end_line = extend_to_close(source, header, site.line, last_line)
        annotations = (*site.annotations, *header.annotations)
        constructor = Constructor(
            parameters=parse_parameters(text, header.delimiter, site.line),
            has_injection_marker=any(a.kind is AnnotationKind.AUTOWIRED for a in annotations),
            position=name_position(text, header.name, site, header.delimiter),
            range=declaration_range(text, site, header.delimiter),
            annotations=annotations,
            visibility=header.visibility,
        )
        return constructor, end_line
