"""Class record value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model._members import find_annotation, has_annotation

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.constructor import Constructor
    from beanlens.domain.model.enums import AnnotationKind
    from beanlens.domain.model.field import Field
    from beanlens.domain.model.location import Position, Range
    from beanlens.domain.model.method import Method


@dataclass(frozen=True, slots=True)
class ClassRecord:
    """Class recovered from a source file.

    Attributes:
        name: Simple class name
        fully_qualified_name: package.Outer.Name
        file_id: Identifier of the defining file
        position: Position of the class name
        range: Span from the first annotation to the closing brace
        package: Package name, None for the default package
        annotations: Class-level annotations
        fields: Fields in declaration order
        methods: Methods in declaration order
        constructors: Constructors in declaration order
        interfaces: Simple names from the implements clause
        superclass: Simple name from the extends clause
        imports: Raw import targets ("java.util.List", "static org.x.Y.z")
    """

    name: str
    fully_qualified_name: str
    file_id: str
    position: Position
    range: Range
    package: str | None = None
    annotations: tuple[Annotation, ...] = ()
    fields: tuple[Field, ...] = ()
    methods: tuple[Method, ...] = ()
    constructors: tuple[Constructor, ...] = ()
    interfaces: tuple[str, ...] = ()
    superclass: str | None = None
    imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if not self.fully_qualified_name.endswith(self.name):
            raise ValueError(
                f"fully_qualified_name {self.fully_qualified_name!r} must end with {self.name!r}"
            )
        if self.file_id is None:
            raise TypeError("file_id must not be None")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check whether class carries an annotation of kind."""
        return has_annotation(self.annotations, kind)

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Get first annotation of kind."""
        return find_annotation(self.annotations, kind)

    @property
    def stereotype(self) -> Annotation | None:
        """First component stereotype annotation, None if not a bean class."""
        for annotation in self.annotations:
            if annotation.kind.is_stereotype:
                return annotation
        return None

    @property
    def injectable_constructor(self) -> Constructor | None:
        """Constructor the container would use for injection.

        The marked constructor if exactly one carries the injection marker,
        otherwise the only constructor when there is exactly one.
        """
        marked = [c for c in self.constructors if c.has_injection_marker]
        if len(marked) == 1:
            return marked[0]
        if not marked and len(self.constructors) == 1:
            return self.constructors[0]
        return None
