"""Field value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model._members import find_annotation, has_annotation
from beanlens.domain.model.enums import AnnotationKind, Visibility

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.location import Position, Range


@dataclass(frozen=True, slots=True)
class Field:
    """Class field.

    Attributes:
        name: Field name
        type: Declared type as written
        visibility: Access modifier
        is_final: Declared final
        is_static: Declared static
        has_initializer: Declaration assigns a value (`= ...`)
        annotations: Attached annotations in source order
        position: Position of the field name
        range: Span of the field name
    """

    name: str
    type: str
    visibility: Visibility
    position: Position
    range: Range
    is_final: bool = False
    is_static: bool = False
    has_initializer: bool = False
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if not self.type:
            raise ValueError(f"field {self.name} must have a type")
        if not isinstance(self.visibility, Visibility):
            raise TypeError(f"visibility must be Visibility, got {type(self.visibility).__name__}")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check whether field carries an annotation of kind."""
        return has_annotation(self.annotations, kind)

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Get first annotation of kind."""
        return find_annotation(self.annotations, kind)

    @property
    def has_injection_marker(self) -> bool:
        """Field carries @Autowired/@Inject."""
        return self.has_annotation(AnnotationKind.AUTOWIRED)
