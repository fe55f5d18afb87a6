"""Constructor value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model._members import find_annotation, has_annotation
from beanlens.domain.model.enums import Visibility

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.enums import AnnotationKind
    from beanlens.domain.model.location import Position, Range
    from beanlens.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class Constructor:
    """Class constructor.

    Attributes:
        parameters: Parameters in declaration order
        has_injection_marker: Annotated with @Autowired/@Inject
        position: Position of the constructor name
        range: Span from the first annotation to the end of the parameter list
        annotations: Attached annotations in source order
        visibility: Access modifier
    """

    parameters: tuple[Parameter, ...]
    has_injection_marker: bool
    position: Position
    range: Range
    annotations: tuple[Annotation, ...] = ()
    visibility: Visibility = Visibility.PUBLIC

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.parameters is None:
            raise TypeError("parameters must not be None")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check whether constructor carries an annotation of kind."""
        return has_annotation(self.annotations, kind)

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Get first annotation of kind."""
        return find_annotation(self.annotations, kind)
