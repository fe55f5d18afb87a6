"""Method value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model._members import find_annotation, has_annotation
from beanlens.domain.model.enums import AnnotationKind, Visibility

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.location import Position, Range
    from beanlens.domain.model.parameter import Parameter


def is_setter(name: str, parameter_count: int) -> bool:
    """Check setter naming convention.

    `set` followed by an uppercase letter, at least one parameter.

    Args:
        name: Method name
        parameter_count: Number of parameters

    Returns:
        True if method looks like a setter
    """
    return len(name) > 3 and name.startswith("set") and name[3].isupper() and parameter_count > 0


@dataclass(frozen=True, slots=True)
class Method:
    """Class method.

    Attributes:
        name: Method name
        return_type: Declared return type as written
        parameters: Parameters in declaration order
        position: Position of the method name
        range: Span from the first annotation to the end of the parameter list
        annotations: Attached annotations in source order
        visibility: Access modifier
        is_static: Declared static
    """

    name: str
    return_type: str
    parameters: tuple[Parameter, ...]
    position: Position
    range: Range
    annotations: tuple[Annotation, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if not self.return_type:
            raise ValueError(f"method {self.name} must have a return type")
        if self.parameters is None:
            raise TypeError("parameters must not be None")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    @property
    def is_setter(self) -> bool:
        """Setter by naming convention."""
        return is_setter(self.name, len(self.parameters))

    @property
    def is_bean_factory(self) -> bool:
        """Annotated with @Bean."""
        return self.has_annotation(AnnotationKind.BEAN)

    @property
    def has_injection_marker(self) -> bool:
        """Annotated with @Autowired/@Inject."""
        return self.has_annotation(AnnotationKind.AUTOWIRED)

    def has_annotation(self, kind: AnnotationKind) -> bool:
        """Check whether method carries an annotation of kind."""
        return has_annotation(self.annotations, kind)

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Get first annotation of kind."""
        return find_annotation(self.annotations, kind)
