"""Bean definition value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model.enums import AnnotationKind, DefinitionKind

if TYPE_CHECKING:
    from beanlens.domain.model.location import Position


@dataclass(frozen=True, slots=True)
class BeanDefinition:
    """Component that can satisfy a dependency.

    Attributes:
        name: Logical bean name (unique per resolver)
        type: Declared type (class name or factory return type)
        implementation_class: Fully qualified implementing class
        file_id: Identifier of the defining file
        position: Position of the class or method name
        definition_kind: CLASS or METHOD
        annotation_kind: Annotation that triggered the definition
        interfaces: Interface names the implementation satisfies
    """

    name: str
    type: str
    implementation_class: str
    file_id: str
    position: Position
    definition_kind: DefinitionKind
    annotation_kind: AnnotationKind
    interfaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("bean name must not be empty")
        if not self.type:
            raise ValueError(f"bean {self.name} must have a type")
        if not self.implementation_class:
            raise ValueError(f"bean {self.name} must have an implementation class")
        if self.file_id is None:
            raise TypeError("file_id must not be None")
        if self.position is None:
            raise TypeError("position must not be None")
        if not isinstance(self.definition_kind, DefinitionKind):
            raise TypeError(
                f"definition_kind must be DefinitionKind, got {type(self.definition_kind).__name__}"
            )
        if not isinstance(self.annotation_kind, AnnotationKind):
            raise TypeError(
                f"annotation_kind must be AnnotationKind, got {type(self.annotation_kind).__name__}"
            )
        if self.definition_kind is DefinitionKind.METHOD and self.interfaces:
            raise ValueError(f"factory bean {self.name} must not declare interfaces")

    @property
    def class_name(self) -> str:
        """Implementation class without package."""
        return self.implementation_class.rsplit(".", 1)[-1]
