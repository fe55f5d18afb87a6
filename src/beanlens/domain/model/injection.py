"""Injection point value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from beanlens.domain.model.enums import InjectionKind

if TYPE_CHECKING:
    from beanlens.domain.model.bean import BeanDefinition
    from beanlens.domain.model.location import Position, Range
    from beanlens.domain.model.resolution import ResolutionResult


@dataclass(frozen=True, slots=True)
class InjectionPoint:
    """Dependency that should be supplied by a bean.

    Attributes:
        target_type: Declared type of the dependency
        kind: Injection mechanism
        target_name: Field or parameter name
        position: Position of the field or parameter name
        range: Span of the field or parameter name
        file_id: Identifier of the declaring file
        owner: Fully qualified name of the declaring class
        member: Enclosing constructor/method name, None for fields
        resolution: Set once resolved against a resolver
    """

    target_type: str
    kind: InjectionKind
    target_name: str
    position: Position
    range: Range
    file_id: str = ""
    owner: str = ""
    member: str | None = None
    resolution: ResolutionResult | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target_type:
            raise ValueError("target_type must not be empty")
        if not isinstance(self.kind, InjectionKind):
            raise TypeError(f"kind must be InjectionKind, got {type(self.kind).__name__}")
        if not self.target_name:
            raise ValueError("target_name must not be empty")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")

    @property
    def resolved(self) -> BeanDefinition | None:
        """Uniquely resolved bean, None if unresolved or ambiguous."""
        return self.resolution.resolved if self.resolution is not None else None

    @property
    def candidates(self) -> tuple[BeanDefinition, ...]:
        """Candidate beans, empty until resolved."""
        return self.resolution.candidates if self.resolution is not None else ()

    def with_resolution(self, resolution: ResolutionResult) -> InjectionPoint:
        """Copy of this point carrying a resolution."""
        if resolution is None:
            raise TypeError("resolution must not be None")
        return replace(self, resolution=resolution)
