"""Declaration parameter value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.location import Position, Range


@dataclass(frozen=True, slots=True)
class Parameter:
    """Constructor or method parameter.

    Attributes:
        name: Parameter name
        type: Declared type as written (generic syntax preserved)
        position: Position of the parameter name
        range: Span of the parameter name
    """

    name: str
    type: str
    position: Position
    range: Range

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
        if not self.type:
            raise ValueError(f"parameter {self.name} must have a type")
        if self.position is None:
            raise TypeError("position must not be None")
        if self.range is None:
            raise TypeError("range must not be None")
