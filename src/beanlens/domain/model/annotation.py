"""Annotation value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from beanlens.domain.model.enums import AnnotationKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from beanlens.domain.model.location import Position

# Argument keys that carry an explicit bean name
NAME_KEYS = ("value", "name")


@dataclass(frozen=True, slots=True)
class Annotation:
    """Annotation attached to a declaration.

    Attributes:
        name: Annotation name as written, possibly qualified (e.g. "org.x.Service")
        kind: Classified kind
        position: Position of the '@' marker
        arguments: Ordered argument name -> literal value.
            A single unnamed argument is stored under "value".
            String literals are unquoted, other expressions kept verbatim.
    """

    name: str
    kind: AnnotationKind
    position: Position
    arguments: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("annotation name must not be empty")
        if self.name.startswith("@"):
            raise ValueError(f"annotation name must not include '@': {self.name}")
        if not isinstance(self.kind, AnnotationKind):
            raise TypeError(f"kind must be AnnotationKind, got {type(self.kind).__name__}")
        if self.position is None:
            raise TypeError("position must not be None")
        # Freeze mutable mappings
        if not isinstance(self.arguments, MappingProxyType):
            object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))

    @property
    def simple_name(self) -> str:
        """Name without package qualifier."""
        return self.name.rsplit(".", 1)[-1]

    def get(self, key: str) -> str | None:
        """Get argument value by name."""
        return self.arguments.get(key)

    @property
    def explicit_name(self) -> str | None:
        """Explicit bean name from value/name argument.

        Array values ({"a", "b"}) yield their first element.
        """
        for key in NAME_KEYS:
            raw = self.arguments.get(key)
            if raw is None:
                continue
            value = _first_array_element(raw).strip().strip("\"'")
            if value:
                return value
        return None


def _first_array_element(raw: str) -> str:
    text = raw.strip()
    if text.startswith("{") and text.endswith("}"):
        inner = text[1:-1].strip()
        return inner.split(",", 1)[0] if inner else ""
    return text
