"""Project-level index report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.bean import BeanDefinition
    from beanlens.domain.model.injection import InjectionPoint


@dataclass(frozen=True, slots=True)
class IndexReport:
    """Snapshot of an indexed project.

    Attributes:
        file_count: Number of indexed files
        class_count: Number of recovered classes
        beans: All bean definitions known to the resolver
        injections: All injection points, resolved
        errors: "file_id: message" entries from parsing and reading
    """

    file_count: int
    class_count: int
    beans: tuple[BeanDefinition, ...] = ()
    injections: tuple[InjectionPoint, ...] = ()
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file_count < 0:
            raise ValueError(f"file_count must be >= 0, got {self.file_count}")
        if self.class_count < 0:
            raise ValueError(f"class_count must be >= 0, got {self.class_count}")

    @property
    def resolved(self) -> tuple[InjectionPoint, ...]:
        """Injection points with a unique bean."""
        return tuple(p for p in self.injections if p.resolved is not None)

    @property
    def ambiguous(self) -> tuple[InjectionPoint, ...]:
        """Injection points with two or more candidates."""
        return tuple(
            p for p in self.injections if p.resolution is not None and p.resolution.is_ambiguous
        )

    @property
    def unresolved(self) -> tuple[InjectionPoint, ...]:
        """Injection points without candidates."""
        return tuple(p for p in self.injections if not p.candidates)

    @property
    def passed(self) -> bool:
        """Every injection point has at least one candidate and none is ambiguous."""
        return not self.unresolved and not self.ambiguous
