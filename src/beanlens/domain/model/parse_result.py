"""Per-file parse result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.bean import BeanDefinition
    from beanlens.domain.model.class_ import ClassRecord
    from beanlens.domain.model.injection import InjectionPoint


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Everything recovered from one source file.

    A non-empty errors tuple means partial analysis, not failure.

    Attributes:
        file_id: Identifier echoed from the caller
        classes: Class records in source order
        bean_definitions: Bean definitions in source order
        injections: Injection points in source order
        errors: Human-readable file-scope error messages
    """

    file_id: str
    classes: tuple[ClassRecord, ...] = ()
    bean_definitions: tuple[BeanDefinition, ...] = ()
    injections: tuple[InjectionPoint, ...] = ()
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file_id is None:
            raise TypeError("file_id must not be None")

    @classmethod
    def empty(cls, file_id: str) -> ParseResult:
        """Result with nothing recovered."""
        return cls(file_id=file_id)

    @property
    def has_errors(self) -> bool:
        """File was only partially analyzed."""
        return bool(self.errors)
