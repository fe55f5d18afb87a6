"""Resolution result value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.bean import BeanDefinition


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of resolving one declared dependency type.

    Attributes:
        candidates: Every matching definition (empty = none, >=2 = ambiguous)
        resolved: The unique match, set only when there is exactly one candidate
        is_collection: Type was a collection and candidates are its elements
    """

    candidates: tuple[BeanDefinition, ...] = ()
    resolved: BeanDefinition | None = None
    is_collection: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.resolved is not None:
            if len(self.candidates) != 1:
                raise ValueError(
                    f"resolved requires exactly one candidate, got {len(self.candidates)}"
                )
            if self.candidates[0] != self.resolved:
                raise ValueError("resolved must be the single candidate")

    @classmethod
    def empty(cls) -> ResolutionResult:
        """Result with no candidates."""
        return cls()

    @classmethod
    def of(
        cls,
        candidates: tuple[BeanDefinition, ...],
        *,
        is_collection: bool = False,
    ) -> ResolutionResult:
        """Build result from candidates, resolving when unique.

        Collection results never resolve to a single bean: every
        candidate is injected.
        """
        resolved = candidates[0] if len(candidates) == 1 and not is_collection else None
        return cls(candidates=candidates, resolved=resolved, is_collection=is_collection)

    @property
    def is_resolved(self) -> bool:
        """Exactly one candidate."""
        return self.resolved is not None

    @property
    def is_ambiguous(self) -> bool:
        """Two or more candidates for a single-valued dependency."""
        return not self.is_collection and len(self.candidates) > 1

    @property
    def is_unresolved(self) -> bool:
        """No candidates."""
        return not self.candidates
