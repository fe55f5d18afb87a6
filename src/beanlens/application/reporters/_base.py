"""Base reporter class and shared formatting helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.injection import InjectionPoint
    from beanlens.domain.model.report import IndexReport


class BaseReporter(ABC):
    """Base class for stream reporters implementing ReporterProtocol."""

    @abstractmethod
    def report(self, report: IndexReport) -> None:
        """Report an index snapshot.

        Args:
            report: Beans and resolved injection points of a project
        """


def resolution_status(point: InjectionPoint) -> str:
    """RESOLVED, AMBIGUOUS, COLLECTION, UNRESOLVED or PENDING."""
    resolution = point.resolution
    if resolution is None:
        return "PENDING"
    if resolution.is_collection:
        return "COLLECTION" if resolution.candidates else "UNRESOLVED"
    if resolution.resolved is not None:
        return "RESOLVED"
    if resolution.is_ambiguous:
        return "AMBIGUOUS"
    return "UNRESOLVED"


def format_site(point: InjectionPoint) -> str:
    """file:line:column of an injection point."""
    return f"{point.file_id}:{point.position}"


def format_target(point: InjectionPoint) -> str:
    """Owner.member(target_name: Type) style description."""
    owner = point.owner.rsplit(".", 1)[-1] if point.owner else "?"
    member = f".{point.member}" if point.member and point.member != owner else ""
    return f"{owner}{member} {point.target_name}: {point.target_type}"
