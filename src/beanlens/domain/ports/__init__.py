"""Domain ports (protocols)."""

from beanlens.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
