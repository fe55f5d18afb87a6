"""Reporter protocol for output formatting.

Users extend beanlens by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from beanlens.domain.model.report import IndexReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    beanlens provides PlainTextReporter and JSONReporter writing to a
    stream, and ConsoleReporter returning rich formatted text.
    """

    def report(self, report: IndexReport) -> object:
        """Report an index snapshot.

        Implementation decides output format and destination.

        Args:
            report: Beans and resolved injection points of a project
        """
        ...
