"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from beanlens.application.reporters._base import (
    BaseReporter,
    format_site,
    format_target,
    resolution_status,
)

if TYPE_CHECKING:
    from beanlens.domain.model.report import IndexReport


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, report: IndexReport) -> None:
        """Report index snapshot as plain text.

        Args:
            report: Index snapshot
        """
        self._report_header()
        self._report_summary(report)
        if report.beans:
            self._report_beans(report)
        if report.injections:
            self._report_injections(report)
        if report.errors:
            self._report_errors(report)
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Bean Analysis Results")
        self._write("=" * 70)

    def _report_summary(self, report: IndexReport) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Files: {report.file_count}")
        self._write(f"  Classes: {report.class_count}")
        self._write(f"  Beans: {len(report.beans)}")
        self._write(f"  Injection points: {len(report.injections)}")
        self._write(f"    Resolved: {len(report.resolved)}")
        self._write(f"    Ambiguous: {len(report.ambiguous)}")
        self._write(f"    Unresolved: {len(report.unresolved)}")
        self._write(f"  Status: {'PASS' if report.passed else 'FAIL'}")

    def _report_beans(self, report: IndexReport) -> None:
        self._write()
        self._write("-" * 70)
        self._write("Beans:")
        self._write("-" * 70)
        for bean in report.beans:
            kind = bean.definition_kind.name.lower()
            self._write(f"  {bean.name} ({bean.type}) [{kind}, @{bean.annotation_kind.name}]")
            self._write(f"    {bean.implementation_class} at {bean.file_id}:{bean.position}")
            if bean.interfaces:
                self._write(f"    implements {', '.join(bean.interfaces)}")

    def _report_injections(self, report: IndexReport) -> None:
        self._write()
        self._write("-" * 70)
        self._write("Injection points:")
        self._write("-" * 70)
        for point in report.injections:
            status = resolution_status(point)
            self._write(f"  [{status}] {format_target(point)} ({point.kind.name.lower()})")
            self._write(f"    at {format_site(point)}")
            for candidate in point.candidates:
                self._write(f"    -> {candidate.name} ({candidate.implementation_class})")

    def _report_errors(self, report: IndexReport) -> None:
        self._write()
        self._write(f"Errors ({len(report.errors)}):")
        for error in report.errors:
            self._write(f"  {error}")
