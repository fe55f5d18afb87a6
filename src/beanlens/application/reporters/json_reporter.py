"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from beanlens.application.reporters._base import BaseReporter, resolution_status

if TYPE_CHECKING:
    from beanlens.domain.model.bean import BeanDefinition
    from beanlens.domain.model.injection import InjectionPoint
    from beanlens.domain.model.location import Position
    from beanlens.domain.model.report import IndexReport


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    The document is informational, not a persisted index format.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, report: IndexReport) -> None:
        """Report index snapshot as JSON.

        Args:
            report: Index snapshot
        """
        json.dump(self._report_to_dict(report), self._output, indent=self._indent)
        self._output.write("\n")

    def _report_to_dict(self, report: IndexReport) -> dict[str, object]:
        """Convert IndexReport to JSON-serializable dict."""
        return {
            "passed": report.passed,
            "summary": {
                "file_count": report.file_count,
                "class_count": report.class_count,
                "bean_count": len(report.beans),
                "injection_count": len(report.injections),
                "resolved_count": len(report.resolved),
                "ambiguous_count": len(report.ambiguous),
                "unresolved_count": len(report.unresolved),
            },
            "beans": [self._bean_to_dict(bean) for bean in report.beans],
            "injections": [self._injection_to_dict(point) for point in report.injections],
            "errors": list(report.errors),
        }

    @staticmethod
    def _position_to_dict(position: Position) -> dict[str, int]:
        return {"line": position.line, "column": position.column}

    def _bean_to_dict(self, bean: BeanDefinition) -> dict[str, object]:
        return {
            "name": bean.name,
            "type": bean.type,
            "implementation_class": bean.implementation_class,
            "file_id": bean.file_id,
            "position": self._position_to_dict(bean.position),
            "definition_kind": bean.definition_kind.name.lower(),
            "annotation": bean.annotation_kind.name,
            "interfaces": list(bean.interfaces),
        }

    def _injection_to_dict(self, point: InjectionPoint) -> dict[str, object]:
        return {
            "target_type": point.target_type,
            "target_name": point.target_name,
            "kind": point.kind.name.lower(),
            "owner": point.owner,
            "member": point.member,
            "file_id": point.file_id,
            "position": self._position_to_dict(point.position),
            "status": resolution_status(point).lower(),
            "resolved": point.resolved.name if point.resolved is not None else None,
            "candidates": [bean.name for bean in point.candidates],
        }
