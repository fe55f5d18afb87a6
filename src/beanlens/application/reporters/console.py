"""Console reporter: IndexReport -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from beanlens.application.reporters._base import format_site, format_target, resolution_status

if TYPE_CHECKING:
    from beanlens.domain.model.report import IndexReport

_STATUS_STYLE = {
    "RESOLVED": "green",
    "COLLECTION": "cyan",
    "AMBIGUOUS": "yellow",
    "UNRESOLVED": "red",
    "PENDING": "dim",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_beans: Render the bean table
        show_resolved: Include uniquely resolved injection points
        max_rows: Max injection rows. None = unlimited
        width: Console width in characters
    """

    show_beans: bool = True
    show_resolved: bool = True
    max_rows: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, report: IndexReport) -> str:
        """Format index snapshot as rich formatted string.

        Args:
            report: Index snapshot

        Returns:
            Formatted string with colors and tables
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, report)
        if self._config.show_beans and report.beans:
            self._render_beans(console, report)
        if report.injections:
            self._render_injections(console, report)
        if report.errors:
            self._render_errors(console, report)

        return output.getvalue()

    def _render_header(self, console: Console, report: IndexReport) -> None:
        console.print()
        console.rule("[bold]BEAN ANALYSIS[/bold]")
        console.print()
        status = "[green]PASS[/green]" if report.passed else "[red]FAIL[/red]"
        console.print(
            f"[bold]Files:[/bold] {report.file_count}  "
            f"[bold]Classes:[/bold] {report.class_count}  "
            f"[bold]Beans:[/bold] {len(report.beans)}  "
            f"[bold]Injections:[/bold] {len(report.injections)}  {status}"
        )
        console.print()

    def _render_beans(self, console: Console, report: IndexReport) -> None:
        table = Table(title="Beans")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Kind")
        table.add_column("Implementation")
        table.add_column("Interfaces")
        for bean in report.beans:
            table.add_row(
                escape(bean.name),
                escape(bean.type),
                f"{bean.definition_kind.name.lower()} @{bean.annotation_kind.name}",
                bean.implementation_class,
                ", ".join(bean.interfaces),
            )
        console.print(table)
        console.print()

    def _render_injections(self, console: Console, report: IndexReport) -> None:
        table = Table(title="Injection points")
        table.add_column("Status")
        table.add_column("Target")
        table.add_column("Kind")
        table.add_column("Candidates")
        table.add_column("Location", style="dim")
        rows = 0
        for point in report.injections:
            status = resolution_status(point)
            if status == "RESOLVED" and not self._config.show_resolved:
                continue
            if self._config.max_rows is not None and rows >= self._config.max_rows:
                break
            style = _STATUS_STYLE[status]
            table.add_row(
                f"[{style}]{status}[/{style}]",
                escape(format_target(point)),
                point.kind.name.lower(),
                ", ".join(bean.name for bean in point.candidates),
                escape(format_site(point)),
            )
            rows += 1
        console.print(table)
        console.print()

    def _render_errors(self, console: Console, report: IndexReport) -> None:
        console.print(f"[bold red]ERRORS[/bold red] ({len(report.errors)})")
        console.print()
        for error in report.errors:
            console.print(f"  {error}", markup=False)
        console.print()
