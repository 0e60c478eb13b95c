"""Rich terminal formatter for audit reports."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import AuditReport, CategoryReport
from ..scoring.metrics import format_duration
from .base import BaseFormatter

console = Console()

_STATUS_STYLE = {"passed": "green", "warning": "yellow", "failed": "red"}
_SEVERITY_STYLE = {"critical": "red bold", "high": "red", "medium": "yellow", "low": "dim"}


def _score_label(score: int) -> str:
    if score >= 80:
        return f"[green bold]{score}[/green bold]"
    elif score >= 60:
        return f"[yellow]{score}[/yellow]"
    return f"[red]{score}[/red]"


def _status_label(status: str) -> str:
    style = _STATUS_STYLE.get(status, "white")
    return f"[{style}]{status}[/{style}]"


class RichFormatter(BaseFormatter):
    """Summary panel, category table, issues and recommendations."""

    def __init__(self, target: Optional[Console] = None):
        self.console = target or console

    def render(self, report: AuditReport) -> None:
        self._print_summary(report)
        self._print_categories(report.categories)
        self._print_issues(report.categories)
        self._print_recommendations(report)

    def format(self, report: AuditReport) -> str:
        """Plain-text rendering of the same output."""
        buffer = io.StringIO()
        saved = self.console
        self.console = Console(file=buffer, width=120, color_system=None, force_terminal=False)
        try:
            self.render(report)
        finally:
            self.console = saved
        return buffer.getvalue()

    # -- private helpers --

    def _print_summary(self, report: AuditReport) -> None:
        s = report.summary
        m = report.metadata
        text = (
            f"Overall score: {_score_label(s.overall_score)}/100  |  "
            f"Tests: [green]{s.passed_tests}[/green] passed, "
            f"[red]{s.failed_tests}[/red] failed of {s.total_tests}  |  "
            f"Issues: [red]{s.critical_issues}[/red] critical, "
            f"[yellow]{s.warning_count}[/yellow] warnings  |  "
            f"Duration: {format_duration(m.duration_ms)}"
        )
        self.console.print(Panel(text, title="[bold cyan]Audit Summary[/bold cyan]", expand=False))
        self.console.print()

    def _print_categories(self, categories: list[CategoryReport]) -> None:
        if not categories:
            self.console.print("[yellow]No categories were audited.[/yellow]")
            return

        table = Table(title="Categories", expand=True)
        table.add_column("Category", style="cyan")
        table.add_column("Status")
        table.add_column("Score", justify="right")
        table.add_column("Tests", justify="right")
        table.add_column("Issues", justify="right")

        for cat in categories:
            table.add_row(
                cat.category,
                _status_label(cat.status),
                _score_label(cat.score),
                f"{cat.passed_tests}/{len(cat.tests)}",
                str(len(cat.issues)),
            )
        self.console.print(table)
        self.console.print()

    def _print_issues(self, categories: list[CategoryReport]) -> None:
        # Placeholder notices would drown out real findings.
        issues = [
            i
            for cat in categories
            for i in cat.issues
            if i.title != "Category not yet implemented"
        ]
        if not issues:
            return

        self.console.print("[bold]Issues:[/bold]")
        for issue in issues:
            style = _SEVERITY_STYLE.get(issue.severity, "white")
            self.console.print(
                f"  [{style}]{issue.severity:8s}[/{style}] "
                f"[cyan]{issue.category}[/cyan]: {issue.title}"
            )
            self.console.print(f"           [dim]{issue.description}[/dim]")
            if issue.suggestion:
                self.console.print(f"           [green]->[/green] {issue.suggestion}")
        self.console.print()

    def _print_recommendations(self, report: AuditReport) -> None:
        if not report.recommendations:
            return

        high = sum(1 for r in report.recommendations if r.priority == "high")
        self.console.print(
            f"[bold]Recommendations:[/bold] {len(report.recommendations)} "
            f"([red]{high}[/red] high priority)"
        )
        for rec in report.recommendations[:10]:
            self.console.print(
                f"  {escape(f'[{rec.priority}]')} [cyan]{rec.category}[/cyan]: {rec.title} "
                f"[dim](effort: {rec.effort})[/dim]",
                highlight=False,
            )
        if len(report.recommendations) > 10:
            self.console.print(f"  [dim]... and {len(report.recommendations) - 10} more[/dim]")
