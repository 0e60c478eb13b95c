"""Compare CLI command -- score and category deltas between two saved reports."""

import json
from dataclasses import asdict
from pathlib import Path

import typer
from rich.table import Table

from ..audit import AuditManager, ReportStore
from . import app
from ._common import console


def _delta(value: int) -> str:
    if value > 0:
        return f"[green]+{value}[/green]"
    if value < 0:
        return f"[red]{value}[/red]"
    return "[dim]0[/dim]"


@app.command()
def compare(
    old: Path = typer.Argument(..., help="Older report (JSON)", exists=True, dir_okay=False),
    new: Path = typer.Argument(..., help="Newer report (JSON)", exists=True, dir_okay=False),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Compare two saved audit reports.

    Shows the change in overall score, passed tests and critical issues,
    and which categories improved or regressed.

    [bold cyan]Examples:[/bold cyan]

      codebase-audit compare audit-reports/old.json audit-reports/new.json
    """
    store = ReportStore(new.parent)
    try:
        before = store.load(old)
        after = store.load(new)
    except (OSError, ValueError, KeyError) as e:
        console.print(f"[red]Error:[/red] Could not load report: {e}")
        raise typer.Exit(1)

    comparison = AuditManager.compare_reports(before, after)

    if json_output:
        print(json.dumps(asdict(comparison), indent=2))
        return

    table = Table(title=f"{before.id} -> {after.id}", expand=False)
    table.add_column("Metric")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")
    table.add_column("Change", justify="right")
    table.add_row(
        "Overall score",
        str(before.summary.overall_score),
        str(after.summary.overall_score),
        _delta(comparison.score_delta),
    )
    table.add_row(
        "Passed tests",
        str(before.summary.passed_tests),
        str(after.summary.passed_tests),
        _delta(comparison.tests_delta),
    )
    table.add_row(
        "Critical issues",
        str(before.summary.critical_issues),
        str(after.summary.critical_issues),
        _delta(comparison.issues_delta),
    )
    console.print(table)

    if comparison.improved:
        console.print(f"[green]Improved:[/green] {', '.join(comparison.improved)}")
    if comparison.regressed:
        console.print(f"[red]Regressed:[/red] {', '.join(comparison.regressed)}")
    if not comparison.improved and not comparison.regressed:
        console.print("[dim]No category scores changed.[/dim]")
