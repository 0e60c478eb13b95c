"""Inventory CLI command -- list classified components and their coverage."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..analysis import ComponentAnalyzer
from ..exceptions import CodebaseAuditError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


@app.command()
def inventory(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """
    Show the component inventory without running a full audit.

    [bold cyan]Examples:[/bold cyan]

      codebase-audit inventory

      codebase-audit -C /path/to/project inventory --json
    """
    target = ctx.obj.get("path", Path.cwd()) if ctx.obj else Path.cwd()
    logger = setup_logging(verbose=verbose)

    try:
        settings = resolve_config(path=target, config=config, verbose=verbose)
        components, inv = ComponentAnalyzer(settings.base_dir, settings.scan).analyze()
    except CodebaseAuditError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Inventory failed")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        data = {
            "inventory": inv.to_dict(),
            "components": [c.to_dict() for c in components],
        }
        print(json.dumps(data, indent=2))
        return

    if not components:
        console.print("[yellow]No components found.[/yellow]")
        return

    table = Table(title=f"{inv.total_components} Components", expand=True)
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="yellow", ratio=3)
    table.add_column("Type")
    table.add_column("Used in", justify="right")
    table.add_column("Tests")
    table.add_column("Docs")
    for comp in components:
        table.add_row(
            comp.name,
            comp.path,
            comp.role,
            str(len(comp.used_in)) if comp.is_used else "[red]0[/red]",
            _flag(comp.has_tests),
            _flag(comp.has_docs),
        )
    console.print(table)
    console.print(
        f"Used: {inv.used_components}/{inv.total_components}  |  "
        f"Test coverage: {inv.test_coverage:.0%}  |  "
        f"Doc coverage: {inv.doc_coverage:.0%}  |  "
        f"Graph: {len(inv.dependency_graph.nodes)} nodes, {len(inv.dependency_graph.edges)} edges"
    )
