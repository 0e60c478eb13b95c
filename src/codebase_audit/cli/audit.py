"""Main audit command: full run, single category or re-render of the last report."""

from pathlib import Path
from typing import Optional

import typer

from ..audit import AuditManager
from ..exceptions import CodebaseAuditError, ReportNotFoundError, UnknownCategoryError
from ..formatters import RichFormatter
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config, split_csv


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Project root to audit (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="Run a single audit category",
    ),
    report_only: bool = typer.Option(
        False,
        "--report-only",
        help="Re-render the most recent saved report without scanning",
    ),
    skip: Optional[str] = typer.Option(
        None,
        "--skip",
        help="Comma-separated categories to skip",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for report files",
    ),
    formats: Optional[str] = typer.Option(
        None,
        "--formats",
        help="Comma-separated output formats: html, json, console",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    list_categories: bool = typer.Option(
        False,
        "--list-categories",
        help="List the registered audit categories and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Audit a front-end codebase and write a scored report.

    Scans components, checks usage, tests and docs, validates expected
    pages and aggregates every registered category into one report.

    Exits with status 1 when the overall score is below the acceptable
    threshold or any critical issue was found.

    [bold cyan]Examples:[/bold cyan]

      codebase-audit

      codebase-audit --category components

      codebase-audit --skip ai,offline --formats json,console

      codebase-audit --report-only

      codebase-audit -C /path/to/project --output ./reports
    """
    target = Path(path) if path else Path.cwd()
    ctx.ensure_object(dict)
    ctx.obj["path"] = target

    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]Codebase Audit[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            path=target,
            config=config,
            output=output,
            formats=formats,
            verbose=verbose,
            quiet=quiet,
        )
        manager = AuditManager(settings)

        if list_categories:
            for name in manager.registered_categories():
                console.print(name)
            raise typer.Exit(0)

        if report_only:
            report = manager.generate_report_only()
            if "console" not in settings.formats:
                RichFormatter().render(report)
            raise typer.Exit(0)

        if category:
            result = manager.run_category_audit(category)
            manager.generate_report()
            if result.status == "failed":
                console.print(f"[red]Category {category} failed[/red] (score {result.score}/100)")
                raise typer.Exit(1)
            raise typer.Exit(0)

        report = manager.run_full_audit(skip=split_csv(skip))
        if not manager.is_acceptable(report):
            console.print(
                f"[red]Audit failed:[/red] score {report.summary.overall_score}/100, "
                f"{report.summary.critical_issues} critical issues"
            )
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except UnknownCategoryError as e:
        console.print(f"[red]Error:[/red] Unknown category: {e.category}")
        console.print(f"Valid categories: {', '.join(e.known)}")
        raise typer.Exit(1)
    except ReportNotFoundError as e:
        console.print(f"[red]Error:[/red] {e.message} in {e.output_dir}")
        raise typer.Exit(1)
    except CodebaseAuditError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Audit failed")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
