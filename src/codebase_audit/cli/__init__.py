"""CLI entry point. Registers all subcommands."""

import typer

app = typer.Typer(
    name="codebase-audit",
    help="Codebase Audit - component usage, coverage and category scoring for front-end projects",
    add_completion=False,
    rich_markup_mode="rich",
)


def main() -> None:
    app()


# Import subcommands to register them
from .audit import main as _main_callback  # noqa: F401, E402
from .compare import compare as _compare  # noqa: F401, E402
from .inventory import inventory as _inventory  # noqa: F401, E402
