"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import AuditConfig, load_config

console = Console()


def split_csv(value: Optional[str]) -> List[str]:
    """``"a, b,,c"`` -> ``["a", "b", "c"]``."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def resolve_config(
    path: Optional[Path] = None,
    config: Optional[Path] = None,
    output: Optional[Path] = None,
    formats: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AuditConfig:
    """Build the audit config from CLI options."""
    overrides = {}
    if path is not None:
        overrides["base_path"] = str(path)
    if output is not None:
        overrides["output_dir"] = str(output)
    if formats:
        overrides["formats"] = split_csv(formats)
    return load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
