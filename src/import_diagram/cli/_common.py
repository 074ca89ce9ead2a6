"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import DiagramConfig, load_config

console = Console()


def resolve_config(
    path: Path,
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> DiagramConfig:
    """Build configuration from CLI options; unset options are ignored."""
    return load_config(
        config_file=config,
        project_root=str(path),
        verbose=verbose,
        quiet=quiet,
        **overrides,
    )
