"""Build command: scan, persist, export and render the import graph."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..api import DiagramResult, run
from ..exceptions import ImportDiagramError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Dependency graphs of JavaScript/TypeScript imports.

    [bold cyan]Examples:[/bold cyan]

      import-diagram build . --scan-dir app/javascript

      import-diagram imports . --kind lib
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]import-diagram[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def build(
    path: Path = typer.Argument(
        Path("."),
        help="Project root; node tooltips show paths relative to it",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    scan_dir: Optional[list[str]] = typer.Option(
        None,
        "--scan-dir",
        "-s",
        help="Directory to scan, relative to PATH (repeatable; first one anchors 'components/...')",
    ),
    ext: Optional[list[str]] = typer.Option(
        None,
        "--ext",
        "-e",
        help="Source extension without the dot, in resolution order (repeatable)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Image file; its suffix selects the format (pdf, svg, png)",
    ),
    dot_file: Optional[str] = typer.Option(None, "--dot-file", help="Graph description file"),
    db_file: Optional[str] = typer.Option(None, "--db-file", help="SQLite database file"),
    no_db: bool = typer.Option(False, "--no-db", help="Do not write the database"),
    no_render: bool = typer.Option(
        False, "--no-render", help="Write the graph description but do not run Graphviz"
    ),
    all_files: bool = typer.Option(
        False, "--all-files", help="Scan untracked files too (walk the filesystem)"
    ),
    no_multiline: bool = typer.Option(
        False, "--no-multiline", help="Only read the first line of 'import {' statements"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and cycle listing"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file"
    ),
):
    """
    Build the import graph of PATH and render it.

    [bold cyan]Examples:[/bold cyan]

      import-diagram build ~/src/shop --scan-dir app/javascript

      import-diagram build . -e ts -e tsx -o graph.svg

      import-diagram build . --no-render --all-files
    """
    logger = setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    try:
        settings = resolve_config(
            path,
            config=config,
            verbose=verbose,
            quiet=quiet,
            scan_dirs=scan_dir or None,
            extensions=ext or None,
            image_file=output,
            dot_file=dot_file,
            database_file=db_file,
            tracked_only=False if all_files else None,
            follow_multiline=False if no_multiline else None,
        )

        result = run(settings, persist=not no_db, render=not no_render)

        if not quiet:
            _output_rich(result, verbose=verbose)

    except ImportDiagramError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


def _output_rich(result: DiagramResult, verbose: bool = False) -> None:
    summary = result.summary()

    table = Table(title="Import graph", show_header=False, title_justify="left")
    table.add_column("metric", style="cyan")
    table.add_column("value", justify="right")
    table.add_row("Files", str(summary["files"]))
    table.add_row("Imports", str(summary["imports"]))
    table.add_row("  local", str(summary["local"]))
    table.add_row("  library", str(summary["library"]))
    table.add_row("  unclassified", str(summary["unclassified"]))
    table.add_row("Drawn edges", str(summary["resolved"]))
    table.add_row("Unresolved local", str(summary["unresolved_local"]))
    table.add_row("Cycles", str(summary["cycles"]))
    console.print(table)

    if verbose and result.cycles:
        console.print()
        console.print("[bold yellow]Import cycles[/bold yellow]")
        for cycle in result.cycles:
            console.print(f"  {' ↔ '.join(cycle.files)}")

    for label, written in (
        ("Database", result.db_path),
        ("Graph description", result.dot_path),
        ("Image", result.image_path),
    ):
        if written is not None:
            console.print(f"{label}: [green]{written}[/green]")
