"""Imports command: inspect the persisted graph, including undrawn imports."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import ImportDiagramError
from ..logging_config import setup_logging
from ..persistence import GraphDB, query_imports
from . import app
from ._common import console, resolve_config

_KINDS = ("local", "lib", "none")


@app.command()
def imports(
    path: Path = typer.Argument(
        Path("."),
        help="Project root the database was built for",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="Only imports of this file (path relative to PATH)"
    ),
    kind: Optional[str] = typer.Option(
        None, "--kind", "-k", help="Only this kind: local, lib, or none (unclassified)"
    ),
    db_file: Optional[str] = typer.Option(None, "--db-file", help="SQLite database file"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    List imports recorded by the last [bold]build[/bold].

    Library and unresolved imports are not drawn in the diagram; this is
    where to look at them.

    [bold cyan]Examples:[/bold cyan]

      import-diagram imports . --kind lib

      import-diagram imports . --file app/javascript/app.ts
    """
    setup_logging(verbose=verbose)

    if kind is not None and kind not in _KINDS:
        console.print(f"[red]Error:[/red] --kind must be one of {', '.join(_KINDS)}")
        raise typer.Exit(1)

    try:
        settings = resolve_config(path, config=config, verbose=verbose, database_file=db_file)
        with GraphDB(settings.output_path(settings.database_file)) as db:
            rows = query_imports(db.conn, rel_path=file, kind=kind)
    except ImportDiagramError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"{len(rows)} imports", title_justify="left")
    table.add_column("File", style="cyan")
    table.add_column("Locator")
    table.add_column("Kind")
    table.add_column("Target", style="green")
    for row in rows:
        table.add_row(
            row.importer,
            row.locator,
            row.kind.value if row.kind is not None else "-",
            row.target or "-",
        )
    console.print(table)
