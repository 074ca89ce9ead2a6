"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="import-diagram",
    help="import-diagram - dependency graphs of JavaScript/TypeScript imports",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .build import build as _build  # noqa: F401, E402
from .build import main as _main_callback  # noqa: F401, E402
from .imports import imports as _imports  # noqa: F401, E402
