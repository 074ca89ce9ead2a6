"""Root of the import-diagram exception hierarchy."""

from typing import Optional


class ImportDiagramError(Exception):
    """Any failure the tool reports instead of crashing.

    ``details`` carries the file, locator or command involved. The CLI
    prints ``str(error)``, which lists them after the message in insertion
    order, e.g. ``Import already recorded: a.js -> ./b (importer=a.js,
    locator=./b)``.
    """

    def __init__(self, message: str, details: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details: dict[str, str] = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
