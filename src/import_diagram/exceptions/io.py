"""Errors from the collaborators around the graph: git, sqlite, dot."""

from pathlib import Path
from typing import Optional

from .base import ImportDiagramError


class InventoryError(ImportDiagramError):
    """Raised when the list of source files cannot be produced."""

    def __init__(self, directory: Path, reason: str):
        super().__init__(
            f"Cannot list source files in {directory}",
            details={"directory": str(directory), "reason": reason},
        )
        self.directory = directory
        self.reason = reason


class PersistenceError(ImportDiagramError):
    """Raised when the graph database cannot be written or read."""

    def __init__(self, reason: str, db_path: Optional[Path] = None):
        details = {"reason": reason}
        if db_path:
            details["db_path"] = str(db_path)

        super().__init__(f"Graph database error: {reason}", details=details)
        self.reason = reason
        self.db_path = db_path


class RenderError(ImportDiagramError):
    """Raised when the layout engine fails to produce an image."""

    def __init__(self, reason: str, command: Optional[str] = None):
        details = {"reason": reason}
        if command:
            details["command"] = command

        super().__init__(f"Rendering failed: {reason}", details=details)
        self.reason = reason
        self.command = command
