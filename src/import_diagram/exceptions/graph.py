"""Dependency graph invariant violations."""

from typing import Optional

from .base import ImportDiagramError


class GraphError(ImportDiagramError):
    """Base class for dependency graph errors."""

    pass


class DuplicateFileError(GraphError):
    """Raised when a file with the same absolute path is added twice.

    Fatal: it means the inventory handed the builder the same path twice.
    """

    def __init__(self, abs_path: str):
        super().__init__(f"File already in graph: {abs_path}", details={"abs_path": abs_path})
        self.abs_path = abs_path


class DuplicateEdgeError(GraphError):
    """Raised when a file imports the same literal locator twice."""

    def __init__(self, importer_path: str, locator: str):
        super().__init__(
            f"Import already recorded: {importer_path} -> {locator}",
            details={"importer": importer_path, "locator": locator},
        )
        self.importer_path = importer_path
        self.locator = locator


class UnknownReferenceError(GraphError):
    """Raised when an edge references a file id that is not in the graph."""

    def __init__(self, reference: int, importer_path: str, locator: Optional[str] = None):
        details = {"reference": str(reference), "importer": importer_path}
        if locator is not None:
            details["locator"] = locator

        super().__init__(f"Edge references unknown file id {reference}", details=details)
        self.reference = reference
        self.importer_path = importer_path
        self.locator = locator
