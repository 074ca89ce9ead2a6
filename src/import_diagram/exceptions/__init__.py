"""Exception hierarchy for import-diagram."""

from .analysis import AnalysisError, FileAccessError, ParseError
from .base import ImportDiagramError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .graph import DuplicateEdgeError, DuplicateFileError, GraphError, UnknownReferenceError
from .io import InventoryError, PersistenceError, RenderError

__all__ = [
    "ImportDiagramError",
    "AnalysisError",
    "FileAccessError",
    "ParseError",
    "GraphError",
    "DuplicateFileError",
    "DuplicateEdgeError",
    "UnknownReferenceError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "InventoryError",
    "PersistenceError",
    "RenderError",
]
