"""
import-diagram - JavaScript/TypeScript import graphs

Scans a source tree for import statements, classifies and resolves each
locator, and renders the file-level dependency graph with Graphviz.
"""

__version__ = "0.1.0"

from .api import DiagramResult, generate, run
from .config import DiagramConfig, load_config
from .graph import DependencyGraph, ImportEdge, ImportKind, SourceFile

__all__ = [
    "generate",  # Main entry point
    "run",
    "DiagramResult",
    "DiagramConfig",
    "load_config",
    "DependencyGraph",
    "ImportEdge",
    "ImportKind",
    "SourceFile",
]
