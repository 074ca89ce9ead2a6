"""Graph persistence: SQLite tables mirroring files and imports."""

from .database import GraphDB
from .reader import ImportRow, load_graph, query_imports
from .writer import save_graph

__all__ = ["GraphDB", "ImportRow", "load_graph", "query_imports", "save_graph"]
