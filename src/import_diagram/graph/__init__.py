"""Import dependency graph: models and algorithms.

The builder lives in ``graph.builder`` and is imported from there.
"""

from .algorithms import CycleGroup, find_cycles, tarjan_scc
from .models import DependencyGraph, ImportEdge, ImportKind, SourceFile

__all__ = [
    "CycleGroup",
    "DependencyGraph",
    "ImportEdge",
    "ImportKind",
    "SourceFile",
    "find_cycles",
    "tarjan_scc",
]
