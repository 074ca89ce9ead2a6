"""Dependency graph construction from import statements."""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..config import DiagramConfig
from ..exceptions import DuplicateEdgeError, ParseError
from ..file_ops import read_source
from ..logging_config import get_logger
from ..scanning import ImportLine, LocalPathResolver, LocatorClassifier, extract_import_lines
from .models import DependencyGraph, ImportEdge, ImportKind, SourceFile

logger = get_logger(__name__)


class GraphBuilder:
    """Build a DependencyGraph for one run.

    Files are all inserted before any edge so that imports may point to
    files later in the inventory. DuplicateFileError, UnknownReferenceError
    and FileAccessError propagate and abort the run; ParseError and
    DuplicateEdgeError are handled per line.
    """

    def __init__(self, config: DiagramConfig):
        self.config = config
        self.classifier = LocatorClassifier(config.known_libraries, config.local_prefixes)
        self.resolver = LocalPathResolver(config.base_dir, config.extensions)
        self.skipped_lines = 0
        self.duplicate_imports = 0

    def build(self, paths: Iterable[str]) -> DependencyGraph:
        graph = DependencyGraph()
        files = [self._add_file(graph, path) for path in paths]

        for source in files:
            self._scan_file(graph, source)

        logger.info(
            "Graph built: %d files, %d imports (%d lines skipped, %d duplicates)",
            len(graph),
            len(graph.edges),
            self.skipped_lines,
            self.duplicate_imports,
        )
        return graph

    def _add_file(self, graph: DependencyGraph, path: str) -> SourceFile:
        rel_path = os.path.relpath(path, self.config.project_root)
        file_id = graph.add_file(SourceFile.from_path(path, rel_path))
        return graph.get_file(file_id)

    def _scan_file(self, graph: DependencyGraph, source: SourceFile) -> None:
        text = read_source(Path(source.abs_path))

        for statement in extract_import_lines(text, self.config.follow_multiline):
            try:
                line = ImportLine.parse(statement)
            except ParseError as e:
                self.skipped_lines += 1
                logger.warning("%s: %s", source.rel_path, e)
                continue

            edge = self._make_edge(graph, source, line.locator)
            try:
                graph.add_edge(edge)
            except DuplicateEdgeError:
                self.duplicate_imports += 1
                logger.debug("%s: duplicate import of %s ignored", source.rel_path, line.locator)

    def _make_edge(self, graph: DependencyGraph, source: SourceFile, locator: str) -> ImportEdge:
        kind = self.classifier.classify(locator)

        target_path: Optional[str] = None
        target_id: Optional[int] = None
        if kind is ImportKind.LOCAL:
            target_path = self.resolver.resolve(locator, source.abs_path)
            if target_path is not None:
                target = graph.find_file(target_path)
                if target is not None:
                    target_id = target.id
                else:
                    logger.debug("%s: %s resolves outside the inventory", source.rel_path, locator)

        return ImportEdge(
            importer_id=source.id,
            importer_path=source.rel_path,
            locator=locator,
            kind=kind,
            target_id=target_id,
            target_path=target_path,
        )


def build_dependency_graph(paths: Iterable[str], config: DiagramConfig) -> DependencyGraph:
    """Build the import graph of ``paths`` (absolute, deduplicated, ordered)."""
    return GraphBuilder(config).build(paths)
