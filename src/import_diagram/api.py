"""Public API for import-diagram.

Example:
    >>> from import_diagram import generate
    >>>
    >>> result = generate("/path/to/app", scan_dirs=["app/javascript"])
    >>> result.graph.edges_with_resolved_target()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import DiagramConfig, load_config
from .export import export_graph, render_image, write_dot
from .graph import CycleGroup, DependencyGraph, ImportKind, find_cycles
from .graph.builder import build_dependency_graph
from .inventory import list_source_files
from .logging_config import get_logger
from .persistence import GraphDB, save_graph

logger = get_logger(__name__)


@dataclass
class DiagramResult:
    """Everything one run produced."""

    config: DiagramConfig
    graph: DependencyGraph
    dot_text: str
    cycles: list[CycleGroup] = field(default_factory=list)
    dot_path: Optional[Path] = None
    image_path: Optional[Path] = None
    db_path: Optional[Path] = None

    def summary(self) -> dict[str, int]:
        graph = self.graph
        return {
            "files": len(graph),
            "imports": len(graph.edges),
            "local": len(graph.edges_of_kind(ImportKind.LOCAL)),
            "library": len(graph.edges_of_kind(ImportKind.LIBRARY)),
            "unclassified": len(graph.edges_of_kind(None)),
            "resolved": len(graph.edges_with_resolved_target()),
            "unresolved_local": sum(
                1 for e in graph.edges_of_kind(ImportKind.LOCAL) if e.target_path is None
            ),
            "cycles": len(self.cycles),
        }


def run(
    config: DiagramConfig,
    persist: bool = True,
    render: bool = True,
    write_description: bool = True,
) -> DiagramResult:
    """Run the full pipeline for an already-loaded configuration.

    Steps:
    1. List source files (git-tracked unless ``tracked_only`` is off)
    2. Build the dependency graph
    3. Save it to the database (``persist``)
    4. Write the DOT description (``write_description``)
    5. Render the image with the layout engine (``render``; implies 4)

    Any ImportDiagramError aborts the run before later steps happen.
    """
    paths = list_source_files(
        config.scan_dirs,
        config.extensions,
        tracked_only=config.tracked_only,
        exclude_patterns=config.exclude_patterns,
        timeout=config.subprocess_timeout_seconds,
    )
    graph = build_dependency_graph(paths, config)
    result = DiagramResult(
        config=config,
        graph=graph,
        dot_text=export_graph(graph, link_base=config.link_base),
        cycles=find_cycles(graph),
    )

    if persist:
        db_path = config.output_path(config.database_file)
        with GraphDB(db_path, fresh=True) as db:
            save_graph(db.conn, graph)
        result.db_path = db_path

    if write_description or render:
        result.dot_path = write_dot(result.dot_text, config.output_path(config.dot_file))

    if render:
        result.image_path = render_image(
            result.dot_path,
            config.output_path(config.image_file),
            engine=config.layout_engine,
            command=config.dot_command,
            timeout=config.subprocess_timeout_seconds,
        )

    return result


def generate(
    path: str = ".",
    config_file: Optional[Path] = None,
    persist: bool = True,
    render: bool = True,
    **overrides,
) -> DiagramResult:
    """Load configuration for ``path`` and run the pipeline.

    Args:
        path: Project root; relative paths in the graph are computed from it
        config_file: Optional explicit TOML config
        persist: Write the SQLite database
        render: Invoke the layout engine
        **overrides: Configuration overrides, e.g. ``scan_dirs=["src"]``

    Raises:
        ImportDiagramError: On any fatal condition
    """
    config = load_config(config_file=config_file, project_root=str(path), **overrides)
    logger.debug("Configuration: %s", config)
    return run(config, persist=persist, render=render)
