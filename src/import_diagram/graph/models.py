"""Data models for the import dependency graph.

  SourceFile:      one scanned file (node)
  ImportEdge:      one import statement found in a file (edge)
  DependencyGraph: insert-only aggregate of both for a single run

Edges hold file ids, not objects; the graph owns every file and edge.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import PurePath
from typing import Optional

from ..exceptions import (
    DuplicateEdgeError,
    DuplicateFileError,
    InvalidPathError,
    UnknownReferenceError,
)


class ImportKind(str, Enum):
    """Classification tag of an import locator."""

    LOCAL = "local"
    LIBRARY = "lib"


@dataclass(frozen=True)
class SourceFile:
    """One scanned source file.

    ``id`` is 0 until the file is added to a graph, which returns a copy
    carrying the assigned id.
    """

    abs_path: str
    rel_path: str
    base_name: str
    ext: str = ""
    id: int = 0

    def __post_init__(self) -> None:
        if not self.abs_path or not PurePath(self.abs_path).is_absolute():
            raise InvalidPathError(PurePath(self.abs_path), "path must be absolute")
        if not self.rel_path:
            raise InvalidPathError(PurePath(self.abs_path), "relative path is empty")
        if not self.base_name:
            raise InvalidPathError(PurePath(self.abs_path), "base name is empty")

    @classmethod
    def from_path(cls, abs_path: str, rel_path: str) -> "SourceFile":
        """Build a SourceFile, deriving base name and extension from rel_path."""
        rel = PurePath(rel_path)
        return cls(
            abs_path=abs_path,
            rel_path=rel_path,
            base_name=rel.name,
            ext=rel.suffix.removeprefix("."),
        )


@dataclass(frozen=True)
class ImportEdge:
    """One import statement: ``importer`` imports ``locator``.

    ``target_path`` is set whenever resolution found a file on disk;
    ``target_id`` only when that file is also a node of the graph.
    """

    importer_id: int
    importer_path: str
    locator: str
    kind: Optional[ImportKind] = None
    target_id: Optional[int] = None
    target_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.importer_path:
            raise ValueError("importer_path must not be empty")
        if not self.locator:
            raise ValueError("locator must not be empty")
        if self.kind is not None and not isinstance(self.kind, ImportKind):
            object.__setattr__(self, "kind", ImportKind(self.kind))

    @property
    def key(self) -> tuple[str, str]:
        """Uniqueness key within a graph."""
        return (self.importer_path, self.locator)

    @property
    def is_resolved(self) -> bool:
        return self.target_id is not None


@dataclass
class DependencyGraph:
    """Insert-only graph of files and the imports between them.

    Directed, may contain cycles. Iteration order is insertion order.
    """

    _files: dict[int, SourceFile] = field(default_factory=dict)
    _by_path: dict[str, int] = field(default_factory=dict)
    _edges: list[ImportEdge] = field(default_factory=list)
    _edge_keys: set[tuple[str, str]] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self._files)

    @property
    def files(self) -> list[SourceFile]:
        return list(self._files.values())

    @property
    def edges(self) -> list[ImportEdge]:
        return list(self._edges)

    # ── insertion ─────────────────────────────────────────────────

    def add_file(self, file: SourceFile) -> int:
        """Insert a file and return its id.

        Raises:
            DuplicateFileError: If a file with the same abs_path exists.
        """
        if file.abs_path in self._by_path:
            raise DuplicateFileError(file.abs_path)

        file_id = file.id or max(self._files, default=0) + 1
        if file_id in self._files:
            raise DuplicateFileError(file.abs_path)

        self._files[file_id] = replace(file, id=file_id)
        self._by_path[file.abs_path] = file_id
        return file_id

    def add_edge(self, edge: ImportEdge) -> ImportEdge:
        """Insert an edge.

        Raises:
            UnknownReferenceError: If importer_id or target_id is not a file
                of this graph.
            DuplicateEdgeError: If (importer_path, locator) is already stored.
        """
        if edge.importer_id not in self._files:
            raise UnknownReferenceError(edge.importer_id, edge.importer_path, edge.locator)
        if edge.target_id is not None and edge.target_id not in self._files:
            raise UnknownReferenceError(edge.target_id, edge.importer_path, edge.locator)
        if edge.key in self._edge_keys:
            raise DuplicateEdgeError(edge.importer_path, edge.locator)

        self._edges.append(edge)
        self._edge_keys.add(edge.key)
        return edge

    # ── lookups ───────────────────────────────────────────────────

    def get_file(self, file_id: int) -> SourceFile:
        try:
            return self._files[file_id]
        except KeyError:
            raise UnknownReferenceError(file_id, "") from None

    def find_file(self, abs_path: str) -> Optional[SourceFile]:
        file_id = self._by_path.get(abs_path)
        return self._files[file_id] if file_id is not None else None

    def find_by_rel_path(self, rel_path: str) -> Optional[SourceFile]:
        return next((f for f in self._files.values() if f.rel_path == rel_path), None)

    def imports_of(self, file_id: int) -> list[ImportEdge]:
        """Edges whose importer is file_id."""
        return [e for e in self._edges if e.importer_id == file_id]

    def imported_by(self, file_id: int) -> list[ImportEdge]:
        """Edges whose resolved target is file_id."""
        return [e for e in self._edges if e.target_id == file_id]

    def children(self, file_id: int) -> list[SourceFile]:
        """Files that file_id imports (resolved targets only)."""
        ids = dict.fromkeys(e.target_id for e in self.imports_of(file_id) if e.is_resolved)
        return [self._files[i] for i in ids]

    def parents(self, file_id: int) -> list[SourceFile]:
        """Files that import file_id."""
        ids = dict.fromkeys(e.importer_id for e in self.imported_by(file_id))
        return [self._files[i] for i in ids]

    def edges_of_kind(self, kind: Optional[ImportKind]) -> list[ImportEdge]:
        return [e for e in self._edges if e.kind is kind]

    def edges_with_resolved_target(self) -> list[ImportEdge]:
        return [e for e in self._edges if e.is_resolved]

    def files_without_incoming_edges(self) -> list[SourceFile]:
        targeted = {e.target_id for e in self._edges if e.is_resolved}
        return [f for f in self._files.values() if f.id not in targeted]

    def adjacency(self) -> dict[int, list[int]]:
        """file id -> ids of the files it imports."""
        adj: dict[int, list[int]] = {file_id: [] for file_id in self._files}
        for edge in self.edges_with_resolved_target():
            adj[edge.importer_id].append(edge.target_id)
        return adj
