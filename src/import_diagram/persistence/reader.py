"""Read the persisted graph back for inspection."""

import sqlite3
from dataclasses import dataclass
from typing import Optional

from ..graph.models import DependencyGraph, ImportEdge, ImportKind, SourceFile


@dataclass(frozen=True)
class ImportRow:
    """One row of the imports table joined with its importer."""

    importer: str
    locator: str
    kind: Optional[ImportKind]
    target: Optional[str]


def load_graph(conn: sqlite3.Connection) -> DependencyGraph:
    """Rebuild a DependencyGraph, keeping the stored file ids."""
    graph = DependencyGraph()
    for row in conn.execute(
        "SELECT id, abs_path, rel_path, base_name, ext FROM local_files ORDER BY id"
    ):
        graph.add_file(
            SourceFile(
                abs_path=row["abs_path"],
                rel_path=row["rel_path"],
                base_name=row["base_name"],
                ext=row["ext"] or "",
                id=row["id"],
            )
        )

    for row in conn.execute(
        """
        SELECT parent_id, parent_path, import_locator, local_or_lib, child_id, child_path
        FROM imports ORDER BY id
        """
    ):
        graph.add_edge(
            ImportEdge(
                importer_id=row["parent_id"],
                importer_path=row["parent_path"],
                locator=row["import_locator"],
                kind=ImportKind(row["local_or_lib"]) if row["local_or_lib"] else None,
                target_id=row["child_id"],
                target_path=row["child_path"],
            )
        )
    return graph


def query_imports(
    conn: sqlite3.Connection,
    rel_path: Optional[str] = None,
    kind: Optional[str] = None,
) -> list[ImportRow]:
    """Imports filtered by importer relative path and/or kind.

    ``kind`` is ``"local"``, ``"lib"``, or ``"none"`` for unclassified.
    """
    clauses: list[str] = []
    params: list[str] = []
    if rel_path is not None:
        clauses.append("i.parent_path = ?")
        params.append(rel_path)
    if kind == "none":
        clauses.append("i.local_or_lib IS NULL")
    elif kind is not None:
        clauses.append("i.local_or_lib = ?")
        params.append(ImportKind(kind).value)

    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    rows = conn.execute(
        f"""
        SELECT i.parent_path, i.import_locator, i.local_or_lib, f.rel_path AS target
        FROM imports i
        LEFT JOIN local_files f ON f.id = i.child_id
        {where}
        ORDER BY i.id
        """,
        params,
    ).fetchall()

    return [
        ImportRow(
            importer=r["parent_path"],
            locator=r["import_locator"],
            kind=ImportKind(r["local_or_lib"]) if r["local_or_lib"] else None,
            target=r["target"],
        )
        for r in rows
    ]
