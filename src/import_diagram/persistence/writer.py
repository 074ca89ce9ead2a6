"""Write a DependencyGraph into the graph database in a single transaction."""

import sqlite3

from ..exceptions import PersistenceError
from ..graph.models import DependencyGraph


def save_graph(conn: sqlite3.Connection, graph: DependencyGraph) -> None:
    """Persist every file and import of ``graph``.

    File ids are stored as primary keys so that ``imports.parent_id`` and
    ``imports.child_id`` match the in-memory ids.

    Parameters
    ----------
    conn:
        An open ``sqlite3.Connection`` (from ``GraphDB.connect()``).
    graph:
        The graph to persist.

    Raises
    ------
    PersistenceError
        If any insert fails; nothing is written in that case.
    """
    cur = conn.cursor()
    try:
        cur.execute("BEGIN")

        # ── local_files (batch) ──────────────────────────────────
        cur.executemany(
            """
            INSERT INTO local_files (id, abs_path, rel_path, base_name, ext)
            VALUES (?, ?, ?, ?, ?)
            """,
            [(f.id, f.abs_path, f.rel_path, f.base_name, f.ext) for f in graph.files],
        )

        # ── imports (batch) ──────────────────────────────────────
        cur.executemany(
            """
            INSERT INTO imports (
                parent_id, parent_path, import_locator, local_or_lib, child_id, child_path
            ) VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    e.importer_id,
                    e.importer_path,
                    e.locator,
                    e.kind.value if e.kind is not None else None,
                    e.target_id,
                    e.target_path,
                )
                for e in graph.edges
            ],
        )

        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        raise PersistenceError(f"Failed to save graph: {e}")
