"""SQLite database holding the files and imports of the latest run."""

import sqlite3
from pathlib import Path
from typing import Optional

from ..exceptions import PersistenceError
from ..logging_config import get_logger

logger = get_logger(__name__)


class GraphDB:
    """Manages the graph database file (``diagram.sqlite3`` by default).

    Usage::

        with GraphDB("diagram.sqlite3", fresh=True) as db:
            save_graph(db.conn, graph)

    With ``fresh=True`` any existing file is deleted first; the graph is
    rebuilt from scratch on every run.
    """

    def __init__(self, db_path, fresh: bool = False) -> None:
        self.db_path: Path = Path(db_path)
        self.fresh = fresh
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        """Return the active connection. Raises if not connected."""
        if self._conn is None:
            raise RuntimeError("GraphDB is not connected. Use as context manager or call connect().")
        return self._conn

    @property
    def connected(self) -> bool:
        return self._conn is not None

    # ── lifecycle ─────────────────────────────────────────────────

    def connect(self) -> sqlite3.Connection:
        """Open (or create) the database and create the schema."""
        try:
            if self.fresh:
                self.db_path.unlink(missing_ok=True)
            else:
                if not self.db_path.exists():
                    raise PersistenceError("database does not exist", self.db_path)
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
        except (OSError, sqlite3.Error) as e:
            raise PersistenceError(str(e), self.db_path)

        conn.execute("PRAGMA foreign_keys=ON")
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self._migrate()
        logger.debug("Graph DB connected at %s", self.db_path)
        return conn

    def close(self) -> None:
        """Close the connection if open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "GraphDB":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ── schema ────────────────────────────────────────────────────

    def _migrate(self) -> None:
        """Idempotently create all tables."""
        c = self.conn

        # ── local_files ──────────────────────────────────────────
        c.execute(
            """
            CREATE TABLE IF NOT EXISTS local_files (
                id         INTEGER PRIMARY KEY,
                abs_path   TEXT    NOT NULL,
                rel_path   TEXT    NOT NULL,
                base_name  TEXT    NOT NULL,
                ext        TEXT
            )
            """
        )

        # ── imports ──────────────────────────────────────────────
        c.execute(
            """
            CREATE TABLE IF NOT EXISTS imports (
                id             INTEGER PRIMARY KEY AUTOINCREMENT,
                parent_id      INTEGER NOT NULL REFERENCES local_files(id),
                parent_path    TEXT    NOT NULL,
                import_locator TEXT    NOT NULL,
                local_or_lib   TEXT    CHECK (local_or_lib IN ('local', 'lib')),
                child_id       INTEGER REFERENCES local_files(id),
                child_path     TEXT
            )
            """
        )

        # ── indexes ──────────────────────────────────────────────
        c.execute(
            "CREATE UNIQUE INDEX IF NOT EXISTS idx_local_files_abs_path ON local_files(abs_path)"
        )
        c.execute("CREATE INDEX IF NOT EXISTS idx_imports_parent ON imports(parent_id)")
        c.execute("CREATE INDEX IF NOT EXISTS idx_imports_child ON imports(child_id)")
        c.execute(
            "CREATE UNIQUE INDEX IF NOT EXISTS idx_imports_parent_locator "
            "ON imports(parent_path, import_locator)"
        )

        c.commit()
