"""
Schema migrations for the customer database.

Each ``migrations/NNNN_name.sql`` file is applied once, in filename order, and
recorded in ``schema_migrations``. Only the part above a ``-- Down`` line runs.
"""

import logging
import sqlite3
from pathlib import Path

from salonbook.core.ports.store import BackendError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
DOWN_MARKER = "-- Down"


def up_script(sql: str) -> str:
    return sql.split(DOWN_MARKER, 1)[0]


class SQLiteMigrator:
    def __init__(self, db_path: str, migrations_dir: Path = MIGRATIONS_DIR):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def _connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
            conn.execute(
                "CREATE TABLE IF NOT EXISTS schema_migrations ("
                " filename TEXT PRIMARY KEY,"
                " applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP)"
            )
        except sqlite3.Error as e:
            raise BackendError("migrate", str(e)) from e
        return conn

    def pending(self) -> list[Path]:
        """Migration files not yet recorded in the database, in apply order."""
        conn = self._connect()
        try:
            done = {row[0] for row in conn.execute("SELECT filename FROM schema_migrations")}
        finally:
            conn.close()
        return [p for p in sorted(self.migrations_dir.glob("*.sql")) if p.name not in done]

    def run_migrations(self) -> list[str]:
        """Apply pending migrations. Returns the filenames applied."""
        todo = self.pending()
        if not todo:
            logger.debug("Schema up to date: %s", self.db_path)
            return []

        conn = self._connect()
        try:
            for path in todo:
                logger.info("Applying migration %s", path.name)
                try:
                    conn.executescript(up_script(path.read_text(encoding="utf-8")))
                    conn.execute(
                        "INSERT INTO schema_migrations (filename) VALUES (?)", (path.name,)
                    )
                    conn.commit()
                except sqlite3.Error as e:
                    conn.rollback()
                    raise BackendError("migrate", f"{path.name}: {e}") from e
        finally:
            conn.close()
        return [path.name for path in todo]
