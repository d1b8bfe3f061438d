"""
SQLite database client and simple migration system.

The ``Database`` class wraps a single SQLite connection that is opened
when the application starts and closed when it shuts down.  Instances
are created explicitly and handed to the services (see
``api.deps.get_database``); nothing in this module keeps a global
connection.

The migration mechanism stores the applied schema version in the
``migrations`` table and executes newer migrations in order.  To switch
to another DBMS you would replace the connection logic and adapt the
SQL syntax accordingly.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from starlette.concurrency import run_in_threadpool

from .config import settings
from .errors import InfrastructureError


logger = logging.getLogger(__name__)

T = TypeVar("T")


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS "user" (
            id INTEGER PRIMARY KEY,
            voornaam TEXT NOT NULL,
            tussenvoegsel TEXT,
            achternaam TEXT NOT NULL,
            adres TEXT,
            wachtwoord TEXT NOT NULL,
            email TEXT NOT NULL,
            telefoonnummer TEXT,
            mobiel_nummer TEXT
        );

        CREATE TABLE IF NOT EXISTS vakken (
            id INTEGER PRIMARY KEY,
            naam TEXT NOT NULL,
            omschrijving TEXT
        );
        """,
    ),
    # Migration 2: login looks users up by email
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_user_email ON "user" (email);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are returned as
    is.  Relative paths are resolved against the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class Database:
    """Handle around one SQLite connection.

    The connection is shared by all requests, so every statement runs
    under an internal lock.  Rows are returned as ``sqlite3.Row``
    objects, which behave like read‑only mappings keyed by column name.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open")
        return self._conn

    def open(self) -> None:
        """Connect to the database file and apply pending migrations."""
        if self._conn is not None:
            return
        logger.info("Opening database %s", self.path)
        # isolation_level=None: statements autocommit unless wrapped in
        # ``transaction()``, which issues BEGIN/COMMIT explicitly.
        conn = sqlite3.connect(self.path, check_same_thread=False, isolation_level=None)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        self.migrate()

    def close(self) -> None:
        """Close the underlying connection.  Safe to call twice."""
        with self._lock:
            if self._conn is not None:
                logger.info("Closing database %s", self.path)
                self._conn.close()
                self._conn = None

    def migrate(self) -> None:
        """Create the ``migrations`` table and apply newer migrations.

        If you add a migration, append it to ``MIGRATIONS`` with an
        incremented version number.
        """
        with self.transaction() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY, "
                "applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current = row["version"] or 0
            for version, script in MIGRATIONS:
                if version <= current:
                    continue
                logger.info("Applying migration %s", version)
                for statement in script.split(";"):
                    if statement.strip():
                        cursor.execute(statement)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        with self._lock:
            return self.connection.execute(sql, tuple(params)).fetchall()

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        with self._lock:
            return self.connection.execute(sql, tuple(params)).fetchone()

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a single write statement and return the affected row count."""
        with self._lock:
            return self.connection.execute(sql, tuple(params)).rowcount

    def insert(self, sql: str, params: Sequence[Any] = ()) -> Optional[int]:
        """Run an INSERT and return the rowid of the new row."""
        with self._lock:
            return self.connection.execute(sql, tuple(params)).lastrowid

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside ``BEGIN IMMEDIATE`` ... ``COMMIT``.

        The write lock is taken up front so a read‑modify‑write sequence
        cannot interleave with another writer.  Any exception rolls the
        transaction back and propagates.
        """
        with self._lock:
            cursor = self.connection.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            try:
                yield cursor
            except BaseException:
                cursor.execute("ROLLBACK")
                raise
            else:
                cursor.execute("COMMIT")
            finally:
                cursor.close()


async def call_db(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking database call in the threadpool.

    ``sqlite3`` errors are logged with their driver detail and re‑raised
    as ``InfrastructureError`` carrying a generic message only.  Service
    errors raised by ``func`` propagate unchanged.
    """
    try:
        return await run_in_threadpool(func, *args)
    except sqlite3.Error as exc:
        logger.error("Database error in %s: %s", getattr(func, "__name__", func), exc)
        raise InfrastructureError("Er is een fout opgetreden bij het verwerken van de gegevens") from exc
