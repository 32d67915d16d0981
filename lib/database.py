# =============================================================================
# lib/database.py - SQLite Database Wrapper
# =============================================================================
# This module owns the embedded SQLite file that stores contact messages and
# blog posts. It provides:
# - Schema creation (idempotent, run once at startup)
# - A per-request connection context manager
#
# The Database object itself is cheap: it only remembers the file path.
# Each request opens its own connection, so no connection is shared across
# threads. SQLite serializes concurrent writers internally.
#
# Usage:
#   from lib.database import Database
#   database = Database("data.sqlite")
#   database.initialize()
#   with database.connect() as conn:
#       rows = conn.execute("SELECT * FROM posts").fetchall()
# =============================================================================

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS messages (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        email TEXT NOT NULL,
        message TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS posts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        slug TEXT UNIQUE NOT NULL,
        title TEXT NOT NULL,
        excerpt TEXT,
        content TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
)


class DatabaseError(ApplicationError):
    """
    Error during database operations.

    Raised for anything sqlite3 reports: unreadable file, locked database,
    constraint violations. Callers decide whether to degrade (read paths)
    or fail the request (write paths).
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class Database:
    """
    Handle to the SQLite database file.

    Created once at application startup and handed to request handlers
    through a FastAPI dependency; never stored in a module-level global.

    Example:
        database = Database(tmp_path / "test.sqlite")
        database.initialize()
        with database.connect() as conn:
            conn.execute("DELETE FROM posts WHERE slug = ?", ["hello"])
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Database(path={str(self.path)!r})"

    def initialize(self) -> None:
        """
        Create the database file and tables if they don't exist.

        Raises:
            DatabaseError: If the file cannot be opened or the schema fails
        """
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        with self.connect() as conn:
            for statement in SCHEMA:
                conn.execute(statement)

        logger.info(f"SQLite DB opened at {self.path}")

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """
        Open a connection for the duration of one unit of work.

        Commits when the block exits normally, rolls back when it raises,
        and always closes the connection. sqlite3 errors raised inside the
        block are re-raised as DatabaseError.

        Yields:
            sqlite3.Connection with rows accessible by column name

        Raises:
            DatabaseError: If opening the file or any statement fails
        """
        try:
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as e:
            raise DatabaseError(
                message=f"Failed to open database: {e}",
                code="DB_OPEN_FAILED",
                suggestion="Check that DATABASE_PATH points to a writable location",
                details={"path": str(self.path)},
            ) from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise DatabaseError(
                message=f"Database operation failed: {e}",
                details={"path": str(self.path)},
            ) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def ping(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            with self.connect() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except DatabaseError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
