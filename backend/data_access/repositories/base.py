"""
Base repository with connection management.

Provides a context manager for database connections that handles:
- Automatic connection cleanup
- Transaction commit on success
- Transaction rollback on failure
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

from database import get_connection, init_database


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses should use self.connection() to get database connections.

    Args:
        db_path: SQLite file to use; None means the configured default.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path
        self._schema_ready = False

    def ensure_schema(self) -> None:
        if not self._schema_ready:
            init_database(self.db_path)
            self._schema_ready = True

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Commits on successful exit (if auto_commit=True), rolls back on
        exception and always closes the connection.

        Yields:
            A tuple of (connection, cursor) for database operations.
        """
        self.ensure_schema()
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """
        Same as connection() but without committing.

        Yields:
            A tuple of (connection, cursor) for database operations.
        """
        self.ensure_schema()
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()
