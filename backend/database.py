"""
Database configuration and schema management for GridSnake.

A single key/value table holds the values that survive between sessions
(currently only the high score).
"""

import logging
import os
import sqlite3
from typing import Optional

import config

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the SQLite database path.

    Returns:
        SNAKE_DB_PATH if set, otherwise backend/gridsnake.db
    """
    return config.get_db_path()


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Args:
        db_path: Explicit database file; defaults to get_database_path().

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    db_path = db_path or get_database_path()
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
        logger.debug("Database schema initialized at %s", db_path or get_database_path())

    except Exception:
        conn.rollback()
        logger.exception("Error initializing database")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
    init_database()
    print(f"Database ready at: {get_database_path()}")
