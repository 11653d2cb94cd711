"""
High score persistence backed by the kv_store table.
"""

import logging
from typing import Optional

from domain.constants import HIGH_SCORE_KEY
from .base import BaseRepository

logger = logging.getLogger(__name__)


def parse_score(raw: Optional[str]) -> int:
    """Stored values that are missing, non-numeric, infinite or negative count as 0."""
    if raw is None:
        return 0
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring unreadable stored high score %r", raw)
        return 0
    return max(value, 0)


class HighScoreRepository(BaseRepository):
    """Reads and writes the persisted high score under a fixed key."""

    def __init__(self, db_path: Optional[str] = None, key: str = HIGH_SCORE_KEY):
        super().__init__(db_path)
        self.key = key

    def load_high_score(self) -> int:
        with self.read_connection() as (_, cursor):
            cursor.execute("SELECT value FROM kv_store WHERE key = ?", (self.key,))
            row = cursor.fetchone()
        return parse_score(row["value"] if row else None)

    def save_high_score(self, score: int) -> None:
        with self.connection() as (_, cursor):
            cursor.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self.key, str(score)),
            )
        logger.debug("Persisted high score %s under key %s", score, self.key)
