"""
High score stores used by the session controller.

Any object with load_high_score() and save_high_score(score) works; the
SQLite-backed HighScoreRepository is the durable one.
"""

from typing import Optional

from .repositories import HighScoreRepository


class InMemoryHighScoreStore:
    """Non-durable store, for tests and throwaway sessions."""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.saves = 0

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, score: int) -> None:
        self.value = score
        self.saves += 1


def create_high_score_store(db_path: Optional[str] = None, in_memory: bool = False):
    """Return an in-memory store or a SQLite repository at ``db_path``."""
    if in_memory:
        return InMemoryHighScoreStore()
    return HighScoreRepository(db_path=db_path)
