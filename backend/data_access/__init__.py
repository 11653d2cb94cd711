"""
Data access layer for GridSnake.

Persists the values that outlive a single session.
"""

from .high_scores import InMemoryHighScoreStore, create_high_score_store
from .repositories import HighScoreRepository

__all__ = [
    'HighScoreRepository',
    'InMemoryHighScoreStore',
    'create_high_score_store',
]
