"""
Exceptions raised by the game engine.

Collisions are not errors: they are reported as tick outcomes.
"""


class SnakeGameError(Exception):
    """Base class for GridSnake errors."""


class FoodPlacementExhausted(SnakeGameError):
    """Raised when every grid cell is occupied and no food can be placed."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"No free cell left for food on a {rows}x{cols} grid")


class SessionStateError(SnakeGameError):
    """Raised when a session operation is invalid for its current status."""
