"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Set, Tuple

from .constants import MOVE_OFFSETS, VALID_MOVES
from .grid import Coordinate


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coordinate from head at index 0 to tail at the end
        heading: current direction of travel (UP, DOWN, LEFT or RIGHT)
    """

    def __init__(self, positions: Iterable[Tuple[int, int]], heading: str):
        self.positions = deque(Coordinate(*pos) for pos in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        if heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading '{heading}'.")
        self.heading = heading

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        return self.positions[-1]

    def occupancy(self) -> Set[Coordinate]:
        """Cells currently covered by the body."""
        return set(self.positions)

    def next_head(self, heading: str) -> Coordinate:
        """Cell the head would move into when travelling in ``heading``."""
        d_row, d_col = MOVE_OFFSETS[heading]
        return Coordinate(self.head.row + d_row, self.head.col + d_col)

    def copy(self) -> "Snake":
        return Snake(self.positions, self.heading)

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, coord) -> bool:
        return Coordinate(*coord) in self.positions

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake heading={self.heading} positions={list(self.positions)}>"
