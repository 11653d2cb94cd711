"""
Grid geometry: coordinates and the fixed board dimensions.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from .constants import BLOCK_SIZE


class Coordinate(NamedTuple):
    """A cell on the board. Row 0 is the top row, col 0 the left column."""

    row: int
    col: int


@dataclass(frozen=True)
class GridSpec:
    """
    Immutable board dimensions.

    Attributes:
        rows: number of rows (> 0)
        cols: number of columns (> 0)
    """

    rows: int
    cols: int

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.rows}x{self.cols}."
            )

    @classmethod
    def from_display_area(cls, width: int, height: int, block_size: int = BLOCK_SIZE) -> "GridSpec":
        """Fit as many whole blocks as possible into a width x height area."""
        return cls(rows=height // block_size, cols=width // block_size)

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def contains(self, coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cells(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Coordinate(row, col)
