"""
Food placement on free grid cells.
"""

import logging
import random
from typing import Iterable, Optional

from .errors import FoodPlacementExhausted
from .grid import Coordinate, GridSpec

logger = logging.getLogger(__name__)

# Rejection-sampling draws before falling back to enumerating free cells
MAX_RANDOM_ATTEMPTS = 32


class FoodPlacer:
    """
    Picks a uniformly random cell that is not occupied.

    Random draws are cheap while the board is sparse. Once a bounded number of
    draws keeps hitting the snake, the free cells are enumerated and one is
    chosen among them, so a nearly full board never loops forever.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = MAX_RANDOM_ATTEMPTS):
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def place(self, grid: GridSpec, occupied: Iterable[Coordinate]) -> Coordinate:
        """
        Return a free coordinate on ``grid``.

        Raises:
            FoodPlacementExhausted: if ``occupied`` covers every cell.
        """
        occupied = {Coordinate(*cell) for cell in occupied}

        if len(occupied) < grid.area:
            for _ in range(self.max_attempts):
                cell = Coordinate(
                    self.rng.randrange(grid.rows),
                    self.rng.randrange(grid.cols),
                )
                if cell not in occupied:
                    return cell

        free_cells = [cell for cell in grid.cells() if cell not in occupied]
        if not free_cells:
            raise FoodPlacementExhausted(grid.rows, grid.cols)

        logger.debug("Random draws exhausted; choosing among %s free cells", len(free_cells))
        return self.rng.choice(free_cells)
