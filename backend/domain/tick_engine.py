"""
Single-step transition of the game: move, collide, eat, grow.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import FoodPlacementExhausted
from .food import FoodPlacer
from .grid import Coordinate, GridSpec
from .snake import Snake

logger = logging.getLogger(__name__)


class TickOutcome(str, Enum):
    CONTINUE = "continue"
    COLLIDED = "collided"
    # The snake filled the board; there is nowhere left to put food.
    CLEARED = "cleared"


class CollisionReason(str, Enum):
    WALL = "wall"
    SELF = "self"


@dataclass
class TickResult:
    """
    What a tick produced.

    Attributes:
        outcome: CONTINUE, COLLIDED or CLEARED
        snake: snake after the tick (unchanged input snake on collision)
        food: food after the tick (None once the board is cleared)
        scored: True if the head landed on food this tick
        reason: collision reason when outcome is COLLIDED
    """

    outcome: TickOutcome
    snake: Snake
    food: Optional[Coordinate]
    scored: bool = False
    reason: Optional[CollisionReason] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome != TickOutcome.CONTINUE


class TickEngine:
    """
    Advances the snake by one cell.

    The input snake is never mutated. Apart from food placement randomness the
    result depends only on (grid, snake, food, heading).
    """

    def __init__(self, food_placer: Optional[FoodPlacer] = None):
        self.food_placer = food_placer or FoodPlacer()

    def tick(self, grid: GridSpec, snake: Snake, food: Coordinate, heading: str) -> TickResult:
        new_head = snake.next_head(heading)

        if not grid.contains(new_head):
            logger.debug("Wall collision at %s heading %s", new_head, heading)
            return TickResult(TickOutcome.COLLIDED, snake, food, reason=CollisionReason.WALL)

        # Checked against the pre-move body, tail included.
        if new_head in snake:
            logger.debug("Self collision at %s heading %s", new_head, heading)
            return TickResult(TickOutcome.COLLIDED, snake, food, reason=CollisionReason.SELF)

        moved = snake.copy()
        moved.heading = heading
        moved.positions.appendleft(new_head)

        if new_head != food:
            moved.positions.pop()
            return TickResult(TickOutcome.CONTINUE, moved, food)

        # grow: keep the tail
        try:
            new_food = self.food_placer.place(grid, moved.occupancy())
        except FoodPlacementExhausted:
            logger.info("Snake of length %s filled the %sx%s grid", len(moved), grid.rows, grid.cols)
            return TickResult(TickOutcome.CLEARED, moved, None, scored=True)

        return TickResult(TickOutcome.CONTINUE, moved, new_food, scored=True)
