"""
Autopilot player - heads for the food while avoiding walls and its own body.
"""

import random
from typing import List, Optional

from domain.constants import MOVE_OFFSETS, OPPOSITES, UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

# Fixed order keeps choices reproducible for a seeded rng
MOVE_ORDER = (UP, DOWN, LEFT, RIGHT)


class AutopilotPlayer(Player):
    """
    Greedy player used by the CLI in place of a human.

    Never asks for a reversal. Among the moves that stay on the board and off
    the body it prefers the ones that bring the head closer to the food.
    """

    name = "autopilot"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        positions = game_state.snake_positions
        head_row, head_col = positions[0]
        body = set(positions)

        safe_moves: List[str] = []
        for move in MOVE_ORDER:
            if move == OPPOSITES[game_state.heading]:
                continue

            d_row, d_col = MOVE_OFFSETS[move]
            new_row, new_col = head_row + d_row, head_col + d_col

            # Check wall collisions
            if not (0 <= new_row < game_state.rows and 0 <= new_col < game_state.cols):
                continue

            # The tail still occupies its cell when the head moves
            if (new_row, new_col) in body:
                continue

            safe_moves.append(move)

        # Nothing safe: keep going and accept the crash
        if not safe_moves:
            return game_state.heading

        if game_state.food is None:
            return self.rng.choice(safe_moves)

        food_row, food_col = game_state.food

        def distance(move: str) -> int:
            d_row, d_col = MOVE_OFFSETS[move]
            return abs(head_row + d_row - food_row) + abs(head_col + d_col - food_col)

        best = min(distance(move) for move in safe_moves)
        return self.rng.choice([move for move in safe_moves if distance(move) == best])
