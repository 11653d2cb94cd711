"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple


class GameState:
    """
    A snapshot of the game handed to renderers.

    Attributes:
        tick_number: number of ticks played in this session
        status: session status value ('idle', 'running', 'ended')
        snake_positions: list of (row, col), head first
        heading: current heading of the snake
        food: (row, col) of the food, or None
        score: current score
        high_score: best score across sessions
        rows, cols: board dimensions
        elapsed: elapsed session time formatted as MM:SS
        end_reason: why the session ended, if it has
    """

    def __init__(
        self,
        tick_number: int,
        status: str,
        snake_positions: List[Tuple[int, int]],
        heading: str,
        food: Optional[Tuple[int, int]],
        score: int,
        high_score: int,
        rows: int,
        cols: int,
        elapsed: str = "00:00",
        end_reason: Optional[str] = None,
    ):
        self.tick_number = tick_number
        self.status = status
        self.snake_positions = snake_positions
        self.heading = heading
        self.food = food
        self.score = score
        self.high_score = high_score
        self.rows = rows
        self.cols = cols
        self.elapsed = elapsed
        self.end_reason = end_reason

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        @ = snake head
        o = snake body
        Row 0 is printed first (top of the board).
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            food_row, food_col = self.food
            board[food_row][food_col] = '*'

        for pos_idx, (row, col) in enumerate(self.snake_positions):
            board[row][col] = '@' if pos_idx == 0 else 'o'

        return "\n".join(' '.join(cells) for cells in board)

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "status": self.status,
            "snake_positions": [list(pos) for pos in self.snake_positions],
            "heading": self.heading,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "rows": self.rows,
            "cols": self.cols,
            "elapsed": self.elapsed,
            "end_reason": self.end_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"length={len(self.snake_positions)}, food={self.food}, score={self.score}>"
        )
