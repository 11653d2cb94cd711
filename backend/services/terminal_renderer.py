"""
Plain-text renderer that prints the board after every tick.
"""

import sys
from typing import Optional, TextIO

from domain.game_state import GameState


class TerminalRenderer:
    """
    Writes the board and a status line to a stream.

    Args:
        stream: where to write (stdout by default)
        show_board: when False only the game-over summary is printed
    """

    def __init__(self, stream: Optional[TextIO] = None, show_board: bool = True):
        self.stream = stream or sys.stdout
        self.show_board = show_board

    def status_line(self, state: GameState) -> str:
        return (
            f"Score: {state.score}  High score: {state.high_score}  "
            f"Time: {state.elapsed}  Tick: {state.tick_number}"
        )

    def render(self, state: GameState) -> None:
        if not self.show_board:
            return
        self.stream.write(f"{state.print_board()}\n{self.status_line(state)}\n\n")
        self.stream.flush()

    def game_over(self, state: GameState) -> None:
        self.stream.write(
            f"Game over ({state.end_reason}). Final score: {state.score}  "
            f"High score: {state.high_score}  Time: {state.elapsed}\n"
        )
        self.stream.flush()
