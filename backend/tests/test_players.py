"""
Tests for the autopilot player and the terminal renderer.
"""

import io
import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT
from players import AutopilotPlayer, Player
from services.terminal_renderer import TerminalRenderer


def make_state(snake, heading, food=(0, 0), rows=5, cols=5, **overrides):
    values = dict(
        tick_number=0,
        status="running",
        snake_positions=snake,
        heading=heading,
        food=food,
        score=0,
        high_score=0,
        rows=rows,
        cols=cols,
    )
    values.update(overrides)
    return GameState(**values)


class TestPlayerBase:
    """Tests for the Player interface."""

    def test_get_move_is_abstract(self):
        """The base class has no move logic."""
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(2, 2)], LEFT))


class TestAutopilotPlayer:
    """Tests for AutopilotPlayer."""

    def test_moves_toward_food(self):
        """With a clear path the player closes the distance to the food."""
        player = AutopilotPlayer(rng=random.Random(0))
        state = make_state([(2, 2)], LEFT, food=(2, 0))
        assert player.get_move(state) == LEFT

    def test_never_requests_reversal(self):
        """Food straight behind does not make the player reverse."""
        player = AutopilotPlayer(rng=random.Random(0))
        state = make_state([(2, 2), (2, 3)], LEFT, food=(2, 4))
        for _ in range(20):
            assert player.get_move(state) != RIGHT

    def test_avoids_walls(self):
        """At the top-left corner only down is safe when heading left."""
        player = AutopilotPlayer(rng=random.Random(0))
        state = make_state([(0, 0), (0, 1)], LEFT, food=(0, 4))
        assert player.get_move(state) == DOWN

    def test_avoids_body_including_tail(self):
        """The tail cell is treated as occupied."""
        player = AutopilotPlayer(rng=random.Random(0))
        # Head (0,1) heading up; left is the tail, up is the wall.
        state = make_state([(0, 1), (1, 1), (1, 0), (0, 0)], UP, food=(4, 4))
        assert player.get_move(state) == RIGHT

    def test_trapped_player_keeps_heading(self):
        """When nothing is safe the player keeps its heading."""
        player = AutopilotPlayer(rng=random.Random(0))
        state = make_state([(0, 0)], UP, rows=1, cols=1, food=None)
        assert player.get_move(state) == UP

    def test_without_food_picks_any_safe_move(self):
        """A cleared board still yields a safe move."""
        player = AutopilotPlayer(rng=random.Random(1))
        state = make_state([(2, 2)], LEFT, food=None)
        assert player.get_move(state) in {UP, DOWN, LEFT}


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_render_writes_board_and_status(self):
        """Each frame shows the board and a status line."""
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream)
        renderer.render(make_state([(1, 1)], LEFT, food=(0, 0), rows=2, cols=2, elapsed="00:05"))

        output = stream.getvalue()
        assert "* .\n. @" in output
        assert "Score: 0" in output
        assert "Time: 00:05" in output

    def test_quiet_renderer_skips_frames(self):
        """show_board=False prints nothing until game over."""
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream, show_board=False)
        state = make_state([(1, 1)], LEFT, score=30, high_score=40, end_reason="wall")

        renderer.render(state)
        assert stream.getvalue() == ""

        renderer.game_over(state)
        assert "Game over (wall). Final score: 30" in stream.getvalue()
        assert "High score: 40" in stream.getvalue()

    def test_default_stream_is_stdout(self, capsys):
        """Without a stream the renderer writes to stdout."""
        renderer = TerminalRenderer()
        renderer.game_over(make_state([(1, 1)], LEFT, score=10, end_reason="self"))
        assert "Game over (self)" in capsys.readouterr().out
