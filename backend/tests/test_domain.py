"""
Tests for the domain value objects: grid, snake, food placement, snapshots.
"""

import os
import random
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Coordinate,
    FoodPlacementExhausted,
    FoodPlacer,
    GameState,
    GridSpec,
    Snake,
    UP, DOWN, LEFT, RIGHT,
)


class TestGridSpec:
    """Tests for GridSpec."""

    def test_contains_inside_cells(self):
        """Every corner of the grid is contained."""
        grid = GridSpec(rows=10, cols=10)
        for cell in [(0, 0), (0, 9), (9, 0), (9, 9)]:
            assert grid.contains(Coordinate(*cell))

    def test_contains_rejects_outside_cells(self):
        """Cells one step past any edge are not contained."""
        grid = GridSpec(rows=10, cols=10)
        for cell in [(-1, 0), (0, -1), (10, 0), (0, 10)]:
            assert not grid.contains(cell)

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_raise(self, rows, cols):
        """A grid needs at least one row and one column."""
        with pytest.raises(ValueError):
            GridSpec(rows=rows, cols=cols)

    def test_grid_is_immutable(self):
        """GridSpec cannot be changed after construction."""
        grid = GridSpec(rows=3, cols=4)
        with pytest.raises(AttributeError):
            grid.rows = 5

    def test_from_display_area_floors_to_whole_blocks(self):
        """Grid is derived from the display area in 30px blocks."""
        grid = GridSpec.from_display_area(width=610, height=455)
        assert grid.rows == 15
        assert grid.cols == 20

    def test_cells_row_major(self):
        """cells() walks the grid row by row."""
        grid = GridSpec(rows=2, cols=3)
        assert list(grid.cells()) == [
            (0, 0), (0, 1), (0, 2),
            (1, 0), (1, 1), (1, 2),
        ]
        assert grid.area == 6


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(2, 8)], LEFT)
        assert list(snake.positions) == [(2, 8)]
        assert snake.heading == LEFT

    def test_snake_positions_are_coordinates_in_a_deque(self):
        """Positions are stored as Coordinates in a deque."""
        snake = Snake([(2, 8), (2, 9)], LEFT)
        assert isinstance(snake.positions, deque)
        assert snake.head == Coordinate(row=2, col=8)
        assert snake.tail == Coordinate(row=2, col=9)

    def test_empty_snake_raises(self):
        """A snake always has at least one segment."""
        with pytest.raises(ValueError):
            Snake([], LEFT)

    def test_unknown_heading_raises(self):
        """Heading must be one of the four directions."""
        with pytest.raises(ValueError):
            Snake([(1, 1)], "NORTH")

    @pytest.mark.parametrize("heading,expected", [
        (LEFT, (2, 7)),
        (RIGHT, (2, 9)),
        (UP, (1, 8)),
        (DOWN, (3, 8)),
    ])
    def test_next_head_offsets(self, heading, expected):
        """Left/right change the column, up/down change the row."""
        snake = Snake([(2, 8)], LEFT)
        assert snake.next_head(heading) == expected

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original alone."""
        snake = Snake([(2, 8)], LEFT)
        clone = snake.copy()
        clone.positions.appendleft(Coordinate(2, 7))
        assert len(snake) == 1
        assert len(clone) == 2

    def test_membership_accepts_plain_tuples(self):
        """`in` works with Coordinates and plain tuples."""
        snake = Snake([(2, 8), (2, 9)], LEFT)
        assert (2, 9) in snake
        assert Coordinate(2, 8) in snake
        assert (3, 3) not in snake
        assert snake.occupancy() == {(2, 8), (2, 9)}


class StubRandom(random.Random):
    """Random whose randrange always lands on an occupied cell."""

    def randrange(self, *args, **kwargs):
        return 0


class TestFoodPlacer:
    """Tests for FoodPlacer."""

    def test_food_never_on_snake(self):
        """Placed food is never in the occupied set."""
        grid = GridSpec(rows=4, cols=4)
        occupied = {Coordinate(0, c) for c in range(4)} | {Coordinate(1, 0)}
        placer = FoodPlacer(rng=random.Random(1))
        for _ in range(200):
            food = placer.place(grid, occupied)
            assert grid.contains(food)
            assert food not in occupied

    def test_all_free_cells_are_reachable(self):
        """Sampling covers every free cell of a small grid."""
        grid = GridSpec(rows=2, cols=2)
        placer = FoodPlacer(rng=random.Random(5))
        seen = {placer.place(grid, {(0, 0)}) for _ in range(300)}
        assert seen == {(0, 1), (1, 0), (1, 1)}

    def test_nearly_full_grid_falls_back_to_free_cells(self):
        """When random draws keep missing, the single free cell is still found."""
        grid = GridSpec(rows=3, cols=3)
        occupied = set(grid.cells()) - {Coordinate(2, 2)}
        placer = FoodPlacer(rng=StubRandom())
        assert placer.place(grid, occupied) == (2, 2)

    def test_full_grid_raises(self):
        """No free cell means FoodPlacementExhausted, not an endless loop."""
        grid = GridSpec(rows=2, cols=2)
        with pytest.raises(FoodPlacementExhausted) as exc_info:
            FoodPlacer().place(grid, set(grid.cells()))
        assert exc_info.value.rows == 2
        assert exc_info.value.cols == 2

    def test_place_has_no_side_effects_on_occupied(self):
        """The occupied collection passed in is not modified."""
        occupied = [(0, 0)]
        FoodPlacer(rng=random.Random(0)).place(GridSpec(rows=3, cols=3), occupied)
        assert occupied == [(0, 0)]


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick_number=3,
            status="running",
            snake_positions=[(1, 1), (1, 2)],
            heading=LEFT,
            food=(0, 0),
            score=10,
            high_score=40,
            rows=3,
            cols=3,
            elapsed="00:02",
        )
        values.update(overrides)
        return GameState(**values)

    def test_print_board(self):
        """Board marks food, head and body with row 0 on top."""
        assert self._state().print_board() == "* . .\n. @ o\n. . ."

    def test_print_board_without_food(self):
        """A cleared board has no food marker."""
        board = self._state(food=None).print_board()
        assert "*" not in board

    def test_to_dict(self):
        """to_dict returns JSON-friendly lists."""
        data = self._state().to_dict()
        assert data["snake_positions"] == [[1, 1], [1, 2]]
        assert data["food"] == [0, 0]
        assert data["score"] == 10
        assert data["end_reason"] is None

    def test_repr(self):
        """repr shows tick, length and score."""
        text = repr(self._state())
        assert "tick=3" in text
        assert "length=2" in text
        assert "score=10" in text
