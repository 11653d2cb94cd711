"""
Domain entities for the GridSnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, terminal I/O).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    POINTS_PER_FOOD, TICK_INTERVAL_SECONDS, INITIAL_SNAKE, INITIAL_HEADING,
)
from .errors import SnakeGameError, FoodPlacementExhausted, SessionStateError
from .grid import Coordinate, GridSpec
from .snake import Snake
from .food import FoodPlacer
from .input_arbiter import InputArbiter
from .tick_engine import TickEngine, TickOutcome, TickResult, CollisionReason
from .game_state import GameState
from .session import SessionController, SessionStatus, format_elapsed

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'POINTS_PER_FOOD', 'TICK_INTERVAL_SECONDS', 'INITIAL_SNAKE', 'INITIAL_HEADING',
    'SnakeGameError', 'FoodPlacementExhausted', 'SessionStateError',
    'Coordinate', 'GridSpec',
    'Snake',
    'FoodPlacer',
    'InputArbiter',
    'TickEngine', 'TickOutcome', 'TickResult', 'CollisionReason',
    'GameState',
    'SessionController', 'SessionStatus', 'format_elapsed',
]
