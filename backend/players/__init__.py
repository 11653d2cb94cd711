"""
Player implementations for GridSnake.

Players produce heading requests in place of keyboard input.
"""

from .base import Player
from .autopilot import AutopilotPlayer

__all__ = [
    'Player',
    'AutopilotPlayer',
]
