"""
Runtime configuration for GridSnake.

Values come from the environment, optionally seeded from a local .env file.
Game rules (tick interval, points per food) are constants in domain.constants
and are deliberately not configurable here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = Path(__file__).resolve().parent

DEFAULT_DB_PATH = str(BACKEND_DIR / "gridsnake.db")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_GRID_ROWS = 20
DEFAULT_GRID_COLS = 20
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


def get_db_path() -> str:
    return os.getenv("SNAKE_DB_PATH") or DEFAULT_DB_PATH


def get_log_level() -> str:
    return (os.getenv("SNAKE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def get_grid_size() -> tuple:
    """Return (rows, cols) for the board."""
    return (
        _int_env("SNAKE_GRID_ROWS", DEFAULT_GRID_ROWS),
        _int_env("SNAKE_GRID_COLS", DEFAULT_GRID_COLS),
    )
