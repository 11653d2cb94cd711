#!/usr/bin/env python3
"""
Play GridSnake in the terminal with the autopilot at the controls.

Usage:
    python backend/cli/play.py [--rows 20 --cols 20] [--games 3] [--fast]

Examples:
    # One real-time game (300 ms per tick) on the configured grid
    python backend/cli/play.py

    # Derive the grid from a 600x450 px display area, like the browser board
    python backend/cli/play.py --width 600 --height 450

    # Ten games as fast as possible, only printing results
    python backend/cli/play.py --games 10 --fast --quiet --seed 7
"""

import argparse
import logging
import os
import random
import sys
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config  # noqa: E402
from data_access import create_high_score_store  # noqa: E402
from domain import FoodPlacer, GridSpec, SessionController, SessionStatus  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players import AutopilotPlayer, Player  # noqa: E402
from services.terminal_renderer import TerminalRenderer  # noqa: E402

logger = logging.getLogger(__name__)


class AutopilotDriver:
    """
    Renderer wrapper that feeds a player's move into the session after every
    frame, so the next tick sees it as buffered input.
    """

    def __init__(self, session: SessionController, player: Player, renderer=None, max_ticks: Optional[int] = None):
        self.session = session
        self.player = player
        self.renderer = renderer
        self.max_ticks = max_ticks

    def render(self, state: GameState) -> None:
        if self.renderer is not None:
            self.renderer.render(state)

        if self.max_ticks and state.tick_number >= self.max_ticks:
            logger.info("Reached max ticks (%s); stopping session.", self.max_ticks)
            self.session.end()
            return

        self.session.request_heading(self.player.get_move(state))

    def game_over(self, state: GameState) -> None:
        if self.renderer is not None:
            self.renderer.game_over(state)


def build_grid(args) -> GridSpec:
    if args.width or args.height:
        if not (args.width and args.height):
            raise ValueError("--width and --height must be given together")
        return GridSpec.from_display_area(args.width, args.height)

    rows, cols = config.get_grid_size()
    return GridSpec(
        rows=rows if args.rows is None else args.rows,
        cols=cols if args.cols is None else args.cols,
    )


def play_games(args) -> list:
    """Run the requested number of sessions and return their final states."""
    grid = build_grid(args)
    rng = random.Random(args.seed)
    store = create_high_score_store(db_path=args.db, in_memory=args.memory)

    renderer = TerminalRenderer(show_board=not args.quiet)
    session = SessionController(
        grid,
        high_score_store=store,
        food_placer=FoodPlacer(rng=rng),
    )
    session.renderer = AutopilotDriver(
        session,
        AutopilotPlayer(rng=rng),
        renderer=renderer,
        max_ticks=args.max_ticks,
    )

    results = []
    for game_number in range(1, args.games + 1):
        logger.info("Starting game %s/%s", game_number, args.games)
        if game_number == 1:
            session.start()
        else:
            session.restart()

        if args.fast:
            while session.status == SessionStatus.RUNNING:
                session.step()
        else:
            session.run_until_ended()

        results.append(session.snapshot())

    return results


def main():
    parser = argparse.ArgumentParser(
        description='Play GridSnake in the terminal with the autopilot player',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Grid options
    parser.add_argument('--rows', type=int, help='Grid rows (default: SNAKE_GRID_ROWS or 20)')
    parser.add_argument('--cols', type=int, help='Grid columns (default: SNAKE_GRID_COLS or 20)')
    parser.add_argument('--width', type=int, help='Display width in pixels to derive the grid from')
    parser.add_argument('--height', type=int, help='Display height in pixels to derive the grid from')

    # Session options
    parser.add_argument('--games', type=int, default=1, help='Number of games to play (default: 1)')
    parser.add_argument('--seed', type=int, help='Random seed for food placement and the autopilot')
    parser.add_argument('--max-ticks', type=int, help='Stop a game after this many ticks')
    parser.add_argument('--fast', action='store_true', help='Run ticks back to back instead of every 300 ms')
    parser.add_argument('--quiet', action='store_true', help='Only print game-over summaries')

    # Storage options
    parser.add_argument('--db', type=str, help='SQLite file for the high score (default: SNAKE_DB_PATH)')
    parser.add_argument('--memory', action='store_true', help='Keep the high score in memory only')

    args = parser.parse_args()

    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)

    if args.games < 1:
        parser.error('--games must be at least 1')

    try:
        results = play_games(args)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    best = max(state.score for state in results)
    print(f"\nPlayed {len(results)} game(s). Best score: {best}. High score: {results[-1].high_score}")


if __name__ == '__main__':
    main()
