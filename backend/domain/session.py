"""
SessionController - owns one play-through from start to game over.

Manages:
  - Lifecycle (idle -> running -> ended -> running on restart)
  - Score and high score bookkeeping
  - The periodic tick task and the elapsed-time task
  - Notifying the renderer after every tick and at game over
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from services.scheduler import GameScheduler, RepeatingTask

from .constants import (
    INITIAL_HEADING,
    INITIAL_SNAKE,
    POINTS_PER_FOOD,
    TICK_INTERVAL_SECONDS,
    TIMER_INTERVAL_SECONDS,
)
from .errors import SessionStateError
from .food import FoodPlacer
from .game_state import GameState
from .grid import Coordinate, GridSpec
from .input_arbiter import InputArbiter
from .snake import Snake
from .tick_engine import TickEngine, TickOutcome, TickResult

logger = logging.getLogger(__name__)

END_REASON_STOPPED = "stopped"
END_REASON_CLEARED = "cleared"


class SessionStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


def format_elapsed(seconds: int) -> str:
    """Format seconds as MM:SS. Minutes keep counting past 59."""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes:02d}:{secs:02d}"


class SessionController:
    """
    Drives a single-player snake game on a fixed grid.

    Collaborators are optional:
        scheduler: GameScheduler for the tick/timer tasks (a private one if omitted)
        high_score_store: object with load_high_score() / save_high_score(int)
        renderer: object with render(GameState) / game_over(GameState)
        food_placer: FoodPlacer, seedable for deterministic games
    """

    def __init__(
        self,
        grid: GridSpec,
        scheduler: Optional[GameScheduler] = None,
        high_score_store=None,
        renderer=None,
        food_placer: Optional[FoodPlacer] = None,
        initial_snake: Optional[List[Tuple[int, int]]] = None,
        initial_heading: str = INITIAL_HEADING,
    ):
        self.grid = grid
        self.scheduler = scheduler or GameScheduler()
        self.high_score_store = high_score_store
        self.renderer = renderer
        self.engine = TickEngine(food_placer or FoodPlacer())
        self.initial_snake = list(initial_snake or INITIAL_SNAKE)
        self.initial_heading = initial_heading

        self.status = SessionStatus.IDLE
        self.arbiter = InputArbiter(initial_heading)
        self.snake: Optional[Snake] = None
        self.food: Optional[Coordinate] = None
        self.score = 0
        self.high_score = self._load_high_score()
        self.final_score: Optional[int] = None
        self.end_reason: Optional[str] = None
        self.tick_number = 0
        self.elapsed_seconds = 0

        self._tick_task: Optional[RepeatingTask] = None
        self._timer_task: Optional[RepeatingTask] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> RepeatingTask:
        """
        Begin a fresh session and schedule its tick loop.

        Placement is validated before anything is touched, so a failed start
        leaves the previous session (and its tasks) as it was.
        """
        snake = Snake(self.initial_snake, self.initial_heading)
        outside = [cell for cell in snake if not self.grid.contains(cell)]
        if outside:
            raise ValueError(
                f"Initial snake {list(snake)} does not fit a {self.grid.rows}x{self.grid.cols} grid."
            )
        food = self.engine.food_placer.place(self.grid, snake.occupancy())

        self._cancel_tasks()
        self.snake = snake
        self.food = food
        self.arbiter.reset(self.initial_heading)
        self.score = 0
        self.final_score = None
        self.end_reason = None
        self.tick_number = 0
        self.elapsed_seconds = 0
        self.status = SessionStatus.RUNNING

        self._tick_task = self.scheduler.every(TICK_INTERVAL_SECONDS, self._on_tick, name="tick")
        self._timer_task = self.scheduler.every(TIMER_INTERVAL_SECONDS, self._on_timer, name="timer")

        logger.info(
            "Session started on %sx%s grid (high score %s), food at %s",
            self.grid.rows, self.grid.cols, self.high_score, self.food,
        )
        self._render()
        return self._tick_task

    def restart(self) -> RepeatingTask:
        """Start over from any state; the previous tick loop is cancelled first."""
        logger.info("Restarting session (previous status: %s)", self.status.value)
        return self.start()

    def end(self) -> None:
        """Stop a running session from outside. No-op otherwise."""
        if self.status != SessionStatus.RUNNING:
            return
        self._finish(END_REASON_STOPPED)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Forward a raw key press to the input arbiter while running."""
        if self.status != SessionStatus.RUNNING:
            return False
        return self.arbiter.handle_key(key)

    def request_heading(self, heading: str) -> bool:
        if self.status != SessionStatus.RUNNING:
            return False
        return self.arbiter.request(heading)

    def step(self) -> TickResult:
        """Advance the running session by exactly one tick."""
        if self.status != SessionStatus.RUNNING:
            raise SessionStateError(f"Cannot tick a session that is {self.status.value}.")

        heading = self.arbiter.commit()
        result = self.engine.tick(self.grid, self.snake, self.food, heading)
        self.tick_number += 1

        if result.outcome != TickOutcome.COLLIDED:
            self.snake = result.snake
            self.food = result.food

        if result.scored:
            self._add_points(POINTS_PER_FOOD)

        if result.outcome == TickOutcome.COLLIDED:
            self._finish(result.reason.value)
        elif result.outcome == TickOutcome.CLEARED:
            self._finish(END_REASON_CLEARED)
        else:
            logger.debug("Tick %s: head=%s heading=%s", self.tick_number, self.snake.head, heading)
            self._render()

        return result

    def run_until_ended(self) -> None:
        """Block, running scheduled ticks in real time, until the session ends."""
        self.scheduler.run_forever(until=lambda: self.status != SessionStatus.RUNNING)

    def _on_tick(self) -> None:
        if self.status == SessionStatus.RUNNING:
            self.step()

    def _on_timer(self) -> None:
        if self.status == SessionStatus.RUNNING:
            self.elapsed_seconds += 1

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    @property
    def elapsed_display(self) -> str:
        return format_elapsed(self.elapsed_seconds)

    def snapshot(self) -> GameState:
        return GameState(
            tick_number=self.tick_number,
            status=self.status.value,
            snake_positions=[tuple(pos) for pos in self.snake] if self.snake else [],
            heading=self.arbiter.committed_heading,
            food=tuple(self.food) if self.food is not None else None,
            score=self.score,
            high_score=self.high_score,
            rows=self.grid.rows,
            cols=self.grid.cols,
            elapsed=self.elapsed_display,
            end_reason=self.end_reason,
        )

    def _add_points(self, points: int) -> None:
        self.score += points
        if self.score <= self.high_score:
            return

        self.high_score = self.score
        logger.info("New high score: %s", self.high_score)
        if self.high_score_store is None:
            return
        try:
            self.high_score_store.save_high_score(self.high_score)
        except Exception:
            logger.exception("Failed to persist high score %s", self.high_score)

    def _load_high_score(self) -> int:
        if self.high_score_store is None:
            return 0
        try:
            return self.high_score_store.load_high_score()
        except Exception:
            logger.exception("Failed to load high score; starting from 0")
            return 0

    def _finish(self, reason: str) -> None:
        self._cancel_tasks()
        self.status = SessionStatus.ENDED
        self.end_reason = reason
        self.final_score = self.score
        logger.info(
            "Session ended (%s) after %s ticks with score %s",
            reason, self.tick_number, self.score,
        )
        if self.renderer is not None:
            self.renderer.game_over(self.snapshot())

    def _cancel_tasks(self) -> None:
        for task in (self._tick_task, self._timer_task):
            if task is not None:
                task.cancel()
        self._tick_task = None
        self._timer_task = None

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.render(self.snapshot())

    def __repr__(self):
        return (
            f"<SessionController status={self.status.value}, score={self.score}, "
            f"high_score={self.high_score}, ticks={self.tick_number}>"
        )
