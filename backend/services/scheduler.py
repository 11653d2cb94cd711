"""
Cooperative repeating-task scheduler for game sessions.

Each GameScheduler wraps its own ``schedule.Scheduler`` so that independent
games in one process never share the module-level default job list. Jobs run
one at a time from ``run_pending`` and never overlap.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)

SCHEDULER_LOOP_SLEEP_SECONDS = 0.05


class RepeatingTask:
    """Handle for a scheduled repeating job. Cancelling is idempotent."""

    def __init__(self, scheduler: schedule.Scheduler, job: schedule.Job, name: str):
        self._scheduler = scheduler
        self._job = job
        self.name = name
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self._scheduler.cancel_job(self._job)
        self.active = False
        logger.debug("Cancelled task %s", self.name)

    @property
    def interval_seconds(self) -> float:
        return self._job.interval

    def __repr__(self):
        return f"<RepeatingTask {self.name} every={self._job.interval}s active={self.active}>"


class GameScheduler:
    """Schedules callbacks every N seconds and runs the due ones on demand."""

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        self._scheduler = schedule.Scheduler()
        self._sleep = sleep

    def every(self, seconds: float, callback: Callable[[], None], name: Optional[str] = None) -> RepeatingTask:
        if seconds <= 0:
            raise ValueError(f"Task interval must be positive, got {seconds}.")
        name = name or getattr(callback, "__name__", "task")
        job = self._scheduler.every(seconds).seconds.do(callback)
        logger.debug("Scheduled task %s every %ss", name, seconds)
        return RepeatingTask(self._scheduler, job, name)

    @property
    def pending_tasks(self) -> int:
        return len(self._scheduler.jobs)

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def cancel_all(self) -> None:
        self._scheduler.clear()

    def run_forever(self, until: Callable[[], bool], poll_seconds: float = SCHEDULER_LOOP_SLEEP_SECONDS) -> None:
        """Run due jobs until ``until()`` is true or nothing is scheduled."""
        while not until():
            idle = self._scheduler.idle_seconds
            if idle is None:
                logger.info("No scheduled tasks left; leaving scheduler loop.")
                return
            if idle > 0:
                self._sleep(min(idle, poll_seconds))
            self.run_pending()
