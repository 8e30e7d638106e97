"""
Scheduler - Cooperative recurring tasks on a logical millisecond clock.

The scheduler owns no thread. The view layer moves time forward, either by an
explicit amount (advance) or against a monotonic clock (poll), and due
callbacks run synchronously on the caller's thread in due-time order.

Every recurring task is returned as a ScheduledTask handle owned by whoever
scheduled it. A cancelled task never fires again, which is what lets a
visualizer tear down its autoplay before its bounds change.
"""

import time
from typing import Callable, Optional


def monotonic_ms() -> float:
    """Monotonic wall clock in milliseconds."""
    return time.monotonic() * 1000.0


class ScheduledTask:
    """Handle for a recurring callback registered with a Scheduler."""

    def __init__(self, scheduler: "Scheduler", period_ms: float, callback: Callable[[], None], due_at: float):
        self._scheduler = scheduler
        self.period_ms = period_ms
        self.callback = callback
        self.due_at = due_at
        self.fire_count = 0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        """Stop the task. Idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        self._scheduler._discard(self)

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else f"due at {self.due_at:.0f}ms"
        return f"<ScheduledTask every {self.period_ms:.0f}ms, {state}>"


class Scheduler:
    """
    Logical clock with recurring tasks.

    Time starts at 0. When a clock callable is supplied, poll() advances the
    logical time to the clock's elapsed time since the scheduler was created.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Initialize scheduler.

        Args:
            clock: Optional millisecond clock (e.g. monotonic_ms) used by poll()
        """
        self._clock = clock
        self._origin = clock() if clock else 0.0
        self._now = 0.0
        self._tasks: list[ScheduledTask] = []

    @property
    def now(self) -> float:
        """Current logical time in milliseconds."""
        return self._now

    @property
    def pending(self) -> list[ScheduledTask]:
        """Live tasks ordered by next due time."""
        return sorted(self._tasks, key=lambda task: task.due_at)

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Schedule callback every period_ms, first run one period from now.

        Raises:
            ValueError: If period_ms is not positive
        """
        if period_ms <= 0:
            raise ValueError(f"Period must be positive, got {period_ms}")
        task = ScheduledTask(self, period_ms, callback, self._now + period_ms)
        self._tasks.append(task)
        return task

    def _discard(self, task: ScheduledTask):
        if task in self._tasks:
            self._tasks.remove(task)

    def advance(self, elapsed_ms: float) -> int:
        """Move time forward by elapsed_ms. Returns the number of callbacks run."""
        if elapsed_ms < 0:
            return 0
        return self.advance_to(self._now + elapsed_ms)

    def advance_to(self, target_ms: float) -> int:
        """
        Move time forward to target_ms, running due callbacks in order.

        A callback may cancel its own or another task; cancelled tasks are
        skipped from that point on. Returns the number of callbacks run.
        """
        fired = 0
        while True:
            due = [task for task in self._tasks if task.due_at <= target_ms]
            if not due:
                break
            task = min(due, key=lambda t: t.due_at)
            self._now = task.due_at
            task.due_at += task.period_ms
            task.fire_count += 1
            task.callback()
            fired += 1
        if target_ms > self._now:
            self._now = target_ms
        return fired

    def poll(self) -> int:
        """Advance to the bound clock's current time."""
        if self._clock is None:
            return 0
        return self.advance_to(self._clock() - self._origin)

    def cancel_all(self):
        for task in list(self._tasks):
            task.cancel()
