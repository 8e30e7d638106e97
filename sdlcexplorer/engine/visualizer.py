"""
StepVisualizer - Autoplaying carousel over a topic's process steps.

Provides:
- Timer-driven advance of the active step (wraps around)
- Manual step selection that leaves autoplay running
- Play/pause gating without destroying the timer
- Explicit teardown of the scheduled task
"""

import logging
from typing import Optional

from sdlcexplorer.config import DEFAULT_TICK_PERIOD_MS
from sdlcexplorer.schemas import VisualizerState

from .scheduler import Scheduler, ScheduledTask

logger = logging.getLogger(__name__)


class StepVisualizer:
    """
    Carousel state for the process visualization section.

    The recurring task is owned by the visualizer: start() replaces it,
    destroy() cancels it. With zero steps no task exists, so the modulo in
    the tick never sees a zero divisor.
    """

    def __init__(self, scheduler: Scheduler, period_ms: float = DEFAULT_TICK_PERIOD_MS):
        """
        Initialize visualizer.

        Args:
            scheduler: Scheduler that drives the autoplay tick
            period_ms: Autoplay period in milliseconds
        """
        self.scheduler = scheduler
        self.period_ms = period_ms
        self.step_count = 0
        self.active_index = 0
        self.is_playing = False
        self._task: Optional[ScheduledTask] = None

    @property
    def state(self) -> VisualizerState:
        return VisualizerState(active_index=self.active_index, is_playing=self.is_playing)

    @property
    def has_timer(self) -> bool:
        return self._task is not None and not self._task.cancelled

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self, step_count: int):
        """Reset to the first step and start autoplay for step_count steps."""
        self._cancel_task()
        self.step_count = max(int(step_count), 0)
        self.active_index = 0
        self.is_playing = True

        if self.step_count == 0:
            logger.debug("No steps to visualize; autoplay timer disabled")
            return

        self._task = self.scheduler.call_every(self.period_ms, self._on_tick)

    def destroy(self):
        """Cancel the autoplay timer. Safe to call more than once."""
        self._cancel_task()

    def _cancel_task(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _on_tick(self):
        if not self.is_playing or self.step_count == 0:
            return
        self.active_index = (self.active_index + 1) % self.step_count

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def select_step(self, index: int) -> bool:
        """
        Jump to a step. Autoplay keeps running from the new position.

        Returns True if the selection was applied.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < self.step_count:
            logger.debug(f"Rejected step {index} (step count {self.step_count})")
            return False
        self.active_index = index
        return True

    def stop(self):
        self.is_playing = False

    def resume(self):
        self.is_playing = True

    def toggle(self) -> bool:
        """Flip autoplay; returns the new is_playing value."""
        self.is_playing = not self.is_playing
        return self.is_playing
