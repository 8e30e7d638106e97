"""
SDLC Explorer Engine - The interactive lesson controller.

This module provides:
- Scheduler: cooperative recurring tasks on a logical clock
- StepVisualizer: autoplaying step carousel
- DisclosureStore: story modal and single-expand pitfall accordion
- QuizEngine: locked per-question answers and derived score
- LessonController: per-page section selector composing the above
- ArrangementEngine: timed phase ordering and matching questions
- CaseStudyEngine: staged case study decisions
- SimulationEngine: project decision simulation and outcome scoring
"""

from .scheduler import (
    Scheduler,
    ScheduledTask,
    monotonic_ms,
)

from .visualizer import StepVisualizer

from .disclosure import (
    DisclosureStore,
    story_payload,
)

from .quiz import QuizEngine

from .controller import LessonController

from .arrangement import ArrangementEngine

from .case_study import CaseStudyEngine

from .simulation import (
    SimulationEngine,
    calculate_outcome,
)

__all__ = [
    # Scheduling
    "Scheduler",
    "ScheduledTask",
    "monotonic_ms",
    # Components
    "StepVisualizer",
    "DisclosureStore",
    "story_payload",
    "QuizEngine",
    # Controller
    "LessonController",
    # Practice activities
    "ArrangementEngine",
    "CaseStudyEngine",
    "SimulationEngine",
    "calculate_outcome",
]
