"""
Observable state schemas for the interactive lesson controller.

Each model is an immutable snapshot; the engine components own the mutable
state and hand these out for rendering.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, computed_field


class Section(str, Enum):
    INTRO = "intro"
    VISUALIZATION = "visualization"
    STEPS = "steps"
    TYPES = "types"
    DRAWBACKS = "drawbacks"
    JOKE = "joke"
    QUIZ = "quiz"

    @classmethod
    def parse(cls, tag) -> Optional["Section"]:
        """Return the Section for a tag, or None if the tag is unknown."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None


SECTION_ORDER = list(Section)


class SnapshotModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class VisualizerState(SnapshotModel):
    active_index: int = 0
    is_playing: bool = False


class ModalPayload(SnapshotModel):
    title: str
    failure_text: str
    fix_text: str
    color: str = "#4bb1b4"


class DisclosureState(SnapshotModel):
    modal: Optional[ModalPayload] = None
    expanded_drawback_id: Optional[Union[int, str]] = None

    @property
    def modal_open(self) -> bool:
        return self.modal is not None


class QuizAnswer(SnapshotModel):
    selected_option_index: int
    revealed: bool = True


class QuizFeedback(SnapshotModel):
    correct: bool
    option_text: str
    explanation: str


class QuizScore(SnapshotModel):
    correct: int = 0
    answered: int = 0
    total: int = 0

    @computed_field
    @property
    def percent(self) -> int:
        if self.answered == 0:
            return 0
        return round(self.correct / self.answered * 100)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.answered == self.total


class LessonSnapshot(SnapshotModel):
    """Everything the view needs to render one tick of a lesson page."""
    topic: str
    active_section: Section = Section.INTRO
    visualizer: VisualizerState = VisualizerState()
    disclosure: DisclosureState = DisclosureState()
    quiz: dict[int, QuizAnswer] = {}


# -----------------------------------------------------------------------------
# Practice activities
# -----------------------------------------------------------------------------

class ActivityScore(SnapshotModel):
    """Fractional score over a fixed number of questions or stages."""
    earned: float = 0.0
    possible: int = 0
    passing: float = 0.0

    @computed_field
    @property
    def percent(self) -> int:
        if self.possible == 0:
            return 0
        return round(self.earned / self.possible * 100)

    @property
    def passed(self) -> bool:
        return self.possible > 0 and self.earned / self.possible >= self.passing


class ArrangeResult(SnapshotModel):
    question_id: int
    order: list[str] = []
    matches: dict[str, str] = {}
    score: float = 0.0
    timed_out: bool = False


class CaseStageResult(SnapshotModel):
    stage_id: str
    selected_option_id: str
    correct: bool


class DecisionRecord(SnapshotModel):
    phase_id: str
    phase_title: str
    decision_id: str
    decision_title: str
    outcome: str = ""
    is_failure: bool = False


class SimulationOutcome(SnapshotModel):
    context: dict[str, float]
    success: float
    title: str
    description: str
    lessons: list[str] = []
    budget_variance: float = 0.0
    timeline_variance: float = 0.0
