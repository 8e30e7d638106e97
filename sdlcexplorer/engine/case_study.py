"""
CaseStudyEngine - One decision per stage of a staged case study.

Each stage runs select -> submit -> next. Submitting locks the selection and
reveals the explanation; the learner then moves to the next stage.
"""

import logging
from typing import Optional

from sdlcexplorer.config import CASE_STUDY_PASSING_SCORE
from sdlcexplorer.schemas import ActivityScore, CaseStage, CaseStageResult, CaseStudy

logger = logging.getLogger(__name__)


class CaseStudyEngine:
    """Tracks progress through the stages of a single case study."""

    def __init__(self, study: Optional[CaseStudy] = None, passing_score: float = CASE_STUDY_PASSING_SCORE):
        self.passing_score = passing_score
        self.study: Optional[CaseStudy] = None
        self.stage_index = 0
        self.selected_option_id: Optional[str] = None
        self.revealed = False
        self.completed = False
        self._results: list[CaseStageResult] = []
        self.load(study)

    def load(self, study: Optional[CaseStudy]):
        self.study = study
        self.reset()

    def reset(self):
        """Start the case study again from its first stage."""
        self.stage_index = 0
        self.selected_option_id = None
        self.revealed = False
        self.completed = False
        self._results = []

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    @property
    def stages(self) -> list[CaseStage]:
        return list(self.study.stages) if self.study else []

    @property
    def stage_count(self) -> int:
        return len(self.stages)

    @property
    def current_stage(self) -> Optional[CaseStage]:
        if self.completed or self.stage_index >= self.stage_count:
            return None
        return self.stages[self.stage_index]

    @property
    def is_last_stage(self) -> bool:
        return self.stage_index == self.stage_count - 1

    @property
    def results(self) -> list[CaseStageResult]:
        return list(self._results)

    @property
    def feedback(self) -> Optional[CaseStageResult]:
        """Result for the current stage once it has been submitted."""
        if not self.revealed or not self._results:
            return None
        return self._results[-1]

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def select_option(self, option_id: str) -> bool:
        """Choose an option. Locked once the stage is submitted."""
        stage = self.current_stage
        if stage is None or self.revealed:
            return False
        if stage.find_option(option_id) is None:
            logger.debug(f"Rejected option {option_id!r} for stage {stage.id}")
            return False
        self.selected_option_id = option_id
        return True

    def submit(self) -> bool:
        """Record the selected option and reveal the explanation."""
        stage = self.current_stage
        if stage is None or self.revealed or self.selected_option_id is None:
            return False
        option = stage.find_option(self.selected_option_id)
        self._results.append(CaseStageResult(
            stage_id=stage.id,
            selected_option_id=option.id,
            correct=option.correct,
        ))
        self.revealed = True
        return True

    def next_stage(self) -> bool:
        """Advance after a submitted stage, completing after the last one."""
        if self.current_stage is None or not self.revealed:
            return False
        if self.is_last_stage:
            self.completed = True
            score = self.score()
            logger.info(f"Case study {self.study.id} complete: {score.percent}%")
        else:
            self.stage_index += 1
        self.selected_option_id = None
        self.revealed = False
        return True

    def score(self) -> ActivityScore:
        return ActivityScore(
            earned=sum(1 for result in self._results if result.correct),
            possible=self.stage_count,
            passing=self.passing_score,
        )
