"""
QuizEngine - Per-question answers with locked feedback.

Selecting an option records the answer and reveals feedback in one step.
Once revealed, a question accepts no further selections for the lifetime
of the lesson page.
"""

import logging
from typing import Optional, Sequence

from sdlcexplorer.schemas import QuizAnswer, QuizFeedback, QuizQuestion, QuizScore

logger = logging.getLogger(__name__)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class QuizEngine:
    """
    Tracks the learner's answer per question index.

    Scores are derived from the recorded answers on demand, never stored.
    """

    def __init__(self, questions: Optional[Sequence[QuizQuestion]] = None):
        self.questions: list[QuizQuestion] = list(questions or [])
        self._answers: dict[int, QuizAnswer] = {}

    def load(self, questions: Optional[Sequence[QuizQuestion]]):
        """Replace the question set and clear every answer."""
        self.questions = list(questions or [])
        self._answers = {}

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def answers(self) -> dict[int, QuizAnswer]:
        """Copy of the recorded answers keyed by question index."""
        return dict(self._answers)

    # -------------------------------------------------------------------------
    # Answering
    # -------------------------------------------------------------------------

    def select_option(self, question_index: int, option_index: int) -> bool:
        """
        Answer a question and reveal its feedback.

        Returns True if the answer was recorded; False for an already
        answered question or an out-of-range index.
        """
        if not _is_index(question_index) or not 0 <= question_index < self.question_count:
            logger.debug(f"Rejected answer for unknown question {question_index}")
            return False

        existing = self._answers.get(question_index)
        if existing is not None and existing.revealed:
            logger.debug(f"Question {question_index} already answered; ignoring")
            return False

        options = self.questions[question_index].options
        if not _is_index(option_index) or not 0 <= option_index < len(options):
            logger.debug(f"Rejected option {option_index} for question {question_index}")
            return False

        self._answers[question_index] = QuizAnswer(selected_option_index=option_index, revealed=True)
        return True

    def answer(self, question_index: int) -> Optional[QuizAnswer]:
        if not _is_index(question_index):
            return None
        return self._answers.get(question_index)

    def is_answered(self, question_index: int) -> bool:
        answer = self.answer(question_index)
        return answer is not None and answer.revealed

    # -------------------------------------------------------------------------
    # Derived results
    # -------------------------------------------------------------------------

    def is_correct(self, question_index: int) -> bool:
        answer = self.answer(question_index)
        if answer is None:
            return False
        return self.questions[question_index].options[answer.selected_option_index].correct

    def feedback(self, question_index: int) -> Optional[QuizFeedback]:
        """Feedback for a revealed question, or None if unanswered."""
        answer = self.answer(question_index)
        if answer is None or not answer.revealed:
            return None
        option = self.questions[question_index].options[answer.selected_option_index]
        return QuizFeedback(
            correct=option.correct,
            option_text=option.text,
            explanation=option.explanation,
        )

    def score(self) -> QuizScore:
        correct = sum(1 for idx in self._answers if self.is_correct(idx))
        return QuizScore(
            correct=correct,
            answered=len(self._answers),
            total=self.question_count,
        )

    @property
    def is_complete(self) -> bool:
        return self.score().is_complete
