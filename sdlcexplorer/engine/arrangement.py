"""
ArrangementEngine - Timed phase ordering and matching questions.

One question is active at a time. Order questions start from the items in
file order and the learner moves items into place; match questions start
empty and the learner drops items onto targets. Submitting scores the
question and moves on. When a scheduler is supplied, start() arms a
per-question countdown that submits the question when time runs out.
"""

import logging
from typing import Optional, Sequence

from sdlcexplorer.config import ARRANGE_PASSING_SCORE, DEFAULT_ARRANGE_TIME_LIMIT_MS
from sdlcexplorer.schemas import ActivityScore, ArrangeQuestion, ArrangeResult

from .scheduler import Scheduler, ScheduledTask

logger = logging.getLogger(__name__)

COUNTDOWN_STEP_MS = 1000


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def score_order(question: ArrangeQuestion, order: Sequence[str]) -> float:
    """Fraction of items sitting at their correct 1-based position."""
    if not question.items:
        return 0.0
    placed = 0
    for position, item_id in enumerate(order, start=1):
        item = question.find_item(item_id)
        if item is not None and item.correct_order == position:
            placed += 1
    return placed / len(question.items)


def score_matches(question: ArrangeQuestion, matches: dict[str, str]) -> float:
    """Fraction of targets holding their correct item."""
    if not question.targets:
        return 0.0
    matched = sum(1 for target in question.targets if matches.get(target.id) == target.correct_match)
    return matched / len(question.targets)


class ArrangementEngine:
    """
    Walks the learner through a list of arrangement questions.

    Per-question scores are fractional, so a half-right ordering earns half
    a point. The final score is the mean over all questions.
    """

    def __init__(
        self,
        questions: Optional[Sequence[ArrangeQuestion]] = None,
        scheduler: Optional[Scheduler] = None,
        time_limit_ms: float = DEFAULT_ARRANGE_TIME_LIMIT_MS,
        passing_score: float = ARRANGE_PASSING_SCORE,
    ):
        """
        Initialize engine.

        Args:
            questions: Questions in presentation order
            scheduler: Scheduler that drives the per-question countdown
                (no countdown when omitted)
            time_limit_ms: Time allowed for each question
            passing_score: Fraction of the total needed to pass
        """
        self.scheduler = scheduler
        self.time_limit_ms = time_limit_ms
        self.passing_score = passing_score
        self.questions: list[ArrangeQuestion] = []
        self.current_index = 0
        self.order: list[str] = []
        self.matches: dict[str, str] = {}
        self.time_remaining_ms = time_limit_ms
        self._results: list[ArrangeResult] = []
        self.started = False
        self._task: Optional[ScheduledTask] = None
        self.load(questions)

    def load(self, questions: Optional[Sequence[ArrangeQuestion]]):
        """Replace the question set. The countdown waits for start()."""
        self.questions = list(questions or [])
        self.started = False
        self.reset()

    def start(self):
        """Begin the quiz from the first question with the countdown running."""
        self.started = True
        self.reset()

    def reset(self):
        """Clear every result and restart from the first question."""
        self.current_index = 0
        self._results = []
        self._start_question()

    def destroy(self):
        """Cancel the countdown. Safe to call more than once."""
        self._cancel_task()

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[ArrangeQuestion]:
        if self.current_index < self.question_count:
            return self.questions[self.current_index]
        return None

    @property
    def is_complete(self) -> bool:
        return self.current_index >= self.question_count

    @property
    def results(self) -> list[ArrangeResult]:
        return list(self._results)

    @property
    def has_timer(self) -> bool:
        return self._task is not None and not self._task.cancelled

    @property
    def unplaced_items(self) -> list[str]:
        """Item ids of the current match question not yet on a target."""
        question = self.current_question
        if question is None:
            return []
        placed = set(self.matches.values())
        return [item.id for item in question.items if item.id not in placed]

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def move_item(self, item_id: str, position: int) -> bool:
        """Move an item of the current order question to a 0-based position."""
        question = self.current_question
        if question is None or question.kind != "order":
            return False
        if item_id not in self.order:
            logger.debug(f"Rejected move of unknown item {item_id!r}")
            return False
        if not _is_index(position) or not 0 <= position < len(self.order):
            logger.debug(f"Rejected move of {item_id!r} to position {position}")
            return False
        self.order.remove(item_id)
        self.order.insert(position, item_id)
        return True

    def place_item(self, target_id: str, item_id: str) -> bool:
        """
        Drop an item onto a target of the current match question.

        An item sits on at most one target, so placing it again moves it.
        A target holds one item; placing onto it replaces the previous one.
        """
        question = self.current_question
        if question is None or question.kind != "match":
            return False
        if question.find_target(target_id) is None or question.find_item(item_id) is None:
            logger.debug(f"Rejected placing {item_id!r} on {target_id!r}")
            return False
        for other, placed in list(self.matches.items()):
            if placed == item_id:
                del self.matches[other]
        self.matches[target_id] = item_id
        return True

    def clear_target(self, target_id: str) -> bool:
        if target_id not in self.matches:
            return False
        del self.matches[target_id]
        return True

    def question_score(self) -> float:
        """Score the current question as it stands."""
        question = self.current_question
        if question is None:
            return 0.0
        if question.kind == "order":
            return score_order(question, self.order)
        return score_matches(question, self.matches)

    def submit(self, timed_out: bool = False) -> bool:
        """Record the current question and advance. False once complete."""
        question = self.current_question
        if question is None:
            return False

        self._results.append(ArrangeResult(
            question_id=question.id,
            order=list(self.order) if question.kind == "order" else [],
            matches=dict(self.matches),
            score=self.question_score(),
            timed_out=timed_out,
        ))
        self.current_index += 1

        if self.is_complete:
            self._cancel_task()
            final = self.score()
            logger.info(f"Arrangement quiz complete: {final.percent}% ({'passed' if final.passed else 'not passed'})")
        else:
            self._start_question()
        return True

    def score(self) -> ActivityScore:
        return ActivityScore(
            earned=sum(result.score for result in self._results),
            possible=self.question_count,
            passing=self.passing_score,
        )

    # -------------------------------------------------------------------------
    # Countdown
    # -------------------------------------------------------------------------

    def _start_question(self):
        question = self.current_question
        self.order = [item.id for item in question.items] if question and question.kind == "order" else []
        self.matches = {}
        self.time_remaining_ms = self.time_limit_ms

        self._cancel_task()
        if self.started and self.scheduler is not None and question is not None:
            self._task = self.scheduler.call_every(COUNTDOWN_STEP_MS, self._on_countdown)

    def _cancel_task(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _on_countdown(self):
        self.time_remaining_ms = max(self.time_remaining_ms - COUNTDOWN_STEP_MS, 0)
        if self.time_remaining_ms == 0:
            logger.info(f"Time up on arrangement question {self.current_question.id}")
            self.submit(timed_out=True)
