"""
LessonController - One lesson page's interactive state.

Combines:
- Section selection (flat selector over the seven lesson sections)
- StepVisualizer (autoplaying process steps)
- DisclosureStore (story modal and pitfall accordion)
- QuizEngine (locked per-question feedback)

The same controller serves every topic; it is parameterised by the topic's
LessonContent. The view issues commands and renders the returned snapshot.
"""

import inspect
import logging
from typing import Optional

from sdlcexplorer.config import DEFAULT_TICK_PERIOD_MS
from sdlcexplorer.schemas import (
    DrawbackId,
    LessonContent,
    LessonSnapshot,
    ModalPayload,
    Section,
    SECTION_ORDER,
)

from .disclosure import DisclosureStore, story_payload
from .quiz import QuizEngine
from .scheduler import Scheduler
from .visualizer import StepVisualizer

logger = logging.getLogger(__name__)


class LessonController:
    """
    Per-page controller. Create on page mount, close() on unmount.

    Section changes never reset the visualizer, disclosure or quiz state;
    those live for the whole lesson page. A content change (new topic)
    restarts them.
    """

    COMMANDS = (
        "go_to_section",
        "next_section",
        "previous_section",
        "select_step",
        "stop_autoplay",
        "resume_autoplay",
        "toggle_autoplay",
        "open_story",
        "open_modal",
        "close_modal",
        "toggle_drawback",
        "answer_question",
    )

    def __init__(
        self,
        content: Optional[LessonContent] = None,
        scheduler: Optional[Scheduler] = None,
        period_ms: float = DEFAULT_TICK_PERIOD_MS,
    ):
        """
        Initialize controller.

        Args:
            content: Topic content bundle (empty bundle if None)
            scheduler: Scheduler driving autoplay (a fresh one if None)
            period_ms: Visualizer autoplay period in milliseconds
        """
        self.scheduler = scheduler or Scheduler()
        self.section = Section.INTRO
        self.visualizer = StepVisualizer(self.scheduler, period_ms=period_ms)
        self.disclosure = DisclosureStore()
        self.quiz = QuizEngine()
        self.content = LessonContent.empty("untitled")
        self.closed = False
        self.load_content(content or LessonContent.empty("untitled"))

    def __enter__(self) -> "LessonController":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def topic(self) -> str:
        return self.content.topic

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load_content(self, content: LessonContent):
        """
        Switch to a new content bundle.

        Cancels the old autoplay task before restarting it for the new step
        list, clears quiz answers and closes any open disclosure.
        """
        if self.closed:
            return
        self.content = content
        self.visualizer.start(len(content.steps))
        self.quiz.load(content.quiz)
        self.disclosure.reset()
        logger.info(
            f"Loaded topic '{content.topic}': {len(content.steps)} steps, "
            f"{len(content.quiz)} quiz questions"
        )

    def close(self):
        """Tear down the autoplay timer. Further commands are ignored."""
        if self.closed:
            return
        self.visualizer.destroy()
        self.closed = True

    def advance(self, elapsed_ms: float) -> int:
        """Let elapsed_ms pass on the scheduler; returns ticks run."""
        if self.closed:
            return 0
        return self.scheduler.advance(elapsed_ms)

    def poll(self) -> int:
        """Advance the scheduler to its clock's current time."""
        if self.closed:
            return 0
        return self.scheduler.poll()

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def go_to_section(self, tag) -> bool:
        section = Section.parse(tag)
        if section is None or self.closed:
            logger.debug(f"Rejected section tag {tag!r}")
            return False
        self.section = section
        return True

    def next_section(self) -> bool:
        idx = SECTION_ORDER.index(self.section)
        if idx + 1 >= len(SECTION_ORDER):
            return False
        return self.go_to_section(SECTION_ORDER[idx + 1])

    def previous_section(self) -> bool:
        idx = SECTION_ORDER.index(self.section)
        if idx <= 0:
            return False
        return self.go_to_section(SECTION_ORDER[idx - 1])

    # -------------------------------------------------------------------------
    # Visualizer
    # -------------------------------------------------------------------------

    def select_step(self, index: int) -> bool:
        if self.closed:
            return False
        return self.visualizer.select_step(index)

    def stop_autoplay(self) -> bool:
        if self.closed:
            return False
        self.visualizer.stop()
        return True

    def resume_autoplay(self) -> bool:
        if self.closed:
            return False
        self.visualizer.resume()
        return True

    def toggle_autoplay(self) -> bool:
        if self.closed:
            return False
        self.visualizer.toggle()
        return True

    # -------------------------------------------------------------------------
    # Disclosure
    # -------------------------------------------------------------------------

    def open_story(self, story_id: str) -> bool:
        """Open the failure/fix modal for a type story of this topic."""
        story = self.content.find_story(story_id)
        if story is None or self.closed:
            logger.debug(f"Rejected unknown story {story_id!r}")
            return False
        self.disclosure.open_modal(story_payload(story))
        return True

    def open_modal(self, payload: ModalPayload) -> bool:
        if self.closed or not isinstance(payload, ModalPayload):
            return False
        self.disclosure.open_modal(payload)
        return True

    def close_modal(self) -> bool:
        if self.closed:
            return False
        self.disclosure.close_modal()
        return True

    def toggle_drawback(self, drawback_id: DrawbackId) -> bool:
        if self.content.find_drawback(drawback_id) is None or self.closed:
            logger.debug(f"Rejected unknown drawback {drawback_id!r}")
            return False
        self.disclosure.toggle_drawback(drawback_id)
        return True

    # -------------------------------------------------------------------------
    # Quiz
    # -------------------------------------------------------------------------

    def answer_question(self, question_index: int, option_index: int) -> bool:
        if self.closed:
            return False
        return self.quiz.select_option(question_index, option_index)

    # -------------------------------------------------------------------------
    # View interface
    # -------------------------------------------------------------------------

    def dispatch(self, command: str, *args) -> LessonSnapshot:
        """
        Run a named view command and return the resulting snapshot.

        Unknown commands and wrong argument counts leave state untouched.
        """
        if command not in self.COMMANDS:
            logger.warning(f"Unknown lesson command: {command!r}")
            return self.snapshot()
        handler = getattr(self, command)
        try:
            inspect.signature(handler).bind(*args)
        except TypeError as e:
            logger.warning(f"Bad arguments for {command}: {e}")
            return self.snapshot()
        handler(*args)
        return self.snapshot()

    def snapshot(self) -> LessonSnapshot:
        return LessonSnapshot(
            topic=self.content.topic,
            active_section=self.section,
            visualizer=self.visualizer.state,
            disclosure=self.disclosure.state,
            quiz=self.quiz.answers,
        )
