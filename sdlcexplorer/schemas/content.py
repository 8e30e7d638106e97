"""
Lesson content schemas for SDLC Explorer.

Defines immutable Pydantic models for the per-topic content bundle:
- Process steps (visualizer and steps grid)
- Type stories ("what went wrong / the fix" case studies)
- Drawbacks (pitfall accordion)
- Quiz questions with per-option explanations
- Joke break
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union


class ContentModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# -----------------------------------------------------------------------------
# Process steps
# -----------------------------------------------------------------------------

class Step(ContentModel):
    """One stage of a process. Order in the topic's list is display order."""
    id: int
    title: str
    icon: str = ""
    description: str = ""
    color: str = "#1ABC9C"
    sub_steps: list[str] = []


# -----------------------------------------------------------------------------
# Case studies and pitfalls
# -----------------------------------------------------------------------------

class StoryNarrative(ContentModel):
    title: str
    scenario: str
    failure: str
    fix: str


class TypeStory(ContentModel):
    id: str
    name: str
    color: str = "#4bb1b4"
    icon: str = ""
    emoji: str = ""
    story: StoryNarrative


DrawbackId = Union[int, str]


class Drawback(ContentModel):
    id: DrawbackId
    title: str
    problem: str
    resolution: str
    icon: str = ""
    color: Optional[str] = None


# -----------------------------------------------------------------------------
# Quiz
# -----------------------------------------------------------------------------

class QuizOption(ContentModel):
    text: str
    correct: bool = False
    explanation: str = ""


class QuizQuestion(ContentModel):
    """
    Multiple choice question.

    Exactly one option should be correct. This is a content rule checked by
    scripts/validate_content.py, not at runtime.
    """
    question: str
    options: list[QuizOption] = Field(default_factory=list)

    @property
    def correct_index(self) -> Optional[int]:
        for idx, option in enumerate(self.options):
            if option.correct:
                return idx
        return None


# -----------------------------------------------------------------------------
# Joke break
# -----------------------------------------------------------------------------

class Joke(ContentModel):
    setup: str
    punchline: str


class Quote(ContentModel):
    text: str
    author: str = ""
    takeaway: str = ""


# -----------------------------------------------------------------------------
# Catalog and content bundle
# -----------------------------------------------------------------------------

class TopicEntry(ContentModel):
    """Catalog row: where a topic's content lives and how it is labelled."""
    id: str
    title: str
    track: str = "sdlc"
    file: Optional[str] = None

    @property
    def filename(self) -> str:
        return self.file or f"{self.id}.yaml"


class LessonContent(ContentModel):
    topic: str
    title: str = ""
    track: str = "sdlc"
    summary: str = ""
    intro: str = ""
    steps: list[Step] = []
    type_stories: list[TypeStory] = []
    drawbacks: list[Drawback] = []
    quiz: list[QuizQuestion] = []
    jokes: list[Joke] = []
    quote: Optional[Quote] = None

    @classmethod
    def empty(cls, topic: str, title: str = "") -> "LessonContent":
        """Valid bundle with no content, used when a topic is missing."""
        return cls(topic=topic, title=title or topic.replace("_", " ").title())

    @property
    def is_empty(self) -> bool:
        return not (self.steps or self.type_stories or self.drawbacks or self.quiz)

    def find_story(self, story_id: str) -> Optional[TypeStory]:
        for story in self.type_stories:
            if story.id == story_id:
                return story
        return None

    def find_drawback(self, drawback_id: DrawbackId) -> Optional[Drawback]:
        # True == 1 in Python; a bool is never a drawback id
        if isinstance(drawback_id, bool):
            return None
        for drawback in self.drawbacks:
            if drawback.id == drawback_id:
                return drawback
        return None
