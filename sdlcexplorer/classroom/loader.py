"""
ContentLoader - Load lesson content from YAML files.

Provides read-only access to:
- The topic catalog (catalog.yaml)
- Per-topic content bundles (<topic>.yaml)
- Steps, type stories, drawbacks and quiz questions per topic
- Practice activities per track (activities/<track>.yaml)

Missing catalog entries or files degrade to empty content. A file that
exists but can't be parsed or validated raises ContentError.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from sdlcexplorer.config import DEFAULT_CONTENT_DIR
from sdlcexplorer.errors import ContentError
from sdlcexplorer.schemas import (
    Drawback,
    LessonContent,
    QuizQuestion,
    Step,
    TopicEntry,
    TrackActivities,
    TypeStory,
)

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "catalog.yaml"
ACTIVITIES_DIRNAME = "activities"


def _read_yaml(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ContentError(path, f"invalid YAML: {e}") from e


class ContentLoader:
    """
    Load topic content from a content directory.

    Lessons are parsed once and cached; content is immutable for the
    lifetime of the loader.
    """

    def __init__(self, content_dir: str | Path | None = None):
        """
        Initialize loader.

        Args:
            content_dir: Directory holding catalog.yaml and topic files
                (default: the packaged content)
        """
        self.content_dir = Path(content_dir) if content_dir else DEFAULT_CONTENT_DIR
        self._catalog: Optional[list[TopicEntry]] = None
        self._lessons: dict[str, LessonContent] = {}
        self._activities: dict[str, TrackActivities] = {}

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def list_topics(self) -> list[TopicEntry]:
        """Get all catalog topics in display order."""
        if self._catalog is None:
            self._catalog = self._load_catalog()
        return list(self._catalog)

    def get_topic(self, topic: str) -> Optional[TopicEntry]:
        for entry in self.list_topics():
            if entry.id == topic:
                return entry
        return None

    def _load_catalog(self) -> list[TopicEntry]:
        path = self.content_dir / CATALOG_FILENAME
        if not path.exists():
            logger.warning(f"Catalog not found: {path}. No topics available.")
            return []

        data = _read_yaml(path) or {}
        if not isinstance(data, dict):
            raise ContentError(path, "top level must be a mapping")
        try:
            return [TopicEntry(**row) for row in data.get("topics", [])]
        except (TypeError, ValidationError) as e:
            raise ContentError(path, str(e)) from e

    # -------------------------------------------------------------------------
    # Lessons
    # -------------------------------------------------------------------------

    def get_lesson(self, topic: str) -> LessonContent:
        """Get the full content bundle for a topic (empty if unavailable)."""
        if topic not in self._lessons:
            self._lessons[topic] = self._load_lesson(topic)
        return self._lessons[topic]

    def _load_lesson(self, topic: str) -> LessonContent:
        entry = self.get_topic(topic)
        if entry is None:
            logger.warning(f"Topic not in catalog: {topic}")
            return LessonContent.empty(topic)

        path = self.content_dir / entry.filename
        if not path.exists():
            logger.warning(f"Content file missing for topic {topic}: {path}")
            return LessonContent.empty(topic, entry.title)

        data = _read_yaml(path) or {}
        if not isinstance(data, dict):
            raise ContentError(path, "top level must be a mapping")

        data.setdefault("title", entry.title)
        data.setdefault("track", entry.track)
        data["topic"] = topic
        try:
            lesson = LessonContent(**data)
        except ValidationError as e:
            raise ContentError(path, str(e)) from e

        logger.info(f"Loaded content for {topic} from {path.name}")
        return lesson

    # -------------------------------------------------------------------------
    # Per-kind accessors
    # -------------------------------------------------------------------------

    def get_steps(self, topic: str) -> list[Step]:
        return list(self.get_lesson(topic).steps)

    def get_type_stories(self, topic: str) -> list[TypeStory]:
        return list(self.get_lesson(topic).type_stories)

    def get_drawbacks(self, topic: str) -> list[Drawback]:
        return list(self.get_lesson(topic).drawbacks)

    def get_quiz(self, topic: str) -> list[QuizQuestion]:
        return list(self.get_lesson(topic).quiz)

    # -------------------------------------------------------------------------
    # Practice activities
    # -------------------------------------------------------------------------

    def get_activities(self, track: str) -> TrackActivities:
        """Get the practice activities for a track (empty if unavailable)."""
        if track not in self._activities:
            self._activities[track] = self._load_activities(track)
        return self._activities[track]

    def _load_activities(self, track: str) -> TrackActivities:
        path = self.content_dir / ACTIVITIES_DIRNAME / f"{track}.yaml"
        if not path.exists():
            logger.warning(f"No practice activities for track {track}: {path}")
            return TrackActivities.empty(track)

        data = _read_yaml(path) or {}
        if not isinstance(data, dict):
            raise ContentError(path, "top level must be a mapping")

        data["track"] = track
        try:
            activities = TrackActivities(**data)
        except ValidationError as e:
            raise ContentError(path, str(e)) from e

        logger.info(
            f"Loaded activities for {track}: {len(activities.ordering)} arrangement questions, "
            f"{len(activities.case_studies)} case studies, {len(activities.simulations)} simulations"
        )
        return activities
