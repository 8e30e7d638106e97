"""
TopicNavigator - Lesson sequencing across the topic catalog.

Provides:
- Next/previous topic navigation
- Topic position ("Lesson 3 of 8")
- Track grouping (traditional SDLC vs AI-augmented SDLC)

Navigation itself (switching pages) belongs to the view; this only works
out which topic comes next.
"""

from dataclasses import dataclass
from typing import Optional

from sdlcexplorer.schemas import TopicEntry

from .loader import ContentLoader


@dataclass
class NavigationTrack:
    """Track with its topics in catalog order."""
    name: str
    topics: list[TopicEntry]


class TopicNavigator:
    """
    Navigate through the catalog in order.

    Previous/next stay inside the topic's own track so a learner finishing
    the last traditional lesson isn't dropped into the AI track.
    """

    def __init__(self, loader: ContentLoader):
        self.loader = loader
        self._topics: list[TopicEntry] = []
        self._topic_index: dict[str, int] = {}
        self._refresh_topic_order()

    def _refresh_topic_order(self):
        self._topics = self.loader.list_topics()
        self._topic_index = {entry.id: idx for idx, entry in enumerate(self._topics)}

    @property
    def total_topics(self) -> int:
        return len(self._topics)

    def _track_topics(self, topic_id: str) -> list[TopicEntry]:
        if topic_id not in self._topic_index:
            return []
        track = self._topics[self._topic_index[topic_id]].track
        return [entry for entry in self._topics if entry.track == track]

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def get_first_topic_id(self, track: Optional[str] = None) -> Optional[str]:
        for entry in self._topics:
            if track is None or entry.track == track:
                return entry.id
        return None

    def get_next_topic_id(self, current_id: str) -> Optional[str]:
        """Get the ID of the next topic in the same track."""
        ids = [entry.id for entry in self._track_topics(current_id)]
        if not ids:
            return None
        idx = ids.index(current_id)
        if idx + 1 >= len(ids):
            return None
        return ids[idx + 1]

    def get_previous_topic_id(self, current_id: str) -> Optional[str]:
        """Get the ID of the previous topic in the same track."""
        ids = [entry.id for entry in self._track_topics(current_id)]
        if not ids:
            return None
        idx = ids.index(current_id)
        if idx <= 0:
            return None
        return ids[idx - 1]

    def get_topic_position(self, topic_id: str) -> tuple[int, int]:
        """
        Get topic position within its track as (current, total).

        Returns (0, total topics) if the topic is not found.
        """
        ids = [entry.id for entry in self._track_topics(topic_id)]
        if not ids:
            return (0, len(self._topics))
        return (ids.index(topic_id) + 1, len(ids))

    # -------------------------------------------------------------------------
    # Tracks
    # -------------------------------------------------------------------------

    def get_tracks(self) -> list[NavigationTrack]:
        """Group topics by track, preserving first-seen track order."""
        tracks: dict[str, list[TopicEntry]] = {}
        for entry in self._topics:
            tracks.setdefault(entry.track, []).append(entry)
        return [NavigationTrack(name=name, topics=topics) for name, topics in tracks.items()]
