"""
SDLC Explorer Classroom - Runtime components for loading and navigating lessons.

This module provides:
- ContentLoader: Load topic content from YAML files
- TopicNavigator: Topic sequencing within a track
"""

from .loader import (
    ContentLoader,
    CATALOG_FILENAME,
    ACTIVITIES_DIRNAME,
)

from .navigator import (
    TopicNavigator,
    NavigationTrack,
)

__all__ = [
    # Loader
    "ContentLoader",
    "CATALOG_FILENAME",
    "ACTIVITIES_DIRNAME",
    # Navigator
    "TopicNavigator",
    "NavigationTrack",
]
