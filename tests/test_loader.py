"""Tests for YAML content loading and topic navigation."""

import logging

import pytest

from sdlcexplorer.classroom import ContentLoader, TopicNavigator
from sdlcexplorer.errors import ContentError

CATALOG = """
topics:
  - id: planning
    title: Planning
  - id: design
    title: System Design
  - id: ai_review
    title: AI Code Review
    track: ai-sdlc
    file: review.yml
"""

PLANNING = """
summary: Decide what to build.
steps:
  - id: 1
    title: Scope
  - id: 2
    title: Estimate
drawbacks:
  - id: scope-creep
    title: Scope Creep
    problem: It grows.
    resolution: Say no.
quiz:
  - question: What comes first?
    options:
      - text: Code
      - text: Scope
        correct: true
"""

BUNDLED_TOPICS = [
    "planning",
    "analysis",
    "design",
    "implementation",
    "testing",
    "deployment",
    "maintenance",
    "review",
    "ai_planning",
    "ai_analysis",
    "ai_design",
    "ai_implementation",
    "ai_testing",
    "ai_deployment",
    "ai_maintenance",
    "ai_review",
]


@pytest.fixture
def content_dir(tmp_path):
    (tmp_path / "catalog.yaml").write_text(CATALOG, encoding="utf-8")
    (tmp_path / "planning.yaml").write_text(PLANNING, encoding="utf-8")
    return tmp_path


class TestBundledContent:
    """The packaged content must always load."""

    def test_catalog(self):
        loader = ContentLoader()
        ids = [entry.id for entry in loader.list_topics()]
        assert ids == BUNDLED_TOPICS

    @pytest.mark.parametrize("topic", BUNDLED_TOPICS)
    def test_every_topic_loads(self, topic):
        lesson = ContentLoader().get_lesson(topic)
        assert lesson.topic == topic
        assert lesson.steps
        assert lesson.quiz
        for question in lesson.quiz:
            assert question.correct_index is not None

    def test_planning_drawbacks_have_ids(self):
        drawbacks = ContentLoader().get_drawbacks("planning")
        assert [d.id for d in drawbacks] == [1, 2, 3, 4]


class TestContentLoader:
    def test_loads_topic(self, content_dir):
        loader = ContentLoader(content_dir)
        lesson = loader.get_lesson("planning")
        assert lesson.title == "Planning"
        assert lesson.track == "sdlc"
        assert [s.title for s in lesson.steps] == ["Scope", "Estimate"]
        assert lesson.find_drawback("scope-creep") is not None
        assert lesson.quiz[0].correct_index == 1

    def test_accessors(self, content_dir):
        loader = ContentLoader(content_dir)
        assert len(loader.get_steps("planning")) == 2
        assert loader.get_type_stories("planning") == []
        assert len(loader.get_quiz("planning")) == 1

    def test_cached(self, content_dir):
        loader = ContentLoader(content_dir)
        assert loader.get_lesson("planning") is loader.get_lesson("planning")

    def test_missing_file_is_empty(self, content_dir, caplog):
        loader = ContentLoader(content_dir)
        with caplog.at_level(logging.WARNING):
            lesson = loader.get_lesson("design")
        assert lesson.is_empty
        assert lesson.title == "System Design"
        assert "Content file missing" in caplog.text

    def test_unknown_topic_is_empty(self, content_dir):
        lesson = ContentLoader(content_dir).get_lesson("deployment")
        assert lesson.is_empty
        assert lesson.topic == "deployment"

    def test_custom_filename(self, content_dir):
        (content_dir / "review.yml").write_text("steps:\n  - id: 1\n    title: Diff\n", encoding="utf-8")
        lesson = ContentLoader(content_dir).get_lesson("ai_review")
        assert lesson.track == "ai-sdlc"
        assert lesson.steps[0].title == "Diff"

    def test_missing_catalog(self, tmp_path):
        loader = ContentLoader(tmp_path)
        assert loader.list_topics() == []
        assert loader.get_lesson("planning").is_empty

    def test_invalid_yaml(self, content_dir):
        (content_dir / "planning.yaml").write_text("steps: [unclosed", encoding="utf-8")
        with pytest.raises(ContentError) as exc_info:
            ContentLoader(content_dir).get_lesson("planning")
        assert "invalid YAML" in exc_info.value.reason

    def test_schema_violation(self, content_dir):
        (content_dir / "planning.yaml").write_text("steps:\n  - title: No id\n", encoding="utf-8")
        with pytest.raises(ContentError):
            ContentLoader(content_dir).get_lesson("planning")

    def test_non_mapping_file(self, content_dir):
        (content_dir / "planning.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ContentError):
            ContentLoader(content_dir).get_lesson("planning")

    def test_bad_catalog_row(self, tmp_path):
        (tmp_path / "catalog.yaml").write_text("topics:\n  - title: No id\n", encoding="utf-8")
        with pytest.raises(ContentError):
            ContentLoader(tmp_path).list_topics()


ACTIVITIES = """
ordering:
  - id: 1
    kind: order
    question: Order the phases
    items:
      - id: planning
        text: Planning
        correct_order: 1
      - id: design
        text: Design
        correct_order: 2
case_studies:
  - id: shop
    title: Online Shop
    stages:
      - id: planning
        title: Planning
        question: First?
        options:
          - id: a
            text: Code
          - id: b
            text: Requirements
            correct: true
"""


class TestActivities:
    def test_bundled_traditional_track(self):
        activities = ContentLoader().get_activities("sdlc")
        assert activities.track == "sdlc"
        assert len(activities.ordering) == 5
        assert len(activities.case_studies) == 1
        assert len(activities.case_studies[0].stages) == 7
        assert len(activities.simulations) == 1
        assert len(activities.simulations[0].phases) == 4

    def test_bundled_ai_track(self):
        activities = ContentLoader().get_activities("ai-sdlc")
        assert len(activities.ordering) == 5
        assert len(activities.case_studies[0].stages) == 7
        simulation = activities.simulations[0]
        assert "ai_efficiency" in simulation.initial_context

    def test_loads_track_file(self, tmp_path):
        (tmp_path / "activities").mkdir()
        (tmp_path / "activities" / "sdlc.yaml").write_text(ACTIVITIES, encoding="utf-8")
        activities = ContentLoader(tmp_path).get_activities("sdlc")
        assert activities.ordering[0].correct_sequence == ["planning", "design"]
        assert activities.find_case_study("shop").stages[0].correct_option_id == "b"
        assert activities.simulations == []

    def test_missing_track_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            activities = ContentLoader(tmp_path).get_activities("sdlc")
        assert activities.is_empty
        assert "No practice activities" in caplog.text

    def test_cached(self, tmp_path):
        (tmp_path / "activities").mkdir()
        (tmp_path / "activities" / "sdlc.yaml").write_text(ACTIVITIES, encoding="utf-8")
        loader = ContentLoader(tmp_path)
        assert loader.get_activities("sdlc") is loader.get_activities("sdlc")

    def test_schema_violation(self, tmp_path):
        (tmp_path / "activities").mkdir()
        (tmp_path / "activities" / "sdlc.yaml").write_text(
            "ordering:\n  - id: 1\n    kind: shuffle\n    question: Which one\n", encoding="utf-8"
        )
        with pytest.raises(ContentError):
            ContentLoader(tmp_path).get_activities("sdlc")

    def test_non_mapping_file(self, tmp_path):
        (tmp_path / "activities").mkdir()
        (tmp_path / "activities" / "sdlc.yaml").write_text("- a list\n", encoding="utf-8")
        with pytest.raises(ContentError):
            ContentLoader(tmp_path).get_activities("sdlc")


class TestTopicNavigator:
    def test_next_and_previous_within_track(self, content_dir):
        nav = TopicNavigator(ContentLoader(content_dir))
        assert nav.get_next_topic_id("planning") == "design"
        assert nav.get_next_topic_id("design") is None
        assert nav.get_previous_topic_id("design") == "planning"
        assert nav.get_previous_topic_id("planning") is None
        assert nav.get_next_topic_id("ai_review") is None

    def test_unknown_topic(self, content_dir):
        nav = TopicNavigator(ContentLoader(content_dir))
        assert nav.get_next_topic_id("deployment") is None
        assert nav.get_topic_position("deployment") == (0, 3)

    def test_position(self, content_dir):
        nav = TopicNavigator(ContentLoader(content_dir))
        assert nav.get_topic_position("design") == (2, 2)
        assert nav.get_topic_position("ai_review") == (1, 1)

    def test_first_topic(self, content_dir):
        nav = TopicNavigator(ContentLoader(content_dir))
        assert nav.get_first_topic_id() == "planning"
        assert nav.get_first_topic_id("ai-sdlc") == "ai_review"
        assert nav.get_first_topic_id("devops") is None

    def test_tracks(self, content_dir):
        nav = TopicNavigator(ContentLoader(content_dir))
        tracks = nav.get_tracks()
        assert [t.name for t in tracks] == ["sdlc", "ai-sdlc"]
        assert [e.id for e in tracks[0].topics] == ["planning", "design"]
        assert nav.total_topics == 3

    def test_empty_catalog(self, tmp_path):
        nav = TopicNavigator(ContentLoader(tmp_path))
        assert nav.total_topics == 0
        assert nav.get_first_topic_id() is None
        assert nav.get_tracks() == []
