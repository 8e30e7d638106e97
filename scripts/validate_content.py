#!/usr/bin/env python3
"""
validate_content.py - Check lesson content files before shipping.

Loads every topic in the catalog and reports content rules the runtime does
not enforce:
- each quiz question has exactly one correct option
- step ids are unique within a topic
- type story and drawback ids are unique within a topic
- catalog topics have a content file
- practice activities: order questions rank 1..n, match targets point at
  real items, case study stages have exactly one correct option, and
  simulation effects only touch metrics the scenario tracks

Usage:
  python scripts/validate_content.py
  python scripts/validate_content.py --content-dir path/to/content --strict
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sdlcexplorer.classroom import ACTIVITIES_DIRNAME, ContentLoader
from sdlcexplorer.config import DEFAULT_CONTENT_DIR
from sdlcexplorer.errors import ContentError
from sdlcexplorer.schemas import LessonContent, TrackActivities

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Checks
# -----------------------------------------------------------------------------

def _duplicates(values) -> list:
    return [value for value, count in Counter(values).items() if count > 1]


def check_lesson(lesson: LessonContent) -> list[str]:
    """Return human-readable problems found in one topic's content."""
    problems = []

    for q_idx, question in enumerate(lesson.quiz):
        if not question.options:
            problems.append(f"quiz question {q_idx + 1} has no options")
            continue
        correct = sum(1 for option in question.options if option.correct)
        if correct != 1:
            problems.append(
                f"quiz question {q_idx + 1} has {correct} correct options (expected 1)"
            )

    for step_id in _duplicates(step.id for step in lesson.steps):
        problems.append(f"duplicate step id {step_id}")
    for story_id in _duplicates(story.id for story in lesson.type_stories):
        problems.append(f"duplicate type story id {story_id!r}")
    for drawback_id in _duplicates(drawback.id for drawback in lesson.drawbacks):
        problems.append(f"duplicate drawback id {drawback_id!r}")

    return problems


def check_activities(activities: TrackActivities) -> list[str]:
    """Return human-readable problems found in one track's activities."""
    problems = []

    for question in activities.ordering:
        label = f"arrangement question {question.id}"
        if question.kind == "order":
            ranks = sorted(item.correct_order or 0 for item in question.items)
            if ranks != list(range(1, len(question.items) + 1)):
                problems.append(f"{label} ranks {ranks} are not 1..{len(question.items)}")
        else:
            item_ids = {item.id for item in question.items}
            for target in question.targets:
                if target.correct_match not in item_ids:
                    problems.append(f"{label} target {target.id!r} matches unknown item {target.correct_match!r}")
            if not question.targets:
                problems.append(f"{label} has no targets")
    for question_id in _duplicates(question.id for question in activities.ordering):
        problems.append(f"duplicate arrangement question id {question_id}")

    for study in activities.case_studies:
        for stage in study.stages:
            correct = sum(1 for option in stage.options if option.correct)
            if correct != 1:
                problems.append(
                    f"case study {study.id!r} stage {stage.id!r} has {correct} correct options (expected 1)"
                )

    for simulation in activities.simulations:
        metrics = set(simulation.initial_context)
        for phase in simulation.phases:
            if not phase.decisions:
                problems.append(f"simulation {simulation.id!r} phase {phase.id!r} has no decisions")
            for decision in phase.decisions:
                unknown = sorted(set(decision.effects) - metrics)
                if unknown:
                    problems.append(
                        f"simulation {simulation.id!r} decision {decision.id!r} affects untracked metrics {unknown}"
                    )

    return problems


def validate(content_dir: Path) -> dict[str, list[str]]:
    """
    Validate every catalog topic and each track's practice activities.

    Returns problems keyed by topic id, or "activities:<track>".
    """
    loader = ContentLoader(content_dir)
    report: dict[str, list[str]] = {}

    topics = loader.list_topics()
    if not topics:
        report["<catalog>"] = ["no topics found"]
        return report

    for entry in topics:
        if not (content_dir / entry.filename).exists():
            report[entry.id] = [f"content file missing: {entry.filename}"]
            continue
        try:
            lesson = loader.get_lesson(entry.id)
        except ContentError as e:
            report[entry.id] = [e.reason]
            continue
        problems = check_lesson(lesson)
        if problems:
            report[entry.id] = problems
        logger.info(
            f"  {entry.id}: {len(lesson.steps)} steps, {len(lesson.type_stories)} stories, "
            f"{len(lesson.drawbacks)} drawbacks, {len(lesson.quiz)} questions"
        )

    for track in sorted({entry.track for entry in topics}):
        if not (content_dir / ACTIVITIES_DIRNAME / f"{track}.yaml").exists():
            continue
        try:
            activities = loader.get_activities(track)
        except ContentError as e:
            report[f"activities:{track}"] = [e.reason]
            continue
        problems = check_activities(activities)
        if problems:
            report[f"activities:{track}"] = problems

    return report


def main():
    parser = argparse.ArgumentParser(
        description="Validate lesson content files",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=DEFAULT_CONTENT_DIR,
        help="Directory holding catalog.yaml and topic files"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any problem is found"
    )

    args = parser.parse_args()

    logger.info(f"Validating content in {args.content_dir}...")
    report = validate(args.content_dir)

    if not report:
        logger.info("All content valid")
        return 0

    for topic, problems in report.items():
        for problem in problems:
            logger.warning(f"{topic}: {problem}")
    logger.info(f"{sum(len(p) for p in report.values())} problems in {len(report)} topics")

    return 1 if args.strict else 0


if __name__ == "__main__":
    sys.exit(main())
