"""
SDLC Explorer Viewer - Rendering components for lesson display.

This module provides:
- Section rendering (tabs, process flow, cards, modal, accordion, jokes)
- Quiz question, feedback and score display
- Practice activities (arrangement, case studies, simulations)
"""

from .lesson import (
    SECTION_LABELS,
    NEXT_SECTION_LABELS,
    get_lesson_css,
    render_section_tabs,
    render_intro,
    render_process_step,
    render_visualization,
    render_step_cards,
    render_type_card,
    render_story_modal,
    render_drawback,
    render_joke,
    render_joke_break,
)

from .quiz import (
    get_quiz_css,
    render_quiz_feedback,
    render_quiz_question,
    render_quiz_score,
)

from .practice import (
    METRIC_LABELS,
    get_practice_css,
    format_countdown,
    render_arrange_question,
    render_arrange_results,
    render_case_intro,
    render_case_stage,
    render_case_feedback,
    render_case_summary,
    render_metrics,
    render_decision_history,
    render_simulation_outcome,
)

__all__ = [
    # Lesson rendering
    "SECTION_LABELS",
    "NEXT_SECTION_LABELS",
    "get_lesson_css",
    "render_section_tabs",
    "render_intro",
    "render_process_step",
    "render_visualization",
    "render_step_cards",
    "render_type_card",
    "render_story_modal",
    "render_drawback",
    "render_joke",
    "render_joke_break",
    # Quiz
    "get_quiz_css",
    "render_quiz_feedback",
    "render_quiz_question",
    "render_quiz_score",
    # Practice
    "METRIC_LABELS",
    "get_practice_css",
    "format_countdown",
    "render_arrange_question",
    "render_arrange_results",
    "render_case_intro",
    "render_case_stage",
    "render_case_feedback",
    "render_case_summary",
    "render_metrics",
    "render_decision_history",
    "render_simulation_outcome",
]
