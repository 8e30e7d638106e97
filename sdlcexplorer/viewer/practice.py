"""
Practice renderer - HTML for the hands-on activities of a track.

Features:
- Arrangement questions with countdown and per-question results
- Case study stages with explanation and best practices
- Simulation metrics dashboard, decision history and final outcome
"""

import html
from typing import Optional, Sequence

from sdlcexplorer.schemas import (
    ActivityScore,
    ArrangeQuestion,
    ArrangeResult,
    CaseStage,
    CaseStageResult,
    CaseStudy,
    DecisionRecord,
    SimulationOutcome,
)


METRIC_LABELS = {
    "budget": "💰 Budget",
    "timeline": "📅 Timeline (months)",
    "team_size": "👥 Team Size",
    "user_satisfaction": "😊 User Satisfaction",
    "security": "🔒 Security",
    "performance": "⚡ Performance",
    "reputation": "⭐ Reputation",
    "ai_efficiency": "🤖 AI Efficiency",
}


def get_practice_css() -> str:
    """Get CSS styles for practice activities."""
    return """
    <style>
    .practice-card {
        background: #f8f9fa;
        border-radius: 12px;
        padding: 1.2em 1.5em;
        margin: 1em 0;
        border-left: 4px solid #1ABC9C;
    }
    .practice-title {
        font-weight: 600;
        font-size: 1.1em;
        color: #2C3E50;
    }
    .practice-meta {
        color: #666;
        font-size: 0.9em;
    }
    .practice-timer-low {
        color: #c62828;
        font-weight: 600;
    }
    .arrange-list, .match-list {
        list-style: none;
        padding: 0;
    }
    .arrange-item, .match-target {
        background: white;
        border: 1px solid #ddd;
        border-radius: 8px;
        padding: 0.5em 1em;
        margin: 0.3em 0;
    }
    .match-slot {
        color: #1976D2;
        font-weight: 600;
    }
    .case-feedback-correct {
        background: #e8f5e9;
        color: #2e7d32;
        border-radius: 8px;
        padding: 1em;
    }
    .case-feedback-incorrect {
        background: #ffebee;
        color: #c62828;
        border-radius: 8px;
        padding: 1em;
    }
    .metric-grid {
        display: flex;
        flex-wrap: wrap;
        gap: 0.6em;
    }
    .metric {
        background: white;
        border-radius: 8px;
        padding: 0.5em 0.9em;
        border: 1px solid #e0e0e0;
    }
    .decision-failure {
        color: #c62828;
    }
    .outcome-box {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1.5em;
        text-align: center;
    }
    </style>
    """


def format_countdown(remaining_ms: float) -> str:
    """Format milliseconds as M:SS."""
    seconds = max(int(remaining_ms // 1000), 0)
    return f"{seconds // 60}:{seconds % 60:02d}"


# -----------------------------------------------------------------------------
# Arrangement
# -----------------------------------------------------------------------------

def render_arrange_question(
    question: ArrangeQuestion,
    index: int,
    total: int,
    order: Sequence[str] = (),
    matches: Optional[dict[str, str]] = None,
    remaining_ms: Optional[float] = None,
) -> str:
    """
    Render the active arrangement question.

    Args:
        question: The question being answered
        index: Position of the question in the quiz
        total: Number of questions in the quiz
        order: Current item order (order questions)
        matches: Current target -> item placement (match questions)
        remaining_ms: Countdown to show, if timed
    """
    matches = matches or {}
    parts = ['<div class="practice-card">']
    parts.append(f'<div class="practice-meta">Question {index + 1} of {total}')
    if remaining_ms is not None:
        css = "practice-timer-low" if remaining_ms <= 30_000 else ""
        parts.append(f' · <span class="{css}">⏱ {format_countdown(remaining_ms)}</span>')
    parts.append('</div>')
    parts.append(f'<div class="practice-title">{html.escape(question.question)}</div>')

    if question.kind == "order":
        parts.append('<ol class="arrange-list">')
        for item_id in order:
            item = question.find_item(item_id)
            if item is not None:
                parts.append(f'<li class="arrange-item">{html.escape(item.text)}</li>')
        parts.append('</ol>')
    else:
        parts.append('<ul class="match-list">')
        for target in question.targets:
            item = question.find_item(matches.get(target.id, ""))
            slot = html.escape(item.text) if item else "Drop here"
            parts.append(
                f'<li class="match-target">{html.escape(target.text)} → '
                f'<span class="match-slot">{slot}</span></li>'
            )
        parts.append('</ul>')

    parts.append('</div>')
    return ''.join(parts)


def render_arrange_results(questions: Sequence[ArrangeQuestion], results: Sequence[ArrangeResult], score: ActivityScore) -> str:
    """Render the final arrangement score with one line per question."""
    verdict = "🎉 Passed!" if score.passed else "Keep practicing!"
    parts = ['<div class="outcome-box">']
    parts.append(f'<div class="quiz-score-value">{score.percent}%</div>')
    parts.append(f'<div>{verdict}</div>')
    parts.append('</div><ul>')
    by_id = {question.id: question for question in questions}
    for result in results:
        question = by_id.get(result.question_id)
        label = html.escape(question.question) if question else f"Question {result.question_id}"
        note = " (time ran out)" if result.timed_out else ""
        parts.append(f'<li>{label}: {round(result.score * 100)}%{note}</li>')
    parts.append('</ul>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Case studies
# -----------------------------------------------------------------------------

def render_case_intro(study: CaseStudy) -> str:
    return (
        '<div class="practice-card">'
        f'<div class="practice-title">{html.escape(study.title)}</div>'
        f'<p>{html.escape(study.description)}</p>'
        f'<p><b>Scenario:</b> {html.escape(study.scenario)}</p>'
        f'<div class="practice-meta">{len(study.stages)} stages</div>'
        '</div>'
    )


def render_case_stage(stage: CaseStage, index: int, total: int, selected_option_id: Optional[str] = None) -> str:
    parts = ['<div class="practice-card">']
    parts.append(f'<div class="practice-meta">Stage {index + 1} of {total}</div>')
    parts.append(f'<div class="practice-title">{html.escape(stage.title)}</div>')
    if stage.context:
        parts.append(f'<p><b>Context:</b> {html.escape(stage.context)}</p>')
    if stage.situation:
        parts.append(f'<p><b>Situation:</b> {html.escape(stage.situation)}</p>')
    parts.append(f'<p><b>{html.escape(stage.question)}</b></p>')
    parts.append('<ul class="quiz-options">')
    for option in stage.options:
        css = "quiz-option quiz-option-selected" if option.id == selected_option_id else "quiz-option"
        parts.append(f'<li class="{css}">{html.escape(option.id.upper())}. {html.escape(option.text)}</li>')
    parts.append('</ul></div>')
    return ''.join(parts)


def render_case_feedback(stage: CaseStage, result: CaseStageResult) -> str:
    """Render the verdict, explanation and best practices for a stage."""
    css = "case-feedback-correct" if result.correct else "case-feedback-incorrect"
    verdict = "✅ Correct!" if result.correct else "❌ Not quite."
    parts = [f'<div class="{css}">{verdict}']
    parts.append(f'<p>{html.escape(stage.explanation)}</p>')
    if stage.best_practices:
        parts.append('<b>Best practices:</b><ul>')
        parts.extend(f'<li>{html.escape(practice)}</li>' for practice in stage.best_practices)
        parts.append('</ul>')
    parts.append('</div>')
    return ''.join(parts)


def render_case_summary(score: ActivityScore) -> str:
    verdict = "🎉 Well done!" if score.passed else "Review the stages and try again."
    return (
        '<div class="outcome-box">'
        f'<div class="quiz-score-value">{score.percent}%</div>'
        f'<div>You made correct decisions in {int(score.earned)} out of {score.possible} SDLC stages</div>'
        f'<div>{verdict}</div>'
        '</div>'
    )


# -----------------------------------------------------------------------------
# Simulations
# -----------------------------------------------------------------------------

def _format_metric(key: str, value: float) -> str:
    if key == "budget":
        return f"${value:,.0f}"
    if key == "timeline":
        return f"{value:g}"
    return f"{value:.0f}"


def render_metrics(context: dict[str, float]) -> str:
    """Render the live simulation metrics."""
    parts = ['<div class="metric-grid">']
    for key, value in context.items():
        label = METRIC_LABELS.get(key, key.replace("_", " ").title())
        parts.append(f'<div class="metric">{label}: <b>{_format_metric(key, value)}</b></div>')
    parts.append('</div>')
    return ''.join(parts)


def render_decision_history(history: Sequence[DecisionRecord]) -> str:
    if not history:
        return ""
    parts = ['<ol>']
    for record in history:
        css = ' class="decision-failure"' if record.is_failure else ""
        parts.append(
            f'<li{css}><b>{html.escape(record.phase_title)}:</b> {html.escape(record.decision_title)}'
            f'<br><small>{html.escape(record.outcome)}</small></li>'
        )
    parts.append('</ol>')
    return ''.join(parts)


def render_simulation_outcome(outcome: SimulationOutcome) -> str:
    parts = ['<div class="outcome-box">']
    parts.append(f'<h3>{html.escape(outcome.title)}</h3>')
    parts.append(f'<p>{html.escape(outcome.description)}</p>')
    parts.append(f'<div class="quiz-score-value">{outcome.success:.0f}</div>')
    parts.append(
        f'<div class="practice-meta">Budget variance {outcome.budget_variance:+.1f}% · '
        f'Timeline variance {outcome.timeline_variance:+.1f}%</div>'
    )
    parts.append('</div>')
    parts.append(render_metrics(outcome.context))
    if outcome.lessons:
        parts.append('<b>Lessons learned:</b><ul>')
        parts.extend(f'<li>{html.escape(lesson)}</li>' for lesson in outcome.lessons)
        parts.append('</ul>')
    return ''.join(parts)
