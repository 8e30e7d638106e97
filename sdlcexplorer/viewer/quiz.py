"""
Quiz renderer - Multiple choice display with locked feedback.

Provides:
- Question and option rendering (options disabled once answered)
- Correct/incorrect feedback with explanation
- Quiz score display
"""

import html
from typing import Optional

from sdlcexplorer.schemas import QuizAnswer, QuizFeedback, QuizQuestion, QuizScore


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .quiz-container {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1.5em;
        margin: 1.5em 0;
        border-left: 4px solid #1976D2;
    }
    .quiz-title {
        font-weight: 600;
        color: #1565C0;
        font-size: 1.1em;
    }
    .quiz-question {
        font-size: 1.05em;
        color: #333;
        margin-bottom: 1em;
        line-height: 1.6;
    }
    .quiz-options {
        list-style: none;
        padding: 0;
    }
    .quiz-option {
        background: white;
        border: 1px solid #ddd;
        border-radius: 8px;
        padding: 0.6em 1em;
        margin: 0.4em 0;
    }
    .quiz-option-selected {
        border-color: #1976D2;
        font-weight: 600;
    }
    .quiz-option-locked {
        opacity: 0.7;
    }
    .quiz-feedback {
        border-radius: 8px;
        padding: 1em;
        margin-top: 1em;
    }
    .quiz-feedback-correct {
        background: #e8f5e9;
        color: #2e7d32;
    }
    .quiz-feedback-incorrect {
        background: #ffebee;
        color: #c62828;
    }
    .quiz-explanation {
        color: #333;
        margin-top: 0.5em;
        line-height: 1.6;
    }
    .quiz-score-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin-top: 1.5em;
        text-align: center;
    }
    .quiz-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    .quiz-score-label {
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """


def render_quiz_feedback(feedback: QuizFeedback) -> str:
    """Render the verdict and explanation for an answered question."""
    css = "quiz-feedback-correct" if feedback.correct else "quiz-feedback-incorrect"
    verdict = "✅ Correct!" if feedback.correct else "❌ Incorrect."
    return (
        f'<div class="quiz-feedback {css}">{verdict}'
        f'<div class="quiz-explanation">{html.escape(feedback.explanation)}</div>'
        '</div>'
    )


def render_quiz_question(
    question: QuizQuestion,
    index: int,
    answer: Optional[QuizAnswer] = None,
    feedback: Optional[QuizFeedback] = None,
) -> str:
    """
    Render a single quiz question.

    Args:
        question: QuizQuestion object
        index: Position of the question in the quiz
        answer: Recorded answer, if any (marks the selected option)
        feedback: Feedback to show below the options, if revealed

    Returns:
        HTML string for the question
    """
    locked = answer is not None and answer.revealed
    parts = ['<div class="quiz-container">']
    parts.append(f'<div class="quiz-title">Question {index + 1}</div>')
    parts.append(f'<div class="quiz-question">{html.escape(question.question)}</div>')

    parts.append('<ul class="quiz-options">')
    for opt_idx, option in enumerate(question.options):
        classes = ["quiz-option"]
        if answer is not None and answer.selected_option_index == opt_idx:
            classes.append("quiz-option-selected")
        if locked:
            classes.append("quiz-option-locked")
        parts.append(f'<li class="{" ".join(classes)}">{html.escape(option.text)}</li>')
    parts.append('</ul>')

    if feedback is not None:
        parts.append(render_quiz_feedback(feedback))

    parts.append('</div>')
    return ''.join(parts)


def render_quiz_score(score: QuizScore) -> str:
    """Render quiz score display."""
    return f"""
    <div class="quiz-score-box">
        <div class="quiz-score-value">{score.percent}%</div>
        <div class="quiz-score-label">{score.correct} of {score.answered} correct ({score.answered}/{score.total} answered)</div>
    </div>
    """
