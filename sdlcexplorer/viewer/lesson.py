"""
Lesson renderer - Generate HTML for the sections of a lesson page.

Features:
- Section tab bar with the active section highlighted
- Process visualization with the active step expanded
- Step, type story and drawback cards
- "What Went Wrong?" modal and single-expand drawback accordion
- Joke break
"""

import html
from typing import Optional

from sdlcexplorer.schemas import (
    Drawback,
    Joke,
    LessonContent,
    ModalPayload,
    Quote,
    Section,
    SECTION_ORDER,
    Step,
    TypeStory,
    VisualizerState,
)


SECTION_LABELS = {
    Section.INTRO: "Introduction",
    Section.VISUALIZATION: "Process Flow",
    Section.STEPS: "Steps",
    Section.TYPES: "Approaches",
    Section.DRAWBACKS: "Pitfalls",
    Section.JOKE: "Humor Break",
    Section.QUIZ: "Quiz",
}

# Label of the "next" button at the bottom of each section
NEXT_SECTION_LABELS = {
    Section.INTRO: "See It In Action →",
    Section.VISUALIZATION: "Explore the Steps →",
    Section.STEPS: "Real-World Stories →",
    Section.TYPES: "Common Pitfalls →",
    Section.DRAWBACKS: "Need a Laugh? →",
    Section.JOKE: "Test Knowledge 🧠",
}


def get_lesson_css() -> str:
    """Get CSS styles for lesson sections."""
    return """
    <style>
    .section-tabs {
        display: flex;
        gap: 0.5em;
        flex-wrap: wrap;
        margin-bottom: 1em;
    }
    .section-tab {
        padding: 0.4em 0.9em;
        border-radius: 16px;
        background: #f0f0f0;
        color: #555;
    }
    .section-tab-active {
        background: #1ABC9C;
        color: white;
        font-weight: 600;
    }
    .process-flow {
        display: flex;
        gap: 0.8em;
        flex-wrap: wrap;
        align-items: stretch;
    }
    .process-step {
        flex: 1 1 180px;
        border: 2px solid #ddd;
        border-radius: 12px;
        padding: 1em;
        transition: transform 0.3s;
    }
    .process-step-active {
        border-color: #1ABC9C;
        background: rgba(26, 188, 156, 0.12);
        transform: scale(1.03);
    }
    .process-step-icon {
        font-size: 1.6em;
    }
    .process-step-title {
        font-weight: 600;
        margin: 0.3em 0;
    }
    .sub-steps {
        margin-top: 0.5em;
        font-size: 0.9em;
        color: #444;
    }
    .card-grid {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
        gap: 1em;
    }
    .lesson-card {
        border-radius: 12px;
        padding: 1em 1.2em;
        background: #fafafa;
        border-top: 4px solid #1ABC9C;
    }
    .lesson-card-title {
        font-weight: 600;
        margin-bottom: 0.4em;
    }
    .story-modal {
        border-radius: 12px;
        padding: 1.2em 1.5em;
        color: white;
        margin: 1em 0;
    }
    .story-modal h5 {
        margin: 0.8em 0 0.3em 0;
    }
    .drawback-solution {
        background: #fff3e0;
        border-radius: 8px;
        padding: 0.8em 1em;
        margin-top: 0.6em;
    }
    .joke-box {
        background: #fffde7;
        border-radius: 12px;
        padding: 1em 1.2em;
        margin: 0.8em 0;
    }
    .joke-punchline {
        font-weight: 600;
        margin-top: 0.4em;
    }
    .lesson-quote {
        font-style: italic;
        color: #555;
        margin-top: 1em;
    }
    </style>
    """


# -----------------------------------------------------------------------------
# Navigation
# -----------------------------------------------------------------------------

def render_section_tabs(active: Section) -> str:
    """Render the section tab bar."""
    parts = ['<div class="section-tabs">']
    for section in SECTION_ORDER:
        css = "section-tab section-tab-active" if section == active else "section-tab"
        parts.append(f'<span class="{css}">{SECTION_LABELS[section]}</span>')
    parts.append('</div>')
    return ''.join(parts)


def render_intro(content: LessonContent) -> str:
    parts = [f'<h2>{html.escape(content.title)}</h2>']
    if content.summary:
        parts.append(f'<p><strong>{html.escape(content.summary)}</strong></p>')
    if content.intro:
        parts.append(f'<p>{html.escape(content.intro)}</p>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Steps
# -----------------------------------------------------------------------------

def render_process_step(step: Step, is_active: bool) -> str:
    """Render one step of the process flow; only the active one shows sub-steps."""
    css = "process-step process-step-active" if is_active else "process-step"
    parts = [f'<div class="{css}" style="border-color: {html.escape(step.color) if is_active else "#ddd"};">']
    parts.append(f'<div class="process-step-icon">{html.escape(step.icon)}</div>')
    parts.append(f'<div class="process-step-title">{html.escape(step.title)}</div>')
    parts.append(f'<div>{html.escape(step.description)}</div>')
    if is_active and step.sub_steps:
        parts.append('<div class="sub-steps">')
        for sub_step in step.sub_steps:
            parts.append(f'<div>• {html.escape(sub_step)}</div>')
        parts.append('</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_visualization(steps: list[Step], state: VisualizerState) -> str:
    """Render the process flow with the visualizer's active step highlighted."""
    if not steps:
        return '<p>No process steps for this topic yet.</p>'

    parts = ['<div class="process-flow">']
    for idx, step in enumerate(steps):
        parts.append(render_process_step(step, idx == state.active_index))
    parts.append('</div>')
    status = "Autoplay on" if state.is_playing else "Paused"
    parts.append(f'<p><small>Step {state.active_index + 1} of {len(steps)} · {status}</small></p>')
    return ''.join(parts)


def render_step_cards(steps: list[Step]) -> str:
    parts = ['<div class="card-grid">']
    for step in steps:
        parts.append(
            f'<div class="lesson-card" style="border-top-color: {html.escape(step.color)};">'
            f'<div class="lesson-card-title">{html.escape(step.icon)} {step.id}. {html.escape(step.title)}</div>'
            f'<div>{html.escape(step.description)}</div>'
            '</div>'
        )
    parts.append('</div>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Type stories and modal
# -----------------------------------------------------------------------------

def render_type_card(story: TypeStory) -> str:
    return (
        f'<div class="lesson-card" style="border-top-color: {html.escape(story.color)};">'
        f'<div class="lesson-card-title">{html.escape(story.emoji)} {html.escape(story.name)}</div>'
        f'<h4>{html.escape(story.story.title)}</h4>'
        f'<p>{html.escape(story.story.scenario)}</p>'
        '</div>'
    )


def render_story_modal(payload: Optional[ModalPayload]) -> str:
    """Render the open modal, or nothing when it is closed."""
    if payload is None:
        return ""
    return (
        f'<div class="story-modal" style="background: {html.escape(payload.color)};">'
        f'<h3>{html.escape(payload.title)} – What Went Wrong?</h3>'
        '<h5>The Failure:</h5>'
        f'<p>{html.escape(payload.failure_text)}</p>'
        '<h5>The Fix:</h5>'
        f'<p>{html.escape(payload.fix_text)}</p>'
        '</div>'
    )


# -----------------------------------------------------------------------------
# Drawbacks
# -----------------------------------------------------------------------------

def render_drawback(drawback: Drawback, expanded: bool) -> str:
    color = drawback.color or "#FF6B6B"
    parts = [f'<div class="lesson-card" style="border-top-color: {html.escape(color)};">']
    parts.append(f'<div class="lesson-card-title">{html.escape(drawback.icon)} {html.escape(drawback.title)}</div>')
    parts.append(f'<p><strong>The Problem:</strong> {html.escape(drawback.problem)}</p>')
    if expanded:
        parts.append(f'<div class="drawback-solution">💡 {html.escape(drawback.resolution)}</div>')
    parts.append('</div>')
    return ''.join(parts)


# -----------------------------------------------------------------------------
# Joke break
# -----------------------------------------------------------------------------

def render_joke(joke: Joke) -> str:
    return (
        '<div class="joke-box">'
        f'<div>Q: {html.escape(joke.setup)}</div>'
        f'<div class="joke-punchline">A: {html.escape(joke.punchline)}</div>'
        '</div>'
    )


def render_joke_break(jokes: list[Joke], quote: Optional[Quote] = None) -> str:
    parts = ['<div style="font-size: 2.5em; text-align: center;">😂</div>']
    for joke in jokes:
        parts.append(render_joke(joke))
    if quote is not None:
        author = f" - {html.escape(quote.author)}" if quote.author else ""
        parts.append(f'<p class="lesson-quote">💭 "{html.escape(quote.text)}"{author}</p>')
        if quote.takeaway:
            parts.append(f'<p>{html.escape(quote.takeaway)}</p>')
    return ''.join(parts)
