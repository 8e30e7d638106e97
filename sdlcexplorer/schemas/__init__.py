"""
SDLC Explorer Schemas - Pydantic models for the lesson platform.

This module exports all schema classes for:
- Content: steps, type stories, drawbacks, quiz questions, lesson bundles
- Activities: phase arrangement, case studies, decision simulations
- State: sections and the observable snapshots of the lesson controller
"""

# Content schemas
from .content import (
    Step,
    StoryNarrative,
    TypeStory,
    DrawbackId,
    Drawback,
    QuizOption,
    QuizQuestion,
    Joke,
    Quote,
    TopicEntry,
    LessonContent,
)

# Activity schemas
from .activities import (
    ArrangeItem,
    MatchTarget,
    ArrangeQuestion,
    CaseOption,
    CaseStage,
    CaseStudy,
    FAILURE_MARKER,
    Decision,
    SimulationPhase,
    Simulation,
    TrackActivities,
)

# State schemas
from .state import (
    Section,
    SECTION_ORDER,
    VisualizerState,
    ModalPayload,
    DisclosureState,
    QuizAnswer,
    QuizFeedback,
    QuizScore,
    LessonSnapshot,
    ActivityScore,
    ArrangeResult,
    CaseStageResult,
    DecisionRecord,
    SimulationOutcome,
)

__all__ = [
    # Content
    'Step',
    'StoryNarrative',
    'TypeStory',
    'DrawbackId',
    'Drawback',
    'QuizOption',
    'QuizQuestion',
    'Joke',
    'Quote',
    'TopicEntry',
    'LessonContent',
    # Activities
    'ArrangeItem',
    'MatchTarget',
    'ArrangeQuestion',
    'CaseOption',
    'CaseStage',
    'CaseStudy',
    'FAILURE_MARKER',
    'Decision',
    'SimulationPhase',
    'Simulation',
    'TrackActivities',
    # State
    'Section',
    'SECTION_ORDER',
    'VisualizerState',
    'ModalPayload',
    'DisclosureState',
    'QuizAnswer',
    'QuizFeedback',
    'QuizScore',
    'LessonSnapshot',
    'ActivityScore',
    'ArrangeResult',
    'CaseStageResult',
    'DecisionRecord',
    'SimulationOutcome',
]
