"""Shared fixtures for SDLC Explorer tests."""

import pytest

from sdlcexplorer.engine import LessonController, Scheduler
from sdlcexplorer.schemas import (
    ArrangeItem,
    ArrangeQuestion,
    CaseOption,
    CaseStage,
    CaseStudy,
    Decision,
    Drawback,
    Joke,
    LessonContent,
    MatchTarget,
    QuizOption,
    QuizQuestion,
    Simulation,
    SimulationPhase,
    Step,
    StoryNarrative,
    TypeStory,
)

PERIOD_MS = 3000


def make_steps(count: int) -> list[Step]:
    return [
        Step(id=i + 1, title=f"Step {i + 1}", description=f"Do thing {i + 1}", sub_steps=["a", "b"])
        for i in range(count)
    ]


def make_question(text: str, correct_index: int, option_count: int = 4) -> QuizQuestion:
    return QuizQuestion(
        question=text,
        options=[
            QuizOption(
                text=f"Option {i}",
                correct=(i == correct_index),
                explanation=f"Because {i}",
            )
            for i in range(option_count)
        ],
    )


@pytest.fixture
def lesson() -> LessonContent:
    return LessonContent(
        topic="analysis",
        title="Analysis",
        steps=make_steps(4),
        type_stories=[
            TypeStory(
                id="business",
                name="Business Analysis",
                color="#667eea",
                story=StoryNarrative(
                    title="Checkout",
                    scenario="Carts were abandoned",
                    failure="Asked what, not why",
                    fix="Used 5 Whys",
                ),
            ),
            TypeStory(
                id="user",
                name="User Analysis",
                color="#F8B500",
                story=StoryNarrative(
                    title="Portal",
                    scenario="Seniors couldn't find results",
                    failure="Wrong users interviewed",
                    fix="Representative sampling",
                ),
            ),
        ],
        drawbacks=[
            Drawback(id=1, title="Confirmation Bias", problem="p1", resolution="r1"),
            Drawback(id=2, title="Gold Plating", problem="p2", resolution="r2"),
            Drawback(id="moving-target", title="The Moving Target", problem="p3", resolution="r3"),
        ],
        quiz=[
            make_question("Q1", correct_index=1),
            make_question("Q2", correct_index=0),
            make_question("Q3", correct_index=3),
        ],
        jokes=[Joke(setup="Why the ladder?", punchline="High-level requirements")],
    )


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def controller(lesson, scheduler):
    ctrl = LessonController(lesson, scheduler=scheduler, period_ms=PERIOD_MS)
    yield ctrl
    ctrl.close()


# -----------------------------------------------------------------------------
# Practice activities
# -----------------------------------------------------------------------------

TIME_LIMIT_MS = 5000


def make_order_question(question_id: int = 1) -> ArrangeQuestion:
    return ArrangeQuestion(
        id=question_id,
        kind="order",
        question="Order the phases",
        items=[
            ArrangeItem(id="testing", text="Testing", correct_order=3),
            ArrangeItem(id="planning", text="Planning", correct_order=1),
            ArrangeItem(id="design", text="Design", correct_order=2),
        ],
    )


def make_match_question(question_id: int = 2) -> ArrangeQuestion:
    return ArrangeQuestion(
        id=question_id,
        kind="match",
        question="Match the testing types",
        items=[
            ArrangeItem(id="unit", text="Unit Testing"),
            ArrangeItem(id="system", text="System Testing"),
        ],
        targets=[
            MatchTarget(id="unit-desc", text="One module in isolation", correct_match="unit"),
            MatchTarget(id="system-desc", text="The whole system", correct_match="system"),
        ],
    )


def make_stage(stage_id: str, correct_id: str, option_ids: str = "abc") -> CaseStage:
    return CaseStage(
        id=stage_id,
        title=stage_id.title(),
        question=f"What matters most in {stage_id}?",
        options=[
            CaseOption(id=option_id, text=f"Option {option_id}", correct=(option_id == correct_id))
            for option_id in option_ids
        ],
        explanation=f"{stage_id} explained",
        best_practices=[f"Practice for {stage_id}"],
    )


@pytest.fixture
def arrange_questions() -> list[ArrangeQuestion]:
    return [make_order_question(1), make_match_question(2)]


@pytest.fixture
def case_study() -> CaseStudy:
    return CaseStudy(
        id="shop",
        title="Online Shop",
        description="Build a shop",
        scenario="A startup needs a shop",
        stages=[
            make_stage("planning", "b"),
            make_stage("design", "a"),
            make_stage("testing", "c"),
        ],
    )


@pytest.fixture
def simulation() -> Simulation:
    return Simulation(
        id="bank",
        title="Mobile Bank",
        initial_context={
            "budget": 100000,
            "timeline": 12,
            "user_satisfaction": 50,
            "security": 50,
            "performance": 50,
            "reputation": 50,
        },
        phases=[
            SimulationPhase(
                id="planning",
                title="Project Planning",
                decisions=[
                    Decision(
                        id="plan-hybrid",
                        title="Hybrid Approach",
                        effects={"budget": -10000, "timeline": -2, "security": 15,
                                 "user_satisfaction": 8, "performance": 8, "reputation": 12},
                        outcome="Balanced approach.",
                    ),
                    Decision(
                        id="plan-rush",
                        title="Rush to Market",
                        effects={"budget": -2000, "timeline": 2, "security": -15,
                                 "user_satisfaction": -20, "performance": -10, "reputation": -25,
                                 "morale": -5},
                        outcome="FAILURE: Technical debt piles up.",
                    ),
                ],
            ),
            SimulationPhase(
                id="design",
                title="System Design",
                decisions=[
                    Decision(
                        id="design-fast",
                        title="Performance-Optimized Architecture",
                        effects={"budget": -20000, "security": 15, "user_satisfaction": 15,
                                 "performance": 30, "reputation": 25},
                        outcome="Fast and scalable.",
                    ),
                    Decision(
                        id="design-bloat",
                        title="Feature-Rich Everything",
                        effects={"budget": -95000, "security": -60, "user_satisfaction": -30,
                                 "performance": -25, "reputation": -15},
                        outcome="FAILURE: Nobody can maintain it.",
                    ),
                ],
            ),
        ],
    )
