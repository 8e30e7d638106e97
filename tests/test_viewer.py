"""Tests for HTML rendering of lesson sections, the quiz and practice activities."""

from sdlcexplorer.engine import QuizEngine
from sdlcexplorer.schemas import (
    ActivityScore,
    ArrangeResult,
    CaseStageResult,
    DecisionRecord,
    Drawback,
    Joke,
    ModalPayload,
    QuizAnswer,
    QuizScore,
    Quote,
    Section,
    SimulationOutcome,
    VisualizerState,
)
from sdlcexplorer.viewer import (
    NEXT_SECTION_LABELS,
    SECTION_LABELS,
    format_countdown,
    render_arrange_question,
    render_arrange_results,
    render_case_feedback,
    render_case_stage,
    render_case_summary,
    render_decision_history,
    render_drawback,
    render_joke_break,
    render_metrics,
    render_quiz_question,
    render_quiz_score,
    render_section_tabs,
    render_simulation_outcome,
    render_story_modal,
    render_visualization,
)

from conftest import make_match_question, make_order_question


class TestLessonRendering:
    def test_labels_cover_sections(self):
        assert set(SECTION_LABELS) == set(Section)
        assert Section.QUIZ not in NEXT_SECTION_LABELS

    def test_active_tab(self):
        out = render_section_tabs(Section.DRAWBACKS)
        assert out.count("section-tab-active") == 1
        assert 'section-tab-active">Pitfalls' in out

    def test_visualization_marks_active_step(self, lesson):
        out = render_visualization(lesson.steps, VisualizerState(active_index=2, is_playing=True))
        assert out.count("process-step-active") == 1
        assert "Step 3 of 4" in out
        assert "Autoplay on" in out
        assert out.count("sub-steps") == 1

    def test_visualization_paused(self, lesson):
        out = render_visualization(lesson.steps, VisualizerState(active_index=0, is_playing=False))
        assert "Paused" in out

    def test_visualization_without_steps(self):
        out = render_visualization([], VisualizerState(is_playing=True))
        assert "No process steps" in out

    def test_modal_closed(self):
        assert render_story_modal(None) == ""

    def test_modal_open(self):
        payload = ModalPayload(title="Agile", failure_text="<b>No docs</b>", fix_text="Write ADRs")
        out = render_story_modal(payload)
        assert "Agile – What Went Wrong?" in out
        assert "&lt;b&gt;No docs&lt;/b&gt;" in out
        assert "Write ADRs" in out

    def test_drawback_solution_only_when_expanded(self):
        drawback = Drawback(id=1, title="Gold Plating", problem="Too much", resolution="Stick to scope")
        assert "Stick to scope" not in render_drawback(drawback, expanded=False)
        assert "Stick to scope" in render_drawback(drawback, expanded=True)

    def test_joke_break(self):
        out = render_joke_break(
            [Joke(setup="Why?", punchline="Because.")],
            Quote(text="Plans are useless", author="Eisenhower"),
        )
        assert "Q: Why?" in out
        assert "A: Because." in out
        assert "Eisenhower" in out


class TestQuizRendering:
    def test_unanswered_question(self, lesson):
        out = render_quiz_question(lesson.quiz[0], 0)
        assert "Question 1" in out
        assert "quiz-option-locked" not in out
        assert "quiz-feedback" not in out

    def test_answered_question(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(1, 2)
        out = render_quiz_question(lesson.quiz[1], 1, quiz.answer(1), quiz.feedback(1))
        assert out.count("quiz-option-selected") == 1
        assert out.count("quiz-option-locked") == 4
        assert "❌ Incorrect." in out
        assert "Because 2" in out

    def test_correct_feedback(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        out = render_quiz_question(lesson.quiz[0], 0, quiz.answer(0), quiz.feedback(0))
        assert "quiz-feedback-correct" in out
        assert "✅ Correct!" in out

    def test_selected_without_feedback(self, lesson):
        out = render_quiz_question(lesson.quiz[0], 0, QuizAnswer(selected_option_index=0))
        assert "quiz-option-selected" in out
        assert "quiz-feedback" not in out

    def test_score(self):
        out = render_quiz_score(QuizScore(correct=2, answered=3, total=5))
        assert "67%" in out
        assert "2 of 3 correct (3/5 answered)" in out


class TestPracticeRendering:
    def test_format_countdown(self):
        assert format_countdown(120_000) == "2:00"
        assert format_countdown(65_500) == "1:05"
        assert format_countdown(-10) == "0:00"

    def test_order_question(self):
        question = make_order_question()
        out = render_arrange_question(question, 0, 5, order=["planning", "design", "testing"], remaining_ms=90_000)
        assert "Question 1 of 5" in out
        assert "⏱ 1:30" in out
        assert "practice-timer-low" not in out
        assert out.index("Planning") < out.index("Design") < out.index("Testing")

    def test_timer_low(self):
        out = render_arrange_question(make_order_question(), 0, 1, remaining_ms=30_000)
        assert "practice-timer-low" in out

    def test_untimed_question(self):
        out = render_arrange_question(make_order_question(), 0, 1)
        assert "⏱" not in out

    def test_match_question(self):
        out = render_arrange_question(make_match_question(), 1, 2, matches={"unit-desc": "unit"})
        assert "One module in isolation → <span class=\"match-slot\">Unit Testing</span>" in out
        assert "Drop here" in out

    def test_arrange_results(self):
        questions = [make_order_question(1), make_match_question(2)]
        results = [
            ArrangeResult(question_id=1, score=1 / 3, timed_out=True),
            ArrangeResult(question_id=2, score=0.5),
        ]
        out = render_arrange_results(questions, results, ActivityScore(earned=1 / 3 + 0.5, possible=2, passing=0.6))
        assert "42%" in out
        assert "Keep practicing!" in out
        assert "Order the phases: 33% (time ran out)" in out
        assert "Match the testing types: 50%" in out

    def test_case_stage(self, case_study):
        out = render_case_stage(case_study.stages[0], 0, 3, selected_option_id="b")
        assert "Stage 1 of 3" in out
        assert "B. Option b" in out
        assert out.count("quiz-option-selected") == 1

    def test_case_feedback(self, case_study):
        stage = case_study.stages[0]
        out = render_case_feedback(stage, CaseStageResult(stage_id="planning", selected_option_id="a", correct=False))
        assert "❌ Not quite." in out
        assert "planning explained" in out
        assert "Practice for planning" in out

    def test_case_summary(self):
        out = render_case_summary(ActivityScore(earned=2, possible=3, passing=0.7))
        assert "67%" in out
        assert "correct decisions in 2 out of 3 SDLC stages" in out

    def test_metrics(self):
        out = render_metrics({"budget": 90000, "timeline": 10.5, "security": 65})
        assert "$90,000" in out
        assert "10.5" in out
        assert "🔒 Security: <b>65</b>" in out

    def test_decision_history(self):
        assert render_decision_history([]) == ""
        record = DecisionRecord(
            phase_id="planning", phase_title="Planning", decision_id="rush",
            decision_title="Rush", outcome="FAILURE: Debt.", is_failure=True,
        )
        out = render_decision_history([record])
        assert "decision-failure" in out
        assert "FAILURE: Debt." in out

    def test_simulation_outcome(self):
        outcome = SimulationOutcome(
            context={"budget": 70000},
            success=82.0,
            title="✅ Project Success",
            description="Good results.",
            lessons=["Keep it up."],
            budget_variance=-30.0,
        )
        out = render_simulation_outcome(outcome)
        assert "✅ Project Success" in out
        assert "Budget variance -30.0%" in out
        assert "Lessons learned:" in out
        assert "Keep it up." in out
