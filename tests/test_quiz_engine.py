"""Tests for locked quiz answers and derived scores."""

from sdlcexplorer.engine import QuizEngine


class TestSelectOption:
    def test_records_and_reveals(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        assert quiz.select_option(0, 2)

        answer = quiz.answer(0)
        assert answer.selected_option_index == 2
        assert answer.revealed
        assert quiz.is_answered(0)

    def test_answer_is_locked(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 2)

        assert not quiz.select_option(0, 1)
        assert quiz.answer(0).selected_option_index == 2
        assert not quiz.is_correct(0)

    def test_out_of_range_question(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        assert not quiz.select_option(3, 0)
        assert not quiz.select_option(-1, 0)
        assert quiz.answers == {}

    def test_out_of_range_option(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        assert not quiz.select_option(0, 4)
        assert not quiz.select_option(0, -1)
        assert not quiz.is_answered(0)

    def test_bool_index_rejected(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        assert not quiz.select_option(True, 1)
        assert not quiz.select_option(0, False)

    def test_answers_is_a_copy(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        quiz.answers.clear()
        assert quiz.is_answered(0)


class TestFeedback:
    def test_unanswered(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        assert quiz.feedback(0) is None
        assert not quiz.is_correct(0)

    def test_correct(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        feedback = quiz.feedback(0)
        assert feedback.correct
        assert feedback.option_text == "Option 1"
        assert feedback.explanation == "Because 1"

    def test_queries_tolerate_bad_index(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        for bad in ([0], {"q": 0}, "0", None, True):
            assert quiz.answer(bad) is None
            assert not quiz.is_answered(bad)
            assert not quiz.is_correct(bad)
            assert quiz.feedback(bad) is None

    def test_incorrect(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(1, 2)
        feedback = quiz.feedback(1)
        assert not feedback.correct
        assert feedback.explanation == "Because 2"


class TestScore:
    def test_nothing_answered(self, lesson):
        score = QuizEngine(lesson.quiz).score()
        assert score.correct == 0
        assert score.answered == 0
        assert score.total == 3
        assert score.percent == 0

    def test_partial(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        quiz.select_option(1, 1)
        score = quiz.score()
        assert score.correct == 1
        assert score.answered == 2
        assert score.percent == 50
        assert not quiz.is_complete

    def test_complete(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        quiz.select_option(1, 0)
        quiz.select_option(2, 3)
        score = quiz.score()
        assert score.correct == 3
        assert score.percent == 100
        assert quiz.is_complete

    def test_empty_quiz(self):
        quiz = QuizEngine()
        assert quiz.question_count == 0
        assert not quiz.select_option(0, 0)
        assert quiz.score().total == 0
        assert not quiz.is_complete

    def test_load_clears_answers(self, lesson):
        quiz = QuizEngine(lesson.quiz)
        quiz.select_option(0, 1)
        quiz.load(lesson.quiz[:1])
        assert quiz.answers == {}
        assert quiz.question_count == 1
