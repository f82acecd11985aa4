"""
Unit tests for answer evaluation and attempt scoring.
"""

import pytest

from questify.assessment import AnswerEvaluator, evaluate, percentage_of
from questify.models import QuestionType


class TestEvaluate:

    def test_case_and_whitespace_insensitive(self, make_question):
        assert evaluate(make_question(correct_answer="Paris"), " paris ") is True

    def test_wrong_answer(self, make_question):
        assert evaluate(make_question(correct_answer="Paris"), "Berlin") is False

    def test_missing_answer(self, make_question):
        assert evaluate(make_question(), None) is False
        assert evaluate(make_question(), "   ") is False

    def test_repeatable(self, make_question):
        question = make_question()
        assert [evaluate(question, "PARIS") for _ in range(3)] == [True, True, True]


class TestPercentage:

    @pytest.mark.parametrize(
        "part,whole,expected",
        [(0, 5, 0), (5, 5, 100), (1, 8, 13), (2, 3, 67), (1, 3, 33), (1, 2, 50), (0, 0, 0)],
    )
    def test_rounds_half_up(self, part, whole, expected):
        assert percentage_of(part, whole) == expected


class TestAnswerEvaluator:
    """Attempt scoring."""

    @pytest.fixture
    def questions(self, make_question):
        return [
            make_question(question_id="mcq-1", correct_answer="Paris", concept="Geography"),
            make_question(
                question_id="fillup-1",
                question_type=QuestionType.FILLUP,
                correct_answer="Einstein",
                prompt="Fill in the blank: _______ proposed relativity",
                concept="Physics",
            ),
            make_question(
                question_id="qa-1",
                question_type=QuestionType.QA,
                correct_answer="Water boils at one hundred degrees",
                prompt="What is mentioned about water based on this passage?",
                concept="Physics",
            ),
        ]

    def test_evaluate_attempt(self, questions):
        answers = {"mcq-1": "paris", "fillup-1": "Newton", "qa-1": "water boils at one hundred degrees "}
        summary = AnswerEvaluator().evaluate_attempt(questions, answers, time_spent=100)

        assert summary.total_questions == 3
        assert summary.correct_answers == summary.score == 2
        assert summary.incorrect_answers == 1
        assert summary.percentage == 67
        assert summary.time_spent == 100
        assert summary.average_time_per_question == 33

    def test_feedback_follows_question_order(self, questions):
        summary = AnswerEvaluator().evaluate_attempt(questions, {"qa-1": "nope"})

        assert [f.question_id for f in summary.feedback] == ["mcq-1", "fillup-1", "qa-1"]
        assert [f.is_correct for f in summary.feedback] == [False, False, False]
        assert summary.feedback[0].user_answer == ""
        assert summary.feedback[2].user_answer == "nope"
        assert summary.feedback[1].concept == "Physics"

    def test_unknown_ids_are_ignored(self, questions):
        summary = AnswerEvaluator().evaluate_attempt(questions, {"mcq-99": "Paris"})
        assert summary.correct_answers == 0

    def test_accepts_a_quiz_set(self, seeded_generator, photosynthesis_text):
        quiz = seeded_generator.generate(photosynthesis_text, "mcq", 4)
        answers = {q.id: q.correct_answer.upper() for q in quiz.questions}

        summary = AnswerEvaluator().evaluate_attempt(quiz, answers, time_spent=30)
        assert summary.percentage == 100
        assert summary.average_time_per_question == 8

    def test_empty_attempt(self):
        summary = AnswerEvaluator().evaluate_attempt([], {})
        assert summary.total_questions == 0
        assert summary.percentage == 0
        assert summary.average_time_per_question == 0
