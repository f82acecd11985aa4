"""
Answer Evaluator.

Grades a learner's answers against a QuizSet. Every question type uses the
same rule: lowercase and trim both sides, then compare for equality. There
is no partial credit, fuzzy matching or semantic comparison.
"""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from questify.atoms import get_handler
from questify.models import (
    AnswerRecord,
    AttemptSummary,
    Feedback,
    Question,
    QuizSet,
)


def percentage_of(part: int, whole: int) -> int:
    """``round(100 * part / whole)`` with half-up rounding, in integer math."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def evaluate(question: Question, answer: str | None) -> bool:
    """True if ``answer`` matches the question's canonical answer."""
    handler = get_handler(question.type)
    if handler is None:
        raise ValueError(f"No handler registered for question type {question.type!r}")
    return handler.check(question, answer).correct


class AnswerEvaluator:
    """Turns raw answers into Feedback records and an AttemptSummary."""

    def feedback_for(self, question: Question, answer: str | None) -> Feedback:
        return Feedback(
            question_id=question.id,
            prompt=question.prompt,
            user_answer=answer or "",
            correct_answer=question.correct_answer,
            is_correct=evaluate(question, answer),
            explanation=question.explanation,
            concept=question.concept,
            difficulty=question.difficulty,
        )

    def evaluate_attempt(
        self,
        quiz: QuizSet | Sequence[Question],
        answers: AnswerRecord,
        time_spent: int = 0,
    ) -> AttemptSummary:
        """
        Grade every question of ``quiz`` in order.

        Args:
            quiz: The QuizSet (or plain question sequence) that was attempted
            answers: Question id -> submitted answer; missing ids are unanswered
            time_spent: Seconds spent on the attempt

        Returns:
            AttemptSummary with one Feedback per question
        """
        questions = quiz.questions if isinstance(quiz, QuizSet) else tuple(quiz)
        feedback = tuple(self.feedback_for(q, answers.get(q.id)) for q in questions)

        total = len(feedback)
        correct = sum(1 for f in feedback if f.is_correct)
        summary = AttemptSummary(
            score=correct,
            total_questions=total,
            correct_answers=correct,
            incorrect_answers=total - correct,
            percentage=percentage_of(correct, total),
            time_spent=time_spent,
            average_time_per_question=(2 * time_spent + total) // (2 * total) if total else 0,
            feedback=feedback,
        )

        logger.debug(f"Graded attempt: {correct}/{total} ({summary.percentage}%) in {time_spent}s")
        return summary
