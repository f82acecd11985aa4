"""
Short answer handler.

The canonical answer is the full source sentence. Grading is lexical:
exact match after lowercasing and trimming, so paraphrases are marked
wrong.
"""

from questify.models import Question, QuestionType

from . import register
from .base import AnswerResult, answers_match


@register(QuestionType.QA)
class ShortAnswerHandler:
    """Handler for short question/answer items."""

    def validate(self, question: Question) -> bool:
        return bool(question.prompt.strip() and question.correct_answer.strip())

    def check(self, question: Question, answer: str | None) -> AnswerResult:
        is_correct = answers_match(answer, question.correct_answer)
        return AnswerResult(
            correct=is_correct,
            feedback="Correct!" if is_correct else f"Expected: {question.correct_answer}",
            user_answer=(answer or "").strip(),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
        )
