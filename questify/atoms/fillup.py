"""
Fill-in-the-blank handler.

The prompt contains one or more ``_______`` blanks; the canonical answer
lists the missing words comma-separated in sentence order. The learner's
answer must match that list exactly (after case/whitespace normalization).
"""

from questify.models import Question, QuestionType

from . import register
from .base import AnswerResult, answers_match

BLANK_MARKER = "_______"


@register(QuestionType.FILLUP)
class FillupHandler:
    """Handler for fill-in-the-blank questions."""

    def validate(self, question: Question) -> bool:
        """Every expected word needs a blank in the prompt."""
        words = [w for w in question.correct_answer.split(",") if w.strip()]
        return bool(words) and question.prompt.count(BLANK_MARKER) >= len(words)

    def check(self, question: Question, answer: str | None) -> AnswerResult:
        is_correct = answers_match(answer, question.correct_answer)
        return AnswerResult(
            correct=is_correct,
            feedback="Correct!" if is_correct else f"Expected: {question.correct_answer}",
            user_answer=(answer or "").strip(),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
        )
