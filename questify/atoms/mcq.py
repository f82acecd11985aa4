"""
MCQ (Multiple Choice Question) handler.

- Four options, exactly one of them the canonical answer.
- The learner submits the option text; grading is normalized exact match.
"""

from questify.models import Question, QuestionType

from . import register
from .base import AnswerResult, answers_match, normalize_answer

OPTION_COUNT = 4


@register(QuestionType.MCQ)
class MCQHandler:
    """Handler for multiple choice questions."""

    def validate(self, question: Question) -> bool:
        """Four unique options containing the answer once (case-insensitively)."""
        options = question.options
        if len(options) != OPTION_COUNT or len(set(options)) != OPTION_COUNT:
            return False
        normalized = [normalize_answer(o) for o in options]
        return normalized.count(normalize_answer(question.correct_answer)) == 1

    def check(self, question: Question, answer: str | None) -> AnswerResult:
        """Check if the selected option is the correct one."""
        is_correct = answers_match(answer, question.correct_answer)
        return AnswerResult(
            correct=is_correct,
            feedback="Correct!" if is_correct else "Incorrect.",
            user_answer=(answer or "").strip(),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
        )
