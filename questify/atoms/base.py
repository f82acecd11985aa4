"""
Base protocol and types for question handlers.
"""

from dataclasses import dataclass
from typing import Protocol

from questify.models import Question


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str
    explanation: str | None = None


def normalize_answer(answer: str | None) -> str:
    """Lowercase and trim; ``None`` is an empty answer."""
    return (answer or "").strip().lower()


def answers_match(submitted: str | None, expected: str) -> bool:
    """Exact equality after normalizing both sides. No partial credit."""
    return normalize_answer(submitted) == normalize_answer(expected)


class QuestionHandler(Protocol):
    """Protocol for question type handlers."""

    def validate(self, question: Question) -> bool:
        """Check the question is structurally gradable for this type."""
        ...

    def check(self, question: Question, answer: str | None) -> AnswerResult:
        """Grade the answer and return the result."""
        ...
