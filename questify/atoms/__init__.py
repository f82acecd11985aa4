"""
Question type handlers for grading.

Each question type (mcq, fillup, qa) has its own module with:
- validate(): Structural soundness of a generated question
- check(): Grade a submitted answer
"""

from typing import TYPE_CHECKING

from questify.models import QuestionType

if TYPE_CHECKING:
    from .base import QuestionHandler


# Handler registry - populated by @register decorator
HANDLERS: dict[QuestionType, "QuestionHandler"] = {}


def register(question_type: QuestionType):
    """Decorator to register a question handler."""
    def decorator(cls):
        HANDLERS[question_type] = cls()
        return cls
    return decorator


def get_handler(question_type: str | QuestionType) -> "QuestionHandler | None":
    """Get the handler for a question type."""
    if isinstance(question_type, str):
        try:
            question_type = QuestionType(question_type.lower())
        except ValueError:
            return None
    return HANDLERS.get(question_type)


# Import handlers to trigger registration
from . import mcq  # noqa: E402
from . import fillup  # noqa: E402
from . import short_answer  # noqa: E402

__all__ = [
    "HANDLERS",
    "get_handler",
    "register",
]
