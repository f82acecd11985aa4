"""
Questify: text-to-quiz generation and assessment engine.

Turns raw text into multiple-choice, fill-in-the-blank and short-answer
questions, grades a learner's answers, and reports per-concept strengths
and weaknesses.
"""

from questify.assessment import AnswerEvaluator, PerformanceAggregator, evaluate
from questify.errors import (
    EmptyGenerationError,
    InsufficientInputError,
    QuizGenerationError,
    UnsupportedTypeError,
)
from questify.generation import QuizGenerator, generate_quiz
from questify.models import (
    AttemptSummary,
    ConceptStat,
    Difficulty,
    Feedback,
    Question,
    QuestionType,
    QuizSet,
    RequesterRole,
)

__version__ = "1.0.0"

__all__ = [
    "AnswerEvaluator",
    "AttemptSummary",
    "ConceptStat",
    "Difficulty",
    "EmptyGenerationError",
    "Feedback",
    "InsufficientInputError",
    "PerformanceAggregator",
    "Question",
    "QuestionType",
    "QuizGenerationError",
    "QuizGenerator",
    "QuizSet",
    "RequesterRole",
    "UnsupportedTypeError",
    "evaluate",
    "generate_quiz",
]
