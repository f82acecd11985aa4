"""
Data model for generated quizzes and graded attempts.

All records are immutable once built: builders create Questions, the
orchestrator wraps them in a QuizSet, and the evaluator derives Feedback
and AttemptSummary records from a QuizSet plus the learner's answers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_CONCEPT = "General"

# Learner answers keyed by question id; missing ids count as unanswered.
AnswerRecord = Mapping[str, str]


class QuestionType(str, Enum):
    """Supported question types."""

    MCQ = "mcq"
    FILLUP = "fillup"
    QA = "qa"


class Difficulty(str, Enum):
    """Requested difficulty level."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class RequesterRole(str, Enum):
    """Who asked for the quiz. Only changes explanation wording."""

    STUDENT = "student"
    TEACHER = "teacher"


# Points per (type, difficulty)
POINTS: dict[QuestionType, dict[Difficulty, int]] = {
    QuestionType.MCQ: {Difficulty.EASY: 1, Difficulty.MEDIUM: 2, Difficulty.HARD: 3},
    QuestionType.FILLUP: {Difficulty.EASY: 1, Difficulty.MEDIUM: 2, Difficulty.HARD: 3},
    QuestionType.QA: {Difficulty.EASY: 2, Difficulty.MEDIUM: 3, Difficulty.HARD: 5},
}


def points_for(question_type: QuestionType, difficulty: Difficulty) -> int:
    """Points awarded for a question of the given type and difficulty."""
    return POINTS[question_type][difficulty]


class Question(BaseModel):
    """A single gradable quiz item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Type-prefixed, sequence-numbered id (e.g. mcq-3)")
    type: QuestionType
    prompt: str = Field(..., min_length=1)
    options: tuple[str, ...] = Field(default=(), description="MCQ options, empty otherwise")
    correct_answer: str = Field(..., min_length=1)
    explanation: str = Field(..., min_length=1)
    difficulty: Difficulty
    concept: str = DEFAULT_CONCEPT
    points: int = Field(..., ge=1)
    source: str = Field(default="", description="Sentence the question was built from")

    @model_validator(mode="after")
    def _check_options(self) -> Question:
        if not self.prompt.strip() or not self.correct_answer.strip():
            raise ValueError("prompt and correct_answer must not be blank")
        if self.type is QuestionType.MCQ:
            if len(self.options) != 4:
                raise ValueError(f"MCQ needs 4 options, got {len(self.options)}")
            if len(set(self.options)) != 4:
                raise ValueError("MCQ options must be unique")
            if self.options.count(self.correct_answer) != 1:
                raise ValueError("MCQ options must contain the correct answer exactly once")
        elif self.options:
            raise ValueError(f"{self.type.value} questions do not carry options")
        return self

    @property
    def key(self) -> tuple[str, str]:
        """Fact tested, independent of prompt wording: source sentence and answer."""
        return (self.source, self.correct_answer.lower())

    def to_dict(self) -> dict[str, Any]:
        """Wire shape consumed by presentation and export collaborators."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "question": self.prompt,
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "difficulty": self.difficulty.value,
            "concept": self.concept,
            "points": self.points,
        }
        if self.options:
            data["options"] = list(self.options)
        return data


class QuizSet(BaseModel):
    """Ordered, immutable collection of questions from one generation call."""

    model_config = ConfigDict(frozen=True)

    questions: tuple[Question, ...]
    quiz_type: QuestionType
    difficulty: Difficulty
    title: str
    estimated_minutes: int

    @property
    def total_points(self) -> int:
        return sum(q.points for q in self.questions)

    def __len__(self) -> int:
        return len(self.questions)

    def __getitem__(self, index: int) -> Question:
        return self.questions[index]


class Feedback(BaseModel):
    """Graded outcome for one question of an attempt."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    prompt: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    explanation: str
    concept: str = DEFAULT_CONCEPT
    difficulty: Difficulty


class AttemptSummary(BaseModel):
    """Scored outcome of a learner completing a QuizSet."""

    model_config = ConfigDict(frozen=True)

    score: int
    total_questions: int
    correct_answers: int
    incorrect_answers: int
    percentage: int
    time_spent: int = Field(..., ge=0, description="Seconds spent on the attempt")
    average_time_per_question: int
    feedback: tuple[Feedback, ...]


class ConceptStat(BaseModel):
    """Per-concept correctness ratio."""

    model_config = ConfigDict(frozen=True)

    concept: str
    correct: int
    total: int
    percentage: int


class PerformanceReport(BaseModel):
    """Concept-level analytics for one attempt."""

    model_config = ConfigDict(frozen=True)

    score: int
    total_questions: int
    percentage: int
    verdict: str
    concept_stats: tuple[ConceptStat, ...]
    strong_concepts: tuple[ConceptStat, ...]
    weak_concepts: tuple[ConceptStat, ...]
    suggestions: tuple[str, ...]
    strengths: tuple[str, ...]


class LearnerStats(BaseModel):
    """Aggregate over a learner's attempts."""

    model_config = ConfigDict(frozen=True)

    total_quizzes: int
    average_score: int
    total_time_spent: int
    strong_concepts: tuple[str, ...]
    weak_concepts: tuple[str, ...]
    improvement_suggestions: tuple[str, ...]
