"""
Quiz Generator: orchestrates one generation request.

Pipeline (one-shot, non-retryable):

    validate -> dispatch -> topUp -> finalize

- validate: reject text shorter than the configured minimum
- dispatch: run the builder registered for the requested type
- topUp: ask the fallback generator for any deficit
- finalize: drop duplicate ids and questions their handler rejects, fail if
  nothing is left, otherwise shuffle and truncate

All randomness flows through one ``random.Random`` owned by the generator,
so a fixed seed replays a request exactly.
"""

from __future__ import annotations

import random

from loguru import logger

from config import Settings, get_settings
from questify.atoms import get_handler
from questify.errors import (
    EmptyGenerationError,
    InsufficientInputError,
    UnsupportedTypeError,
)
from questify.models import (
    Difficulty,
    Question,
    QuestionType,
    QuizSet,
    RequesterRole,
)

from .builders import BuildContext, get_builder
from .fallback import FallbackGenerator


def _coerce_type(quiz_type: str | QuestionType) -> QuestionType:
    if isinstance(quiz_type, QuestionType):
        return quiz_type
    try:
        return QuestionType(str(quiz_type).strip().lower())
    except ValueError:
        raise UnsupportedTypeError(f"Invalid quiz type: {quiz_type!r}") from None


def _coerce_difficulty(difficulty: str | Difficulty) -> Difficulty:
    if isinstance(difficulty, Difficulty):
        return difficulty
    return Difficulty(str(difficulty).strip().lower())


def _coerce_role(role: str | RequesterRole | None) -> RequesterRole | None:
    if role is None or isinstance(role, RequesterRole):
        return role
    return RequesterRole(str(role).strip().lower())


class QuizGenerator:
    """
    Text-to-quiz generation engine.

    Args:
        seed: Seed for the random source (falls back to settings.quiz_seed,
            then to OS entropy)
        rng: Explicit random source; takes precedence over ``seed``
        settings: Settings override (defaults to cached settings)
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        if rng is None:
            rng = random.Random(seed if seed is not None else self.settings.quiz_seed)
        self.rng = rng
        self.fallback = FallbackGenerator()

    def generate(
        self,
        text: str,
        quiz_type: str | QuestionType,
        count: int | None = None,
        difficulty: str | Difficulty = Difficulty.MEDIUM,
        role: str | RequesterRole | None = None,
    ) -> QuizSet:
        """
        Generate exactly ``count`` questions from ``text``.

        Raises:
            InsufficientInputError: trimmed text is below the minimum length
            UnsupportedTypeError: no builder for ``quiz_type``
            EmptyGenerationError: the text yielded no question at all
            ValueError: ``count`` < 1 or an unknown difficulty/role
        """
        if count is None:
            count = self.settings.quiz_default_count
        self._validate(text, count)

        question_type = _coerce_type(quiz_type)
        level = _coerce_difficulty(difficulty)
        ctx = BuildContext.from_text(
            text,
            difficulty=level,
            rng=self.rng,
            role=_coerce_role(role),
            min_chars=self.settings.quiz_sentence_min_chars,
            max_chars=self.settings.quiz_sentence_max_chars,
            max_concepts=self.settings.quiz_max_concepts,
            attempt_multiplier=self.settings.quiz_attempt_multiplier,
        )

        questions = self._dispatch(question_type, ctx, count)
        primary = len(questions)
        questions = self._top_up(question_type, ctx, questions, count)
        quiz = self._finalize(question_type, level, questions, count)

        logger.info(
            f"Generated {len(quiz)} {question_type.value} questions "
            f"({primary} primary, {len(questions) - primary} fallback, "
            f"{len(ctx.sentences)} sentences, {len(ctx.concepts)} concepts)"
        )
        return quiz

    # ----------------------------------------------------------------------
    # Pipeline stages
    # ----------------------------------------------------------------------

    def _validate(self, text: str, count: int) -> None:
        minimum = self.settings.quiz_min_text_length
        if not text or len(text.strip()) < minimum:
            raise InsufficientInputError(
                "Text is too short to generate meaningful questions. "
                f"Please provide at least {minimum} characters."
            )
        if count < 1:
            raise ValueError(f"Question count must be positive, got {count}")

    def _dispatch(self, question_type: QuestionType, ctx: BuildContext, count: int) -> list[Question]:
        builder = get_builder(question_type)
        if builder is None:
            raise UnsupportedTypeError(f"Invalid quiz type: {question_type.value!r}")
        return builder.build(ctx, count)

    def _top_up(
        self,
        question_type: QuestionType,
        ctx: BuildContext,
        questions: list[Question],
        count: int,
    ) -> list[Question]:
        deficit = count - len(questions)
        if deficit <= 0:
            return questions

        logger.debug(f"Topping up {deficit} {question_type.value} questions via fallback")
        extra = self.fallback.generate(
            question_type,
            deficit,
            ctx,
            taken={q.key for q in questions},
        )
        return questions + extra

    def _finalize(
        self,
        question_type: QuestionType,
        difficulty: Difficulty,
        questions: list[Question],
        count: int,
    ) -> QuizSet:
        unique = list({q.id: q for q in questions}.values())
        valid = []
        for question in unique:
            if get_handler(question.type).validate(question):
                valid.append(question)
            else:
                logger.warning(f"Dropping malformed question {question.id}")

        if not valid:
            raise EmptyGenerationError(
                "Could not generate any questions from the provided text. "
                "Please try with different content or a different question type."
            )

        self.rng.shuffle(valid)
        selected = tuple(valid[:count])

        return QuizSet(
            questions=selected,
            quiz_type=question_type,
            difficulty=difficulty,
            title=f"{question_type.value.upper()} Quiz - {difficulty.value.capitalize()}",
            estimated_minutes=len(selected) * self.settings.quiz_minutes_per_question,
        )


def generate_quiz(
    text: str,
    quiz_type: str | QuestionType,
    count: int = 5,
    difficulty: str | Difficulty = Difficulty.MEDIUM,
    role: str | RequesterRole | None = None,
    seed: int | None = None,
) -> QuizSet:
    """Convenience wrapper: one generator, one request."""
    return QuizGenerator(seed=seed).generate(text, quiz_type, count, difficulty, role)
