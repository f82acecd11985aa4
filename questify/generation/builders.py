"""
Question Builders: Sentence-to-Question Rules.

Each builder turns segmented sentences into typed questions at a requested
difficulty:

1. MCQBuilder: blank one salient word, offer it among 3 distractors
2. FillupBuilder: blank 1-3 capitalized words (by difficulty)
3. ShortAnswerBuilder: question stem template + concept, answer is the sentence

Shared loop contract:
- At most ``attempt_multiplier x count`` random sentence draws
- Sentences already used, or failing the builder's gate, are skipped
- A builder that cannot reach ``count`` returns a short list; the fallback
  generator tops it up
"""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property

from loguru import logger

from questify.models import (
    DEFAULT_CONCEPT,
    Difficulty,
    Question,
    QuestionType,
    RequesterRole,
    points_for,
)
from questify.processing import (
    CONCEPT_EXCLUSIONS,
    clean_token,
    concept_for,
    extract_concepts,
    extract_keywords,
    get_sentences,
    is_candidate_term,
    tokenize,
)

from .distractors import DistractorSynthesizer

MCQ_BLANK = "______"
FILL_BLANK = "_______"

DEFAULT_ATTEMPT_MULTIPLIER = 5


@dataclass
class BuildContext:
    """
    Everything a builder needs from one source text.

    Attributes:
        sentences: Segmented sentences, in text order
        concepts: Extracted concept labels, first-seen order
        keywords: Candidate keyword set (distractor pool)
        difficulty: Requested difficulty
        rng: The single random source for the whole generation call
        role: Requester role (explanation wording only)
        attempt_multiplier: Sentence draws allowed per requested question
    """

    sentences: list[str]
    concepts: list[str]
    keywords: frozenset[str]
    difficulty: Difficulty
    rng: random.Random
    role: RequesterRole | None = None
    attempt_multiplier: int = DEFAULT_ATTEMPT_MULTIPLIER

    @classmethod
    def from_text(
        cls,
        text: str,
        difficulty: Difficulty,
        rng: random.Random,
        role: RequesterRole | None = None,
        min_chars: int = 20,
        max_chars: int = 500,
        max_concepts: int = 15,
        attempt_multiplier: int = DEFAULT_ATTEMPT_MULTIPLIER,
    ) -> BuildContext:
        sentences = get_sentences(text, min_chars, max_chars)
        return cls(
            sentences=sentences,
            concepts=extract_concepts(sentences, max_concepts),
            keywords=extract_keywords(text),
            difficulty=difficulty,
            rng=rng,
            role=role,
            attempt_multiplier=attempt_multiplier,
        )

    @cached_property
    def distractors(self) -> DistractorSynthesizer:
        return DistractorSynthesizer(self.keywords, self.rng)

    @property
    def for_teacher(self) -> bool:
        return self.role is RequesterRole.TEACHER


def blank_out(sentence: str, word: str, marker: str = MCQ_BLANK) -> str:
    """Replace every whole-word, case-insensitive occurrence of ``word``."""
    return re.sub(rf"\b{re.escape(word)}\b", marker, sentence, flags=re.IGNORECASE)


# Builder registry - populated by @register decorator
BUILDERS: dict[QuestionType, "QuestionBuilder"] = {}


def register(question_type: QuestionType):
    """Decorator to register a question builder."""
    def decorator(cls):
        BUILDERS[question_type] = cls()
        return cls
    return decorator


def get_builder(question_type: str | QuestionType) -> "QuestionBuilder | None":
    """Get the builder for a question type."""
    if isinstance(question_type, str):
        try:
            question_type = QuestionType(question_type.lower())
        except ValueError:
            return None
    return BUILDERS.get(question_type)


class QuestionBuilder(ABC):
    """Base class for all question builders."""

    question_type: QuestionType

    @abstractmethod
    def accepts(self, sentence: str) -> bool:
        """Minimum length / word-count gate for a source sentence."""
        ...

    @abstractmethod
    def build_question(self, sentence: str, ctx: BuildContext, number: int) -> Question | None:
        """Build one question from an accepted sentence, or None if it has no usable term."""
        ...

    def build(self, ctx: BuildContext, count: int) -> list[Question]:
        """Draw sentences at random until ``count`` questions or attempts run out."""
        questions: list[Question] = []
        if not ctx.sentences:
            return questions

        used: set[str] = set()
        max_attempts = count * ctx.attempt_multiplier
        attempts = 0

        while len(questions) < count and attempts < max_attempts:
            attempts += 1
            sentence = ctx.rng.choice(ctx.sentences)

            if sentence in used or not self.accepts(sentence):
                continue
            used.add(sentence)

            question = self.build_question(sentence, ctx, len(questions) + 1)
            if question is not None:
                questions.append(question)

        logger.debug(
            f"{self.question_type.value} builder: {len(questions)}/{count} questions "
            f"in {attempts} attempts"
        )
        return questions

    def _question_id(self, number: int) -> str:
        return f"{self.question_type.value}-{number}"


@register(QuestionType.MCQ)
class MCQBuilder(QuestionBuilder):
    """
    Multiple choice: blank one word of a sentence with >= 8 words.

    Target selection by difficulty:
    - hard: words longer than 6 characters only
    - easy: words of at most 8 characters only
    - medium: any non-stopword candidate
    """

    question_type = QuestionType.MCQ
    min_chars = 30
    min_words = 8

    def accepts(self, sentence: str) -> bool:
        return len(sentence) >= self.min_chars and len(tokenize(sentence)) >= self.min_words

    def candidate_terms(self, sentence: str, difficulty: Difficulty) -> list[str]:
        terms = [clean_token(t) for t in tokenize(sentence) if is_candidate_term(t)]
        if difficulty is Difficulty.HARD:
            terms = [t for t in terms if len(t) > 6]
        elif difficulty is Difficulty.EASY:
            terms = [t for t in terms if len(t) <= 8]
        return terms

    def build_question(self, sentence: str, ctx: BuildContext, number: int) -> Question | None:
        terms = self.candidate_terms(sentence, ctx.difficulty)
        if not terms:
            return None

        target = ctx.rng.choice(terms)
        question_text = blank_out(sentence, target)
        if MCQ_BLANK not in question_text:
            return None

        concept = concept_for(sentence, ctx.concepts)
        explanation = f'The correct answer is "{target}" as mentioned in the original text.'
        if ctx.for_teacher:
            explanation += (
                f" This question tests {ctx.difficulty.value} level comprehension"
                f" of the concept: {concept}."
            )

        return Question(
            id=self._question_id(number),
            type=self.question_type,
            prompt=f'Complete the sentence: "{question_text}"',
            options=ctx.distractors.build_options(target, ctx.difficulty),
            correct_answer=target,
            explanation=explanation,
            difficulty=ctx.difficulty,
            concept=concept,
            points=points_for(self.question_type, ctx.difficulty),
            source=sentence,
        )


@register(QuestionType.FILLUP)
class FillupBuilder(QuestionBuilder):
    """
    Fill in the blanks: blank 1/2/3 capitalized words (easy/medium/hard).

    The canonical answer lists the blanked words, comma-separated, in the
    order they appear in the sentence.
    """

    question_type = QuestionType.FILLUP
    min_chars = 50
    min_words = 12
    blank_counts = {Difficulty.EASY: 1, Difficulty.MEDIUM: 2, Difficulty.HARD: 3}

    def accepts(self, sentence: str) -> bool:
        return len(sentence) >= self.min_chars and len(tokenize(sentence)) >= self.min_words

    def candidate_positions(self, tokens: list[str]) -> list[tuple[int, str]]:
        positions = []
        for index, token in enumerate(tokens):
            word = clean_token(token)
            if len(word) > 4 and not word[0].islower() and word not in CONCEPT_EXCLUSIONS:
                positions.append((index, word))
        return positions

    def build_question(self, sentence: str, ctx: BuildContext, number: int) -> Question | None:
        tokens = tokenize(sentence)
        candidates = self.candidate_positions(tokens)
        if not candidates:
            return None

        ctx.rng.shuffle(candidates)
        chosen = sorted(candidates[: self.blank_counts[ctx.difficulty]])

        question_words = list(tokens)
        for index, _ in chosen:
            question_words[index] = FILL_BLANK
        answer = ", ".join(word for _, word in chosen)

        concept = concept_for(sentence, ctx.concepts)
        explanation = f"The missing words are: {answer}."
        if ctx.for_teacher:
            explanation += f" This {ctx.difficulty.value} level question tests understanding of {concept}."

        return Question(
            id=self._question_id(number),
            type=self.question_type,
            prompt=f"Fill in the blanks: {' '.join(question_words)}",
            correct_answer=answer,
            explanation=explanation,
            difficulty=ctx.difficulty,
            concept=concept,
            points=points_for(self.question_type, ctx.difficulty),
            source=sentence,
        )


QA_TEMPLATES: dict[Difficulty, tuple[str, ...]] = {
    Difficulty.EASY: (
        "What is mentioned about",
        "According to the text, what is known about",
        "The text states that",
        "What does the text say about",
        "How is {concept} described",
    ),
    Difficulty.MEDIUM: (
        "Explain the relationship between",
        "How does the text describe",
        "What can be inferred about",
        "Analyze the role of",
        "Compare the significance of",
    ),
    Difficulty.HARD: (
        "Critically evaluate the implications of",
        "Synthesize the key arguments regarding",
        "Assess the validity of claims about",
        "Examine the underlying assumptions of",
        "Construct an argument for",
    ),
}

QA_SKILLS = {
    Difficulty.EASY: "basic recall",
    Difficulty.MEDIUM: "comprehension and application",
    Difficulty.HARD: "critical thinking and analysis",
}


@register(QuestionType.QA)
class ShortAnswerBuilder(QuestionBuilder):
    """
    Short question/answer: a difficulty-specific stem about a concept.

    The whole source sentence is the canonical answer; grading is lexical.
    """

    question_type = QuestionType.QA
    min_chars = 60

    def accepts(self, sentence: str) -> bool:
        return len(sentence) >= self.min_chars

    def pick_subject(self, sentence: str, ctx: BuildContext) -> str | None:
        """Concept named in the stem: the sentence's own, else any extracted one."""
        subject = concept_for(sentence, ctx.concepts, default="")
        if not subject and ctx.concepts:
            subject = ctx.rng.choice(ctx.concepts)
        return subject or None

    def render_prompt(self, template: str, sentence: str, concept: str | None, ctx: BuildContext) -> str:
        subject = concept.lower() if concept else "the main topic"

        if "{concept}" in template:
            return f"{template.replace('{concept}', subject)} in the text?"
        if "mentioned about" in template or "describe" in template:
            return f"{template} {subject} based on this passage?"
        if "states that" in template:
            return f'Complete this statement from the text: "{sentence[:40]}..."'
        if "relationship" in template or "Compare" in template:
            others = [c for c in ctx.concepts if c != concept]
            second = ctx.rng.choice(others).lower() if others else "related concepts"
            return f"{template} {subject} and {second} as discussed in the text?"
        return f"{template} {subject} as presented in the text?"

    def build_question(self, sentence: str, ctx: BuildContext, number: int) -> Question | None:
        template = ctx.rng.choice(QA_TEMPLATES[ctx.difficulty])
        subject = self.pick_subject(sentence, ctx)
        # The label only names a concept the sentence actually mentions
        label = concept_for(sentence, ctx.concepts, default=DEFAULT_CONCEPT)

        explanation = "This answer is based on the information provided in the text."
        if ctx.for_teacher:
            explanation += (
                f" This {ctx.difficulty.value} level question assesses"
                f" {QA_SKILLS[ctx.difficulty]} skills related to {label}."
            )

        return Question(
            id=self._question_id(number),
            type=self.question_type,
            prompt=self.render_prompt(template, sentence, subject, ctx),
            correct_answer=sentence,
            explanation=explanation,
            difficulty=ctx.difficulty,
            concept=label,
            points=points_for(self.question_type, ctx.difficulty),
            source=sentence,
        )


__all__ = [
    "BUILDERS",
    "BuildContext",
    "FillupBuilder",
    "MCQBuilder",
    "QuestionBuilder",
    "ShortAnswerBuilder",
    "blank_out",
    "get_builder",
    "register",
]
