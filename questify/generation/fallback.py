"""
Fallback generation with relaxed constraints.

Runs only for the deficit left by a primary builder. Instead of random
retries it walks the sentence pool positionally, cycling through each
sentence's candidate terms, so the amount of work is bounded by the
pool size times the longest term list.

Relaxed rules compared to the primary builders:
- Sentences need only 5 words (any sentence, if none has 5)
- The blank is the next term longer than 4 characters (middle word if none)
- No difficulty filtering on the term
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from questify.models import (
    DEFAULT_CONCEPT,
    Question,
    QuestionType,
    points_for,
)
from questify.processing import GENERAL_KNOWLEDGE, clean_token, concept_for, tokenize

from .builders import FILL_BLANK, MCQ_BLANK, BuildContext, blank_out

MIN_WORDS = 5
MIN_TERM_LENGTH = 5


class FallbackGenerator:
    """Tops up a short question list to the requested count."""

    def terms(self, sentence: str) -> list[str]:
        """Blank candidates in sentence order; never empty for a pooled sentence."""
        tokens = tokenize(sentence)
        terms = []
        for token in tokens:
            word = clean_token(token)
            if len(word) >= MIN_TERM_LENGTH and blank_out(sentence, word) != sentence:
                terms.append(word)
        if not terms:
            middle = tokens[len(tokens) // 2]
            word = clean_token(middle)
            terms = [word if word and word in sentence else middle]
        return terms

    def blank(self, sentence: str, term: str, marker: str) -> str:
        blanked = blank_out(sentence, term, marker)
        if marker not in blanked:
            blanked = sentence.replace(term, marker, 1)
        return blanked


    def generate(
        self,
        question_type: QuestionType,
        deficit: int,
        ctx: BuildContext,
        taken: Iterable[tuple[str, str]] = (),
    ) -> list[Question]:
        """
        Produce exactly ``deficit`` questions unless the text has no sentence.

        ``taken`` holds the keys (source sentence, lowercased answer) of
        questions already in the quiz. Those facts, and facts produced here,
        are skipped until every (sentence, term) pair has been tried; only
        then may variants repeat so the count is still met.
        """
        # Short sentences are only used when nothing longer exists
        pool = [s for s in ctx.sentences if len(tokenize(s)) >= MIN_WORDS] or list(ctx.sentences)
        if deficit <= 0 or not pool:
            return []

        terms = {sentence: self.terms(sentence) for sentence in pool}
        seen = set(taken)
        questions: list[Question] = []
        position = 0
        budget = len(pool) * max(len(t) for t in terms.values())

        while len(questions) < deficit and position < budget:
            sentence, term = self._pick(pool, terms, position)
            position += 1
            key = self._key(question_type, sentence, term)
            if key in seen:
                continue
            seen.add(key)
            questions.append(self._build(question_type, sentence, term, len(questions) + 1, ctx))

        repeats = 0
        while len(questions) < deficit:
            sentence, term = self._pick(pool, terms, position)
            questions.append(self._build(question_type, sentence, term, len(questions) + 1, ctx))
            position += 1
            repeats += 1

        logger.debug(
            f"Fallback produced {len(questions)} {question_type.value} questions "
            f"from {len(pool)} sentences ({repeats} repeated)"
        )
        return questions

    def _pick(self, pool: list[str], terms: dict[str, list[str]], position: int) -> tuple[str, str]:
        sentence = pool[position % len(pool)]
        candidates = terms[sentence]
        return sentence, candidates[(position // len(pool)) % len(candidates)]

    def _key(self, question_type: QuestionType, sentence: str, term: str) -> tuple[str, str]:
        answer = sentence if question_type is QuestionType.QA else term
        return (sentence, answer.lower())

    def _build(
        self,
        question_type: QuestionType,
        sentence: str,
        term: str,
        number: int,
        ctx: BuildContext,
    ) -> Question:
        question_id = f"{question_type.value}-fallback-{number}"
        default = DEFAULT_CONCEPT if question_type is QuestionType.QA else GENERAL_KNOWLEDGE
        concept = concept_for(sentence, ctx.concepts, default=default)
        points = points_for(question_type, ctx.difficulty)

        if question_type is QuestionType.MCQ:
            return Question(
                id=question_id,
                type=question_type,
                prompt=f'Complete: "{self.blank(sentence, term, MCQ_BLANK)}"',
                options=ctx.distractors.build_options(term, ctx.difficulty),
                correct_answer=term,
                explanation=f'The correct answer is "{term}".',
                difficulty=ctx.difficulty,
                concept=concept,
                points=points,
                source=sentence,
            )

        if question_type is QuestionType.FILLUP:
            return Question(
                id=question_id,
                type=question_type,
                prompt=f"Fill in the blank: {self.blank(sentence, term, FILL_BLANK)}",
                correct_answer=term,
                explanation=f'The missing word is "{term}".',
                difficulty=ctx.difficulty,
                concept=concept,
                points=points,
                source=sentence,
            )

        return Question(
            id=question_id,
            type=QuestionType.QA,
            prompt=f'What does this sentence convey: "{sentence[:50]}..."?',
            correct_answer=sentence,
            explanation="This answer is based on the provided text.",
            difficulty=ctx.difficulty,
            concept=concept,
            points=points,
            source=sentence,
        )
