"""
Unit tests for the fallback generator.
"""

import pytest

from questify.generation.builders import FILL_BLANK, MCQ_BLANK
from questify.generation.fallback import FallbackGenerator
from questify.models import Difficulty, QuestionType


@pytest.fixture
def fallback():
    return FallbackGenerator()


class TestTerms:

    def test_terms_in_sentence_order(self, fallback):
        assert fallback.terms("Plants, like algae, absorb sunlight") == ["Plants", "algae", "absorb", "sunlight"]

    def test_middle_word_when_no_long_term(self, fallback):
        assert fallback.terms("Dogs can run fast") == ["run"]


class TestFallbackGenerator:
    """Deficit top-up with relaxed rules."""

    @pytest.mark.parametrize("question_type", list(QuestionType))
    def test_produces_exact_deficit(self, fallback, make_context, single_sentence_text, question_type):
        questions = fallback.generate(question_type, 4, make_context(single_sentence_text))

        assert len(questions) == 4
        assert [q.id for q in questions] == [
            f"{question_type.value}-fallback-{n}" for n in range(1, 5)
        ]
        assert all(q.type is question_type for q in questions)

    def test_mcq_questions_are_sound(self, fallback, make_context, single_sentence_text):
        for q in fallback.generate(QuestionType.MCQ, 6, make_context(single_sentence_text)):
            assert q.prompt.startswith('Complete: "')
            assert MCQ_BLANK in q.prompt
            assert len(set(q.options)) == 4
            assert q.options.count(q.correct_answer) == 1

    def test_mcq_prompts_are_distinct_while_terms_remain(self, fallback, make_context, single_sentence_text):
        questions = fallback.generate(QuestionType.MCQ, 6, make_context(single_sentence_text))
        assert len({q.prompt for q in questions}) == 6

    def test_fillup_blanks_the_answer(self, fallback, make_context, single_sentence_text):
        ctx = make_context(single_sentence_text)
        for q in fallback.generate(QuestionType.FILLUP, 3, ctx):
            assert q.prompt.startswith("Fill in the blank: ")
            assert FILL_BLANK in q.prompt
            assert q.correct_answer in ctx.sentences[0]

    def test_qa_repeats_once_material_is_exhausted(self, fallback, make_context, single_sentence_text):
        ctx = make_context(single_sentence_text)
        questions = fallback.generate(QuestionType.QA, 3, ctx)

        assert len(questions) == 3
        assert len({q.prompt for q in questions}) == 1
        assert all(q.correct_answer == ctx.sentences[0] for q in questions)
        assert all(q.concept == "Mitochondria" for q in questions)

    def test_taken_facts_are_skipped(self, fallback, make_context, single_sentence_text):
        ctx = make_context(single_sentence_text)
        (first,) = fallback.generate(QuestionType.FILLUP, 1, ctx)
        (second,) = fallback.generate(QuestionType.FILLUP, 1, ctx, taken={first.key})

        assert second.key != first.key
        assert second.source == first.source == ctx.sentences[0]

    def test_fact_taken_by_another_prompt_wording_is_skipped(self, fallback, make_context, single_sentence_text):
        ctx = make_context(single_sentence_text)
        # Same sentence and term as a primary question, whatever its prompt said
        taken = {(ctx.sentences[0], "mitochondria")}
        (question,) = fallback.generate(QuestionType.MCQ, 1, ctx, taken=taken)

        assert question.correct_answer == "generate"

    def test_count_met_when_every_fact_is_taken(self, fallback, make_context, single_sentence_text):
        ctx = make_context(single_sentence_text)
        sentence = ctx.sentences[0]
        questions = fallback.generate(QuestionType.QA, 2, ctx, taken={(sentence, sentence.lower())})

        assert len(questions) == 2

    def test_positional_walk_is_deterministic(self, fallback, make_context, photosynthesis_text):
        first = fallback.generate(QuestionType.FILLUP, 5, make_context(photosynthesis_text, seed=1))
        second = fallback.generate(QuestionType.FILLUP, 5, make_context(photosynthesis_text, seed=2))
        assert [q.prompt for q in first] == [q.prompt for q in second]

    def test_zero_deficit(self, fallback, make_context, single_sentence_text):
        assert fallback.generate(QuestionType.MCQ, 0, make_context(single_sentence_text)) == []

    def test_no_sentences(self, fallback, make_context, fragment_text):
        assert fallback.generate(QuestionType.QA, 3, make_context(fragment_text)) == []

    def test_concept_defaults(self, fallback, make_context):
        text = "energy flows through every layer of the food web in a healthy forest system"
        ctx = make_context(text)

        (mcq,) = fallback.generate(QuestionType.MCQ, 1, ctx)
        (qa,) = fallback.generate(QuestionType.QA, 1, ctx)
        assert mcq.concept == "General Knowledge"
        assert qa.concept == "General"

    @pytest.mark.parametrize(
        "question_type,difficulty,points",
        [
            (QuestionType.MCQ, Difficulty.EASY, 1),
            (QuestionType.FILLUP, Difficulty.HARD, 3),
            (QuestionType.QA, Difficulty.HARD, 5),
        ],
    )
    def test_points_follow_type_and_difficulty(
        self, fallback, make_context, single_sentence_text, question_type, difficulty, points
    ):
        (question,) = fallback.generate(question_type, 1, make_context(single_sentence_text, difficulty))
        assert question.points == points
        assert question.difficulty is difficulty
