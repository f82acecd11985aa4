"""
Unit tests for MCQ distractor synthesis.
"""

import random

import pytest

from questify.generation.distractors import (
    SYNTHETIC_TRANSFORMS,
    DistractorSynthesizer,
    synthetic_variants,
)
from questify.models import Difficulty


@pytest.fixture
def rng():
    return random.Random(3)


class TestSyntheticVariants:

    @pytest.mark.parametrize(
        "difficulty,expected",
        [
            (Difficulty.EASY, ["cycles", "cycled", "cycleing"]),
            (Difficulty.MEDIUM, ["uncycle", "cycletion", "precycle"]),
            (Difficulty.HARD, ["anticycle", "cycleism", "pseudocycle"]),
        ],
    )
    def test_variants_by_difficulty(self, difficulty, expected):
        assert synthetic_variants("cycle", difficulty) == expected

    def test_identity_transform_is_dropped(self):
        transforms = {Difficulty.EASY: (("", ""), ("", "s"))}
        assert synthetic_variants("cell", Difficulty.EASY, transforms) == ["cells"]


class TestDistractorSynthesizer:
    """Three-tier distractor selection."""

    def test_keyword_tier(self, rng):
        pool = {"carbon", "oxygen", "nitrogen", "sulfur", "helium"}
        distractors = DistractorSynthesizer(pool, rng).synthesize("hydrogen", Difficulty.MEDIUM)

        assert len(distractors) == 3
        assert len(set(distractors)) == 3
        assert set(distractors) <= pool

    def test_keywords_outside_length_window_are_ignored(self, rng):
        # "hydrogen" has 8 characters: window is 6..11
        pool = {"gas", "electronegativity"}
        distractors = DistractorSynthesizer(pool, rng).synthesize("hydrogen", Difficulty.MEDIUM)

        assert distractors == ["unhydrogen", "hydrogention", "prehydrogen"]

    def test_target_is_excluded_case_insensitively(self, rng):
        pool = {"energy", "enzyme", "entropy", "element"}
        for _ in range(20):
            distractors = DistractorSynthesizer(pool, rng).synthesize("Energy", Difficulty.MEDIUM)
            assert "energy" not in [d.lower() for d in distractors]

    def test_mixed_keyword_and_synthetic_tiers(self, rng):
        distractors = DistractorSynthesizer({"crater"}, rng).synthesize("cycle", Difficulty.EASY)
        assert distractors == ["crater", "cycles", "cycled"]

    def test_synthetic_variant_already_taken_is_skipped(self, rng):
        distractors = DistractorSynthesizer({"uncycle"}, rng).synthesize("cycle", Difficulty.MEDIUM)
        assert distractors == ["uncycle", "cycletion", "precycle"]

    def test_placeholder_tier(self, rng):
        identity = {difficulty: (("", ""),) for difficulty in SYNTHETIC_TRANSFORMS}
        synthesizer = DistractorSynthesizer([], rng, transforms=identity)

        assert synthesizer.synthesize("ab", Difficulty.HARD) == ["option1", "option2", "option3"]

    def test_placeholder_skips_target(self, rng):
        identity = {difficulty: (("", ""),) for difficulty in SYNTHETIC_TRANSFORMS}
        synthesizer = DistractorSynthesizer([], rng, transforms=identity)

        assert synthesizer.synthesize("option1", Difficulty.EASY) == ["option2", "option3", "option4"]

    def test_build_options(self, rng):
        pool = {"carbon", "oxygen", "nitrogen", "sulfur", "helium"}
        options = DistractorSynthesizer(pool, rng).build_options("hydrogen", Difficulty.MEDIUM)

        assert len(options) == 4
        assert len(set(options)) == 4
        assert options.count("hydrogen") == 1

    def test_seeded_synthesis_is_reproducible(self):
        pool = {"carbon", "oxygen", "nitrogen", "sulfur", "helium", "argon", "neon"}
        first = DistractorSynthesizer(pool, random.Random(11)).build_options("hydrogen", Difficulty.MEDIUM)
        second = DistractorSynthesizer(pool, random.Random(11)).build_options("hydrogen", Difficulty.MEDIUM)
        assert first == second
