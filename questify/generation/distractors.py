"""
Distractor synthesis for multiple-choice questions.

Wrong options come from three tiers, each used only when the previous one
runs dry:

1. Corpus keywords of similar length to the target
2. Synthetic morphological variants (prefix/suffix by difficulty)
3. Literal ``option{N}`` placeholders for pathological short targets

Synthetic variants such as "pseudo" + word are nonsense on purpose: they
are last-resort filler, not an attempt at smarter generation.
"""
from __future__ import annotations

import random
from typing import Iterable

from loguru import logger

from questify.models import Difficulty

DISTRACTOR_COUNT = 3

# (prefix, suffix) transforms per difficulty
SYNTHETIC_TRANSFORMS: dict[Difficulty, tuple[tuple[str, str], ...]] = {
    Difficulty.EASY: (("", "s"), ("", "ed"), ("", "ing")),
    Difficulty.MEDIUM: (("un", ""), ("", "tion"), ("pre", "")),
    Difficulty.HARD: (("anti", ""), ("", "ism"), ("pseudo", "")),
}


def synthetic_variants(
    target: str,
    difficulty: Difficulty,
    transforms: dict[Difficulty, tuple[tuple[str, str], ...]] = SYNTHETIC_TRANSFORMS,
) -> list[str]:
    """Morphological variants of ``target``; any equal to the target is dropped."""
    variants = [prefix + target + suffix for prefix, suffix in transforms[difficulty]]
    return [v for v in variants if v != target]


class DistractorSynthesizer:
    """
    Produces exactly three distinct wrong options for a target term.

    Options are compared case-insensitively because answers are graded
    case-insensitively: a distractor "energy" next to the answer "Energy"
    would be a second correct option.
    """

    def __init__(
        self,
        keywords: Iterable[str],
        rng: random.Random,
        transforms: dict[Difficulty, tuple[tuple[str, str], ...]] | None = None,
    ):
        self.keywords = sorted(keywords)
        self.rng = rng
        self.transforms = transforms or SYNTHETIC_TRANSFORMS

    def synthesize(self, target: str, difficulty: Difficulty) -> list[str]:
        taken = {target.lower()}
        low, high = len(target) - 2, len(target) + 3

        pool = [
            word for word in self.keywords
            if word not in taken and low <= len(word) <= high
        ]
        self.rng.shuffle(pool)
        distractors = pool[:DISTRACTOR_COUNT]
        taken.update(distractors)

        if len(distractors) < DISTRACTOR_COUNT:
            for variant in synthetic_variants(target, difficulty, self.transforms):
                if len(distractors) == DISTRACTOR_COUNT:
                    break
                if variant.lower() not in taken:
                    distractors.append(variant)
                    taken.add(variant.lower())

        n = 1
        while len(distractors) < DISTRACTOR_COUNT:
            placeholder = f"option{n}"
            n += 1
            if placeholder not in taken:
                distractors.append(placeholder)
                taken.add(placeholder)

        logger.debug(f"Distractors for '{target}' ({difficulty.value}): {distractors}")
        return distractors

    def build_options(self, target: str, difficulty: Difficulty) -> tuple[str, ...]:
        """Target plus three distractors, shuffled."""
        options = [target, *self.synthesize(target, difficulty)]
        self.rng.shuffle(options)
        return tuple(options)
