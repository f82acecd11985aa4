"""
Concept extraction.

A concept is a salient capitalized term (longer than five characters)
that labels the questions built from the sentences mentioning it.
"""
from __future__ import annotations

import string
from typing import Iterable, Sequence

CONCEPT_EXCLUSIONS: frozenset[str] = frozenset({
    "The", "This", "That", "These", "Those",
    "When", "Where", "What", "Which", "Who", "How", "Why",
})

MIN_CONCEPT_LENGTH = 6
DEFAULT_CONCEPT_LIMIT = 15
GENERAL_KNOWLEDGE = "General Knowledge"


def is_concept_word(word: str) -> bool:
    return (
        len(word) >= MIN_CONCEPT_LENGTH
        and word[0].isupper()
        and word not in CONCEPT_EXCLUSIONS
    )


def extract_concepts(sentences: Iterable[str], limit: int = DEFAULT_CONCEPT_LIMIT) -> list[str]:
    """First-seen, deduplicated concept candidates, capped at ``limit``."""
    concepts: list[str] = []
    seen: set[str] = set()
    for sentence in sentences:
        for token in sentence.split(" "):
            word = token.strip(string.punctuation)
            if word in seen or not is_concept_word(word):
                continue
            seen.add(word)
            concepts.append(word)
            if len(concepts) >= limit:
                return concepts
    return concepts


def concept_for(sentence: str, concepts: Sequence[str], default: str = GENERAL_KNOWLEDGE) -> str:
    """The first concept textually contained in ``sentence``, else ``default``."""
    for concept in concepts:
        if concept in sentence:
            return concept
    return default
