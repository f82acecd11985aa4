"""
Heuristic text analysis for quiz generation.

Sentence segmentation, keyword filtering and concept extraction are kept
as independent pure functions so builders never embed string heuristics
inline.
"""

from .concepts import (
    CONCEPT_EXCLUSIONS,
    GENERAL_KNOWLEDGE,
    concept_for,
    extract_concepts,
)
from .keywords import STOP_WORDS, extract_keywords, is_candidate_term
from .segmenter import (
    TextSegmenter,
    clean_token,
    get_sentences,
    iter_sentences,
    tokenize,
)

__all__ = [
    "CONCEPT_EXCLUSIONS",
    "GENERAL_KNOWLEDGE",
    "STOP_WORDS",
    "TextSegmenter",
    "clean_token",
    "concept_for",
    "extract_concepts",
    "extract_keywords",
    "get_sentences",
    "is_candidate_term",
    "iter_sentences",
    "tokenize",
]
