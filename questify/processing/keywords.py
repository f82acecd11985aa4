"""
Keyword filtering.

Produces the candidate terms used as the distractor pool and as blank
targets: lowercase tokens longer than three characters that are not
common function words.
"""
from __future__ import annotations

import re

from .segmenter import clean_token

TOKEN_SPLIT = re.compile(r"[^\w]+")
MIN_KEYWORD_LENGTH = 4

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "its", "may", "new", "now", "old", "see", "two", "who", "boy",
    "did", "does", "let", "man", "she", "too", "use", "will", "with", "have",
    "this", "that", "they", "from", "been", "said", "each", "which", "their",
    "time", "would", "there", "could", "other", "after", "first", "well",
    "water", "very", "what", "know", "just", "where", "much", "before",
    "move", "right", "think", "also", "around", "another", "came", "come",
    "work", "three", "must", "because", "part",
})


def extract_keywords(text: str) -> frozenset[str]:
    """
    Return the set of candidate keywords in ``text``.

    Unordered by contract; callers that draw from it randomly must sort
    first so that a seeded run does not depend on string hash order.
    """
    words = TOKEN_SPLIT.split(text.lower())
    return frozenset(
        word for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    )


def is_candidate_term(token: str) -> bool:
    """True if a raw sentence token is worth blanking out."""
    word = clean_token(token)
    return len(word) >= MIN_KEYWORD_LENGTH and word.lower() not in STOP_WORDS
