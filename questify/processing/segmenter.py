"""
Sentence and token segmentation for raw source text.

Splits text on sentence terminators (., !, ?) and keeps sentences whose
trimmed length lies strictly between the configured bounds. Sentences that
are too short carry no testable fact; overly long ones make unreadable
prompts.

The segmenter never raises: text without any sentence in range simply
yields nothing, and the quiz generator decides what that means.
"""
from __future__ import annotations

import re
from typing import Iterator

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
NON_WORD = re.compile(r"[^\w]")

DEFAULT_MIN_CHARS = 20
DEFAULT_MAX_CHARS = 500


def iter_sentences(
    text: str,
    min_chars: int = DEFAULT_MIN_CHARS,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> Iterator[str]:
    """Yield trimmed sentences with ``min_chars < len < max_chars``."""
    for raw in SENTENCE_BOUNDARY.split(text):
        sentence = raw.strip()
        if min_chars < len(sentence) < max_chars:
            yield sentence


def get_sentences(
    text: str,
    min_chars: int = DEFAULT_MIN_CHARS,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> list[str]:
    """Materialised form of :func:`iter_sentences`."""
    return list(iter_sentences(text, min_chars, max_chars))


def tokenize(sentence: str) -> list[str]:
    """Split a sentence into whitespace-delimited tokens (punctuation kept)."""
    return sentence.split()


def clean_token(token: str) -> str:
    """Strip every non-word character from a token."""
    return NON_WORD.sub("", token)


class TextSegmenter:
    """
    Restartable sentence source bound to one text.

    Iterating twice walks the text twice; nothing is cached, so the
    segmenter is safe to share between builders.
    """

    def __init__(
        self,
        text: str,
        min_chars: int = DEFAULT_MIN_CHARS,
        max_chars: int = DEFAULT_MAX_CHARS,
    ):
        self.text = text
        self.min_chars = min_chars
        self.max_chars = max_chars

    def __iter__(self) -> Iterator[str]:
        return iter_sentences(self.text, self.min_chars, self.max_chars)

    def sentences(self) -> list[str]:
        return list(self)

    def is_empty(self) -> bool:
        return next(iter(self), None) is None
