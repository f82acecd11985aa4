"""
Generation errors.

All three are terminal for a single generation call and propagate to the
caller unchanged.
"""


class QuizGenerationError(Exception):
    """Base class for quiz generation failures."""


class InsufficientInputError(QuizGenerationError):
    """Source text is shorter than the minimum length."""


class UnsupportedTypeError(QuizGenerationError):
    """Requested question type has no builder."""


class EmptyGenerationError(QuizGenerationError):
    """Source text yielded no usable question at all."""
