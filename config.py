"""
Configuration settings for the questify quiz engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Input Validation
    # ========================================
    quiz_min_text_length: int = Field(
        default=100,
        description="Minimum trimmed characters of source text before generation is attempted",
    )
    quiz_default_count: int = Field(
        default=5,
        description="Default number of questions per quiz",
    )
    quiz_max_count: int = Field(
        default=30,
        description="Upper bound on requested questions (CLI)",
    )

    # ========================================
    # Text Segmentation
    # ========================================
    quiz_sentence_min_chars: int = Field(
        default=20,
        description="Sentences must be longer than this (exclusive)",
    )
    quiz_sentence_max_chars: int = Field(
        default=500,
        description="Sentences must be shorter than this (exclusive)",
    )
    quiz_max_concepts: int = Field(
        default=15,
        description="Maximum concepts extracted from a text",
    )

    # ========================================
    # Generation
    # ========================================
    quiz_attempt_multiplier: int = Field(
        default=5,
        description="Sentence draws per requested question before a builder gives up",
    )
    quiz_minutes_per_question: int = Field(
        default=2,
        description="Estimated minutes per question for quiz metadata",
    )
    quiz_seed: int | None = Field(
        default=None,
        description="Fixed random seed (None for non-deterministic generation)",
    )

    # ========================================
    # Performance Analytics
    # ========================================
    quiz_weak_threshold: int = Field(
        default=70,
        description="Concepts scoring below this percentage are weak",
    )
    quiz_strong_threshold: int = Field(
        default=80,
        description="Concepts scoring at or above this percentage are strong",
    )
    quiz_good_threshold: int = Field(
        default=60,
        description="Overall percentage for the 'Good Job!' verdict",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_quiz_config(self) -> dict[str, Any]:
        """Get quiz generation and analytics configuration as a dictionary."""
        return {
            "min_text_length": self.quiz_min_text_length,
            "count": {
                "default": self.quiz_default_count,
                "max": self.quiz_max_count,
            },
            "sentence_chars": {
                "min": self.quiz_sentence_min_chars,
                "max": self.quiz_sentence_max_chars,
            },
            "max_concepts": self.quiz_max_concepts,
            "attempt_multiplier": self.quiz_attempt_multiplier,
            "seed": self.quiz_seed,
            "thresholds": {
                "weak": self.quiz_weak_threshold,
                "strong": self.quiz_strong_threshold,
                "good": self.quiz_good_threshold,
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
