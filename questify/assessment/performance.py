"""
Performance Aggregator for graded attempts.

Derives concept-level analytics from Feedback:
- Per-concept correct/total ratios (first-seen concept order)
- Weak concepts: percentage below 70
- Strong concepts: percentage of 80 or more
- Concepts in [70, 80) appear in neither list

Also aggregates a learner's history of attempts into overall stats.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from config import get_settings
from questify.models import (
    DEFAULT_CONCEPT,
    AttemptSummary,
    ConceptStat,
    Feedback,
    LearnerStats,
    PerformanceReport,
)

from .evaluator import percentage_of


class PerformanceAggregator:
    """
    Computes concept statistics and strength/weakness classification.

    Thresholds (percentages):
    - weak: below ``weak_threshold`` (default 70)
    - strong: at or above ``strong_threshold`` (default 80)
    - verdict: "Excellent Work!" >= strong, "Good Job!" >= good (60)
    """

    def __init__(
        self,
        weak_threshold: int | None = None,
        strong_threshold: int | None = None,
        good_threshold: int | None = None,
    ):
        settings = get_settings()
        self.weak_threshold = weak_threshold if weak_threshold is not None else settings.quiz_weak_threshold
        self.strong_threshold = (
            strong_threshold if strong_threshold is not None else settings.quiz_strong_threshold
        )
        self.good_threshold = good_threshold if good_threshold is not None else settings.quiz_good_threshold

    def concept_stats(self, feedback: Iterable[Feedback]) -> list[ConceptStat]:
        """Group feedback by concept; blank concepts count as "General"."""
        tallies: dict[str, list[int]] = {}
        for item in feedback:
            concept = item.concept.strip() or DEFAULT_CONCEPT
            tally = tallies.setdefault(concept, [0, 0])
            tally[1] += 1
            if item.is_correct:
                tally[0] += 1

        return [
            ConceptStat(
                concept=concept,
                correct=correct,
                total=total,
                percentage=percentage_of(correct, total),
            )
            for concept, (correct, total) in tallies.items()
        ]

    def weak_concepts(self, stats: Sequence[ConceptStat]) -> list[ConceptStat]:
        return [s for s in stats if s.percentage < self.weak_threshold]

    def strong_concepts(self, stats: Sequence[ConceptStat]) -> list[ConceptStat]:
        return [s for s in stats if s.percentage >= self.strong_threshold]

    def verdict(self, percentage: int) -> str:
        if percentage >= self.strong_threshold:
            return "Excellent Work!"
        if percentage >= self.good_threshold:
            return "Good Job!"
        return "Keep Practicing!"

    def suggestions(self, weak: Sequence[ConceptStat]) -> list[str]:
        if not weak:
            return ["Great job! You performed well across all concepts."]
        return [f"Focus on {s.concept} - scored {s.percentage}%" for s in weak]

    def strengths(self, strong: Sequence[ConceptStat]) -> list[str]:
        if not strong:
            return ["Keep practicing to build stronger foundations."]
        return [f"Excellent understanding of {s.concept}" for s in strong]

    def build_report(self, summary: AttemptSummary) -> PerformanceReport:
        """Concept-level report for one attempt."""
        stats = self.concept_stats(summary.feedback)
        weak = self.weak_concepts(stats)
        strong = self.strong_concepts(stats)

        return PerformanceReport(
            score=summary.score,
            total_questions=summary.total_questions,
            percentage=summary.percentage,
            verdict=self.verdict(summary.percentage),
            concept_stats=tuple(stats),
            strong_concepts=tuple(strong),
            weak_concepts=tuple(weak),
            suggestions=tuple(self.suggestions(weak)),
            strengths=tuple(self.strengths(strong)),
        )

    def summarize_history(self, summaries: Sequence[AttemptSummary]) -> LearnerStats:
        """Aggregate a learner's attempts; concept stats are pooled over all feedback."""
        if not summaries:
            return LearnerStats(
                total_quizzes=0,
                average_score=0,
                total_time_spent=0,
                strong_concepts=(),
                weak_concepts=(),
                improvement_suggestions=(),
            )

        # mean of percentages, rounded half up
        count = len(summaries)
        average = (2 * sum(s.percentage for s in summaries) + count) // (2 * count)

        stats = self.concept_stats(f for s in summaries for f in s.feedback)
        weak = self.weak_concepts(stats)

        return LearnerStats(
            total_quizzes=count,
            average_score=average,
            total_time_spent=sum(s.time_spent for s in summaries),
            strong_concepts=tuple(s.concept for s in self.strong_concepts(stats)),
            weak_concepts=tuple(s.concept for s in weak),
            improvement_suggestions=tuple(self.suggestions(weak)) if weak else (),
        )
