"""
Assessment module: grading and performance analytics.

This module provides:
- evaluate / AnswerEvaluator: normalized exact-match grading
- PerformanceAggregator: concept statistics, strong/weak classification
"""

from .evaluator import AnswerEvaluator, evaluate, percentage_of
from .performance import PerformanceAggregator

__all__ = [
    "AnswerEvaluator",
    "PerformanceAggregator",
    "evaluate",
    "percentage_of",
]
