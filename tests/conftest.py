"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from questify.generation import BuildContext, QuizGenerator  # noqa: E402
from questify.models import Difficulty, Question, QuestionType, points_for  # noqa: E402


PHOTOSYNTHESIS_TEXT = (
    "Photosynthesis converts light energy into chemical energy in plants. "
    "This process takes place inside the chloroplasts of green leaf cells. "
    "The light reactions split water molecules and release oxygen gas. "
    "These reactions also produce energy carriers for the sugar building steps. "
    "Photosynthesis supports nearly every food chain found on planet earth."
)

SINGLE_SENTENCE_TEXT = (
    "Mitochondria generate most of the chemical energy needed to power "
    "the biochemical reactions of living cells."
)

# Longer than the minimum, but every fragment is too short to be a sentence
FRAGMENT_TEXT = "Yes it is. " * 12


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def photosynthesis_text():
    """Five-sentence passage where 'Photosynthesis' is the only concept."""
    return PHOTOSYNTHESIS_TEXT


@pytest.fixture
def single_sentence_text():
    """A single usable sentence just over the minimum text length."""
    return SINGLE_SENTENCE_TEXT


@pytest.fixture
def fragment_text():
    return FRAGMENT_TEXT


@pytest.fixture
def seeded_generator():
    """Generator with a fixed seed."""
    return QuizGenerator(seed=42)


@pytest.fixture
def make_context():
    """Factory for a BuildContext over a text with a seeded random source."""
    def _make(text, difficulty=Difficulty.MEDIUM, seed=7, role=None):
        return BuildContext.from_text(text, difficulty, random.Random(seed), role=role)
    return _make


@pytest.fixture
def make_question():
    """Factory for hand-built questions."""
    def _make(
        question_id="mcq-1",
        question_type=QuestionType.MCQ,
        correct_answer="Paris",
        options=None,
        concept="Geography",
        difficulty=Difficulty.MEDIUM,
        prompt=None,
    ):
        if options is None and question_type is QuestionType.MCQ:
            options = ("London", "Paris", "Berlin", "Madrid")
        return Question(
            id=question_id,
            type=question_type,
            prompt=prompt or "What is the capital of France? ______",
            options=options or (),
            correct_answer=correct_answer,
            explanation=f'The correct answer is "{correct_answer}".',
            difficulty=difficulty,
            concept=concept,
            points=points_for(question_type, difficulty),
        )
    return _make
