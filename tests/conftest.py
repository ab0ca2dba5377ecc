"""
Shared pytest fixtures and configuration for QuizPath tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import pytest
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.models.quiz import Answer, Question, Quiz, QuizResult


def make_result(quiz_id, score, total, time_taken, correct=None, answered=None):
    """Build a QuizResult with ``answered`` answers, the first ``correct`` of them right."""
    answered = total if answered is None else answered
    correct = score if correct is None else correct
    answers = tuple(
        Answer(question_id=f"{quiz_id}-q{i}", selected_option=0, is_correct=i < correct)
        for i in range(answered)
    )
    return QuizResult(
        quiz_id=quiz_id,
        score=score,
        time_taken=time_taken,
        total_questions=total,
        answers=answers,
    )


@pytest.fixture
def result_factory():
    """Factory building QuizResult objects (see make_result)."""
    return make_result


@pytest.fixture
def data_science_quiz():
    """Advanced Data Science quiz."""
    return Quiz(
        id="ds-quiz",
        title="Data Science Check",
        description="Statistics and pandas",
        level="Advanced",
        category="Data Science",
        questions=(
            Question(id="ds-1", text="Mean of [1, 2, 3]?", options=("1", "2", "3"), correct_answer=1),
        ),
    )


@pytest.fixture
def web_quiz():
    """Beginner Web Development quiz."""
    return Quiz(
        id="web-quiz",
        title="Web Check",
        description="HTML basics",
        level="Beginner",
        category="Web Development",
    )


@pytest.fixture
def strong_result():
    """8/10 in 100 seconds, 8 of 10 answers correct."""
    return make_result("ds-quiz", score=8, total=10, time_taken=100)


@pytest.fixture
def mixed_history(data_science_quiz, web_quiz):
    """
    One perfect and one failed attempt.

    Noise of ±0.05 cannot move either across the 0.7 label threshold, so the
    synthetic training set always holds both classes.
    """
    results = [
        make_result("ds-quiz", score=10, total=10, time_taken=100),
        make_result("web-quiz", score=0, total=10, time_taken=100),
    ]
    return results, [data_science_quiz, web_quiz]


@pytest.fixture(autouse=True)
def reset_recommender_config():
    """
    Auto-fixture restoring recommender settings after each test.

    This ensures tests that tweak config don't interfere with each other.
    """
    from src.config import config

    saved_recommender = replace(config.recommender)
    saved_profile = replace(config.course_profile)
    yield
    config.recommender = saved_recommender
    config.course_profile = saved_profile


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
