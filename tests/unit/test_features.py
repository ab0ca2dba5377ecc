"""
Unit tests for feature extraction.

Tests per-result feature values, dropping of unknown quizzes and the
guards for malformed results.
"""

import math

import numpy as np
import pytest

from src.models.quiz import Answer, Quiz
from src.recommender.features import (
    NUM_FEATURES,
    consistency_score,
    extract_features,
    extract_result_features,
    to_matrix,
)


class TestExtractFeatures:
    """Test suite for extract_features."""

    def test_reference_vector(self, strong_result, data_science_quiz):
        """8/10 in 100s, 8 correct answers, Advanced Data Science."""
        vectors = extract_features([strong_result], [data_science_quiz])
        assert len(vectors) == 1
        assert vectors[0].to_list() == pytest.approx([0.8, 10.0, 0.8, 3, 2])

    def test_unmatched_results_dropped(self, result_factory, data_science_quiz):
        results = [
            result_factory("unknown", score=5, total=10, time_taken=50),
            result_factory("ds-quiz", score=5, total=10, time_taken=50),
        ]
        vectors = extract_features(results, [data_science_quiz])
        assert [v.quiz_id for v in vectors] == ["ds-quiz"]

    def test_no_matches_gives_empty(self, strong_result):
        assert extract_features([strong_result], []) == []

    def test_order_and_duplicates_preserved(self, result_factory, data_science_quiz, web_quiz):
        results = [
            result_factory("web-quiz", score=1, total=2, time_taken=10),
            result_factory("ds-quiz", score=2, total=2, time_taken=10),
            result_factory("web-quiz", score=1, total=2, time_taken=10),
        ]
        vectors = extract_features(results, [data_science_quiz, web_quiz])
        assert [v.quiz_id for v in vectors] == ["web-quiz", "ds-quiz", "web-quiz"]
        assert vectors[0] == vectors[2]

    def test_unknown_level_and_category(self, result_factory):
        quiz = Quiz(id="odd", title="Odd", description="", level="Expert", category="Gardening")
        vector = extract_result_features(result_factory("odd", 1, 2, 10), quiz)
        assert vector.difficulty_level == 1
        assert vector.category_weight == 0


class TestMalformedResults:
    """Guards for inputs that would otherwise divide by zero."""

    def test_empty_answers_consistency_zero(self, result_factory, data_science_quiz):
        result = result_factory("ds-quiz", score=4, total=5, time_taken=50, answered=0)
        vector = extract_result_features(result, data_science_quiz)
        assert vector.consistency == 0.0
        assert vector.score_fraction == pytest.approx(0.8)

    def test_zero_total_questions(self, result_factory, data_science_quiz):
        result = result_factory("ds-quiz", score=0, total=0, time_taken=30)
        vector = extract_result_features(result, data_science_quiz)
        assert vector.score_fraction == 0.0
        assert vector.time_per_question == 0.0
        assert all(math.isfinite(x) for x in vector.as_row())

    def test_consistency_score(self):
        answers = [
            Answer("a", 0, True),
            Answer("b", 1, False),
            Answer("c", 2, True),
            Answer("d", 3, True),
        ]
        assert consistency_score(answers) == pytest.approx(0.75)
        assert consistency_score([]) == 0.0


class TestToMatrix:
    def test_shape(self, strong_result, data_science_quiz):
        vectors = extract_features([strong_result, strong_result], [data_science_quiz])
        matrix = to_matrix(vectors)
        assert matrix.shape == (2, NUM_FEATURES)
        np.testing.assert_allclose(matrix[0], [0.8, 10.0, 0.8, 3.0, 2.0])

    def test_empty(self):
        assert to_matrix([]).shape == (0, NUM_FEATURES)
