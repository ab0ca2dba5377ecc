"""
Feature extraction from quiz results.

Each completed quiz becomes a 5-component vector:

    [score fraction, time per question, consistency, difficulty level, category weight]

Results whose quiz is unknown are dropped. Malformed results never produce
non-finite values: a non-positive question count zeroes the per-question
components, an empty answer list gives consistency 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..models.course import category_weight, difficulty_level
from ..models.quiz import Answer, Quiz, QuizResult

logger = logging.getLogger(__name__)

FEATURE_NAMES: Tuple[str, ...] = (
    "score_fraction",
    "time_per_question",
    "consistency",
    "difficulty_level",
    "category_weight",
)
NUM_FEATURES = len(FEATURE_NAMES)


@dataclass(frozen=True)
class FeatureVector:
    """Numeric summary of one quiz attempt."""
    quiz_id: str
    score_fraction: float
    time_per_question: float
    consistency: float
    difficulty_level: int
    category_weight: int

    def as_row(self) -> Tuple[float, float, float, float, float]:
        return (
            float(self.score_fraction),
            float(self.time_per_question),
            float(self.consistency),
            float(self.difficulty_level),
            float(self.category_weight),
        )

    def to_list(self) -> List[float]:
        return list(self.as_row())


def consistency_score(answers: Sequence[Answer]) -> float:
    """Fraction of answers marked correct (0.0 for no answers)."""
    if not answers:
        return 0.0
    correct = sum(1 for a in answers if a.is_correct)
    return correct / len(answers)


def extract_result_features(result: QuizResult, quiz: Quiz) -> FeatureVector:
    """
    Compute the feature vector for one result of a known quiz.

    Args:
        result: Completed quiz attempt
        quiz: Quiz definition matching result.quiz_id

    Returns:
        FeatureVector with all components finite
    """
    if result.total_questions > 0:
        score_fraction = result.score / result.total_questions
        time_per_question = result.time_taken / result.total_questions
    else:
        logger.debug(
            "Result for quiz %s has total_questions=%s, using 0 for per-question features",
            result.quiz_id,
            result.total_questions,
        )
        score_fraction = 0.0
        time_per_question = 0.0

    if not result.answers:
        logger.debug("Result for quiz %s has no answers, consistency is 0", result.quiz_id)

    return FeatureVector(
        quiz_id=result.quiz_id,
        score_fraction=score_fraction,
        time_per_question=time_per_question,
        consistency=consistency_score(result.answers),
        difficulty_level=difficulty_level(quiz.level),
        category_weight=category_weight(quiz.category),
    )


def extract_features(
    quiz_results: Sequence[QuizResult],
    quizzes: Sequence[Quiz],
) -> List[FeatureVector]:
    """
    Build one feature vector per result that references a known quiz.

    Order follows ``quiz_results``; unmatched results are skipped and
    duplicates are kept.

    Example:
        >>> vectors = extract_features(results, quizzes)
        >>> vectors[0].to_list()
        [0.8, 10.0, 0.8, 3.0, 2.0]
    """
    vectors = []
    skipped = 0

    for result in quiz_results:
        quiz = result.find_quiz(quizzes)
        if quiz is None:
            skipped += 1
            continue
        vectors.append(extract_result_features(result, quiz))

    if skipped:
        logger.debug("Skipped %d result(s) with no matching quiz", skipped)

    return vectors


def to_matrix(vectors: Sequence[FeatureVector]) -> np.ndarray:
    """Stack feature vectors into an (n, 5) float array."""
    if not vectors:
        return np.empty((0, NUM_FEATURES), dtype=float)
    return np.array([v.as_row() for v in vectors], dtype=float)
