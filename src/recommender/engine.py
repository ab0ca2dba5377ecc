"""
Course recommendation engine.

Pipeline for one call:
1. Extract feature vectors from the learner's quiz results
2. Expand them into a synthetic labeled training set
3. Fit a logistic-regression classifier by constant-step gradient descent
4. Score the fixed profile of every catalog course and keep the top ones

Any error after the empty-history check returns the fallback catalog slice. The outcome is
reported as a RecommendationResult so callers can tell "no data" apart from
"model failure"; analyze_quiz_results() is the plain list facade.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.linear_model import SGDClassifier

from ..config import config
from ..models.course import Course, CourseFeatureProfile
from ..models.quiz import Quiz, QuizResult
from .catalog import fallback_courses, get_courses
from .features import extract_features
from .training import (
    LabelFunction,
    TrainingSet,
    average_performance_label,
    make_rng,
    prepare_training_data,
)

logger = logging.getLogger(__name__)


class RecommendationStatus(str, Enum):
    RANKED = "ranked"
    NO_HISTORY = "no_history"
    NO_DATA = "no_data"
    MODEL_FAILURE = "model_failure"


@dataclass
class RecommendationResult:
    """
    Outcome of one recommendation call.

    Attributes:
        status: Which path produced the courses
        courses: Recommended courses, best first
        scores: Predicted probability per course id (ranked path only)
        reason: Why ranking was not possible (non-ranked paths)
    """
    status: RecommendationStatus
    courses: List[Course] = field(default_factory=list)
    scores: Dict[str, float] = field(default_factory=dict)
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.status in (RecommendationStatus.NO_DATA, RecommendationStatus.MODEL_FAILURE)

    def __bool__(self) -> bool:
        """True only when the courses were actually ranked."""
        return self.status is RecommendationStatus.RANKED

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "courses": [c.to_dict() for c in self.courses],
            "scores": dict(self.scores),
            "reason": self.reason,
        }


def build_model(random_state: Optional[int] = None) -> SGDClassifier:
    """Unregularized logistic regression trained with a constant step size."""
    return SGDClassifier(
        loss="log_loss",
        penalty=None,
        learning_rate="constant",
        eta0=config.recommender.learning_rate,
        max_iter=config.recommender.num_steps,
        tol=None,
        random_state=random_state,
    )


def fit_model(training: TrainingSet, random_state: Optional[int] = None) -> SGDClassifier:
    """
    Fit a fresh classifier on the synthetic training set.

    Raises:
        ValueError: If the training set holds a single class
    """
    model = build_model(random_state)
    model.fit(training.X, training.y)
    return model


def course_profiles(courses: Sequence[Course]) -> List[CourseFeatureProfile]:
    return [CourseFeatureProfile.for_course(course) for course in courses]


def score_courses(
    model: SGDClassifier,
    courses: Sequence[Course],
) -> List[Tuple[Course, float]]:
    """
    Predict the positive-class probability for each course profile.

    Returns:
        (course, score) pairs in the order of ``courses``
    """
    profiles = course_profiles(courses)
    X = np.array([p.as_row() for p in profiles], dtype=float)
    positive = list(model.classes_).index(1)
    probabilities = model.predict_proba(X)[:, positive]
    return [(course, float(p)) for course, p in zip(courses, probabilities)]


def rank(scored: Sequence[Tuple[Course, float]], top_k: Optional[int] = None) -> List[Tuple[Course, float]]:
    """Sort by score descending, catalog order kept among ties, and keep top_k."""
    if top_k is None:
        top_k = config.recommender.top_k
    return sorted(scored, key=lambda pair: pair[1], reverse=True)[:top_k]


def _rank_history(
    quiz_results: Sequence[QuizResult],
    quizzes: Sequence[Quiz],
    label_fn: LabelFunction,
    rng: Optional[np.random.Generator],
) -> RecommendationResult:
    quiz_results = [r if isinstance(r, QuizResult) else QuizResult.from_dict(r) for r in quiz_results]
    quizzes = [q if isinstance(q, Quiz) else Quiz.from_dict(q) for q in quizzes]

    features = extract_features(quiz_results, quizzes)
    if not features:
        logger.info(
            "None of %d quiz result(s) match a known quiz, using fallback courses",
            len(quiz_results),
        )
        return RecommendationResult(
            status=RecommendationStatus.NO_DATA,
            courses=fallback_courses(),
            reason="No quiz results match a known quiz",
        )

    if rng is None:
        rng = make_rng()

    training = prepare_training_data(features, label_fn=label_fn, rng=rng)
    if training is None or len(training) == 0:
        logger.info("No synthetic training rows, using fallback courses")
        return RecommendationResult(
            status=RecommendationStatus.NO_DATA,
            courses=fallback_courses(),
            reason="No training rows",
        )

    if len(training.classes) < 2:
        logger.info(
            "All %d synthetic rows labeled %d, using fallback courses",
            len(training),
            int(training.classes[0]),
        )
        return RecommendationResult(
            status=RecommendationStatus.NO_DATA,
            courses=fallback_courses(),
            reason="Synthetic training rows have a single label",
        )

    model = fit_model(training, random_state=config.recommender.random_seed)
    ranked = rank(score_courses(model, get_courses()))

    logger.debug("Ranked courses: %s", [(c.id, round(s, 4)) for c, s in ranked])
    return RecommendationResult(
        status=RecommendationStatus.RANKED,
        courses=[course for course, _ in ranked],
        scores={course.id: score for course, score in ranked},
    )


def rank_courses(
    quiz_results: Sequence[QuizResult],
    quizzes: Sequence[Quiz],
    label_fn: LabelFunction = average_performance_label,
    rng: Optional[np.random.Generator] = None,
) -> RecommendationResult:
    """
    Rank catalog courses for a learner's quiz history.

    Args:
        quiz_results: Learner's completed quizzes (QuizResult objects or dicts)
        quizzes: Known quiz definitions (Quiz objects or dicts)
        label_fn: Label function for the synthetic training rows
        rng: Random generator for the noise (fresh from config if None)

    Returns:
        RecommendationResult describing which path produced the courses
    """
    if not quiz_results:
        return RecommendationResult(
            status=RecommendationStatus.NO_HISTORY,
            reason="No quiz results",
        )

    try:
        return _rank_history(quiz_results, quizzes, label_fn, rng)
    except Exception as e:
        logger.exception("Error in recommendation engine")
        return RecommendationResult(
            status=RecommendationStatus.MODEL_FAILURE,
            courses=fallback_courses(),
            reason=f"{type(e).__name__}: {e}",
        )


def analyze_quiz_results(
    quiz_results: Sequence[QuizResult],
    quizzes: Sequence[Quiz],
) -> List[Course]:
    """
    Recommend up to three courses from a learner's quiz history.

    Returns an empty list for an empty history and the first catalog courses
    when ranking is not possible.
    """
    return rank_courses(quiz_results, quizzes).courses
