"""
Quiz-history course recommender.

Modules:
- catalog: Static course and quiz catalogs, plain slice recommendations
- features: Feature vectors from quiz results
- training: Synthetic noisy training data with a pluggable label function
- engine: Model fit, course scoring, ranking and fallback
"""

from .catalog import (
    fallback_courses,
    get_course,
    get_courses,
    get_quiz,
    get_quizzes,
    recommend_courses,
)
from .engine import (
    RecommendationResult,
    RecommendationStatus,
    analyze_quiz_results,
    rank_courses,
)
from .features import FeatureVector, extract_features
from .training import TrainingSet, average_performance_label, prepare_training_data

__all__ = [
    # Catalog
    "get_courses",
    "get_course",
    "get_quizzes",
    "get_quiz",
    "fallback_courses",
    "recommend_courses",
    # Engine
    "analyze_quiz_results",
    "rank_courses",
    "RecommendationResult",
    "RecommendationStatus",
    # Features and training
    "FeatureVector",
    "extract_features",
    "TrainingSet",
    "average_performance_label",
    "prepare_training_data",
]
