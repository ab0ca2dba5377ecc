"""
Data models for course recommendation.

This module contains core data models:
- Quiz, Question: Quiz reference data
- QuizResult, Answer: Completed quiz attempts (recommender input)
- Course, CourseFeatureProfile: Catalog entries and their scoring rows
"""

from .course import Course, CourseFeatureProfile, category_weight, difficulty_level
from .quiz import Answer, Question, Quiz, QuizResult

__all__ = [
    "Quiz",
    "Question",
    "QuizResult",
    "Answer",
    "Course",
    "CourseFeatureProfile",
    "difficulty_level",
    "category_weight",
]
