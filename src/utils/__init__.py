"""
Utility modules for QuizPath.

This module contains utility functions:
- validation: JSON Schema validation of quiz results and quiz definitions
"""

from .validation import (
    QuizResultValidator,
    QuizValidator,
    ValidationResult,
    load_quiz_history,
    validate_quiz,
    validate_quiz_result,
)

__all__ = [
    "ValidationResult",
    "QuizResultValidator",
    "QuizValidator",
    "validate_quiz_result",
    "validate_quiz",
    "load_quiz_history",
]
