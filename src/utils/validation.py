"""
Schema validation utilities for QuizPath.

Quiz histories arrive as JSON produced by the quiz front end. This module
validates them against JSON Schema before they are turned into model objects.

Features:
- Draft-07 validation with format checking
- Deep copy to prevent mutations
- Optional repair: snake_case keys renamed to the camelCase wire format,
  numeric strings coerced to numbers
- Cross-field checks the schema cannot express
- Transparent repair tracking
"""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator, FormatChecker, ValidationError

try:
    from ..config import config
    from ..models.quiz import QuizResult
except ImportError:
    from src.config import config
    from src.models.quiz import QuizResult

logger = logging.getLogger(__name__)

# snake_case -> camelCase wire names
_WIRE_KEYS = {
    "quiz_id": "quizId",
    "time_taken": "timeTaken",
    "total_questions": "totalQuestions",
    "question_id": "questionId",
    "selected_option": "selectedOption",
    "is_correct": "isCorrect",
    "correct_answer": "correctAnswer",
}


class ValidationResult:
    """
    Result of a validation attempt.

    Attributes:
        valid: Whether data passed validation
        errors: List of error messages
        data: The validated data (may be modified if repair was attempted)
        repairs: List of repairs applied (for transparency)
    """

    def __init__(
        self,
        valid: bool,
        errors: list[str],
        data: Any = None,
        repairs: Optional[list[str]] = None,
    ):
        self.valid = valid
        self.errors = errors
        self.data = data
        self.repairs = repairs or []

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.valid

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.valid:
            msg = "✓ Validation passed"
            if self.repairs:
                msg += f" (with {len(self.repairs)} repair(s))"
            return msg
        return f"✗ Validation failed with {len(self.errors)} error(s):\n" + "\n".join(
            f"  - {error}" for error in self.errors
        )


class SchemaValidator:
    """
    JSON Schema validator with auto-repair capabilities.

    Usage:
        validator = SchemaValidator("path/to/schema.json")
        result = validator.validate(data)
        if result:
            print("Valid!")
        else:
            print(result.errors)
    """

    def __init__(self, schema_path: Path | str):
        """
        Initialize validator with a schema file.

        Args:
            schema_path: Path to JSON Schema file
        """
        self.schema_path = Path(schema_path)
        with open(self.schema_path, "r") as f:
            self.schema = json.load(f)
        self.validator = Draft7Validator(self.schema, format_checker=FormatChecker())

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        """
        Validate data against schema.

        Args:
            data: Data to validate
            auto_repair: If True, attempt to fix common validation errors

        Returns:
            ValidationResult with validation status and any errors
        """
        errors = [self._format_error(e) for e in self.validator.iter_errors(data)]

        if errors:
            if auto_repair:
                repaired_data, repairs = self._attempt_repair(data)
                result = self.validate(repaired_data, auto_repair=False)
                result.repairs = repairs
                return result
            return ValidationResult(valid=False, errors=errors, data=data)

        return ValidationResult(valid=True, errors=[], data=data)

    def _format_error(self, error: ValidationError) -> str:
        """
        Convert ValidationError to human-readable message with details.

        Args:
            error: jsonschema ValidationError

        Returns:
            Formatted error message with validator and schema path
        """
        path = " -> ".join(str(p) for p in error.path) if error.path else "root"
        validator_name = getattr(error, "validator", "unknown")
        schema_path = "/".join(str(p) for p in error.schema_path)
        return (
            f"At '{path}': {error.message} "
            f"[validator={validator_name}, schema_path=/{schema_path}]"
        )

    def _attempt_repair(self, data: Any) -> tuple[Any, list[str]]:
        """
        Attempt to automatically fix common validation errors.

        Args:
            data: Original data

        Returns:
            Tuple of (repaired data, list of repairs applied)
        """
        repaired = deepcopy(data)
        repairs: list[str] = []
        self._rename_keys(repaired, repairs)
        self._coerce_types(repaired, repairs)
        return repaired, repairs

    def _rename_keys(self, obj: Any, repairs: list[str], path: str = "root"):
        """Recursively rename snake_case keys to their camelCase wire names."""
        if isinstance(obj, dict):
            for snake, camel in _WIRE_KEYS.items():
                if snake in obj and camel not in obj:
                    obj[camel] = obj.pop(snake)
                    repairs.append(f"Renamed '{snake}' to '{camel}' at {path}")
            for key, value in obj.items():
                self._rename_keys(value, repairs, f"{path}.{key}")
        elif isinstance(obj, list):
            for i, item in enumerate(obj):
                self._rename_keys(item, repairs, f"{path}[{i}]")

    def _coerce_types(self, data: Any, repairs: list[str]):
        """
        Coerce numeric strings (e.g. "8" -> 8) in the numeric fields.

        Args:
            data: Data to coerce
            repairs: List to append repair messages
        """

        def safe_number(x):
            try:
                value = float(x)
            except (ValueError, TypeError):
                return x
            return int(value) if value.is_integer() else value

        if not isinstance(data, dict):
            return

        for key in ("score", "timeTaken", "totalQuestions"):
            value = data.get(key)
            if isinstance(value, str):
                coerced = safe_number(value)
                if coerced != value:
                    data[key] = coerced
                    repairs.append(f"Coerced {key}: '{value}' → {coerced}")

        for i, answer in enumerate(data.get("answers", []) or []):
            if isinstance(answer, dict) and isinstance(answer.get("selectedOption"), str):
                value = answer["selectedOption"]
                coerced = safe_number(value)
                if coerced != value:
                    answer["selectedOption"] = coerced
                    repairs.append(f"Coerced answer {i} selectedOption: '{value}' → {coerced}")


class QuizResultValidator(SchemaValidator):
    """
    Validator for one completed quiz result.

    Beyond the schema:
    - score must not exceed totalQuestions
    - answers must not outnumber totalQuestions
    - question ids must be unique within the answers
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.quiz_result_schema)

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        result = super().validate(data, auto_repair=auto_repair)
        if not result.valid:
            return result

        checked = result.data
        errors = []

        total = checked["totalQuestions"]
        if checked["score"] > total:
            errors.append(
                f"score ({checked['score']}) exceeds totalQuestions ({total})"
            )

        answers = checked.get("answers", [])
        if len(answers) > total:
            errors.append(
                f"{len(answers)} answers recorded for {total} question(s)"
            )

        seen = set()
        for answer in answers:
            qid = answer["questionId"]
            if qid in seen:
                errors.append(f"Duplicate answer for question '{qid}'")
            seen.add(qid)

        return ValidationResult(
            valid=not errors,
            errors=errors,
            data=checked,
            repairs=result.repairs,
        )


class QuizValidator(SchemaValidator):
    """
    Validator for quiz definitions.

    Beyond the schema: question ids are unique and every correctAnswer
    indexes an existing option.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        super().__init__(schema_path or config.paths.quiz_schema)

    def validate(self, data: dict, auto_repair: bool = False) -> ValidationResult:
        result = super().validate(data, auto_repair=auto_repair)
        if not result.valid:
            return result

        errors = []
        seen = set()
        for i, question in enumerate(result.data.get("questions", [])):
            qid = question["id"]
            if qid in seen:
                errors.append(f"Duplicate question id '{qid}'")
            seen.add(qid)

            if question["correctAnswer"] >= len(question["options"]):
                errors.append(
                    f"Question {i} ('{qid}'): correctAnswer {question['correctAnswer']} "
                    f"out of range for {len(question['options'])} option(s)"
                )

        return ValidationResult(
            valid=not errors,
            errors=errors,
            data=result.data,
            repairs=result.repairs,
        )


# Convenience functions for quick validation
def validate_quiz_result(data: dict, auto_repair: bool = False) -> ValidationResult:
    """
    Quick validation of one quiz result.

    Example:
        result = validate_quiz_result({"quizId": "web-basics", ...})
        if not result:
            print("Errors:", result.errors)
    """
    return QuizResultValidator().validate(data, auto_repair=auto_repair)


def validate_quiz(data: dict, auto_repair: bool = False) -> ValidationResult:
    """Quick validation of one quiz definition."""
    return QuizValidator().validate(data, auto_repair=auto_repair)


def load_quiz_history(path: Path | str, auto_repair: bool = True) -> list[QuizResult]:
    """
    Load and validate a JSON file holding a list of quiz results.

    Args:
        path: JSON file (top-level array of quiz-result objects)
        auto_repair: Whether to attempt automatic repairs per entry

    Returns:
        Parsed QuizResult objects, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a list or any entry fails validation
    """
    path = Path(path)
    with open(path, "r") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON array of quiz results")

    validator = QuizResultValidator()
    results = []
    errors = []

    for i, entry in enumerate(raw):
        result = validator.validate(entry, auto_repair=auto_repair)
        if not result:
            errors.extend(f"Entry {i}: {err}" for err in result.errors)
            continue
        if result.repairs:
            logger.info("Entry %d repaired: %s", i, "; ".join(result.repairs))
        results.append(QuizResult.from_dict(result.data))

    if errors:
        raise ValueError(f"{path}: invalid quiz history\n" + "\n".join(errors))

    return results
