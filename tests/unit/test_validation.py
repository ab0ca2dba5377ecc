"""
Unit tests for quiz-result and quiz schema validation.

Tests:
- Valid payloads pass
- Schema violations are reported
- Cross-field checks
- Auto-repair of snake_case keys and numeric strings
- Loading quiz history files
"""

import json

import pytest

from src.models.quiz import QuizResult
from src.recommender.catalog import get_quizzes
from src.utils.validation import (
    QuizResultValidator,
    ValidationResult,
    load_quiz_history,
    validate_quiz,
    validate_quiz_result,
)


@pytest.fixture
def result_payload():
    return {
        "quizId": "security-fundamentals",
        "score": 1,
        "timeTaken": 30,
        "totalQuestions": 2,
        "answers": [
            {"questionId": "security-fundamentals-1", "selectedOption": 1, "isCorrect": True},
            {"questionId": "security-fundamentals-2", "selectedOption": 3, "isCorrect": False},
        ],
    }


class TestValidationResult:
    def test_bool(self):
        assert ValidationResult(valid=True, errors=[])
        assert not ValidationResult(valid=False, errors=["x"])

    def test_str_lists_errors(self):
        text = str(ValidationResult(valid=False, errors=["first", "second"]))
        assert "2 error(s)" in text
        assert "first" in text


class TestQuizResultValidation:
    """Test suite for QuizResultValidator."""

    def test_valid_payload(self, result_payload):
        result = validate_quiz_result(result_payload)
        assert result.valid, result.errors

    def test_missing_quiz_id(self, result_payload):
        del result_payload["quizId"]
        result = validate_quiz_result(result_payload)
        assert not result.valid
        assert any("quizId" in err for err in result.errors)

    def test_negative_score(self, result_payload):
        result_payload["score"] = -1
        assert not validate_quiz_result(result_payload)

    def test_zero_total_questions(self, result_payload):
        result_payload["totalQuestions"] = 0
        assert not validate_quiz_result(result_payload)

    def test_score_above_total(self, result_payload):
        result_payload["score"] = 5
        result = validate_quiz_result(result_payload)
        assert not result.valid
        assert any("exceeds totalQuestions" in err for err in result.errors)

    def test_too_many_answers(self, result_payload):
        result_payload["totalQuestions"] = 1
        result_payload["score"] = 1
        result = validate_quiz_result(result_payload)
        assert any("answers recorded" in err for err in result.errors)

    def test_duplicate_answers(self, result_payload):
        result_payload["answers"][1]["questionId"] = "security-fundamentals-1"
        result = validate_quiz_result(result_payload)
        assert any("Duplicate answer" in err for err in result.errors)

    def test_auto_repair_snake_case(self, result_payload):
        snake = QuizResult.from_dict(result_payload).to_dict()
        assert not validate_quiz_result(snake)

        result = validate_quiz_result(snake, auto_repair=True)
        assert result.valid, result.errors
        assert "quizId" in result.data
        assert any("quiz_id" in r for r in result.repairs)

    def test_auto_repair_numeric_strings(self, result_payload):
        result_payload["score"] = "1"
        result_payload["totalQuestions"] = "2"
        result = validate_quiz_result(result_payload, auto_repair=True)
        assert result.valid, result.errors
        assert result.data["score"] == 1
        assert result.data["totalQuestions"] == 2
        # Original is untouched
        assert result_payload["score"] == "1"


class TestQuizValidation:
    """Test suite for QuizValidator."""

    def test_catalog_quizzes_are_valid(self):
        for quiz in get_quizzes():
            result = validate_quiz(quiz.to_dict(), auto_repair=True)
            assert result.valid, (quiz.id, result.errors)

    def test_unknown_level(self):
        data = get_quizzes()[0].to_dict()
        data["level"] = "Expert"
        assert not validate_quiz(data, auto_repair=True)

    def test_correct_answer_out_of_range(self):
        data = {
            "id": "q",
            "title": "Quiz",
            "level": "Beginner",
            "category": "Web Development",
            "questions": [
                {"id": "q-1", "text": "?", "options": ["a", "b"], "correctAnswer": 2},
            ],
        }
        result = validate_quiz(data)
        assert not result.valid
        assert any("out of range" in err for err in result.errors)


class TestLoadQuizHistory:
    """Test suite for load_quiz_history."""

    def test_load_valid_file(self, tmp_path, result_payload):
        path = tmp_path / "history.json"
        path.write_text(json.dumps([result_payload, result_payload]))

        results = load_quiz_history(path)
        assert len(results) == 2
        assert all(isinstance(r, QuizResult) for r in results)
        assert results[0].quiz_id == "security-fundamentals"

    def test_not_a_list(self, tmp_path, result_payload):
        path = tmp_path / "history.json"
        path.write_text(json.dumps(result_payload))
        with pytest.raises(ValueError, match="JSON array"):
            load_quiz_history(path)

    def test_invalid_entry(self, tmp_path, result_payload):
        bad = dict(result_payload, score=-3)
        path = tmp_path / "history.json"
        path.write_text(json.dumps([result_payload, bad]))
        with pytest.raises(ValueError, match="Entry 1"):
            load_quiz_history(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_quiz_history(tmp_path / "missing.json")

    def test_sample_history_loads(self):
        from pathlib import Path

        sample = Path(__file__).parent.parent.parent / "examples" / "data" / "sample_history.json"
        assert len(load_quiz_history(sample)) == 3

    def test_validator_uses_configured_schema(self):
        from src.config import config

        assert QuizResultValidator().schema_path == config.paths.quiz_result_schema
