"""
Quiz reference data and learner quiz results.

Quizzes and questions are immutable catalog data. Quiz results are produced
by the quiz front end when a learner finishes a quiz and are read-only input
to the recommender.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


def _pick(data: Dict[str, Any], snake: str, camel: str, default: Any = ...) -> Any:
    """Read a field stored under either its snake_case or camelCase key."""
    if snake in data:
        return data[snake]
    if camel in data:
        return data[camel]
    if default is ...:
        raise KeyError(snake)
    return default


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question.

    Attributes:
        id: Question identifier
        text: Question prompt
        options: Answer options, in display order
        correct_answer: Index of the correct option
    """
    id: str
    text: str
    options: Tuple[str, ...] = ()
    correct_answer: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        return cls(
            id=data["id"],
            text=data["text"],
            options=tuple(data.get("options", ())),
            correct_answer=int(_pick(data, "correct_answer", "correctAnswer", 0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "text": self.text,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
        }


@dataclass(frozen=True)
class Quiz:
    """
    Quiz definition.

    Attributes:
        id: Quiz identifier (referenced by QuizResult.quiz_id)
        title: Display title
        description: Short description
        level: Difficulty label (Beginner/Intermediate/Advanced; others rank as 1)
        category: Subject category, e.g. "Data Science"
        questions: Ordered questions
    """
    id: str
    title: str
    description: str
    level: str
    category: str
    questions: Tuple[Question, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Quiz:
        """
        Build a quiz from a dictionary.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            level=data["level"],
            category=data["category"],
            questions=tuple(Question.from_dict(q) for q in data.get("questions", [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "level": self.level,
            "category": self.category,
            "questions": [q.to_dict() for q in self.questions],
        }


@dataclass(frozen=True)
class Answer:
    """Learner's answer to one question of a completed quiz."""
    question_id: str
    selected_option: int
    is_correct: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Answer:
        return cls(
            question_id=_pick(data, "question_id", "questionId"),
            selected_option=int(_pick(data, "selected_option", "selectedOption")),
            is_correct=bool(_pick(data, "is_correct", "isCorrect")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "question_id": self.question_id,
            "selected_option": self.selected_option,
            "is_correct": self.is_correct,
        }


@dataclass(frozen=True)
class QuizResult:
    """
    Outcome of one completed quiz.

    Attributes:
        quiz_id: Quiz that was taken
        score: Number of correctly answered questions
        time_taken: Total time spent, in seconds
        total_questions: Number of questions in the attempt
        answers: Per-question answers
    """
    quiz_id: str
    score: float
    time_taken: float
    total_questions: int
    answers: Tuple[Answer, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QuizResult:
        """
        Build a result from a dictionary (snake_case or camelCase keys).

        Raises:
            KeyError: If a required field is missing
        """
        answers = data.get("answers", [])
        return cls(
            quiz_id=_pick(data, "quiz_id", "quizId"),
            score=float(data["score"]),
            time_taken=float(_pick(data, "time_taken", "timeTaken")),
            total_questions=int(_pick(data, "total_questions", "totalQuestions")),
            answers=tuple(Answer.from_dict(a) for a in answers),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "quiz_id": self.quiz_id,
            "score": self.score,
            "time_taken": self.time_taken,
            "total_questions": self.total_questions,
            "answers": [a.to_dict() for a in self.answers],
        }

    def find_quiz(self, quizzes) -> Optional[Quiz]:
        """Return the first quiz whose id matches this result, if any."""
        return next((q for q in quizzes if q.id == self.quiz_id), None)
