"""
Course catalog entries and their scoring profiles.

A Course is what learners see. A CourseFeatureProfile is the numeric row the
recommender scores for that course: only difficulty level and category weight
come from the course itself, the performance components are the same
assumed values for every course.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

try:
    from ..config import config
except ImportError:
    from src.config import config


DIFFICULTY_LEVELS: Dict[str, int] = {
    "Beginner": 1,
    "Intermediate": 2,
    "Advanced": 3,
}

CATEGORY_WEIGHTS: Dict[str, int] = {
    "Web Development": 1,
    "Data Science": 2,
    "Mobile Development": 3,
    "Cloud Computing": 4,
    "Cybersecurity": 5,
}


def difficulty_level(level: str) -> int:
    """Numeric difficulty for a level label; unknown labels count as Beginner."""
    return DIFFICULTY_LEVELS.get(level, 1)


def category_weight(category: str) -> int:
    """Numeric weight for a category; unknown categories map to 0."""
    return CATEGORY_WEIGHTS.get(category, 0)


@dataclass(frozen=True)
class Course:
    """
    Course offered to learners.

    Attributes:
        id: Course identifier (slug)
        title: Display title
        description: Short description
        category: Subject category
        level: Difficulty label
        topics: Topic tags
        image_url: Cover image reference
        pdf_url: Course document reference
    """
    id: str
    title: str
    description: str
    category: str
    level: str
    topics: Tuple[str, ...] = ()
    image_url: str = ""
    pdf_url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Course:
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            category=data["category"],
            level=data["level"],
            topics=tuple(data.get("topics", ())),
            image_url=data.get("image_url", data.get("imageUrl", "")),
            pdf_url=data.get("pdf_url", data.get("pdfUrl", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "level": self.level,
            "topics": list(self.topics),
            "image_url": self.image_url,
            "pdf_url": self.pdf_url,
        }


@dataclass(frozen=True)
class CourseFeatureProfile:
    """
    Numeric representation of a course in feature space.

    Component order matches FeatureVector: score fraction, time per question,
    consistency, difficulty level, category weight.
    """
    course_id: str
    score_fraction: float
    time_per_question: float
    consistency: float
    difficulty_level: int
    category_weight: int

    @classmethod
    def for_course(
        cls,
        course: Course,
        score_fraction: Optional[float] = None,
        time_per_question: Optional[float] = None,
        consistency: Optional[float] = None,
    ) -> CourseFeatureProfile:
        """
        Build the scoring profile for a course.

        The performance components default to config.course_profile and are
        never derived from the course.
        """
        defaults = config.course_profile
        return cls(
            course_id=course.id,
            score_fraction=defaults.score_fraction if score_fraction is None else score_fraction,
            time_per_question=(
                defaults.time_per_question if time_per_question is None else time_per_question
            ),
            consistency=defaults.consistency if consistency is None else consistency,
            difficulty_level=difficulty_level(course.level),
            category_weight=category_weight(course.category),
        )

    def as_row(self) -> Tuple[float, float, float, float, float]:
        return (
            float(self.score_fraction),
            float(self.time_per_question),
            float(self.consistency),
            float(self.difficulty_level),
            float(self.category_weight),
        )
