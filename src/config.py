"""
Configuration management for QuizPath.

This module centralizes all configuration settings:
- Tunables loaded from environment variables where they make sense
- Sensible defaults matching the production recommender
- Type hints for IDE support
- Single source of truth for all settings
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class RecommenderConfig:
    """Synthetic training and ranking parameters."""

    # Synthetic expansion
    copies_per_vector: int = 5
    noise_scale: float = 0.1  # jitter = (U(0,1) - 0.5) * noise_scale
    label_threshold: float = 0.7  # mean(score, consistency) above this -> 1

    # Logistic regression
    num_steps: int = 100
    learning_rate: float = 0.5

    # Ranking
    top_k: int = 3
    fallback_size: int = 3

    # Reproducibility (None = fresh entropy on every call)
    random_seed: Optional[int] = field(
        default_factory=lambda: _optional_int("RECOMMENDER_RANDOM_SEED")
    )


@dataclass
class CourseProfileConfig:
    """Constant performance assumptions applied to every catalog course."""

    score_fraction: float = 0.8  # Assume good base performance
    time_per_question: float = 60.0  # Average time per question (seconds)
    consistency: float = 0.8


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)

    schemas_dir: Path = field(init=False)
    quiz_result_schema: Path = field(init=False)
    quiz_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.schemas_dir = self.project_root / "schemas"
        self.quiz_result_schema = self.schemas_dir / "quiz_result.schema.json"
        self.quiz_schema = self.schemas_dir / "quiz.schema.json"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from src.config import config

        # Access settings
        steps = config.recommender.num_steps
        profile_time = config.course_profile.time_per_question

        # Pin randomness for a reproducible run
        config.recommender.random_seed = 42
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.recommender = RecommenderConfig()
            cls._instance.course_profile = CourseProfileConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        rec = self.recommender

        if rec.copies_per_vector < 1:
            errors.append(
                f"copies_per_vector must be >= 1, got {rec.copies_per_vector}"
            )

        if rec.noise_scale < 0:
            errors.append(f"noise_scale must be >= 0, got {rec.noise_scale}")

        if not (0 <= rec.label_threshold <= 1):
            errors.append(
                f"label_threshold must be in [0, 1], got {rec.label_threshold}"
            )

        if rec.num_steps <= 0:
            errors.append(f"num_steps must be > 0, got {rec.num_steps}")

        if rec.learning_rate <= 0:
            errors.append(f"learning_rate must be > 0, got {rec.learning_rate}")

        if rec.top_k < 1:
            errors.append(f"top_k must be >= 1, got {rec.top_k}")

        if rec.fallback_size < 0:
            errors.append(f"fallback_size must be >= 0, got {rec.fallback_size}")

        # Path validation
        for schema in (self.paths.quiz_result_schema, self.paths.quiz_schema):
            if not schema.exists():
                errors.append(f"Schema not found: {schema}")

        if logging.getLevelName(self.logging.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            errors.append(f"Unknown log_level: {self.logging.log_level}")

        return errors


# Global config instance
config = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and examples.

    Library modules only create named loggers; call this once from an
    entrypoint.

    Args:
        level: Override for config.logging.log_level
    """
    logging.basicConfig(
        level=(level or config.logging.log_level).upper(),
        format=config.logging.log_format,
    )
