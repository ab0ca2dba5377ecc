"""
Recommendation example: quiz history file → validated results → ranked courses

Steps:
1. Load and validate a JSON quiz history (defaults to examples/data/sample_history.json)
2. Rank catalog courses against the learner's results
3. Print the outcome, including why a fallback was used if ranking failed

Usage:
    python examples/recommend_from_history.py [history.json] [--seed N]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config, configure_logging
from src.recommender import get_quizzes, rank_courses, recommend_courses
from src.utils.validation import load_quiz_history

DEFAULT_HISTORY = Path(__file__).parent / "data" / "sample_history.json"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Recommend courses from a quiz history")
    parser.add_argument("history", nargs="?", default=str(DEFAULT_HISTORY))
    parser.add_argument("--seed", type=int, default=None, help="Seed the synthetic noise")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    if args.seed is not None:
        config.recommender.random_seed = args.seed

    # ==================== Step 1: Load History ====================
    print("=" * 60)
    print("STEP 1: Loading quiz history")
    print("=" * 60)

    try:
        results = load_quiz_history(args.history)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return 1

    print(f"✓ Loaded {len(results)} quiz result(s) from {args.history}")
    for r in results:
        print(f"  - {r.quiz_id}: {r.score:g}/{r.total_questions} in {r.time_taken:g}s")
    print()

    # ==================== Step 2: Rank Courses ====================
    print("=" * 60)
    print("STEP 2: Ranking courses")
    print("=" * 60)

    outcome = rank_courses(results, get_quizzes())

    print(f"Status: {outcome.status.value}")
    if outcome.reason:
        print(f"Reason: {outcome.reason}")
    for i, course in enumerate(outcome.courses, start=1):
        score = outcome.scores.get(course.id)
        suffix = f" (score {score:.3f})" if score is not None else ""
        print(f"  {i}. {course.title} [{course.level}, {course.category}]{suffix}")
    print()

    # ==================== Step 3: Starter Course ====================
    starter = recommend_courses([], 1)
    if starter:
        print(f"📘 Starter course: {starter[0].title}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
