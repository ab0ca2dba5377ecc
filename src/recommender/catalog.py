"""
Static course and quiz catalogs.

Both catalogs are built once at import time and exposed as tuples through
read-only accessors. Nothing in the package mutates them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..config import config
from ..models.course import Course
from ..models.quiz import Question, Quiz


_COURSES: Tuple[Course, ...] = (
    Course(
        id="web-dev",
        title="Full Stack Web Development",
        description=(
            "Learn modern web development with HTML, CSS, JavaScript, React, "
            "Node.js, and more."
        ),
        category="Web Development",
        level="Intermediate",
        topics=("javascript", "react", "node", "html", "css"),
        image_url="https://images.pexels.com/photos/1181677/pexels-photo-1181677.jpeg",
        pdf_url="https://drive.google.com/file/d/1iMUW_PSiEN-fTA4Kzp9At4T2RSty9mly/view?usp=drivesdk",
    ),
    Course(
        id="data-science",
        title="Data Science & Analytics",
        description=(
            "Master data analysis, machine learning, and statistical modeling "
            "with Python."
        ),
        category="Data Science",
        level="Advanced",
        topics=("python", "statistics", "machine-learning", "data-analysis"),
        image_url="https://images.pexels.com/photos/669615/pexels-photo-669615.jpeg",
        pdf_url="https://drive.google.com/file/d/1iJwJ98q3rC48JP5zIxhvgnJ2t_85mMr5/view?usp=drivesdk",
    ),
    Course(
        id="mobile-dev",
        title="Mobile App Development",
        description=(
            "Build cross-platform mobile apps using React Native and modern "
            "mobile technologies."
        ),
        category="Mobile Development",
        level="Intermediate",
        topics=("react-native", "mobile", "ios", "android"),
        image_url="https://images.pexels.com/photos/1092644/pexels-photo-1092644.jpeg",
        pdf_url="https://drive.google.com/file/d/1iZUDde8EhIB-cTE36Rlw3W2Fwbr-BLzV/view?usp=drivesdk",
    ),
    Course(
        id="cloud-computing",
        title="Cloud Computing & DevOps",
        description=(
            "Learn cloud services, containerization, and modern deployment "
            "practices."
        ),
        category="Cloud Computing",
        level="Advanced",
        topics=("aws", "docker", "kubernetes", "devops"),
        image_url="https://images.pexels.com/photos/1181354/pexels-photo-1181354.jpeg",
        pdf_url="https://drive.google.com/file/d/1iZnV35oTnpX6dGpV6lw91f8OQ63_A8HH/view?usp=drivesdk",
    ),
    Course(
        id="cybersecurity",
        title="Cybersecurity Fundamentals",
        description=(
            "Master the basics of network security, cryptography, and ethical "
            "hacking."
        ),
        category="Cybersecurity",
        level="Intermediate",
        topics=("security", "cryptography", "networking", "ethical-hacking"),
        image_url="https://images.pexels.com/photos/5380642/pexels-photo-5380642.jpeg",
        pdf_url="https://drive.google.com/file/d/1i_-25AxAc_P4EiX6oN-h9N1jNqTS6O6d/view?usp=drivesdk",
    ),
)


_QUIZZES: Tuple[Quiz, ...] = (
    Quiz(
        id="web-basics",
        title="Web Fundamentals",
        description="HTML, CSS and the basics of the browser.",
        level="Beginner",
        category="Web Development",
        questions=(
            Question(
                id="web-basics-1",
                text="Which HTML element links an external stylesheet?",
                options=("<style>", "<link>", "<script>", "<css>"),
                correct_answer=1,
            ),
            Question(
                id="web-basics-2",
                text="Which CSS property changes text color?",
                options=("font-color", "text-color", "color", "foreground"),
                correct_answer=2,
            ),
            Question(
                id="web-basics-3",
                text="What does the DOM represent?",
                options=(
                    "The page as a tree of objects",
                    "A CSS preprocessor",
                    "A database engine",
                    "An HTTP header",
                ),
                correct_answer=0,
            ),
        ),
    ),
    Quiz(
        id="python-data",
        title="Python for Data Analysis",
        description="Pandas, NumPy and descriptive statistics.",
        level="Advanced",
        category="Data Science",
        questions=(
            Question(
                id="python-data-1",
                text="Which pandas method returns summary statistics?",
                options=("info()", "describe()", "summary()", "stats()"),
                correct_answer=1,
            ),
            Question(
                id="python-data-2",
                text="What is the median of [1, 3, 7, 9]?",
                options=("3", "5", "7", "4"),
                correct_answer=1,
            ),
            Question(
                id="python-data-3",
                text="Which NumPy function creates evenly spaced values?",
                options=("np.arange", "np.spread", "np.range", "np.steps"),
                correct_answer=0,
            ),
        ),
    ),
    Quiz(
        id="mobile-basics",
        title="Mobile Development Basics",
        description="React Native components and platform concepts.",
        level="Intermediate",
        category="Mobile Development",
        questions=(
            Question(
                id="mobile-basics-1",
                text="Which React Native component renders scrollable lists efficiently?",
                options=("ScrollView", "FlatList", "ListView", "TableView"),
                correct_answer=1,
            ),
            Question(
                id="mobile-basics-2",
                text="Which file describes an Android app's components?",
                options=("Info.plist", "package.json", "AndroidManifest.xml", "app.gradle.xml"),
                correct_answer=2,
            ),
        ),
    ),
    Quiz(
        id="cloud-devops",
        title="Cloud & DevOps Essentials",
        description="Containers, orchestration and cloud services.",
        level="Advanced",
        category="Cloud Computing",
        questions=(
            Question(
                id="cloud-devops-1",
                text="Which tool orchestrates containers across a cluster?",
                options=("Kubernetes", "Terraform", "Ansible", "Jenkins"),
                correct_answer=0,
            ),
            Question(
                id="cloud-devops-2",
                text="What does a Dockerfile define?",
                options=(
                    "A container image build",
                    "A network firewall",
                    "A CI pipeline",
                    "A DNS zone",
                ),
                correct_answer=0,
            ),
        ),
    ),
    Quiz(
        id="security-fundamentals",
        title="Security Fundamentals",
        description="Cryptography and network security basics.",
        level="Intermediate",
        category="Cybersecurity",
        questions=(
            Question(
                id="security-fundamentals-1",
                text="Which algorithm is asymmetric?",
                options=("AES", "RSA", "DES", "ChaCha20"),
                correct_answer=1,
            ),
            Question(
                id="security-fundamentals-2",
                text="What does a firewall primarily filter?",
                options=("Network traffic", "Disk writes", "CPU usage", "Log files"),
                correct_answer=0,
            ),
        ),
    ),
)


def get_courses() -> Tuple[Course, ...]:
    """Return the full course catalog in catalog order."""
    return _COURSES


def get_course(course_id: str) -> Optional[Course]:
    """Return the course with the given id, or None."""
    return next((c for c in _COURSES if c.id == course_id), None)


def get_quizzes() -> Tuple[Quiz, ...]:
    """Return the quiz catalog."""
    return _QUIZZES


def get_quiz(quiz_id: str) -> Optional[Quiz]:
    """Return the quiz with the given id, or None."""
    return next((q for q in _QUIZZES if q.id == quiz_id), None)


def leading_courses(count: int) -> List[Course]:
    """First ``count`` catalog entries; a negative count drops that many from the end."""
    return list(_COURSES[:count])


def recommend_courses(
    quiz_topics: Iterable = (),
    max_recommendations: int = 1,
) -> List[Course]:
    """
    Recommend courses as a plain leading slice of the catalog.

    Args:
        quiz_topics: Topics of the quizzes taken. Accepted for interface
            compatibility, not used for matching.
        max_recommendations: Number of courses to return

    Returns:
        The first ``max_recommendations`` catalog courses

    Example:
        >>> [c.id for c in recommend_courses(["python"], 2)]
        ['web-dev', 'data-science']
    """
    return leading_courses(max_recommendations)


def fallback_courses() -> List[Course]:
    """Default recommendation used when no ranking can be computed."""
    return leading_courses(config.recommender.fallback_size)
