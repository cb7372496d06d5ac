"""
Course catalog schemas for Learnova.

Defines Pydantic models for catalog content including:
- Courses with their ordered modules
- Module quizzes and the course final assessment
- Optional module assignments

Persisted JSON keeps the camelCase field names of the stored catalog
(e.g. ``finalAssessment``, ``passingScore``); Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Iterable, Optional


class CatalogModel(BaseModel):
    """Base for catalog entities: immutable, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class QuizQuestion(CatalogModel):
    question: str
    options: list[str]
    correct_answer: str  # expected to be one of options, see validate_catalog()


class Quiz(CatalogModel):
    title: str
    questions: list[QuizQuestion] = []
    passing_score: int = Field(..., ge=0, le=100)  # percentage threshold


class Assignment(CatalogModel):
    title: str
    description: str


class Module(CatalogModel):
    """One unit of a course: video, quiz and an optional assignment."""
    id: str  # unique within its course
    title: str
    duration: str
    video_url: str
    description: str
    quiz: Quiz
    assignment: Optional[Assignment] = None


class Course(CatalogModel):
    """
    A catalog course.

    ``progress`` is a cached percentage derived from the completion map.
    It is rewritten only by the completion engine, through
    ``CourseCatalog.update_progress``.
    """
    id: int
    title: str
    category: str
    duration: str
    progress: int = Field(default=0, ge=0, le=100)
    image_url: str
    description: str
    modules: list[Module] = []
    final_assessment: Quiz
    difficulty: str

    @property
    def module_ids(self) -> list[str]:
        return [module.id for module in self.modules]

    def get_module(self, module_id: str) -> Optional[Module]:
        for module in self.modules:
            if module.id == module_id:
                return module
        return None


# -----------------------------------------------------------------------------
# Authoring checks
# -----------------------------------------------------------------------------

def validate_catalog(courses: Iterable[Course]) -> list[str]:
    """
    Report authoring problems in a catalog.

    The runtime never enforces these; they are meant for seed data checks.

    Returns:
        List of human-readable problems (empty if the catalog is clean)
    """
    problems = []
    seen_course_ids = set()

    for course in courses:
        if course.id in seen_course_ids:
            problems.append(f"Duplicate course id: {course.id}")
        seen_course_ids.add(course.id)

        seen_module_ids = set()
        for module in course.modules:
            if module.id in seen_module_ids:
                problems.append(f"Course {course.id}: duplicate module id {module.id!r}")
            seen_module_ids.add(module.id)
            problems.extend(
                f"Course {course.id}, module {module.id!r}: {p}"
                for p in _quiz_problems(module.quiz)
            )

        problems.extend(
            f"Course {course.id}, final assessment: {p}"
            for p in _quiz_problems(course.final_assessment)
        )

    return problems


def _quiz_problems(quiz: Quiz) -> list[str]:
    problems = []
    for idx, question in enumerate(quiz.questions):
        if question.correct_answer not in question.options:
            problems.append(
                f"question {idx + 1} answer {question.correct_answer!r} is not an option"
            )
    return problems
