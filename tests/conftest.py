"""Shared fixtures for Learnova tests."""

import pytest

from learnova.data import SeedData
from learnova.schemas import Course, Module, Quiz, QuizQuestion, User
from learnova.storage import DurableStore, MemoryBackend


def make_quiz(title: str = "Check", passing_score: int = 50, questions: int = 1) -> Quiz:
    return Quiz(
        title=title,
        passing_score=passing_score,
        questions=[
            QuizQuestion(question=f"Question {i + 1}?", options=["a", "b", "c"], correct_answer="a")
            for i in range(questions)
        ],
    )


def make_course(course_id: int, module_ids: list[str], progress: int = 0, title: str | None = None) -> Course:
    return Course(
        id=course_id,
        title=title or f"Course {course_id}",
        category="Testing",
        duration="1 Week",
        progress=progress,
        image_url=f"https://example.com/{course_id}.png",
        description="A course used in tests.",
        modules=[
            Module(
                id=mid,
                title=f"Module {mid}",
                duration="10 min",
                video_url=f"https://example.com/{mid}.mp4",
                description="",
                quiz=make_quiz(),
            )
            for mid in module_ids
        ],
        final_assessment=make_quiz("Final", passing_score=70, questions=2),
        difficulty="Beginner",
    )


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return DurableStore(backend)


@pytest.fixture
def user():
    return User(
        name="Test Learner",
        email="learner@example.com",
        avatar_url="https://example.com/avatar.png",
        institute="Test Institute",
        roll_no="T-1",
    )


@pytest.fixture
def courses():
    return [
        make_course(1, ["m1", "m2", "m3", "m4"]),
        make_course(2, ["x1", "x2", "x3"]),
        make_course(3, []),
        make_course(7, ["y1", "y2"]),
    ]


@pytest.fixture
def seed(courses, user):
    return SeedData(
        courses=courses,
        user=user,
        enrolled_course_ids=[1, 2, 7],
        completed_modules={},
    )
