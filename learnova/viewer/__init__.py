"""
Learnova Viewer - Rendering helpers for the dashboard.

This module provides:
- Course cards, progress tables and certificates
- Quiz grading and result display
"""

from .course import (
    get_course_css,
    render_course_card,
    build_progress_frame,
    render_certificate,
)

from .quiz import (
    QuizResult,
    grade_quiz,
    render_quiz_result,
    get_quiz_css,
)

__all__ = [
    # Course
    "get_course_css",
    "render_course_card",
    "build_progress_frame",
    "render_certificate",
    # Quiz
    "QuizResult",
    "grade_quiz",
    "render_quiz_result",
    "get_quiz_css",
]
