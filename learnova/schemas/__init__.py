"""
Learnova Schemas - Pydantic models for the e-learning dashboard.

This module exports all schema classes for:
- Course: courses, modules, quizzes, assignments
- User: learner profile and reporting data
"""

# Course schemas
from .course import (
    CatalogModel,
    QuizQuestion,
    Quiz,
    Assignment,
    Module,
    Course,
    validate_catalog,
)

# User schemas
from .user import (
    User,
    ProgressData,
)

__all__ = [
    # Course
    'CatalogModel',
    'QuizQuestion',
    'Quiz',
    'Assignment',
    'Module',
    'Course',
    'validate_catalog',
    # User
    'User',
    'ProgressData',
]
