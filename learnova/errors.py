"""
Exception types for Learnova.

Persistence failures never surface as exceptions; they are logged and the
in-memory state stays authoritative. The lookup errors below are raised only
when strict reference checking is enabled.
"""

from typing import Optional


class LearnovaError(Exception):
    """Base class for Learnova errors."""


class CourseNotFoundError(LearnovaError, LookupError):
    """A course id does not exist in the catalog."""

    def __init__(self, course_id: int):
        self.course_id = course_id
        super().__init__(f"Course not found: {course_id}")


class ModuleNotFoundInCourseError(LearnovaError, LookupError):
    """A module id does not belong to the given course."""

    def __init__(self, course_id: int, module_id: str):
        self.course_id = course_id
        self.module_id = module_id
        super().__init__(f"Module {module_id!r} not found in course {course_id}")


class SeedDataError(LearnovaError):
    """The bundled seed dataset is missing or invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)
