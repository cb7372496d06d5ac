"""
CourseCatalog - The persisted list of all courses.

Catalog order is fixed at seed time and preserved across every update. The
only mutation is a progress rewrite issued by the completion engine.
"""

import logging
from typing import Optional

from learnova.schemas import Course
from learnova.storage import COURSES_KEY, DurableStore, PersistedValue


logger = logging.getLogger(__name__)


class CourseCatalog:
    """Course list mirrored under the ``courses`` storage key."""

    def __init__(self, store: DurableStore, default_courses: list[Course]):
        """
        Initialize catalog.

        Args:
            store: DurableStore used to restore and mirror the catalog
            default_courses: Seed catalog used when nothing is stored yet
        """
        self._courses = PersistedValue(store, COURSES_KEY, list(default_courses), list[Course])

    def all(self) -> list[Course]:
        """Get all courses in catalog order."""
        return list(self._courses.value)

    def get(self, course_id: int) -> Optional[Course]:
        """Get a single course by ID."""
        for course in self._courses.value:
            if course.id == course_id:
                return course
        return None

    def __len__(self) -> int:
        return len(self._courses.value)

    def update_progress(self, course_id: int, progress: int) -> bool:
        """
        Replace the progress field of one course.

        Returns True if the course exists, False (no-op) otherwise.
        """
        if not 0 <= progress <= 100:
            raise ValueError(f"Progress must be within 0-100, got {progress}")

        updated = False
        courses = []
        for course in self._courses.value:
            if course.id == course_id:
                courses.append(course.model_copy(update={"progress": progress}))
                updated = True
            else:
                courses.append(course)

        if not updated:
            logger.debug(f"Progress update skipped, course {course_id} not in catalog")
            return False

        self._courses.set(courses)
        return True
