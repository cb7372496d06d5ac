"""
EnrollmentRegistry - The set of course ids the learner has joined.

Stored as an insertion-ordered list with set semantics. There is no
unenroll operation.
"""

import logging
from typing import Iterable

from learnova.schemas import Course
from learnova.storage import ENROLLED_COURSE_IDS_KEY, DurableStore, PersistedValue


logger = logging.getLogger(__name__)


class EnrollmentRegistry:

    def __init__(self, store: DurableStore, default_course_ids: Iterable[int]):
        self._course_ids = PersistedValue(
            store,
            ENROLLED_COURSE_IDS_KEY,
            _unique(default_course_ids),
            list[int],
        )

    @property
    def course_ids(self) -> tuple[int, ...]:
        """Enrolled course ids in enrollment order."""
        return tuple(self._course_ids.value)

    def is_enrolled(self, course_id: int) -> bool:
        return course_id in self._course_ids.value

    def enroll(self, course_id: int) -> bool:
        """
        Enroll in a course.

        Returns True if the course was added, False if already enrolled.
        """
        if self.is_enrolled(course_id):
            return False
        self._course_ids.set([*self._course_ids.value, course_id])
        logger.info(f"Enrolled in course {course_id}")
        return True

    def partition(self, catalog: Iterable[Course]) -> tuple[list[Course], list[Course]]:
        """
        Split a catalog into (enrolled, available), both in catalog order.
        """
        enrolled_ids = set(self._course_ids.value)
        enrolled, available = [], []
        for course in catalog:
            if course.id in enrolled_ids:
                enrolled.append(course)
            else:
                available.append(course)
        return enrolled, available


def _unique(course_ids: Iterable[int]) -> list[int]:
    return list(dict.fromkeys(course_ids))
