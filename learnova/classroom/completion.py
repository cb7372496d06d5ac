"""
CompletionEngine - Per-course module completion and derived progress.

Provides:
- Toggling a module's completion for a course
- Recomputing the course's cached progress percentage in the catalog
- Reference checks for course/module ids (permissive or strict)

A toggle updates the catalog progress and the completion map within one
synchronous call, so callers never observe one without the other.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from learnova.errors import CourseNotFoundError, ModuleNotFoundInCourseError
from learnova.schemas import Course
from learnova.storage import COMPLETED_MODULES_KEY, DurableStore, PersistedValue

from .catalog import CourseCatalog


logger = logging.getLogger(__name__)


def compute_progress(done: int, total: int) -> int:
    """
    Integer completion percentage.

    Rounds half away from zero (1/8 -> 13), returns exactly 100 once every
    module is done, and 0 for a course without modules.
    """
    if total <= 0:
        return 0
    if done >= total:
        return 100
    # round-half-up on non-negative integers: floor(100*done/total + 1/2)
    return (200 * done + total) // (2 * total)


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a single completion toggle."""
    course_id: int
    module_id: str
    completed: bool                # module state after the toggle
    completed_modules: tuple[str, ...]
    progress: Optional[int]        # None when the course is not in the catalog


class CompletionEngine:
    """
    Track completed module ids per course.

    Combines the completion map (its own persisted slot) with CourseCatalog,
    whose progress cache it keeps in sync.
    """

    def __init__(
        self,
        store: DurableStore,
        catalog: CourseCatalog,
        default_completed: Optional[dict[int, list[str]]] = None,
        strict: bool = False,
    ):
        """
        Initialize engine.

        Args:
            store: DurableStore used to restore and mirror the completion map
            catalog: Catalog whose progress fields this engine maintains
            default_completed: Seed completion map (course id -> module ids)
            strict: Raise on unknown course/module ids instead of ignoring them
        """
        self.catalog = catalog
        self.strict = strict
        seed = {
            course_id: list(dict.fromkeys(module_ids))
            for course_id, module_ids in (default_completed or {}).items()
        }
        self._completed = PersistedValue(store, COMPLETED_MODULES_KEY, seed, dict[int, list[str]])

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def completed_modules(self, course_id: int) -> list[str]:
        """Completed module ids for a course, in completion order."""
        return list(self._completed.value.get(course_id, []))

    def is_completed(self, course_id: int, module_id: str) -> bool:
        return module_id in self._completed.value.get(course_id, [])

    def snapshot(self) -> dict[int, list[str]]:
        """Copy of the full completion map."""
        return {cid: list(mids) for cid, mids in self._completed.value.items()}

    # -------------------------------------------------------------------------
    # Reference checks
    # -------------------------------------------------------------------------

    def resolve_course(self, course_id: int, module_id: Optional[str] = None) -> Optional[Course]:
        """
        Look up the course a toggle refers to.

        Permissive mode returns None for an unknown course and does not check
        module membership. Strict mode raises CourseNotFoundError or
        ModuleNotFoundInCourseError instead.
        """
        course = self.catalog.get(course_id)
        if not self.strict:
            return course
        if course is None:
            raise CourseNotFoundError(course_id)
        if module_id is not None and course.get_module(module_id) is None:
            raise ModuleNotFoundInCourseError(course_id, module_id)
        return course

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def toggle_module(self, course_id: int, module_id: str) -> ToggleResult:
        """
        Flip a module between completed and not completed.

        Courses with no recorded entry start from an empty set. When the
        course is in the catalog its progress is recomputed and written back
        before the new completion set is committed. In strict mode module
        membership is checked only when adding, so stale ids can be removed.
        """
        current = self._completed.value.get(course_id, [])
        removing = module_id in current
        course = self.resolve_course(course_id, None if removing else module_id)

        if removing:
            completed = [mid for mid in current if mid != module_id]
        else:
            completed = [*current, module_id]

        progress = None
        if course is not None:
            progress = compute_progress(len(completed), len(course.modules))
            self.catalog.update_progress(course_id, progress)
        else:
            logger.debug(f"Course {course_id} not in catalog, progress left unchanged")

        self._completed.set({**self._completed.value, course_id: completed})

        is_done = module_id in completed
        logger.info(
            f"Module {module_id!r} of course {course_id} marked "
            f"{'complete' if is_done else 'incomplete'} (progress: {progress})"
        )
        return ToggleResult(
            course_id=course_id,
            module_id=module_id,
            completed=is_done,
            completed_modules=tuple(completed),
            progress=progress,
        )
