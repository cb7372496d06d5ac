"""
Dashboard - Wires the dashboard state components together.

Provides:
- Construction of catalog, enrollment, completion and session state
  over one DurableStore
- The read surface used by the presentation layer
- Progress summary and certificate eligibility
"""

import logging
from typing import Optional

from learnova.config import Settings
from learnova.data import SeedData, load_seed_data
from learnova.schemas import Course
from learnova.storage import DurableStore, MemoryBackend, SqliteBackend

from .catalog import CourseCatalog
from .completion import CompletionEngine, ToggleResult
from .enrollment import EnrollmentRegistry
from .session import SessionController


logger = logging.getLogger(__name__)


class Dashboard:
    """
    Learner dashboard state.

    Each component owns exactly one piece of state; the presentation layer
    calls the actions below and re-reads the resulting snapshots.
    """

    def __init__(
        self,
        store: DurableStore,
        seed: Optional[SeedData] = None,
        strict_references: bool = False,
    ):
        """
        Initialize dashboard.

        Args:
            store: DurableStore shared by the persisted components
            seed: Default state (default: bundled seed data)
            strict_references: Raise on unknown course/module ids when toggling
        """
        seed = seed or load_seed_data()
        self.store = store
        self.catalog = CourseCatalog(store, seed.courses)
        self.enrollment = EnrollmentRegistry(store, seed.enrolled_course_ids)
        self.completion = CompletionEngine(
            store,
            self.catalog,
            seed.completed_modules,
            strict=strict_references,
        )
        self.session = SessionController(seed.user)

    @classmethod
    def from_settings(cls, settings: Settings, seed: Optional[SeedData] = None) -> "Dashboard":
        """Build a dashboard on the storage backend named in settings."""
        if settings.storage == "memory":
            backend = MemoryBackend()
        else:
            backend = SqliteBackend(settings.store_path)
        logger.info(f"Using {settings.storage} storage")
        return cls(DurableStore(backend), seed=seed, strict_references=settings.strict_references)

    # -------------------------------------------------------------------------
    # Read surface
    # -------------------------------------------------------------------------

    def courses(self) -> list[Course]:
        return self.catalog.all()

    def enrolled_courses(self) -> list[Course]:
        enrolled, _ = self.enrollment.partition(self.catalog.all())
        return enrolled

    def available_courses(self) -> list[Course]:
        _, available = self.enrollment.partition(self.catalog.all())
        return available

    def completed_modules(self, course_id: int) -> list[str]:
        return self.completion.completed_modules(course_id)

    def get_course(self, course_id: int) -> Optional[Course]:
        return self.catalog.get(course_id)

    def can_view_certificate(self, course_id: int) -> bool:
        """A certificate is available for an enrolled course at 100%."""
        course = self.catalog.get(course_id)
        return (
            course is not None
            and self.enrollment.is_enrolled(course_id)
            and course.progress == 100
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def enroll(self, course_id: int) -> bool:
        return self.enrollment.enroll(course_id)

    def toggle_module(self, course_id: int, module_id: str) -> ToggleResult:
        result = self.completion.toggle_module(course_id, module_id)
        if result.progress is not None:
            self.session.refresh_selected_course(self.catalog.get(course_id))
        return result

    # -------------------------------------------------------------------------
    # Progress Summary
    # -------------------------------------------------------------------------

    def get_progress_summary(self) -> dict:
        """
        Get enrollment and progress statistics for display.

        Returns:
            Dictionary with course counts and the average enrolled progress
        """
        enrolled = self.enrolled_courses()
        completed = sum(1 for c in enrolled if c.progress == 100)
        in_progress = sum(1 for c in enrolled if 0 < c.progress < 100)
        modules_done = sum(len(self.completion.completed_modules(c.id)) for c in enrolled)

        return {
            "total_courses": len(self.catalog),
            "enrolled": len(enrolled),
            "completed": completed,
            "in_progress": in_progress,
            "not_started": len(enrolled) - completed - in_progress,
            "modules_completed": modules_done,
            "average_progress": round(sum(c.progress for c in enrolled) / len(enrolled), 1) if enrolled else 0,
        }
