"""
Learnova Classroom - Runtime state for the learner dashboard.

This module provides:
- CourseCatalog: persisted course list with cached progress
- EnrollmentRegistry: persisted set of enrolled course ids
- CompletionEngine: per-course module completion and progress recomputation
- SessionController: volatile login/screen state
- Dashboard: wiring and read surface for the presentation layer
"""

from .catalog import CourseCatalog

from .enrollment import EnrollmentRegistry

from .completion import (
    CompletionEngine,
    ToggleResult,
    compute_progress,
)

from .session import (
    SessionController,
    SessionSnapshot,
    Screen,
)

from .dashboard import Dashboard

__all__ = [
    # Catalog
    "CourseCatalog",
    # Enrollment
    "EnrollmentRegistry",
    # Completion
    "CompletionEngine",
    "ToggleResult",
    "compute_progress",
    # Session
    "SessionController",
    "SessionSnapshot",
    "Screen",
    # Dashboard
    "Dashboard",
]
