"""
SessionController - Volatile login and screen state.

Nothing here is persisted: every process (or browser session) starts logged
out on the dashboard with no course selected. Courses passed to
select_course() and view_certificate() are trusted as-is.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from learnova.schemas import Course, User


logger = logging.getLogger(__name__)


class Screen(str, Enum):
    """Screens the presentation layer can show while logged in."""
    DASHBOARD = "dashboard"
    PROFILE = "profile"
    COURSE_DETAIL = "course_detail"
    CERTIFICATE = "certificate"


@dataclass(frozen=True)
class SessionSnapshot:
    is_logged_in: bool
    screen: Screen
    selected_course: Optional[Course]
    user: User


class SessionController:

    def __init__(self, user: User):
        self._user = user
        self._logged_in = False
        self._screen = Screen.DASHBOARD
        self._selected_course: Optional[Course] = None

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def selected_course(self) -> Optional[Course]:
        return self._selected_course

    @property
    def user(self) -> User:
        return self._user

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            is_logged_in=self._logged_in,
            screen=self._screen,
            selected_course=self._selected_course,
            user=self._user,
        )

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def login(self):
        self._logged_in = True
        self._screen = Screen.DASHBOARD
        self._selected_course = None
        logger.info(f"{self._user.name} logged in")

    def logout(self):
        self._logged_in = False
        self._screen = Screen.DASHBOARD
        self._selected_course = None
        logger.info(f"{self._user.name} logged out")

    def view_profile(self) -> bool:
        """Show the profile screen. Ignored (returns False) while logged out."""
        if not self._logged_in:
            return False
        self._screen = Screen.PROFILE
        return True

    def select_course(self, course: Course) -> bool:
        """Open a course's detail screen. Ignored while logged out."""
        return self._show_course(Screen.COURSE_DETAIL, course)

    def view_certificate(self, course: Course) -> bool:
        """Open a course's certificate screen. Ignored while logged out."""
        return self._show_course(Screen.CERTIFICATE, course)

    def back(self):
        self._screen = Screen.DASHBOARD
        self._selected_course = None

    def update_profile(self, user: User):
        """Replace the learner profile and return to the dashboard."""
        self._user = user
        self._screen = Screen.DASHBOARD

    def refresh_selected_course(self, course: Optional[Course]):
        """Swap in a newer copy of the selected course (same id only)."""
        if course is None or self._selected_course is None:
            return
        if course.id == self._selected_course.id:
            self._selected_course = course

    def _show_course(self, screen: Screen, course: Course) -> bool:
        if not self._logged_in:
            return False
        self._selected_course = course
        self._screen = screen
        return True
