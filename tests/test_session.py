"""
Session state tests for Learnova.
"""

from learnova.classroom import Screen, SessionController
from learnova.schemas import User

from conftest import make_course


class TestSessionTransitions:

    def test_starts_logged_out_on_dashboard(self, user):
        session = SessionController(user)
        assert session.is_logged_in is False
        assert session.screen == Screen.DASHBOARD
        assert session.selected_course is None

    def test_login_resets_to_dashboard(self, user):
        session = SessionController(user)
        session.login()
        assert session.is_logged_in is True
        assert session.screen == Screen.DASHBOARD
        assert session.selected_course is None

    def test_select_course_and_back(self, user):
        course = make_course(1, ["m1"])
        session = SessionController(user)
        session.login()

        assert session.select_course(course) is True
        assert session.screen == Screen.COURSE_DETAIL
        assert session.selected_course == course

        session.back()
        assert session.screen == Screen.DASHBOARD
        assert session.selected_course is None

    def test_view_certificate(self, user):
        course = make_course(1, ["m1"])
        session = SessionController(user)
        session.login()
        session.view_certificate(course)
        assert session.screen == Screen.CERTIFICATE
        assert session.selected_course == course

    def test_logout_discards_screen_and_selection(self, user):
        session = SessionController(user)
        session.login()
        session.select_course(make_course(1, ["m1"]))
        session.logout()
        assert session.is_logged_in is False
        assert session.screen == Screen.DASHBOARD
        assert session.selected_course is None

    def test_navigation_ignored_while_logged_out(self, user):
        session = SessionController(user)
        assert session.view_profile() is False
        assert session.select_course(make_course(1, ["m1"])) is False
        assert session.screen == Screen.DASHBOARD
        assert session.selected_course is None

    def test_view_profile(self, user):
        session = SessionController(user)
        session.login()
        assert session.view_profile() is True
        assert session.screen == Screen.PROFILE

    def test_update_profile_returns_to_dashboard(self, user):
        session = SessionController(user)
        session.login()
        session.view_profile()

        updated = User(name="Renamed", email="new@example.com", avatar_url="new.png")
        session.update_profile(updated)
        assert session.user == updated
        assert session.screen == Screen.DASHBOARD

    def test_refresh_selected_course_same_id_only(self, user):
        session = SessionController(user)
        session.login()
        session.select_course(make_course(1, ["m1"]))

        session.refresh_selected_course(make_course(2, ["m1"], progress=100))
        assert session.selected_course.id == 1

        session.refresh_selected_course(make_course(1, ["m1"], progress=100))
        assert session.selected_course.progress == 100

    def test_snapshot(self, user):
        session = SessionController(user)
        session.login()
        snap = session.snapshot()
        assert snap.is_logged_in is True
        assert snap.screen == Screen.DASHBOARD
        assert snap.user == user
