"""
Learnova - E-Learning Dashboard

Streamlit application for browsing, enrolling in and working through
courses. All decisions live in learnova.classroom; this script only renders
its state and forwards user actions.

Usage:
    streamlit run app.py
"""

import streamlit as st

from learnova.classroom import Dashboard, Screen
from learnova.config import configure_logging, load_settings
from learnova.schemas import Course, User
from learnova.viewer import (
    build_progress_frame,
    get_course_css,
    get_quiz_css,
    grade_quiz,
    render_certificate,
    render_course_card,
    render_quiz_result,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Learnova",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "dashboard" not in st.session_state:
        settings = load_settings()
        configure_logging(settings.log_level)
        st.session_state.dashboard = Dashboard.from_settings(settings)

    if "quiz_results" not in st.session_state:
        st.session_state.quiz_results = {}


def dashboard() -> Dashboard:
    return st.session_state.dashboard


# -----------------------------------------------------------------------------
# Login
# -----------------------------------------------------------------------------

def render_login_view():
    """Render the login screen (no credentials are checked)."""
    st.title("🎓 Learnova")
    st.markdown("Sign in to continue learning.")

    with st.form("login"):
        st.text_input("Email", value=dashboard().session.user.email)
        st.text_input("Password", type="password")
        if st.form_submit_button("Sign in", type="primary"):
            dashboard().session.login()
            st.rerun()


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with profile shortcut and progress summary."""
    dash = dashboard()
    user = dash.session.user

    st.sidebar.title("🎓 Learnova")
    st.sidebar.markdown(f"**{user.name}**  \n{user.email}")

    stats = dash.get_progress_summary()
    st.sidebar.markdown(f"""
    **Enrolled:** {stats['enrolled']} courses
    **Completed:** {stats['completed']} · **In progress:** {stats['in_progress']}
    """)
    st.sidebar.progress(stats['average_progress'] / 100)

    st.sidebar.divider()

    if st.sidebar.button("Dashboard", use_container_width=True):
        dash.session.back()
        st.rerun()
    if st.sidebar.button("Profile", use_container_width=True):
        dash.session.view_profile()
        st.rerun()
    if st.sidebar.button("Log out", use_container_width=True):
        dash.session.logout()
        st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Dashboard View
# -----------------------------------------------------------------------------

def render_dashboard_view():
    """Render enrolled and available courses."""
    dash = dashboard()
    st.title(f"Welcome back, {dash.session.user.name.split()[0]}")
    st.markdown(get_course_css(), unsafe_allow_html=True)

    enrolled = dash.enrolled_courses()
    available = dash.available_courses()

    tab1, tab2, tab3 = st.tabs(["My Courses", "Explore", "Progress"])

    with tab1:
        if not enrolled:
            st.info("Enroll in a course from the Explore tab to get started.")
        for course in enrolled:
            render_enrolled_course(course)

    with tab2:
        if not available:
            st.success("You are enrolled in every course.")
        for course in available:
            st.markdown(render_course_card(course, show_progress=False), unsafe_allow_html=True)
            if st.button("Enroll", key=f"enroll_{course.id}"):
                dash.enroll(course.id)
                st.rerun()

    with tab3:
        frame = build_progress_frame(enrolled)
        if frame.empty:
            st.info("No enrolled courses yet.")
        else:
            st.bar_chart(frame.set_index("course")["progress"])
            st.dataframe(frame, hide_index=True, use_container_width=True)


def render_enrolled_course(course: Course):
    """Render one enrolled course card with its actions."""
    dash = dashboard()
    st.markdown(render_course_card(course), unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Continue", key=f"open_{course.id}", use_container_width=True):
            dash.session.select_course(course)
            st.rerun()
    with col2:
        if dash.can_view_certificate(course.id):
            if st.button("View certificate", key=f"cert_{course.id}", use_container_width=True):
                dash.session.view_certificate(course)
                st.rerun()


# -----------------------------------------------------------------------------
# Course Detail View
# -----------------------------------------------------------------------------

def render_course_detail_view():
    """Render modules of the selected course with completion toggles."""
    dash = dashboard()
    course = dash.session.selected_course

    if st.button("← Back to dashboard"):
        dash.session.back()
        st.rerun()

    st.title(course.title)
    st.markdown(course.description)
    st.progress(course.progress / 100, text=f"{course.progress}% complete")

    completed = set(dash.completed_modules(course.id))
    st.markdown(get_quiz_css(), unsafe_allow_html=True)

    for position, module in enumerate(course.modules, start=1):
        done = module.id in completed
        label = f"{'✓' if done else '○'} Module {position}: {module.title} ({module.duration})"
        with st.expander(label, expanded=not done):
            st.video(module.video_url)
            st.markdown(module.description)
            render_quiz_section(f"{course.id}_{module.id}", module.quiz)

            if module.assignment:
                st.subheader(f"Assignment: {module.assignment.title}")
                st.markdown(module.assignment.description)

            button_label = "Mark as incomplete" if done else "Mark module as complete"
            if st.button(button_label, key=f"toggle_{course.id}_{module.id}", type="secondary" if done else "primary"):
                dash.toggle_module(course.id, module.id)
                st.rerun()

    st.divider()
    st.subheader("Final Assessment")
    render_quiz_section(f"{course.id}_final", course.final_assessment)


def render_quiz_section(key: str, quiz):
    """Render a multiple-choice quiz with grading."""
    if not quiz.questions:
        return

    st.markdown(f"**{quiz.title}** (pass mark {quiz.passing_score}%)")
    with st.form(f"quiz_{key}"):
        answers = []
        for idx, question in enumerate(quiz.questions):
            answers.append(st.radio(
                question.question,
                question.options,
                index=None,
                key=f"quiz_{key}_{idx}",
            ))
        if st.form_submit_button("Submit answers"):
            st.session_state.quiz_results[key] = grade_quiz(quiz, answers)

    result = st.session_state.quiz_results.get(key)
    if result:
        st.markdown(render_quiz_result(result), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Profile View
# -----------------------------------------------------------------------------

def render_profile_view():
    """Render the editable learner profile."""
    dash = dashboard()
    user = dash.session.user

    st.title("Profile")
    with st.form("profile"):
        name = st.text_input("Name", value=user.name)
        email = st.text_input("Email", value=user.email)
        roll_no = st.text_input("Roll No.", value=user.roll_no or "")
        year = st.number_input("Year of passing", value=user.year_of_passing or 2024, step=1)
        institute = st.text_input("Institute", value=user.institute or "")
        bio = st.text_area("Bio", value=user.bio or "")

        col1, col2 = st.columns(2)
        with col1:
            saved = st.form_submit_button("Save", type="primary", use_container_width=True)
        with col2:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if saved:
        dash.session.update_profile(User(
            name=name,
            email=email,
            avatar_url=user.avatar_url,
            roll_no=roll_no or None,
            year_of_passing=int(year),
            institute=institute or None,
            bio=bio or None,
        ))
        st.rerun()
    elif cancelled:
        dash.session.back()
        st.rerun()


# -----------------------------------------------------------------------------
# Certificate View
# -----------------------------------------------------------------------------

def render_certificate_view():
    """Render the certificate for the selected course."""
    dash = dashboard()
    course = dash.session.selected_course

    if st.button("← Back to dashboard"):
        dash.session.back()
        st.rerun()

    st.markdown(get_course_css(), unsafe_allow_html=True)
    st.markdown(render_certificate(dash.session.user, course), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()

    session = dashboard().session
    if not session.is_logged_in:
        render_login_view()
        return

    render_sidebar()

    if session.screen == Screen.PROFILE:
        render_profile_view()
    elif session.screen == Screen.COURSE_DETAIL:
        render_course_detail_view()
    elif session.screen == Screen.CERTIFICATE:
        render_certificate_view()
    else:
        render_dashboard_view()


if __name__ == "__main__":
    main()
