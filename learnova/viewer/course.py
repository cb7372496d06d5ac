"""
Course renderer - Dashboard course cards and certificate display.

Provides:
- Course card HTML with a progress bar
- Course progress table for charts
- Completion certificate HTML
"""

import html
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from learnova.schemas import Course, User


def get_course_css() -> str:
    """Get CSS styles for course cards and certificates."""
    return """
    <style>
    .course-card {
        background: white;
        border: 1px solid #e0e0e0;
        border-radius: 12px;
        padding: 1em 1.2em;
        margin-bottom: 1em;
    }
    .course-category {
        font-size: 0.8em;
        text-transform: uppercase;
        color: #1976D2;
        letter-spacing: 0.05em;
    }
    .course-title {
        font-size: 1.15em;
        font-weight: 600;
        color: #222;
        margin: 0.2em 0;
    }
    .course-meta {
        color: #666;
        font-size: 0.9em;
    }
    .course-progress-track {
        background: #eee;
        border-radius: 6px;
        height: 8px;
        margin-top: 0.8em;
        overflow: hidden;
    }
    .course-progress-fill {
        background: #388E3C;
        height: 100%;
    }
    .certificate {
        border: 8px double #1565C0;
        border-radius: 4px;
        padding: 3em 2em;
        text-align: center;
        background: #fffdf5;
    }
    .certificate-heading {
        font-size: 2em;
        font-weight: 700;
        color: #1565C0;
        letter-spacing: 0.08em;
    }
    .certificate-name {
        font-size: 1.8em;
        font-family: Georgia, serif;
        margin: 0.6em 0;
    }
    .certificate-course {
        font-size: 1.3em;
        font-weight: 600;
    }
    .certificate-footer {
        margin-top: 2em;
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """


def render_course_card(course: Course, show_progress: bool = True) -> str:
    """
    Render a course summary card.

    Args:
        course: Course to display
        show_progress: Whether to include the progress bar (enrolled courses)

    Returns:
        HTML string for the card
    """
    parts = ['<div class="course-card">']
    parts.append(f'<div class="course-category">{html.escape(course.category)}</div>')
    parts.append(f'<div class="course-title">{html.escape(course.title)}</div>')
    parts.append(
        f'<div class="course-meta">{html.escape(course.duration)} &middot; '
        f'{html.escape(course.difficulty)} &middot; {len(course.modules)} modules</div>'
    )

    if show_progress:
        parts.append('<div class="course-progress-track">')
        parts.append(f'<div class="course-progress-fill" style="width: {course.progress}%"></div>')
        parts.append('</div>')
        parts.append(f'<div class="course-meta">{course.progress}% complete</div>')

    parts.append('</div>')
    return ''.join(parts)


def build_progress_frame(courses: Iterable[Course]) -> pd.DataFrame:
    """Tabulate course progress (one row per course, catalog order)."""
    rows = [
        {
            "course": course.title,
            "category": course.category,
            "modules": len(course.modules),
            "progress": course.progress,
        }
        for course in courses
    ]
    return pd.DataFrame(rows, columns=["course", "category", "modules", "progress"])


def render_certificate(user: User, course: Course, issued_on: Optional[date] = None) -> str:
    """
    Render a completion certificate.

    Args:
        user: Learner named on the certificate
        course: Completed course
        issued_on: Issue date (default: today)

    Returns:
        HTML string for the certificate
    """
    issued = issued_on or date.today()
    parts = ['<div class="certificate">']
    parts.append('<div class="certificate-heading">CERTIFICATE OF COMPLETION</div>')
    parts.append('<div>This certifies that</div>')
    parts.append(f'<div class="certificate-name">{html.escape(user.name)}</div>')
    parts.append('<div>has successfully completed</div>')
    parts.append(f'<div class="certificate-course">{html.escape(course.title)}</div>')

    footer = [f"Issued {issued.isoformat()}"]
    if user.institute:
        footer.append(html.escape(user.institute))
    if user.roll_no:
        footer.append(f"Roll No. {html.escape(user.roll_no)}")
    parts.append(f'<div class="certificate-footer">{" &middot; ".join(footer)}</div>')

    parts.append('</div>')
    return ''.join(parts)
