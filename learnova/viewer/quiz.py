"""
Quiz grading - Multiple-choice scoring against a quiz's passing score.

Provides:
- Grading submitted answers for a module quiz or final assessment
- Quiz result display
"""

import html
from dataclasses import dataclass
from typing import Optional, Sequence

from learnova.schemas import Quiz


@dataclass(frozen=True)
class QuizResult:
    """Score for one quiz submission."""
    correct: int
    total: int
    percent: int
    passing_score: int
    incorrect_indices: tuple[int, ...] = ()

    @property
    def passed(self) -> bool:
        return self.percent >= self.passing_score


def grade_quiz(quiz: Quiz, answers: Sequence[Optional[str]]) -> QuizResult:
    """
    Grade answers for a quiz.

    Args:
        quiz: Quiz being answered
        answers: Selected option per question, in question order
            (None or a missing entry counts as wrong)

    Returns:
        QuizResult; a quiz without questions scores 100%
    """
    total = len(quiz.questions)
    if total == 0:
        return QuizResult(correct=0, total=0, percent=100, passing_score=quiz.passing_score)

    incorrect = []
    for idx, question in enumerate(quiz.questions):
        answer = answers[idx] if idx < len(answers) else None
        if answer != question.correct_answer:
            incorrect.append(idx)

    correct = total - len(incorrect)
    return QuizResult(
        correct=correct,
        total=total,
        percent=(200 * correct + total) // (2 * total),
        passing_score=quiz.passing_score,
        incorrect_indices=tuple(incorrect),
    )


def render_quiz_result(result: QuizResult) -> str:
    """Render quiz score display."""
    status = "Passed" if result.passed else f"Needs {result.passing_score}% to pass"
    css_class = "quiz-pass" if result.passed else "quiz-fail"
    return f"""
    <div class="quiz-score-box {css_class}">
        <div class="quiz-score-value">{result.percent}%</div>
        <div class="quiz-score-label">{result.correct} of {result.total} correct &middot; {html.escape(status)}</div>
    </div>
    """


def get_quiz_css() -> str:
    """Get CSS styles for quiz results."""
    return """
    <style>
    .quiz-score-box {
        border-radius: 8px;
        padding: 1em;
        margin-top: 1em;
        text-align: center;
    }
    .quiz-pass { background: #e8f5e9; }
    .quiz-fail { background: #fff3e0; }
    .quiz-score-value {
        font-size: 2em;
        font-weight: 700;
        color: #388E3C;
    }
    .quiz-fail .quiz-score-value { color: #e65100; }
    .quiz-score-label {
        color: #666;
        font-size: 0.9em;
    }
    </style>
    """
