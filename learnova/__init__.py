"""Learnova - state and progress tracking for a single-learner course dashboard."""

__version__ = "0.1.0"
