"""
Learner schemas for Learnova.

Defines Pydantic models for:
- The logged-in learner's profile
- Monthly completion counts for reporting views
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class User(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    avatar_url: str
    roll_no: Optional[str] = None
    year_of_passing: Optional[int] = None
    institute: Optional[str] = None
    bio: Optional[str] = None


class ProgressData(BaseModel):
    """Completed-module count for one month (reporting only)."""
    month: str
    completed: int = Field(default=0, ge=0)
