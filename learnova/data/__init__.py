"""
Seed data loader for Learnova.

Loads the default dashboard state (catalog, enrollments, completion map and
learner profile) from the bundled courses.yaml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from learnova.errors import SeedDataError
from learnova.schemas import Course, User


SEED_FILE = Path(__file__).parent / "courses.yaml"


@dataclass
class SeedData:
    """Initial values used before anything has been persisted."""
    courses: list[Course]
    user: User
    enrolled_course_ids: list[int] = field(default_factory=list)
    completed_modules: dict[int, list[str]] = field(default_factory=dict)


def load_seed_data(path: Optional[Path] = None) -> SeedData:
    """
    Load seed data from YAML.

    Args:
        path: Optional custom seed file (default: bundled courses.yaml)

    Returns:
        Validated SeedData

    Raises:
        SeedDataError: If the file is missing, not YAML, or fails validation
    """
    file_path = path or SEED_FILE

    if not file_path.exists():
        raise SeedDataError("Seed data file not found", str(file_path))

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SeedDataError(f"Seed data is not valid YAML ({e})", str(file_path)) from e

    if not isinstance(raw, dict):
        raise SeedDataError("Seed data must be a mapping", str(file_path))

    try:
        return SeedData(
            courses=TypeAdapter(list[Course]).validate_python(raw.get("courses", [])),
            user=User.model_validate(raw["user"]),
            enrolled_course_ids=TypeAdapter(list[int]).validate_python(raw.get("enrolledCourseIds", [])),
            completed_modules=TypeAdapter(dict[int, list[str]]).validate_python(raw.get("completedModules", {})),
        )
    except KeyError as e:
        raise SeedDataError(f"Seed data is missing section {e}", str(file_path)) from e
    except ValidationError as e:
        raise SeedDataError(f"Seed data failed validation ({e.error_count()} error(s))", str(file_path)) from e


__all__ = [
    "SEED_FILE",
    "SeedData",
    "load_seed_data",
]
