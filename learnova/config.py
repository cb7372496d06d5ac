"""
Runtime configuration for Learnova.

Settings come from environment variables (optionally via a .env file):

    LEARNOVA_STORAGE            sqlite | memory (default: sqlite)
    LEARNOVA_STORE_PATH         SQLite file (default: ~/.learnova/store.db)
    LEARNOVA_STRICT_REFERENCES  raise on unknown course/module ids (default: false)
    LEARNOVA_LOG_LEVEL          logging level name (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


DEFAULT_DATA_DIR = Path.home() / ".learnova"
DEFAULT_STORE_PATH = DEFAULT_DATA_DIR / "store.db"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    storage: Literal["sqlite", "memory"] = "sqlite"
    store_path: Path = DEFAULT_STORE_PATH
    strict_references: bool = False
    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def log_level_known(cls, v):
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
) -> Settings:
    """
    Build settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (skips .env loading)
        dotenv_path: Optional .env file to load before reading os.environ

    Returns:
        Validated Settings
    """
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ

    values = {}
    if env.get("LEARNOVA_STORAGE"):
        values["storage"] = env["LEARNOVA_STORAGE"].strip().lower()
    if env.get("LEARNOVA_STORE_PATH"):
        values["store_path"] = Path(env["LEARNOVA_STORE_PATH"]).expanduser()
    if env.get("LEARNOVA_STRICT_REFERENCES"):
        values["strict_references"] = env["LEARNOVA_STRICT_REFERENCES"].strip().lower() in _TRUE_VALUES
    if env.get("LEARNOVA_LOG_LEVEL"):
        values["log_level"] = env["LEARNOVA_LOG_LEVEL"]

    return Settings(**values)


def configure_logging(level: str = "INFO"):
    """Set up root logging with the project-wide format."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
