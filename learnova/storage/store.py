"""
DurableStore - JSON mirror of in-memory state into a key-value backend.

Reads fall back to the caller's default on a missing key, corrupt text or a
backend error. Writes re-serialize the whole value and never raise: the
in-memory value stays the source of truth and the next write persists the
then-current state.
"""

import logging
import sqlite3
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .backends import KeyValueBackend


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fixed slot names, one per persisted entity
COURSES_KEY = "courses"
ENROLLED_COURSE_IDS_KEY = "enrolledCourseIds"
COMPLETED_MODULES_KEY = "completedModules"

BACKEND_ERRORS = (sqlite3.Error, OSError)


@lru_cache(maxsize=None)
def _adapter(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


class DurableStore:
    """Typed read/write of named slots over a KeyValueBackend."""

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def read(self, key: str, default: T, value_type: Any) -> T:
        """
        Read and validate the value stored under key.

        Args:
            key: Slot name
            default: Returned when the slot is absent or unreadable
            value_type: Type the stored JSON must validate as (e.g. list[Course])

        Returns:
            The stored value, or default
        """
        try:
            text = self.backend.get_item(key)
        except BACKEND_ERRORS as e:
            logger.warning(f"Could not read {key!r} from storage, using default: {e}")
            return default

        if text is None:
            return default

        try:
            return _adapter(value_type).validate_json(text)
        except ValidationError as e:
            logger.warning(
                f"Stored value for {key!r} is unreadable, using default "
                f"({e.error_count()} error(s))"
            )
            return default

    def write(self, key: str, value: Any, value_type: Any) -> bool:
        """
        Serialize value and overwrite the slot.

        Returns:
            True if the backend accepted the write, False if it failed (logged)
        """
        text = _adapter(value_type).dump_json(value, by_alias=True).decode("utf-8")
        try:
            self.backend.set_item(key, text)
        except BACKEND_ERRORS as e:
            logger.error(f"Could not persist {key!r}, keeping in-memory state: {e}")
            return False
        logger.debug(f"Persisted {key!r} ({len(text)} chars)")
        return True


class PersistedValue(Generic[T]):
    """
    One persisted slot held in memory.

    Seeded once from storage (or the default when nothing usable is stored),
    then every set() replaces the in-memory value and mirrors it to storage.
    """

    def __init__(self, store: DurableStore, key: str, default: T, value_type: Any):
        self.store = store
        self.key = key
        self.value_type = value_type
        self._value = store.read(key, default, value_type)
        self.store.write(self.key, self._value, self.value_type)

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T):
        self._value = value
        self.store.write(self.key, value, self.value_type)
