"""
Learnova Storage - Durable key-value persistence for dashboard state.

This module provides:
- DurableStore: typed JSON read/write with fallback-on-failure
- PersistedValue: an in-memory slot mirrored into the store
- SqliteBackend / MemoryBackend: storage media
"""

from .backends import (
    KeyValueBackend,
    SqliteBackend,
    MemoryBackend,
)

from .store import (
    DurableStore,
    PersistedValue,
    COURSES_KEY,
    ENROLLED_COURSE_IDS_KEY,
    COMPLETED_MODULES_KEY,
)

__all__ = [
    # Backends
    "KeyValueBackend",
    "SqliteBackend",
    "MemoryBackend",
    # Store
    "DurableStore",
    "PersistedValue",
    "COURSES_KEY",
    "ENROLLED_COURSE_IDS_KEY",
    "COMPLETED_MODULES_KEY",
]
