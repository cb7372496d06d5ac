"""
Persistence tests for Learnova.

Covers the key-value backends, DurableStore fallbacks and PersistedValue.
"""

import json
import logging
import sqlite3

from learnova.schemas import Course
from learnova.storage import (
    COURSES_KEY,
    DurableStore,
    MemoryBackend,
    PersistedValue,
    SqliteBackend,
)

from conftest import make_course


class BrokenBackend:
    """Backend whose medium is unavailable."""

    def __init__(self, error: Exception):
        self.error = error

    def get_item(self, key):
        raise self.error

    def set_item(self, key, value):
        raise self.error


class TestBackends:

    def test_memory_backend(self):
        backend = MemoryBackend()
        assert backend.get_item("k") is None
        backend.set_item("k", "v")
        backend.set_item("k", "w")
        assert backend.get_item("k") == "w"
        assert backend.keys() == ["k"]

    def test_sqlite_backend_survives_reopen(self, tmp_path):
        db_path = tmp_path / "nested" / "store.db"
        SqliteBackend(db_path).set_item("courses", "[]")

        reopened = SqliteBackend(db_path)
        assert reopened.get_item("courses") == "[]"
        assert reopened.get_item("missing") is None

    def test_sqlite_backend_unusable_location(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            backend = SqliteBackend(blocker / "sub" / "store.db")
        assert backend.ready is False
        assert "unavailable" in caplog.text

        # access errors surface from the backend and are absorbed by the store
        store = DurableStore(backend)
        assert store.read("enrolledCourseIds", [1], list[int]) == [1]
        assert store.write("enrolledCourseIds", [1, 2], list[int]) is False

    def test_sqlite_backend_recovers_when_location_frees_up(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        backend = SqliteBackend(blocker / "store.db")
        assert backend.ready is False

        blocker.unlink()
        backend.set_item("k", "v")
        assert backend.ready is True
        assert backend.get_item("k") == "v"

    def test_sqlite_backend_overwrites(self, tmp_path):
        backend = SqliteBackend(tmp_path / "store.db")
        backend.set_item("k", "1")
        backend.set_item("k", "2")
        assert backend.get_item("k") == "2"
        assert backend.keys() == ["k"]


class TestDurableStoreRead:

    def test_missing_key_returns_default(self, store):
        default = [make_course(1, ["m1"])]
        assert store.read(COURSES_KEY, default, list[Course]) is default

    def test_corrupt_value_returns_default(self, caplog):
        backend = MemoryBackend({COURSES_KEY: "{not json"})
        store = DurableStore(backend)
        default = [make_course(1, ["m1"])]

        with caplog.at_level(logging.WARNING):
            assert store.read(COURSES_KEY, default, list[Course]) is default

        assert backend.get_item(COURSES_KEY) == "{not json"
        assert "unreadable" in caplog.text

    def test_wrong_shape_returns_default(self):
        store = DurableStore(MemoryBackend({"enrolledCourseIds": json.dumps({"a": 1})}))
        assert store.read("enrolledCourseIds", [1, 2], list[int]) == [1, 2]

    def test_backend_error_returns_default(self, caplog):
        store = DurableStore(BrokenBackend(sqlite3.OperationalError("disk I/O error")))
        with caplog.at_level(logging.WARNING):
            assert store.read("enrolledCourseIds", [4], list[int]) == [4]
        assert "Could not read" in caplog.text

    def test_completion_map_keys_are_ints(self):
        store = DurableStore(MemoryBackend({"completedModules": '{"1": ["m1"], "5": []}'}))
        assert store.read("completedModules", {}, dict[int, list[str]]) == {1: ["m1"], 5: []}


class TestDurableStoreWrite:

    def test_write_uses_camel_case(self, backend, store):
        assert store.write(COURSES_KEY, [make_course(1, ["m1"])], list[Course]) is True
        data = json.loads(backend.get_item(COURSES_KEY))
        assert data[0]["finalAssessment"]["passingScore"] == 70
        assert data[0]["modules"][0]["videoUrl"] == "https://example.com/m1.mp4"

    def test_write_failure_is_swallowed(self, caplog):
        store = DurableStore(BrokenBackend(OSError("read-only file system")))
        with caplog.at_level(logging.ERROR):
            assert store.write("enrolledCourseIds", [1], list[int]) is False
        assert "keeping in-memory state" in caplog.text

    def test_round_trip_through_sqlite(self, tmp_path):
        catalog = [make_course(1, ["m1", "m2"], progress=50), make_course(2, [])]
        completed = {1: ["m2"], 3: []}

        writer = DurableStore(SqliteBackend(tmp_path / "store.db"))
        writer.write(COURSES_KEY, catalog, list[Course])
        writer.write("completedModules", completed, dict[int, list[str]])

        # fresh process: new backend over the same file
        reader = DurableStore(SqliteBackend(tmp_path / "store.db"))
        assert reader.read(COURSES_KEY, [], list[Course]) == catalog
        assert reader.read("completedModules", {}, dict[int, list[str]]) == completed


class TestPersistedValue:

    def test_seeds_from_default_and_persists_it(self, backend, store):
        slot = PersistedValue(store, "enrolledCourseIds", [1, 2], list[int])
        assert slot.value == [1, 2]
        assert json.loads(backend.get_item("enrolledCourseIds")) == [1, 2]

    def test_stored_value_wins_over_default(self, store):
        store.write("enrolledCourseIds", [9], list[int])
        slot = PersistedValue(store, "enrolledCourseIds", [1, 2], list[int])
        assert slot.value == [9]

    def test_set_mirrors_whole_value(self, backend, store):
        slot = PersistedValue(store, "enrolledCourseIds", [], list[int])
        slot.set([3])
        slot.set([3, 4])
        assert json.loads(backend.get_item("enrolledCourseIds")) == [3, 4]

    def test_failed_write_keeps_memory_value(self):
        slot = PersistedValue(DurableStore(BrokenBackend(OSError("full"))), "enrolledCourseIds", [1], list[int])
        slot.set([1, 2])
        assert slot.value == [1, 2]
