"""Tests for TimestampLoggingStore."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filestash.errors import NotFound, ValidationError
from filestash.store import FileStore, TimestampLoggingStore


SAVED = datetime(2024, 5, 1, 12, 30, 45, 123456)


@pytest.fixture
def wrapped(tmp_path: Path) -> TimestampLoggingStore:
    return TimestampLoggingStore(FileStore(tmp_path / "files"), clock=lambda: SAVED)


class TestSaveAndRead:
    """Test timestamp recording on save and the read prefix."""

    def test_save_returns_inner_size(self, wrapped: TimestampLoggingStore) -> None:
        assert wrapped.save_file("notes.txt", "work", "hello\n") == 6

    def test_save_records_timestamp(self, wrapped: TimestampLoggingStore) -> None:
        wrapped.save_file("notes.txt", "work", "hello\n")

        assert wrapped.timestamps == {f"work{os.sep}notes.txt": "2024-05-01T12:30:45"}
        assert wrapped.saved_at("notes.txt", "work") == "2024-05-01T12:30:45"

    def test_read_after_save(self, wrapped: TimestampLoggingStore) -> None:
        wrapped.save_file("notes.txt", "work", "hello\n")

        assert wrapped.read_file("notes.txt", "work") == "saved at: 2024-05-01T12:30:45\nhello\n"

    def test_read_pre_existing_file(self, wrapped: TimestampLoggingStore) -> None:
        """Files not saved through this instance have an unknown timestamp."""
        inner = wrapped.inner
        inner.save_file("old.txt", "work", "legacy")

        assert wrapped.read_file("old.txt", "work") == "saved at: unknown\nlegacy"

    def test_later_save_overwrites_timestamp(self, tmp_path: Path) -> None:
        times = iter([datetime(2024, 1, 1, 8, 0, 0), datetime(2024, 1, 1, 9, 15, 0)])
        wrapped = TimestampLoggingStore(FileStore(tmp_path), clock=lambda: next(times))

        wrapped.save_file("notes.txt", "work", "v1")
        wrapped.save_file("notes.txt", "work", "v2")

        assert wrapped.read_file("notes.txt", "work") == "saved at: 2024-01-01T09:15:00\nv2"

    def test_timestamps_are_per_instance(self, tmp_path: Path) -> None:
        first = TimestampLoggingStore(FileStore(tmp_path))
        second = TimestampLoggingStore(FileStore(tmp_path))

        first.save_file("notes.txt", "work", "hello")

        assert second.read_file("notes.txt", "work").startswith("saved at: unknown\n")

    def test_failed_save_records_nothing(self, wrapped: TimestampLoggingStore) -> None:
        with pytest.raises(ValidationError, match="filename empty"):
            wrapped.save_file("", "work", "hello")

        assert wrapped.timestamps == {}

    def test_read_failure_propagates_unchanged(self, wrapped: TimestampLoggingStore) -> None:
        with pytest.raises(NotFound, match="^file not found: "):
            wrapped.read_file("never.txt", "work")


class TestPassThrough:
    """Other operations are forwarded untouched."""

    def test_directory_exists(self) -> None:
        inner = MagicMock()
        inner.directory_exists.return_value = True

        assert TimestampLoggingStore(inner).directory_exists("work") is True
        inner.directory_exists.assert_called_once_with("work")

    def test_create_directory(self) -> None:
        inner = MagicMock()
        inner.create_directory.return_value = Path("files/work")

        assert TimestampLoggingStore(inner).create_directory("work") == Path("files/work")
        inner.create_directory.assert_called_once_with("work")

    def test_search_files(self) -> None:
        inner = MagicMock()
        inner.search_files.return_value = {"a.txt": "meta"}
        wrapped = TimestampLoggingStore(inner)

        assert wrapped.search_files("a", "") == {"a.txt": "meta"}
        inner.search_files.assert_called_once_with("a", "")
        assert wrapped.timestamps == {}
