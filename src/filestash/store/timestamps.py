"""File store wrapper that remembers when each file was saved."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict

from filestash.models import FileMetadata
from filestash.store.operations import FileOperations

LOGGER = logging.getLogger(__name__)

UNKNOWN_TIMESTAMP = "unknown"


class TimestampLoggingStore:
    """Forward every operation to ``inner`` and track save timestamps.

    Timestamps live only in this instance, keyed by directory and filename.
    Reads are prefixed with a ``saved at:`` line.
    """

    def __init__(
        self,
        inner: FileOperations,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.inner = inner
        self.clock = clock
        self.timestamps: Dict[str, str] = {}

    @staticmethod
    def _key(filename: str, directory: str) -> str:
        return directory + os.sep + filename

    def saved_at(self, filename: str, directory: str) -> str | None:
        return self.timestamps.get(self._key(filename, directory))

    def save_file(self, filename: str, directory: str, content: str) -> int:
        size = self.inner.save_file(filename, directory, content)
        timestamp = self.clock().isoformat(timespec="seconds")
        self.timestamps[self._key(filename, directory)] = timestamp
        LOGGER.debug("Recorded save of %s at %s", self._key(filename, directory), timestamp)
        return size

    def read_file(self, filename: str, directory: str) -> str:
        content = self.inner.read_file(filename, directory)
        timestamp = self.saved_at(filename, directory) or UNKNOWN_TIMESTAMP
        return f"saved at: {timestamp}\n{content}"

    def directory_exists(self, directory: str) -> bool:
        return self.inner.directory_exists(directory)

    def create_directory(self, directory: str) -> Path:
        return self.inner.create_directory(directory)

    def search_files(self, filename: str, directory: str) -> Dict[str, FileMetadata]:
        return self.inner.search_files(filename, directory)
