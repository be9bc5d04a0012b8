"""Turn file store results and failures into human-readable text."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from filestash.errors import FileStoreError
from filestash.models import FileMetadata
from filestash.store.operations import FileOperations

LOGGER = logging.getLogger(__name__)

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
NO_FILES_FOUND = "No files found."
DIVIDER = "-" * 40


class FileLoaderAdapter:
    """Caller-facing facade over any :class:`FileOperations` implementation.

    Every method returns a string. Store failures are reported as text
    starting with ``Error`` and never propagate.
    """

    def __init__(
        self,
        operations: FileOperations,
        *,
        clock: Callable[[], datetime] = datetime.now,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> None:
        self.operations = operations
        self.clock = clock
        self.time_format = time_format

    def process_file(self, filename: str, directory: str, content: str) -> str:
        """Save ``content``, creating ``directory`` first when needed."""
        try:
            if not self.operations.directory_exists(directory):
                self.operations.create_directory(directory)
            size = self.operations.save_file(filename, directory, content)
        except FileStoreError as exc:
            LOGGER.debug("Save of %r in %r failed: %s", filename, directory, exc)
            return f"Error saving file: {exc}"

        return (
            "File saved successfully!\n"
            f"Filename: {filename}\n"
            f"Directory: {directory}\n"
            f"Size: {size} bytes\n"
            f"Time: {self.clock().strftime(self.time_format)}"
        )

    def load_file(self, filename: str, directory: str) -> str:
        if not directory.strip():
            return "Error: directory must not be empty"
        if not self.operations.directory_exists(directory):
            return f"Error: directory '{directory}' does not exist"
        try:
            return self.operations.read_file(filename, directory)
        except FileStoreError as exc:
            LOGGER.debug("Read of %r in %r failed: %s", filename, directory, exc)
            return f"Error reading file: {exc}"

    def search_file(self, filename: str, directory: str) -> str:
        """Render search matches as blocks; a blank directory searches everything."""
        try:
            found = self.operations.search_files(filename, directory if directory.strip() else "")
        except FileStoreError as exc:
            LOGGER.debug("Search for %r in %r failed: %s", filename, directory, exc)
            return f"Error searching files: {exc}"

        if not found:
            return NO_FILES_FOUND
        return "".join(self._render(path, info) for path, info in found.items())

    def _render(self, path: str, info: FileMetadata) -> str:
        return (
            f"File: {path}\n"
            f"Created: {info.creation_time.strftime(self.time_format)}\n"
            f"Size: {info.size} bytes\n"
            f"Validity: {'valid' if info.is_valid else 'invalid'}\n"
            f"Content:\n{info.content}\n"
            f"{DIVIDER}\n"
        )
