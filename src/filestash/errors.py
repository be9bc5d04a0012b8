"""Failures raised by the file store layers."""

from __future__ import annotations


class FileStoreError(Exception):
    """Base class for every error raised by a file store."""


class ValidationError(FileStoreError, ValueError):
    """Caller supplied an empty filename/directory or no content."""


class NotFound(FileStoreError, FileNotFoundError):
    """The resolved path does not exist."""


class IOFailure(FileStoreError, OSError):
    """The underlying filesystem operation failed."""
