"""File store layers."""

from filestash.store.timestamps import TimestampLoggingStore
from filestash.store.manager import FileStore
from filestash.store.operations import FileOperations

__all__ = ["FileOperations", "FileStore", "TimestampLoggingStore"]
