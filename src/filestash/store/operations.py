"""Capability interface shared by the file store layers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Protocol

from filestash.models import FileMetadata


class FileOperations(Protocol):
    def save_file(self, filename: str, directory: str, content: str) -> int: ...

    def read_file(self, filename: str, directory: str) -> str: ...

    def directory_exists(self, directory: str) -> bool: ...

    def create_directory(self, directory: str) -> Path: ...

    def search_files(self, filename: str, directory: str) -> Dict[str, FileMetadata]: ...
