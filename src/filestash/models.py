"""Core filestash data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

UNREADABLE_CONTENT = "Could not read file content"


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Description of a file discovered during a search.

    When ``is_valid`` is false the content could not be read and ``content``
    holds :data:`UNREADABLE_CONTENT` instead of the file text.
    """

    content: str
    creation_time: datetime
    size: int
    is_valid: bool = True

    @classmethod
    def unreadable(cls, creation_time: datetime, size: int) -> FileMetadata:
        return cls(
            content=UNREADABLE_CONTENT,
            creation_time=creation_time,
            size=size,
            is_valid=False,
        )
