"""Filesystem-backed file store rooted at a base directory."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator

from filestash.errors import IOFailure, NotFound, ValidationError
from filestash.models import FileMetadata

LOGGER = logging.getLogger(__name__)

_READ_PLACEHOLDER = ""


def _validate(filename: str, directory: str, content: str | None) -> None:
    if filename is None or not filename.strip():
        raise ValidationError("filename empty")
    if directory is None or not directory.strip():
        raise ValidationError("directory empty")
    if content is None:
        raise ValidationError("content null")


def _creation_time(stat: os.stat_result) -> datetime:
    # st_birthtime is only reported on some platforms
    timestamp = getattr(stat, "st_birthtime", None) or stat.st_ctime
    return datetime.fromtimestamp(timestamp).astimezone()


class FileStore:
    """Validated, single-shot file operations under ``base_dir``."""

    def __init__(self, base_dir: Path, *, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir)
        self.encoding = encoding

    def _resolve(self, directory: str) -> Path:
        return self.base_dir / directory if directory else self.base_dir

    def save_file(self, filename: str, directory: str, content: str) -> int:
        """Write ``content`` to ``base_dir/directory/filename`` and return its size."""
        _validate(filename, directory, content)

        if not self.directory_exists(directory):
            self.create_directory(directory)

        file_path = self._resolve(directory) / filename
        try:
            data = content.encode(self.encoding)
        except UnicodeEncodeError as exc:
            raise IOFailure(f"cannot encode content as {self.encoding}") from exc
        try:
            file_path.write_bytes(data)
            size = file_path.stat().st_size
        except OSError as exc:
            raise IOFailure(f"cannot write {file_path}: {exc.strerror or exc}") from exc
        except ValueError as exc:
            raise IOFailure(f"cannot write {file_path!r}: {exc}") from exc
        LOGGER.debug("Wrote %d bytes to %s", size, file_path)
        return size

    def read_file(self, filename: str, directory: str) -> str:
        _validate(filename, directory, _READ_PLACEHOLDER)

        file_path = self._resolve(directory) / filename
        if not file_path.exists():
            raise NotFound(f"file not found: {file_path}")
        try:
            text = file_path.read_bytes().decode(self.encoding)
        except OSError as exc:
            raise IOFailure(f"cannot read {file_path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise IOFailure(f"cannot decode {file_path} as {self.encoding}") from exc
        LOGGER.debug("Read %s", file_path)
        return text

    def directory_exists(self, directory: str) -> bool:
        try:
            return self._resolve(directory).is_dir()
        except (OSError, ValueError):
            return False

    def create_directory(self, directory: str) -> Path:
        dir_path = self._resolve(directory)
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IOFailure(f"cannot create directory {dir_path}: {exc.strerror or exc}") from exc
        except ValueError as exc:
            raise IOFailure(f"cannot create directory {dir_path!r}: {exc}") from exc
        LOGGER.info("Directory created at %s", dir_path.resolve())
        return dir_path

    def search_files(self, filename: str, directory: str) -> Dict[str, FileMetadata]:
        """Find files under ``directory`` whose name contains ``filename``.

        An empty ``directory`` searches the whole base directory. Results are
        keyed by the path relative to the search root, in lexicographic order.
        Files whose content cannot be read are reported as invalid; files whose
        attributes cannot be read are skipped.
        """
        root = self._resolve(directory)
        found: Dict[str, FileMetadata] = {}
        if not root.is_dir():
            return found

        matches = sorted(
            (path.relative_to(root).as_posix(), path)
            for path in _iter_files(root)
            if filename in path.name
        )
        for relative, path in matches:
            metadata = self._describe(path)
            if metadata is not None:
                found[relative] = metadata
        return found

    def _describe(self, path: Path) -> FileMetadata | None:
        try:
            stat = path.stat()
        except OSError as exc:
            LOGGER.warning("Skipping %s: %s", path, exc)
            return None

        created = _creation_time(stat)
        try:
            content = path.read_bytes().decode(self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("Cannot read content of %s: %s", path, exc)
            return FileMetadata.unreadable(created, stat.st_size)
        return FileMetadata(content=content, creation_time=created, size=stat.st_size)


def _iter_files(root: Path) -> Iterator[Path]:
    """Yield regular files under ``root``, descending into subdirectories."""
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            path = os.path.join(dirpath, name)
            if os.path.isfile(path):
                yield Path(path)
