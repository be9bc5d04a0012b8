"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BASE_DIR = Path("files")


@dataclass(slots=True)
class AppConfig:
    base_dir: Path = field(default_factory=lambda: DEFAULT_BASE_DIR)
    encoding: str = "utf-8"
    time_format: str = "%Y-%m-%d %H:%M:%S"

    def resolve_base_dir(self, base_dir: Path | None = None) -> Path:
        if Path(self.base_dir).is_absolute() or base_dir is None:
            return Path(self.base_dir)
        return base_dir / self.base_dir
