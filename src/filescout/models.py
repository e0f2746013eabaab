"""Core filescout data models."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


def _creation_time(stat: os.stat_result) -> float:
    # st_birthtime exists on macOS/BSD and recent Windows builds only
    return getattr(stat, "st_birthtime", stat.st_ctime)


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Snapshot of a file's metadata taken when it was discovered."""

    path: Path
    size: int
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_path(cls, path: Path) -> "FileRecord":
        stat = path.stat()
        return cls(
            path=path,
            size=stat.st_size,
            created_at=datetime.fromtimestamp(_creation_time(stat)),
            modified_at=datetime.fromtimestamp(stat.st_mtime),
        )

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size_mb(self) -> float:
        return self.size / 1024 / 1024


@dataclass(slots=True)
class FoundEvent:
    """Notification sent to observers for each discovered file.

    Observers set ``cancel`` to stop the search; the file carried by the
    event is then left out of the result.
    """

    record: FileRecord
    cancel: bool = False
