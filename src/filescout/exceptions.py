"""Error types raised by filescout."""

from __future__ import annotations

from pathlib import Path


class FileScoutError(Exception):
    """Base class for filescout errors."""


class DirectoryNotFoundError(FileScoutError, FileNotFoundError):
    """Search target is missing or is not a directory."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"Directory not found: {directory}")
        self.directory = directory


class FilesystemError(FileScoutError, OSError):
    """Listing or stat failure while searching."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class EmptyCollectionError(FileScoutError, ValueError):
    """Nothing eligible was left to rank."""


class InvalidArgumentError(FileScoutError, TypeError):
    """Missing collection or non-callable projection."""
