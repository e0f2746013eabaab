"""Single-directory file search with cancellable notifications."""

from __future__ import annotations

import fnmatch
import logging
import os
import stat
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List

from filescout.exceptions import DirectoryNotFoundError, FilesystemError
from filescout.models import FileRecord, FoundEvent

LOGGER = logging.getLogger(__name__)

FileFoundHandler = Callable[[FoundEvent], None]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    directory: Path
    pattern: str = "*"
    max_results: int = 0


class FileSearcher:
    """Enumerates files in one directory and notifies observers.

    Pattern matching is delegated to :func:`fnmatch.fnmatch`: ``*`` matches any
    run of characters, ``?`` a single character and ``[seq]``/``[!seq]`` a set.
    Case sensitivity follows the host OS and dot-files are matched by ``*``.
    Results come back in ``os.scandir`` order, which is not sorted.
    """

    def __init__(self) -> None:
        self._handlers: List[FileFoundHandler] = []

    def on_file_found(self, handler: FileFoundHandler) -> FileFoundHandler:
        """Register ``handler``; returns it so this can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    def remove_handler(self, handler: FileFoundHandler) -> None:
        self._handlers.remove(handler)

    def run(self, request: SearchRequest) -> List[Path]:
        return self.search(request.directory, request.pattern, request.max_results)

    def search(self, directory: Path | str, pattern: str = "*", max_results: int = 0) -> List[Path]:
        """Return paths of files in ``directory`` whose names match ``pattern``.

        Every match is announced to the registered observers before it is
        accepted. A cancelled event stops the search and its file is dropped.
        With ``max_results > 0`` the search stops right after that many files
        have been accepted. A file that cannot be stat'ed aborts the search.
        """
        if max_results < 0:
            raise ValueError("max_results must be >= 0")

        root = Path(directory)
        self._check_directory(root)

        LOGGER.debug("Searching %s for %r (limit=%d)", root, pattern, max_results)
        results: List[Path] = []
        with closing(self._iter_records(root, pattern)) as records:
            for record in records:
                event = FoundEvent(record)
                self._dispatch(event)
                if event.cancel:
                    LOGGER.debug("Search cancelled at %s", record.path)
                    break

                results.append(record.path)
                if max_results > 0 and len(results) >= max_results:
                    LOGGER.debug("Result limit %d reached", max_results)
                    break

        return results

    @staticmethod
    def _check_directory(root: Path) -> None:
        try:
            mode = root.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise DirectoryNotFoundError(root) from exc
        except OSError as exc:
            raise FilesystemError(root, exc.strerror or str(exc)) from exc
        if not stat.S_ISDIR(mode):
            raise DirectoryNotFoundError(root)

    @staticmethod
    def _iter_records(root: Path, pattern: str) -> Iterator[FileRecord]:
        # only listing and stat errors are wrapped, observer errors pass through
        try:
            with os.scandir(root) as entries:
                for entry in entries:
                    if not fnmatch.fnmatch(entry.name, pattern) or not entry.is_file():
                        continue
                    yield FileRecord.from_path(Path(entry.path))
        except OSError as exc:
            raise FilesystemError(Path(exc.filename or root), exc.strerror or str(exc)) from exc

    def _dispatch(self, event: FoundEvent) -> None:
        # all observers see the event, cancellation is checked afterwards
        for handler in list(self._handlers):
            handler(event)
