"""filescout - find the largest files in a directory."""

from filescout.models import FileRecord, FoundEvent
from filescout.search.engine import FileSearcher, SearchRequest
from filescout.utils.ranking import max_by

__all__ = ["FileRecord", "FoundEvent", "FileSearcher", "SearchRequest", "max_by"]

__version__ = "0.1.0"
