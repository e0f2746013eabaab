"""Aggregate statistics over discovered files."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

from filescout.exceptions import EmptyCollectionError
from filescout.models import FileRecord
from filescout.utils.ranking import max_by

MEGABYTE = 1024 * 1024


@dataclass(slots=True)
class ScanSummary:
    count: int
    total_size: int
    average_size: float
    largest: FileRecord
    top: List[FileRecord] = field(default_factory=list)


def top_by_size(records: Sequence[FileRecord], n: int) -> List[FileRecord]:
    """Largest ``n`` records, biggest first; equal sizes keep their input order."""
    return sorted(records, key=lambda record: record.size, reverse=True)[:n]


def summarize(records: Sequence[FileRecord], *, top_n: int = 5) -> ScanSummary:
    if not records:
        raise EmptyCollectionError("No files to summarize")

    total = sum(record.size for record in records)
    return ScanSummary(
        count=len(records),
        total_size=total,
        average_size=total / len(records),
        largest=max_by(records, lambda record: record.size),
        top=top_by_size(records, top_n),
    )


def format_size(size: int) -> str:
    if size > MEGABYTE:
        return f"{size / MEGABYTE:.2f} MB"
    return f"{size / 1024:.2f} KB"


def format_timestamp(value: datetime) -> str:
    return value.strftime("%d.%m.%Y %H:%M")
