"""Tests for scan statistics and formatting."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from filescout.exceptions import EmptyCollectionError
from filescout.models import FileRecord
from filescout.report import format_size, format_timestamp, summarize, top_by_size

NOW = datetime(2024, 3, 5, 14, 7)


def _record(name: str, size: int) -> FileRecord:
    return FileRecord(Path("/data") / name, size, NOW, NOW)


class TestTopBySize:
    """Test top_by_size function."""

    def test_top_five_of_seven(self) -> None:
        """Should return the five largest, strictly descending."""
        records = [_record(f"f{i}", size) for i, size in enumerate([30, 70, 10, 50, 20, 60, 40])]

        top = top_by_size(records, 5)

        assert [r.size for r in top] == [70, 60, 50, 40, 30]

    def test_ties_keep_input_order(self) -> None:
        """Equal sizes should stay in their original order."""
        records = [_record("first", 5), _record("big", 9), _record("second", 5)]

        top = top_by_size(records, 3)

        assert [r.name for r in top] == ["big", "first", "second"]

    def test_fewer_than_n(self) -> None:
        """Should return everything when there are fewer records than n."""
        assert len(top_by_size([_record("a", 1)], 5)) == 1


class TestSummarize:
    """Test summarize function."""

    def test_summary_values(self) -> None:
        """Should compute count, total, average and largest."""
        records = [_record("a.txt", 10), _record("b.txt", 30), _record("c.txt", 20)]

        summary = summarize(records, top_n=2)

        assert summary.count == 3
        assert summary.total_size == 60
        assert summary.average_size == 20.0
        assert summary.largest.name == "b.txt"
        assert [r.name for r in summary.top] == ["b.txt", "c.txt"]

    def test_largest_is_first_on_ties(self) -> None:
        """The earliest of equally large files should be reported."""
        records = [_record("x", 8), _record("y", 8)]

        assert summarize(records).largest.name == "x"

    def test_empty_records(self) -> None:
        """Should raise for an empty list."""
        with pytest.raises(EmptyCollectionError):
            summarize([])


class TestFormatting:
    """Test formatting helpers."""

    def test_format_size_kilobytes(self) -> None:
        """Sizes up to 1 MiB are shown in KB."""
        assert format_size(2048) == "2.00 KB"
        assert format_size(1024 * 1024) == "1024.00 KB"

    def test_format_size_megabytes(self) -> None:
        """Sizes above 1 MiB are shown in MB."""
        assert format_size(5 * 1024 * 1024) == "5.00 MB"

    def test_format_timestamp(self) -> None:
        """Should render day.month.year hour:minute."""
        assert format_timestamp(NOW) == "05.03.2024 14:07"
