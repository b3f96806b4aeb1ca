"""Chronological sorting service for `PhotoRecord` lists.

Capture times are read once per record in a pre-pass, then the records are
sorted on the cached values. Records without a readable capture time keep their
listing order and follow every record that has one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from loguru import logger

from core.models import PhotoRecord

CaptureTimeReader = Callable[[str], str | None]


def compare_capture_times(a: str | None, b: str | None) -> int:
    """Three-way compare two capture time strings.

    EXIF date/time values are fixed width ("YYYY:MM:DD HH:MM:SS"), so lexical
    order is chronological order. A missing value sorts after a present one,
    and two missing values are equal.
    """
    if a is not None and b is not None:
        return (a > b) - (a < b)
    if a is not None:
        return -1
    if b is not None:
        return 1
    return 0


class SortService:
    """Orders photo records by embedded capture time."""

    def __init__(self, reader: CaptureTimeReader) -> None:
        """Create a SortService.

        Args:
            reader: Callable returning the capture time string for a path, or
                None when it cannot be read.
        """
        self._reader = reader

    def sort(self, records: Iterable[PhotoRecord], descending: bool = False) -> list[PhotoRecord]:
        """Return records in chronological order.

        Args:
            records: Records in directory listing order.
            descending: Reverse the fully sorted sequence (latest first).
        """
        decorated: list[tuple[str | None, PhotoRecord]] = []
        for record in records:
            captured = self._reader(record.file_path)
            if captured is None:
                logger.debug("No capture time for {}", record.file_path)
            decorated.append((captured, record))

        key = cmp_to_key(compare_capture_times)
        decorated.sort(key=lambda x: key(x[0]))
        ordered = [rec for _, rec in decorated]
        if descending:
            ordered.reverse()
        return ordered
