"""Attaching verse ranges to posts.

A post stores its ranges as structured records. The ``reference`` string in
each record is a display projection produced by :func:`format_range`; it is
written for readers of the raw data and never read back.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from .ranges import VerseRange, format_list, format_range
from .structure import BibleStructureTable
from .validation import InvalidChapter, InvalidVerseRange, UnknownBook, ValidationResult, reject, validate


def to_record(r: VerseRange) -> Dict[str, Any]:
    return {
        "id": r.id,
        "book": r.book,
        "chapter": r.chapter,
        "startVerse": r.start_verse,
        "endVerse": r.end_verse,
        "reference": format_range(r),
    }


def from_record(record: Mapping[str, Any], *, table: Optional[BibleStructureTable] = None) -> ValidationResult:
    """Rebuild a range from its structured fields, validating it again."""
    if "book" not in record:
        return reject(UnknownBook("Record has no book"))
    if "chapter" not in record:
        return reject(InvalidChapter("Record has no chapter"))
    if "startVerse" not in record or "endVerse" not in record:
        return reject(InvalidVerseRange("Record needs startVerse and endVerse"))
    return validate(
        record["book"],
        record["chapter"],
        record["startVerse"],
        record["endVerse"],
        id=record.get("id"),
        table=table,
    )


def reference_for_post(ranges: Sequence[VerseRange]) -> str:
    """Display reference for a post's ranges, e.g. ``"John 3:16, John 3:18-20"``."""
    if not ranges:
        raise ValueError("A post needs at least one verse range")
    return format_list(ranges)
