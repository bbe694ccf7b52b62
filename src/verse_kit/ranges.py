"""Verse ranges ("clips") and the queries run against them.

Everything here assumes ranges that came out of
:func:`verse_kit.validation.validate`; no bounds are re-checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class VerseRange:
    book: str
    chapter: int
    start_verse: int
    end_verse: int
    id: Optional[str] = None

    @property
    def is_single_verse(self) -> bool:
        return self.start_verse == self.end_verse

    @property
    def verses(self) -> range:
        return range(self.start_verse, self.end_verse + 1)

    def human_readable(self) -> str:
        return format_range(self)

    def __str__(self) -> str:
        return format_range(self)


def _same_book(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def format_range(r: VerseRange) -> str:
    """``"Matthew 12:8"`` for one verse, ``"Matthew 12:8-10"`` for a span."""
    if r.is_single_verse:
        return f"{r.book} {r.chapter}:{r.start_verse}"
    return f"{r.book} {r.chapter}:{r.start_verse}-{r.end_verse}"


def format_list(ranges: Iterable[VerseRange]) -> str:
    # caller's order, not re-sorted
    return ", ".join(format_range(r) for r in ranges)


def overlaps(a: VerseRange, b: VerseRange) -> bool:
    """True when both ranges sit in the same chapter and share a verse."""
    if not _same_book(a.book, b.book) or a.chapter != b.chapter:
        return False
    return not (a.end_verse < b.start_verse or a.start_verse > b.end_verse)


def contains(r: VerseRange, verse: int) -> bool:
    """Verse-number check only; book and chapter are the caller's concern."""
    return r.start_verse <= verse <= r.end_verse


def any_contains(ranges: Iterable[VerseRange], book: str, chapter: int, verse: int) -> bool:
    return any(
        _same_book(r.book, book) and r.chapter == chapter and contains(r, verse)
        for r in ranges
    )


def overlapping(ranges: Iterable[VerseRange], target: VerseRange) -> List[VerseRange]:
    return [r for r in ranges if overlaps(r, target)]
