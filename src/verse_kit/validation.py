"""Turning user input into verse ranges.

Two modes live here and they are not interchangeable:

* :func:`validate` is the final check before a range is accepted (for
  example when a post is submitted). It never raises for bad input; it
  returns a :class:`ValidationResult` holding either the range, with the
  book name in canonical casing, or one of the typed errors below.
* The ``clamp_*`` helpers are for interactive editing. They pull an
  out-of-range chapter or verse back to the nearest bound so the picker is
  always in a correctable state. They do not promise a valid range
  (``start > end`` can survive clamping); run :func:`validate` afterwards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from .books import canonical_name
from .ranges import VerseRange
from .structure import BibleStructureTable, default_table

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Base class for rejected verse selections."""

    code = "invalid"


class UnknownBook(ValidationError):
    code = "unknown_book"


class InvalidChapter(ValidationError):
    code = "invalid_chapter"


class InvalidVerseRange(ValidationError):
    code = "invalid_verse_range"


class MalformedReference(ValidationError):
    code = "malformed_reference"


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[VerseRange] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> VerseRange:
        """Return the range, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def reject(error: ValidationError) -> ValidationResult:
    logger.debug("Rejected verse selection (%s): %s", error.code, error)
    return ValidationResult(error=error)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate(
    book: Any,
    chapter: Any,
    start_verse: Any,
    end_verse: Any,
    *,
    id: Optional[str] = None,
    table: Optional[BibleStructureTable] = None,
) -> ValidationResult:
    """Check a (book, chapter, start, end) selection against the structure table."""
    table = table or default_table()

    canonical = table.lookup_book(book) if isinstance(book, str) else None
    if canonical is None:
        return reject(UnknownBook(f"Unknown book: {book!r}"))

    max_chapter = table.chapter_count(canonical)
    if not _is_int(chapter) or chapter < 1 or chapter > max_chapter:
        return reject(InvalidChapter(f"{canonical} has chapters 1-{max_chapter}, got {chapter!r}"))

    max_verse = table.verse_count(canonical, chapter)
    if not (_is_int(start_verse) and _is_int(end_verse)):
        return reject(InvalidVerseRange(f"Verses must be whole numbers, got {start_verse!r}-{end_verse!r}"))
    if start_verse < 1 or end_verse < 1:
        return reject(InvalidVerseRange(f"Verses start at 1, got {start_verse}-{end_verse}"))
    if start_verse > end_verse:
        return reject(InvalidVerseRange(f"Ending verse {end_verse} is before starting verse {start_verse}"))
    if end_verse > max_verse:
        return reject(InvalidVerseRange(f"{canonical} {chapter} has verses 1-{max_verse}, got {end_verse}"))

    return ValidationResult(value=VerseRange(canonical, chapter, start_verse, end_verse, id=id))


# -- interactive clamping ----------------------------------------------------


@dataclass(frozen=True)
class Selection:
    book: str
    chapter: int
    start_verse: int
    end_verse: int


def clamp_chapter(book: str, chapter: int, *, table: Optional[BibleStructureTable] = None) -> int:
    table = table or default_table()
    chapter = max(chapter, 1)
    canonical = table.lookup_book(book)
    if canonical is not None:
        chapter = min(chapter, table.chapter_count(canonical))
    return chapter


def clamp_verse(book: str, chapter: int, verse: int, *, table: Optional[BibleStructureTable] = None) -> int:
    table = table or default_table()
    verse = max(verse, 1)
    canonical = table.lookup_book(book)
    if canonical is not None and 1 <= chapter <= table.chapter_count(canonical):
        verse = min(verse, table.verse_count(canonical, chapter))
    return verse


def clamp_selection(
    book: str,
    chapter: int,
    start_verse: int,
    end_verse: int,
    *,
    table: Optional[BibleStructureTable] = None,
) -> Selection:
    """Clamp each field on its own, the way the picker does on every edit."""
    table = table or default_table()
    chapter = clamp_chapter(book, chapter, table=table)
    return Selection(
        book=book,
        chapter=chapter,
        start_verse=clamp_verse(book, chapter, start_verse, table=table),
        end_verse=clamp_verse(book, chapter, end_verse, table=table),
    )


# -- free text ---------------------------------------------------------------

REFERENCE_RE = re.compile(
    r"""^\s*
    (?P<book>(?:[1-3]\s*)?[^\W\d_][^\d:]*?)\s*
    (?P<chapter>\d+)\s*:\s*
    (?P<start>\d+)
    (?:\s*[-–—]\s*(?P<end>\d+))?
    \s*$""",
    re.X,
)


def parse_reference(
    text: str,
    *,
    id: Optional[str] = None,
    table: Optional[BibleStructureTable] = None,
) -> ValidationResult:
    """Parse ``"John 3:16"`` / ``"1 Cor 13:4-7"`` style text and validate it."""
    table = table or default_table()
    m = REFERENCE_RE.match(text) if isinstance(text, str) else None
    if not m:
        return reject(MalformedReference(f"Could not parse verse reference: {text!r}"))

    raw_book = m.group("book").strip()
    book = table.lookup_book(raw_book) or canonical_name(raw_book) or raw_book
    start = int(m.group("start"))
    end = int(m.group("end")) if m.group("end") else start
    return validate(book, int(m.group("chapter")), start, end, id=id, table=table)
