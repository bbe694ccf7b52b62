"""Bible verse-range validation, formatting and overlap queries."""

from .ranges import VerseRange, any_contains, contains, format_list, format_range, overlapping, overlaps
from .structure import BibleStructureTable, StructureDataError, default_table, load_structure_table
from .validation import (
    InvalidChapter,
    InvalidVerseRange,
    MalformedReference,
    Selection,
    UnknownBook,
    ValidationError,
    ValidationResult,
    clamp_chapter,
    clamp_selection,
    clamp_verse,
    parse_reference,
    validate,
)

__all__ = [
    "VerseRange",
    "any_contains",
    "contains",
    "format_list",
    "format_range",
    "overlapping",
    "overlaps",
    "BibleStructureTable",
    "StructureDataError",
    "default_table",
    "load_structure_table",
    "InvalidChapter",
    "InvalidVerseRange",
    "MalformedReference",
    "Selection",
    "UnknownBook",
    "ValidationError",
    "ValidationResult",
    "clamp_chapter",
    "clamp_selection",
    "clamp_verse",
    "parse_reference",
    "validate",
]
