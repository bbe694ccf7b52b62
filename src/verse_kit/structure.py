"""Book / chapter / verse-count table used as ground truth for validation.

The table maps each canonical book name to its chapters (numbered from 1,
contiguous) and each chapter to the number of verses it holds. It is built
once, never mutated, and is safe to share between threads.

The bundled asset (``data/kjv.json``) follows KJV versification. A different
table can be supplied as a JSON object of ``{"Book": [verses, ...]}`` or
``{"Book": {"1": verses, ...}}``; book order in the file is kept.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from . import config

logger = logging.getLogger(__name__)

BUNDLED_TABLE = "kjv.json"


class StructureDataError(ValueError):
    """Raised when a structure table breaks one of its invariants."""


def _fold(name: str) -> str:
    return name.casefold()


def _verse_counts(book: str, chapters: Any) -> Tuple[int, ...]:
    if isinstance(chapters, Mapping):
        try:
            numbered = sorted((int(k), v) for k, v in chapters.items())
        except (TypeError, ValueError):
            raise StructureDataError(f"{book}: chapter keys must be integers") from None
        expected = list(range(1, len(numbered) + 1))
        if [n for n, _ in numbered] != expected:
            raise StructureDataError(f"{book}: chapters must be numbered 1..N without gaps")
        counts = [v for _, v in numbered]
    elif isinstance(chapters, Sequence) and not isinstance(chapters, (str, bytes)):
        counts = list(chapters)
    else:
        raise StructureDataError(f"{book}: expected a list or mapping of verse counts")

    if not counts:
        raise StructureDataError(f"{book}: a book needs at least one chapter")
    for chapter, count in enumerate(counts, start=1):
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise StructureDataError(f"{book} {chapter}: verse count must be a positive integer, got {count!r}")
    return tuple(counts)


class BibleStructureTable:
    """Immutable book -> chapter -> max-verse lookup."""

    def __init__(self, books: Mapping[str, Union[Sequence[int], Mapping[Any, int]]]):
        if not books:
            raise StructureDataError("structure table is empty")
        table: Dict[str, Tuple[int, ...]] = {}
        by_key: Dict[str, str] = {}
        for name, chapters in books.items():
            if not isinstance(name, str) or not name.strip():
                raise StructureDataError(f"invalid book name: {name!r}")
            canonical = name.strip()
            key = _fold(canonical)
            if key in by_key:
                raise StructureDataError(f"duplicate book: {name!r} (already have {by_key[key]!r})")
            by_key[key] = canonical
            table[canonical] = _verse_counts(canonical, chapters)
        self._table: Mapping[str, Tuple[int, ...]] = MappingProxyType(table)
        self._by_key: Mapping[str, str] = MappingProxyType(by_key)

    def __contains__(self, book: object) -> bool:
        return isinstance(book, str) and _fold(book) in self._by_key

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"<BibleStructureTable books={len(self)}>"

    @property
    def books(self) -> Tuple[str, ...]:
        return tuple(self._table)

    def lookup_book(self, name: str) -> Optional[str]:
        """Return the canonical spelling of ``name``, matched case-insensitively.

        Only case is ignored; " John" is not a book.
        """
        if not isinstance(name, str):
            return None
        return self._by_key.get(_fold(name))

    def _resolve(self, book: str) -> str:
        canonical = self.lookup_book(book)
        if canonical is None:
            raise KeyError(book)
        return canonical

    def chapters(self, book: str) -> Mapping[int, int]:
        """Chapter number -> verse count for ``book``."""
        counts = self._table[self._resolve(book)]
        return MappingProxyType({n: v for n, v in enumerate(counts, start=1)})

    def chapter_count(self, book: str) -> int:
        return len(self._table[self._resolve(book)])

    def verse_count(self, book: str, chapter: int) -> int:
        counts = self._table[self._resolve(book)]
        if chapter < 1 or chapter > len(counts):
            raise KeyError(f"{book} {chapter}")
        return counts[chapter - 1]

    def search_books(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Autocomplete book names containing ``query``.

        Exact (case-insensitive) matches come first, the rest in plain
        alphabetical order. A blank query matches nothing.
        """
        needle = _fold((query or "").strip())
        if not needle:
            return []
        matches = [name for key, name in self._by_key.items() if needle in key]
        matches.sort(key=lambda name: (_fold(name) != needle, name))
        if limit is not None:
            matches = matches[: max(limit, 0)]
        return matches

    def to_dict(self) -> Dict[str, List[int]]:
        return {name: list(counts) for name, counts in self._table.items()}


def load_structure_table(path: Optional[Union[str, Path]] = None) -> BibleStructureTable:
    """Load a table from ``path``, or the bundled one when ``path`` is None."""
    if path is None:
        source = f"package:{BUNDLED_TABLE}"
        raw = resources.files(__package__).joinpath("data").joinpath(BUNDLED_TABLE).read_text(encoding="utf-8")
    else:
        source = str(path)
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StructureDataError(f"{source}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise StructureDataError(f"{source}: expected a JSON object keyed by book name")
    table = BibleStructureTable(data)
    logger.debug("Loaded structure table from %s (%d books)", source, len(table))
    return table


@lru_cache(maxsize=None)
def default_table() -> BibleStructureTable:
    """Process-wide table, loaded on first use."""
    return load_structure_table(config.structure_path())
