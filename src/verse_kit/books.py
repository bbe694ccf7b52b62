"""Canonical Bible book names, OSIS codes and the aliases people type."""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple


BOOKS = [
    ("Gen", "Genesis", ["gen", "ge", "gn"]),
    ("Exod", "Exodus", ["exod", "ex", "exo"]),
    ("Lev", "Leviticus", ["lev", "le", "lv"]),
    ("Num", "Numbers", ["num", "nu", "nm"]),
    ("Deut", "Deuteronomy", ["deut", "dt"]),
    ("Josh", "Joshua", ["josh", "jos"]),
    ("Judg", "Judges", ["judg", "jg", "jdg"]),
    ("Ruth", "Ruth", ["ru"]),
    ("1Sam", "1 Samuel", ["1 sam", "1sa", "first samuel"]),
    ("2Sam", "2 Samuel", ["2 sam", "2sa", "second samuel"]),
    ("1Kgs", "1 Kings", ["1 kgs", "1ki", "first kings"]),
    ("2Kgs", "2 Kings", ["2 kgs", "2ki", "second kings"]),
    ("1Chr", "1 Chronicles", ["1 chr", "1ch", "first chronicles"]),
    ("2Chr", "2 Chronicles", ["2 chr", "2ch", "second chronicles"]),
    ("Ezra", "Ezra", ["ezr"]),
    ("Neh", "Nehemiah", ["neh"]),
    ("Esth", "Esther", ["esth", "est"]),
    ("Job", "Job", []),
    ("Ps", "Psalms", ["ps", "psalm", "psa", "pss"]),
    ("Prov", "Proverbs", ["prov", "pr", "prv"]),
    ("Eccl", "Ecclesiastes", ["eccl", "ecc", "qoheleth"]),
    ("Song", "Song of Solomon", ["song", "songs", "song of songs", "canticles"]),
    ("Isa", "Isaiah", ["isa"]),
    ("Jer", "Jeremiah", ["jer"]),
    ("Lam", "Lamentations", ["lam"]),
    ("Ezek", "Ezekiel", ["ezek", "eze"]),
    ("Dan", "Daniel", ["dan", "dn"]),
    ("Hos", "Hosea", ["hos"]),
    ("Joel", "Joel", ["jl"]),
    ("Amos", "Amos", ["am"]),
    ("Obad", "Obadiah", ["obad", "ob"]),
    ("Jonah", "Jonah", ["jon"]),
    ("Mic", "Micah", ["mic"]),
    ("Nah", "Nahum", ["nah"]),
    ("Hab", "Habakkuk", ["hab"]),
    ("Zeph", "Zephaniah", ["zeph", "zep"]),
    ("Hag", "Haggai", ["hag"]),
    ("Zech", "Zechariah", ["zech", "zec"]),
    ("Mal", "Malachi", ["mal"]),
    ("Matt", "Matthew", ["matt", "mt", "mat"]),
    ("Mark", "Mark", ["mk", "mrk"]),
    ("Luke", "Luke", ["lk", "luk"]),
    ("John", "John", ["jn", "jhn"]),
    ("Acts", "Acts", ["act"]),
    ("Rom", "Romans", ["rom", "ro"]),
    ("1Cor", "1 Corinthians", ["1 cor", "1co", "first corinthians"]),
    ("2Cor", "2 Corinthians", ["2 cor", "2co", "second corinthians"]),
    ("Gal", "Galatians", ["gal", "ga"]),
    ("Eph", "Ephesians", ["eph"]),
    ("Phil", "Philippians", ["phil", "php"]),
    ("Col", "Colossians", ["col"]),
    ("1Thess", "1 Thessalonians", ["1 thess", "1th", "first thessalonians"]),
    ("2Thess", "2 Thessalonians", ["2 thess", "2th", "second thessalonians"]),
    ("1Tim", "1 Timothy", ["1 tim", "1ti", "first timothy"]),
    ("2Tim", "2 Timothy", ["2 tim", "2ti", "second timothy"]),
    ("Titus", "Titus", ["tit"]),
    ("Phlm", "Philemon", ["phm", "phlm"]),
    ("Heb", "Hebrews", ["heb"]),
    ("Jas", "James", ["jas", "jm"]),
    ("1Pet", "1 Peter", ["1 pet", "1pe", "first peter"]),
    ("2Pet", "2 Peter", ["2 pet", "2pe", "second peter"]),
    ("1John", "1 John", ["1 jn", "1jo", "first john"]),
    ("2John", "2 John", ["2 jn", "2jo", "second john"]),
    ("3John", "3 John", ["3 jn", "3jo", "third john"]),
    ("Jude", "Jude", ["jud"]),
    ("Rev", "Revelation", ["rev", "re", "revelations", "apocalypse"]),
]

BOOK_BY_ALIAS: Dict[str, Tuple[int, str, str]] = {}
for idx, (osis, name, aliases) in enumerate(BOOKS, start=1):
    BOOK_BY_ALIAS[name.casefold()] = (idx, osis, name)
    BOOK_BY_ALIAS[osis.casefold()] = (idx, osis, name)
    for alias in aliases:
        BOOK_BY_ALIAS[alias.casefold()] = (idx, osis, name)

_ROMAN_PREFIX = {"i": "1", "ii": "2", "iii": "3"}


def _normalize_book_phrase(s: str) -> str:
    s = s.strip().casefold().replace(".", " ")
    s = re.sub(r"\s+", " ", s).strip()
    m = re.match(r"^(iii|ii|i) (.+)$", s)
    if m:
        s = f"{_ROMAN_PREFIX[m.group(1)]} {m.group(2)}"
    # "1john" -> "1 john"
    s = re.sub(r"^([1-3])(?=[a-z]{3,})", r"\1 ", s)
    return s


def match_book(book_str: str) -> Optional[Tuple[int, str, str]]:
    """Resolve a name, OSIS code or alias to ``(canon_order, osis, name)``."""
    phrase = _normalize_book_phrase(book_str)
    hit = BOOK_BY_ALIAS.get(phrase)
    if hit is None:
        # "1co" style aliases are written without the space
        hit = BOOK_BY_ALIAS.get(phrase.replace(" ", "", 1)) if phrase[:1].isdigit() else None
    return hit


def canonical_name(book_str: str) -> Optional[str]:
    hit = match_book(book_str)
    return hit[2] if hit else None
