"""Load configuration from .env file."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Walk up from this file to find .env at the repo root
_repo_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_repo_root / ".env")

# Empty means the table bundled with the package
STRUCTURE_PATH: str = os.environ.get("VERSE_KIT_STRUCTURE_PATH", "")

# The book picker shows this many suggestions
AUTOCOMPLETE_LIMIT: str = os.environ.get("VERSE_KIT_AUTOCOMPLETE_LIMIT", "5")

LOG_LEVEL: str = os.environ.get("VERSE_KIT_LOG_LEVEL", "WARNING")


def structure_path() -> Path | None:
    """Return the configured structure table path, if any."""
    if not STRUCTURE_PATH:
        return None
    return Path(STRUCTURE_PATH).expanduser()


def autocomplete_limit() -> int:
    """Return the number of book suggestions to show."""
    return int(AUTOCOMPLETE_LIMIT)


def validate() -> None:
    """Raise if configured values are unusable."""
    path = structure_path()
    if path is not None and not path.is_file():
        raise SystemExit(
            f"VERSE_KIT_STRUCTURE_PATH points to {path}, which is not a file. "
            "Unset it to use the bundled table."
        )
    if not AUTOCOMPLETE_LIMIT.isdecimal() or int(AUTOCOMPLETE_LIMIT) < 1:
        raise SystemExit(
            f"VERSE_KIT_AUTOCOMPLETE_LIMIT must be a positive integer, got {AUTOCOMPLETE_LIMIT!r}."
        )
