"""Tests for the verse_ref command-line script."""

import json
import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SCRIPT = REPO_ROOT / "scripts" / "verse_ref.py"


def run(*args, **overrides):
    env = dict(os.environ)
    env.update(
        VERSE_KIT_STRUCTURE_PATH="",
        VERSE_KIT_AUTOCOMPLETE_LIMIT="5",
        VERSE_KIT_LOG_LEVEL="WARNING",
    )
    env.update(overrides)
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env=env,
    )


def error_of(proc):
    return json.loads(proc.stderr.strip().splitlines()[-1])


class TestValidateCommand:
    def test_valid_selection_prints_record(self):
        """A valid selection prints its record with the canonical reference."""
        proc = run("validate", "matthew", "12", "8", "10")
        assert proc.returncode == 0, proc.stderr
        record = json.loads(proc.stdout)
        assert record["book"] == "Matthew"
        assert record["reference"] == "Matthew 12:8-10"

    def test_end_defaults_to_start(self):
        """Omitting the end verse selects a single verse."""
        proc = run("validate", "John", "3", "16")
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout)["reference"] == "John 3:16"

    def test_invalid_chapter_is_json_error(self):
        """Rejected selections print a JSON error to stderr and exit 1."""
        proc = run("validate", "Matthew", "29", "1")
        assert proc.returncode == 1
        assert proc.stdout == ""
        assert error_of(proc)["error"] == "invalid_chapter"

    def test_unknown_book(self):
        """Misspelled books report unknown_book."""
        proc = run("validate", "Mathew", "1", "1")
        assert proc.returncode == 1
        assert error_of(proc)["error"] == "unknown_book"

    def test_missing_arguments_is_usage_error(self):
        """argparse rejects incomplete commands with exit code 2."""
        proc = run("validate", "Matthew")
        assert proc.returncode == 2


class TestParseCommand:
    def test_alias_reference(self):
        """Free-text references resolve aliases."""
        proc = run("parse", "Jn 3:16-18")
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout)["reference"] == "John 3:16-18"

    def test_malformed_reference(self):
        """Text that is not a reference reports malformed_reference."""
        proc = run("parse", "John 3")
        assert proc.returncode == 1
        assert error_of(proc)["error"] == "malformed_reference"


class TestOverlapsCommand:
    def test_shared_verse(self):
        """Ranges sharing a verse overlap."""
        proc = run("overlaps", "John 3:16-18", "jn 3:18-20")
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout) == {"a": "John 3:16-18", "b": "John 3:18-20", "overlaps": True}

    def test_bad_reference_fails(self):
        """An invalid reference stops the comparison."""
        proc = run("overlaps", "John 3:16", "John 99:1")
        assert proc.returncode == 1
        assert error_of(proc)["error"] == "invalid_chapter"


class TestBooksCommand:
    def test_suggestions(self):
        """Suggestions put the exact match first."""
        proc = run("books", "john")
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout) == ["John", "1 John", "2 John", "3 John"]

    def test_limit_flag(self):
        """--limit overrides the configured limit."""
        proc = run("books", "john", "--limit", "2")
        assert json.loads(proc.stdout) == ["John", "1 John"]

    def test_configured_limit(self):
        """The limit falls back to VERSE_KIT_AUTOCOMPLETE_LIMIT."""
        proc = run("books", "john", VERSE_KIT_AUTOCOMPLETE_LIMIT="1")
        assert json.loads(proc.stdout) == ["John"]

    def test_bad_config_exits(self):
        """An unusable config value exits non-zero naming the variable."""
        proc = run("books", "john", VERSE_KIT_AUTOCOMPLETE_LIMIT="five")
        assert proc.returncode != 0
        assert "VERSE_KIT_AUTOCOMPLETE_LIMIT" in proc.stderr
