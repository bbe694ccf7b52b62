#!/usr/bin/env python3
"""Validate, format and compare Bible verse references from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

# Auto-detect venv and re-exec if needed
_script_dir = os.path.dirname(os.path.abspath(__file__))
_repo_root = os.path.dirname(_script_dir)
_venv_python = os.path.join(_repo_root, ".venv", "bin", "python3")
if os.path.exists(_venv_python) and sys.executable != _venv_python:
    os.execv(_venv_python, [_venv_python] + sys.argv)

sys.path.insert(0, os.path.join(_repo_root, "src"))

from verse_kit import config  # noqa: E402
from verse_kit.ranges import format_range, overlaps  # noqa: E402
from verse_kit.records import to_record  # noqa: E402
from verse_kit.structure import default_table  # noqa: E402
from verse_kit.validation import ValidationResult, parse_reference, validate  # noqa: E402


def _emit(result: ValidationResult) -> int:
    if not result.ok:
        print(json.dumps({"error": result.error.code, "message": str(result.error)}), file=sys.stderr)
        return 1
    print(json.dumps(to_record(result.value), indent=2))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    end = args.end if args.end is not None else args.start
    return _emit(validate(args.book, args.chapter, args.start, end))


def cmd_parse(args: argparse.Namespace) -> int:
    return _emit(parse_reference(args.reference))


def cmd_overlaps(args: argparse.Namespace) -> int:
    parsed = [parse_reference(ref) for ref in (args.first, args.second)]
    for result in parsed:
        if not result.ok:
            return _emit(result)
    a, b = (r.value for r in parsed)
    print(json.dumps({"a": format_range(a), "b": format_range(b), "overlaps": overlaps(a, b)}, indent=2))
    return 0


def cmd_books(args: argparse.Namespace) -> int:
    limit = args.limit if args.limit is not None else config.autocomplete_limit()
    print(json.dumps(default_table().search_books(args.query, limit=limit), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Bible verse reference tools")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="Validate a book/chapter/verse selection")
    p.add_argument("book", help="Book name, any casing, e.g. 'matthew'")
    p.add_argument("chapter", type=int)
    p.add_argument("start", type=int, help="First verse")
    p.add_argument("end", type=int, nargs="?", help="Last verse (defaults to first)")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("parse", help="Parse a free-text reference, e.g. 'Jn 3:16-18'")
    p.add_argument("reference")
    p.set_defaults(func=cmd_parse)

    p = sub.add_parser("overlaps", help="Check whether two references share a verse")
    p.add_argument("first")
    p.add_argument("second")
    p.set_defaults(func=cmd_overlaps)

    p = sub.add_parser("books", help="Autocomplete book names")
    p.add_argument("query")
    p.add_argument("--limit", type=int, default=None, help="Max suggestions (default from config)")
    p.set_defaults(func=cmd_books)

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    config.validate()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
