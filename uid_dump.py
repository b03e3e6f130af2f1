#!/usr/bin/env python3
"""
List the titles recorded in a Wii ``uid.sys`` file.

Usage:
    python uid_dump.py uid.sys
    python uid_dump.py uid.sys --decode-prefix --title-db wiitdb.txt

Exit codes:
    0 -> success
    1 -> record file missing, unreadable, or not a whole number of records
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from uidsys import __version__
from uidsys.records import MalformedRecordLength, read_uid_file
from uidsys.titledb import MalformedDatabaseLine, load_title_db
from uidsys.titles import format_entries


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decodes a Wii's uid.sys file.")
    parser.add_argument("uid_file", type=Path, help="Path to the uid.sys dump")
    parser.add_argument(
        "-d",
        "--decode-prefix",
        action="store_true",
        help="Print the type of a particular title according to its prefix",
    )
    parser.add_argument(
        "-t",
        "--title-db",
        type=Path,
        help="Path to a Wii Title Database text file. If provided, the name of each title will be printed if known.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _load_lookup(path: Optional[Path]) -> Optional[Dict[str, str]]:
    if path is None:
        return None
    try:
        return load_title_db(path)
    except (OSError, UnicodeDecodeError, MalformedDatabaseLine) as exc:
        print(f"[warn] error while reading title database: {exc}", file=sys.stderr)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        records = read_uid_file(args.uid_file)
    except FileNotFoundError:
        print(f'[error] "{args.uid_file}": File not found', file=sys.stderr)
        return 1
    except OSError as exc:
        print(f'[error] "{args.uid_file}": Error opening file ({exc.strerror or exc})', file=sys.stderr)
        return 1
    except MalformedRecordLength as exc:
        print(f'[error] "{args.uid_file}": {exc}', file=sys.stderr)
        return 1

    lookup = _load_lookup(args.title_db)
    for line in format_entries(records, args.decode_prefix, lookup):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
