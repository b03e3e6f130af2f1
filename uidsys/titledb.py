"""
Loader for GameTDB-style title databases (``wiitdb.txt``).

Every non-blank line reads ``KEY = VALUE`` where KEY is the printable game
code shown in the listing (``RSPE``, not ``52535045``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

SEPARATOR = " = "


class MalformedDatabaseLine(ValueError):
    def __init__(self, line_no: int, line: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no}: expected 'KEY{SEPARATOR}VALUE', got {line!r}")


def parse_title_db(lines: Iterable[str]) -> Dict[str, str]:
    titles: Dict[str, str] = {}
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        key, sep, value = line.partition(SEPARATOR)
        if not sep:
            raise MalformedDatabaseLine(line_no, line)
        titles[key] = value
    return titles


def load_title_db(path: Path) -> Dict[str, str]:
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_title_db(text.splitlines())
