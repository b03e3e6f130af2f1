"""
Title id classification and the one-line listing format.

A title id is split in two halves: the high word names the kind of title
(system module, disc game, channel, DLC, ...) and the low word is the
four-character game code, or the IOS number for system modules.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .entities import TitleRecord

CATEGORY_LABELS: Mapping[int, str] = MappingProxyType(
    {
        0x00000001: "SYSTEM ESSENTIAL",
        0x00000007: "vWII ESSENTIAL",
        0x00010000: "DISC-BASED GAME",
        0x00010001: "DOWNLOADED CHANNEL",
        0x00010002: "SYSTEM CHANNEL",
        0x00070002: "vWII SYSTEM CHANNEL",
        0x00010004: "GAME CHANNEL",
        0x00010005: "GAME DLC",
        0x00010008: "HIDDEN CHANNEL",
        0x00070008: "vWII HIDDEN",
    }
)
UNKNOWN_CATEGORY = "Error"
LABEL_WIDTH = 19
IOS_CODE_LIMIT = 255
PRINTABLE_RANGE = range(32, 128)


def split_title_id(title_id: int) -> Tuple[int, int]:
    return (title_id >> 32) & 0xFFFFFFFF, title_id & 0xFFFFFFFF


def category_label(category: int) -> str:
    return CATEGORY_LABELS.get(category, UNKNOWN_CATEGORY)


def category_hex(title_id: int) -> str:
    return f"{split_title_id(title_id)[0]:08X}"


def code_hex(title_id: int) -> str:
    return f"{split_title_id(title_id)[1]:08X}"


def code_string(code: int) -> str:
    """Render the low word as its four big-endian bytes, dotting anything unprintable."""

    raw = (code & 0xFFFFFFFF).to_bytes(4, "big")
    return "".join(chr(b) if b in PRINTABLE_RANGE else "." for b in raw)


def install_index(record: TitleRecord) -> int:
    return record.install_index


def human_name_suffix(code: int, lookup: Optional[Mapping[str, str]]) -> str:
    if lookup is None:
        return ""
    name = lookup.get(code_string(code))
    if name is not None:
        return f" - {name}"
    if code < IOS_CODE_LIMIT:
        # System modules (IOS, boot2, the system menu) carry a small number, not a game code.
        return f" - IOS {code}"
    return " - ????"


def format_line(
    record: TitleRecord,
    pretty: bool = False,
    lookup: Optional[Mapping[str, str]] = None,
) -> str:
    category, code = record.category, record.code
    body = (
        f"{category:08X}-{code:08X} "
        f"({code_string(code)}){human_name_suffix(code, lookup)}"
    )
    if pretty:
        return f"{install_index(record)}: {category_label(category):<{LABEL_WIDTH}}{body}"
    return f"{install_index(record)}: {body}"


def format_entries(
    records: Iterable[TitleRecord],
    pretty: bool = False,
    lookup: Optional[Mapping[str, str]] = None,
) -> Iterator[str]:
    for record in records:
        yield format_line(record, pretty, lookup)
