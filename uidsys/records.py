"""
Decoder for the Wii ``uid.sys`` title table.

The file is a bare array of 12-byte big-endian records with no header:

    0x00: u64 title id   (high u32 = category, low u32 = game/app code)
    0x08: u16 reserved   (always zero in observed dumps)
    0x0A: u16 install slot

Anything that is not a whole number of records is rejected before a single
record is produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

import numpy as np

from .entities import TitleRecord

RECORD_SIZE = 12
RECORD_DTYPE = np.dtype(
    [
        ("title_id", ">u8"),
        ("reserved", ">u2"),
        ("install_slot", ">u2"),
    ]
)


class MalformedRecordLength(ValueError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"File format error: {length} bytes is not a multiple of the "
            f"{RECORD_SIZE}-byte record size ({length % RECORD_SIZE} trailing bytes)"
        )


def _record_table(buffer: bytes) -> np.ndarray:
    if len(buffer) % RECORD_SIZE:
        raise MalformedRecordLength(len(buffer))
    if not buffer:
        return np.empty(0, dtype=RECORD_DTYPE)
    return np.frombuffer(buffer, dtype=RECORD_DTYPE)


def iter_records(buffer: bytes) -> Iterator[TitleRecord]:
    """Yield records in file order. The length check fires on the first ``next()``."""

    table = _record_table(buffer)
    for title_id, install_slot in zip(table["title_id"].tolist(), table["install_slot"].tolist()):
        yield TitleRecord(title_id=title_id, install_slot=install_slot)


def decode(buffer: bytes) -> List[TitleRecord]:
    return list(iter_records(buffer))


def read_uid_file(path: Path) -> List[TitleRecord]:
    """
    Read and decode a whole ``uid.sys`` dump. ``FileNotFoundError`` and other
    ``OSError``s from the read are left for the caller to report.
    """

    return decode(Path(path).read_bytes())
