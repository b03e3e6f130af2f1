"""
Shared fixtures for the uid.sys tests.

Record files are synthesised with ``struct`` so the decoder is checked
against an independent encoding of the same layout.
"""
from __future__ import annotations

import struct
from pathlib import Path

import pytest


def pack_record(title_id: int, install_slot: int, reserved: int = 0) -> bytes:
    return struct.pack(">QHH", title_id, reserved, install_slot)


# ── A small dump resembling a real console ──────────────────────────────────

SAMPLE_ENTRIES = [
    (0x0000000100000002, 0x1000),  # system menu
    (0x0000000100000025, 0x1001),  # IOS37
    (0x0001000052535045, 0x1002),  # RSPE disc game
    (0x0001000148414345, 0x1003),  # HACE downloaded channel
    (0x00990000DEADBEEF, 0x1004),  # unknown category
]


@pytest.fixture
def sample_bytes() -> bytes:
    return b"".join(pack_record(tid, slot) for tid, slot in SAMPLE_ENTRIES)


@pytest.fixture
def uid_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    path = tmp_path / "uid.sys"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def title_db(tmp_path: Path) -> Path:
    path = tmp_path / "wiitdb.txt"
    path.write_text(
        "TITLES = https://www.gametdb.com\n"
        "RSPE = Wii Sports Resort\n"
        "HACE = Mii Channel\n",
        encoding="utf-8",
    )
    return path
