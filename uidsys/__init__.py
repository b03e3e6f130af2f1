"""
Decoding helpers for the Wii ``uid.sys`` installed-title table.
"""

from .entities import INSTALL_SLOT_BASE, TitleRecord
from .records import RECORD_DTYPE, RECORD_SIZE, MalformedRecordLength, decode, iter_records, read_uid_file
from .titledb import MalformedDatabaseLine, load_title_db, parse_title_db
from .titles import (
    CATEGORY_LABELS,
    UNKNOWN_CATEGORY,
    category_hex,
    category_label,
    code_hex,
    code_string,
    format_entries,
    format_line,
    human_name_suffix,
    install_index,
    split_title_id,
)

__version__ = "0.1.0"

__all__ = [
    "INSTALL_SLOT_BASE",
    "TitleRecord",
    "RECORD_DTYPE",
    "RECORD_SIZE",
    "MalformedRecordLength",
    "decode",
    "iter_records",
    "read_uid_file",
    "MalformedDatabaseLine",
    "load_title_db",
    "parse_title_db",
    "CATEGORY_LABELS",
    "UNKNOWN_CATEGORY",
    "category_hex",
    "category_label",
    "code_hex",
    "code_string",
    "format_entries",
    "format_line",
    "human_name_suffix",
    "install_index",
    "split_title_id",
]
