from __future__ import annotations

from dataclasses import dataclass

INSTALL_SLOT_BASE = 4095


@dataclass(frozen=True)
class TitleRecord:
    title_id: int
    install_slot: int

    @property
    def category(self) -> int:
        return (self.title_id >> 32) & 0xFFFFFFFF

    @property
    def code(self) -> int:
        return self.title_id & 0xFFFFFFFF

    @property
    def install_index(self) -> int:
        # Slots 0-4094 are reserved for the system, so this can go negative.
        return self.install_slot - INSTALL_SLOT_BASE
