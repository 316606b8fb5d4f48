from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Slot:
    id: str
    time: str
    available: int = 0
    soldout: bool = False


@dataclass(frozen=True)
class SlotOption:
    """One rendered entry of the slot list. The placeholder entry has an empty value."""

    value: str
    label: str
    disabled: bool = False
