from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SelectionState:
    date: str = ""
    slot_id: str = ""  # always reset when date changes
    adults: int = 0
    children: int = 0
    extra_ids: frozenset[str] = field(default_factory=frozenset)
    gift_enabled: bool = False
    gift_recipient_name: str = ""
    gift_recipient_email: str = ""
    gift_message: str = ""

    @property
    def participants(self) -> int:
        return self.adults + self.children
