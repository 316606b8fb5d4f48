from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ReservationExtra:
    name: str
    price: Decimal


@dataclass(frozen=True)
class ReservationRequest:
    product_id: str
    occurrence_id: str
    adults: int
    children: int
    extras: tuple[ReservationExtra, ...] = field(default_factory=tuple)
    gift_enabled: bool = False
    gift_recipient_name: str = ""
    gift_recipient_email: str = ""
    gift_message: str = ""
