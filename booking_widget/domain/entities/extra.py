from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Extra:
    id: str
    name: str
    price: Decimal
    pricing: str = "per_order"  # "per_order", "per_person", "per_adult", "per_child"
