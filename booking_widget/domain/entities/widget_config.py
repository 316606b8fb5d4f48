from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WidgetConfig:
    product_id: str
    adult_price: Decimal = Decimal("0")
    child_price: Decimal = Decimal("0")
    voucher_mode: bool = False
    analytics_enabled: bool = False
    ajax_url: str | None = None
    nonce: str = ""
    currency_code: str = "EUR"  # reported with analytics events
    # display formatting for the total
    currency_symbol: str = "€"
    decimal_separator: str = ","
    thousands_separator: str = "."
