from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_CENTS = Decimal("0.01")


def parse_count(value: Any) -> int:
    """
    Read a participant count from user input.
    Missing, unparseable and negative values count as 0; "3 people" reads as 3.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(0, int(match.group(1)))


def parse_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


def parse_price(value: Any) -> Decimal:
    """Unit price from markup. Negative and unparseable prices count as 0."""
    return max(Decimal("0"), parse_decimal(value))


def format_money(
    amount: Decimal,
    currency_symbol: str = "€",
    decimal_separator: str = ",",
    thousands_separator: str = ".",
) -> str:
    """Two-decimal display, e.g. Decimal("1234.5") -> "€ 1.234,50"."""
    rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    whole, cents = f"{abs(rounded):.2f}".split(".")
    grouped = f"{int(whole):,}".replace(",", thousands_separator)
    return f"{currency_symbol} {sign}{grouped}{decimal_separator}{cents}"
