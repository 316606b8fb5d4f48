from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from booking_widget.application.utils.money import format_money
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.selection_state import SelectionState
from booking_widget.domain.entities.widget_config import WidgetConfig


def extra_multiplier(extra: Extra, selection: SelectionState) -> int:
    if extra.pricing == "per_person":
        return selection.adults + selection.children
    if extra.pricing == "per_adult":
        return selection.adults
    if extra.pricing == "per_child":
        return selection.children
    return 1


def selected_extras(selection: SelectionState, extras: Iterable[Extra]) -> list[Extra]:
    return [extra for extra in extras if extra.id in selection.extra_ids]


def compute_total(selection: SelectionState, extras: Iterable[Extra], config: WidgetConfig) -> Decimal:
    """
    Price of the current selection. Voucher bookings are pre-paid, so they always total 0.
    Counts below zero are treated as zero, and the total never goes below zero.
    """
    if config.voucher_mode:
        return Decimal("0")

    adults = max(0, selection.adults)
    children = max(0, selection.children)
    total = adults * config.adult_price + children * config.child_price
    for extra in selected_extras(selection, extras):
        total += extra.price * extra_multiplier(extra, selection)
    return max(Decimal("0"), total)


def format_total(amount: Decimal, config: WidgetConfig) -> str:
    return format_money(
        amount,
        currency_symbol=config.currency_symbol,
        decimal_separator=config.decimal_separator,
        thousands_separator=config.thousands_separator,
    )
