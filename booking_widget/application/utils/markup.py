from __future__ import annotations

from collections.abc import Iterable, Mapping

from booking_widget.application.utils.money import parse_price
from booking_widget.core.config import Settings, settings as default_settings
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.widget_config import WidgetConfig

PRICING_MODES = {"per_order", "per_person", "per_adult", "per_child"}


def _flag(value: str | None, default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def config_from_markup(attributes: Mapping[str, str], settings: Settings | None = None) -> WidgetConfig:
    """
    Build the widget config from the root element's data attributes.

    Known attributes: data-product, data-price-adult, data-price-child, data-voucher ("1" = on),
    data-analytics, data-ajax-url, data-nonce. Endpoint and nonce fall back to settings;
    display formatting always comes from settings.
    """
    settings = settings or default_settings
    product_id = str(attributes.get("data-product") or "").strip()
    if not product_id:
        raise ValueError("widget markup has no data-product attribute")

    return WidgetConfig(
        product_id=product_id,
        adult_price=parse_price(attributes.get("data-price-adult")),
        child_price=parse_price(attributes.get("data-price-child")),
        voucher_mode=_flag(attributes.get("data-voucher")),
        analytics_enabled=_flag(attributes.get("data-analytics"), default=settings.ANALYTICS_ENABLED),
        ajax_url=str(attributes.get("data-ajax-url") or "").strip() or settings.AJAX_URL,
        nonce=str(attributes.get("data-nonce") or "").strip() or settings.AJAX_NONCE,
        currency_code=settings.CURRENCY_CODE,
        currency_symbol=settings.CURRENCY_SYMBOL,
        decimal_separator=settings.DECIMAL_SEPARATOR,
        thousands_separator=settings.THOUSANDS_SEPARATOR,
    )


def extras_from_markup(rows: Iterable[Mapping[str, str]]) -> list[Extra]:
    """Read the server-rendered extra rows (data-id, data-name, data-price, data-pricing)."""
    extras: list[Extra] = []
    for row in rows:
        extra_id = str(row.get("data-id") or "").strip()
        if not extra_id:
            continue
        pricing = str(row.get("data-pricing") or "per_order").strip()
        extras.append(
            Extra(
                id=extra_id,
                name=str(row.get("data-name") or extra_id),
                price=parse_price(row.get("data-price")),
                pricing=pricing if pricing in PRICING_MODES else "per_order",
            )
        )
    return extras
