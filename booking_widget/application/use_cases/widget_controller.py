from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal
from typing import Any

from booking_widget.application.ports.analytics import AnalyticsSinkPort
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.application.ports.widget_view import WidgetViewPort
from booking_widget.application.use_cases.emit_analytics import AnalyticsEmitter
from booking_widget.application.use_cases.pricing import compute_total, format_total, selected_extras
from booking_widget.application.use_cases.query_availability import AvailabilityClient
from booking_widget.application.use_cases.submit_reservation import SubmissionClient
from booking_widget.application.utils.money import parse_count
from booking_widget.core.config import settings
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.selection_state import SelectionState
from booking_widget.domain.entities.slot import Slot
from booking_widget.domain.entities.submission_result import SubmissionResult
from booking_widget.domain.entities.widget_config import WidgetConfig


class WidgetController:
    """
    State and event handlers of one booking widget.

    Each handler replaces the SelectionState and re-renders what depends on it.
    Slot queries are tagged with an increasing sequence number; a response is applied
    only if no newer query was issued meanwhile.
    """

    def __init__(
        self,
        config: WidgetConfig,
        extras: Iterable[Extra],
        view: WidgetViewPort,
        backend: BookingBackendPort,
        analytics_sink: AnalyticsSinkPort | None = None,
        availability: AvailabilityClient | None = None,
        submission: SubmissionClient | None = None,
        success_message: str | None = None,
        error_message: str | None = None,
    ) -> None:
        self._config = config
        self._extras = {extra.id: extra for extra in extras}
        self._view = view
        self._availability = availability or AvailabilityClient(backend, no_slots_label=settings.MSG_NO_SLOTS)
        self._submission = submission or SubmissionClient(backend, product_id=config.product_id)
        self._analytics = AnalyticsEmitter(analytics_sink)
        self._success_message = success_message or settings.MSG_ADDED_TO_CART
        self._error_message = error_message or settings.MSG_GENERIC_ERROR
        self._logger = logging.getLogger(__name__)

        self._selection = SelectionState()
        self._slots: list[Slot] = []
        self._query_seq = 0
        self._submitting = False

        self._render_total()
        self._view.set_submit_enabled(True)

    @property
    def config(self) -> WidgetConfig:
        return self._config

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def slots(self) -> list[Slot]:
        return list(self._slots)

    @property
    def extras(self) -> list[Extra]:
        return list(self._extras.values())

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def total(self) -> Decimal:
        return compute_total(self._selection, self._extras.values(), self._config)

    async def on_date_change(self, date: str) -> None:
        self._query_seq += 1
        seq = self._query_seq
        date = (date or "").strip()

        # slots belong to one date: drop the selection and the stale list before querying
        self._selection = replace(self._selection, date=date, slot_id="")
        self._slots = []
        self._view.render_slots([])
        if not date:
            return

        slots = await self._availability.query_availability(self._config.product_id, date)
        if seq != self._query_seq:
            self._logger.debug(
                "Discarding stale slot response",
                extra={"date": date, "seq": seq, "latest_seq": self._query_seq},
            )
            return

        self._slots = slots
        self._view.render_slots(self._availability.render_slot_options(slots))

    def on_slot_change(self, slot_id: str) -> None:
        slot_id = (slot_id or "").strip()
        selectable = {slot.id for slot in self._slots if not slot.soldout}
        if slot_id and slot_id not in selectable:
            self._logger.warning("Ignoring unknown or sold-out slot", extra={"slot_id": slot_id})
            slot_id = ""
        self._selection = replace(self._selection, slot_id=slot_id)

    def on_adults_input(self, value: Any) -> None:
        self._selection = replace(self._selection, adults=parse_count(value))
        self._render_total()

    def on_children_input(self, value: Any) -> None:
        self._selection = replace(self._selection, children=parse_count(value))
        self._render_total()

    def on_extra_toggle(self, extra_id: str, checked: bool) -> None:
        extra = self._extras.get(extra_id)
        if extra is None:
            self._logger.warning("Ignoring unknown extra", extra={"extra_id": extra_id})
            return

        extra_ids = set(self._selection.extra_ids)
        if checked:
            extra_ids.add(extra_id)
        else:
            extra_ids.discard(extra_id)
        self._selection = replace(self._selection, extra_ids=frozenset(extra_ids))
        self._render_total()

        if self._config.analytics_enabled:
            self._analytics.emit(
                {
                    "event": "extra_selected",
                    "item_id": self._config.product_id,
                    "extra": extra.name,
                    "checked": bool(checked),
                }
            )

    def on_gift_toggle(self, enabled: bool) -> None:
        self._selection = replace(self._selection, gift_enabled=bool(enabled))

    def on_gift_details(self, name: str = "", email: str = "", message: str = "") -> None:
        self._selection = replace(
            self._selection,
            gift_recipient_name=name or "",
            gift_recipient_email=email or "",
            gift_message=message or "",
        )

    async def on_submit(self) -> SubmissionResult | None:
        """Returns None when a submission is already in flight."""
        self._view.clear_feedback()
        if self._submitting:
            self._logger.info("Submit ignored, request already in flight")
            return None

        snapshot = self._selection
        self._submitting = True
        self._view.set_submit_enabled(False)
        try:
            result = await self._submission.submit_reservation(snapshot, self._extras.values())
        except Exception as e:
            self._logger.exception(
                "Unexpected error during submission", extra={"product_id": self._config.product_id, "error": str(e)}
            )
            result = SubmissionResult.failed(self._error_message)
        finally:
            self._submitting = False

        if not result.success:
            self._view.show_feedback(result.message or "", "error")
            self._view.set_submit_enabled(True)
            return result

        self._view.show_feedback(self._success_message, "success")
        if self._config.analytics_enabled:
            self._emit_checkout_events(snapshot)
        self._view.navigate(result.cart_url or "")
        return result

    def _emit_checkout_events(self, snapshot: SelectionState) -> None:
        value = float(compute_total(snapshot, self._extras.values(), self._config))
        item = {
            "item_id": self._config.product_id,
            "item_category": "Experience",
            "quantity": snapshot.participants,
            "price": value,
        }
        ecommerce = {"currency": self._config.currency_code, "value": value, "items": [item]}
        self._analytics.emit(
            {
                "event": "begin_checkout",
                "ecommerce": ecommerce,
                "booking_type": "experience",
                "adults": snapshot.adults,
                "children": snapshot.children,
                "selected_date": snapshot.date,
                "selected_slot": snapshot.slot_id,
                "extras": [extra.name for extra in selected_extras(snapshot, self._extras.values())],
            }
        )
        self._analytics.emit({"event": "add_to_cart", "ecommerce": ecommerce})

    def _render_total(self) -> None:
        self._view.render_total(format_total(self.total(), self._config))
