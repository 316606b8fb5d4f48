from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from booking_widget.application.dto.ajax_response import CartPayloadDTO, SlotsPayloadDTO
from booking_widget.application.exceptions import (
    BackendRejectedError,
    BackendUnavailableError,
    ReservationRejectedError,
)
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.domain.entities.reservation import ReservationRequest
from booking_widget.domain.entities.slot import Slot
from booking_widget.infrastructure.backend.ajax_transport import AjaxTransport

ACTION_PUBLIC_OCCURRENCES = "wcefp_public_occurrences"
ACTION_ADD_TO_CART = "wcefp_add_to_cart"


class AjaxBookingBackend(BookingBackendPort):
    def __init__(self, transport: AjaxTransport) -> None:
        self._transport = transport

    async def query_slots(self, product_id: str, date: str) -> list[Slot]:
        envelope = await self._transport.post(
            ACTION_PUBLIC_OCCURRENCES, {"product_id": product_id, "date": date}
        )
        if not envelope.success:
            raise BackendRejectedError(envelope.error_message())
        try:
            payload = SlotsPayloadDTO.model_validate(envelope.data or {})
        except ValidationError as e:
            raise BackendUnavailableError(f"{ACTION_PUBLIC_OCCURRENCES}: bad slot payload") from e
        return payload.to_entities()

    async def add_to_cart(self, request: ReservationRequest) -> str:
        envelope = await self._transport.post(ACTION_ADD_TO_CART, encode_reservation(request))
        if not envelope.success:
            raise ReservationRejectedError(envelope.error_message())
        try:
            payload = CartPayloadDTO.model_validate(envelope.data or {})
        except ValidationError as e:
            raise BackendUnavailableError(f"{ACTION_ADD_TO_CART}: response has no cart_url") from e
        return payload.cart_url


def encode_reservation(request: ReservationRequest) -> dict[str, Any]:
    """Flatten the reservation into form fields, extras as extras[i][name] / extras[i][price]."""
    fields: dict[str, Any] = {
        "product_id": request.product_id,
        "occurrence_id": request.occurrence_id,
        "adults": str(request.adults),
        "children": str(request.children),
        "wcefp_gift_toggle": "1" if request.gift_enabled else "0",
        "gift_recipient_name": request.gift_recipient_name,
        "gift_recipient_email": request.gift_recipient_email,
        "gift_message": request.gift_message,
    }
    for index, extra in enumerate(request.extras):
        fields[f"extras[{index}][name]"] = extra.name
        fields[f"extras[{index}][price]"] = str(extra.price)
    return fields
