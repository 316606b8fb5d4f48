"""
Tests for reservation validation and submission.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import parse_qs

import httpx
import pytest

from booking_widget.application.exceptions import BackendUnavailableError, ReservationRejectedError
from booking_widget.application.use_cases.submit_reservation import SubmissionClient
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.selection_state import SelectionState
from booking_widget.infrastructure.backend.ajax_backend import AjaxBookingBackend
from booking_widget.infrastructure.backend.ajax_transport import AjaxTransport
from booking_widget.infrastructure.backend.mock_backend import MockBookingBackend

from fakes import GatedBackend

EXTRAS = [
    Extra(id="wine", name="Wine tasting", price=Decimal("5.00")),
    Extra(id="lunch", name="Lunch", price=Decimal("12.50")),
]


@pytest.mark.asyncio
async def test_no_slot_selected_blocks_without_request():
    backend = GatedBackend()
    client = SubmissionClient(backend, product_id="42")

    result = await client.submit_reservation(SelectionState(adults=2), EXTRAS)

    assert result.success is False
    assert result.error_code == "no_slot_selected"
    assert result.message == "select a slot"
    assert backend.reservations == []


@pytest.mark.asyncio
async def test_no_participants_blocks_without_request():
    backend = GatedBackend()
    client = SubmissionClient(backend, product_id="42")

    result = await client.submit_reservation(SelectionState(slot_id="7", adults=0, children=0), EXTRAS)

    assert result.error_code == "no_participants"
    assert result.message == "at least one participant required"
    assert backend.reservations == []


@pytest.mark.asyncio
async def test_slot_check_comes_before_participant_check():
    client = SubmissionClient(GatedBackend(), product_id="42")

    result = await client.submit_reservation(SelectionState(), EXTRAS)

    assert result.error_code == "no_slot_selected"


@pytest.mark.asyncio
async def test_gift_without_recipient_name_blocks_without_request():
    backend = GatedBackend()
    client = SubmissionClient(backend, product_id="42")
    selection = SelectionState(slot_id="7", adults=1, gift_enabled=True, gift_recipient_name="   ")

    result = await client.submit_reservation(selection, EXTRAS)

    assert result.error_code == "gift_recipient_missing"
    assert backend.reservations == []


@pytest.mark.asyncio
async def test_request_carries_denormalized_selected_extras():
    backend = GatedBackend()
    client = SubmissionClient(backend, product_id="42")
    selection = SelectionState(slot_id="7", adults=2, children=1, extra_ids=frozenset({"lunch"}))

    result = await client.submit_reservation(selection, EXTRAS)

    assert result.success is True
    assert result.cart_url == "/cart"
    request = backend.reservations[0]
    assert (request.product_id, request.occurrence_id, request.adults, request.children) == ("42", "7", 2, 1)
    assert [(e.name, e.price) for e in request.extras] == [("Lunch", Decimal("12.50"))]


@pytest.mark.asyncio
async def test_backend_message_is_surfaced():
    backend = GatedBackend()
    backend.reservation_error = ReservationRejectedError("full")
    client = SubmissionClient(backend, product_id="42")

    result = await client.submit_reservation(SelectionState(slot_id="7", adults=1), EXTRAS)

    assert result.success is False
    assert result.message == "full"
    assert result.error_code is None


@pytest.mark.asyncio
async def test_rejection_without_message_uses_generic_fallback():
    backend = GatedBackend()
    backend.reservation_error = ReservationRejectedError(None)
    client = SubmissionClient(backend, product_id="42", generic_error_message="something went wrong")

    result = await client.submit_reservation(SelectionState(slot_id="7", adults=1), EXTRAS)

    assert result.message == "something went wrong"


@pytest.mark.asyncio
async def test_transport_failure_uses_connection_message():
    backend = GatedBackend()
    backend.reservation_error = BackendUnavailableError("boom")
    client = SubmissionClient(backend, product_id="42", connection_error_message="connection lost")

    result = await client.submit_reservation(SelectionState(slot_id="7", adults=1), EXTRAS)

    assert result.success is False
    assert result.message == "connection lost"


@pytest.mark.asyncio
async def test_ajax_add_to_cart_form_fields_and_cart_url():
    """Test the add-to-cart POST body and the {success, data: {cart_url}} response."""
    seen: list[dict[str, list[str]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(parse_qs(request.content.decode(), keep_blank_values=True))
        return httpx.Response(200, json={"success": True, "data": {"cart_url": "/cart"}})

    transport = AjaxTransport(
        ajax_url="https://shop.test/wp-admin/admin-ajax.php",
        nonce="n0nce",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    client = SubmissionClient(AjaxBookingBackend(transport), product_id="42")
    selection = SelectionState(
        slot_id="7",
        adults=2,
        children=1,
        extra_ids=frozenset({"wine"}),
        gift_enabled=True,
        gift_recipient_name=" Ada ",
    )

    result = await client.submit_reservation(selection, EXTRAS)

    assert result.cart_url == "/cart"
    form = seen[0]
    assert form["action"] == ["wcefp_add_to_cart"]
    assert form["occurrence_id"] == ["7"]
    assert form["adults"] == ["2"]
    assert form["children"] == ["1"]
    assert form["extras[0][name]"] == ["Wine tasting"]
    assert form["extras[0][price]"] == ["5.00"]
    assert form["wcefp_gift_toggle"] == ["1"]
    assert form["gift_recipient_name"] == ["Ada"]


@pytest.mark.asyncio
async def test_ajax_failure_envelope_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "data": {"msg": "full"}})

    transport = AjaxTransport(
        ajax_url="https://shop.test/wp-admin/admin-ajax.php",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    client = SubmissionClient(AjaxBookingBackend(transport), product_id="42")

    result = await client.submit_reservation(SelectionState(slot_id="7", adults=1), EXTRAS)

    assert result.message == "full"


@pytest.mark.asyncio
async def test_mock_backend_enforces_capacity():
    backend = MockBookingBackend()
    occurrence_id = backend.add_occurrence("42", "2025-06-01", "10:00", capacity=2)
    client = SubmissionClient(backend, product_id="42")

    first = await client.submit_reservation(SelectionState(slot_id=occurrence_id, adults=2), EXTRAS)
    second = await client.submit_reservation(SelectionState(slot_id=occurrence_id, adults=1), EXTRAS)
    slots = await backend.query_slots("42", "2025-06-01")

    assert first.success is True
    assert second.success is False
    assert second.message == "Not enough places left. Remaining: 0"
    assert slots[0].soldout is True
