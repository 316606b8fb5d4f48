"""
Tests for the dashboard ajax triggers.
"""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from booking_widget.application.exceptions import BackendUnavailableError
from booking_widget.infrastructure.admin.admin_client import AdminClient
from booking_widget.infrastructure.backend.ajax_transport import AjaxTransport


def _admin(handler) -> AdminClient:
    transport = AjaxTransport(
        ajax_url="https://shop.test/wp-admin/admin-ajax.php",
        nonce="admin-nonce",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return AdminClient(transport, generic_error_message="request failed")


@pytest.mark.asyncio
async def test_fetch_calendar_returns_payload_verbatim():
    payload = {"events": [{"id": 1, "title": "Tour", "start": "2025-06-01T10:00"}]}

    def handler(request: httpx.Request) -> httpx.Response:
        assert parse_qs(request.content.decode())["action"] == ["wcefp_get_calendar"]
        return httpx.Response(200, json={"success": True, "data": payload})

    assert await _admin(handler).fetch_calendar() == payload


@pytest.mark.asyncio
async def test_fetch_bookings_raises_on_failure_envelope():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "data": "forbidden"})

    with pytest.raises(BackendUnavailableError):
        await _admin(handler).fetch_bookings()


@pytest.mark.asyncio
async def test_toggle_feature_sends_key_and_flag():
    seen: list[dict[str, list[str]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(parse_qs(request.content.decode()))
        return httpx.Response(200, json={"success": True, "data": None})

    result = await _admin(handler).toggle_feature("gift_vouchers", False)

    assert result.success is True
    assert seen[0]["action"] == ["wcefp_toggle_feature"]
    assert seen[0]["feature"] == ["gift_vouchers"]
    assert seen[0]["enabled"] == ["0"]
    assert seen[0]["nonce"] == ["admin-nonce"]


@pytest.mark.asyncio
async def test_toggle_feature_failure_uses_backend_message_or_fallback():
    responses = iter(
        [
            httpx.Response(200, json={"success": False, "data": "not allowed"}),
            httpx.Response(200, json={"success": False}),
        ]
    )
    client = _admin(lambda request: next(responses))

    first = await client.toggle_feature("reviews", True)
    second = await client.toggle_feature("reviews", True)

    assert (first.success, first.message) == (False, "not allowed")
    assert (second.success, second.message) == (False, "request failed")


@pytest.mark.asyncio
async def test_reset_installation_requires_reload_on_success():
    client = _admin(lambda request: httpx.Response(200, json={"success": True, "data": "reset done"}))

    result = await client.reset_installation()

    assert result.success is True
    assert result.reload_required is True
    assert result.message == "reset done"


@pytest.mark.asyncio
async def test_reset_installation_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    result = await _admin(handler).reset_installation()

    assert result.success is False
    assert result.reload_required is False
    assert result.message == "request failed"
