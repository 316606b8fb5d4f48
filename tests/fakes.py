from __future__ import annotations

import asyncio
from typing import Any

from booking_widget.application.exceptions import BackendUnavailableError
from booking_widget.application.ports.analytics import AnalyticsSinkPort
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.domain.entities.reservation import ReservationRequest
from booking_widget.domain.entities.slot import Slot


class FailingSink(AnalyticsSinkPort):
    def append(self, event: dict[str, Any]) -> None:
        raise RuntimeError("dataLayer is gone")


class GatedBackend(BookingBackendPort):
    """Slot queries block until the test releases their date; reservations return a scripted outcome."""

    def __init__(self, slots_by_date: dict[str, list[Slot]] | None = None) -> None:
        self._slots_by_date = slots_by_date or {}
        self._gates: dict[str, asyncio.Event] = {}
        self.gated = False
        self.slot_queries: list[str] = []
        self.reservations: list[ReservationRequest] = []
        self.cart_url = "/cart"
        self.reservation_error: Exception | None = None
        self.reservation_gate: asyncio.Event | None = None

    def release(self, date: str) -> None:
        self._gate(date).set()

    def _gate(self, date: str) -> asyncio.Event:
        return self._gates.setdefault(date, asyncio.Event())

    async def query_slots(self, product_id: str, date: str) -> list[Slot]:
        self.slot_queries.append(date)
        if self.gated:
            await self._gate(date).wait()
        if date not in self._slots_by_date:
            raise BackendUnavailableError("no such date")
        return list(self._slots_by_date[date])

    async def add_to_cart(self, request: ReservationRequest) -> str:
        self.reservations.append(request)
        if self.reservation_gate is not None:
            await self.reservation_gate.wait()
        if self.reservation_error is not None:
            raise self.reservation_error
        return self.cart_url

