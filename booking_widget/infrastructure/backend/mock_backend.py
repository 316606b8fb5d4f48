from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from booking_widget.application.exceptions import ReservationRejectedError
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.domain.entities.reservation import ReservationRequest
from booking_widget.domain.entities.slot import Slot


@dataclass
class _Occurrence:
    id: str
    product_id: str
    date: str
    time: str
    capacity: int
    booked: int = 0

    @property
    def available(self) -> int:
        return max(0, self.capacity - self.booked)


class MockBookingBackend(BookingBackendPort):
    def __init__(self, cart_url: str = "/cart/", latency: float = 0.0) -> None:
        self._occurrences: dict[str, _Occurrence] = {}
        self._cart: list[ReservationRequest] = []
        self._cart_url = cart_url
        self._latency = latency
        self._logger = logging.getLogger(__name__)

    @property
    def cart(self) -> list[ReservationRequest]:
        return list(self._cart)

    def add_occurrence(self, product_id: str, date: str, time: str, capacity: int, booked: int = 0) -> str:
        occurrence_id = str(len(self._occurrences) + 1)
        self._occurrences[occurrence_id] = _Occurrence(
            id=occurrence_id,
            product_id=str(product_id),
            date=date,
            time=time,
            capacity=capacity,
            booked=booked,
        )
        return occurrence_id

    async def query_slots(self, product_id: str, date: str) -> list[Slot]:
        if self._latency:
            await asyncio.sleep(self._latency)
        rows = sorted(
            (o for o in self._occurrences.values() if o.product_id == str(product_id) and o.date == date),
            key=lambda o: o.time,
        )
        return [Slot(id=o.id, time=o.time, available=o.available, soldout=o.available <= 0) for o in rows]

    async def add_to_cart(self, request: ReservationRequest) -> str:
        if self._latency:
            await asyncio.sleep(self._latency)
        occurrence = self._occurrences.get(request.occurrence_id)
        if occurrence is None or occurrence.product_id != str(request.product_id):
            raise ReservationRejectedError("Slot not found.")

        quantity = max(1, request.adults + request.children)
        if occurrence.available < quantity:
            raise ReservationRejectedError(f"Not enough places left. Remaining: {occurrence.available}")

        occurrence.booked += quantity
        self._cart.append(request)
        self._logger.info(
            "Mock reservation added to cart",
            extra={"occurrence_id": occurrence.id, "quantity": quantity, "available": occurrence.available},
        )
        return self._cart_url
