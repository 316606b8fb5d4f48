from __future__ import annotations

from abc import ABC, abstractmethod

from booking_widget.domain.entities.reservation import ReservationRequest
from booking_widget.domain.entities.slot import Slot


class BookingBackendPort(ABC):
    @abstractmethod
    async def query_slots(self, product_id: str, date: str) -> list[Slot]:
        """
        Fetch the bookable slots of a product on a date, in backend order.

        Raises:
            BackendUnavailableError: transport failure, HTTP error or malformed body
            BackendRejectedError: backend answered success=false
        """
        raise NotImplementedError

    @abstractmethod
    async def add_to_cart(self, request: ReservationRequest) -> str:
        """
        Reserve the occurrence and put it in the cart. Returns the cart URL.

        Raises:
            BackendUnavailableError: transport failure, HTTP error or malformed body
            ReservationRejectedError: backend refused, with its message when it sent one
        """
        raise NotImplementedError
