from __future__ import annotations

import logging

from booking_widget.application.exceptions import BackendRejectedError, BackendUnavailableError
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.domain.entities.slot import Slot, SlotOption


class AvailabilityClient:
    def __init__(self, backend: BookingBackendPort, no_slots_label: str = "no slots available") -> None:
        self._backend = backend
        self._no_slots_label = no_slots_label
        self._logger = logging.getLogger(__name__)

    async def query_availability(self, product_id: str, date: str) -> list[Slot]:
        """
        Slots of the product on `date`, in backend order.
        An empty date makes no call. Failures soft-fail to an empty list.
        """
        if not date:
            return []
        try:
            slots = await self._backend.query_slots(product_id, date)
        except (BackendUnavailableError, BackendRejectedError) as e:
            self._logger.warning(
                "Slot query failed, showing no slots",
                extra={"product_id": product_id, "date": date, "error": str(e)},
            )
            return []
        self._logger.info(
            "Slots loaded", extra={"product_id": product_id, "date": date, "slot_count": len(slots)}
        )
        return slots

    def render_slot_options(self, slots: list[Slot]) -> list[SlotOption]:
        if not slots:
            return [SlotOption(value="", label=self._no_slots_label, disabled=True)]
        return [self._slot_option(slot) for slot in slots]

    @staticmethod
    def _slot_option(slot: Slot) -> SlotOption:
        if slot.soldout:
            return SlotOption(value=slot.id, label=f"{slot.time} (sold-out)", disabled=True)
        return SlotOption(value=slot.id, label=f"{slot.time} ({slot.available} posti)")
