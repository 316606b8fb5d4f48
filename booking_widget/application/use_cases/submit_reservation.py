from __future__ import annotations

import logging
from collections.abc import Iterable

from booking_widget.application.exceptions import (
    BackendUnavailableError,
    BookingValidationError,
    GiftRecipientMissing,
    NoParticipants,
    NoSlotSelected,
    ReservationRejectedError,
)
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.application.use_cases.pricing import selected_extras
from booking_widget.core.config import settings
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.reservation import ReservationExtra, ReservationRequest
from booking_widget.domain.entities.selection_state import SelectionState
from booking_widget.domain.entities.submission_result import SubmissionResult


class SubmissionClient:
    def __init__(
        self,
        backend: BookingBackendPort,
        product_id: str,
        select_slot_message: str | None = None,
        no_participants_message: str | None = None,
        gift_recipient_message: str | None = None,
        generic_error_message: str | None = None,
        connection_error_message: str | None = None,
    ) -> None:
        self._backend = backend
        self._product_id = product_id
        self._select_slot_message = select_slot_message or settings.MSG_SELECT_SLOT
        self._no_participants_message = no_participants_message or settings.MSG_NO_PARTICIPANTS
        self._gift_recipient_message = gift_recipient_message or settings.MSG_GIFT_RECIPIENT_MISSING
        self._generic_error_message = generic_error_message or settings.MSG_GENERIC_ERROR
        self._connection_error_message = connection_error_message or settings.MSG_CONNECTION_ERROR
        self._logger = logging.getLogger(__name__)

    def validate(self, selection: SelectionState) -> None:
        """Raise the first BookingValidationError that applies, in display priority order."""
        if not selection.slot_id:
            raise NoSlotSelected(self._select_slot_message)
        if selection.adults + selection.children <= 0:
            raise NoParticipants(self._no_participants_message)
        if selection.gift_enabled and not selection.gift_recipient_name.strip():
            raise GiftRecipientMissing(self._gift_recipient_message)

    def build_request(self, selection: SelectionState, extras: Iterable[Extra]) -> ReservationRequest:
        # extras are sent with name and price so the backend need not look them up
        return ReservationRequest(
            product_id=self._product_id,
            occurrence_id=selection.slot_id,
            adults=selection.adults,
            children=selection.children,
            extras=tuple(
                ReservationExtra(name=extra.name, price=extra.price)
                for extra in selected_extras(selection, extras)
            ),
            gift_enabled=selection.gift_enabled,
            gift_recipient_name=selection.gift_recipient_name.strip() if selection.gift_enabled else "",
            gift_recipient_email=selection.gift_recipient_email.strip() if selection.gift_enabled else "",
            gift_message=selection.gift_message.strip() if selection.gift_enabled else "",
        )

    async def submit_reservation(self, selection: SelectionState, extras: Iterable[Extra] = ()) -> SubmissionResult:
        try:
            self.validate(selection)
        except BookingValidationError as e:
            self._logger.info("Submission blocked", extra={"reason": e.code})
            return SubmissionResult.failed(e.message, error_code=e.code)

        request = self.build_request(selection, extras)
        try:
            cart_url = await self._backend.add_to_cart(request)
        except ReservationRejectedError as e:
            self._logger.warning(
                "Reservation rejected",
                extra={"product_id": self._product_id, "occurrence_id": request.occurrence_id, "reason": e.message},
            )
            return SubmissionResult.failed(e.message or self._generic_error_message)
        except BackendUnavailableError as e:
            self._logger.error(
                "Reservation request failed",
                extra={"product_id": self._product_id, "occurrence_id": request.occurrence_id, "error": str(e)},
            )
            return SubmissionResult.failed(self._connection_error_message)

        self._logger.info(
            "Reservation added to cart",
            extra={"product_id": self._product_id, "occurrence_id": request.occurrence_id},
        )
        return SubmissionResult.ok(cart_url)
