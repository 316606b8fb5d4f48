
class BookingValidationError(ValueError):
    """Raised before any network call when the current selection cannot be submitted."""

    code = "invalid_selection"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoSlotSelected(BookingValidationError):
    code = "no_slot_selected"


class NoParticipants(BookingValidationError):
    code = "no_participants"


class GiftRecipientMissing(BookingValidationError):
    code = "gift_recipient_missing"


class BackendUnavailableError(RuntimeError):
    """Raised when the booking backend cannot be reached (timeouts, network errors, HTTP errors, bad JSON)."""
    pass


class BackendRejectedError(RuntimeError):
    """Raised when the backend answers with success=false. `message` is None when it gave no reason."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "request rejected")
        self.message = message


class ReservationRejectedError(BackendRejectedError):
    """The add-to-cart action was refused (slot full, slot gone, bad data)."""
    pass
