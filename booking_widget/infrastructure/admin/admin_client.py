from __future__ import annotations

import logging
from typing import Any

from booking_widget.application.exceptions import BackendUnavailableError
from booking_widget.core.config import settings
from booking_widget.domain.entities.admin_action_result import AdminActionResult
from booking_widget.infrastructure.backend.ajax_transport import AjaxTransport

ACTION_GET_CALENDAR = "wcefp_get_calendar"
ACTION_GET_BOOKINGS = "wcefp_get_bookings"
ACTION_TOGGLE_FEATURE = "wcefp_toggle_feature"
ACTION_RESET_INSTALLATION = "wcefp_reset_installation"


class AdminClient:
    """Dashboard triggers. Payloads are passed through untouched for the page to render."""

    def __init__(self, transport: AjaxTransport, generic_error_message: str | None = None) -> None:
        self._transport = transport
        self._generic_error_message = generic_error_message or settings.MSG_GENERIC_ERROR
        self._logger = logging.getLogger(__name__)

    async def fetch_calendar(self) -> Any:
        return await self._fetch(ACTION_GET_CALENDAR)

    async def fetch_bookings(self) -> Any:
        return await self._fetch(ACTION_GET_BOOKINGS)

    async def toggle_feature(self, feature: str, enabled: bool) -> AdminActionResult:
        result = await self._action(ACTION_TOGGLE_FEATURE, {"feature": feature, "enabled": "1" if enabled else "0"})
        self._logger.info(
            "Feature toggle", extra={"feature": feature, "enabled": enabled, "success": result.success}
        )
        return result

    async def reset_installation(self) -> AdminActionResult:
        result = await self._action(ACTION_RESET_INSTALLATION)
        if not result.success:
            return result
        return AdminActionResult(success=True, message=result.message, reload_required=True)

    async def _fetch(self, action: str) -> Any:
        """Raises BackendUnavailableError on transport failure, returns the raw envelope data otherwise."""
        envelope = await self._transport.post(action)
        if not envelope.success:
            raise BackendUnavailableError(envelope.error_message() or self._generic_error_message)
        return envelope.data

    async def _action(self, action: str, fields: dict[str, Any] | None = None) -> AdminActionResult:
        try:
            envelope = await self._transport.post(action, fields)
        except BackendUnavailableError:
            return AdminActionResult(success=False, message=self._generic_error_message)

        if envelope.success:
            message = envelope.data if isinstance(envelope.data, str) else envelope.error_message()
            return AdminActionResult(success=True, message=message)
        return AdminActionResult(success=False, message=envelope.error_message() or self._generic_error_message)
