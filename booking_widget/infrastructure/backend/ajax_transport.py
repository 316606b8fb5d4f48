from __future__ import annotations

import logging
from typing import Any

import httpx

from booking_widget.application.dto.ajax_response import AjaxEnvelopeDTO
from booking_widget.application.exceptions import BackendUnavailableError
from booking_widget.core.config import settings


class AjaxTransport:
    """Form-encoded POST to the site's ajax endpoint, carrying the action id and nonce."""

    def __init__(
        self,
        ajax_url: str | None = None,
        nonce: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._ajax_url = ajax_url or settings.AJAX_URL
        self._nonce = nonce if nonce is not None else settings.AJAX_NONCE
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.REQUEST_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._ajax_url:
            raise ValueError("AJAX_URL is required for the ajax booking backend")

    async def post(self, action: str, fields: dict[str, Any] | None = None) -> AjaxEnvelopeDTO:
        data = {"action": action, "nonce": self._nonce, **(fields or {})}
        try:
            response = await self._client.post(self._ajax_url, data=data)
            response.raise_for_status()
            return AjaxEnvelopeDTO.model_validate(response.json())
        except httpx.HTTPError as e:
            self._logger.error("Ajax request failed", extra={"action": action, "error": str(e)})
            raise BackendUnavailableError(f"{action}: {e}") from e
        except ValueError as e:
            # invalid JSON or an envelope pydantic rejects
            self._logger.error("Malformed ajax response", extra={"action": action, "error": str(e)})
            raise BackendUnavailableError(f"{action}: malformed response") from e

    async def aclose(self) -> None:
        await self._client.aclose()
