from __future__ import annotations

import logging
from typing import Any

from booking_widget.application.ports.analytics import AnalyticsSinkPort


class DataLayerSink(AnalyticsSinkPort):
    """In-process stand-in for the page's dataLayer queue."""

    def __init__(self, queue: list[dict[str, Any]] | None = None) -> None:
        self._queue = queue if queue is not None else []
        self._logger = logging.getLogger(__name__)

    @property
    def events(self) -> list[dict[str, Any]]:
        return list(self._queue)

    def append(self, event: dict[str, Any]) -> None:
        self._queue.append(dict(event))
        self._logger.debug("Analytics event queued", extra={"event": event.get("event")})
