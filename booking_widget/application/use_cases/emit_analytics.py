from __future__ import annotations

import logging
from typing import Any

from booking_widget.application.ports.analytics import AnalyticsSinkPort


class AnalyticsEmitter:
    """Fire-and-forget push to the analytics queue. Never raises."""

    def __init__(self, sink: AnalyticsSinkPort | None) -> None:
        self._sink = sink
        self._logger = logging.getLogger(__name__)

    def emit(self, event: dict[str, Any]) -> None:
        if self._sink is None:
            return
        try:
            self._sink.append(event)
        except Exception as e:
            self._logger.warning(
                "Analytics sink failed", extra={"event": event.get("event"), "error": str(e)}
            )
