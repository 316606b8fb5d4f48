from __future__ import annotations

import logging

from booking_widget.application.ports.widget_view import WidgetViewPort
from booking_widget.domain.entities.slot import SlotOption


class MemoryWidgetView(WidgetViewPort):
    """Headless view that keeps the last rendered state, plus a history of navigations."""

    def __init__(self) -> None:
        self.slot_options: list[SlotOption] = []
        self.total_text: str = ""
        self.feedback_text: str = ""
        self.feedback_kind: str | None = None
        self.submit_enabled: bool = False
        self.navigations: list[str] = []
        self._logger = logging.getLogger(__name__)

    @property
    def selectable_options(self) -> list[SlotOption]:
        return [option for option in self.slot_options if not option.disabled]

    def render_slots(self, options: list[SlotOption]) -> None:
        self.slot_options = list(options)

    def render_total(self, text: str) -> None:
        self.total_text = text

    def show_feedback(self, text: str, kind: str) -> None:
        self.feedback_text = text
        self.feedback_kind = kind

    def clear_feedback(self) -> None:
        self.feedback_text = ""
        self.feedback_kind = None

    def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_enabled = enabled

    def navigate(self, url: str) -> None:
        self._logger.info("Navigating", extra={"url": url})
        self.navigations.append(url)
