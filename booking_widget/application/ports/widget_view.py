from __future__ import annotations

from abc import ABC, abstractmethod

from booking_widget.domain.entities.slot import SlotOption


class WidgetViewPort(ABC):
    """Rendering surface of one widget. Every call replaces what was shown before."""

    @abstractmethod
    def render_slots(self, options: list[SlotOption]) -> None:
        raise NotImplementedError

    @abstractmethod
    def render_total(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_feedback(self, text: str, kind: str) -> None:
        """kind is "error" or "success"."""
        raise NotImplementedError

    @abstractmethod
    def clear_feedback(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_submit_enabled(self, enabled: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Full page navigation, e.g. to the cart."""
        raise NotImplementedError
