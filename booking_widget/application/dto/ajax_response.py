from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from booking_widget.domain.entities.slot import Slot


class AjaxEnvelopeDTO(BaseModel):
    """The {success, data} envelope every ajax action answers with."""

    success: bool = False
    data: Any = None

    def error_message(self) -> str | None:
        if isinstance(self.data, str) and self.data.strip():
            return self.data.strip()
        if isinstance(self.data, dict):
            for key in ("msg", "message"):
                value = self.data.get(key)
                if isinstance(value, str) and value.strip():
                    return value.strip()
        return None


class SlotDTO(BaseModel):
    id: int | str
    time: str = ""
    available: int = 0
    soldout: bool | None = None

    def to_entity(self) -> Slot:
        available = max(0, self.available)
        soldout = self.soldout if self.soldout is not None else available <= 0
        return Slot(id=str(self.id), time=self.time, available=available, soldout=soldout)


class SlotsPayloadDTO(BaseModel):
    slots: list[SlotDTO] = Field(default_factory=list)

    def to_entities(self) -> list[Slot]:
        return [slot.to_entity() for slot in self.slots]


class CartPayloadDTO(BaseModel):
    cart_url: str
