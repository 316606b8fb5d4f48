from __future__ import annotations

from decimal import Decimal

import pytest

from booking_widget.application.use_cases.widget_controller import WidgetController
from booking_widget.domain.entities.extra import Extra
from booking_widget.domain.entities.slot import Slot
from booking_widget.domain.entities.widget_config import WidgetConfig
from booking_widget.infrastructure.analytics.data_layer import DataLayerSink
from booking_widget.infrastructure.view.memory_view import MemoryWidgetView

from fakes import GatedBackend


@pytest.fixture
def config() -> WidgetConfig:
    return WidgetConfig(
        product_id="42",
        adult_price=Decimal("20.00"),
        child_price=Decimal("10.00"),
        voucher_mode=False,
        analytics_enabled=True,
    )


@pytest.fixture
def extras() -> list[Extra]:
    return [
        Extra(id="wine", name="Wine tasting", price=Decimal("5.00")),
        Extra(id="lunch", name="Lunch", price=Decimal("12.50"), pricing="per_person"),
    ]


@pytest.fixture
def view() -> MemoryWidgetView:
    return MemoryWidgetView()


@pytest.fixture
def sink() -> DataLayerSink:
    return DataLayerSink()


@pytest.fixture
def backend() -> GatedBackend:
    return GatedBackend(
        {
            "2025-06-01": [
                Slot(id="7", time="10:00", available=3, soldout=False),
                Slot(id="8", time="14:00", available=0, soldout=True),
            ],
            "2025-06-02": [Slot(id="9", time="11:30", available=5, soldout=False)],
            "2025-06-03": [],
        }
    )


@pytest.fixture
def controller(config, extras, view, backend, sink) -> WidgetController:
    return WidgetController(config=config, extras=extras, view=view, backend=backend, analytics_sink=sink)
