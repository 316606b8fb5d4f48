from collections.abc import Iterable, Mapping
import logging

import httpx

from booking_widget.core.config import settings
from booking_widget.application.ports.analytics import AnalyticsSinkPort
from booking_widget.application.ports.booking_backend import BookingBackendPort
from booking_widget.application.ports.widget_view import WidgetViewPort
from booking_widget.application.use_cases.widget_controller import WidgetController
from booking_widget.application.utils.markup import config_from_markup, extras_from_markup
from booking_widget.domain.entities.widget_config import WidgetConfig
from booking_widget.infrastructure.analytics.data_layer import DataLayerSink
from booking_widget.infrastructure.backend.ajax_backend import AjaxBookingBackend
from booking_widget.infrastructure.backend.ajax_transport import AjaxTransport
from booking_widget.infrastructure.backend.mock_backend import MockBookingBackend


_mock_backend: MockBookingBackend | None = None


def _use_mock(config: WidgetConfig) -> bool:
    return not config.ajax_url or settings.ENV.lower() in {"dev", "local"}


def get_mock_backend() -> MockBookingBackend:
    global _mock_backend
    if _mock_backend is None:
        _mock_backend = MockBookingBackend()
    return _mock_backend


def get_booking_backend(config: WidgetConfig, client: httpx.AsyncClient | None = None) -> BookingBackendPort:
    """Backend for one widget, posting to the widget's own endpoint with its own nonce."""
    logger = logging.getLogger(__name__)
    if _use_mock(config):
        logger.info("Using MockBookingBackend (no ajax url or ENV=dev/local)", extra={"product_id": config.product_id})
        return get_mock_backend()

    logger.info("Using AjaxBookingBackend", extra={"product_id": config.product_id, "url": config.ajax_url})
    transport = AjaxTransport(
        ajax_url=config.ajax_url,
        nonce=config.nonce,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        client=client,
    )
    return AjaxBookingBackend(transport)


def build_widget_controller(
    attributes: Mapping[str, str],
    extra_rows: Iterable[Mapping[str, str]],
    view: WidgetViewPort,
    analytics_sink: AnalyticsSinkPort | None = None,
    backend: BookingBackendPort | None = None,
) -> WidgetController:
    """One controller per widget root; each gets its own selection state."""
    config = config_from_markup(attributes, settings)
    if analytics_sink is None and config.analytics_enabled:
        analytics_sink = DataLayerSink()
    return WidgetController(
        config=config,
        extras=extras_from_markup(extra_rows),
        view=view,
        backend=backend or get_booking_backend(config),
        analytics_sink=analytics_sink,
    )
