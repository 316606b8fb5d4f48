from __future__ import annotations

import logging

from booking_widget.main import ContextFormatter, configure_logging


def test_context_formatter_appends_known_extras():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    record = logging.LogRecord("booking", logging.INFO, __file__, 1, "Slots loaded", None, None)
    record.product_id = "42"
    record.slot_count = 3
    record.error = ""

    assert formatter.format(record) == "INFO:booking:Slots loaded | product_id=42 slot_count=3"


def test_configure_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ContextFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_context_formatter_includes_widget_keys():
    formatter = ContextFormatter("%(message)s")
    record = logging.LogRecord("booking", logging.INFO, __file__, 1, "Navigating", None, None)
    record.slot_id = "7"
    record.seq = 1
    record.latest_seq = 2
    record.enabled = False
    record.url = "/cart"

    assert formatter.format(record) == "Navigating | slot_id=7 seq=1 latest_seq=2 enabled=False url=/cart"
