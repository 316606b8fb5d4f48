from __future__ import annotations

#!/usr/bin/env python3
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local widget harness (no browser, no HTTP).

Usage:
  python3 scripts/widget_local.py

What it does:
- Builds one widget against the mock backend with a few occurrences seeded
- Lets you drive the same handlers the page would call
- Prints the rendered slot list, total, feedback and analytics queue after each step
"""

import asyncio
from datetime import date, timedelta

from booking_widget.infrastructure.analytics.data_layer import DataLayerSink
from booking_widget.infrastructure.backend.mock_backend import MockBookingBackend
from booking_widget.infrastructure.view.memory_view import MemoryWidgetView
from booking_widget.main import configure_logging
from booking_widget.wiring.dependencies import build_widget_controller

PRODUCT_ID = "42"
ATTRIBUTES = {
    "data-product": PRODUCT_ID,
    "data-price-adult": "20.00",
    "data-price-child": "10.00",
    "data-voucher": "0",
    "data-analytics": "1",
}
EXTRA_ROWS = [
    {"data-id": "wine", "data-name": "Wine tasting", "data-price": "5.00"},
    {"data-id": "lunch", "data-name": "Lunch", "data-price": "12.50", "data-pricing": "per_person"},
]


def _seed(backend: MockBookingBackend) -> str:
    day = (date.today() + timedelta(days=1)).isoformat()
    backend.add_occurrence(PRODUCT_ID, day, "10:00", capacity=8)
    backend.add_occurrence(PRODUCT_ID, day, "14:00", capacity=4, booked=4)
    backend.add_occurrence(PRODUCT_ID, day, "17:30", capacity=2)
    return day


def _print_state(view: MemoryWidgetView, sink: DataLayerSink) -> None:
    print("\n--- Widget ---")
    for option in view.slot_options:
        marker = "x" if option.disabled else " "
        print(f"[{marker}] {option.value or '-':>3}  {option.label}")
    print(f"total: {view.total_text}")
    if view.feedback_text:
        print(f"feedback ({view.feedback_kind}): {view.feedback_text}")
    if view.navigations:
        print(f"navigated to: {view.navigations[-1]}")
    if sink.events:
        print(f"analytics: {[event['event'] for event in sink.events]}")
    print("-" * 60)


def _print_help(seed_day: str) -> None:
    print("Commands:")
    print(f"  /date YYYY-MM-DD   (seeded: {seed_day})")
    print("  /slot ID")
    print("  /adults N  /children N")
    print("  /extra ID on|off   (wine, lunch)")
    print("  /gift NAME         (empty NAME turns gift off)")
    print("  /submit  /quit")


async def main() -> None:
    configure_logging()
    backend = MockBookingBackend()
    seed_day = _seed(backend)
    view = MemoryWidgetView()
    sink = DataLayerSink()
    controller = build_widget_controller(ATTRIBUTES, EXTRA_ROWS, view, analytics_sink=sink, backend=backend)

    print("\nLocal Widget Harness")
    print("-" * 60)
    _print_help(seed_day)
    _print_state(view, sink)

    while True:
        try:
            line = (await asyncio.to_thread(input, "\n> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_help(seed_day)
            continue
        if cmd == "/date":
            await controller.on_date_change(arg)
        elif cmd == "/slot":
            controller.on_slot_change(arg)
        elif cmd == "/adults":
            controller.on_adults_input(arg)
        elif cmd == "/children":
            controller.on_children_input(arg)
        elif cmd == "/extra":
            extra_id, _, state = arg.partition(" ")
            controller.on_extra_toggle(extra_id, state.strip().lower() in ("on", "1", "yes"))
        elif cmd == "/gift":
            controller.on_gift_toggle(bool(arg))
            controller.on_gift_details(name=arg)
        elif cmd == "/submit":
            await controller.on_submit()
        else:
            print("Unknown command, try /help")
            continue

        _print_state(view, sink)


if __name__ == "__main__":
    asyncio.run(main())
