from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminActionResult:
    success: bool
    message: str | None = None
    reload_required: bool = False
