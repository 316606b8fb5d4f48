from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    cart_url: str | None = None
    message: str | None = None
    error_code: str | None = None  # set for local validation failures only

    @classmethod
    def ok(cls, cart_url: str) -> "SubmissionResult":
        return cls(success=True, cart_url=cart_url)

    @classmethod
    def failed(cls, message: str, error_code: str | None = None) -> "SubmissionResult":
        return cls(success=False, message=message, error_code=error_code)
