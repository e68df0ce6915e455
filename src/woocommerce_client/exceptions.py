"""Custom exception hierarchy for the WooCommerce client."""
from __future__ import annotations

from datetime import datetime
from typing import Any


class WooCommerceError(RuntimeError):
    """Base error for WooCommerce client failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class OptionsError(WooCommerceError):
    """Raised at construction time when a required option is missing or invalid."""


class RequestError(WooCommerceError):
    """Raised when an HTTP request fails or the store answers with a non-2xx status.

    Carries the timing of the failed call so callers can report latency for
    failures the same way they do for successful responses.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
        response: Any | None = None,
        started_at: datetime | None = None,
        finished_at: datetime | None = None,
        duration: float | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, details=details)
        self.response = response
        self.started_at = started_at
        self.finished_at = finished_at
        self.duration = duration
