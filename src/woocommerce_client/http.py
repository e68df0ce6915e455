"""HTTP utilities for WooCommerce API access."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import requests
from requests import Response, Session

from .exceptions import RequestError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper carrying the timing of the call."""

    status_code: int
    data: Any
    headers: Mapping[str, str]
    started_at: datetime
    finished_at: datetime
    duration: float


def _timing(started_at: datetime, start: float) -> dict[str, Any]:
    duration = time.perf_counter() - start
    return {
        "started_at": started_at,
        "finished_at": started_at + timedelta(seconds=duration),
        "duration": duration,
    }


def ensure_success(response: Response, timing: Mapping[str, Any]) -> None:
    """Raise `RequestError` if the response signals a failure."""

    if 200 <= response.status_code < 300:
        return
    message = f"WooCommerce API error {response.status_code}: {response.text[:200]}"
    raise RequestError(
        message,
        status_code=response.status_code,
        details=response.text,
        response=response,
        **timing,
    )


def parse_json(response: Response) -> Any:
    """Decode a JSON body, handing back the raw text when the store sends something else."""

    try:
        return response.json()
    except ValueError:
        logger.warning(
            "WooCommerce response %s is not JSON (content-type=%s)",
            response.status_code,
            response.headers.get("Content-Type", "unknown"),
        )
        return response.text


def request(
    session: Session,
    options: Mapping[str, Any],
    *,
    encoding: str | None = None,
) -> HttpResponse:
    """Issue a request from prepared ``requests`` options and return a timed envelope.

    Transport failures and non-2xx answers are raised as `RequestError` with
    the same timing fields a successful `HttpResponse` carries.
    """

    started_at = datetime.now(timezone.utc)
    start = time.perf_counter()
    try:
        response = session.request(**options)
    except requests.RequestException as exc:
        timing = _timing(started_at, start)
        reason = str(exc).strip() or exc.__class__.__name__
        raise RequestError(
            f"Failed to communicate with WooCommerce API: {reason}",
            details=reason,
            **timing,
        ) from exc
    timing = _timing(started_at, start)
    if encoding:
        response.encoding = encoding
    logger.debug(
        "WooCommerce response %s in %.3fs",
        response.status_code,
        timing["duration"],
    )
    ensure_success(response, timing)

    data: Any = None
    if response.content:
        data = parse_json(response)

    return HttpResponse(
        status_code=response.status_code,
        data=data,
        headers=response.headers,
        **timing,
    )
