"""Configuration helpers for the WooCommerce client."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import OptionsError

CLIENT_VERSION = "1.0.0"
USER_AGENT = f"WooCommerce REST API - Python Client/{CLIENT_VERSION}"
JSON_CONTENT_TYPE = "application/json;charset=utf-8"

DEFAULT_WP_API_PREFIX = "wp-json"
DEFAULT_API_VERSION = "wc/v3"
DEFAULT_ENCODING = "utf8"

_HTTPS_SCHEME = re.compile(r"^https", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Typed, immutable configuration for `WooCommerceClient`.

    ``url``, ``consumer_key`` and ``consumer_secret`` are required. ``port``
    is spliced into the host part of every request URL when set, and
    ``request_options`` is a bag of ``requests`` keyword arguments applied last
    so it can override anything the client computes.
    """

    url: str
    consumer_key: str
    consumer_secret: str
    wp_api_prefix: str = DEFAULT_WP_API_PREFIX
    version: str = DEFAULT_API_VERSION
    encoding: str = DEFAULT_ENCODING
    query_string_auth: bool = False
    port: int | str | None = None
    timeout: float | tuple[float, float] | None = None
    verify_ssl: bool | str = True
    default_headers: Mapping[str, str] | None = None
    request_options: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        for name in ("url", "consumer_key", "consumer_secret"):
            if not getattr(self, name):
                raise OptionsError(f"{name} is required")
        if self.port not in (None, "") and not str(self.port).isdigit():
            raise OptionsError(f"port must be numeric, got {self.port!r}")

    @property
    def is_https(self) -> bool:
        return bool(_HTTPS_SCHEME.match(self.url))

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

    def base_options(self) -> dict[str, Any]:
        """Per-request defaults before auth and caller overrides are applied."""
        return {
            "headers": self.resolved_headers(),
            "timeout": self.timeout,
            "verify": self.verify_ssl,
        }

    def resolved_overrides(self) -> dict[str, Any]:
        return dict(self.request_options or {})


@dataclass(slots=True)
class RequestIntent:
    """Bundle together the caller's view of a single request."""

    method: str
    endpoint: str
    payload: Any | None = None
    params: Mapping[str, Any] | None = None
