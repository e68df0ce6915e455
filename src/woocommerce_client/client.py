"""High-level WooCommerce REST client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth import AuthStrategy, select_auth_strategy
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_ENCODING,
    DEFAULT_WP_API_PREFIX,
    JSON_CONTENT_TYPE,
    ClientConfig,
    RequestIntent,
)
from .http import HttpResponse
from .http import request as http_request
from .query import join_api_url, normalize_query_string, splice_port
from .resources import CustomersResource, OrdersResource, ProductsResource

logger = logging.getLogger(__name__)


class WooCommerceClient:
    """Sign and send requests to a store's WooCommerce REST API.

    Plain ``http://`` stores are called with OAuth 1.0a signed query strings.
    ``https://`` stores receive the consumer key and secret either as HTTP
    Basic credentials or, with ``query_string_auth=True``, as query params.
    """

    def __init__(
        self,
        url: str | None = None,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        *,
        wp_api_prefix: str = DEFAULT_WP_API_PREFIX,
        version: str = DEFAULT_API_VERSION,
        encoding: str = DEFAULT_ENCODING,
        query_string_auth: bool = False,
        port: int | str | None = None,
        timeout: float | tuple[float, float] | None = None,
        verify_ssl: bool | str = True,
        default_headers: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = ClientConfig(
            url=url,  # type: ignore[arg-type]
            consumer_key=consumer_key,  # type: ignore[arg-type]
            consumer_secret=consumer_secret,  # type: ignore[arg-type]
            wp_api_prefix=wp_api_prefix or DEFAULT_WP_API_PREFIX,
            version=version or DEFAULT_API_VERSION,
            encoding=encoding or DEFAULT_ENCODING,
            query_string_auth=query_string_auth,
            port=port,
            timeout=timeout,
            verify_ssl=verify_ssl,
            default_headers=default_headers,
            request_options=request_options,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.products = ProductsResource(self)
        self.orders = OrdersResource(self)
        self.customers = CustomersResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> WooCommerceClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> HttpResponse:
        return self.request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        data: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse:
        return self.request("POST", endpoint, data=data, params=params)

    def put(
        self,
        endpoint: str,
        data: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse:
        return self.request("PUT", endpoint, data=data, params=params)

    def delete(self, endpoint: str, params: Mapping[str, Any] | None = None) -> HttpResponse:
        return self.request("DELETE", endpoint, params=params)

    def options(self, endpoint: str, params: Mapping[str, Any] | None = None) -> HttpResponse:
        return self.request("OPTIONS", endpoint, params=params)

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        data: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse:
        intent = RequestIntent(
            method=method.upper(),
            endpoint=endpoint,
            payload=data,
            params=params,
        )
        url = self._build_url(intent.endpoint, intent.params)
        strategy = select_auth_strategy(self.config)
        options = self._build_options(intent, url, strategy)
        self._log_request(intent.method, url, strategy)
        return self._perform_request(options)

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _build_url(self, endpoint: str, params: Mapping[str, Any] | None) -> str:
        url = join_api_url(
            self.config.url,
            self.config.wp_api_prefix,
            self.config.version,
            endpoint,
        )
        url = splice_port(url, self.config.port)
        if not self.config.is_https:
            return normalize_query_string(url, params)
        return url

    def _build_options(
        self,
        intent: RequestIntent,
        url: str,
        strategy: AuthStrategy,
    ) -> dict[str, Any]:
        options = self.config.base_options()
        options["method"] = intent.method
        options["url"] = url
        strategy.apply(options, method=intent.method, url=url, params=intent.params)
        if intent.payload is not None:
            options["headers"]["Content-Type"] = JSON_CONTENT_TYPE
            options["data"] = json.dumps(intent.payload, ensure_ascii=False).encode("utf-8")
        options.update(self.config.resolved_overrides())
        return options

    def _perform_request(self, options: Mapping[str, Any]) -> HttpResponse:
        return http_request(self._session, options, encoding=self.config.encoding)

    def _log_request(self, method: str, url: str, strategy: AuthStrategy) -> None:
        logger.info("WooCommerce request %s %s (auth=%s)", method, url, strategy.name)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
