"""Two-legged OAuth 1.0a signing with HMAC-SHA256.

WooCommerce only accepts OAuth over plain HTTP. The consumer key and secret
are the sole credentials (no token), so the signing key is
``enc(consumer_secret) + "&"``. The signature covers the method, the URL
before its query string, and every query parameter of the (already
canonical) URL together with the ``oauth_*`` parameters.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import string
import time
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, quote, urlsplit

from .base import AuthStrategy

SIGNATURE_METHOD = "HMAC-SHA256"
OAUTH_VERSION = "1.0"

_NONCE_ALPHABET = string.ascii_letters + string.digits
_NONCE_LENGTH = 32


def percent_encode(value: str) -> str:
    """RFC 3986 encoding: everything but ALPHA / DIGIT / ``-._~`` is escaped."""
    return quote(str(value), safe="~")


def generate_nonce() -> str:
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(_NONCE_LENGTH))


@dataclass(slots=True)
class OAuth1Auth(AuthStrategy):
    """Sign each request and send the ``oauth_*`` parameters in the query string."""

    consumer_key: str
    consumer_secret: str

    name = "oauth1"

    def apply(
        self,
        options: MutableMapping[str, Any],
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        # Caller params were already folded into ``url`` by the canonicalizer.
        options["params"] = self.sign(method, url)

    def sign(
        self,
        method: str,
        url: str,
        *,
        nonce: str | None = None,
        timestamp: int | None = None,
    ) -> dict[str, str]:
        """Return the signed ``oauth_*`` parameter set for ``method`` and ``url``.

        A fresh nonce and timestamp are drawn unless provided.
        """
        oauth_params = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": nonce or generate_nonce(),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": str(int(time.time()) if timestamp is None else timestamp),
            "oauth_version": OAUTH_VERSION,
        }
        oauth_params["oauth_signature"] = self._signature(method, url, oauth_params)
        return oauth_params

    def verify(self, method: str, url: str, oauth_params: Mapping[str, str]) -> bool:
        """Check ``oauth_params`` the way the store does when it receives them."""
        unsigned = {k: v for k, v in oauth_params.items() if k != "oauth_signature"}
        expected = self._signature(method, url, unsigned)
        return hmac.compare_digest(expected, oauth_params.get("oauth_signature", ""))

    def signing_key(self) -> str:
        return f"{percent_encode(self.consumer_secret)}&"

    def base_string(self, method: str, url: str, oauth_params: Mapping[str, str]) -> str:
        base_url, _, _ = url.partition("?")
        pairs = parse_qsl(urlsplit(url).query, keep_blank_values=True)
        pairs.extend(oauth_params.items())
        encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in pairs)
        param_string = "&".join(f"{k}={v}" for k, v in encoded)
        return "&".join(
            [method.upper(), percent_encode(base_url), percent_encode(param_string)]
        )

    def _signature(self, method: str, url: str, oauth_params: Mapping[str, str]) -> str:
        digest = hmac.new(
            self.signing_key().encode("utf-8"),
            self.base_string(method, url, oauth_params).encode("utf-8"),
            hashlib.sha256,
        ).digest()
        return base64.b64encode(digest).decode("ascii")
