"""Query-string helpers used to build canonical, signable request URLs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

# Left unescaped by JavaScript's encodeURIComponent on top of ALPHA / DIGIT / "-_.~".
_COMPONENT_SAFE = "!*'()"


def flatten_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Expand one level of nested parameters into bracketed keys.

    ``{"filter": {"status": "draft"}}`` becomes ``{"filter[status]": "draft"}``
    and ``{"include": [3, 7]}`` becomes ``{"include[0]": 3, "include[1]": 7}``.
    Values nested deeper than one level are kept as-is and ``None`` values are
    dropped.
    """
    flat: dict[str, Any] = {}
    if not params:
        return flat
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            for child, item in value.items():
                flat[f"{key}[{child}]"] = item
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                flat[f"{key}[{index}]"] = item
        else:
            flat[str(key)] = value
    return flat


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flatten_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten ``params`` and render every value the way it appears in a query string."""
    return {key: stringify(value) for key, value in flatten_params(params).items()}


def encode_component(value: Any) -> str:
    return quote(stringify(value), safe=_COMPONENT_SAFE)


def encode_key(key: str) -> str:
    # Brackets stay literal in keys, e.g. filter[status].
    return encode_component(key).replace("%5B", "[").replace("%5D", "]")


def canonical_pairs(url: str, params: Mapping[str, Any] | None = None) -> list[tuple[str, str]]:
    """Merge the URL query with ``params`` and return ``(key, value)`` pairs sorted by key."""
    merged: dict[str, Any] = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        merged.setdefault(key, value)
    merged.update(flatten_params(params))
    return [(key, stringify(merged[key])) for key in sorted(merged)]


def normalize_query_string(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Return ``url`` with a deterministic, sorted query string for OAuth signing.

    The URL comes back untouched when it carries no query string and there
    is nothing to add.
    """
    pairs = canonical_pairs(url, params)
    if "?" not in url and not pairs:
        return url
    query = "&".join(f"{encode_key(key)}={encode_component(value)}" for key, value in pairs)
    return f"{url.split('?')[0]}?{query}"


def splice_port(url: str, port: int | str | None) -> str:
    """Place ``port`` right after the hostname, replacing any port already present."""
    if port in (None, ""):
        return url
    parts = urlsplit(url)
    hostname = parts.hostname
    if not hostname:
        return url
    if ":" in hostname:
        hostname = f"[{hostname}]"
    netloc = f"{hostname}:{port}"
    userinfo, at, _ = parts.netloc.rpartition("@")
    if at:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit(parts._replace(netloc=netloc))


def join_api_url(base_url: str, *segments: str) -> str:
    """Join the store URL and API path segments with exactly one ``/`` after the base."""
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return base + "/".join(segments)


__all__ = [
    "canonical_pairs",
    "encode_component",
    "encode_key",
    "flatten_params",
    "flatten_query",
    "join_api_url",
    "normalize_query_string",
    "splice_port",
    "stringify",
]
