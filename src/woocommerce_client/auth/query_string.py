"""Credentials passed as plain query parameters over HTTPS."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from ..query import flatten_query
from .base import AuthStrategy


@dataclass(slots=True)
class QueryStringAuth(AuthStrategy):
    """Attach ``consumer_key``/``consumer_secret`` to the query string.

    Useful for hosts that strip the ``Authorization`` header. Caller params
    are merged on top and win on collision.
    """

    consumer_key: str
    consumer_secret: str

    name = "query_string"

    def apply(
        self,
        options: MutableMapping[str, Any],
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        options["params"] = {
            "consumer_key": self.consumer_key,
            "consumer_secret": self.consumer_secret,
            **flatten_query(params),
        }
