"""HTTP Basic authentication support."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from requests.auth import HTTPBasicAuth

from ..query import flatten_query
from .base import AuthStrategy


@dataclass(slots=True)
class BasicAuth(AuthStrategy):
    """Send the consumer key and secret as HTTP Basic credentials."""

    username: str
    password: str

    name = "basic"

    def apply(
        self,
        options: MutableMapping[str, Any],
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        options["auth"] = HTTPBasicAuth(self.username, self.password)
        options["params"] = flatten_query(params)
