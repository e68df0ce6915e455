"""Base abstractions for auth strategies."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any


class AuthStrategy(ABC):
    """Interface each authentication mechanism must implement."""

    name = "base"

    @abstractmethod
    def apply(
        self,
        options: MutableMapping[str, Any],
        *,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        """Mutate transport options in-place with credentials and query params."""
