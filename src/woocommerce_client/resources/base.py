"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import WooCommerceClient

DEFAULT_PAGE_SIZE = 100


class ResourceBase:
    """Provide CRUD helpers shared by the collection endpoints."""

    path = ""

    def __init__(self, client: WooCommerceClient) -> None:
        self._client = client

    def list(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return self._get(self.path, params=params)

    def list_all(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        per_page: int = DEFAULT_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """Walk every page of the collection until a short page comes back."""
        items: list[dict[str, Any]] = []
        page = 1
        while True:
            batch = self._get(self.path, params={**(params or {}), "page": page, "per_page": per_page})
            if not batch:
                break
            items.extend(batch)
            if len(batch) < per_page:
                break
            page += 1
        return items

    def get(self, item_id: int | str) -> dict[str, Any]:
        return self._get(f"{self.path}/{item_id}")

    def create(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return self._post(self.path, payload)

    def update(self, item_id: int | str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return self._put(f"{self.path}/{item_id}", payload)

    def delete(self, item_id: int | str, *, force: bool = False) -> dict[str, Any]:
        params = {"force": True} if force else None
        return self._delete(f"{self.path}/{item_id}", params=params)

    def batch(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Submit a ``{"create": [...], "update": [...], "delete": [...]}`` batch."""
        return self._post(f"{self.path}/batch", payload)

    def _get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        return self._client.get(path, params=params).data

    def _post(
        self,
        path: str,
        payload: Mapping[str, Any],
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._client.post(path, payload, params=params).data

    def _put(self, path: str, payload: Mapping[str, Any]) -> Any:
        return self._client.put(path, payload).data

    def _delete(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        return self._client.delete(path, params=params).data
