"""Order helpers."""

from __future__ import annotations

from typing import Any

from .base import ResourceBase


class OrdersResource(ResourceBase):
    """Work with store orders and their notes."""

    path = "orders"

    def list_notes(self, order_id: int | str) -> list[dict[str, Any]]:
        return self._get(f"{self.path}/{order_id}/notes")

    def add_note(
        self,
        order_id: int | str,
        note: str,
        *,
        customer_note: bool = False,
    ) -> dict[str, Any]:
        payload = {"note": note, "customer_note": customer_note}
        return self._post(f"{self.path}/{order_id}/notes", payload)
