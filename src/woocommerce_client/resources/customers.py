"""Customer helpers."""

from __future__ import annotations

from typing import Any

from .base import ResourceBase


class CustomersResource(ResourceBase):
    """Work with store customers."""

    path = "customers"

    def get_by_email(self, email: str) -> dict[str, Any] | None:
        target = email.strip().lower()
        for customer in self.list({"email": email}) or []:
            if str(customer.get("email") or "").lower() == target:
                return customer
        return None
