"""Product helpers."""

from __future__ import annotations

from typing import Any

from .base import ResourceBase


class ProductsResource(ResourceBase):
    """Work with store products."""

    path = "products"

    def get_by_sku(self, sku: str) -> dict[str, Any] | None:
        """Find a product by its SKU.

        Args:
            sku: The exact stock keeping unit.

        Returns:
            The product object if found, else None.
        """
        for product in self.list({"sku": sku}) or []:
            if product.get("sku") == sku:
                return product
        return None
