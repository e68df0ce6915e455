"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


def lookup(row: Row, key: str) -> Any:
    """Resolve a dotted key such as ``billing.email`` through nested objects."""
    value: Any = row
    for part in key.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    # WooCommerce fills unset address fields with empty strings.
    return None if value == "" else value


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a WooCommerce field for Rich tables.

    ``keys`` are tried in order; the first one resolving to a non-empty value wins.
    """

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        for key in self.keys:
            value = lookup(row, key)
            if value is not None:
                break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _money_formatter(value: Any) -> str:
    if value in (None, ""):
        return ""
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return str(value)


def _stock(row: Row) -> Any:
    if row.get("manage_stock") and row.get("stock_quantity") is not None:
        return row.get("stock_quantity")
    return row.get("stock_status")


def _full_name(row: Row) -> str:
    parts = [str(row.get("first_name") or "").strip(), str(row.get("last_name") or "").strip()]
    return " ".join(part for part in parts if part)


def _sort_id(row: Row) -> Any:
    value = row.get("id")
    return value if isinstance(value, int) else 0


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "products.list": TableView(
        title="Products",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("SKU", keys=("sku",)),
            Column("Type", keys=("type",)),
            Column("Price", keys=("price", "regular_price"), formatter=_money_formatter, justify="right"),
            Column("Stock", extractor=_stock, justify="right"),
            Column("Status", keys=("status",)),
        ),
        sort_key=lambda row: str(row.get("name") or "").lower(),
    ),
    "orders.list": TableView(
        title="Orders",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Number", keys=("number",)),
            Column("Status", keys=("status",)),
            Column("Total", keys=("total",), formatter=_money_formatter, justify="right"),
            Column("Currency", keys=("currency",)),
            Column("Customer", keys=("billing.email", "customer_id")),
            Column("Created", keys=("date_created_gmt", "date_created")),
        ),
        sort_key=_sort_id,
    ),
    "customers.list": TableView(
        title="Customers",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Email", keys=("email",)),
            Column("Name", extractor=_full_name),
            Column("Username", keys=("username",)),
            Column("Role", keys=("role",)),
        ),
        sort_key=lambda row: str(row.get("email") or "").lower(),
    ),
}
