"""Command-line interface for interacting with a WooCommerce store."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install woocommerce-python[cli]' to enable this command."
    ) from exc

from . import WooCommerceClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .exceptions import RequestError

app = typer.Typer(help="WooCommerce REST API CLI.", no_args_is_help=True)

products_app = typer.Typer(help="Product operations.")
orders_app = typer.Typer(help="Order operations.")
customers_app = typer.Typer(help="Customer operations.")
app.add_typer(products_app, name="products")
app.add_typer(orders_app, name="orders")
app.add_typer(customers_app, name="customers")

_HTTP_METHODS = {"GET", "POST", "PUT", "DELETE", "OPTIONS"}


def _build_client(
    url: str | None,
    consumer_key: str | None,
    consumer_secret: str | None,
    version: str,
    wp_api_prefix: str,
    query_string_auth: bool,
    port: int | None,
    verify_ssl: bool,
    timeout: float,
) -> WooCommerceClient:
    if not url:
        raise typer.BadParameter("--url is required.")
    if not consumer_key or not consumer_secret:
        raise typer.BadParameter("--consumer-key and --consumer-secret are required.")

    return WooCommerceClient(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        version=version,
        wp_api_prefix=wp_api_prefix,
        query_string_auth=query_string_auth,
        port=port,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows: list[Mapping[str, Any]] = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_request_error(exc: RequestError) -> None:
    message = f"Request failed (status {exc.status_code}): {exc}"
    if exc.duration is not None:
        message += f" after {exc.duration:.2f}s"
    if exc.details and exc.status_code is not None:
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "url": typer.Option(
            None, "--url", envvar="WOOCOMMERCE_URL", help="Store URL (e.g. https://shop.example)."
        ),
        "consumer_key": typer.Option(
            None,
            "--consumer-key",
            "-k",
            envvar="WOOCOMMERCE_CONSUMER_KEY",
            help="REST API consumer key (ck_...).",
        ),
        "consumer_secret": typer.Option(
            None,
            "--consumer-secret",
            "-s",
            envvar="WOOCOMMERCE_CONSUMER_SECRET",
            help="REST API consumer secret (cs_...).",
            hide_input=True,
        ),
        "version": typer.Option(
            "wc/v3",
            "--api-version",
            envvar="WOOCOMMERCE_VERSION",
            help="REST API version namespace.",
            show_default=True,
        ),
        "wp_api_prefix": typer.Option(
            "wp-json",
            "--wp-api-prefix",
            help="WordPress REST API prefix.",
            show_default=True,
        ),
        "query_string_auth": typer.Option(
            False,
            "--query-string-auth/--basic-auth",
            envvar="WOOCOMMERCE_QUERY_STRING_AUTH",
            help="Over HTTPS, send credentials as query params instead of Basic auth.",
            show_default=True,
        ),
        "port": typer.Option(None, "--port", help="Explicit port to use for the store host."),
        "verify_ssl": typer.Option(
            True,
            "--verify/--no-verify",
            envvar="WOOCOMMERCE_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


def parse_params(entries: Sequence[str]) -> dict[str, str]:
    """Parse ``key=value`` entries into query params, keeping values verbatim."""
    out: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise typer.BadParameter(f"Query params must be key=value pairs, got '{entry}'.")
        key, val = entry.split("=", 1)
        out[key.strip()] = val
    return out


def _list_params(page: int | None, per_page: int | None, **filters: Any) -> dict[str, Any]:
    params: dict[str, Any] = {key: value for key, value in filters.items() if value is not None}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params


_PAGE_OPTION = typer.Option(None, "--page", help="Page of the collection to fetch.")
_PER_PAGE_OPTION = typer.Option(None, "--per-page", help="Items per page (max 100).")


@products_app.command("list")
def products_list(
    url: str | None = _SHARED_OPTIONS["url"],
    consumer_key: str | None = _SHARED_OPTIONS["consumer_key"],
    consumer_secret: str | None = _SHARED_OPTIONS["consumer_secret"],
    version: str = _SHARED_OPTIONS["version"],
    wp_api_prefix: str = _SHARED_OPTIONS["wp_api_prefix"],
    query_string_auth: bool = _SHARED_OPTIONS["query_string_auth"],
    port: int | None = _SHARED_OPTIONS["port"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    search: str | None = typer.Option(None, "--search", help="Limit results to a search term."),
    status: str | None = typer.Option(None, "--status", help="Filter by product status."),
    page: int | None = _PAGE_OPTION,
    per_page: int | None = _PER_PAGE_OPTION,
) -> None:
    """List products."""

    with _build_client(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        version=version,
        wp_api_prefix=wp_api_prefix,
        query_string_auth=query_string_auth,
        port=port,
        verify_ssl=verify_ssl,
        timeout=timeout,
    ) as client:
        try:
            products = client.products.list(
                _list_params(page, per_page, search=search, status=status)
            )
        except RequestError as exc:
            _handle_request_error(exc)
            return
    _present_output(products, view_id="products.list", json_output=output_json)


@orders_app.command("list")
def orders_list(
    url: str | None = _SHARED_OPTIONS["url"],
    consumer_key: str | None = _SHARED_OPTIONS["consumer_key"],
    consumer_secret: str | None = _SHARED_OPTIONS["consumer_secret"],
    version: str = _SHARED_OPTIONS["version"],
    wp_api_prefix: str = _SHARED_OPTIONS["wp_api_prefix"],
    query_string_auth: bool = _SHARED_OPTIONS["query_string_auth"],
    port: int | None = _SHARED_OPTIONS["port"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    status: str | None = typer.Option(None, "--status", help="Filter by order status."),
    customer: int | None = typer.Option(None, "--customer", help="Filter by customer ID."),
    page: int | None = _PAGE_OPTION,
    per_page: int | None = _PER_PAGE_OPTION,
) -> None:
    """List orders."""

    with _build_client(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        version=version,
        wp_api_prefix=wp_api_prefix,
        query_string_auth=query_string_auth,
        port=port,
        verify_ssl=verify_ssl,
        timeout=timeout,
    ) as client:
        try:
            orders = client.orders.list(
                _list_params(page, per_page, status=status, customer=customer)
            )
        except RequestError as exc:
            _handle_request_error(exc)
            return
    _present_output(orders, view_id="orders.list", json_output=output_json)


@customers_app.command("list")
def customers_list(
    url: str | None = _SHARED_OPTIONS["url"],
    consumer_key: str | None = _SHARED_OPTIONS["consumer_key"],
    consumer_secret: str | None = _SHARED_OPTIONS["consumer_secret"],
    version: str = _SHARED_OPTIONS["version"],
    wp_api_prefix: str = _SHARED_OPTIONS["wp_api_prefix"],
    query_string_auth: bool = _SHARED_OPTIONS["query_string_auth"],
    port: int | None = _SHARED_OPTIONS["port"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
    email: str | None = typer.Option(None, "--email", help="Filter by email address."),
    role: str | None = typer.Option(None, "--role", help="Filter by user role."),
    page: int | None = _PAGE_OPTION,
    per_page: int | None = _PER_PAGE_OPTION,
) -> None:
    """List customers."""

    with _build_client(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        version=version,
        wp_api_prefix=wp_api_prefix,
        query_string_auth=query_string_auth,
        port=port,
        verify_ssl=verify_ssl,
        timeout=timeout,
    ) as client:
        try:
            customers = client.customers.list(
                _list_params(page, per_page, email=email, role=role)
            )
        except RequestError as exc:
            _handle_request_error(exc)
            return
    _present_output(customers, view_id="customers.list", json_output=output_json)


@app.command("request")
def raw_request(
    method: str = typer.Argument(..., help="HTTP method (GET, POST, PUT, DELETE, OPTIONS)."),
    endpoint: str = typer.Argument(..., help="Endpoint below the API version, e.g. products/12."),
    url: str | None = _SHARED_OPTIONS["url"],
    consumer_key: str | None = _SHARED_OPTIONS["consumer_key"],
    consumer_secret: str | None = _SHARED_OPTIONS["consumer_secret"],
    version: str = _SHARED_OPTIONS["version"],
    wp_api_prefix: str = _SHARED_OPTIONS["wp_api_prefix"],
    query_string_auth: bool = _SHARED_OPTIONS["query_string_auth"],
    port: int | None = _SHARED_OPTIONS["port"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    param: list[str] = typer.Option(
        [],
        "--param",
        "-P",
        help="Query param in key=value form (repeatable, e.g. filter[status]=draft).",
        show_default=False,
    ),
    payload_file: Path | None = typer.Option(
        None,
        "--data",
        help="Path to a JSON file sent as the request body.",
    ),
) -> None:
    """Send an arbitrary request and print the JSON response."""

    verb = method.upper()
    if verb not in _HTTP_METHODS:
        raise typer.BadParameter(f"Unsupported method '{method}'.")
    params = parse_params(param)

    payload: Any | None = None
    if payload_file:
        try:
            payload = json.loads(payload_file.read_text(encoding="utf-8"))
        except OSError as exc:  # pragma: no cover - filesystem errors
            raise typer.BadParameter(f"Unable to read payload file: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"Payload file is not valid JSON: {exc}") from exc

    with _build_client(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        version=version,
        wp_api_prefix=wp_api_prefix,
        query_string_auth=query_string_auth,
        port=port,
        verify_ssl=verify_ssl,
        timeout=timeout,
    ) as client:
        try:
            response = client.request(verb, endpoint, data=payload, params=params or None)
        except RequestError as exc:
            _handle_request_error(exc)
            return
    _echo_json(response.data)


def main() -> None:  # pragma: no cover - console script entrypoint
    app()
