import json
from urllib.parse import parse_qsl, urlsplit

from typer.testing import CliRunner

from woocommerce_client.cli import app, parse_params
from woocommerce_client.cli_schema import Column, lookup

runner = CliRunner()

STORE = "https://shop.test"
API = f"{STORE}/wp-json/wc/v3"
CREDENTIALS = ["--url", STORE, "--consumer-key", "ck", "--consumer-secret", "cs"]


def _query(request) -> dict[str, str]:
    return dict(parse_qsl(urlsplit(request.url).query))


def test_products_list_cli_renders_table(requests_mock):
    requests_mock.get(
        f"{API}/products",
        json=[{"id": 1, "name": "Mug", "sku": "MUG-1", "price": "9.5", "status": "publish"}],
    )

    result = runner.invoke(app, ["products", "list", *CREDENTIALS])

    assert result.exit_code == 0
    assert "Mug" in result.stdout
    assert "9.50" in result.stdout


def test_products_list_cli_json_output(requests_mock):
    requests_mock.get(f"{API}/products", json=[{"id": 1, "name": "Mug"}])

    result = runner.invoke(app, ["products", "list", *CREDENTIALS, "--json", "--per-page", "5"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["name"] == "Mug"
    assert _query(requests_mock.last_request) == {"per_page": "5"}


def test_orders_list_cli_passes_filters(requests_mock):
    requests_mock.get(
        f"{API}/orders",
        json=[{"id": 8, "number": "8", "status": "processing", "billing": {"email": "a@b.c"}}],
    )

    result = runner.invoke(app, ["orders", "list", *CREDENTIALS, "--status", "processing"])

    assert result.exit_code == 0
    assert "a@b.c" in result.stdout
    assert _query(requests_mock.last_request) == {"status": "processing"}


def test_customers_list_cli_reads_environment(requests_mock):
    requests_mock.get(f"{API}/customers", json=[{"id": 2, "email": "ann@example.com"}])

    result = runner.invoke(
        app,
        ["customers", "list", "--json"],
        env={
            "WOOCOMMERCE_URL": STORE,
            "WOOCOMMERCE_CONSUMER_KEY": "ck_env",
            "WOOCOMMERCE_CONSUMER_SECRET": "cs_env",
            "WOOCOMMERCE_QUERY_STRING_AUTH": "1",
        },
    )

    assert result.exit_code == 0
    query = _query(requests_mock.last_request)
    assert query["consumer_key"] == "ck_env"
    assert query["consumer_secret"] == "cs_env"


def test_request_cli_sends_params_and_body(requests_mock, tmp_path):
    body = tmp_path / "product.json"
    body.write_text(json.dumps({"name": "Mug"}), encoding="utf-8")
    matcher = requests_mock.post(f"{API}/products", json={"id": 12})

    result = runner.invoke(
        app,
        [
            "request",
            "post",
            "products",
            *CREDENTIALS,
            "--param",
            "filter[status]=draft",
            "--data",
            str(body),
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"id": 12}
    assert matcher.last_request.json() == {"name": "Mug"}
    assert _query(matcher.last_request) == {"filter[status]": "draft"}


def test_request_cli_reports_failures(requests_mock):
    requests_mock.get(f"{API}/orders/999", status_code=404, json={"code": "woocommerce_rest_shop_order_invalid_id"})

    result = runner.invoke(app, ["request", "GET", "orders/999", *CREDENTIALS])

    assert result.exit_code == 1
    assert "Request failed (status 404)" in result.stderr


def test_request_cli_rejects_unknown_method():
    result = runner.invoke(app, ["request", "PATCH", "orders", *CREDENTIALS])

    assert result.exit_code != 0


def test_missing_credentials_rejected():
    result = runner.invoke(app, ["products", "list", "--url", STORE], env={})

    assert result.exit_code != 0
    assert "--consumer-key and --consumer-secret are required" in result.stderr


def test_parse_params_keeps_values_verbatim():
    assert parse_params(["sku=007", "search=no", "slug=1.50", "filter[status]=a=b"]) == {
        "sku": "007",
        "search": "no",
        "slug": "1.50",
        "filter[status]": "a=b",
    }


def test_request_cli_sends_param_text_unchanged(requests_mock):
    requests_mock.get(f"{API}/products", json=[])

    result = runner.invoke(
        app,
        [
            "request",
            "GET",
            "products",
            *CREDENTIALS,
            "--param",
            "sku=007",
            "--param",
            "search=no",
            "--param",
            "slug=1.50",
        ],
    )

    assert result.exit_code == 0
    assert _query(requests_mock.last_request) == {"sku": "007", "search": "no", "slug": "1.50"}


def test_products_list_cli_prints_non_json_body(requests_mock):
    requests_mock.get(f"{API}/products", text="<html>home</html>")

    result = runner.invoke(app, ["products", "list", *CREDENTIALS])

    assert result.exit_code == 0
    assert "<html>home</html>" in result.stdout


def test_request_cli_failure_reports_elapsed_time(requests_mock):
    requests_mock.get(f"{API}/orders/1", status_code=500, text="boom")

    result = runner.invoke(app, ["request", "GET", "orders/1", *CREDENTIALS])

    assert result.exit_code == 1
    assert "Request failed (status 500)" in result.stderr
    assert " after " in result.stderr


def test_column_resolves_nested_keys():
    column = Column("Customer", keys=("billing.email", "customer_id"))

    assert column.render({"billing": {"email": "ann@example.com"}, "customer_id": 3}) == "ann@example.com"
    assert column.render({"billing": {"email": ""}, "customer_id": 3}) == "3"
    assert column.render({"billing": None}) == ""
    assert lookup({"billing": {"address": {"city": "Oslo"}}}, "billing.address.city") == "Oslo"
