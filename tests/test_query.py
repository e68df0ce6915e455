from woocommerce_client.query import (
    canonical_pairs,
    flatten_params,
    join_api_url,
    normalize_query_string,
    splice_port,
)

BASE = "http://shop.test/wp-json/wc/v3/products"


def test_flatten_expands_one_level():
    assert flatten_params({"a": {"b": 1}}) == {"a[b]": 1}


def test_flatten_leaves_flat_mapping_untouched():
    flat = {"per_page": 5, "filter[status]": "draft"}

    assert flatten_params(flat) == flat
    assert flatten_params(flatten_params(flat)) == flat


def test_flatten_does_not_recurse_past_first_level():
    nested = {"meta": {"outer": {"inner": 1}}}

    assert flatten_params(nested) == {"meta[outer]": {"inner": 1}}


def test_flatten_indexes_sequences_and_drops_none():
    params = {"include": [3, 7], "search": None, "page": 2}

    assert flatten_params(params) == {"include[0]": 3, "include[1]": 7, "page": 2}


def test_flatten_empty_input():
    assert flatten_params(None) == {}
    assert flatten_params({}) == {}


def test_normalize_is_independent_of_input_order():
    first = normalize_query_string(BASE, {"b": 2, "a": 1})
    second = normalize_query_string(BASE, {"a": 1, "b": 2})

    assert first == second == f"{BASE}?a=1&b=2"


def test_normalize_without_params_returns_url_unchanged():
    assert normalize_query_string(BASE, {}) == BASE
    assert normalize_query_string(BASE, None) == BASE


def test_normalize_keeps_brackets_literal_in_keys():
    url = normalize_query_string(BASE, {"filter": {"status": "draft"}})

    assert url == f"{BASE}?filter[status]=draft"
    assert "%5B" not in url and "%5D" not in url


def test_normalize_merges_existing_query_with_params_winning():
    url = normalize_query_string(f"{BASE}?page=1&order=asc", {"page": 3})

    assert url == f"{BASE}?order=asc&page=3"


def test_normalize_re_sorts_existing_query_string():
    assert normalize_query_string(f"{BASE}?z=1&a=2", None) == f"{BASE}?a=2&z=1"


def test_normalize_percent_encodes_values_like_encode_uri_component():
    url = normalize_query_string(BASE, {"search": "blue shirt/xl", "note": "it's (new)!"})

    assert url == f"{BASE}?note=it's%20(new)!&search=blue%20shirt%2Fxl"


def test_normalize_encodes_reserved_characters_in_keys_except_brackets():
    url = normalize_query_string(BASE, {"a&b": {"c d": "x"}})

    assert url == f"{BASE}?a%26b[c%20d]=x"


def test_normalize_renders_booleans_lowercase():
    assert normalize_query_string(BASE, {"featured": True}) == f"{BASE}?featured=true"


def test_canonical_pairs_are_sorted_by_raw_key():
    pairs = canonical_pairs(f"{BASE}?per_page=5", {"after": "2024-01-01", "Zeta": 1})

    assert [key for key, _ in pairs] == ["Zeta", "after", "per_page"]


def test_join_api_url_inserts_single_slash():
    expected = "http://shop.test/wp-json/wc/v3/orders"

    assert join_api_url("http://shop.test", "wp-json", "wc/v3", "orders") == expected
    assert join_api_url("http://shop.test/", "wp-json", "wc/v3", "orders") == expected


def test_splice_port_after_hostname():
    assert splice_port(BASE, 8080) == "http://shop.test:8080/wp-json/wc/v3/products"
    assert splice_port(BASE, None) == BASE
    assert splice_port("http://shop.test:81/x?a=1", "8443") == "http://shop.test:8443/x?a=1"


def test_normalize_renders_integral_floats_without_fraction():
    url = normalize_query_string(BASE, {"min_price": 5.0, "max_price": 9.75})

    assert url == f"{BASE}?max_price=9.75&min_price=5"
