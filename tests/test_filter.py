# tests/test_filter.py
import pytest


@pytest.fixture
def catalog(make_category, make_product):
    elektronik = make_category("Elektronik", 5, description="Electronic products")
    kitap = make_category("Kitap", 3, description="Books and magazines")
    make_product(elektronik["id"], title="Laptop", stock=20, published=True, description="Work laptop")
    make_product(elektronik["id"], title="Phone", stock=5, description="Smart phone")
    make_product(kitap["id"], title="Novel", stock=3, published=True, description="100% fiction")
    make_product(kitap["id"], title="Atlas", stock=8, description="World maps")
    return {"elektronik": elektronik, "kitap": kitap}


def _titles(client, query=""):
    r = client.get(f"/api/products/filter{query}")
    assert r.status_code == 200, r.get_json()
    return [p["title"] for p in r.get_json()["data"]["data"]]


def test_no_criteria_returns_everything_sorted(client, catalog):
    assert _titles(client) == ["Atlas", "Laptop", "Novel", "Phone"]


def test_keyword_matches_title_description_and_category(client, catalog):
    assert _titles(client, "?searchKeyword=LAP") == ["Laptop"]
    assert _titles(client, "?searchKeyword=maps") == ["Atlas"]
    assert _titles(client, "?searchKeyword=kitap") == ["Atlas", "Novel"]


def test_blank_keyword_is_ignored(client, catalog):
    assert _titles(client, "?searchKeyword=%20%20") == ["Atlas", "Laptop", "Novel", "Phone"]


def test_keyword_wildcards_are_literal(client, catalog):
    # "%" must not act as a wildcard
    assert _titles(client, "?searchKeyword=100%25") == ["Novel"]
    assert _titles(client, "?searchKeyword=%25") == ["Novel"]
    assert _titles(client, "?searchKeyword=_") == []


def test_stock_range_is_inclusive(client, catalog):
    assert _titles(client, "?minStock=5&maxStock=8") == ["Atlas", "Phone"]
    assert _titles(client, "?minStock=20") == ["Laptop"]
    assert _titles(client, "?maxStock=3") == ["Novel"]


def test_category_and_published_filters(client, catalog):
    kitap_id = catalog["kitap"]["id"]
    assert _titles(client, f"?categoryId={kitap_id}") == ["Atlas", "Novel"]
    assert _titles(client, "?isPublished=true") == ["Laptop", "Novel"]
    assert _titles(client, "?isPublished=false") == ["Atlas", "Phone"]


def test_criteria_are_combined(client, catalog):
    elektronik_id = catalog["elektronik"]["id"]
    assert _titles(client, f"?categoryId={elektronik_id}&isPublished=false&minStock=1") == ["Phone"]
    assert _titles(client, f"?categoryId={elektronik_id}&searchKeyword=novel") == []


def test_filter_is_paginated(client, catalog):
    r = client.get("/api/products/filter?page=2&pageSize=3")
    page = r.get_json()["data"]
    assert [p["title"] for p in page["data"]] == ["Phone"]
    assert page["totalCount"] == 4
    assert page["totalPages"] == 2
    assert page["hasPrevious"] is True


def test_min_greater_than_max_is_invalid_argument(client, catalog):
    r = client.get("/api/products/filter?minStock=10&maxStock=2")
    assert r.status_code == 400
    body = r.get_json()
    assert body["message"] == "Invalid argument"
    assert body["errors"] == ["Minimum stock cannot be greater than maximum stock"]


def test_malformed_filter_value_is_invalid_argument(client, catalog):
    r = client.get("/api/products/filter?minStock=lots")
    assert r.status_code == 400
    assert r.get_json()["message"] == "Invalid argument"
